owner = Variable()
number = Variable()

NumberStoredEvent = LogEvent(
    event="NumberStored",
    params={
        "owner": {"type": str, "idx": True},
        "number": {"type": int},
    },
)


@construct
def seed(initial_number: int = 0):
    owner.set(ctx.caller)
    number.set(initial_number)


@export
def store(new_number: int):
    assert ctx.caller == owner.get(), "NotOwner: Only the owner can store a number."

    number.set(new_number)

    NumberStoredEvent({"owner": ctx.caller, "number": new_number})


@export
def retrieve():
    return number.get()


@export
def get_owner():
    return owner.get()
