owner = Variable()
default_number = Variable()
registered = Hash(default_value=False)
values = Hash(default_value=0)

RegisteredEvent = LogEvent(
    event="Registered",
    params={
        "user": {"type": str, "idx": True},
        "value": {"type": int},
    },
)
ValueUpdatedEvent = LogEvent(
    event="ValueUpdated",
    params={
        "user": {"type": str, "idx": True},
        "value": {"type": int},
    },
)


@construct
def seed(default_value: int = 0):
    owner.set(ctx.caller)
    default_number.set(default_value)


@export
def register(address: str):
    assert ctx.caller == owner.get(), "NotOwner: Only the owner can register users."
    assert not registered[address], "UserAlreadyRegistered: User is already registered."

    registered[address] = True
    values[address] = default_number.get()

    RegisteredEvent({"user": address, "value": default_number.get()})


@export
def update_value(new_value: int):
    # Users can only ever touch their own entry
    assert registered[ctx.caller], "UserNotRegistered: Caller is not registered."
    assert new_value != values[ctx.caller], "NewNumberMustDifferFromOldNumber: New value must differ from the current one."

    values[ctx.caller] = new_value

    ValueUpdatedEvent({"user": ctx.caller, "value": new_value})


@export
def is_registered(address: str):
    return registered[address]


@export
def value_of(address: str):
    return values[address]


@export
def get_owner():
    return owner.get()
