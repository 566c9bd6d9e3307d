owner = Variable()
values = Hash(default_value=0)

ValueSetEvent = LogEvent(
    event="ValueSet",
    params={
        "user": {"type": str, "idx": True},
        "value": {"type": int},
    },
)


@construct
def seed():
    owner.set(ctx.caller)


@export
def set_value(value: int):
    # Every caller owns exactly one slot, keyed by its own address
    values[ctx.caller] = value

    ValueSetEvent({"user": ctx.caller, "value": value})


@export
def value_of(address: str):
    return values[address]


@export
def get_owner():
    return owner.get()
