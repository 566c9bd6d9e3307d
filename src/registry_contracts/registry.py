from loguru import logger

from registry_contracts.constants import Constants as c
from registry_contracts.exceptions import (
    ContractExecutionError,
    ContractMismatch,
    ContractNotDeployed,
    TransactionFormattingError,
)
from registry_contracts.formatting import identity_is_formatted, integer_is_formatted
from registry_contracts.results import Outcome, outcome_from_tx_result
from registry_contracts.storage import RegistryStore


def check_identity(identity):
    if not identity_is_formatted(identity):
        raise TransactionFormattingError(f"Identity {identity!r} is not formatted properly")


def check_integer(value):
    if not integer_is_formatted(value):
        raise TransactionFormattingError(f"Value {value!r} must be an integer")


class ContractHandle:
    """
    Host-side view of one deployed contract.

    The caller of every write is passed explicitly and the call is executed
    as a transaction signed by that caller. Reads go straight to storage.
    """

    CONTRACT = None
    FUNCTIONS = ("get_owner",)

    def __init__(self, store: RegistryStore, name: str = None):
        self.registry_store = store
        self.name = name if name is not None else self.CONTRACT

    @classmethod
    def deploy(cls, store: RegistryStore, deployer: str, name: str = None, **constructor_args):
        check_identity(deployer)
        handle = cls(store, name=name)

        tx_result = store.deploy(
            contract=cls.CONTRACT,
            deployer=deployer,
            name=handle.name,
            constructor_args=constructor_args
        )
        if tx_result['status'] != c.OkCode:
            raise ContractExecutionError(f"Deploying {handle.name} failed: {tx_result['result']}")

        return handle

    @classmethod
    def attach(cls, store: RegistryStore, name: str = None):
        handle = cls(store, name=name)
        if not store.is_deployed(handle.name):
            raise ContractNotDeployed(f"No contract deployed as '{handle.name}'")

        code = store.get_code(handle.name)
        missing = [f for f in cls.FUNCTIONS if f"def {f}(" not in code]
        if missing:
            raise ContractMismatch(
                f"'{handle.name}' is not a {cls.CONTRACT} deployment, it lacks {', '.join(missing)}"
            )

        return handle

    def transact(self, caller: str, function: str, **kwargs) -> Outcome:
        check_identity(caller)
        tx_result = self.registry_store.execute(sender=caller, contract=self.name, function=function, kwargs=kwargs)
        outcome = outcome_from_tx_result(tx_result)

        if not outcome.ok:
            logger.info(f"{self.name}.{function} by {caller} rejected with {outcome.error.value}")

        return outcome

    def get(self, variable: str, *arguments):
        return self.registry_store.get_var(self.name, variable, list(arguments))

    def owner(self) -> str:
        return self.get("owner")


class SimpleStorage(ContractHandle):
    CONTRACT = "con_simple_storage"
    FUNCTIONS = ("get_owner", "store", "retrieve")

    def store(self, caller: str, new_number: int) -> Outcome:
        check_integer(new_number)
        return self.transact(caller, "store", new_number=new_number)

    def retrieve(self) -> int:
        return self.get("number")


class OpenRegistry(ContractHandle):
    CONTRACT = "con_registry"
    FUNCTIONS = ("get_owner", "set_value", "value_of")

    def set_value(self, caller: str, value: int) -> Outcome:
        check_integer(value)
        return self.transact(caller, "set_value", value=value)

    def value_of(self, identity: str) -> int:
        value = self.get("values", identity)
        return value if value is not None else 0


class ControlledRegistry(ContractHandle):
    CONTRACT = "con_controlled_registry"
    FUNCTIONS = ("get_owner", "register", "is_registered", "value_of")

    def register(self, caller: str, target: str) -> Outcome:
        check_identity(target)
        return self.transact(caller, "register", address=target)

    def is_registered(self, identity: str) -> bool:
        return self.get("registered", identity) is True

    def value_of(self, identity: str) -> int:
        value = self.get("values", identity)
        return value if value is not None else 0

    def read(self, identity: str):
        return self.is_registered(identity), self.value_of(identity)

    def default_value(self) -> int:
        return self.get("default_number")


class AccessControlledRegistry(ControlledRegistry):
    CONTRACT = "con_controlled_registry_with_actions"
    FUNCTIONS = ControlledRegistry.FUNCTIONS + ("update_value",)

    def update_value(self, caller: str, new_value: int) -> Outcome:
        check_integer(new_value)
        return self.transact(caller, "update_value", new_value=new_value)
