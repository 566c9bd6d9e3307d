from registry_contracts.results import ErrorKind, Success, Failure
from registry_contracts.storage import RegistryStore
from registry_contracts.registry import (
    SimpleStorage,
    OpenRegistry,
    ControlledRegistry,
    AccessControlledRegistry,
)
from registry_contracts.bootstrap import open_store, open_registry
