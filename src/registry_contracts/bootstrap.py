from loguru import logger
from pathlib import Path

from registry_contracts.config import load_config, RegistryConfig
from registry_contracts.logs import setup_logging
from registry_contracts.registry import AccessControlledRegistry
from registry_contracts.storage import RegistryStore


def open_store(config_path: Path = None, config: RegistryConfig = None) -> RegistryStore:
    config = config if config is not None else load_config(config_path)
    setup_logging(level=config.log_level, log_dir=config.log_dir)

    store = RegistryStore.from_config(config)
    logger.info(f"Opened registry store at {store.storage_home} on chain {store.chain_id}")
    return store


def open_registry(store: RegistryStore, deployer: str, config: RegistryConfig = None,
                  name: str = None) -> AccessControlledRegistry:
    """
    Return the registry deployed under `name`, deploying it from `deployer`
    with the configured default value if it does not exist yet. The owner
    of an existing deployment is left untouched.
    """
    config = config if config is not None else RegistryConfig()
    name = name if name is not None else AccessControlledRegistry.CONTRACT

    if store.is_deployed(name):
        registry = AccessControlledRegistry.attach(store, name=name)
        if registry.default_value() != config.default_value:
            logger.warning(
                f"{name} was deployed with default value {registry.default_value()}, "
                f"ignoring configured default value {config.default_value}"
            )
        return registry

    registry = AccessControlledRegistry.deploy(
        store,
        deployer=deployer,
        name=name,
        default_value=config.default_value
    )
    store.commit()
    return registry
