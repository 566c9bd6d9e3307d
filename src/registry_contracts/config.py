"""
Registry Configuration Management

Settings for a local registry deployment: where state lives, which chain id
transactions carry, the value newly registered users start with and how
verbose logging is.
"""

import os
import toml

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

from registry_contracts.constants import Constants
from registry_contracts.exceptions import ConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RegistryConfig:
    """Main registry configuration"""

    storage_home: Path = field(default_factory=lambda: Constants.STORAGE_HOME)
    chain_id: str = Constants.CHAIN_ID
    default_value: int = Constants.DEFAULT_VALUE
    log_level: str = Constants.LOG_LEVEL
    log_dir: Optional[Path] = Constants.LOG_DIR

    def __post_init__(self):
        self.storage_home = Path(self.storage_home)
        if self.log_dir is not None:
            self.log_dir = Path(self.log_dir)
        self._validate_config()

    def _validate_config(self):
        # bool is an int subclass but makes no sense as a stored number
        if type(self.default_value) != int:
            raise ConfigError(f"default_value must be an integer, got {self.default_value!r}")

        if not isinstance(self.chain_id, str) or not self.chain_id:
            raise ConfigError("chain_id must be a non-empty string")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> 'RegistryConfig':
        """Create configuration from environment variables"""
        return cls().apply_env()

    def apply_env(self) -> 'RegistryConfig':
        """Override settings with any REGISTRY_* environment variables that are set"""
        if storage_home := os.getenv('REGISTRY_STORAGE_HOME'):
            self.storage_home = Path(storage_home)

        if chain_id := os.getenv('REGISTRY_CHAIN_ID'):
            self.chain_id = chain_id

        if default_value := os.getenv('REGISTRY_DEFAULT_VALUE'):
            try:
                self.default_value = int(default_value)
            except ValueError:
                raise ConfigError(f"REGISTRY_DEFAULT_VALUE must be an integer, got {default_value!r}")

        if log_level := os.getenv('REGISTRY_LOG_LEVEL'):
            self.log_level = log_level

        if log_dir := os.getenv('REGISTRY_LOG_DIR'):
            self.log_dir = Path(log_dir)

        self._validate_config()
        return self

    @classmethod
    def from_file(cls, config_path: Path) -> 'RegistryConfig':
        """Load configuration from a TOML file"""
        try:
            config_data = toml.load(config_path)
        except toml.TomlDecodeError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}")

        unknown = set(config_data) - {f for f in cls.__dataclass_fields__}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        return cls(**config_data)

    def to_file(self, config_path: Path):
        """Save configuration to a TOML file"""
        config_dict = asdict(self)

        config_dict['storage_home'] = str(self.storage_home)
        if self.log_dir is None:
            config_dict.pop('log_dir')
        else:
            config_dict['log_dir'] = str(self.log_dir)

        Path(config_path).parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w') as f:
            f.write(toml.dumps(config_dict))


def load_config(config_path: Path = None) -> RegistryConfig:
    config_path = Path(config_path) if config_path is not None else Constants.REGISTRY_CONFIG

    if not config_path.exists():
        config = RegistryConfig()
    else:
        config = RegistryConfig.from_file(config_path)

    # Environment wins over the file
    return config.apply_env()
