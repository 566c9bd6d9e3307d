from pathlib import Path


class Constants:
    REGISTRY_HOME = Path.home() / Path(".registry/")
    REGISTRY_CONFIG = REGISTRY_HOME / Path("config.toml")
    STORAGE_HOME = REGISTRY_HOME / Path("state/")
    LOG_DIR = None

    CONTRACTS_DIR = Path(__file__).resolve().parent / Path("contracts/")
    CONTRACT_SUFFIX = ".s.py"

    CHAIN_ID = "registry-local"
    SUBMISSION_CONTRACT = "submission"
    SUBMISSION_FUNCTION = "submit_contract"

    # Metering is off, stamps only need to satisfy the executor
    STAMPS_SUPPLIED = 100_000
    STAMP_COST = 1

    DEFAULT_VALUE = 0
    LOG_LEVEL = "INFO"
    LOG_RETENTION_DAYS = 3

    OkCode = 0
