from pathlib import Path
import shutil

from fixtures.mock_constants import MockConstants


def setup_fixtures():
    # Start every test from an empty registry home
    teardown_fixtures()
    MockConstants.REGISTRY_HOME.mkdir(parents=True, exist_ok=True)


def teardown_fixtures():
    registry_tmp_ = Path(MockConstants.REGISTRY_HOME)
    if registry_tmp_.exists() and registry_tmp_.is_dir():
        shutil.rmtree(registry_tmp_)


def read_contract(name: str) -> str:
    with open(MockConstants.CONTRACTS_DIR / f"{name}{MockConstants.CONTRACT_SUFFIX}") as f:
        return f.read()
