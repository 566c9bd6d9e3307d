import pytest
import os

from utils import setup_fixtures as _setup, teardown_fixtures as _teardown


@pytest.fixture(scope="function", autouse=True)
def setup_fixtures():
    # Set the working directory to the directory containing this file
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    _setup()

    yield

    # Cleanup after tests
    _teardown()
