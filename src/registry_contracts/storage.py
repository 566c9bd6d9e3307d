import time
import hashlib
import threading

from loguru import logger
from pathlib import Path
from contracting.client import ContractingClient
from contracting.storage.driver import Driver

from registry_contracts.constants import Constants as c
from registry_contracts.exceptions import UnknownContractSource
from registry_contracts.processor import TxProcessor
from registry_contracts.utils.tx import build_transaction


def available_contracts():
    return sorted(p.name[:-len(c.CONTRACT_SUFFIX)] for p in c.CONTRACTS_DIR.glob(f"*{c.CONTRACT_SUFFIX}"))


def load_contract_source(contract: str) -> str:
    path = c.CONTRACTS_DIR / f"{contract}{c.CONTRACT_SUFFIX}"
    if not path.is_file():
        raise UnknownContractSource(
            f"No contract source named '{contract}', available: {', '.join(available_contracts())}"
        )

    with open(path) as f:
        return f.read()


class RegistryStore:
    """
    Long-lived home of all contract state. Every contract handle holds a
    reference to one store and routes its transactions through it. A lock
    serializes execution, block meta, commits and flushes, so calls from
    several threads are applied one at a time in the order they take it.
    """

    def __init__(self, storage_home: Path = c.STORAGE_HOME, chain_id: str = c.CHAIN_ID):
        self.storage_home = Path(storage_home)
        self.chain_id = chain_id
        self.driver = Driver(storage_home=self.storage_home)
        self.client = ContractingClient(driver=self.driver)
        self.tx_processor = TxProcessor(client=self.client)
        self.height = 0
        self.last_nanos = 0
        self.lock = threading.RLock()

    @classmethod
    def from_config(cls, config) -> 'RegistryStore':
        return cls(storage_home=config.storage_home, chain_id=config.chain_id)

    def next_block_meta(self):
        with self.lock:
            # Block time never moves backwards, even if the wall clock does
            nanos = max(time.time_ns(), self.last_nanos + 1)
            self.height += 1
            self.last_nanos = nanos
            height = self.height

        h = hashlib.sha3_256()
        h.update(f"{self.chain_id}:{height}:{nanos}".encode())

        return {
            "nanos": nanos,
            "height": height,
            "chain_id": self.chain_id,
            "hash": h.hexdigest(),
        }

    def execute(self, sender: str, contract: str, function: str, kwargs: dict = None):
        tx = build_transaction(
            sender=sender,
            contract=contract,
            function=function,
            kwargs=kwargs,
            chain_id=self.chain_id
        )
        with self.lock:
            tx["b_meta"] = self.next_block_meta()
            return self.tx_processor.process_tx(tx)

    def deploy(self, contract: str, deployer: str, name: str = None, constructor_args: dict = None):
        code = load_contract_source(contract)
        name = name if name is not None else contract

        logger.info(f"Deploying {contract} as {name} from {deployer}")

        return self.execute(
            sender=deployer,
            contract=c.SUBMISSION_CONTRACT,
            function=c.SUBMISSION_FUNCTION,
            kwargs={
                "name": name,
                "code": code,
                "constructor_args": constructor_args if constructor_args is not None else {},
            }
        )

    def is_deployed(self, name: str) -> bool:
        return self.driver.get_contract(name) is not None

    def get_code(self, name: str) -> str:
        return self.driver.get_contract(name)

    def get_var(self, contract: str, variable: str, arguments: list = None):
        return self.client.get_var(contract=contract, variable=variable, arguments=arguments or [])

    def commit(self):
        with self.lock:
            self.driver.hard_apply(self.last_nanos)
        logger.info(f"Committed state up to height {self.height}")

    def flush(self):
        with self.lock:
            self.client.flush()
            self.height = 0
            self.last_nanos = 0
        logger.info(f"Flushed all state in {self.storage_home}")
