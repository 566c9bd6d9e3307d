import math
import hashlib

from loguru import logger
from datetime import datetime, timezone
from registry_contracts.constants import Constants as c
from registry_contracts.utils.tx import tx_hash_from_tx, format_dictionary, check_tx_formatting
from contracting.execution.executor import Executor
from contracting.storage.encoder import convert_dict, safe_repr
from contracting.stdlib.bridge.time import Datetime


class TxProcessor:
    def __init__(self, client, metering=False):
        self.client = client
        self.executor = Executor(driver=self.client.raw_driver, metering=metering)

    def process_tx(self, tx):
        check_tx_formatting(tx)

        environment = self.get_environment(tx=tx)

        output = self.execute_tx(transaction=tx, environment=environment)

        tx_result = self.process_tx_output(output=output, transaction=tx)

        return self.prune_tx_result(tx_result)

    def execute_tx(self, transaction, environment: dict = {}):
        payload = transaction['payload']
        logger.debug(f"Executing {payload['contract']}.{payload['function']} for {payload['sender']}")

        return self.executor.execute(
            sender=payload['sender'],
            contract_name=payload['contract'],
            function_name=payload['function'],
            stamps=payload['stamps_supplied'],
            stamp_cost=c.STAMP_COST,
            kwargs=convert_dict(payload['kwargs']),
            environment=environment,
            auto_commit=False,
            metering=False
        )

    def process_tx_output(self, output, transaction):
        logger.debug(f"status code = {output['status_code']}")

        if output['status_code'] > c.OkCode:
            logger.error(
                f'TX executed unsuccessfully. '
                f'{len(output["writes"])} writes discarded. '
                f'Result = {output["result"]}'
            )

        tx_hash = tx_hash_from_tx(transaction)

        writes = self.determine_writes_from_output(
            status_code=output['status_code'],
            output_writes=output['writes']
        )

        for write in writes:
            self.client.raw_driver.set(key=write['key'], value=write['value'])

        succeeded = output['status_code'] == c.OkCode

        tx_output = {
            'hash': tx_hash,
            'transaction': transaction,
            'status': output['status_code'],
            'state': writes,
            # A reverted call leaves no trace, events included
            'events': output['events'] if succeeded else [],
            'stamps_used': output['stamps_used'],
            'result': safe_repr(output['result']) if succeeded else str(output['result'])
        }

        return format_dictionary(tx_output)

    def determine_writes_from_output(self, status_code, output_writes):
        # Only apply the writes if the tx passes
        if status_code != c.OkCode:
            return []

        writes = [{'key': k, 'value': v} for k, v in output_writes.items()]
        writes.sort(key=lambda x: x['key'])

        return writes

    def get_environment(self, tx):
        block_meta = tx["b_meta"]
        nanos = block_meta["nanos"]
        signature = tx['metadata']['signature']

        return {
            'block_hash': block_meta["hash"],
            'block_num': block_meta["height"],
            '__input_hash': self.get_timestamp_hash_from_tx(nanos, signature),
            'now': self.get_now_from_nanos(nanos=nanos),
            'AUXILIARY_SALT': signature,
            'chain_id': block_meta["chain_id"],
        }

    def get_timestamp_hash_from_tx(self, nanos, signature):
        h = hashlib.sha3_256()
        h.update('{}'.format(str(nanos)+signature).encode())
        return h.hexdigest()

    def get_now_from_nanos(self, nanos):
        return Datetime._from_datetime(
            datetime.fromtimestamp(math.ceil(nanos / 1e9), tz=timezone.utc).replace(tzinfo=None)
        )

    def prune_tx_result(self, tx_result: dict):
        # remove compiled code in the case of a contract submission
        tx_result["state"] = [entry for entry in tx_result["state"] if not is_compiled_key(entry["key"])]
        # remove original sent transaction
        tx_result.pop("transaction")
        return tx_result


def is_compiled_key(key):
    parts = key.split(".")
    return len(parts) > 1 and parts[1] == "__compiled__"
