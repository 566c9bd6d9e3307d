from typing import Callable

from contracting.storage.encoder import encode
from registry_contracts.constants import Constants as c
from registry_contracts.exceptions import TransactionFormattingError
from registry_contracts.formatting import (
    contract_name_is_formatted,
    TRANSACTION_PAYLOAD_RULES,
    TRANSACTION_METADATA_RULES,
)
import hashlib


def build_transaction(sender: str, contract: str, function: str, kwargs: dict = None,
                      chain_id: str = c.CHAIN_ID, stamps_supplied: int = c.STAMPS_SUPPLIED):
    payload = {
        "chain_id": chain_id,
        "contract": contract,
        "function": function,
        "kwargs": kwargs if kwargs is not None else {},
        "sender": sender,
        "stamps_supplied": stamps_supplied,
    }

    # Nothing is signed locally, the payload digest stands in for the signature
    # so every transaction still gets a distinct auxiliary salt
    h = hashlib.sha3_256()
    h.update(encode(format_dictionary(dict(payload))).encode())

    return {
        "metadata": {"signature": h.hexdigest()},
        "payload": payload,
    }


def tx_hash_from_tx(tx):
    h = hashlib.sha3_256()
    tx_dict = format_dictionary(tx)
    encoded_tx = encode(tx_dict).encode()
    h.update(encoded_tx)
    return h.hexdigest()


def recurse_rules(d: dict, rule: dict | Callable):
    if callable(rule):
        return rule(d)

    for key, subrule in rule.items():
        arg = d[key]

        if type(arg) == dict:
            if not recurse_rules(arg, subrule):
                return False

        elif type(arg) == list:
            for a in arg:
                if not recurse_rules(a, subrule):
                    return False

        elif callable(subrule):
            if not subrule(arg):
                return False

    return True


def check_format(d: dict, rule: dict):
    expected_keys = set(rule.keys())

    if not dict_has_keys(d, expected_keys):
        raise TransactionFormattingError("Transaction has unexpected or missing keys")
    if not recurse_rules(d, rule):
        raise TransactionFormattingError("Transaction has wrongly formatted dictionary")


def check_tx_keys(tx):
    metadata = tx.get("metadata")

    if not metadata:
        raise TransactionFormattingError("Metadata is missing")

    payload = tx.get("payload")

    if not payload:
        raise TransactionFormattingError("Payload is missing")
    for key in ("sender", "contract", "function", "stamps_supplied"):
        if not payload.get(key):
            raise TransactionFormattingError(f"Payload key '{key}' is missing")


def check_contract_name(contract, function, name):
    if (
            contract == c.SUBMISSION_CONTRACT
            and function == c.SUBMISSION_FUNCTION
            and not contract_name_is_formatted(name)
    ):
        raise TransactionFormattingError('Transaction contract name is invalid')


def check_tx_formatting(tx: dict):
    check_tx_keys(tx)
    check_format(tx["metadata"], TRANSACTION_METADATA_RULES)
    check_format(tx["payload"], TRANSACTION_PAYLOAD_RULES)

    payload = tx["payload"]
    check_contract_name(payload["contract"], payload["function"], payload["kwargs"].get("name"))


def dict_has_keys(d: dict, keys: set):
    key_set = set(d.keys())
    return len(keys ^ key_set) == 0


def format_dictionary(d: dict) -> dict:
    for k, v in d.items():
        assert type(k) == str, 'Non-string key types not allowed.'
        if type(v) == list:
            for i in range(len(v)):
                if isinstance(v[i], dict):
                    v[i] = format_dictionary(v[i])
        elif isinstance(v, dict):
            d[k] = format_dictionary(v)
    return {k: v for k, v in sorted(d.items())}
