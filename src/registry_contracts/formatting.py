import re


def vk_is_formatted(s: str):
    try:
        int(s, 16)
        if len(s) != 64:
            return False
        return True
    except ValueError:
        return False
    except TypeError:
        return False


def identifier_is_formatted(s: str):
    try:
        iden = re.match(r'^[a-zA-Z][a-zA-Z0-9_]*$', s)
        if iden is None:
            return False
        return True
    except TypeError:
        return False


def identity_is_formatted(s: str):
    # Wallet verifying keys and plain account names like 'sys' are both valid callers
    if not isinstance(s, str) or len(s) > 64:
        return False
    return vk_is_formatted(s) or identifier_is_formatted(s)


def kwargs_are_formatted(k: dict):
    for k in k.keys():
        if not identifier_is_formatted(k):
            return False
    return True


def number_is_formatted(i: int):
    if type(i) != int:
        return False
    if i < 0:
        return False
    return True


def integer_is_formatted(i: int):
    return type(i) == int


def chain_id_is_formatted(s: str):
    return isinstance(s, str) and len(s) > 0


def hex_is_formatted(s: str):
    try:
        int(s, 16)
        return len(s) % 2 == 0
    except ValueError:
        return False
    except TypeError:
        return False


def contract_name_is_formatted(s: str):
    try:
        func = re.match(r'^con_[a-z][a-z0-9_]*$', s)
        if func is None:
            return False
        return len(s) <= 64
    except TypeError:
        return False


TRANSACTION_PAYLOAD_RULES = {
    'sender': identity_is_formatted,
    'stamps_supplied': number_is_formatted,
    'contract': identifier_is_formatted,
    'function': identifier_is_formatted,
    'kwargs': kwargs_are_formatted,
    'chain_id': chain_id_is_formatted
}

TRANSACTION_METADATA_RULES = {
    'signature': hex_is_formatted
}
