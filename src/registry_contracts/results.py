"""
Outcomes of state-changing registry calls.

Every write either succeeds or is rejected for one of a fixed set of reasons.
Rejections come back as values rather than exceptions so call sites have to
look at them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from registry_contracts.constants import Constants as c
from registry_contracts.exceptions import ContractExecutionError


class ErrorKind(Enum):
    """Reasons a registry call is rejected, valued by their revert prefix"""
    NOT_OWNER = "NotOwner"
    USER_ALREADY_REGISTERED = "UserAlreadyRegistered"
    USER_NOT_REGISTERED = "UserNotRegistered"
    NEW_NUMBER_MUST_DIFFER_FROM_OLD_NUMBER = "NewNumberMustDifferFromOldNumber"


@dataclass(frozen=True)
class Success:
    tx_hash: str
    events: List[dict] = field(default_factory=list)
    result: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    tx_hash: str
    error: ErrorKind
    message: str = ""

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success, Failure]


def error_kind_from_message(message: str) -> Optional[ErrorKind]:
    prefix = message.split(":", 1)[0].strip()
    try:
        return ErrorKind(prefix)
    except ValueError:
        return None


def outcome_from_tx_result(tx_result: dict) -> Outcome:
    if tx_result['status'] == c.OkCode:
        return Success(
            tx_hash=tx_result['hash'],
            events=tx_result['events'],
            result=tx_result['result']
        )

    message = tx_result['result']
    error = error_kind_from_message(message)

    if error is None:
        raise ContractExecutionError(message)

    return Failure(tx_hash=tx_result['hash'], error=error, message=message)
