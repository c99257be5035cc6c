"""
Transaction Outcome
Tagged result of a broadcast transaction
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """Final status carried a SuccessValue (base64, possibly empty)"""
    value: str


@dataclass(frozen=True)
class Failure:
    """Anything else; raw holds the status as returned by the node"""
    raw: Any


Status = Union[Success, Failure]


@dataclass(frozen=True)
class TransactionOutcome:
    transaction_hash: str
    status: Status
    raw: Any = None

    @property
    def succeeded(self) -> bool:
        return isinstance(self.status, Success)


def outcome_from_status(status: Any) -> Status:
    """
    Classify a final execution status

    Args:
        status: Status object from the RPC, e.g. {"SuccessValue": ""} or {"Failure": {...}}

    Returns:
        Success or Failure
    """
    if isinstance(status, dict) and status.get('SuccessValue') is not None:
        return Success(value=status['SuccessValue'])
    return Failure(raw=status)
