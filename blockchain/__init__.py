"""
Blockchain Interaction Package
Handles account queries, transaction building, and signing on NEAR
"""

from .near_client import NearClient
from .transaction_builder import TransactionBuilder, DeployContract, FunctionCall
from .outcome import TransactionOutcome, Success, Failure, outcome_from_status

__all__ = [
    'NearClient',
    'TransactionBuilder',
    'DeployContract',
    'FunctionCall',
    'TransactionOutcome',
    'Success',
    'Failure',
    'outcome_from_status'
]
