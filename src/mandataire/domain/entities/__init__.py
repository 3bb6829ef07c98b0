"""
Domain entities.
"""

from mandataire.domain.entities.delegation_result import (
    DelegationResult,
    DelegationStatus,
    PdaAccountInfo,
    RawDelegationData,
)
from mandataire.domain.entities.transaction_receipt import TransactionReceipt

__all__ = [
    "DelegationResult",
    "DelegationStatus",
    "PdaAccountInfo",
    "RawDelegationData",
    "TransactionReceipt",
]
