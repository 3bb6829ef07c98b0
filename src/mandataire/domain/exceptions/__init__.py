"""
Domain exceptions.
"""

from mandataire.domain.exceptions.base import MandataireException
from mandataire.domain.exceptions.delegation_exceptions import (
    DerivationError,
    InvalidAccountKeyError,
    RPCError,
)
from mandataire.domain.exceptions.transaction_exceptions import (
    ConfirmationTimeoutError,
    PingTransactionError,
    SigningRejectedError,
    TransactionFailedError,
)

__all__ = [
    "MandataireException",
    # Delegation
    "InvalidAccountKeyError",
    "DerivationError",
    "RPCError",
    # Ping
    "PingTransactionError",
    "SigningRejectedError",
    "ConfirmationTimeoutError",
    "TransactionFailedError",
]
