"""
Ping transaction exceptions.

Every failure on the ping path is a PingTransactionError carrying the
underlying cause.
"""

from typing import Optional

from mandataire.domain.exceptions.base import MandataireException


class PingTransactionError(MandataireException):
    """Ping transaction failed."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        details: Optional[dict] = None,
    ):
        """
        Initialize ping transaction error.

        Args:
            message: Error message
            cause: Underlying exception
            details: Extra context
        """
        details = dict(details or {})
        if cause is not None:
            details.setdefault("cause", str(cause))
        super().__init__(f"Failed to send ping transaction: {message}", details)
        self.cause = cause


class SigningRejectedError(PingTransactionError):
    """Signer declined or failed to sign the transaction."""


class ConfirmationTimeoutError(PingTransactionError):
    """Transaction was not confirmed before its block height expired."""


class TransactionFailedError(PingTransactionError):
    """Transaction landed but the ledger reported an execution error."""
