"""
Delegation lookup exceptions.
"""

from mandataire.domain.exceptions.base import MandataireException


class InvalidAccountKeyError(MandataireException):
    """Account key is not a base58 string of exactly 32 bytes."""

    def __init__(self, value: str, reason: str = "invalid public key"):
        super().__init__(
            f"Invalid account public key '{value}': {reason}",
            details={"value": value, "reason": reason},
        )
        self.value = value


class DerivationError(MandataireException):
    """No valid off-curve program address could be derived."""


class RPCError(MandataireException):
    """RPC transport or server error."""
