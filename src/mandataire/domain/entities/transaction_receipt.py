"""
TransactionReceipt entity - confirmed ping transaction.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransactionReceipt:
    """Signature of a confirmed transaction and the blockhash it was bound to."""

    signature: str
    blockhash: str
    last_valid_block_height: int

    def __str__(self) -> str:
        return self.signature
