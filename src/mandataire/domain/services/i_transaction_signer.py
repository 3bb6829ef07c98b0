"""
Transaction signer interface.

The signer holds the key material (wallet, hardware device, agent);
callers only ever see the signed transaction.
"""

from abc import ABC, abstractmethod

from solders.pubkey import Pubkey  # type: ignore
from solders.transaction import Transaction  # type: ignore


class ITransactionSigner(ABC):
    """Capability to sign a transaction as fee payer."""

    @abstractmethod
    def pubkey(self) -> Pubkey:
        """Public key of the signing account."""

    @abstractmethod
    async def sign_transaction(self, transaction: Transaction) -> Transaction:
        """
        Sign unsigned transaction.

        Args:
            transaction: Unsigned transaction with blockhash set

        Returns:
            Signed transaction

        Raises:
            Exception: Any error means the signer declined
        """
