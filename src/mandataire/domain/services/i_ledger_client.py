"""
Ledger client interface.

Defines the network operations needed to read delegation records and
submit ping transactions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from solders.pubkey import Pubkey  # type: ignore


@dataclass(frozen=True)
class LedgerAccount:
    """Account state as returned by the ledger."""

    lamports: int
    owner: Pubkey
    data: bytes
    executable: bool
    rent_epoch: int


@dataclass(frozen=True)
class LatestBlockhash:
    """Recent blockhash and the last block height it is valid for."""

    blockhash: str
    last_valid_block_height: int


class ILedgerClient(ABC):
    """
    Abstract interface for Solana RPC access.

    Every read uses confirmed commitment.
    """

    @abstractmethod
    async def get_account_info(self, address: Pubkey) -> Optional[LedgerAccount]:
        """
        Fetch account state.

        Args:
            address: Account address

        Returns:
            LedgerAccount, or None if the account does not exist

        Raises:
            RPCError: On transport or RPC failure
        """

    @abstractmethod
    async def get_latest_blockhash(self) -> LatestBlockhash:
        """
        Fetch latest blockhash.

        Raises:
            RPCError: On transport or RPC failure
        """

    @abstractmethod
    async def send_raw_transaction(self, transaction: bytes) -> str:
        """
        Submit serialized signed transaction.

        Args:
            transaction: Wire-format transaction bytes

        Returns:
            Transaction signature (base58)

        Raises:
            RPCError: If submission or preflight simulation fails
        """

    @abstractmethod
    async def confirm_transaction(
        self,
        signature: str,
        blockhash: str,
        last_valid_block_height: int,
    ) -> None:
        """
        Wait until the transaction reaches confirmed commitment.

        Args:
            signature: Transaction signature
            blockhash: Blockhash used by the transaction
            last_valid_block_height: Height after which it can never land

        Raises:
            ConfirmationTimeoutError: If the height bound or timeout passes
            TransactionFailedError: If the transaction failed on-chain
            RPCError: On transport or RPC failure
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""

    async def __aenter__(self) -> "ILedgerClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
