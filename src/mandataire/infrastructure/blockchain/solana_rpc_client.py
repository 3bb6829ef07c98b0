"""
Solana RPC client.

Implements ILedgerClient on top of solana-py's AsyncClient. Every call
is a single attempt: failures surface as RPCError and are never retried.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solana.rpc.core import RPCException
from solana.rpc.models import TxOpts
from solders.errors import SerdeJSONError  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.signature import Signature  # type: ignore
from solders.transaction_status import TransactionConfirmationStatus  # type: ignore

from mandataire.domain.constants import DEFAULT_RPC_URL
from mandataire.domain.exceptions import (
    ConfirmationTimeoutError,
    RPCError,
    TransactionFailedError,
)
from mandataire.domain.services.i_ledger_client import (
    ILedgerClient,
    LatestBlockhash,
    LedgerAccount,
)

T = TypeVar("T")

RPC_ERRORS = (
    SolanaRpcException,
    RPCException,
    httpx.HTTPError,
    asyncio.TimeoutError,
    # Unparseable reply body
    SerdeJSONError,
    ValueError,
)

CONFIRMED_STATUSES = (
    TransactionConfirmationStatus.Confirmed,
    TransactionConfirmationStatus.Finalized,
)


class SolanaLedgerClient(ILedgerClient):
    """
    Solana RPC client bound to one endpoint.

    Owns its HTTP connection; close it (or use ``async with``) when done.
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        commitment: str = "confirmed",
        timeout: float = 10.0,
        confirmation_timeout: float = 60.0,
        poll_interval: float = 0.5,
        client: Optional[AsyncClient] = None,
    ):
        """
        Initialize Solana ledger client.

        Args:
            rpc_url: RPC endpoint (default: devnet)
            commitment: Commitment for reads and confirmation
            timeout: Per-request timeout in seconds
            confirmation_timeout: Upper bound on confirmation wait
            poll_interval: Delay between signature status polls
            client: Preconfigured AsyncClient (tests)
        """
        self.rpc_url = rpc_url or DEFAULT_RPC_URL
        self.commitment = Commitment(commitment)
        self.confirmation_timeout = confirmation_timeout
        self.poll_interval = poll_interval
        self.client = client or AsyncClient(
            self.rpc_url, commitment=self.commitment, timeout=timeout
        )

    async def _rpc(self, method: str, awaitable: Awaitable[T]) -> T:
        """Await RPC call, mapping library errors to RPCError."""
        try:
            return await awaitable
        except RPC_ERRORS as e:
            raise RPCError(
                f"RPC {method} failed: {e}",
                details={"method": method, "rpc_url": self.rpc_url},
            ) from e

    async def get_account_info(self, address: Pubkey) -> Optional[LedgerAccount]:
        response = await self._rpc(
            "getAccountInfo",
            self.client.get_account_info(address, commitment=self.commitment),
        )

        account = response.value
        if account is None:
            return None

        return LedgerAccount(
            lamports=account.lamports,
            owner=account.owner,
            data=bytes(account.data),
            executable=account.executable,
            rent_epoch=account.rent_epoch or 0,
        )

    async def get_latest_blockhash(self) -> LatestBlockhash:
        response = await self._rpc(
            "getLatestBlockhash",
            self.client.get_latest_blockhash(commitment=self.commitment),
        )

        return LatestBlockhash(
            blockhash=str(response.value.blockhash),
            last_valid_block_height=response.value.last_valid_block_height,
        )

    async def send_raw_transaction(self, transaction: bytes) -> str:
        response = await self._rpc(
            "sendTransaction",
            self.client.send_raw_transaction(
                transaction,
                opts=TxOpts(preflight_commitment=self.commitment),
            ),
        )
        return str(response.value)

    async def confirm_transaction(
        self,
        signature: str,
        blockhash: str,
        last_valid_block_height: int,
    ) -> None:
        """
        Poll signature status until confirmed.

        Stops with ConfirmationTimeoutError once the confirmed block height
        passes last_valid_block_height (the transaction can no longer land)
        or confirmation_timeout elapses.
        """
        details = {
            "signature": signature,
            "blockhash": blockhash,
            "last_valid_block_height": last_valid_block_height,
        }

        try:
            tx_sig = Signature.from_string(signature)
        except ValueError as e:
            raise RPCError(
                f"Invalid transaction signature returned: {signature}",
                details={**details, "rpc_url": self.rpc_url},
            ) from e

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.confirmation_timeout

        while True:
            response = await self._rpc(
                "getSignatureStatuses",
                self.client.get_signature_statuses([tx_sig]),
            )
            status = response.value[0] if response.value else None

            if status is not None:
                if status.err is not None:
                    raise TransactionFailedError(
                        f"transaction {signature} failed: {status.err}",
                        details=details,
                    )
                if status.confirmation_status in CONFIRMED_STATUSES:
                    return

            height = await self._rpc(
                "getBlockHeight",
                self.client.get_block_height(commitment=self.commitment),
            )
            if height.value > last_valid_block_height:
                raise ConfirmationTimeoutError(
                    f"block height exceeded for {signature} "
                    f"(current {height.value} > {last_valid_block_height})",
                    details=details,
                )

            if loop.time() >= deadline:
                raise ConfirmationTimeoutError(
                    f"confirmation of {signature} timed out after "
                    f"{self.confirmation_timeout}s",
                    details=details,
                )

            await asyncio.sleep(self.poll_interval)

    async def close(self) -> None:
        await self.client.close()
