"""
Send Ping Transaction use case.

Sends a zero-lamport transfer to an account as a liveness check. The
transaction is signed by an injected signer; no key material passes
through here.
"""

from typing import Optional

from solders.hash import Hash  # type: ignore
from solders.message import Message  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.system_program import TransferParams, transfer  # type: ignore
from solders.transaction import Transaction  # type: ignore

from mandataire.domain.entities import TransactionReceipt
from mandataire.domain.exceptions import (
    PingTransactionError,
    RPCError,
    SigningRejectedError,
)
from mandataire.domain.services.i_ledger_client import ILedgerClient
from mandataire.domain.services.i_transaction_signer import ITransactionSigner
from mandataire.reporter import SystemReporter


def build_ping_transaction(
    from_pubkey: Pubkey, to_pubkey: Pubkey, blockhash: str
) -> Transaction:
    """
    Build unsigned zero-lamport transfer with from_pubkey as fee payer.

    Args:
        from_pubkey: Fee payer and transfer source
        to_pubkey: Account being pinged
        blockhash: Recent blockhash (base58)

    Returns:
        Unsigned transaction
    """
    instruction = transfer(
        TransferParams(from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=0)
    )
    message = Message.new_with_blockhash(
        [instruction], from_pubkey, Hash.from_string(blockhash)
    )
    return Transaction.new_unsigned(message)


class SendPingTransaction:
    """
    Send ping transaction and wait for confirmation.

    Business rules:
    - Signer is invoked exactly once
    - Nothing is submitted if signing fails
    - Confirmation is bound to the blockhash / last valid height used
    - Failures are never retried with a new blockhash
    """

    def __init__(
        self,
        ledger_client: ILedgerClient,
        reporter: Optional[SystemReporter] = None,
    ):
        self.ledger_client = ledger_client
        self.reporter = reporter or SystemReporter(
            name="mandataire.send_ping_transaction"
        )

    async def execute(
        self,
        from_pubkey: Pubkey,
        to_pubkey: Pubkey,
        signer: ITransactionSigner,
    ) -> TransactionReceipt:
        """
        Execute ping.

        Args:
            from_pubkey: Fee payer (must be the signer's account)
            to_pubkey: Account being pinged
            signer: Signing capability

        Returns:
            TransactionReceipt of the confirmed transaction

        Raises:
            SigningRejectedError: If the signer declines or fails
            ConfirmationTimeoutError: If the block height bound passes
            TransactionFailedError: If the transaction fails on-chain
            PingTransactionError: On any network failure
        """
        self.reporter.info(
            f"Sending ping from {from_pubkey} to {to_pubkey}",
            context="SendPingTransaction",
        )

        try:
            latest = await self.ledger_client.get_latest_blockhash()
        except RPCError as e:
            raise PingTransactionError(e.message, cause=e) from e

        unsigned = build_ping_transaction(from_pubkey, to_pubkey, latest.blockhash)

        try:
            signed = await signer.sign_transaction(unsigned)
        except Exception as e:
            self.reporter.warning(
                f"Signer rejected ping transaction: {e}",
                context="SendPingTransaction",
            )
            raise SigningRejectedError(
                f"signing rejected: {e}", cause=e
            ) from e

        try:
            signature = await self.ledger_client.send_raw_transaction(bytes(signed))
        except RPCError as e:
            raise PingTransactionError(e.message, cause=e) from e

        self.reporter.info(
            f"Ping submitted: {signature}",
            context="SendPingTransaction",
            verbose_level=2,
        )

        try:
            await self.ledger_client.confirm_transaction(
                signature, latest.blockhash, latest.last_valid_block_height
            )
        except RPCError as e:
            raise PingTransactionError(e.message, cause=e) from e

        self.reporter.info(
            f"Ping confirmed: {signature}",
            context="SendPingTransaction",
        )

        return TransactionReceipt(
            signature=signature,
            blockhash=latest.blockhash,
            last_valid_block_height=latest.last_valid_block_height,
        )
