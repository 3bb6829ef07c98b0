"""
Entry points for delegation checks and ping transactions.

Each function opens its own RPC connection and closes it before
returning.
"""

from typing import Iterable, List, Optional

from mandataire.config.settings import MandataireConfig
from mandataire.di.container import Container
from mandataire.domain.entities import DelegationResult, TransactionReceipt
from mandataire.domain.services.i_transaction_signer import ITransactionSigner
from mandataire.domain.value_objects import parse_account_key


async def check_delegation(
    account_pubkey: str,
    rpc_url: Optional[str] = None,
    settings: Optional[MandataireConfig] = None,
) -> DelegationResult:
    """
    Check whether an account is delegated.

    Args:
        account_pubkey: Account public key (base58)
        rpc_url: RPC endpoint (default: configured endpoint)
        settings: Configuration (default: get_settings())

    Returns:
        DelegationResult

    Raises:
        InvalidAccountKeyError: If account_pubkey is invalid
        RPCError: If the ledger read fails
    """
    container = Container(settings)
    # Validate before opening a connection
    parse_account_key(account_pubkey)

    async with container.ledger_client(rpc_url) as client:
        return await container.check_delegation(client).execute(account_pubkey)


async def check_multiple_delegations(
    account_pubkeys: Iterable[str],
    rpc_url: Optional[str] = None,
    settings: Optional[MandataireConfig] = None,
) -> List[DelegationResult]:
    """
    Check many accounts sequentially.

    Failed accounts yield NOT_DELEGATED placeholders with an empty PDA.

    Args:
        account_pubkeys: Account public keys (base58)
        rpc_url: RPC endpoint (default: configured endpoint)
        settings: Configuration (default: get_settings())

    Returns:
        One DelegationResult per input, in input order
    """
    accounts = list(account_pubkeys)
    container = Container(settings)

    async with container.ledger_client(rpc_url) as client:
        return await container.check_multiple_delegations(client).execute(accounts)


async def send_ping(
    to_pubkey: str,
    signer: ITransactionSigner,
    rpc_url: Optional[str] = None,
    settings: Optional[MandataireConfig] = None,
) -> TransactionReceipt:
    """
    Send zero-lamport ping transaction from the signer to an account.

    Args:
        to_pubkey: Target account public key (base58)
        signer: Signing capability (fee payer)
        rpc_url: RPC endpoint (default: configured endpoint)
        settings: Configuration (default: get_settings())

    Returns:
        TransactionReceipt of the confirmed transaction

    Raises:
        InvalidAccountKeyError: If to_pubkey is invalid
        PingTransactionError: If signing, submission or confirmation fails
    """
    target = parse_account_key(to_pubkey)
    container = Container(settings)

    async with container.ledger_client(rpc_url) as client:
        return await container.send_ping_transaction(client).execute(
            signer.pubkey(), target, signer
        )
