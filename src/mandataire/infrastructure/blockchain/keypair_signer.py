"""
Keypair-backed transaction signer.

Signs with a local Solana CLI keypair file (JSON array of 64 bytes).
"""

import json
from pathlib import Path

from solders.keypair import Keypair  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.transaction import Transaction  # type: ignore

from mandataire.domain.services.i_transaction_signer import ITransactionSigner


def load_keypair(keypair_path: str) -> Keypair:
    """
    Load Solana keypair from JSON file.

    Args:
        keypair_path: Path to keypair JSON file

    Returns:
        Solana Keypair object

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If file is not a valid keypair

    Examples:
        >>> keypair = load_keypair("~/.config/solana/id.json")
        >>> print(keypair.pubkey())
    """
    path = Path(keypair_path).expanduser()

    if not path.exists():
        raise FileNotFoundError(f"Keypair not found: {keypair_path}")

    with open(path, "r") as f:
        secret_key = json.load(f)

    return Keypair.from_bytes(bytes(secret_key))


class KeypairTransactionSigner(ITransactionSigner):
    """Sign transactions with an in-process keypair."""

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @classmethod
    def from_file(cls, keypair_path: str) -> "KeypairTransactionSigner":
        return cls(load_keypair(keypair_path))

    def pubkey(self) -> Pubkey:
        return self._keypair.pubkey()

    async def sign_transaction(self, transaction: Transaction) -> Transaction:
        transaction.sign([self._keypair], transaction.message.recent_blockhash)
        return transaction
