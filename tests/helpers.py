"""
Shared test data builders.
"""

from solders.pubkey import Pubkey  # type: ignore

from mandataire.domain.services.i_ledger_client import LedgerAccount

# Known devnet address (no funds)
TEST_ACCOUNT = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
DELEGATION_PROGRAM_STR = "DELeGGvXpWV2fqJUhqcF5ZSYMS4JTLjteaAMARRSaeSh"


def make_record(identity: Pubkey, discriminator: bytes = bytes(range(8))) -> bytes:
    """Build 96-byte delegation record with given identity."""
    return discriminator + bytes(identity) + bytes(range(56))


def make_account(
    data: bytes,
    lamports: int = 1_461_600,
    owner: str = DELEGATION_PROGRAM_STR,
) -> LedgerAccount:
    """Build ledger account owned by the delegation program."""
    return LedgerAccount(
        lamports=lamports,
        owner=Pubkey.from_string(owner),
        data=data,
        executable=False,
        rent_epoch=18_446_744_073_709_551_615,
    )
