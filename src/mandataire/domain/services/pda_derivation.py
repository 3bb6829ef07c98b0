"""
Delegation record PDA derivation.

Seeds: [b"delegation", account_key_bytes], owned by the delegation program.
"""

from typing import Tuple

from solders.pubkey import Pubkey  # type: ignore

from mandataire.domain.constants import DELEGATION_PROGRAM_ID, DELEGATION_SEED
from mandataire.domain.exceptions import DerivationError

DELEGATION_PROGRAM = Pubkey.from_string(DELEGATION_PROGRAM_ID)


def find_delegation_pda(
    account_key: Pubkey, program_id: Pubkey = DELEGATION_PROGRAM
) -> Tuple[Pubkey, int]:
    """
    Derive delegation record PDA and its bump for an account.

    Args:
        account_key: Account that may be delegated
        program_id: Delegation program

    Returns:
        Tuple of (pda, bump_seed)

    Raises:
        DerivationError: If no off-curve address can be derived
    """
    try:
        seeds = [DELEGATION_SEED, bytes(account_key)]
        return Pubkey.find_program_address(seeds, program_id)

    except Exception as e:
        raise DerivationError(
            f"Failed to derive delegation PDA: {e}",
            details={
                "account": str(account_key),
                "program_id": str(program_id),
            },
        ) from e


def derive_delegation_pda(
    account_key: Pubkey, program_id: Pubkey = DELEGATION_PROGRAM
) -> Pubkey:
    """
    Derive delegation record PDA for an account.

    Args:
        account_key: Account that may be delegated
        program_id: Delegation program (default: MagicBlock delegation program)

    Returns:
        Delegation record address
    """
    pda, _ = find_delegation_pda(account_key, program_id)
    return pda
