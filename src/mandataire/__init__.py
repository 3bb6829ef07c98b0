"""
Mandataire - MagicBlock delegation checker.

Resolves whether a Solana account is delegated to an ephemeral rollup
validator, and sends ping transactions to delegated accounts.
"""

from mandataire.api import check_delegation, check_multiple_delegations, send_ping
from mandataire.domain.entities import (
    DelegationResult,
    DelegationStatus,
    TransactionReceipt,
)
from mandataire.domain.services import derive_delegation_pda
from mandataire.domain.value_objects import decode_delegation_record

__version__ = "0.1.0"

__all__ = [
    "check_delegation",
    "check_multiple_delegations",
    "send_ping",
    "derive_delegation_pda",
    "decode_delegation_record",
    "DelegationResult",
    "DelegationStatus",
    "TransactionReceipt",
]
