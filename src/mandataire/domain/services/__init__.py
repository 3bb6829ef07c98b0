"""
Domain services and interfaces.
"""

from mandataire.domain.services.i_ledger_client import (
    ILedgerClient,
    LatestBlockhash,
    LedgerAccount,
)
from mandataire.domain.services.i_transaction_signer import ITransactionSigner
from mandataire.domain.services.pda_derivation import (
    DELEGATION_PROGRAM,
    derive_delegation_pda,
    find_delegation_pda,
)

__all__ = [
    "ILedgerClient",
    "LedgerAccount",
    "LatestBlockhash",
    "ITransactionSigner",
    "DELEGATION_PROGRAM",
    "find_delegation_pda",
    "derive_delegation_pda",
]
