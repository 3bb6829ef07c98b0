"""
Blockchain adapters.
"""

from mandataire.infrastructure.blockchain.keypair_signer import (
    KeypairTransactionSigner,
    load_keypair,
)
from mandataire.infrastructure.blockchain.solana_rpc_client import (
    SolanaLedgerClient,
)

__all__ = ["SolanaLedgerClient", "KeypairTransactionSigner", "load_keypair"]
