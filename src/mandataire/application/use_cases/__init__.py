"""
Application use cases.
"""

from mandataire.application.use_cases.check_delegation import CheckDelegation
from mandataire.application.use_cases.check_multiple_delegations import (
    CheckMultipleDelegations,
)
from mandataire.application.use_cases.send_ping_transaction import (
    SendPingTransaction,
    build_ping_transaction,
)

__all__ = [
    "CheckDelegation",
    "CheckMultipleDelegations",
    "SendPingTransaction",
    "build_ping_transaction",
]
