"""
Dependency Injection Container for Mandataire.

Builds ledger clients and use cases from one configuration object.
"""

import logging
from typing import Optional

from mandataire.application.use_cases import (
    CheckDelegation,
    CheckMultipleDelegations,
    SendPingTransaction,
)
from mandataire.config.settings import MandataireConfig, get_settings
from mandataire.domain.services.i_ledger_client import ILedgerClient
from mandataire.infrastructure.blockchain import SolanaLedgerClient
from mandataire.reporter import SystemReporter


class Container:
    """
    Service factory.

    Ledger clients are created per call so that each call owns its
    own connection.
    """

    def __init__(self, settings: Optional[MandataireConfig] = None):
        self.settings = settings or get_settings()
        self._reporter: Optional[SystemReporter] = None

    @property
    def reporter(self) -> SystemReporter:
        if self._reporter is None:
            self._reporter = SystemReporter(
                name="mandataire",
                log_dir=self.settings.log_dir,
                level=getattr(logging, self.settings.log_level.upper()),
                verbose=self.settings.verbose,
            )
        return self._reporter

    def ledger_client(self, rpc_url: Optional[str] = None) -> ILedgerClient:
        """Create ledger client for rpc_url (default: configured endpoint)."""
        url = rpc_url or self.settings.rpc_url
        self.reporter.info(f"Using RPC URL: {url}", context="Container")
        return SolanaLedgerClient(
            rpc_url=url,
            commitment=self.settings.commitment,
            timeout=self.settings.rpc_timeout,
            confirmation_timeout=self.settings.confirmation_timeout,
            poll_interval=self.settings.confirmation_poll_interval,
        )

    def check_delegation(self, ledger_client: ILedgerClient) -> CheckDelegation:
        return CheckDelegation(
            ledger_client=ledger_client,
            program_id=self.settings.program_pubkey,
            reporter=self.reporter,
        )

    def check_multiple_delegations(
        self, ledger_client: ILedgerClient
    ) -> CheckMultipleDelegations:
        return CheckMultipleDelegations(
            check_delegation=self.check_delegation(ledger_client),
            reporter=self.reporter,
        )

    def send_ping_transaction(
        self, ledger_client: ILedgerClient
    ) -> SendPingTransaction:
        return SendPingTransaction(
            ledger_client=ledger_client,
            reporter=self.reporter,
        )
