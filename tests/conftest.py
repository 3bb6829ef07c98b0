"""
Test fixtures and configuration.
"""

import os
from unittest.mock import AsyncMock

import pytest
from solders.keypair import Keypair  # type: ignore
from solders.pubkey import Pubkey  # type: ignore

from mandataire.config.settings import MandataireConfig
from mandataire.domain.services.i_ledger_client import ILedgerClient
from mandataire.reporter import SystemReporter


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MANDATAIRE_* environment out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("MANDATAIRE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def reporter() -> SystemReporter:
    return SystemReporter(name="mandataire-tests", verbose=0)


@pytest.fixture
def ledger_client() -> AsyncMock:
    """Mock ledger client usable as async context manager."""
    client = AsyncMock(spec=ILedgerClient)
    client.__aenter__.return_value = client
    return client


@pytest.fixture
def validator_identity() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def settings() -> MandataireConfig:
    return MandataireConfig(verbose=0)
