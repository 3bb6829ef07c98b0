"""
Unit tests for delegation PDA derivation.

Usage:
    pytest tests/unit/domain/test_pda_derivation.py
"""

from unittest.mock import patch

import pytest
from solders.keypair import Keypair  # type: ignore
from solders.pubkey import Pubkey  # type: ignore

from mandataire.domain.exceptions import DerivationError
from mandataire.domain.services import (
    DELEGATION_PROGRAM,
    derive_delegation_pda,
    find_delegation_pda,
)
from tests.helpers import DELEGATION_PROGRAM_STR, TEST_ACCOUNT

ACCOUNT = Pubkey.from_string(TEST_ACCOUNT)


class TestDelegationProgram:
    def test_program_id(self):
        assert str(DELEGATION_PROGRAM) == DELEGATION_PROGRAM_STR


class TestDeriveDelegationPda:
    """Unit tests for derive_delegation_pda."""

    # ================================================================
    # Determinism
    # ================================================================

    def test_returns_pubkey(self):
        assert isinstance(derive_delegation_pda(ACCOUNT), Pubkey)

    def test_is_deterministic(self):
        """Test same inputs yield byte-identical output."""
        pda1 = derive_delegation_pda(ACCOUNT)
        pda2 = derive_delegation_pda(Pubkey.from_string(TEST_ACCOUNT))

        assert bytes(pda1) == bytes(pda2)

    def test_different_accounts_differ(self):
        pda1 = derive_delegation_pda(ACCOUNT)
        pda2 = derive_delegation_pda(Keypair().pubkey())

        assert pda1 != pda2

    def test_different_programs_differ(self):
        other_program = Keypair().pubkey()

        assert derive_delegation_pda(ACCOUNT) != derive_delegation_pda(
            ACCOUNT, other_program
        )

    # ================================================================
    # Off-curve guarantee
    # ================================================================

    def test_is_off_curve(self):
        assert not derive_delegation_pda(ACCOUNT).is_on_curve()

    def test_random_accounts_off_curve(self):
        for _ in range(20):
            assert not derive_delegation_pda(Keypair().pubkey()).is_on_curve()

    # ================================================================
    # Seed layout
    # ================================================================

    def test_seeds_are_delegation_and_account(self):
        """Test PDA is derived from [b"delegation", account bytes]."""
        for account in [ACCOUNT] + [Keypair().pubkey() for _ in range(10)]:
            expected = Pubkey.find_program_address(
                [b"delegation", bytes(account)], DELEGATION_PROGRAM
            )
            assert find_delegation_pda(account) == expected

    def test_bump_in_range(self):
        _, bump = find_delegation_pda(ACCOUNT)
        assert 0 <= bump <= 255


class TestDerivationFailure:
    """Unit tests for derivation failures."""

    def test_no_viable_bump(self):
        """Test library failure is wrapped in DerivationError."""
        failure = ValueError("Unable to find a viable program address bump seed")

        with patch(
            "mandataire.domain.services.pda_derivation.Pubkey"
        ) as pubkey_cls:
            pubkey_cls.find_program_address.side_effect = failure
            with pytest.raises(DerivationError) as exc_info:
                derive_delegation_pda(ACCOUNT)

        assert exc_info.value.__cause__ is failure
        assert "bump seed" in exc_info.value.message
        assert exc_info.value.details["account"] == TEST_ACCOUNT
        pubkey_cls.find_program_address.assert_called_once_with(
            [b"delegation", bytes(ACCOUNT)], DELEGATION_PROGRAM
        )
