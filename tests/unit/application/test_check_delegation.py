"""
Unit tests for CheckDelegation use case.

Tests status classification of the delegation record PDA account.

Usage:
    pytest tests/unit/application/test_check_delegation.py
"""

import logging

import pytest
from solders.pubkey import Pubkey  # type: ignore

from mandataire.application.use_cases import CheckDelegation, SendPingTransaction
from mandataire.domain.entities import DelegationResult, DelegationStatus
from mandataire.domain.exceptions import InvalidAccountKeyError, RPCError
from mandataire.domain.services import derive_delegation_pda
from mandataire.reporter import SystemReporter
from tests.helpers import (
    DELEGATION_PROGRAM_STR,
    TEST_ACCOUNT,
    make_account,
    make_record,
)

EXPECTED_PDA = derive_delegation_pda(Pubkey.from_string(TEST_ACCOUNT))


@pytest.fixture
def use_case(ledger_client, reporter) -> CheckDelegation:
    return CheckDelegation(ledger_client=ledger_client, reporter=reporter)


class TestCheckDelegation:
    """Unit tests for CheckDelegation use case."""

    # ================================================================
    # Not delegated
    # ================================================================

    @pytest.mark.asyncio
    async def test_absent_account(self, use_case, ledger_client):
        """Test missing PDA account is NOT_DELEGATED without metadata."""
        ledger_client.get_account_info.return_value = None

        result = await use_case.execute(TEST_ACCOUNT)

        assert isinstance(result, DelegationResult)
        assert result.status == DelegationStatus.NOT_DELEGATED
        assert result.account_pubkey == TEST_ACCOUNT
        assert result.delegation_pda == str(EXPECTED_PDA)
        assert result.pda_account is None
        assert result.validator_identity is None
        assert result.raw_data is None
        ledger_client.get_account_info.assert_awaited_once_with(EXPECTED_PDA)

    @pytest.mark.asyncio
    async def test_zero_lamports(self, use_case, ledger_client, validator_identity):
        """Test unfunded PDA account is NOT_DELEGATED without metadata."""
        ledger_client.get_account_info.return_value = make_account(
            make_record(validator_identity), lamports=0
        )

        result = await use_case.execute(TEST_ACCOUNT)

        assert result.status == DelegationStatus.NOT_DELEGATED
        assert result.pda_account is None
        assert result.validator_identity is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [0, 64, 95, 97, 200])
    async def test_funded_wrong_size(self, use_case, ledger_client, length):
        """Test funded account with non-record data keeps metadata."""
        ledger_client.get_account_info.return_value = make_account(bytes(length))

        result = await use_case.execute(TEST_ACCOUNT)

        assert result.status == DelegationStatus.NOT_DELEGATED
        assert result.validator_identity is None
        assert result.raw_data is None
        assert result.pda_account is not None
        assert result.pda_account.lamports == 1_461_600
        assert result.pda_account.owner == DELEGATION_PROGRAM_STR
        assert result.pda_account.data_length == length
        assert result.pda_account.executable is False
        assert result.pda_account.rent_epoch == 18_446_744_073_709_551_615

    # ================================================================
    # Delegated
    # ================================================================

    @pytest.mark.asyncio
    async def test_delegated(self, use_case, ledger_client, validator_identity):
        """Test 96-byte record yields DELEGATED with identity from bytes 8..40."""
        data = make_record(validator_identity)
        ledger_client.get_account_info.return_value = make_account(data)

        result = await use_case.execute(TEST_ACCOUNT)

        assert result.status == DelegationStatus.DELEGATED
        assert result.is_delegated
        assert result.validator_identity == str(validator_identity)
        assert result.delegation_pda == str(EXPECTED_PDA)
        assert result.pda_account.data_length == 96
        assert result.raw_data.discriminator == data[0:8]
        assert result.raw_data.identity_bytes == data[8:40]

    @pytest.mark.asyncio
    async def test_delegated_to_dict(self, use_case, ledger_client, validator_identity):
        ledger_client.get_account_info.return_value = make_account(
            make_record(validator_identity)
        )

        data = (await use_case.execute(TEST_ACCOUNT)).to_dict()

        assert data["status"] == "DELEGATED"
        assert data["validatorIdentity"] == str(validator_identity)
        assert data["rawData"]["identityBytes"] == list(bytes(validator_identity))

    @pytest.mark.asyncio
    async def test_custom_program(self, ledger_client, reporter, validator_identity):
        """Test PDA follows configured program id."""
        program = validator_identity
        use_case = CheckDelegation(ledger_client, program_id=program, reporter=reporter)
        ledger_client.get_account_info.return_value = None

        result = await use_case.execute(TEST_ACCOUNT)

        expected = derive_delegation_pda(Pubkey.from_string(TEST_ACCOUNT), program)
        assert result.delegation_pda == str(expected)

    # ================================================================
    # Errors
    # ================================================================

    @pytest.mark.asyncio
    async def test_invalid_key_no_network(self, use_case, ledger_client):
        """Test malformed key raises before any network call."""
        with pytest.raises(InvalidAccountKeyError):
            await use_case.execute("not-a-key")

        ledger_client.get_account_info.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rpc_error_propagates(self, use_case, ledger_client):
        """Test network failure surfaces without retry."""
        ledger_client.get_account_info.side_effect = RPCError("connection refused")

        with pytest.raises(RPCError):
            await use_case.execute(TEST_ACCOUNT)

        assert ledger_client.get_account_info.await_count == 1


class TestDefaultReporter:
    """Use cases built without a reporter leave the shared logger alone."""

    def test_shared_file_handler_kept(self, ledger_client, tmp_path):
        shared = SystemReporter(name="mandataire", log_dir=str(tmp_path), verbose=0)
        handlers = list(shared.logger.handlers)

        check = CheckDelegation(ledger_client=ledger_client)
        ping = SendPingTransaction(ledger_client=ledger_client)

        assert logging.getLogger("mandataire").handlers == handlers
        assert any(isinstance(h, logging.FileHandler) for h in handlers)
        assert check.reporter.logger is not shared.logger
        assert ping.reporter.logger is not shared.logger

        for handler in handlers:
            handler.close()
        shared.logger.handlers.clear()
