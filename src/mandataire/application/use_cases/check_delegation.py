"""
Check Delegation use case.

Resolves whether an account is delegated by reading its delegation
record PDA from the ledger.
"""

from typing import Optional

from solders.pubkey import Pubkey  # type: ignore

from mandataire.domain.entities import (
    DelegationResult,
    DelegationStatus,
    PdaAccountInfo,
    RawDelegationData,
)
from mandataire.domain.services.i_ledger_client import ILedgerClient
from mandataire.domain.services.pda_derivation import (
    DELEGATION_PROGRAM,
    derive_delegation_pda,
)
from mandataire.domain.value_objects import (
    decode_delegation_record,
    parse_account_key,
)
from mandataire.reporter import SystemReporter


class CheckDelegation:
    """
    Check delegation status of one account.

    Business rules:
    - Account key is validated before any network call
    - Exactly one confirmed read of the delegation record PDA
    - Missing or unfunded PDA account means NOT_DELEGATED, no metadata
    - Funded PDA account always reports metadata
    - Only a 96-byte record means DELEGATED
    """

    def __init__(
        self,
        ledger_client: ILedgerClient,
        program_id: Pubkey = DELEGATION_PROGRAM,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            ledger_client: Ledger RPC access
            program_id: Delegation program id
            reporter: Logger (default: module reporter)
        """
        self.ledger_client = ledger_client
        self.program_id = program_id
        self.reporter = reporter or SystemReporter(name="mandataire.check_delegation")

    async def execute(self, account_pubkey: str) -> DelegationResult:
        """
        Execute delegation check.

        Args:
            account_pubkey: Account public key (base58)

        Returns:
            DelegationResult

        Raises:
            InvalidAccountKeyError: If account_pubkey is not a valid key
            DerivationError: If no PDA can be derived
            RPCError: If the ledger read fails
        """
        self.reporter.info(
            f"Checking delegation for account: {account_pubkey}",
            context="CheckDelegation",
        )

        account_key = parse_account_key(account_pubkey)
        delegation_pda = derive_delegation_pda(account_key, self.program_id)

        self.reporter.info(
            f"Delegation PDA: {delegation_pda}",
            context="CheckDelegation",
            verbose_level=2,
        )

        account = await self.ledger_client.get_account_info(delegation_pda)

        if account is None or account.lamports == 0:
            state = "exists but has 0 lamports" if account else "does not exist"
            self.reporter.info(
                f"No delegation found - PDA account {state}",
                context="CheckDelegation",
            )
            return DelegationResult(
                account_pubkey=account_pubkey,
                delegation_pda=str(delegation_pda),
            )

        pda_account = PdaAccountInfo(
            lamports=account.lamports,
            owner=str(account.owner),
            data_length=len(account.data),
            executable=account.executable,
            rent_epoch=account.rent_epoch,
        )

        record = decode_delegation_record(account.data)
        if record is None:
            self.reporter.warning(
                f"PDA account found but data length {len(account.data)} "
                f"is not a delegation record",
                context="CheckDelegation",
            )
            return DelegationResult(
                account_pubkey=account_pubkey,
                delegation_pda=str(delegation_pda),
                pda_account=pda_account,
            )

        validator_identity = str(record.validator_identity)
        self.reporter.info(
            f"Account is DELEGATED to validator: {validator_identity}",
            context="CheckDelegation",
        )

        return DelegationResult(
            account_pubkey=account_pubkey,
            delegation_pda=str(delegation_pda),
            status=DelegationStatus.DELEGATED,
            validator_identity=validator_identity,
            pda_account=pda_account,
            raw_data=RawDelegationData(
                discriminator=record.discriminator,
                identity_bytes=record.identity_bytes,
            ),
        )
