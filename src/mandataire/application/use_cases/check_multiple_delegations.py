"""
Check Multiple Delegations use case.

Checks accounts one after another; a failure on one account becomes a
placeholder result instead of aborting the batch.
"""

from typing import Iterable, List, Optional

from mandataire.application.use_cases.check_delegation import CheckDelegation
from mandataire.domain.entities import DelegationResult
from mandataire.domain.exceptions import MandataireException
from mandataire.reporter import SystemReporter


class CheckMultipleDelegations:
    """
    Check delegation status of many accounts.

    Business rules:
    - Results keep input order, one per input
    - Accounts are checked sequentially
    - InvalidAccountKeyError, DerivationError and RPCError for an account
      yield a NOT_DELEGATED placeholder with an empty PDA
    - Errors building the input list, or non-domain errors, abort the batch
    """

    def __init__(
        self,
        check_delegation: CheckDelegation,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            check_delegation: Single-account check
            reporter: Logger (default: the single check's reporter)
        """
        self.check_delegation = check_delegation
        self.reporter = reporter or check_delegation.reporter

    async def execute(self, account_pubkeys: Iterable[str]) -> List[DelegationResult]:
        """
        Execute batch delegation check.

        Args:
            account_pubkeys: Account public keys (base58)

        Returns:
            One DelegationResult per input, in input order
        """
        accounts = list(account_pubkeys)

        self.reporter.info(
            f"Checking delegation for {len(accounts)} accounts",
            context="CheckMultipleDelegations",
        )

        results: List[DelegationResult] = []
        for account_pubkey in accounts:
            results.append(await self._check_one(account_pubkey))

        return results

    async def _check_one(self, account_pubkey: str) -> DelegationResult:
        try:
            return await self.check_delegation.execute(account_pubkey)
        except MandataireException as e:
            self.reporter.error(
                f"Failed to check delegation for {account_pubkey}: {e.message}",
                context="CheckMultipleDelegations",
            )
            return DelegationResult.placeholder(str(account_pubkey), e.message)
