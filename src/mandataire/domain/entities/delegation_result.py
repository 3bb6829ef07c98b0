"""
DelegationResult entity - outcome of a delegation check.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class DelegationStatus(str, Enum):
    """Delegation states."""

    DELEGATED = "DELEGATED"
    NOT_DELEGATED = "NOT_DELEGATED"


@dataclass(frozen=True)
class PdaAccountInfo:
    """Metadata of the delegation record account."""

    lamports: int
    owner: str
    data_length: int
    executable: bool
    rent_epoch: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lamports": self.lamports,
            "owner": self.owner,
            "dataLength": self.data_length,
            "executable": self.executable,
            "rentEpoch": self.rent_epoch,
        }


@dataclass(frozen=True)
class RawDelegationData:
    """Raw fields extracted from a delegation record."""

    discriminator: bytes
    identity_bytes: bytes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "discriminator": list(self.discriminator),
            "identityBytes": list(self.identity_bytes),
        }


@dataclass(frozen=True)
class DelegationResult:
    """
    Result of checking one account.

    Business rules:
    - pda_account is set only when the record account exists with lamports
    - validator_identity and raw_data are set only when DELEGATED
    - delegation_pda is empty only for batch placeholders, which carry
      the failure message in error
    """

    account_pubkey: str
    delegation_pda: str
    status: DelegationStatus = DelegationStatus.NOT_DELEGATED
    validator_identity: Optional[str] = None
    pda_account: Optional[PdaAccountInfo] = None
    raw_data: Optional[RawDelegationData] = None
    error: Optional[str] = field(default=None, compare=False)

    @classmethod
    def placeholder(cls, account_pubkey: str, error: str) -> "DelegationResult":
        """Build NOT_DELEGATED entry for an account that could not be checked."""
        return cls(
            account_pubkey=account_pubkey,
            delegation_pda="",
            status=DelegationStatus.NOT_DELEGATED,
            error=error,
        )

    @property
    def is_delegated(self) -> bool:
        return self.status == DelegationStatus.DELEGATED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-ready dictionary (unset fields omitted)."""
        data: Dict[str, Any] = {
            "accountPubkey": self.account_pubkey,
            "delegationPDA": self.delegation_pda,
            "status": self.status.value,
        }
        if self.validator_identity is not None:
            data["validatorIdentity"] = self.validator_identity
        if self.pda_account is not None:
            data["pdaAccount"] = self.pda_account.to_dict()
        if self.raw_data is not None:
            data["rawData"] = self.raw_data.to_dict()
        if self.error is not None:
            data["error"] = self.error
        return data
