"""
DelegationRecord value object and decoder.

Record layout (96 bytes):
    0..8    discriminator (opaque program tag)
    8..40   validator identity (32-byte public key)
    40..96  metadata (opaque)
"""

from dataclasses import dataclass
from typing import Optional

from solders.pubkey import Pubkey  # type: ignore

from mandataire.domain.constants import (
    DELEGATION_RECORD_DATA_SIZE,
    DISCRIMINATOR_OFFSET,
    DISCRIMINATOR_SIZE,
    IDENTITY_OFFSET,
    IDENTITY_SIZE,
    METADATA_OFFSET,
)
from mandataire.domain.value_objects.account_key import account_key_from_bytes


@dataclass(frozen=True)
class DelegationRecord:
    """
    Decoded delegation record.

    The discriminator is not checked against a known value: any record
    of the right size is accepted.
    """

    discriminator: bytes
    validator_identity: Pubkey
    metadata: bytes

    @property
    def identity_bytes(self) -> bytes:
        return bytes(self.validator_identity)


def decode_delegation_record(data: bytes) -> Optional[DelegationRecord]:
    """
    Decode raw account data into a DelegationRecord.

    Args:
        data: Raw account data

    Returns:
        DelegationRecord, or None if data is not exactly 96 bytes
    """
    if len(data) != DELEGATION_RECORD_DATA_SIZE:
        return None

    data = bytes(data)
    discriminator = data[
        DISCRIMINATOR_OFFSET : DISCRIMINATOR_OFFSET + DISCRIMINATOR_SIZE
    ]
    identity = data[IDENTITY_OFFSET : IDENTITY_OFFSET + IDENTITY_SIZE]

    return DelegationRecord(
        discriminator=discriminator,
        validator_identity=account_key_from_bytes(identity),
        metadata=data[METADATA_OFFSET:],
    )
