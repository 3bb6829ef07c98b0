"""
Domain value objects.
"""

from mandataire.domain.value_objects.account_key import (
    account_key_from_bytes,
    parse_account_key,
)
from mandataire.domain.value_objects.delegation_record import (
    DelegationRecord,
    decode_delegation_record,
)

__all__ = [
    "parse_account_key",
    "account_key_from_bytes",
    "DelegationRecord",
    "decode_delegation_record",
]
