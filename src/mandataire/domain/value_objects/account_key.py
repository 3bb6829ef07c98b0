"""
AccountKey parsing.

Account keys are 32-byte ed25519 public keys, exchanged as base58 strings.
"""

from solders.pubkey import Pubkey  # type: ignore

from mandataire.domain.exceptions import InvalidAccountKeyError

ACCOUNT_KEY_LENGTH = 32


def parse_account_key(value: str) -> Pubkey:
    """
    Parse base58 string into a Pubkey.

    Args:
        value: Base58 encoded public key (surrounding whitespace ignored)

    Returns:
        Parsed Pubkey

    Raises:
        InvalidAccountKeyError: If value is empty or not exactly 32 bytes

    Examples:
        >>> str(parse_account_key("11111111111111111111111111111111"))
        '11111111111111111111111111111111'
    """
    if not isinstance(value, str):
        raise InvalidAccountKeyError(repr(value), "expected a base58 string")

    stripped = value.strip()
    if not stripped:
        raise InvalidAccountKeyError(value, "cannot be empty")

    try:
        return Pubkey.from_string(stripped)
    except ValueError as e:
        raise InvalidAccountKeyError(stripped, str(e)) from e


def account_key_from_bytes(raw: bytes) -> Pubkey:
    """Build Pubkey from raw 32 bytes."""
    if len(raw) != ACCOUNT_KEY_LENGTH:
        raise InvalidAccountKeyError(
            raw.hex(), f"expected {ACCOUNT_KEY_LENGTH} bytes, got {len(raw)}"
        )
    return Pubkey.from_bytes(bytes(raw))
