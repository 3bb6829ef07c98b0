"""
Mandataire configuration with YAML + ENV support.

Priority: Environment variables > YAML config > Pydantic defaults
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from solders.pubkey import Pubkey  # type: ignore

from mandataire.domain.constants import DEFAULT_RPC_URL, DELEGATION_PROGRAM_ID

ENV_PREFIX = "MANDATAIRE_"
CONFIG_ENV_VAR = "MANDATAIRE_CONFIG"


class MandataireConfig(BaseSettings):
    """
    Mandataire configuration schema.

    Immutable once loaded; pass it explicitly or share the instance
    from get_settings().
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Blockchain
    rpc_url: str = Field(default=DEFAULT_RPC_URL, description="Solana RPC URL")
    program_id: str = Field(
        default=DELEGATION_PROGRAM_ID,
        description="Delegation program id (base58)",
    )
    commitment: str = Field(default="confirmed")

    # Timeouts (seconds)
    rpc_timeout: float = Field(default=10.0, gt=0.0, le=120.0)
    confirmation_timeout: float = Field(default=60.0, gt=0.0, le=600.0)
    confirmation_poll_interval: float = Field(default=0.5, gt=0.0, le=10.0)

    # Logging
    log_level: str = Field(default="info")
    log_dir: Optional[str] = Field(default=None)
    verbose: int = Field(default=1, ge=0, le=3)

    @field_validator("rpc_url")
    @classmethod
    def validate_rpc_url(cls, v: str) -> str:
        """Validate RPC URL scheme."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("rpc_url must start with http:// or https://")
        return v

    @field_validator("program_id")
    @classmethod
    def validate_program_id(cls, v: str) -> str:
        """Validate program id is a 32-byte base58 key."""
        try:
            Pubkey.from_string(v)
        except ValueError as e:
            raise ValueError(f"Invalid program_id: {e}")
        return v

    @field_validator("commitment")
    @classmethod
    def validate_commitment(cls, v: str) -> str:
        """Validate commitment level."""
        allowed = ["confirmed", "finalized"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid commitment. Must be one of: {allowed}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @property
    def program_pubkey(self) -> Pubkey:
        return Pubkey.from_string(self.program_id)


def load_config(config_file: Optional[str] = None) -> MandataireConfig:
    """
    Load configuration from optional YAML file and environment.

    Args:
        config_file: YAML path override (default: $MANDATAIRE_CONFIG)

    Returns:
        MandataireConfig instance

    Raises:
        FileNotFoundError: If an explicitly requested file is missing
    """
    if config_file is None:
        config_file = os.getenv(CONFIG_ENV_VAR)

    yaml_config = {}
    if config_file:
        path = Path(config_file).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        with open(path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                yaml_config = loaded

    # Init kwargs outrank env in pydantic-settings, so drop YAML keys
    # that the environment already sets.
    overrides = {
        key: value
        for key, value in yaml_config.items()
        if f"{ENV_PREFIX}{key}".upper() not in os.environ
    }

    return MandataireConfig(**overrides)


# Global settings instance
_settings: Optional[MandataireConfig] = None


def get_settings() -> MandataireConfig:
    """
    Get singleton settings instance.

    Returns:
        MandataireConfig instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings
