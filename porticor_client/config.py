"""
Appliance Configuration
=======================
Connection settings for the key-management appliance.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import InvalidConfiguration

REQUIRED_OPTIONS = ("api_key", "api_secret", "api_url")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_ttl() -> Optional[float]:
    value = os.getenv("PORTICOR_CREDENTIAL_TTL")
    return float(value) if value else None


@dataclass
class ApplianceConfig:
    """Configuration for the appliance connection."""
    api_key: str = field(default_factory=lambda: os.getenv("PORTICOR_API_KEY", ""))
    api_secret: str = field(default_factory=lambda: os.getenv("PORTICOR_API_SECRET", ""))
    api_url: str = field(default_factory=lambda: os.getenv("PORTICOR_API_URL", ""))

    # Directory holding {name}.pem files for the file system tier
    storage_path: Optional[str] = field(
        default_factory=lambda: os.getenv("PORTICOR_STORAGE_PATH") or None
    )

    timeout: float = field(default_factory=lambda: float(os.getenv("PORTICOR_TIMEOUT", "10.0")))
    verify_ssl: bool = field(default_factory=lambda: _env_bool("PORTICOR_VERIFY_SSL", True))
    max_attempts: int = field(default_factory=lambda: int(os.getenv("PORTICOR_MAX_ATTEMPTS", "3")))

    # None keeps the credential until invalidated
    credential_ttl_seconds: Optional[float] = field(default_factory=_env_ttl)
    cache_failed_credentials: bool = field(
        default_factory=lambda: _env_bool("PORTICOR_CACHE_FAILED_CREDENTIALS", False)
    )

    @classmethod
    def from_env(cls) -> "ApplianceConfig":
        """Build a configuration from the current environment."""
        return cls()

    def validate(self) -> None:
        """
        Check that every required option is present.

        Raises:
            InvalidConfiguration: For the first missing option
        """
        for option in REQUIRED_OPTIONS:
            value = getattr(self, option)
            if not value or not str(value).strip():
                raise InvalidConfiguration(option)
