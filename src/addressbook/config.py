"""Settings read from environment variables (load .env first in entrypoints)."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Postal codes in the sample data are 6-digit PINs; some deployments want 5-digit ZIPs.
DEFAULT_ZIP_LENGTH = 6
DEFAULT_PHONE_LENGTH = 10
DEFAULT_PHONE_REGION = "IN"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Validation constants and display options."""

    zip_length: int = DEFAULT_ZIP_LENGTH
    phone_length: int = DEFAULT_PHONE_LENGTH
    phone_region: str = DEFAULT_PHONE_REGION
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.zip_length < 1:
            raise ValueError("zip_length must be positive.")
        if self.phone_length < 1:
            raise ValueError("phone_length must be positive.")


def _int_from_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = (environ.get(key) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}.") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ADDRESSBOOK_* variables. Unset or blank values use the defaults."""
    env = os.environ if environ is None else environ
    return Settings(
        zip_length=_int_from_env(env, "ADDRESSBOOK_ZIP_LENGTH", DEFAULT_ZIP_LENGTH),
        phone_length=_int_from_env(env, "ADDRESSBOOK_PHONE_LENGTH", DEFAULT_PHONE_LENGTH),
        phone_region=(env.get("ADDRESSBOOK_PHONE_REGION") or "").strip().upper()
        or DEFAULT_PHONE_REGION,
        log_level=(env.get("ADDRESSBOOK_LOG_LEVEL") or "").strip().upper()
        or DEFAULT_LOG_LEVEL,
    )
