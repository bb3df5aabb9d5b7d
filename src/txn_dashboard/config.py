"""
Settings for the transaction dashboard, read from the environment.

A `.env` file in the working directory is loaded first (python-dotenv), so
local runs only need:

    SUPABASE_URL=https://<project>.supabase.co
    SUPABASE_ANON_KEY=<anon key>

The NEXT_PUBLIC_* names used by the old web front end are accepted too.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

from txn_dashboard.errors import ConfigurationError

# Load environment variables from .env (root of project)
load_dotenv()

DEFAULT_TABLE = "transactions"
DEFAULT_TIMEOUT = 30.0


def _clean_env(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    cleaned = value.strip().strip("'\"")
    return cleaned or None


def _env(*names: str) -> Optional[str]:
    for name in names:
        value = _clean_env(os.getenv(name))
        if value:
            return value
    return None


def _timeout(value: Optional[str]) -> float:
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    table: str = DEFAULT_TABLE
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        url = _env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
        return cls(
            supabase_url=url.rstrip("/") if url else None,
            supabase_key=_env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
            table=_env("SUPABASE_TABLE") or DEFAULT_TABLE,
            timeout=_timeout(_env("SUPABASE_TIMEOUT")),
            log_level=(_env("TXN_DASHBOARD_LOG_LEVEL") or "INFO").upper(),
        )

    def require(self) -> "Settings":
        """Fail with a readable message when the data store isn't configured."""
        if not self.supabase_url:
            raise ConfigurationError("SUPABASE_URL (or NEXT_PUBLIC_SUPABASE_URL) is not set")
        if not self.supabase_key:
            raise ConfigurationError("SUPABASE_ANON_KEY (or NEXT_PUBLIC_SUPABASE_ANON_KEY) is not set")
        return self
