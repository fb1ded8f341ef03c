"""Process configuration read once from the environment at startup."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_API_BASE = "https://waitlister.me/api/v1"


class ConfigError(Exception):
    """A required setting is missing or malformed."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Credentials and connection settings for the Waitlister API."""

    api_key: str
    waitlist_key: str
    api_base: str = DEFAULT_API_BASE
    timeout: float | None = None  # seconds; None leaves httpx's default

    def __repr__(self) -> str:
        # Keep the API key out of logs and tracebacks.
        return (
            f"Settings(api_key='***', waitlist_key={self.waitlist_key!r}, "
            f"api_base={self.api_base!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``WAITLISTER_*`` environment variables.

        Raises:
            ConfigError: if the API key or waitlist key is missing, or the
                timeout, when given, is not a positive number.
        """
        env = os.environ if environ is None else environ

        api_key = env.get("WAITLISTER_API_KEY", "")
        if not api_key:
            raise ConfigError("WAITLISTER_API_KEY environment variable is required.")

        waitlist_key = env.get("WAITLISTER_WAITLIST_KEY", "")
        if not waitlist_key:
            raise ConfigError("WAITLISTER_WAITLIST_KEY environment variable is required.")

        timeout = None
        raw_timeout = env.get("WAITLISTER_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(
                    f"WAITLISTER_TIMEOUT must be a number, got {raw_timeout!r}."
                ) from None
            if timeout <= 0:
                raise ConfigError(f"WAITLISTER_TIMEOUT must be positive, got {raw_timeout!r}.")

        return cls(
            api_key=api_key,
            waitlist_key=waitlist_key,
            api_base=(env.get("WAITLISTER_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
            timeout=timeout,
        )
