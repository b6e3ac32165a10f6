"""Centralised application settings abstraction.

This module exposes :class:`ApplicationSettings` which consolidates all
configuration lookups instead of ad-hoc ``os.environ`` access throughout the
codebase.  The process environment (or any mapping provided) is the backing
store; when a Flask application context is active its ``config`` takes
precedence.

The global :data:`settings` instance should be used for production code, while
tests can instantiate their own :class:`ApplicationSettings` with a dedicated
mapping to validate behaviour in isolation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, TYPE_CHECKING, cast

from flask import current_app, has_app_context

DEFAULT_DATABASE_URI = "sqlite:///users.db"
DEFAULT_MAIL_PROVIDER = "smtp"
DEFAULT_MAIL_SERVER = "smtp.mailtrap.io"
DEFAULT_MAIL_PORT = 2525
DEFAULT_LOG_LEVEL = "INFO"


if TYPE_CHECKING:  # pragma: no cover
    from flask import Flask


@dataclass(frozen=True)
class _EnvironmentFacade:
    """Thin wrapper that provides ``Mapping`` compatible access to env vars."""

    source: Mapping[str, str]

    @classmethod
    def from_environ(cls, env: Optional[Mapping[str, str]] = None) -> "_EnvironmentFacade":
        return cls(source=os.environ if env is None else env)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.source.get(key, default)


class ApplicationSettings:
    """Domain level representation of configuration values.

    Explicit properties are preferred over generic ``get`` access so that the
    rest of the application operates on intent-revealing names and default
    values live in a single location.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = _EnvironmentFacade.from_environ(env)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------
    def _get(self, key: str, default: Optional[str] = None):
        if has_app_context():
            app = cast("Flask", current_app)
            if key in app.config:
                return app.config.get(key)

        value = self._env.get(key)
        if value is not None:
            return value
        return default

    def get(self, key: str, default=None):
        """Return the configured value for *key* or *default* if missing."""

        value = self._get(key)
        return default if value is None else value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean configuration value."""

        value = self._get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised in {"1", "true", "yes", "on"}:
                return True
            if normalised in {"0", "false", "no", "off"}:
                return False
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Return an integer configuration value."""

        value = self._get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    # ------------------------------------------------------------------
    # Database
    # ------------------------------------------------------------------
    @property
    def database_uri(self) -> str:
        return str(self.get("DATABASE_URI", DEFAULT_DATABASE_URI))

    # ------------------------------------------------------------------
    # Mail
    # ------------------------------------------------------------------
    @property
    def mail_provider(self) -> str:
        return str(self.get("MAIL_PROVIDER", DEFAULT_MAIL_PROVIDER)).lower().strip()

    @property
    def mail_server(self) -> str:
        return str(self.get("MAIL_SERVER", DEFAULT_MAIL_SERVER))

    @property
    def mail_port(self) -> int:
        return self.get_int("MAIL_PORT", DEFAULT_MAIL_PORT)

    @property
    def mail_username(self) -> Optional[str]:
        value = self.get("MAIL_USERNAME")
        return str(value) if value else None

    @property
    def mail_password(self) -> Optional[str]:
        value = self.get("MAIL_PASSWORD")
        return str(value) if value else None

    @property
    def mail_use_tls(self) -> bool:
        return self.get_bool("MAIL_USE_TLS", False)

    @property
    def mail_backend(self) -> str:
        return str(self.get("MAIL_BACKEND", "smtp"))

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    @property
    def log_level(self) -> str:
        return str(self.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()


settings = ApplicationSettings()
