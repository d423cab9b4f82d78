"""
Service configuration loaded from the environment.

All tunables of the admissions API live in a single frozen
:class:`ServiceConfig`.  It is built once when ``admissions.settings``
is imported and the Django settings are derived from it, so the rest
of the code base never reads ``os.environ`` directly.  Values can be
supplied through real environment variables or a ``.env`` file at the
project root.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv  # type: ignore

PLACEHOLDER_SECRET = "replace-me-with-a-secure-secret-key"
TRUTHY = {"1", "true", "yes"}


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in TRUTHY


def _csv(name: str, default: str = "") -> list[str]:
    return [v.strip() for v in os.getenv(name, default).split(",") if v.strip()]


@dataclass(frozen=True)
class ServiceConfig:
    """Process-wide settings for the admissions service."""

    base_dir: Path
    env: str = "dev"
    debug: bool = False
    secret_key: str = PLACEHOLDER_SECRET
    # Signing key for bearer tokens; falls back to ``secret_key``.
    jwt_signing_key: str = ""
    token_lifetime_minutes: int = 1440
    bcrypt_rounds: int = 10
    database_url: str = ""
    db_conn_max_age: int = 120
    allowed_hosts: list[str] = field(default_factory=lambda: ["127.0.0.1", "localhost"])
    cors_allowed_origins: list[str] = field(default_factory=list)
    cors_allow_all: bool = False
    log_level: str = "INFO"
    login_rate: str = "10/min"
    port: int = 3000

    @property
    def signing_key(self) -> str:
        return self.jwt_signing_key or self.secret_key

    def validate(self) -> None:
        """Refuse unsafe combinations in production."""
        if self.env != "prod":
            return
        if self.debug:
            raise RuntimeError("DEBUG must be 0 in prod")
        if "*" in self.allowed_hosts:
            raise RuntimeError("ALLOWED_HOSTS cannot contain * in prod")
        if self.secret_key == PLACEHOLDER_SECRET:
            raise RuntimeError("SECRET_KEY must be set securely in prod")
        if self.cors_allow_all:
            raise RuntimeError("CORS_ALLOW_ALL cannot be enabled in prod")


def load_config(base_dir: Path) -> ServiceConfig:
    """Read ``.env`` (if present) and the process environment."""
    env_path = base_dir / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

    config = ServiceConfig(
        base_dir=base_dir,
        env=os.getenv("ENV", "dev"),
        debug=_flag("DEBUG"),
        secret_key=os.getenv("SECRET_KEY") or PLACEHOLDER_SECRET,
        jwt_signing_key=os.getenv("JWT_SECRET", ""),
        token_lifetime_minutes=int(os.getenv("TOKEN_LIFETIME_MINUTES", "1440")),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        db_conn_max_age=int(os.getenv("DB_CONN_MAX_AGE", "120")),
        allowed_hosts=_csv("ALLOWED_HOSTS", "127.0.0.1,localhost"),
        cors_allowed_origins=_csv("CORS_ALLOWED_ORIGINS"),
        cors_allow_all=_flag("CORS_ALLOW_ALL"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        login_rate=os.getenv("LOGIN_RATE", "10/min"),
        port=int(os.getenv("PORT", "3000")),
    )
    config.validate()
    return config
