# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///cms/db.sqlite", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", validate_by_name=True, extra="ignore"
    )


class SecurityConfig(BaseSettings):
    # Cookie security
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")
    cookie_name: str = Field("cms_session", alias="COOKIE_NAME")

    # CORS
    cors_origin: str = Field("https://wrong.athrvakhrbde.com", alias="CORS_ORIGIN")

    # Client address resolution
    trust_proxy: bool = Field(False, alias="TRUST_PROXY")

    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    general_limit: int = Field(100, ge=1, alias="RL_GENERAL_LIMIT")
    general_window: float = Field(15 * 60, ge=1.0, alias="RL_GENERAL_WINDOW")
    auth_limit: int = Field(5, ge=1, alias="RL_AUTH_LIMIT")
    auth_window: float = Field(60 * 60, ge=1.0, alias="RL_AUTH_WINDOW")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", validate_by_name=True, extra="ignore"
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]

    @field_validator(
        "cookie_secure", "trust_proxy", "enable_rate_limit", "enable_hsts", mode="before"
    )
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str | None = Field(None, alias="SESSION_SECRET")
    admin_username: str = Field("admin", alias="ADMIN_USERNAME")
    admin_password: str | None = Field(None, alias="ADMIN_PASSWORD")
    content_dir: Path = Field(Path("content/posts"), alias="CONTENT_DIR")
    content_ext: str = Field("md", alias="CONTENT_EXT")
    public_dir: Path = Field(Path("cms/public"), alias="PUBLIC_DIR")
    session_ttl: int = Field(24 * 60 * 60, ge=1, alias="SESSION_TTL_SECONDS")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    port: int = Field(3000, alias="PORT")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("content_ext", mode="after")
    @classmethod
    def _strip_ext_dot(cls, value: str) -> str:
        return value.lstrip(".") or "md"

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _require_secrets(self) -> "AppConfig":
        missing = [
            name
            for name, value in (
                ("SESSION_SECRET", self.secret_key),
                ("ADMIN_PASSWORD", self.admin_password),
            )
            if not value
        ]
        if missing:
            for name in missing:
                print(f"Error: {name} environment variable is required", file=sys.stderr)
            sys.exit(1)

        if self.is_production() and self.secret_key in ("dev", "development", "test"):
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure SESSION_SECRET detected in production!\n"
                "   SESSION_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def secure_cookies(self) -> bool:
        return self.security.cookie_secure or self.is_production()


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
