# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    validate_by_name=True,
    extra="ignore",
)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///storefront.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SECTION_CONFIG


class SecurityConfig(BaseSettings):
    # None means "secure in production only"
    cookie_secure: bool | None = Field(None, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        ["http://localhost:5173", "http://localhost:4173"], alias="ALLOWED_ORIGINS"
    )

    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cookie_secure", mode="before")
    @classmethod
    def _parse_optional_bool(cls, value: str | bool | None) -> bool | None:
        if value is None or value == "":
            return None
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


class AuthConfig(BaseSettings):
    session_cookie_name: str = Field("admin-session", alias="SESSION_COOKIE_NAME")
    session_duration_days: int = Field(30, ge=1, alias="SESSION_DURATION_DAYS")
    session_renew_within_days: int = Field(15, ge=0, alias="SESSION_RENEW_WITHIN_DAYS")
    max_login_attempts: int = Field(5, ge=1, alias="LOGIN_MAX_ATTEMPTS")
    lockout_seconds: float = Field(15 * 60, ge=1.0, alias="LOGIN_LOCKOUT_SECONDS")

    admin_prefix: str = Field("/admin", alias="ADMIN_PREFIX")
    login_path: str = Field("/admin/login", alias="ADMIN_LOGIN_PATH")
    landing_path: str = Field("/admin/dashboard", alias="ADMIN_LANDING_PATH")

    model_config = _SECTION_CONFIG

    @property
    def session_duration(self) -> timedelta:
        return timedelta(days=self.session_duration_days)

    @property
    def renew_within(self) -> timedelta:
        return timedelta(days=self.session_renew_within_days)

    @model_validator(mode="after")
    def _check_paths(self) -> "AuthConfig":
        if not self.login_path.startswith(self.admin_prefix):
            raise ValueError("ADMIN_LOGIN_PATH must live under ADMIN_PREFIX")
        if self.session_renew_within_days >= self.session_duration_days:
            raise ValueError(
                "SESSION_RENEW_WITHIN_DAYS must be shorter than SESSION_DURATION_DAYS"
            )
        return self


class BootstrapAdminConfig(BaseSettings):
    username: str | None = Field(None, alias="ADMIN_USERNAME")
    email: str | None = Field(None, alias="ADMIN_EMAIL")
    password: str | None = Field(None, alias="ADMIN_PASSWORD")

    model_config = _SECTION_CONFIG

    def is_complete(self) -> bool:
        return bool(self.username and self.email and self.password)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _bootstrap_config_factory() -> BootstrapAdminConfig:
    return BootstrapAdminConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    bootstrap_admin: BootstrapAdminConfig = Field(default_factory=_bootstrap_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in ("dev", "development", "test", ""):
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure SECRET_KEY detected in production!\n"
                "   SECRET_KEY must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if self.security.cookie_secure is False:
            warnings.append("⚠️  Cookie Secure flag is explicitly DISABLED (use HTTPS!)")
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def session_cookie_secure(self) -> bool:
        if self.security.cookie_secure is None:
            return self.is_production()
        return self.security.cookie_secure


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = [
    "AppConfig",
    "AuthConfig",
    "BootstrapAdminConfig",
    "DatabaseConfig",
    "SecurityConfig",
    "load_config",
]
