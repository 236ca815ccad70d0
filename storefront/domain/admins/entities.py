# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class AuthenticatedAdmin:
    """Administrator as seen by callers: never carries the password hash."""

    id: str
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(slots=True, frozen=True)
class Administrator:

    id: str
    username: str
    email: str
    password_hash: str
    first_name: str | None
    last_name: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def sanitized(self) -> AuthenticatedAdmin:
        return AuthenticatedAdmin(
            id=self.id,
            username=self.username,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            is_active=self.is_active,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(slots=True, frozen=True)
class AdminSession:

    id: str
    admin_id: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now


@dataclass(slots=True, frozen=True)
class LoginResult:
    admin: AuthenticatedAdmin
    session: AdminSession


@dataclass(slots=True, frozen=True)
class ResolvedSession:
    """A session that passed validation, together with its owner."""

    admin: AuthenticatedAdmin
    session: AdminSession
    renewed: bool = False
