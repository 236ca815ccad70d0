# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Administrator, AdminSession


class AdminRepository(Protocol):
    def find_by_username(self, username: str) -> Administrator | None: ...
    def find_by_id(self, admin_id: str) -> Administrator | None: ...
    def exists(self, *, username: str, email: str) -> bool: ...
    def add(self, admin: Administrator) -> Administrator: ...


class AdminSessionRepository(Protocol):
    def add(self, session: AdminSession) -> AdminSession: ...
    def get(self, session_id: str) -> AdminSession | None: ...
    def update_expiry(self, session_id: str, expires_at: datetime) -> None: ...
    def delete(self, session_id: str) -> bool: ...
    def delete_for_admin(self, admin_id: str) -> int: ...
    def delete_expired(self, now: datetime) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class LoginThrottle(Protocol):
    def increment(self, key: str) -> int: ...
    def reset(self, key: str) -> None: ...
