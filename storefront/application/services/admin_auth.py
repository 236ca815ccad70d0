# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Administrator authentication: credentials, sessions and login throttling."""

from __future__ import annotations

import secrets
from datetime import timedelta

from storefront.domain.admins.entities import (
    AdminSession,
    AuthenticatedAdmin,
    LoginResult,
    ResolvedSession,
)
from storefront.domain.admins.repositories import (
    AdminRepository,
    AdminSessionRepository,
    LoginThrottle,
    PasswordHasher,
)
from storefront.shared.clock import Clock, utcnow
from storefront.shared.errors.base import ValidationError
from storefront.shared.logging import logger

SESSION_ID_BYTES = 32


def generate_session_id() -> str:
    return secrets.token_urlsafe(SESSION_ID_BYTES)


class AdminAuthService:
    def __init__(
        self,
        *,
        admins: AdminRepository,
        sessions: AdminSessionRepository,
        password_hasher: PasswordHasher,
        throttle: LoginThrottle,
        session_duration: timedelta,
        renew_within: timedelta = timedelta(0),
        max_login_attempts: int = 5,
        clock: Clock = utcnow,
    ) -> None:
        self._admins = admins
        self._sessions = sessions
        self._password_hasher = password_hasher
        self._throttle = throttle
        self._session_duration = session_duration
        self._renew_within = renew_within
        self._max_login_attempts = max_login_attempts
        self._clock = clock
        self._dummy_hash: str | None = None

    @property
    def session_duration(self) -> timedelta:
        return self._session_duration

    def hash_password(self, password: str) -> str:
        return self._password_hasher.hash(password)

    def verify_password(self, hashed: str, password: str) -> bool:
        return self._password_hasher.verify(password, hashed)

    def _burn_verification(self, password: str) -> None:
        # Every rejected lookup pays for one hash verification.
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash(secrets.token_urlsafe(16))
        self._password_hasher.verify(password, self._dummy_hash)

    def login(self, username: str, password: str) -> LoginResult | None:
        """Check credentials and open a session.

        Returns ``None`` for every authentication failure (unknown user,
        inactive account, wrong password, throttled); the reason only goes
        to the log.
        """
        if not username or not username.strip() or not password:
            raise ValidationError("credentials_required")

        attempts = self._throttle.increment(username)
        if attempts > self._max_login_attempts:
            logger.warning(
                f"auth.login: throttled username={username} attempts={attempts}"
            )
            return None

        admin = self._admins.find_by_username(username)
        if admin is None:
            self._burn_verification(password)
            logger.warning(f"auth.login: unknown username={username}")
            return None
        if not admin.is_active:
            self._burn_verification(password)
            logger.warning(f"auth.login: inactive admin_id={admin.id}")
            return None

        if not self.verify_password(admin.password_hash, password):
            logger.warning(
                f"auth.login: wrong password admin_id={admin.id} attempts={attempts}"
            )
            return None

        self._throttle.reset(username)
        session = self.create_session(admin.id)
        logger.info(f"auth.login: ok admin_id={admin.id}")
        return LoginResult(admin=admin.sanitized(), session=session)

    def create_session(self, admin_id: str) -> AdminSession:
        now = self._clock()
        session = AdminSession(
            id=generate_session_id(),
            admin_id=admin_id,
            expires_at=now + self._session_duration,
            created_at=now,
        )
        return self._sessions.add(session)

    def resolve_session(self, session_id: str) -> ResolvedSession | None:
        session = self._sessions.get(session_id)
        if session is None:
            return None

        now = self._clock()
        if session.is_expired(now):
            self._sessions.delete(session.id)
            logger.info(
                f"auth.session: purged expired session admin_id={session.admin_id} "
                f"expired_at={session.expires_at.isoformat()}"
            )
            return None

        admin = self._admins.find_by_id(session.admin_id)
        if admin is None or not admin.is_active:
            logger.warning(
                f"auth.session: owner missing or inactive admin_id={session.admin_id}"
            )
            return None

        renewed = False
        if self._renew_within and session.expires_at - now < self._renew_within:
            expires_at = now + self._session_duration
            self._sessions.update_expiry(session.id, expires_at)
            session = AdminSession(
                id=session.id,
                admin_id=session.admin_id,
                expires_at=expires_at,
                created_at=session.created_at,
            )
            renewed = True
            logger.debug(
                f"auth.session: renewed admin_id={admin.id} until={expires_at.isoformat()}"
            )

        return ResolvedSession(admin=admin.sanitized(), session=session, renewed=renewed)

    def validate_session(self, session_id: str) -> AuthenticatedAdmin | None:
        resolved = self.resolve_session(session_id)
        return resolved.admin if resolved else None

    def delete_session(self, session_id: str) -> bool:
        return self._sessions.delete(session_id)

    def logout(self, session_id: str) -> bool:
        return self.delete_session(session_id)

    def delete_all_sessions(self, admin_id: str) -> int:
        removed = self._sessions.delete_for_admin(admin_id)
        logger.info(f"auth.session: revoked {removed} sessions admin_id={admin_id}")
        return removed

    def cleanup_expired_sessions(self) -> int:
        removed = self._sessions.delete_expired(self._clock())
        logger.info(f"auth.session: cleaned up {removed} expired sessions")
        return removed


__all__ = ["AdminAuthService", "generate_session_id"]
