from __future__ import annotations

from datetime import UTC, datetime, timedelta

from storefront.domain.admins.entities import Administrator, AdminSession
from storefront.domain.admins.repositories import (
    AdminRepository,
    AdminSessionRepository,
    PasswordHasher,
)


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class FakeMonotonic:
    def __init__(self) -> None:
        self.value = 1000.0

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


class InMemoryAdminRepository(AdminRepository):
    def __init__(self) -> None:
        self._by_id: dict[str, Administrator] = {}
        self.lookups = 0

    def find_by_username(self, username: str) -> Administrator | None:
        self.lookups += 1
        return next(
            (admin for admin in self._by_id.values() if admin.username == username), None
        )

    def find_by_id(self, admin_id: str) -> Administrator | None:
        return self._by_id.get(admin_id)

    def exists(self, *, username: str, email: str) -> bool:
        return any(
            admin.username == username or admin.email == email
            for admin in self._by_id.values()
        )

    def add(self, admin: Administrator) -> Administrator:
        self._by_id[admin.id] = admin
        return admin


class InMemorySessionRepository(AdminSessionRepository):
    def __init__(self) -> None:
        self.rows: dict[str, AdminSession] = {}

    def add(self, session: AdminSession) -> AdminSession:
        self.rows[session.id] = session
        return session

    def get(self, session_id: str) -> AdminSession | None:
        return self.rows.get(session_id)

    def update_expiry(self, session_id: str, expires_at: datetime) -> None:
        row = self.rows[session_id]
        self.rows[session_id] = AdminSession(
            id=row.id,
            admin_id=row.admin_id,
            expires_at=expires_at,
            created_at=row.created_at,
        )

    def delete(self, session_id: str) -> bool:
        return self.rows.pop(session_id, None) is not None

    def delete_for_admin(self, admin_id: str) -> int:
        doomed = [key for key, row in self.rows.items() if row.admin_id == admin_id]
        for key in doomed:
            del self.rows[key]
        return len(doomed)

    def delete_expired(self, now: datetime) -> int:
        doomed = [key for key, row in self.rows.items() if row.expires_at < now]
        for key in doomed:
            del self.rows[key]
        return len(doomed)


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls = 0

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


def make_admin(
    *,
    admin_id: str = "00000000-0000-0000-0000-000000000001",
    username: str = "admin",
    password: str = "correct-horse",
    is_active: bool = True,
) -> Administrator:
    now = datetime(2024, 12, 1, tzinfo=UTC)
    return Administrator(
        id=admin_id,
        username=username,
        email=f"{username}@example.com",
        password_hash=f"hashed:{password}",
        first_name="Ada",
        last_name="Admin",
        is_active=is_active,
        created_at=now,
        updated_at=now,
    )
