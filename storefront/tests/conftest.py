from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

_TMP_DIR = tempfile.mkdtemp(prefix="storefront-tests-")

# Must run before anything under storefront.infrastructure.db is imported.
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "test.log")
os.environ["APP_ENV"] = "test"
for _name in ("ADMIN_USERNAME", "ADMIN_EMAIL", "ADMIN_PASSWORD", "COOKIE_SECURE"):
    os.environ.pop(_name, None)

import pytest  # noqa: E402

from storefront.tests.fakes import (  # noqa: E402
    DeterministicHasher,
    FakeClock,
    FakeMonotonic,
    InMemoryAdminRepository,
    InMemorySessionRepository,
)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def monotonic() -> FakeMonotonic:
    return FakeMonotonic()


@pytest.fixture()
def admins() -> InMemoryAdminRepository:
    return InMemoryAdminRepository()


@pytest.fixture()
def sessions() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def database() -> Iterator[None]:
    from storefront.infrastructure.db import ENGINE, Base, init_db

    Base.metadata.drop_all(bind=ENGINE)
    init_db()
    yield
    Base.metadata.drop_all(bind=ENGINE)
