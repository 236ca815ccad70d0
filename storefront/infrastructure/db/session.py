# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from storefront.shared.config import load_config
from storefront.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def _engine_kwargs(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": int(_config.database.pool_timeout),
            }
        }
    return {
        "pool_size": _config.database.pool_size,
        "max_overflow": _config.database.max_overflow,
        "pool_timeout": _config.database.pool_timeout,
    }


ENGINE: Engine = create_engine(
    _config.database.url,
    echo=False,
    pool_pre_ping=True,
    **_engine_kwargs(_config.database.url),
)


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    session = SessionLocal()
    logger.debug("db.session: opened scoped session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed scoped session")
    except Exception:
        logger.exception("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()
        logger.debug("db.session: closed scoped session")


def init_db() -> None:
    # Imported for its side effect of registering the mapped tables.
    from storefront.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")
