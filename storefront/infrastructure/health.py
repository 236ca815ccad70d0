# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from storefront.infrastructure.db import ENGINE
from storefront.shared.errors.base import InfrastructureError


def check_database() -> bool:
    try:
        with ENGINE.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        raise InfrastructureError(
            "database_unavailable", status=HTTPStatus.SERVICE_UNAVAILABLE
        ) from exc
    return True


__all__ = ["check_database"]
