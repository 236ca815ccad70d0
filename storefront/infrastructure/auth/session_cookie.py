# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from datetime import datetime

from flask import Request, Response

from storefront.shared.config import load_config

_SESSION_ID_RE = re.compile(r"^[A-Za-z0-9_-]{16,128}$")


def cookie_name() -> str:
    return load_config().auth.session_cookie_name


def is_well_formed(session_id: str) -> bool:
    return bool(_SESSION_ID_RE.match(session_id))


def read_session_id(req: Request) -> str | None:
    value = req.cookies.get(cookie_name())
    return value or None


def set_session_cookie(response: Response, session_id: str, expires_at: datetime) -> None:
    config = load_config()
    response.set_cookie(
        cookie_name(),
        session_id,
        path="/",
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.session_cookie_secure(),
        expires=expires_at,
    )


def clear_session_cookie(response: Response) -> None:
    config = load_config()
    response.delete_cookie(
        cookie_name(),
        path="/",
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.session_cookie_secure(),
    )


def response_sets_cookie(response: Response) -> bool:
    prefix = f"{cookie_name()}="
    return any(
        header.startswith(prefix) for header in response.headers.getlist("Set-Cookie")
    )


__all__ = [
    "clear_session_cookie",
    "cookie_name",
    "is_well_formed",
    "read_session_id",
    "response_sets_cookie",
    "set_session_cookie",
]
