# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request admin session resolution and route protection."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

from flask import Flask, g, redirect, request

from storefront.application.services.admin_auth import AdminAuthService
from storefront.domain.admins.entities import AuthenticatedAdmin, ResolvedSession
from storefront.infrastructure.auth.session_cookie import (
    clear_session_cookie,
    is_well_formed,
    read_session_id,
    response_sets_cookie,
    set_session_cookie,
)
from storefront.shared.config import AuthConfig, load_config
from storefront.shared.errors.base import AuthenticationError
from storefront.shared.logging import logger


class AdminAuthenticationError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__("admin_authentication_required")


@dataclass(slots=True, frozen=True)
class AccessDecision:
    allowed: bool
    redirect_to: str | None = None


ALLOW = AccessDecision(allowed=True)


def _normalize(path: str) -> str:
    if len(path) > 1 and path.endswith("/"):
        return path.rstrip("/") or "/"
    return path


def under_prefix(path: str, prefix: str) -> bool:
    prefix = _normalize(prefix)
    return path == prefix or path.startswith(prefix + "/")


def decide_access(
    path: str,
    admin: AuthenticatedAdmin | None,
    *,
    prefix: str,
    login_path: str,
    landing_path: str,
) -> AccessDecision:
    path = _normalize(path)
    if not under_prefix(path, prefix):
        return ALLOW

    if path == _normalize(login_path):
        if admin is not None:
            return AccessDecision(allowed=False, redirect_to=landing_path)
        return ALLOW

    if admin is None:
        target = f"{login_path}?redirectTo={quote(path, safe='')}"
        return AccessDecision(allowed=False, redirect_to=target)

    return ALLOW


def current_session() -> ResolvedSession | None:
    return getattr(g, "admin_session", None)


def current_admin() -> AuthenticatedAdmin | None:
    resolved = current_session()
    return resolved.admin if resolved else None


def _resolve(auth_service: AdminAuthService, session_id: str) -> ResolvedSession | None:
    if not is_well_formed(session_id):
        logger.warning(f"gate: malformed session cookie on {request.method} {request.path}")
        return None
    try:
        return auth_service.resolve_session(session_id)
    except Exception:
        logger.exception(
            f"gate: session lookup failed on {request.method} {request.path}, "
            "treating request as anonymous"
        )
        return None


def configure_access_gate(
    app: Flask,
    auth_service: AdminAuthService,
    auth_config: AuthConfig | None = None,
) -> None:
    config = auth_config or load_config().auth

    @app.before_request
    def _gate_request():
        g.admin_session = None
        g.clear_admin_cookie = False

        session_id = read_session_id(request)
        if session_id:
            g.admin_session = _resolve(auth_service, session_id)
            g.clear_admin_cookie = g.admin_session is None

        decision = decide_access(
            request.path,
            current_admin(),
            prefix=config.admin_prefix,
            login_path=config.login_path,
            landing_path=config.landing_path,
        )
        if decision.redirect_to:
            logger.debug(f"gate: {request.path} -> {decision.redirect_to}")
            return redirect(decision.redirect_to, code=HTTPStatus.FOUND)
        return None

    @app.after_request
    def _sync_session_cookie(response):
        if response_sets_cookie(response):
            return response
        if getattr(g, "clear_admin_cookie", False):
            clear_session_cookie(response)
            return response
        resolved = current_session()
        if resolved is not None and resolved.renewed:
            set_session_cookie(response, resolved.session.id, resolved.session.expires_at)
        return response


def require_admin(func: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        admin = current_admin()
        if admin is None:
            logger.warning(f"Admin access denied: no session on {request.method} {request.path}")
            raise AdminAuthenticationError()
        g.admin_id = admin.id
        return func(*args, **kwargs)

    return wrapper


__all__ = [
    "ALLOW",
    "AccessDecision",
    "AdminAuthenticationError",
    "configure_access_gate",
    "current_admin",
    "current_session",
    "decide_access",
    "require_admin",
    "under_prefix",
]
