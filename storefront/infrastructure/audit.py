# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from typing import Any

from storefront.shared.logging import logger


class AuditAction(str, Enum):
    # Authentication
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"

    # Sessions
    SESSIONS_REVOKED = "sessions_revoked"
    SESSIONS_CLEANED = "sessions_cleaned"

    # Administrators
    ADMIN_CREATED = "admin_created"

    # Catalog
    CATEGORY_CREATED = "category_created"


_SENSITIVE_KEYS = {"password", "token", "session", "secret", "hash"}


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in details.items():
        key_lower = key.lower()

        if any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value

    return sanitized


def audit_log(
    action: AuditAction,
    admin_id: str | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    safe_details = _sanitize_details(details) if details else {}

    log_message = (
        f"AUDIT: {action.value} | "
        f"admin_id={admin_id} | "
        f"ip={ip_address} | "
        f"success={success}"
    )
    if safe_details:
        log_message += f" | details={safe_details}"

    if success:
        logger.info(log_message)
    else:
        logger.warning(log_message)


__all__ = ["AuditAction", "audit_log"]
