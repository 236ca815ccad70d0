# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    Administrator,
    AdminSession,
    AuthenticatedAdmin,
    LoginResult,
    ResolvedSession,
)

__all__ = [
    "AdminSession",
    "Administrator",
    "AuthenticatedAdmin",
    "LoginResult",
    "ResolvedSession",
]
