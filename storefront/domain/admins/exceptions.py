# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from storefront.shared.errors.base import DomainError


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class AdminAlreadyExistsError(DomainError):
    code = "admin_already_exists"
    status = HTTPStatus.CONFLICT


class InvalidPasswordHashError(DomainError):
    code = "invalid_password_hash"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
