# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from storefront.domain.admins.entities import Administrator, AuthenticatedAdmin
from storefront.domain.admins.exceptions import AdminAlreadyExistsError
from storefront.domain.admins.repositories import AdminRepository, PasswordHasher
from storefront.shared.clock import Clock, utcnow
from storefront.shared.errors.base import ValidationError
from storefront.shared.logging import logger

MIN_PASSWORD_LENGTH = 8


class ProvisionAdminUseCase:
    def __init__(
        self,
        *,
        admins: AdminRepository,
        password_hasher: PasswordHasher,
        clock: Clock = utcnow,
    ) -> None:
        self._admins = admins
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(
        self,
        *,
        username: str,
        email: str,
        password: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> AuthenticatedAdmin:
        username = username.strip()
        email = email.strip().lower()
        if not username or "@" not in email:
            raise ValidationError(context={"fields": ["username", "email"]})
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                "password_too_short", context={"min_length": MIN_PASSWORD_LENGTH}
            )
        if self._admins.exists(username=username, email=email):
            raise AdminAlreadyExistsError()

        now = self._clock()
        admin = Administrator(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=self._password_hasher.hash(password),
            first_name=first_name,
            last_name=last_name,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        persisted = self._admins.add(admin)
        logger.info(f"admins.provision: created admin_id={persisted.id} username={username}")
        return persisted.sanitized()
