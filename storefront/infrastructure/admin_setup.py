# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import cast

from storefront.application.use_cases.admins.provision_admin import ProvisionAdminUseCase
from storefront.domain.admins.repositories import AdminRepository
from storefront.infrastructure.audit import AuditAction, audit_log
from storefront.shared.config import load_config
from storefront.shared.logging import logger


class AdminSetupError(Exception):
    pass


def setup_admin_user(
    *,
    admins: AdminRepository,
    provision: ProvisionAdminUseCase,
) -> bool:
    """Provision the bootstrap administrator from configuration, once."""
    bootstrap = load_config().bootstrap_admin

    if not bootstrap.is_complete():
        logger.info("admin_setup: no bootstrap admin configured, skipping")
        return False

    username = cast(str, bootstrap.username)
    email = cast(str, bootstrap.email)
    password = cast(str, bootstrap.password)
    if admins.exists(username=username, email=email):
        logger.info(f"admin_setup: admin '{username}' already present")
        return False

    try:
        admin = provision.execute(
            username=username,
            email=email,
            password=password,
        )
    except Exception as exc:
        logger.error(f"admin_setup: failed to provision bootstrap admin: {exc}")
        raise AdminSetupError(f"Failed to provision bootstrap admin: {exc}") from exc

    audit_log(AuditAction.ADMIN_CREATED, admin_id=admin.id, details={"source": "bootstrap"})
    return True


__all__ = ["AdminSetupError", "setup_admin_user"]
