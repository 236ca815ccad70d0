# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from storefront.domain.admins.entities import Administrator
from storefront.domain.admins.entities import AdminSession as DomainAdminSession
from storefront.domain.admins.exceptions import AdminAlreadyExistsError
from storefront.domain.admins.repositories import AdminRepository, AdminSessionRepository
from storefront.infrastructure.db.models import Admin, AdminSessionRow
from storefront.infrastructure.db.session import session_scope
from storefront.shared.clock import ensure_aware
from storefront.shared.logging import logger


def _to_domain_admin(row: Admin) -> Administrator:
    return Administrator(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        is_active=row.is_active,
        created_at=ensure_aware(row.created_at),
        updated_at=ensure_aware(row.updated_at),
    )


def _to_domain_session(row: AdminSessionRow) -> DomainAdminSession:
    return DomainAdminSession(
        id=row.id,
        admin_id=row.admin_id,
        expires_at=ensure_aware(row.expires_at),
        created_at=ensure_aware(row.created_at),
    )


class SqlAlchemyAdminRepository(AdminRepository):
    def find_by_username(self, username: str) -> Administrator | None:
        with session_scope() as session:
            row = session.query(Admin).filter(Admin.username == username).first()
            return _to_domain_admin(row) if row else None

    def find_by_id(self, admin_id: str) -> Administrator | None:
        with session_scope() as session:
            row = session.get(Admin, admin_id)
            return _to_domain_admin(row) if row else None

    def exists(self, *, username: str, email: str) -> bool:
        with session_scope() as session:
            row = (
                session.query(Admin.id)
                .filter(or_(Admin.username == username, Admin.email == email))
                .first()
            )
            return row is not None

    def add(self, admin: Administrator) -> Administrator:
        try:
            with session_scope() as session:
                row = Admin(
                    id=admin.id,
                    username=admin.username,
                    email=admin.email,
                    password_hash=admin.password_hash,
                    first_name=admin.first_name,
                    last_name=admin.last_name,
                    is_active=admin.is_active,
                    created_at=admin.created_at,
                    updated_at=admin.updated_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain_admin(row)
        except IntegrityError as exc:
            logger.warning(f"admins.repo: duplicate admin on insert username={admin.username}")
            raise AdminAlreadyExistsError() from exc


class SqlAlchemyAdminSessionRepository(AdminSessionRepository):
    def add(self, session_: DomainAdminSession) -> DomainAdminSession:
        with session_scope() as session:
            session.add(
                AdminSessionRow(
                    id=session_.id,
                    admin_id=session_.admin_id,
                    expires_at=session_.expires_at,
                    created_at=session_.created_at,
                )
            )
            return session_

    def get(self, session_id: str) -> DomainAdminSession | None:
        with session_scope() as session:
            row = session.get(AdminSessionRow, session_id)
            return _to_domain_session(row) if row else None

    def update_expiry(self, session_id: str, expires_at: datetime) -> None:
        with session_scope() as session:
            session.query(AdminSessionRow).filter(AdminSessionRow.id == session_id).update(
                {AdminSessionRow.expires_at: expires_at}
            )

    def delete(self, session_id: str) -> bool:
        with session_scope() as session:
            removed = (
                session.query(AdminSessionRow)
                .filter(AdminSessionRow.id == session_id)
                .delete()
            )
            return removed > 0

    def delete_for_admin(self, admin_id: str) -> int:
        with session_scope() as session:
            return (
                session.query(AdminSessionRow)
                .filter(AdminSessionRow.admin_id == admin_id)
                .delete()
            )

    def delete_expired(self, now: datetime) -> int:
        with session_scope() as session:
            return (
                session.query(AdminSessionRow)
                .filter(AdminSessionRow.expires_at < now)
                .delete()
            )
