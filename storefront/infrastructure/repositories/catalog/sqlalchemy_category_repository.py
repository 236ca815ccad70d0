# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError

from storefront.domain.catalog.entities import Category
from storefront.domain.catalog.exceptions import CategorySlugTakenError
from storefront.domain.catalog.repositories import CategoryRepository
from storefront.infrastructure.db.models import CategoryRow
from storefront.infrastructure.db.session import session_scope
from storefront.shared.clock import ensure_aware
from storefront.shared.logging import logger


def _to_domain(row: CategoryRow) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        slug=row.slug,
        description=row.description,
        is_active=row.is_active,
        created_at=ensure_aware(row.created_at),
        updated_at=ensure_aware(row.updated_at),
    )


class SqlAlchemyCategoryRepository(CategoryRepository):
    def list_newest_first(self) -> Sequence[Category]:
        with session_scope() as session:
            rows = (
                session.query(CategoryRow)
                .order_by(CategoryRow.created_at.desc(), CategoryRow.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def slug_exists(self, slug: str) -> bool:
        with session_scope() as session:
            return (
                session.query(CategoryRow.id).filter(CategoryRow.slug == slug).first()
                is not None
            )

    def add(self, category: Category) -> Category:
        try:
            with session_scope() as session:
                row = CategoryRow(
                    name=category.name,
                    slug=category.slug,
                    description=category.description,
                    is_active=category.is_active,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"categories.repo: slug collision on insert slug={category.slug}")
            raise CategorySlugTakenError(context={"slug": category.slug}) from exc
