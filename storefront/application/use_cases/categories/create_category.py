# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.catalog.entities import Category
from storefront.domain.catalog.exceptions import CategorySlugTakenError
from storefront.domain.catalog.repositories import CategoryRepository
from storefront.shared.logging import logger


class CreateCategoryUseCase:
    def __init__(self, *, categories: CategoryRepository) -> None:
        self._categories = categories

    def execute(self, name: str, slug: str, description: str | None = None) -> Category:
        category = Category(
            id=None,
            name=name.strip(),
            slug=slug,
            description=description or None,
            is_active=True,
        )
        if self._categories.slug_exists(category.slug):
            raise CategorySlugTakenError(context={"slug": category.slug})

        persisted = self._categories.add(category)
        logger.info(f"categories.create: ok id={persisted.id} slug={persisted.slug}")
        return persisted
