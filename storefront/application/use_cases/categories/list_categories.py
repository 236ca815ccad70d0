# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from storefront.domain.catalog.entities import Category
from storefront.domain.catalog.repositories import CategoryRepository


class ListCategoriesUseCase:
    def __init__(self, *, categories: CategoryRepository) -> None:
        self._categories = categories

    def execute(self) -> Sequence[Category]:
        return self._categories.list_newest_first()
