# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Category


class CategoryRepository(Protocol):
    def list_newest_first(self) -> Sequence[Category]: ...
    def slug_exists(self, slug: str) -> bool: ...
    def add(self, category: Category) -> Category: ...
