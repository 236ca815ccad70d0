# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from storefront.domain.exceptions import InvariantViolation

_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(slots=True, frozen=True)
class Category:

    id: int | None
    name: str
    slug: str
    description: str | None
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvariantViolation("name must not be blank", field="name")
        if not _SLUG_RE.match(self.slug):
            raise InvariantViolation(
                "slug must be lowercase words separated by hyphens", field="slug"
            )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
