# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from storefront.shared.errors.base import DomainError


class CategorySlugTakenError(DomainError):
    code = "category_slug_taken"
    status = HTTPStatus.CONFLICT
