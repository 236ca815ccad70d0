# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.categories.create_category import (
    CreateCategoryUseCase,
)
from storefront.application.use_cases.categories.list_categories import (
    ListCategoriesUseCase,
)
from storefront.infrastructure.admin_middleware import require_admin
from storefront.infrastructure.audit import AuditAction, audit_log
from storefront.interfaces.http.dto.categories import CreateCategoryDTO
from storefront.interfaces.http.utils import get_client_ip
from storefront.shared.errors.validation import raise_validation_error


class CategoriesController:
    def __init__(
        self,
        *,
        list_categories: ListCategoriesUseCase,
        create_category: CreateCategoryUseCase,
    ) -> None:
        self._list_categories = list_categories
        self._create_category = create_category

    def list_all(self) -> tuple[Response, int]:
        categories = self._list_categories.execute()
        return jsonify([category.to_dict() for category in categories]), 200

    @require_admin
    def create(self) -> tuple[Response, int]:
        payload = request.get_json(silent=True) or request.form.to_dict()
        try:
            dto = CreateCategoryDTO.model_validate(payload)
        except ValidationError as exc:
            raise_validation_error(exc)

        category = self._create_category.execute(dto.name, dto.slug, dto.description)

        audit_log(
            AuditAction.CATEGORY_CREATED,
            admin_id=g.admin_id,
            ip_address=get_client_ip(),
            details={"category_id": category.id, "slug": category.slug},
        )
        return jsonify(category.to_dict()), 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("categories", __name__, url_prefix="/api/categories")
        bp.add_url_rule("", view_func=self.list_all, methods=["GET"], strict_slashes=False)
        bp.add_url_rule("", view_func=self.create, methods=["POST"], strict_slashes=False)
        return bp
