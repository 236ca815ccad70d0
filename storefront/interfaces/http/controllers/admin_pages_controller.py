# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, redirect, request

from storefront.infrastructure.admin_middleware import (
    AdminAuthenticationError,
    current_admin,
    require_admin,
)
from storefront.interfaces.http.dto.auth import AdminDTO
from storefront.interfaces.http.utils import is_local_path


class AdminPagesController:
    """Entry points of the admin area; the access gate runs before each of them."""

    def __init__(self, *, landing_path: str) -> None:
        self._landing_path = landing_path

    def index(self) -> Response:
        return redirect(self._landing_path, code=302)

    def login_page(self) -> tuple[Response, int]:
        target = request.args.get("redirectTo")
        if not is_local_path(target):
            target = self._landing_path
        return jsonify({"page": "login", "redirect_to": target}), 200

    @require_admin
    def dashboard(self) -> tuple[Response, int]:
        admin = current_admin()
        if admin is None:
            raise AdminAuthenticationError()
        payload = {
            "page": "dashboard",
            "admin": AdminDTO.from_domain(admin).model_dump(mode="json"),
        }
        return jsonify(payload), 200

    def as_blueprint(self, prefix: str = "/admin") -> Blueprint:
        bp = Blueprint("admin_pages", __name__, url_prefix=prefix)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"], strict_slashes=False)
        bp.add_url_rule("/login", view_func=self.login_page, methods=["GET"])
        bp.add_url_rule("/dashboard", view_func=self.dashboard, methods=["GET"])
        return bp
