# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.services.admin_auth import AdminAuthService
from storefront.domain.admins.exceptions import InvalidCredentialsError
from storefront.infrastructure.admin_middleware import current_admin
from storefront.infrastructure.audit import AuditAction, audit_log
from storefront.infrastructure.auth.session_cookie import (
    clear_session_cookie,
    read_session_id,
    set_session_cookie,
)
from storefront.interfaces.http.dto.auth import (
    AdminDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    LogoutResponseDTO,
)
from storefront.interfaces.http.utils import get_client_ip
from storefront.shared.errors.validation import raise_validation_error
from storefront.shared.logging import logger


class AuthController:
    def __init__(self, *, auth_service: AdminAuthService) -> None:
        self._auth_service = auth_service

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = get_client_ip()
        result = self._auth_service.login(dto.username, dto.password)

        if result is None:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise InvalidCredentialsError()

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            admin_id=result.admin.id,
            ip_address=ip_address,
            details={"username": dto.username},
        )

        payload = LoginResponseDTO(admin=AdminDTO.from_domain(result.admin))
        response = jsonify(payload.model_dump(mode="json"))
        set_session_cookie(response, result.session.id, result.session.expires_at)
        logger.debug(f"auth.login: session cookie issued admin_id={result.admin.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        admin = current_admin()
        session_id = read_session_id(request)
        removed = self._auth_service.logout(session_id) if session_id else False

        audit_log(
            AuditAction.LOGOUT,
            admin_id=admin.id if admin else None,
            ip_address=get_client_ip(),
            details={"removed": removed},
        )

        response = jsonify(LogoutResponseDTO().model_dump())
        clear_session_cookie(response)
        logger.info(f"auth.logout: ok removed={removed}")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth/admin")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
