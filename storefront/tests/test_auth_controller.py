from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from storefront.application.services.admin_auth import AdminAuthService
from storefront.domain.admins.entities import AdminSession, LoginResult
from storefront.infrastructure.admin_middleware import AdminAuthenticationError
from storefront.interfaces.http.controllers.admin_pages_controller import (
    AdminPagesController,
)
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.shared.middleware.error_handler import configure_error_handling
from storefront.tests.fakes import make_admin

SESSION_ID = "fresh-session-id-000000000000000"


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _register(app: Flask, auth_service: object) -> None:
    controller = AuthController(auth_service=cast(AdminAuthService, auth_service))
    app.register_blueprint(controller.as_blueprint())


def _login_result() -> LoginResult:
    admin = make_admin().sanitized()
    return LoginResult(
        admin=admin,
        session=AdminSession(
            id=SESSION_ID,
            admin_id=admin.id,
            expires_at=datetime(2025, 1, 31, 12, 0, tzinfo=UTC),
            created_at=datetime(2025, 1, 1, 12, 0, tzinfo=UTC),
        ),
    )


def test_login_invalid_payload_returns_422(flask_app: Flask) -> None:
    auth_service = MagicMock()
    _register(flask_app, auth_service)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/admin/login", json={"username": "ab"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert set(payload["context"]["fields"]) == {"username", "password"}
    auth_service.login.assert_not_called()


def test_login_short_password_returns_422(flask_app: Flask) -> None:
    auth_service = MagicMock()
    _register(flask_app, auth_service)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/admin/login", json={"username": "admin", "password": "12345"}
        )

    assert response.status_code == 422
    assert response.get_json()["context"]["fields"] == ["password"]


def test_login_failure_is_generic_401(flask_app: Flask) -> None:
    auth_service = MagicMock()
    auth_service.login.return_value = None
    _register(flask_app, auth_service)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/admin/login", json={"username": "admin", "password": "wrong-one"}
        )

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}
    assert "Set-Cookie" not in response.headers


def test_login_success_sets_session_cookie(flask_app: Flask) -> None:
    auth_service = MagicMock()
    auth_service.login.return_value = _login_result()
    _register(flask_app, auth_service)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/admin/login",
            json={"username": "  admin ", "password": "correct-horse"},
        )

    assert response.status_code == 200
    auth_service.login.assert_called_once_with("admin", "correct-horse")

    payload = response.get_json()
    assert payload["message"] == "Login successful"
    assert payload["admin"]["username"] == "admin"
    assert "password_hash" not in payload["admin"]

    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith(f"admin-session={SESSION_ID};")
    assert "HttpOnly" in cookie
    assert "Path=/" in cookie
    assert "SameSite=Lax" in cookie
    assert "Expires=Fri, 31 Jan 2025 12:00:00 GMT" in cookie
    assert "Secure" not in cookie


def test_logout_deletes_session_and_clears_cookie(flask_app: Flask) -> None:
    auth_service = MagicMock()
    auth_service.logout.return_value = True
    _register(flask_app, auth_service)

    with flask_app.test_client() as client:
        client.set_cookie("admin-session", SESSION_ID)
        response = client.post("/api/auth/admin/logout")

    assert response.status_code == 200
    assert response.get_json() == {"message": "Logout successful"}
    auth_service.logout.assert_called_once_with(SESSION_ID)
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("admin-session=;")
    assert "Max-Age=0" in cookie


def test_logout_without_cookie_still_succeeds(flask_app: Flask) -> None:
    auth_service = MagicMock()
    _register(flask_app, auth_service)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/admin/logout")

    assert response.status_code == 200
    auth_service.logout.assert_not_called()


def test_login_page_echoes_only_local_redirect_targets(flask_app: Flask) -> None:
    controller = AdminPagesController(landing_path="/admin/dashboard")
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        local = client.get("/admin/login?redirectTo=%2Fadmin%2Fproducts")
        foreign = client.get("/admin/login?redirectTo=https%3A%2F%2Fevil.example")
        protocol_relative = client.get("/admin/login?redirectTo=%2F%2Fevil.example")

    assert local.get_json() == {"page": "login", "redirect_to": "/admin/products"}
    assert foreign.get_json()["redirect_to"] == "/admin/dashboard"
    assert protocol_relative.get_json()["redirect_to"] == "/admin/dashboard"


def test_admin_index_redirects_to_landing(flask_app: Flask) -> None:
    controller = AdminPagesController(landing_path="/admin/dashboard")
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/admin")

    assert response.status_code == 302
    assert response.headers["Location"] == "/admin/dashboard"


def test_dashboard_without_gate_refuses_anonymous(flask_app: Flask) -> None:
    controller = AdminPagesController(landing_path="/admin/dashboard")
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/admin/dashboard")

    assert response.status_code == 401


def test_dashboard_body_rejects_missing_admin_on_its_own(flask_app: Flask) -> None:
    controller = AdminPagesController(landing_path="/admin/dashboard")
    undecorated = AdminPagesController.dashboard.__wrapped__

    with flask_app.test_request_context("/admin/dashboard"):
        with pytest.raises(AdminAuthenticationError):
            undecorated(controller)
