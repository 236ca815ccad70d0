# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, request
from flask_cors import CORS

from storefront.infrastructure.admin_middleware import configure_access_gate, under_prefix
from storefront.infrastructure.admin_setup import setup_admin_user
from storefront.infrastructure.container import Container, container
from storefront.infrastructure.db import init_db
from storefront.interfaces.http.controllers.misc_controller import MiscController
from storefront.shared.config import load_config
from storefront.shared.logging import logger, setup_logging
from storefront.shared.middleware.error_handler import configure_error_handling
from storefront.shared.middleware.request_logger import configure_request_logging

ADMIN_CSP = "; ".join(
    [
        "default-src 'self'",
        "script-src 'self' 'unsafe-inline'",
        "style-src 'self' 'unsafe-inline'",
        "img-src 'self' data: https:",
        "font-src 'self'",
        "connect-src 'self'",
        "frame-ancestors 'none'",
    ]
)


def create_app(deps: Container | None = None) -> Flask:
    deps = deps or container
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db()

    setup_admin_user(admins=deps.admin_repository, provision=deps.provision_admin_use_case)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)

    configure_error_handling(app)
    configure_request_logging(app)
    configure_access_gate(app, deps.auth_service, config.auth)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        supports_credentials="*" not in config.security.allowed_origins,
    )

    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(deps.auth_controller.as_blueprint())
    app.register_blueprint(deps.admin_pages_controller.as_blueprint(config.auth.admin_prefix))
    app.register_blueprint(deps.categories_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("X-XSS-Protection", "1; mode=block")
        resp.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        resp.headers.setdefault(
            "Permissions-Policy", "camera=(), microphone=(), geolocation=()"
        )

        if under_prefix(request.path, config.auth.admin_prefix):
            resp.headers.setdefault("Content-Security-Policy", ADMIN_CSP)

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
