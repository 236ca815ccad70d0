# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from storefront.application.services.admin_auth import AdminAuthService
from storefront.application.services.password_hashing import Argon2PasswordHasher
from storefront.application.use_cases.admins.provision_admin import ProvisionAdminUseCase
from storefront.application.use_cases.categories.create_category import (
    CreateCategoryUseCase,
)
from storefront.application.use_cases.categories.list_categories import (
    ListCategoriesUseCase,
)
from storefront.infrastructure.auth.login_attempts import InMemoryLoginThrottle
from storefront.infrastructure.repositories.admins.sqlalchemy_admin_repository import (
    SqlAlchemyAdminRepository,
    SqlAlchemyAdminSessionRepository,
)
from storefront.infrastructure.repositories.catalog.sqlalchemy_category_repository import (
    SqlAlchemyCategoryRepository,
)
from storefront.interfaces.http.controllers.admin_pages_controller import (
    AdminPagesController,
)
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.categories_controller import (
    CategoriesController,
)
from storefront.shared.config import load_config


class Container:
    @cached_property
    def password_hasher(self) -> Argon2PasswordHasher:
        return Argon2PasswordHasher()

    @cached_property
    def admin_repository(self) -> SqlAlchemyAdminRepository:
        return SqlAlchemyAdminRepository()

    @cached_property
    def admin_session_repository(self) -> SqlAlchemyAdminSessionRepository:
        return SqlAlchemyAdminSessionRepository()

    @cached_property
    def category_repository(self) -> SqlAlchemyCategoryRepository:
        return SqlAlchemyCategoryRepository()

    @cached_property
    def login_throttle(self) -> InMemoryLoginThrottle:
        auth = load_config().auth
        return InMemoryLoginThrottle(
            max_attempts=auth.max_login_attempts,
            lockout_window=auth.lockout_seconds,
        )

    @cached_property
    def auth_service(self) -> AdminAuthService:
        auth = load_config().auth
        return AdminAuthService(
            admins=self.admin_repository,
            sessions=self.admin_session_repository,
            password_hasher=self.password_hasher,
            throttle=self.login_throttle,
            session_duration=auth.session_duration,
            renew_within=auth.renew_within,
            max_login_attempts=auth.max_login_attempts,
        )

    @cached_property
    def provision_admin_use_case(self) -> ProvisionAdminUseCase:
        return ProvisionAdminUseCase(
            admins=self.admin_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_categories_use_case(self) -> ListCategoriesUseCase:
        return ListCategoriesUseCase(categories=self.category_repository)

    @cached_property
    def create_category_use_case(self) -> CreateCategoryUseCase:
        return CreateCategoryUseCase(categories=self.category_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(auth_service=self.auth_service)

    @cached_property
    def admin_pages_controller(self) -> AdminPagesController:
        return AdminPagesController(landing_path=load_config().auth.landing_path)

    @cached_property
    def categories_controller(self) -> CategoriesController:
        return CategoriesController(
            list_categories=self.list_categories_use_case,
            create_category=self.create_category_use_case,
        )


container = Container()
