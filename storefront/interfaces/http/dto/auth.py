from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from storefront.domain.admins.entities import AuthenticatedAdmin


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=256)  # No strength check on login

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class AdminDTO(BaseModel):
    id: str
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, admin: AuthenticatedAdmin) -> AdminDTO:
        return cls(
            id=admin.id,
            username=admin.username,
            email=admin.email,
            first_name=admin.first_name,
            last_name=admin.last_name,
            is_active=admin.is_active,
            created_at=admin.created_at,
            updated_at=admin.updated_at,
        )


class LoginResponseDTO(BaseModel):
    admin: AdminDTO
    message: str = "Login successful"


class LogoutResponseDTO(BaseModel):
    message: str = "Logout successful"
