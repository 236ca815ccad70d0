from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CreateCategoryDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    slug: str = Field(
        min_length=1, max_length=128, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
    )
    description: str | None = Field(None, max_length=2000)

    @field_validator("name", "slug", "description", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value
