"""Category value objects."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from dto.base import NonEmptyStr
from models.category import Category


class CreateCategory(BaseModel):
    name: NonEmptyStr


class UpdateCategory(BaseModel):
    name: NonEmptyStr


class CategoryOut(BaseModel):
    """A category as returned to callers."""

    id: int
    name: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, category: Category) -> "CategoryOut":
        return cls(id=category.id, name=category.name, created_at=category.created_at)
