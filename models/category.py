"""Category model for item categorization."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Category:
    """Represents a category that items are filed under.

    Attributes:
        id: Unique identifier (store-assigned, None before insert).
        name: Category name (unique, non-empty).
        created_at: Creation timestamp (store-assigned, immutable).
    """

    id: Optional[int]
    name: str
    created_at: Optional[datetime] = None
