"""Item value objects.

``transaction_date`` is optional on input. Omitting it, sending an empty
string, or sending the zero timestamp (0001-01-01T00:00:00) all mean "not
supplied"; the item service then substitutes the current time.
"""

from datetime import date, datetime, time, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from dto.base import NonBlankStr
from models.item import Item


def _parse_transaction_date(value):
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            if len(text) == 10:
                return datetime.combine(
                    date.fromisoformat(text), time.min, tzinfo=timezone.utc
                )
            return datetime.fromisoformat(text)
        except ValueError:
            raise ValueError("expected YYYY-MM-DD or an ISO 8601 datetime") from None
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return value


def _is_zero(value: datetime) -> bool:
    return value.replace(tzinfo=None) == datetime.min


class ItemPayload(BaseModel):
    """Fields a caller supplies when creating or replacing an item."""

    category_id: int = Field(gt=0)
    type: NonBlankStr
    amount: float = Field(allow_inf_nan=False)
    description: str = ""
    transaction_date: Optional[datetime] = None

    @field_validator("transaction_date", mode="before")
    @classmethod
    def parse_transaction_date(cls, value):
        return _parse_transaction_date(value)

    @field_validator("transaction_date")
    @classmethod
    def normalize_transaction_date(cls, value: Optional[datetime]):
        if value is None or _is_zero(value):
            return None
        if value.tzinfo is not None:
            try:
                value.astimezone(timezone.utc)
            except OverflowError:
                raise ValueError("date is out of range once converted to UTC") from None
        return value


class CreateItem(ItemPayload):
    pass


class UpdateItem(ItemPayload):
    pass


class ItemOut(BaseModel):
    """An item as returned to callers."""

    id: int
    category_id: int
    type: str
    amount: float
    description: str
    created_at: Optional[datetime] = None
    transaction_date: datetime

    @classmethod
    def from_record(cls, item: Item) -> "ItemOut":
        return cls(
            id=item.id,
            category_id=item.category_id,
            type=item.type,
            amount=item.amount,
            description=item.description,
            created_at=item.created_at,
            transaction_date=item.transaction_date,
        )
