"""Filter query parameters as received from the transport layer."""

from datetime import date, datetime, time, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.filter import ItemFilter


def _start_of_day(day: Optional[date]) -> Optional[datetime]:
    if day is None:
        return None
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


class FilterQuery(BaseModel):
    """The four optional filter parameters: from, to, category_id and type.

    Empty strings count as absent. Dates must be ``YYYY-MM-DD``; a bound
    stands for midnight UTC of that day.
    """

    model_config = ConfigDict(populate_by_name=True)

    date_from: Optional[date] = Field(default=None, alias="from")
    date_to: Optional[date] = Field(default=None, alias="to")
    category_id: Optional[int] = None
    type: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def parse_day(cls, value):
        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                return datetime.strptime(value.strip(), "%Y-%m-%d").date()
            except ValueError:
                raise ValueError("invalid date format, expected YYYY-MM-DD") from None
        return value

    def to_filter(self) -> ItemFilter:
        return ItemFilter(
            date_from=_start_of_day(self.date_from),
            date_to=_start_of_day(self.date_to),
            category_id=self.category_id,
            type=self.type,
        )
