from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Item:
    id: Optional[int]  # store-assigned, None before insert
    category_id: int
    type: str  # free-form tag, e.g. "income" or "expense"
    amount: float  # signed, no range constraint
    description: str
    transaction_date: datetime  # business date of the sale
    created_at: Optional[datetime] = None
