"""Item service: default values, value-object conversion and error context."""

from datetime import datetime, timezone
from typing import Callable, List, Optional

from deadline import Deadline
from dto.item import CreateItem, ItemOut, ItemPayload, UpdateItem
from errors import error_context
from logger import get_logger
from models.filter import ItemFilter
from models.item import Item

logger = get_logger()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ItemService:
    """Service for managing items.

    Args:
        repository: ItemRepository (or a stand-in with the same methods).
        clock: Returns the current time; used when a payload has no
               transaction date.
    """

    def __init__(self, repository, clock: Optional[Callable[[], datetime]] = None):
        self.repository = repository
        self.clock = clock or utc_now

    def _to_record(self, payload: ItemPayload, item_id: Optional[int] = None) -> Item:
        transaction_date = payload.transaction_date
        if transaction_date is None:
            transaction_date = self.clock()
        return Item(
            id=item_id,
            category_id=payload.category_id,
            type=payload.type,
            amount=payload.amount,
            description=payload.description,
            transaction_date=transaction_date,
        )

    def create(self, payload: CreateItem, *, deadline: Optional[Deadline] = None) -> int:
        """Create an item and return its ID.

        A missing transaction date is replaced with the current time.

        Raises:
            NotFoundError: If the referenced category does not exist.
            StorageError: On any other store failure.
        """
        with error_context("service.items.create"):
            item_id = self.repository.create(self._to_record(payload), deadline=deadline)
        logger.debug(f"Created item {item_id} in category {payload.category_id}")
        return item_id

    def get(self, item_id: int, *, deadline: Optional[Deadline] = None) -> ItemOut:
        with error_context("service.items.get"):
            item = self.repository.get_by_id(item_id, deadline=deadline)
        return ItemOut.from_record(item)

    def list(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> List[ItemOut]:
        """List items matching ``item_filter``, newest business date first."""
        with error_context("service.items.list"):
            items = self.repository.list_filtered(item_filter, deadline=deadline)
        return [ItemOut.from_record(item) for item in items]

    def update(
        self,
        item_id: int,
        payload: UpdateItem,
        *,
        deadline: Optional[Deadline] = None,
    ) -> None:
        """Replace an item's fields.

        A missing transaction date is replaced with the current time.

        Raises:
            NotFoundError: If the item or the referenced category does not exist.
        """
        with error_context("service.items.update"):
            self.repository.update(self._to_record(payload, item_id), deadline=deadline)
        logger.debug(f"Updated item {item_id}")

    def delete(self, item_id: int, *, deadline: Optional[Deadline] = None) -> None:
        with error_context("service.items.delete"):
            self.repository.delete(item_id, deadline=deadline)
        logger.debug(f"Deleted item {item_id}")
