"""Item repository for database operations."""

from typing import List, Optional

from deadline import Deadline
from db.query import ITEM_SELECT, select_items
from db.timestamps import from_db_timestamp, to_db_timestamp
from errors import NotFoundError
from models.filter import ItemFilter
from models.item import Item
from repositories.base import Repository, storage_errors


def _missing_category() -> NotFoundError:
    return NotFoundError("category not found")


def _row_to_item(row) -> Item:
    return Item(
        id=row[0],
        category_id=row[1],
        type=row[2],
        amount=float(row[3]),
        description=row[4],
        created_at=from_db_timestamp(row[5]),
        transaction_date=from_db_timestamp(row[6]),
    )


class ItemRepository(Repository):
    """Persistence for items."""

    def create(self, item: Item, *, deadline: Optional[Deadline] = None) -> int:
        """Insert a new item.

        Args:
            item: Item to insert; its id and created_at are ignored.
            deadline: Optional bound on the store call.

        Returns:
            The store-assigned item ID.

        Raises:
            NotFoundError: If ``item.category_id`` names no category.
            InvalidInputError: If the store rejects a field value.
            StorageError: On any other store failure.
        """
        with storage_errors("repository.items.create", "item", _missing_category):
            with self.db_manager.connect(deadline) as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO items (category_id, type, amount, description, transaction_date)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        item.category_id,
                        item.type,
                        item.amount,
                        item.description,
                        to_db_timestamp(item.transaction_date),
                    ),
                )
                conn.commit()
                return cursor.lastrowid

    def get_by_id(self, item_id: int, *, deadline: Optional[Deadline] = None) -> Item:
        """Get a single item by ID.

        Raises:
            NotFoundError: If no item has this ID.
            StorageError: On any other store failure.
        """
        with storage_errors("repository.items.get_by_id", "item"):
            with self.db_manager.connect(deadline) as conn:
                row = conn.execute(
                    f"{ITEM_SELECT} WHERE id = ?", (item_id,)
                ).fetchone()

            if row is None:
                raise NotFoundError(f"item {item_id} not found")
            return _row_to_item(row)

    def list_filtered(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> List[Item]:
        """Get items matching a filter, newest business date first.

        Zero matches is an empty list, never NotFoundError.
        """
        query = select_items(item_filter)
        with storage_errors("repository.items.list_filtered", "item"):
            with self.db_manager.connect(deadline) as conn:
                rows = conn.execute(query.sql, query.params).fetchall()

            return [_row_to_item(row) for row in rows]

    def update(self, item: Item, *, deadline: Optional[Deadline] = None) -> None:
        """Replace every mutable field of ``item.id``.

        Raises:
            NotFoundError: If no item has ``item.id``, or the new category is missing.
            StorageError: On any other store failure.
        """
        with storage_errors("repository.items.update", "item", _missing_category):
            with self.db_manager.connect(deadline) as conn:
                cursor = conn.execute(
                    """
                    UPDATE items
                    SET category_id = ?,
                        type = ?,
                        amount = ?,
                        description = ?,
                        transaction_date = ?
                    WHERE id = ?
                    """,
                    (
                        item.category_id,
                        item.type,
                        item.amount,
                        item.description,
                        to_db_timestamp(item.transaction_date),
                        item.id,
                    ),
                )
                conn.commit()

            if cursor.rowcount == 0:
                raise NotFoundError(f"item {item.id} not found")

    def delete(self, item_id: int, *, deadline: Optional[Deadline] = None) -> None:
        """Delete an item by ID.

        Raises:
            NotFoundError: If no item has this ID.
            StorageError: On any other store failure.
        """
        with storage_errors("repository.items.delete", "item"):
            with self.db_manager.connect(deadline) as conn:
                cursor = conn.execute("DELETE FROM items WHERE id = ?", (item_id,))
                conn.commit()

            if cursor.rowcount == 0:
                raise NotFoundError(f"item {item_id} not found")
