"""Category repository for database operations."""

from typing import List, Optional

from deadline import Deadline
from db.timestamps import from_db_timestamp
from errors import NotFoundError
from models.category import Category
from repositories.base import Repository, storage_errors

_CATEGORY_SELECT = "SELECT id, name, created_at FROM categories"


def _row_to_category(row) -> Category:
    return Category(id=row[0], name=row[1], created_at=from_db_timestamp(row[2]))


class CategoryRepository(Repository):
    """Persistence for categories."""

    def create(self, category: Category, *, deadline: Optional[Deadline] = None) -> int:
        """Insert a new category.

        Args:
            category: Category to insert; its id and created_at are ignored.
            deadline: Optional bound on the store call.

        Returns:
            The store-assigned category ID.

        Raises:
            AlreadyExistsError: If a category with the same name exists.
            StorageError: On any other store failure.
        """
        with storage_errors("repository.categories.create", "category"):
            with self.db_manager.connect(deadline) as conn:
                cursor = conn.execute(
                    "INSERT INTO categories (name) VALUES (?)", (category.name,)
                )
                conn.commit()
                return cursor.lastrowid

    def get_by_id(
        self, category_id: int, *, deadline: Optional[Deadline] = None
    ) -> Category:
        """Get a single category by ID.

        Raises:
            NotFoundError: If no category has this ID.
            StorageError: On any other store failure.
        """
        with storage_errors("repository.categories.get_by_id", "category"):
            with self.db_manager.connect(deadline) as conn:
                row = conn.execute(
                    f"{_CATEGORY_SELECT} WHERE id = ?", (category_id,)
                ).fetchone()

            if row is None:
                raise NotFoundError(f"category {category_id} not found")
            return _row_to_category(row)

    def get_all(self, *, deadline: Optional[Deadline] = None) -> List[Category]:
        """Get all categories, newest first. An empty store yields an empty list."""
        with storage_errors("repository.categories.get_all", "category"):
            with self.db_manager.connect(deadline) as conn:
                rows = conn.execute(
                    f"{_CATEGORY_SELECT} ORDER BY created_at DESC, id DESC"
                ).fetchall()

            return [_row_to_category(row) for row in rows]

    def update(self, category: Category, *, deadline: Optional[Deadline] = None) -> None:
        """Rename a category.

        Raises:
            NotFoundError: If no category has ``category.id``.
            AlreadyExistsError: If another category already uses the new name.
            StorageError: On any other store failure.
        """
        with storage_errors("repository.categories.update", "category"):
            with self.db_manager.connect(deadline) as conn:
                cursor = conn.execute(
                    "UPDATE categories SET name = ? WHERE id = ?",
                    (category.name, category.id),
                )
                conn.commit()

            if cursor.rowcount == 0:
                raise NotFoundError(f"category {category.id} not found")

    def delete(self, category_id: int, *, deadline: Optional[Deadline] = None) -> None:
        """Delete a category by ID.

        Raises:
            NotFoundError: If no category has this ID.
            StorageError: If items still reference the category, or on any
                          other store failure.
        """
        with storage_errors("repository.categories.delete", "category"):
            with self.db_manager.connect(deadline) as conn:
                cursor = conn.execute(
                    "DELETE FROM categories WHERE id = ?", (category_id,)
                )
                conn.commit()

            if cursor.rowcount == 0:
                raise NotFoundError(f"category {category_id} not found")
