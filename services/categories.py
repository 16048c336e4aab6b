"""Category service: orchestration over the category repository."""

from typing import List, Optional

from deadline import Deadline
from dto.category import CategoryOut, CreateCategory, UpdateCategory
from errors import error_context
from logger import get_logger
from models.category import Category

logger = get_logger()


class CategoryService:
    """Service for managing categories."""

    def __init__(self, repository):
        """Initialize the category service.

        Args:
            repository: CategoryRepository (or a stand-in with the same methods).
        """
        self.repository = repository

    def create(
        self, payload: CreateCategory, *, deadline: Optional[Deadline] = None
    ) -> int:
        """Create a category and return its ID.

        Raises:
            AlreadyExistsError: If the name is taken.
            StorageError: On any other store failure.
        """
        with error_context("service.categories.create"):
            category_id = self.repository.create(
                Category(id=None, name=payload.name), deadline=deadline
            )
        logger.debug(f"Created category {category_id} ({payload.name!r})")
        return category_id

    def get(
        self, category_id: int, *, deadline: Optional[Deadline] = None
    ) -> CategoryOut:
        with error_context("service.categories.get"):
            category = self.repository.get_by_id(category_id, deadline=deadline)
        return CategoryOut.from_record(category)

    def list(self, *, deadline: Optional[Deadline] = None) -> List[CategoryOut]:
        with error_context("service.categories.list"):
            categories = self.repository.get_all(deadline=deadline)
        return [CategoryOut.from_record(category) for category in categories]

    def rename(
        self,
        category_id: int,
        payload: UpdateCategory,
        *,
        deadline: Optional[Deadline] = None,
    ) -> None:
        """Rename a category.

        Raises:
            NotFoundError: If the category does not exist.
            AlreadyExistsError: If another category already has the name.
        """
        with error_context("service.categories.rename"):
            self.repository.update(
                Category(id=category_id, name=payload.name), deadline=deadline
            )
        logger.debug(f"Renamed category {category_id} to {payload.name!r}")

    def delete(self, category_id: int, *, deadline: Optional[Deadline] = None) -> None:
        with error_context("service.categories.delete"):
            self.repository.delete(category_id, deadline=deadline)
        logger.debug(f"Deleted category {category_id}")
