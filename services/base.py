"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a test database manager.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, config
                    is only kept for reference.
    """

    def __init__(self, config: Config, db_manager=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from repositories.analytics import AnalyticsRepository
        from repositories.categories import CategoryRepository
        from repositories.items import ItemRepository
        from services.analytics import AnalyticsService
        from services.categories import CategoryService
        from services.items import ItemService

        self.categories = CategoryService(CategoryRepository(self.db_manager))
        self.items = ItemService(ItemRepository(self.db_manager))
        self.analytics = AnalyticsService(AnalyticsRepository(self.db_manager))
