"""
Service Container - Dependency Injection Container

Simple DI container for managing service instances and their dependencies.
Uses lazy loading to only instantiate services when first accessed.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """
    Simple dependency injection container for services.

    Services are lazy-loaded on first access via properties.
    """

    # Infrastructure dependencies (injected)
    db: object  # Database instance

    # Services (lazy-loaded via properties)
    _log_service: Optional[object] = field(default=None, init=False, repr=False)
    _daily_quest_service: Optional[object] = field(default=None, init=False, repr=False)

    @property
    def log_service(self):
        """Get LogSubmissionService instance (lazy-loaded)"""
        if self._log_service is None:
            from questlog.services.log_service import LogSubmissionService
            self._log_service = LogSubmissionService(self.db)
            logger.debug("LogSubmissionService instantiated")
        return self._log_service

    @property
    def daily_quest_service(self):
        """Get DailyQuestService instance (lazy-loaded)"""
        if self._daily_quest_service is None:
            from questlog.services.daily_quest_service import DailyQuestService
            self._daily_quest_service = DailyQuestService(self.db)
            logger.debug("DailyQuestService instantiated")
        return self._daily_quest_service


# Global container instance (initialized by the entry point)
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """
    Get the global service container.

    Raises:
        RuntimeError: If container not initialized (call init_container first)
    """
    if _container is None:
        raise RuntimeError(
            "Service container not initialized. "
            "Call init_container() before using services."
        )
    return _container


def init_container(db: object) -> ServiceContainer:
    """
    Initialize the global service container.

    Should be called once after the database pool is set up.
    """
    global _container

    _container = ServiceContainer(db=db)

    logger.info("Service container initialized")
    return _container
