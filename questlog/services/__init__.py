"""
Service Layer Package

Business logic sitting between the HTTP/UI collaborators and the
database queries.

- LogSubmissionService: daily log submission, stats, streak, quest completion
- DailyQuestService: per-day quest generation from program templates
"""

from questlog.services.container import ServiceContainer, get_container, init_container
from questlog.services.log_service import LogSubmissionService
from questlog.services.daily_quest_service import DailyQuestService

__all__ = [
    "ServiceContainer",
    "get_container",
    "init_container",
    "LogSubmissionService",
    "DailyQuestService",
]
