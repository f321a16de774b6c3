"""
Standardized exception hierarchy for questlog
Provides rich context, consistent logging, and user-friendly error messages
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)


class QuestLogError(Exception):
    """
    Base exception for all questlog errors

    Provides:
    - Automatic timestamping
    - Request ID for tracing
    - User-friendly messages
    - Structured context
    - Automatic logging

    Example:
        raise QuestLogError(
            message="Failed to save daily log",
            user_id="member-1",
            operation="submit_log",
            context={"cohort_id": 3, "log_date": "2026-02-01"}
        )
    """

    def __init__(
        self,
        message: str,
        user_id: Optional[str] = None,
        request_id: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.user_id = user_id
        self.request_id = request_id or str(uuid4())
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        self.user_message = user_message or "An error occurred. Please try again."
        self.timestamp = datetime.now(timezone.utc)

        # Auto-log on creation
        self._log_error()

    def _log_error(self) -> None:
        """Log error with full context"""
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # Avoid conflict with logging's 'message' field
            "request_id": self.request_id,
            "user_id": self.user_id,
            "operation": self.operation,
            "error_context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data, exc_info=self.cause)
        else:
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for API responses"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat()
        }


# ==========================================
# Validation Errors (Submitted Logs)
# ==========================================

class ValidationError(QuestLogError):
    """
    Raised when a submitted activity log fails validation

    Examples:
    - Negative step count
    - Malformed log date
    - Missing cohort id

    Nothing is persisted when this is raised.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        super().__init__(
            message=message,
            user_message=f"Invalid {field}: {message}" if field else message,
            context={"field": field, "value": value},
            **kwargs
        )

    @classmethod
    def from_pydantic(cls, error: Exception, **kwargs) -> "ValidationError":
        """Build from a pydantic ValidationError, keeping the first failing field"""
        errors = error.errors() if hasattr(error, "errors") else []
        if not errors:
            return cls(message=str(error), cause=error, **kwargs)

        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        return cls(
            message=first.get("msg", str(error)),
            field=field,
            value=first.get("input"),
            cause=error,
            **kwargs
        )


# ==========================================
# Storage Errors
# ==========================================

class StorageError(QuestLogError):
    """
    Base class for persistence failures

    Fatal on the log/stats write path, degraded only inside the
    streak lookback.
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault(
            "user_message",
            "We encountered an issue saving your progress. Please try again."
        )
        super().__init__(message=message, **kwargs)


class ConnectionError(StorageError):
    """Database connection failed"""

    def __init__(self, message: str = "Database connection failed", **kwargs):
        super().__init__(
            message=message,
            user_message="We're having trouble connecting to the database. Please try again in a moment.",
            **kwargs
        )


class QueryError(StorageError):
    """Database query execution failed"""

    def __init__(
        self,
        message: str,
        query: Optional[str] = None,
        **kwargs
    ):
        self.query = query
        context = kwargs.pop("context", None) or {}
        context.setdefault("query", query)
        super().__init__(
            message=message,
            context=context,
            **kwargs
        )


# ==========================================
# Missing Records
# ==========================================

class NotFoundError(QuestLogError):
    """
    Requested record does not exist

    Raised when member stats are missing for a (member, cohort) pair,
    which means the cohort-join step never ran.
    """

    def __init__(
        self,
        message: str,
        record_type: Optional[str] = None,
        record_id: Optional[str] = None,
        **kwargs
    ):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(
            message=message,
            user_message=f"{record_type or 'Record'} not found.",
            context={"record_type": record_type, "record_id": record_id},
            **kwargs
        )


# ==========================================
# Configuration Errors
# ==========================================

class ConfigurationError(QuestLogError):
    """System configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            user_message="The system is not properly configured. Please contact support.",
            context={"config_key": config_key},
            **kwargs
        )


# ==========================================
# Helper Functions
# ==========================================

def wrap_storage_exception(
    error: Exception,
    operation: str,
    user_id: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> QuestLogError:
    """
    Wrap driver exceptions (psycopg, pool timeouts) into our exception hierarchy

    Args:
        error: Original exception
        operation: What operation was being performed
        user_id: Member ID if applicable
        context: Additional context

    Returns:
        Appropriate StorageError subclass

    Example:
        try:
            await cur.execute(query, params)
        except psycopg.Error as e:
            raise wrap_storage_exception(
                e,
                operation="get_daily_log",
                user_id="member-1",
            )
    """
    if isinstance(error, QuestLogError):
        return error

    import psycopg
    from psycopg_pool import PoolTimeout

    if isinstance(error, (psycopg.OperationalError, PoolTimeout)):
        return ConnectionError(
            message=f"Database connection failed: {str(error)}",
            user_id=user_id,
            operation=operation,
            context=context,
            cause=error
        )
    elif isinstance(error, psycopg.Error):
        return QueryError(
            message=f"Database query failed: {str(error)}",
            user_id=user_id,
            operation=operation,
            context=context,
            cause=error
        )

    return StorageError(
        message=f"{operation} failed: {str(error)}",
        user_id=user_id,
        operation=operation,
        context=context,
        cause=error
    )
