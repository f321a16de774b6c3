"""Database connection management"""
import logging
from contextlib import asynccontextmanager
from functools import wraps
from typing import AsyncGenerator, Awaitable, Callable, Optional, TypeVar
import psycopg
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool, PoolTimeout
from questlog.config import DATABASE_URL, DB_POOL_MIN_SIZE, DB_POOL_MAX_SIZE
from questlog.exceptions import ConnectionError, wrap_storage_exception

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Database:
    """Database connection pool manager"""

    def __init__(self, connection_string: str = DATABASE_URL):
        self.connection_string = connection_string
        self._pool: Optional[AsyncConnectionPool] = None

    async def init_pool(self) -> None:
        """Initialize connection pool"""
        logger.info("Initializing database connection pool")
        self._pool = AsyncConnectionPool(
            self.connection_string,
            min_size=DB_POOL_MIN_SIZE,
            max_size=DB_POOL_MAX_SIZE,
            open=False
        )
        await self._pool.open()

    async def close_pool(self) -> None:
        """Close connection pool"""
        if self._pool:
            logger.info("Closing database connection pool")
            await self._pool.close()
            self._pool = None

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[psycopg.AsyncConnection, None]:
        """Get database connection from pool"""
        if not self._pool:
            raise ConnectionError("Database pool not initialized")

        async with self._pool.connection() as conn:
            conn.row_factory = dict_row
            yield conn


def storage_operation(operation: str) -> Callable:
    """
    Decorator translating driver errors into StorageError subclasses

    Example:
        @storage_operation("get_daily_log")
        async def get_daily_log(user_id, cohort_id, log_date): ...
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except (psycopg.Error, PoolTimeout) as e:
                raise wrap_storage_exception(
                    e,
                    operation=operation,
                    user_id=kwargs.get("user_id") or (args[0] if args and isinstance(args[0], str) else None),
                ) from e
        return wrapper
    return decorator


# Global database instance
db = Database()
