"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    Each statement runs on its own cursor so one repository can be shared by
    request threads; every mutation is a single autocommitted statement.
    """

    def __init__(self, db: duckdb.DuckDBPyConnection | None = None):
        self._db = db if db is not None else get_db()
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> duckdb.DuckDBPyConnection:
        """Execute SQL query."""
        cursor = self._db.cursor()
        if params:
            return cursor.execute(query, params)
        return cursor.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def execute_update(self, query: str, params: list | None = None) -> int:
        """Execute INSERT/UPDATE/DELETE and return the number of affected rows."""
        row = self.fetchone(query, params)
        return int(row[0]) if row else 0
