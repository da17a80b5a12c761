################################################################################
# File Name: stores.py
# Purpose/Description: Persistence stores backing the lookup history
# Author: Ralph Agent
# Creation Date: 2026-02-10
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-10    | Ralph Agent  | Initial implementation
# ================================================================================
################################################################################

"""
History persistence stores.

A store has two operations: save(vehicles) overwrites the whole list and
load() returns it (empty if nothing saved). Stores never expose partial
writes.

Stores:
- InMemoryHistoryStore: lock-guarded list, lost at process exit
- SqliteHistoryStore: one SQLite table, each save is a single transaction

Usage:
    from vinscout.history.stores import SqliteHistoryStore

    store = SqliteHistoryStore('./data/vinscout.db')
    store.initialize()
    store.save([vehicle])
"""

import json
import logging
import os
import sqlite3
import threading
from abc import ABC, abstractmethod
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from vinscout.vehicle.types import Vehicle

from .exceptions import HistoryLoadError, HistorySaveError, HistoryStoreError

logger = logging.getLogger(__name__)


# ================================================================================
# Store Interface
# ================================================================================

class BasePersistenceStore(ABC):
    """
    Interface for a history persistence backend.

    Implementations must:
    - save(): replace the stored list with the given one, all or nothing
    - load(): return the stored list in saved order, or [] if never saved
    """

    @abstractmethod
    def save(self, vehicles: list[Vehicle]) -> None:
        """
        Persist vehicles, overwriting any previously stored list.

        Raises:
            HistorySaveError: If the list could not be written
        """
        pass

    @abstractmethod
    def load(self) -> list[Vehicle]:
        """
        Load the previously persisted list.

        Raises:
            HistoryLoadError: If the stored list could not be read
        """
        pass


# ================================================================================
# In-Memory Store
# ================================================================================

class InMemoryHistoryStore(BasePersistenceStore):
    """Thread-safe in-memory store. Data is lost when the process exits."""

    def __init__(self) -> None:
        self._vehicles: list[Vehicle] = []
        self._lock = threading.Lock()

    def save(self, vehicles: list[Vehicle]) -> None:
        with self._lock:
            self._vehicles = list(vehicles)

    def load(self) -> list[Vehicle]:
        with self._lock:
            return list(self._vehicles)


# ================================================================================
# SQLite Store
# ================================================================================

SCHEMA_VEHICLE_HISTORY = """
CREATE TABLE IF NOT EXISTS vehicle_history (
    -- Position in the history list, 0 = newest
    position INTEGER PRIMARY KEY,

    vin TEXT NOT NULL,

    -- Vehicle.toDict() as JSON
    vehicle_json TEXT NOT NULL,

    -- Audit column
    saved_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class SqliteHistoryStore(BasePersistenceStore):
    """
    SQLite-backed history store.

    Each save() deletes and re-inserts every row inside one transaction,
    so a failed save leaves the previous list intact.

    Attributes:
        dbPath: Path to the SQLite database file (':memory:' is not
            supported since every operation opens a fresh connection)
    """

    def __init__(self, dbPath: str):
        self.dbPath = dbPath
        self._initialized = False

    @contextmanager
    def connect(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Context manager for database connections.

        Commits on successful exit, rolls back on error, always closes.

        Raises:
            HistoryStoreError: If the connection or a statement fails
        """
        conn = None
        try:
            dbDir = os.path.dirname(self.dbPath)
            if dbDir:
                Path(dbDir).mkdir(parents=True, exist_ok=True)

            conn = sqlite3.connect(self.dbPath, timeout=30.0)
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            raise HistoryStoreError(
                f"History database error: {e}",
                details={'path': self.dbPath, 'error': str(e)}
            ) from e
        finally:
            if conn:
                conn.close()

    def initialize(self) -> None:
        """
        Create the history table if it does not exist. Idempotent.

        Raises:
            HistoryStoreError: If schema creation fails
        """
        with self.connect() as conn:
            conn.execute(SCHEMA_VEHICLE_HISTORY)
        self._initialized = True
        logger.debug(f"History store initialized at {self.dbPath}")

    def save(self, vehicles: list[Vehicle]) -> None:
        self._ensureInitialized()

        rows = [
            (position, vehicle.vin, json.dumps(vehicle.toDict()))
            for position, vehicle in enumerate(vehicles)
        ]

        try:
            with self.connect() as conn:
                conn.execute("DELETE FROM vehicle_history")
                conn.executemany(
                    "INSERT INTO vehicle_history (position, vin, vehicle_json) "
                    "VALUES (?, ?, ?)",
                    rows
                )
        except HistoryStoreError as e:
            raise HistorySaveError(e.message, details=e.details) from e

        logger.debug(f"Saved {len(rows)} history entries")

    def load(self) -> list[Vehicle]:
        self._ensureInitialized()

        try:
            with self.connect() as conn:
                rows = conn.execute(
                    "SELECT vehicle_json FROM vehicle_history ORDER BY position"
                ).fetchall()
        except HistoryStoreError as e:
            raise HistoryLoadError(e.message, details=e.details) from e

        try:
            return [Vehicle.fromDict(json.loads(row[0])) for row in rows]
        except (ValueError, TypeError) as e:
            raise HistoryLoadError(
                f"Corrupt history record: {e}",
                details={'path': self.dbPath}
            ) from e

    def _ensureInitialized(self) -> None:
        if not self._initialized:
            self.initialize()
