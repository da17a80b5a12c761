################################################################################
# File Name: cache.py
# Purpose/Description: Bounded, deduplicated history of decoded vehicles
# Author: Ralph Agent
# Creation Date: 2026-02-10
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-10    | Ralph Agent  | Initial creation
# 2026-02-12    | Ralph Agent  | maxItems capped at MAX_HISTORY_ITEMS
# ================================================================================
################################################################################

"""
History cache module.

Keeps the most recently decoded vehicles, newest first, unique by VIN
(case-insensitive) and capped at maxItems. Every mutation persists the
whole list through the injected store.

History is a convenience feature: store failures are logged and swallowed.
A failed load reads as an empty list and a failed save is dropped.

Usage:
    from vinscout.history import HistoryCache

    cache = HistoryCache()
    cache.record(vehicle)
    for entry in cache.history():
        print(entry.getVehicleSummary())
"""

import logging
import threading
from typing import Optional

from vinscout.vehicle.types import Vehicle

from .stores import BasePersistenceStore, InMemoryHistoryStore

logger = logging.getLogger(__name__)


# Maximum number of vehicles kept in history
MAX_HISTORY_ITEMS = 5


class HistoryCache:
    """
    Bounded, deduplicated, newest-first vehicle history.

    record() and clear() run load-mutate-save under an internal lock, so
    concurrent callers sharing one cache cannot interleave their writes.

    Attributes:
        maxItems: Maximum number of entries kept
    """

    def __init__(
        self,
        store: Optional[BasePersistenceStore] = None,
        maxItems: int = MAX_HISTORY_ITEMS
    ):
        """
        Initialize the cache.

        Args:
            store: Persistence store. Defaults to InMemoryHistoryStore.
            maxItems: Maximum number of entries kept, 1 to MAX_HISTORY_ITEMS

        Raises:
            ValueError: If maxItems is outside 1..MAX_HISTORY_ITEMS
        """
        if not 1 <= maxItems <= MAX_HISTORY_ITEMS:
            raise ValueError(
                f"maxItems must be between 1 and {MAX_HISTORY_ITEMS}, got {maxItems}"
            )

        self._store = store if store is not None else InMemoryHistoryStore()
        self.maxItems = maxItems
        self._lock = threading.Lock()

    def record(self, vehicle: Vehicle) -> None:
        """
        Add a vehicle to the front of the history.

        Any existing entry with the same VIN is removed first, so re-recording
        a VIN moves it to the front without growing the list.

        Args:
            vehicle: Successfully decoded vehicle
        """
        key = vehicle.vin.upper()

        with self._lock:
            entries = self._loadOrEmpty()
            entries = [entry for entry in entries if entry.vin.upper() != key]
            entries.insert(0, vehicle)
            del entries[self.maxItems:]
            self._saveQuietly(entries)

        logger.debug(f"Recorded {key} in history ({len(entries)} entries)")

    def history(self) -> list[Vehicle]:
        """
        Get the stored history, newest first.

        Returns:
            List of vehicles, or [] if the store could not be read
        """
        return self._loadOrEmpty()

    def clear(self) -> None:
        """Remove every entry from the history."""
        with self._lock:
            self._saveQuietly([])
        logger.debug("History cleared")

    def _loadOrEmpty(self) -> list[Vehicle]:
        try:
            return list(self._store.load())
        except Exception as e:
            logger.warning(f"Failed to load history, treating as empty: {e}")
            return []

    def _saveQuietly(self, entries: list[Vehicle]) -> None:
        try:
            self._store.save(entries)
        except Exception as e:
            logger.warning(f"Failed to save history: {e}")
