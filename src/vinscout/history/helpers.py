################################################################################
# File Name: helpers.py
# Purpose/Description: History cache factory functions
# Author: Ralph Agent
# Creation Date: 2026-02-10
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-10    | Ralph Agent  | Initial creation
# ================================================================================
################################################################################

"""
History helper functions module.

Provides factory functions for building a HistoryCache from configuration.
"""

import logging
from typing import Any, Dict, Optional

from .cache import MAX_HISTORY_ITEMS, HistoryCache
from .stores import BasePersistenceStore, InMemoryHistoryStore, SqliteHistoryStore

logger = logging.getLogger(__name__)

STORAGE_MEMORY = 'memory'
STORAGE_SQLITE = 'sqlite'


def createHistoryStoreFromConfig(config: Dict[str, Any]) -> BasePersistenceStore:
    """
    Create the persistence store named by history.storage.

    Args:
        config: Configuration dictionary with 'history' and 'database' sections

    Returns:
        InMemoryHistoryStore or SqliteHistoryStore

    Raises:
        ValueError: If the storage type is unknown or sqlite has no path
    """
    storage = config.get('history', {}).get('storage', STORAGE_MEMORY)

    if storage == STORAGE_MEMORY:
        return InMemoryHistoryStore()

    if storage == STORAGE_SQLITE:
        dbPath = config.get('database', {}).get('path')
        if not dbPath:
            raise ValueError("database.path is required for sqlite history storage")
        return SqliteHistoryStore(dbPath)

    raise ValueError(f"Unknown history storage type: {storage}")


def createHistoryCacheFromConfig(
    config: Dict[str, Any],
    store: Optional[BasePersistenceStore] = None
) -> HistoryCache:
    """
    Create a HistoryCache from configuration.

    Args:
        config: Configuration dictionary
        store: Optional store override; when omitted the store is built
            from history.storage

    Returns:
        Configured HistoryCache instance
    """
    if store is None:
        store = createHistoryStoreFromConfig(config)

    maxItems = config.get('history', {}).get('maxItems', MAX_HISTORY_ITEMS)
    cache = HistoryCache(store=store, maxItems=maxItems)

    logger.debug(
        f"HistoryCache created | store={type(store).__name__} | maxItems={maxItems}"
    )
    return cache
