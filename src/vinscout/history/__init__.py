################################################################################
# File Name: __init__.py
# Purpose/Description: History subpackage for recently decoded vehicles
# Author: Ralph Agent
# Creation Date: 2026-02-10
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-10    | Ralph Agent  | Initial subpackage creation
# ================================================================================
################################################################################
"""
History Subpackage.

Classes:
    HistoryCache: Bounded, deduplicated, newest-first vehicle history
    BasePersistenceStore: Store interface (save/load)
    InMemoryHistoryStore: Process-lifetime store
    SqliteHistoryStore: SQLite-backed store

Exceptions:
    HistoryStoreError, HistoryLoadError, HistorySaveError

Usage:
    from vinscout.history import HistoryCache, SqliteHistoryStore
"""

from .exceptions import HistoryLoadError, HistorySaveError, HistoryStoreError
from .stores import (
    BasePersistenceStore,
    InMemoryHistoryStore,
    SqliteHistoryStore,
)
from .cache import MAX_HISTORY_ITEMS, HistoryCache
from .helpers import createHistoryCacheFromConfig, createHistoryStoreFromConfig

__all__ = [
    # Exceptions
    'HistoryStoreError',
    'HistoryLoadError',
    'HistorySaveError',
    # Stores
    'BasePersistenceStore',
    'InMemoryHistoryStore',
    'SqliteHistoryStore',
    # Cache
    'HistoryCache',
    'MAX_HISTORY_ITEMS',
    # Helpers
    'createHistoryCacheFromConfig',
    'createHistoryStoreFromConfig',
]
