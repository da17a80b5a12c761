################################################################################
# File Name: test_history_cache.py
# Purpose/Description: Tests for the bounded vehicle history cache
# Author: Ralph Agent
# Creation Date: 2026-02-11
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-11    | Ralph Agent  | Initial implementation
# 2026-02-12    | Ralph Agent  | maxItems capped at MAX_HISTORY_ITEMS
# ================================================================================
################################################################################

"""
Tests for the vinscout.history.cache module.

Run with:
    pytest tests/test_history_cache.py -v
"""

import sys
import threading
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from vinscout.history.cache import MAX_HISTORY_ITEMS, HistoryCache
from vinscout.history.exceptions import HistoryLoadError, HistorySaveError
from vinscout.history.helpers import createHistoryCacheFromConfig
from vinscout.history.stores import InMemoryHistoryStore, SqliteHistoryStore

from tests.test_utils import makeVehicle


def vinFor(index: int) -> str:
    """17-character VIN-shaped key; the cache does not validate."""
    return f"TESTVIN{index:010d}"


class TestRecord:
    """Tests for record()."""

    def test_record_single_historyContainsIt(self):
        """
        Given: An empty cache
        When: One vehicle is recorded
        Then: history() returns just that vehicle
        """
        cache = HistoryCache()
        vehicle = makeVehicle(vinFor(1))

        cache.record(vehicle)

        assert cache.history() == [vehicle]

    def test_record_newestFirst(self):
        """
        Given: Three vehicles recorded in order
        When: history() is called
        Then: The most recent is first
        """
        cache = HistoryCache()
        for i in range(3):
            cache.record(makeVehicle(vinFor(i)))

        assert [v.vin for v in cache.history()] == [vinFor(2), vinFor(1), vinFor(0)]

    def test_record_sameVinDifferentCase_replacesEntry(self):
        """
        Given: A vehicle recorded, then the same VIN in lowercase with new data
        When: history() is called
        Then: One entry, reflecting the second record, at the front
        """
        cache = HistoryCache(InMemoryHistoryStore())
        cache.record(makeVehicle('1HGCM82633A004352', model='Accord'))
        cache.record(makeVehicle(vinFor(9)))

        cache.record(makeVehicle('1hgcm82633a004352', model='Civic'))

        history = cache.history()
        assert [v.vin for v in history] == ['1HGCM82633A004352', vinFor(9)]
        assert history[0].model == 'Civic'

    def test_record_existingVin_movesToFrontWithoutGrowing(self):
        """
        Given: Three vehicles recorded
        When: The oldest is recorded again
        Then: Length stays 3 and it moves to the front
        """
        cache = HistoryCache()
        for i in range(3):
            cache.record(makeVehicle(vinFor(i)))

        cache.record(makeVehicle(vinFor(0)))

        assert [v.vin for v in cache.history()] == [vinFor(0), vinFor(2), vinFor(1)]

    def test_record_sixDistinct_keepsFiveMostRecent(self):
        """
        Given: Six distinct vehicles recorded in sequence
        When: history() is called
        Then: Five entries, most recent first, first-recorded absent
        """
        cache = HistoryCache()
        for i in range(6):
            cache.record(makeVehicle(vinFor(i)))

        vins = [v.vin for v in cache.history()]
        assert len(vins) == MAX_HISTORY_ITEMS == 5
        assert vins == [vinFor(i) for i in (5, 4, 3, 2, 1)]
        assert vinFor(0) not in vins

    def test_record_customMaxItems_isRespected(self):
        """
        Given: A cache with maxItems=2
        When: Three vehicles are recorded
        Then: Only the two newest remain
        """
        cache = HistoryCache(maxItems=2)
        for i in range(3):
            cache.record(makeVehicle(vinFor(i)))

        assert [v.vin for v in cache.history()] == [vinFor(2), vinFor(1)]

    @pytest.mark.parametrize('maxItems', [0, -1, MAX_HISTORY_ITEMS + 1, 10])
    def test_init_maxItemsOutOfRange_raisesValueError(self, maxItems: int):
        """
        Given: maxItems below 1 or above MAX_HISTORY_ITEMS
        When: HistoryCache is constructed
        Then: ValueError is raised
        """
        with pytest.raises(ValueError):
            HistoryCache(maxItems=maxItems)

    def test_record_persistsWholeListEveryTime(self):
        """
        Given: A store mock
        When: Two vehicles are recorded
        Then: save() receives the full list each time
        """
        store = MagicMock()
        saved = []
        store.load.side_effect = lambda: list(saved[-1]) if saved else []
        store.save.side_effect = lambda vehicles: saved.append(list(vehicles))
        cache = HistoryCache(store)

        cache.record(makeVehicle(vinFor(1)))
        cache.record(makeVehicle(vinFor(2)))

        assert [len(s) for s in saved] == [1, 2]


class TestClear:
    """Tests for clear()."""

    def test_clear_populated_historyEmpty(self):
        """
        Given: A cache with entries
        When: clear() is called
        Then: history() is empty
        """
        cache = HistoryCache()
        cache.record(makeVehicle(vinFor(1)))

        cache.clear()

        assert cache.history() == []

    def test_clear_thenRecord_works(self):
        """
        Given: A cleared cache
        When: A vehicle is recorded
        Then: It is the only entry
        """
        cache = HistoryCache()
        cache.record(makeVehicle(vinFor(1)))
        cache.clear()

        cache.record(makeVehicle(vinFor(2)))

        assert [v.vin for v in cache.history()] == [vinFor(2)]


class TestStoreFailures:
    """Tests for swallowed persistence failures."""

    def test_history_loadFails_returnsEmpty(self):
        """
        Given: A store whose load() raises
        When: history() is called
        Then: An empty list is returned and nothing propagates
        """
        store = MagicMock()
        store.load.side_effect = HistoryLoadError("disk gone")

        assert HistoryCache(store).history() == []

    def test_record_loadFails_treatsAsEmpty(self):
        """
        Given: A store whose load() raises
        When: record() is called
        Then: save() receives a list containing only the new vehicle
        """
        store = MagicMock()
        store.load.side_effect = RuntimeError("corrupt")
        vehicle = makeVehicle(vinFor(1))

        HistoryCache(store).record(vehicle)

        store.save.assert_called_once_with([vehicle])

    def test_record_saveFails_isSwallowed(self, caplog: pytest.LogCaptureFixture):
        """
        Given: A store whose save() raises
        When: record() is called
        Then: No exception propagates and a warning is logged
        """
        store = MagicMock()
        store.load.return_value = []
        store.save.side_effect = HistorySaveError("read-only")

        with caplog.at_level('WARNING'):
            HistoryCache(store).record(makeVehicle(vinFor(1)))

        assert any('Failed to save history' in r.message for r in caplog.records)

    def test_clear_saveFails_isSwallowed(self):
        """
        Given: A store whose save() raises
        When: clear() is called
        Then: No exception propagates
        """
        store = MagicMock()
        store.save.side_effect = OSError("read-only")

        HistoryCache(store).clear()


class TestConcurrency:
    """Tests for concurrent record() calls."""

    def test_record_concurrentThreads_keepsInvariants(self):
        """
        Given: Many threads recording overlapping VINs into one cache
        When: All threads finish
        Then: History has at most 5 entries and no duplicate VINs
        """
        cache = HistoryCache()
        barrier = threading.Barrier(8)

        def worker(offset: int) -> None:
            barrier.wait()
            for i in range(25):
                cache.record(makeVehicle(vinFor((offset + i) % 10)))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        vins = [v.vin for v in cache.history()]
        assert len(vins) == 5
        assert len(set(vins)) == 5

    def test_record_concurrentThreads_noLostUpdates(self):
        """
        Given: Five threads each recording one distinct VIN
        When: All threads finish
        Then: All five VINs are present
        """
        cache = HistoryCache()
        barrier = threading.Barrier(5)

        def worker(index: int) -> None:
            barrier.wait()
            cache.record(makeVehicle(vinFor(index)))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert {v.vin for v in cache.history()} == {vinFor(i) for i in range(5)}


class TestCreateHistoryCacheFromConfig:
    """Tests for the config factory."""

    def test_createFromConfig_memory_usesInMemoryStore(self, sampleConfig: Dict[str, Any]):
        """
        Given: history.storage = memory
        When: createHistoryCacheFromConfig() is called
        Then: A working cache is returned
        """
        cache = createHistoryCacheFromConfig(sampleConfig)
        cache.record(makeVehicle(vinFor(1)))

        assert len(cache.history()) == 1

    def test_createFromConfig_sqlite_persistsAcrossInstances(
        self,
        sampleConfig: Dict[str, Any],
        tmp_path: Path
    ):
        """
        Given: history.storage = sqlite with a database path
        When: Two caches are built from the same config
        Then: The second sees what the first recorded
        """
        sampleConfig['history']['storage'] = 'sqlite'
        sampleConfig['database'] = {'path': str(tmp_path / 'history.db')}

        createHistoryCacheFromConfig(sampleConfig).record(makeVehicle(vinFor(1)))
        cache = createHistoryCacheFromConfig(sampleConfig)

        assert [v.vin for v in cache.history()] == [vinFor(1)]
        assert isinstance(cache._store, SqliteHistoryStore)

    def test_createFromConfig_maxItems_isApplied(self, sampleConfig: Dict[str, Any]):
        """
        Given: history.maxItems = 3
        When: createHistoryCacheFromConfig() is called
        Then: The cache caps at 3
        """
        sampleConfig['history']['maxItems'] = 3

        assert createHistoryCacheFromConfig(sampleConfig).maxItems == 3

    def test_createFromConfig_sqliteWithoutPath_raisesValueError(
        self,
        sampleConfig: Dict[str, Any]
    ):
        """
        Given: history.storage = sqlite and no database.path
        When: createHistoryCacheFromConfig() is called
        Then: ValueError is raised
        """
        sampleConfig['history']['storage'] = 'sqlite'

        with pytest.raises(ValueError):
            createHistoryCacheFromConfig(sampleConfig)
