################################################################################
# File Name: session.py
# Purpose/Description: Application context composing lookup and history
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
Session module.

A VinScoutSession owns one VehicleLookup and one HistoryCache. It is built
once by the entry point and handed to every caller.

Each decode() takes a new request generation. A result is recorded in
history only if no later decode() has started in the meantime; older
results come back flagged as stale. In-flight lookups are never cancelled.

Usage:
    from vinscout.session import createSessionFromConfig

    session = createSessionFromConfig(config)
    outcome = session.decode('1hgcm82633a004352')
    if outcome.success:
        print(outcome.vehicle.describe())
    else:
        print(outcome.errorMessage)
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

from vinscout.history import HistoryCache, createHistoryCacheFromConfig
from vinscout.vehicle import (
    Vehicle,
    VehicleLookup,
    VinLookupError,
    createVehicleLookupFromConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeOutcome:
    """
    Result of one session decode.

    Attributes:
        vin: Normalized (trimmed, uppercased) input
        generation: Request generation this decode ran under (0 if no request)
        vehicle: Decoded vehicle on success
        error: Classified lookup error on failure
        isStale: True if a newer decode started before this one finished
    """
    vin: str
    generation: int
    vehicle: Optional[Vehicle] = None
    error: Optional[VinLookupError] = None
    isStale: bool = False

    @property
    def success(self) -> bool:
        return self.vehicle is not None

    @property
    def errorMessage(self) -> Optional[str]:
        return self.error.userMessage if self.error is not None else None


class VinScoutSession:
    """
    Composes the lookup pipeline and the history cache.

    Attributes:
        lookup: VehicleLookup used for every decode
        history: HistoryCache that successful decodes are recorded into
    """

    def __init__(self, lookup: VehicleLookup, history: HistoryCache):
        self.lookup = lookup
        self.history = history
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def currentGeneration(self) -> int:
        """Generation of the most recently started decode."""
        with self._lock:
            return self._generation

    def decode(self, vin: str) -> DecodeOutcome:
        """
        Look up a VIN and record the vehicle if this is still the latest decode.

        Lookup errors are returned in the outcome, never raised.

        Args:
            vin: Raw user input

        Returns:
            DecodeOutcome describing the result
        """
        normalized = vin.strip().upper()
        if not normalized:
            return DecodeOutcome(vin=normalized, generation=0)

        with self._lock:
            self._generation += 1
            generation = self._generation

        try:
            vehicle = self.lookup.lookup(normalized)
        except VinLookupError as e:
            return DecodeOutcome(
                vin=normalized,
                generation=generation,
                error=e,
                isStale=self._isStale(generation)
            )

        if self._isStale(generation):
            logger.debug(
                f"Discarding stale result for {normalized} "
                f"(generation {generation})"
            )
            return DecodeOutcome(
                vin=normalized,
                generation=generation,
                vehicle=vehicle,
                isStale=True
            )

        self.history.record(vehicle)
        return DecodeOutcome(vin=normalized, generation=generation, vehicle=vehicle)

    def recentVehicles(self) -> list[Vehicle]:
        """Get recently decoded vehicles, newest first."""
        return self.history.history()

    def clearHistory(self) -> None:
        """Remove every vehicle from history."""
        self.history.clear()
        logger.info("Lookup history cleared")

    def _isStale(self, generation: int) -> bool:
        with self._lock:
            return generation != self._generation


def createSessionFromConfig(config: Dict[str, Any]) -> VinScoutSession:
    """
    Create a VinScoutSession from configuration.

    Args:
        config: Validated configuration dictionary

    Returns:
        Session with lookup and history built from config

    Raises:
        ValueError: If the history store cannot be built from config
    """
    lookup = createVehicleLookupFromConfig(config)
    history = createHistoryCacheFromConfig(config)

    logger.debug("Session created")
    return VinScoutSession(lookup, history)
