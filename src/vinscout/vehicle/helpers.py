################################################################################
# File Name: helpers.py
# Purpose/Description: Vehicle lookup factory and helper functions
# Author: Ralph Agent
# Creation Date: 2026-02-09
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-09    | Ralph Agent  | Initial creation
# ================================================================================
################################################################################

"""
Vehicle helper functions module.

Provides factory functions for building a VehicleLookup from configuration.
"""

import logging
from typing import Any, Dict, Optional

from .lookup import DEFAULT_API_TIMEOUT, DEFAULT_USER_AGENT, NHTSA_API_BASE_URL, VehicleLookup
from .transport import BaseHttpTransport

logger = logging.getLogger(__name__)


def createVehicleLookupFromConfig(
    config: Dict[str, Any],
    transport: Optional[BaseHttpTransport] = None
) -> VehicleLookup:
    """
    Create a VehicleLookup from configuration.

    Args:
        config: Configuration dictionary with 'vinDecoder' section
        transport: Optional transport override (tests inject a fake here)

    Returns:
        Configured VehicleLookup instance

    Example:
        config = loadVinScoutConfig('vinscout_config.json')
        lookup = createVehicleLookupFromConfig(config)
    """
    vinConfig = config.get('vinDecoder', {})

    lookup = VehicleLookup(
        transport=transport,
        apiBaseUrl=vinConfig.get('apiBaseUrl', NHTSA_API_BASE_URL),
        timeoutSeconds=vinConfig.get('apiTimeoutSeconds', DEFAULT_API_TIMEOUT),
        userAgent=vinConfig.get('userAgent', DEFAULT_USER_AGENT)
    )

    logger.debug(
        f"VehicleLookup created | baseUrl={lookup.apiBaseUrl} | "
        f"timeout={lookup.timeoutSeconds}s"
    )
    return lookup
