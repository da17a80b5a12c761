################################################################################
# File Name: __init__.py
# Purpose/Description: VIN Scout configuration subpackage
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
Configuration Subpackage.

Functions:
    loadVinScoutConfig: Load, resolve and validate the JSON configuration
    validateVinScoutConfig: Validate an already-loaded configuration

Exceptions:
    VinScoutConfigError: Loading or validation failed

Usage:
    from vinscout.config import loadVinScoutConfig
"""

from .exceptions import VinScoutConfigError
from .loader import (
    VALID_HISTORY_STORAGE,
    VINSCOUT_DEFAULTS,
    VINSCOUT_REQUIRED_FIELDS,
    loadVinScoutConfig,
    validateVinScoutConfig,
)

__all__ = [
    'VinScoutConfigError',
    'loadVinScoutConfig',
    'validateVinScoutConfig',
    'VINSCOUT_DEFAULTS',
    'VINSCOUT_REQUIRED_FIELDS',
    'VALID_HISTORY_STORAGE',
]
