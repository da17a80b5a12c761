################################################################################
# File Name: loader.py
# Purpose/Description: VIN Scout configuration loading and validation
# Author: Ralph Agent
# Creation Date: 2026-02-10
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-10    | Ralph Agent  | Initial implementation
# 2026-02-12    | Ralph Agent  | maxItems capped at MAX_HISTORY_ITEMS
# ================================================================================
################################################################################

"""
VIN Scout configuration loader module.

Loads the JSON configuration, resolves ${VAR} placeholders, checks required
fields, applies defaults and validates the decoder and history sections.

Usage:
    from vinscout.config import loadVinScoutConfig, VinScoutConfigError

    try:
        config = loadVinScoutConfig('src/vinscout_config.json')
    except VinScoutConfigError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
"""

import json
import logging
from typing import Any, Dict, List, Optional

from common.config_validator import ConfigValidationError, ConfigValidator
from common.secrets_loader import loadConfigWithSecrets
from vinscout.history.cache import MAX_HISTORY_ITEMS

from .exceptions import VinScoutConfigError

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

VINSCOUT_REQUIRED_FIELDS: List[str] = [
    'vinDecoder.apiBaseUrl',
]

VALID_HISTORY_STORAGE = ['memory', 'sqlite']

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

VINSCOUT_DEFAULTS: Dict[str, Any] = {
    # Application
    'application.name': 'VIN Scout',
    'application.version': '1.0.0',

    # VIN Decoder
    'vinDecoder.apiBaseUrl': 'https://vpic.nhtsa.dot.gov/api/vehicles/DecodeVinValues',
    'vinDecoder.apiTimeoutSeconds': 15,
    'vinDecoder.userAgent': 'VIN Scout/1.0',

    # History
    'history.storage': 'memory',
    'history.maxItems': MAX_HISTORY_ITEMS,

    # Logging
    'logging.level': 'INFO',
    'logging.maskPII': True,
    'logging.maskVinSerials': False,
}


# =============================================================================
# Public API
# =============================================================================

def loadVinScoutConfig(
    configPath: str,
    envFilePath: Optional[str] = None
) -> Dict[str, Any]:
    """
    Load and validate VIN Scout configuration from file.

    Performs the following operations:
    1. Load environment variables from .env file
    2. Load configuration JSON file and resolve ${VAR} placeholders
    3. Validate required fields and apply default values
    4. Validate field types and values

    Args:
        configPath: Path to the configuration JSON file
        envFilePath: Optional path to .env file (defaults to ./.env)

    Returns:
        Validated configuration dictionary with defaults applied

    Raises:
        VinScoutConfigError: If the file cannot be loaded or validation fails
    """
    logger.info(f"Loading VIN Scout configuration from: {configPath}")

    try:
        config = loadConfigWithSecrets(configPath, envFilePath)
    except FileNotFoundError as e:
        raise VinScoutConfigError(str(e), missingFields=['configFile']) from e
    except json.JSONDecodeError as e:
        raise VinScoutConfigError(
            f"Invalid JSON in configuration file: {configPath}\n"
            f"Parse error: {e.msg} at line {e.lineno}, column {e.colno}",
            invalidFields=['configFile']
        ) from e
    except OSError as e:
        raise VinScoutConfigError(
            f"Cannot read configuration file: {configPath}\nError: {e}",
            missingFields=['configFile']
        ) from e

    if not isinstance(config, dict):
        raise VinScoutConfigError(
            f"Configuration root must be a JSON object: {configPath}",
            invalidFields=['configFile']
        )

    config = validateVinScoutConfig(config)

    logger.info("VIN Scout configuration loaded and validated successfully")
    return config


def validateVinScoutConfig(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate VIN Scout configuration and apply defaults.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated configuration with defaults applied

    Raises:
        VinScoutConfigError: If validation fails
    """
    validator = ConfigValidator(
        requiredKeys=VINSCOUT_REQUIRED_FIELDS,
        defaults=VINSCOUT_DEFAULTS
    )

    try:
        config = validator.validate(config)
    except ConfigValidationError as e:
        raise VinScoutConfigError(
            f"Configuration validation failed: {e}",
            missingFields=e.missingFields
        ) from e

    _validateVinDecoder(config, validator)
    _validateHistory(config, validator)
    _validateLogging(config)

    return config


# =============================================================================
# Private Helpers
# =============================================================================

def _validateVinDecoder(config: Dict[str, Any], validator: ConfigValidator) -> None:
    """
    Validate the vinDecoder section.

    Raises:
        VinScoutConfigError: If the base URL or timeout is invalid
    """
    invalidFields = []

    apiBaseUrl = config['vinDecoder']['apiBaseUrl']
    if not isinstance(apiBaseUrl, str) or not apiBaseUrl.startswith(('http://', 'https://')):
        invalidFields.append('vinDecoder.apiBaseUrl')

    timeout = config['vinDecoder']['apiTimeoutSeconds']
    if not validator.validateField(config, 'vinDecoder.apiTimeoutSeconds', (int, float)) \
            or timeout <= 0:
        invalidFields.append('vinDecoder.apiTimeoutSeconds')

    if not validator.validateField(config, 'vinDecoder.userAgent', str):
        invalidFields.append('vinDecoder.userAgent')

    if invalidFields:
        raise VinScoutConfigError(
            f"Invalid vinDecoder configuration: {', '.join(invalidFields)}. "
            f"apiBaseUrl must be an http(s) URL and apiTimeoutSeconds a "
            f"positive number.",
            invalidFields=invalidFields
        )


def _validateHistory(config: Dict[str, Any], validator: ConfigValidator) -> None:
    """
    Validate the history section and the sqlite database path.

    Raises:
        VinScoutConfigError: If storage, maxItems or database.path is invalid
    """
    history = config['history']

    storage = history['storage']
    if storage not in VALID_HISTORY_STORAGE:
        raise VinScoutConfigError(
            f"Invalid history storage: '{storage}'. "
            f"Must be one of: {', '.join(VALID_HISTORY_STORAGE)}",
            invalidFields=['history.storage']
        )

    if not validator.validateField(config, 'history.maxItems', int) \
            or not 1 <= history['maxItems'] <= MAX_HISTORY_ITEMS:
        raise VinScoutConfigError(
            f"history.maxItems must be an integer from 1 to {MAX_HISTORY_ITEMS}",
            invalidFields=['history.maxItems']
        )

    if storage == 'sqlite':
        dbPath = ConfigValidator.getNestedValue(config, 'database.path')
        if not dbPath:
            raise VinScoutConfigError(
                "database.path is required when history.storage is 'sqlite'",
                missingFields=['database.path']
            )


def _validateLogging(config: Dict[str, Any]) -> None:
    level = str(config['logging']['level']).upper()
    if level not in VALID_LOG_LEVELS:
        raise VinScoutConfigError(
            f"Invalid logging level: '{config['logging']['level']}'. "
            f"Must be one of: {', '.join(VALID_LOG_LEVELS)}",
            invalidFields=['logging.level']
        )
    config['logging']['level'] = level
