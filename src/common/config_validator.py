################################################################################
# File Name: config_validator.py
# Purpose/Description: Dotted-key required fields, defaults and type checks
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-09    | Ralph Agent   | Defaults replaced with VIN Scout settings
# 2026-02-12    | Ralph Agent   | Keys and defaults supplied by the caller only
# ================================================================================
################################################################################

"""
Configuration validation module.

Keys are written in dot notation ('vinDecoder.apiBaseUrl') and address
nested JSON objects. The validator knows nothing about VIN Scout settings;
vinscout.config.loader passes in its own required keys and defaults.

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator(
        requiredKeys=['vinDecoder.apiBaseUrl'],
        defaults={'history.maxItems': 5}
    )
    config = validator.validate(rawConfig)
"""

import copy
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when required configuration fields are missing."""

    def __init__(self, message: str, missingFields: Optional[List[str]] = None):
        super().__init__(message)
        self.missingFields = missingFields or []


class ConfigValidator:
    """
    Checks required keys, fills defaults and type-checks single fields.

    Attributes:
        requiredKeys: Keys that must be present and non-empty
        defaults: Values applied where a key is absent or None
    """

    def __init__(
        self,
        requiredKeys: Optional[List[str]] = None,
        defaults: Optional[Dict[str, Any]] = None
    ):
        self.requiredKeys = list(requiredKeys or [])
        self.defaults = dict(defaults or {})

    def validate(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check required keys, then fill in defaults.

        The config is updated in place and returned.

        Args:
            config: Raw configuration dictionary

        Returns:
            The same dictionary with defaults applied

        Raises:
            ConfigValidationError: If any required key is missing or empty
        """
        missingFields = [
            key for key in self.requiredKeys
            if self.getNestedValue(config, key) in (None, '')
        ]
        if missingFields:
            raise ConfigValidationError(
                f"Missing required configuration fields: {', '.join(missingFields)}",
                missingFields=missingFields
            )

        for key, defaultValue in self.defaults.items():
            if self.getNestedValue(config, key) is None:
                # Copy so list/dict defaults are never shared between configs
                self._setNestedValue(config, key, copy.deepcopy(defaultValue))
                logger.debug(f"Default applied: {key}={defaultValue!r}")

        logger.info("Configuration validated successfully")
        return config

    @staticmethod
    def getNestedValue(config: Dict[str, Any], key: str) -> Any:
        """
        Look up a dotted key.

        Returns:
            The value, or None if any step of the path is missing or not a dict
        """
        node: Any = config
        for part in key.split('.'):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return node

    @staticmethod
    def _setNestedValue(config: Dict[str, Any], key: str, value: Any) -> None:
        *parents, leaf = key.split('.')
        node = config
        for part in parents:
            # Scalars in the way are replaced by a section
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = value

    def validateField(
        self,
        config: Dict[str, Any],
        key: str,
        expectedType: type | tuple[type, ...],
        allowNone: bool = False
    ) -> bool:
        """
        Check the type of one field.

        bool values are rejected unless bool itself is expected, so
        True never passes as an int.

        Args:
            config: Configuration dictionary
            key: Dotted key
            expectedType: Type or tuple of types
            allowNone: Result when the field is missing

        Returns:
            True if the field has an acceptable type
        """
        value = self.getNestedValue(config, key)
        if value is None:
            return allowNone

        expected = expectedType if isinstance(expectedType, tuple) else (expectedType,)
        if isinstance(value, bool) and bool not in expected:
            return False
        return isinstance(value, expected)
