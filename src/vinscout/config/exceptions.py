################################################################################
# File Name: exceptions.py
# Purpose/Description: VIN Scout configuration exception classes
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
VIN Scout configuration exception classes.

Usage:
    from vinscout.config.exceptions import VinScoutConfigError

    try:
        config = loadVinScoutConfig('path/to/vinscout_config.json')
    except VinScoutConfigError as e:
        print(f"Config error: {e}")
        print(f"Missing fields: {e.missingFields}")
        print(f"Invalid fields: {e.invalidFields}")
"""

from common.error_handler import ConfigurationError


class VinScoutConfigError(ConfigurationError):
    """
    Raised when configuration loading or validation fails.

    Attributes:
        missingFields: List of required field paths that are missing
        invalidFields: List of field paths with invalid values
    """

    def __init__(
        self,
        message: str,
        missingFields: list[str] | None = None,
        invalidFields: list[str] | None = None
    ):
        self.missingFields = missingFields or []
        self.invalidFields = invalidFields or []
        super().__init__(
            message,
            details={
                'missingFields': self.missingFields,
                'invalidFields': self.invalidFields,
            }
        )
