################################################################################
# File Name: exceptions.py
# Purpose/Description: Lookup history persistence exceptions
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
History exceptions module.

- HistoryStoreError: Base exception for persistence store failures
- HistoryLoadError: Stored history could not be read or parsed
- HistorySaveError: History could not be written
"""

from typing import Any, Dict, Optional


class HistoryStoreError(Exception):
    """Base exception for history persistence errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class HistoryLoadError(HistoryStoreError):
    """Stored history could not be read or parsed."""
    pass


class HistorySaveError(HistoryStoreError):
    """History could not be written."""
    pass
