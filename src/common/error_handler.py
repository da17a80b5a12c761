################################################################################
# File Name: error_handler.py
# Purpose/Description: Error categories and last-resort error reporting
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-09    | Ralph Agent   | Single-shot lookups: categories only, no retry
# 2026-02-12    | Ralph Agent   | Type-based classification, report via toDict
# ================================================================================
################################################################################

"""
Error handling module.

Every VIN Scout exception derives from BaseError and carries a category
that tells the caller how to present it:

- RETRYABLE: the same lookup may succeed later (timeout, network down)
- CONFIGURATION: the config file or environment must be fixed
- DATA: the VIN or the API payload is at fault
- SYSTEM: anything unexpected

Usage:
    from common.error_handler import BaseError, handleError

    try:
        runLookup(session, vin)
    except Exception as e:
        report = handleError(e, context={'vin': vin}, reraise=False)
"""

import logging
from enum import Enum
from typing import Any
from urllib.error import URLError

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """How a failure should be presented."""
    RETRYABLE = 'retryable'
    CONFIGURATION = 'config'
    DATA = 'data'
    SYSTEM = 'system'


# ================================================================================
# Custom Exception Classes
# ================================================================================

class BaseError(Exception):
    """Base exception for all VIN Scout errors."""

    category: ErrorCategory = ErrorCategory.SYSTEM

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def toDict(self) -> dict[str, Any]:
        """Serializable form used in error reports."""
        return {
            'type': self.__class__.__name__,
            'category': self.category.value,
            'message': self.message,
            'details': self.details
        }


class RetryableError(BaseError):
    """Failure the user may retry (timeout, connection refused)."""
    category = ErrorCategory.RETRYABLE


class ConfigurationError(BaseError):
    """Configuration validation failure."""
    category = ErrorCategory.CONFIGURATION


# ================================================================================
# Classification and Reporting
# ================================================================================

# Built-in exceptions that map onto a category by type alone
_RETRYABLE_TYPES = (TimeoutError, ConnectionError, URLError)
_DATA_TYPES = (ValueError, KeyError, UnicodeError)

_LOG_LEVELS = {
    ErrorCategory.RETRYABLE: logging.WARNING,
    ErrorCategory.CONFIGURATION: logging.ERROR,
    ErrorCategory.DATA: logging.WARNING,
    ErrorCategory.SYSTEM: logging.ERROR,
}


def classifyError(error: Exception) -> ErrorCategory:
    """
    Classify an error into a category.

    BaseError subclasses carry their own category. Built-in exceptions are
    classified by type; anything unrecognised is SYSTEM.

    Args:
        error: Exception to classify

    Returns:
        ErrorCategory for the error
    """
    if isinstance(error, BaseError):
        return error.category
    if isinstance(error, _RETRYABLE_TYPES):
        return ErrorCategory.RETRYABLE
    if isinstance(error, _DATA_TYPES):
        return ErrorCategory.DATA
    return ErrorCategory.SYSTEM


def handleError(
    error: Exception,
    context: dict[str, Any] | None = None,
    reraise: bool = True
) -> dict[str, Any]:
    """
    Log an error at the level its category calls for.

    SYSTEM errors are logged with their traceback.

    Args:
        error: Exception that occurred
        context: Additional context information (e.g. the VIN)
        reraise: Whether to re-raise the exception

    Returns:
        Report with type, category, message, details and context

    Raises:
        The original exception if reraise is True
    """
    category = classifyError(error)

    if isinstance(error, BaseError):
        report = error.toDict()
    else:
        report = {
            'type': type(error).__name__,
            'category': category.value,
            'message': str(error),
            'details': {}
        }
    report['context'] = context or {}

    logger.log(
        _LOG_LEVELS[category],
        f"{report['type']} ({category.value}): {error} | context={report['context']}",
        exc_info=category == ErrorCategory.SYSTEM
    )

    if reraise:
        raise error

    return report
