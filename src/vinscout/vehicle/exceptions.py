################################################################################
# File Name: exceptions.py
# Purpose/Description: VIN validation, lookup and transport exceptions
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
Vehicle exceptions module.

Lookup errors form a flat taxonomy under VinLookupError:
- VinValidationError: local validation failure, never reaches the network
    - InvalidLengthError
    - InvalidCharactersError
    - InvalidCheckDigitError
- LookupTimeoutError: transport reported a timeout
- NetworkIssueError: any other transport failure or non-2xx status
- ApiError: API answered but flagged the VIN as unresolved
- DecodingError: response body did not match the expected shape

Transport collaborators raise TransportError / TransportTimeoutError.
These never escape the lookup pipeline.
"""

from typing import Any, Dict, Optional

from common.error_handler import BaseError, ErrorCategory, RetryableError


# ================================================================================
# Lookup Exceptions
# ================================================================================

class VinLookupError(BaseError):
    """
    Base exception for every classified lookup failure.

    Attributes:
        detail: Detail string attached by the failure (may be None)
        userMessage: Human-readable message suitable for presentation
    """

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.detail = detail

    @property
    def userMessage(self) -> str:
        return self.message


class VinValidationError(VinLookupError):
    """VIN failed local validation."""
    category = ErrorCategory.DATA


class InvalidLengthError(VinValidationError):
    """The VIN is not exactly 17 characters long."""

    def __init__(self, length: int = 0):
        super().__init__(
            "A VIN must be exactly 17 characters long.",
            details={'length': length}
        )
        self.length = length


class InvalidCharactersError(VinValidationError):
    """The VIN contains characters outside the VIN alphabet."""

    def __init__(self) -> None:
        super().__init__(
            "A VIN may only contain uppercase letters and digits, excluding I, O, and Q."
        )


class InvalidCheckDigitError(VinValidationError):
    """The ISO 3779 check digit (position 9) does not match."""

    def __init__(self, expected: str = '', actual: str = ''):
        super().__init__(
            "The VIN check digit is invalid. Please verify you entered the VIN correctly.",
            details={'expected': expected, 'actual': actual}
        )


class LookupTimeoutError(VinLookupError):
    """The request timed out before a response was received."""
    category = ErrorCategory.RETRYABLE

    def __init__(self, timeoutSeconds: Optional[float] = None):
        super().__init__(
            "The request timed out. Please check your internet connection and try again.",
            details={'timeoutSeconds': timeoutSeconds} if timeoutSeconds is not None else None
        )


class NetworkIssueError(VinLookupError):
    """A network-level failure or a non-2xx HTTP status."""
    category = ErrorCategory.RETRYABLE

    def __init__(self, detail: str, statusCode: Optional[int] = None):
        super().__init__(
            f"A network error occurred: {detail}",
            detail=detail,
            details={'statusCode': statusCode} if statusCode is not None else None
        )
        self.statusCode = statusCode


class ApiError(VinLookupError):
    """The decoding API answered but reported an error for the VIN."""
    category = ErrorCategory.DATA

    def __init__(self, text: str):
        super().__init__(f"The NHTSA API reported an error: {text}", detail=text)
        self.text = text


class DecodingError(VinLookupError):
    """The response body could not be decoded into the expected model."""
    category = ErrorCategory.SYSTEM

    def __init__(self, detail: str):
        super().__init__(f"Failed to decode the server response: {detail}", detail=detail)


# ================================================================================
# Transport Exceptions
# ================================================================================

class TransportError(RetryableError):
    """Transport-level failure other than a timeout."""
    pass


class TransportTimeoutError(TransportError):
    """Transport-level timeout."""
    pass
