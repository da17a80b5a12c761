################################################################################
# File Name: __init__.py
# Purpose/Description: Vehicle subpackage for VIN validation and lookup
# Author: Ralph Agent
# Creation Date: 2026-02-09
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-09    | Ralph Agent  | Initial subpackage creation
# ================================================================================
################################################################################
"""
Vehicle Subpackage.

This subpackage contains the VIN lookup components:
- VIN validator (length, charset, ISO 3779 check digit)
- Result mapper (NHTSA result -> Vehicle)
- Lookup pipeline (validate -> fetch -> decode -> map)
- HTTP transport interface and urllib implementation

Types:
    Vehicle: Canonical decoded-vehicle record
    NhtsaResponse / NhtsaResult: NHTSA wire models
    HttpRequest / HttpResponse: Transport exchange records

Exceptions:
    VinLookupError: Base exception for classified lookup failures
    VinValidationError: VIN failed local validation
    InvalidLengthError, InvalidCharactersError, InvalidCheckDigitError
    LookupTimeoutError, NetworkIssueError, ApiError, DecodingError
    TransportError, TransportTimeoutError: raised by transports

Classes:
    VehicleLookup: Looks up vehicles via the NHTSA vPIC API
    BaseHttpTransport: Transport interface
    UrllibTransport: Production transport

Usage:
    from vinscout.vehicle import VehicleLookup, validate, isValidVin
"""

# Types
from .types import (
    HttpRequest,
    HttpResponse,
    NhtsaResponse,
    NhtsaResult,
    Vehicle,
)

# Exceptions
from .exceptions import (
    ApiError,
    DecodingError,
    InvalidCharactersError,
    InvalidCheckDigitError,
    InvalidLengthError,
    LookupTimeoutError,
    NetworkIssueError,
    TransportError,
    TransportTimeoutError,
    VinLookupError,
    VinValidationError,
)

# Validation and mapping
from .validator import computeCheckDigit, isValidVin, validate
from .mapper import hasError, primaryErrorText, toVehicle

# Classes
from .transport import BaseHttpTransport, UrllibTransport
from .lookup import (
    DEFAULT_API_TIMEOUT,
    NHTSA_API_BASE_URL,
    VehicleLookup,
)

# Helpers
from .helpers import createVehicleLookupFromConfig

__all__ = [
    # Types
    'Vehicle',
    'NhtsaResponse',
    'NhtsaResult',
    'HttpRequest',
    'HttpResponse',
    # Exceptions
    'VinLookupError',
    'VinValidationError',
    'InvalidLengthError',
    'InvalidCharactersError',
    'InvalidCheckDigitError',
    'LookupTimeoutError',
    'NetworkIssueError',
    'ApiError',
    'DecodingError',
    'TransportError',
    'TransportTimeoutError',
    # Validation and mapping
    'validate',
    'isValidVin',
    'computeCheckDigit',
    'hasError',
    'primaryErrorText',
    'toVehicle',
    # Classes
    'VehicleLookup',
    'BaseHttpTransport',
    'UrllibTransport',
    # Constants
    'NHTSA_API_BASE_URL',
    'DEFAULT_API_TIMEOUT',
    # Helpers
    'createVehicleLookupFromConfig',
]
