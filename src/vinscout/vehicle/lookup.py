################################################################################
# File Name: lookup.py
# Purpose/Description: VIN lookup pipeline against the NHTSA vPIC API
# Author: Ralph Agent
# Creation Date: 2026-02-09
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-09    | Ralph Agent  | Refactored from VinDecoder: single attempt, no
#               |              | response cache, injected transport
# ================================================================================
################################################################################

"""
VIN lookup module.

Turns a VIN into a Vehicle or a classified VinLookupError:
1. Validate locally (no network call on failure)
2. Build GET <base>/<VIN>?format=json with Accept: application/json
3. Call the transport exactly once
4. Reject non-2xx statuses
5. Parse the body into NhtsaResponse
6. Require a non-empty Results list
7. Reject results whose ErrorCode signals a genuine error
8. Map the first result to a Vehicle

The NHTSA vPIC (Vehicle Product Information Catalog) API provides free
vehicle information decoding based on the 17-character VIN.

API Documentation:
    https://vpic.nhtsa.dot.gov/api/

Usage:
    from vinscout.vehicle import VehicleLookup

    lookup = VehicleLookup()
    try:
        vehicle = lookup.lookup('1HGCM82633A004352')
        print(vehicle.getVehicleSummary())
    except VinLookupError as e:
        print(e.userMessage)
"""

import logging
from typing import Optional
from urllib.parse import quote

from pydantic import ValidationError

from common.logging_config import logWithContext

from .exceptions import (
    ApiError,
    DecodingError,
    LookupTimeoutError,
    NetworkIssueError,
    TransportError,
    TransportTimeoutError,
    VinLookupError,
)
from .mapper import hasError, primaryErrorText, toVehicle
from .transport import BaseHttpTransport, UrllibTransport
from .types import HttpRequest, NhtsaResponse, Vehicle
from .validator import validate

logger = logging.getLogger(__name__)


# ================================================================================
# Constants
# ================================================================================

# NHTSA API base URL for VIN decoding
NHTSA_API_BASE_URL = "https://vpic.nhtsa.dot.gov/api/vehicles/DecodeVinValues"

# Default timeout for API requests (seconds)
DEFAULT_API_TIMEOUT = 15

DEFAULT_USER_AGENT = "VIN Scout/1.0"


# ================================================================================
# Vehicle Lookup Class
# ================================================================================

class VehicleLookup:
    """
    Looks up vehicles by VIN using the NHTSA vPIC API.

    Holds no per-call state, so one instance may serve concurrent callers.
    Every call that passes validation crosses the network exactly once;
    there is no retry and no response cache.

    Attributes:
        apiBaseUrl: Endpoint the VIN is path-appended to
        timeoutSeconds: Timeout handed to the transport
    """

    def __init__(
        self,
        transport: Optional[BaseHttpTransport] = None,
        apiBaseUrl: str = NHTSA_API_BASE_URL,
        timeoutSeconds: float = DEFAULT_API_TIMEOUT,
        userAgent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the lookup.

        Args:
            transport: Transport to use. Defaults to UrllibTransport.
            apiBaseUrl: Base endpoint URL
            timeoutSeconds: Request timeout in seconds
            userAgent: User-Agent header value
        """
        self._transport = transport if transport is not None else UrllibTransport()
        self.apiBaseUrl = apiBaseUrl.rstrip('/')
        self.timeoutSeconds = timeoutSeconds
        self._userAgent = userAgent

    def lookup(self, vin: str) -> Vehicle:
        """
        Look up a vehicle by VIN.

        Args:
            vin: 17-character uppercase VIN

        Returns:
            Decoded Vehicle

        Raises:
            VinValidationError: VIN failed local validation
            LookupTimeoutError: Transport timed out
            NetworkIssueError: Transport failure or non-2xx status
            DecodingError: Body did not match the expected shape or was empty
            ApiError: API flagged the VIN as unresolved
        """
        try:
            vehicle = self._lookup(vin)
        except VinLookupError as e:
            logWithContext(
                logger, 'warning', f"VIN lookup failed: {e.message}",
                vin=vin, error=type(e).__name__
            )
            raise

        logWithContext(
            logger, 'info', "VIN decoded",
            vin=vehicle.vin, vehicle=vehicle.getVehicleSummary()
        )
        return vehicle

    def buildRequest(self, vin: str) -> HttpRequest:
        """
        Build the GET request for an already-validated VIN.

        Args:
            vin: Validated VIN

        Returns:
            HttpRequest for the DecodeVinValues endpoint
        """
        return HttpRequest(
            url=f"{self.apiBaseUrl}/{quote(vin, safe='')}?format=json",
            headers={
                'Accept': 'application/json',
                'User-Agent': self._userAgent,
            },
            timeoutSeconds=self.timeoutSeconds
        )

    def _lookup(self, vin: str) -> Vehicle:
        validate(vin)

        request = self.buildRequest(vin)
        logger.debug(f"Requesting {request.url}")

        try:
            response = self._transport.get(request)
        except TransportTimeoutError as e:
            raise LookupTimeoutError(self.timeoutSeconds) from e
        except TransportError as e:
            raise NetworkIssueError(e.message) from e

        if not response.isSuccess:
            raise NetworkIssueError(
                f"Unexpected HTTP status code: {response.statusCode}",
                statusCode=response.statusCode
            )

        try:
            decoded = NhtsaResponse.model_validate_json(response.body)
        except ValidationError as e:
            raise DecodingError(_summarizeValidationError(e)) from e

        if not decoded.results:
            raise DecodingError("Response contained an empty 'Results' array.")

        result = decoded.results[0]

        # The API answers 200 OK even for bad VINs; the body carries the error
        if hasError(result):
            text = primaryErrorText(result)
            if text is None:
                text = f"Unknown API error (ErrorCode: {result.errorCode or '?'})"
            raise ApiError(text)

        return toVehicle(vin, result)


def _summarizeValidationError(error: ValidationError) -> str:
    first = error.errors()[0]
    location = '.'.join(str(part) for part in first.get('loc', ())) or 'body'
    return f"{first.get('msg', 'invalid response')} (at {location})"
