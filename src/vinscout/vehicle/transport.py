################################################################################
# File Name: transport.py
# Purpose/Description: HTTP transport interface and urllib implementation
# Author: Ralph Agent
# Creation Date: 2026-02-09
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-09    | Ralph Agent  | Initial creation, extracted from the old
#               |              | VinDecoder._callNhtsaApi
# ================================================================================
################################################################################

"""
HTTP transport module.

The lookup pipeline never talks to the network directly. It hands a fully
formed HttpRequest to a BaseHttpTransport and gets back either an
HttpResponse (any status code) or one of two transport exceptions:
- TransportTimeoutError: the exchange timed out
- TransportError: any other transport failure

Usage:
    from vinscout.vehicle.transport import UrllibTransport
    from vinscout.vehicle.types import HttpRequest

    transport = UrllibTransport()
    response = transport.get(HttpRequest(url, {'Accept': 'application/json'}, 15))
"""

import http.client
import logging
import socket
from abc import ABC, abstractmethod
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .exceptions import TransportError, TransportTimeoutError
from .types import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class BaseHttpTransport(ABC):
    """
    Interface for a single HTTP GET exchange.

    Implementations must:
    - return an HttpResponse for every response received, including non-2xx
    - raise TransportTimeoutError when the timeout expires
    - raise TransportError for every other failure
    """

    @abstractmethod
    def get(self, request: HttpRequest) -> HttpResponse:
        """
        Perform the request once.

        Args:
            request: Request to send

        Returns:
            HttpResponse with body bytes and status code

        Raises:
            TransportTimeoutError: The request timed out
            TransportError: Any other transport failure
        """
        pass


class UrllibTransport(BaseHttpTransport):
    """Production transport built on urllib.request."""

    def get(self, request: HttpRequest) -> HttpResponse:
        urlRequest = Request(request.url, headers=dict(request.headers), method='GET')

        try:
            with urlopen(urlRequest, timeout=request.timeoutSeconds) as response:
                return HttpResponse(body=response.read(), statusCode=response.status)

        except HTTPError as e:
            # urllib raises for non-2xx; the pipeline decides what a status means
            body = e.read() if e.fp is not None else b''
            logger.debug(f"HTTP {e.code} from {request.url}")
            return HttpResponse(body=body, statusCode=e.code)

        except URLError as e:
            if _isTimeout(e.reason):
                raise TransportTimeoutError(
                    f"Request timed out after {request.timeoutSeconds}s",
                    details={'url': request.url, 'timeout': request.timeoutSeconds}
                ) from e
            raise TransportError(
                f"URL error: {e.reason}",
                details={'url': request.url}
            ) from e

        except (socket.timeout, TimeoutError) as e:
            raise TransportTimeoutError(
                f"Request timed out after {request.timeoutSeconds}s",
                details={'url': request.url, 'timeout': request.timeoutSeconds}
            ) from e

        except (OSError, http.client.HTTPException) as e:
            raise TransportError(
                f"{type(e).__name__}: {e}",
                details={'url': request.url}
            ) from e


def _isTimeout(reason: object) -> bool:
    if isinstance(reason, (socket.timeout, TimeoutError)):
        return True
    return 'timed out' in str(reason).lower()
