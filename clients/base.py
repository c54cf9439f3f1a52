"""
Shared plumbing for the httpx-backed service clients.

Timeouts and retries are plain parameters here: set once on the client and
optionally overridden per call. There are no global interceptors.
"""

import logging
from typing import Any, Optional

import httpx

from shared.exceptions import DownstreamUnavailable

logger = logging.getLogger("service_clients")


class HttpServiceClient:
    """
    Base class for calling one downstream service over HTTP.
    
    Any failure to get a 2xx answer surfaces as DownstreamUnavailable.
    """
    
    service_name = "downstream"
    
    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: Optional[float] = None,
        retries: int = 0,
        http: Optional[httpx.Client] = None,
    ):
        """
        Initialize the client.
        
        Args:
            base_url: Root URL of the service, e.g. http://localhost:8082
            timeout: Default timeout in seconds. None keeps httpx's default.
            retries: Connection retries done by the transport.
            http: Ready-made httpx.Client to use instead of building one.
                  Tests pass FastAPI's TestClient here.
        """
        if http is None:
            client_kwargs: dict[str, Any] = {
                "base_url": base_url,
                "transport": httpx.HTTPTransport(retries=retries),
            }
            if timeout is not None:
                client_kwargs["timeout"] = timeout
            http = httpx.Client(**client_kwargs)
        self._http = http
    
    def _request(
        self,
        method: str,
        path: str,
        *,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{self.service_name}: {method} {path} failed: {e}")
            raise DownstreamUnavailable(self.service_name, str(e)) from e
        
        if response.is_error:
            logger.error(
                f"{self.service_name}: {method} {path} returned {response.status_code}"
            )
            raise DownstreamUnavailable(
                self.service_name,
                f"{method} {path} returned {response.status_code}",
            )
        return response
    
    def close(self):
        """Close the underlying HTTP connection pool."""
        self._http.close()
    
    def __enter__(self):
        return self
    
    def __exit__(self, *exc_info):
        self.close()
