"""
Client contract for the fraud service.

Given a customer id, the fraud service answers whether that customer is a
fraud risk. The answer is never cached and the call is never retried.
"""

import logging
from typing import Optional, Protocol

from pydantic import Field

from clients.base import HttpServiceClient
from shared.exceptions import DownstreamUnavailable
from shared.models import CamelModel

logger = logging.getLogger("service_clients")

FRAUD_CHECK_PATH = "/api/v1/fraud-check/{customer_id}"


class FraudCheckResponse(CamelModel):
    """Answer to a single fraud check."""
    is_fraudster: bool = Field(..., description="True if the customer is a fraud risk")


class FraudClient(Protocol):
    """Anything the customer service can ask for a fraud check."""
    
    def is_fraudster(self, customer_id: int, *, timeout: Optional[float] = None) -> FraudCheckResponse:
        ...


class HttpFraudClient(HttpServiceClient):
    """Fraud client that calls the fraud service's HTTP API."""
    
    service_name = "fraud"
    
    def is_fraudster(self, customer_id: int, *, timeout: Optional[float] = None) -> FraudCheckResponse:
        """
        Ask the fraud service about a customer.
        
        Raises:
            DownstreamUnavailable: on transport errors, non-2xx answers or
                answers that aren't a fraud check response.
        """
        path = FRAUD_CHECK_PATH.format(customer_id=customer_id)
        response = self._request("GET", path, timeout=timeout)
        try:
            result = FraudCheckResponse.model_validate(response.json())
        except ValueError as e:
            logger.error(f"{self.service_name}: GET {path} returned an unreadable body: {e}")
            raise DownstreamUnavailable(
                self.service_name,
                f"GET {path} returned an unreadable body",
            ) from e
        logger.info(f"Fraud check for customer {customer_id}: is_fraudster={result.is_fraudster}")
        return result
