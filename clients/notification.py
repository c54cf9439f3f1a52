"""
Client contract for the notification service.

The customer service uses this to ask for a welcome notification once a
registration passes the fraud check.
"""

import logging
from typing import Optional, Protocol

from clients.base import HttpServiceClient
from shared.models import CamelModel

logger = logging.getLogger("service_clients")

NOTIFICATIONS_PATH = "/api/v1/notifications"


class NotificationRequest(CamelModel):
    """
    Request to record a notification for a customer.
    
    Nothing is validated: the customer id does not have to exist and the
    email does not have to be well formed.
    """
    to_customer_id: int
    to_customer_email: str
    message: str


class NotificationClient(Protocol):
    """Anything the customer service can hand a notification to."""
    
    def send(self, request: NotificationRequest, *, timeout: Optional[float] = None) -> None:
        ...


class HttpNotificationClient(HttpServiceClient):
    """Notification client that calls the notification service's HTTP API."""
    
    service_name = "notification"
    
    def send(self, request: NotificationRequest, *, timeout: Optional[float] = None) -> None:
        """
        Post a notification request.
        
        Raises:
            DownstreamUnavailable: on transport errors or non-2xx answers.
        """
        self._request(
            "POST",
            NOTIFICATIONS_PATH,
            json=request.model_dump(mode="json", by_alias=True),
            timeout=timeout,
        )
        logger.info(f"Notification requested for customer {request.to_customer_id}")
