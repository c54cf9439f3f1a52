"""
Typed clients for service-to-service calls.

The customer service depends on these contracts, not on the services behind
them. Each contract has an HTTP implementation built on httpx and an
in-process implementation living next to the service it wraps.
"""

from clients.fraud import FraudCheckResponse, FraudClient, HttpFraudClient
from clients.notification import NotificationRequest, NotificationClient, HttpNotificationClient

__all__ = [
    "FraudCheckResponse",
    "FraudClient",
    "HttpFraudClient",
    "NotificationRequest",
    "NotificationClient",
    "HttpNotificationClient",
]
