"""
Notification service.

Owns notification records. Sending records the intent to notify; nothing is
delivered to the customer.
"""

from notification.service import NotificationService, LocalNotificationClient

__all__ = [
    "NotificationService",
    "LocalNotificationClient",
]
