"""
Notification service.

"Sending" a notification means recording the intent to notify: the record is
stamped and stored, and no email or SMS is dispatched.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from clients.notification import NotificationRequest
from shared.data_store import RecordStore
from shared.models import Notification

logger = logging.getLogger("notification_service")

DEFAULT_SENDER = "IssamCode"


class NotificationService:
    """
    Records notifications and lists them.
    
    Example:
        service = NotificationService(RecordStore(Notification, id_field="notification_id"))
        service.send(NotificationRequest(to_customer_id=1, to_customer_email="ada@x.io", message="Hi"))
    """
    
    def __init__(
        self,
        store: RecordStore[Notification],
        *,
        sender: str = DEFAULT_SENDER,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.sender = sender
        self.clock = clock
    
    def send(self, request: NotificationRequest) -> None:
        """Stamp and store a notification. Nothing is delivered."""
        notification = Notification(
            message=request.message,
            sent_at=self.clock(),
            sender=self.sender,
            target_customer_id=request.to_customer_id,
            target_customer_email=request.to_customer_email,
        )
        notification_id = self.store.insert(notification)
        logger.info(
            f"Notification {notification_id} recorded for customer {request.to_customer_id}"
        )
    
    def list_notifications(self) -> list[Notification]:
        """All recorded notifications, in storage order."""
        return self.store.list_all()


class LocalNotificationClient:
    """
    NotificationClient that calls a NotificationService in-process.
    
    Used by the demo and by tests that don't need the HTTP layer.
    """
    
    def __init__(self, service: NotificationService):
        self.service = service
    
    def send(self, request: NotificationRequest, *, timeout: Optional[float] = None) -> None:
        self.service.send(request)
