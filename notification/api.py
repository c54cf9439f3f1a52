"""
FastAPI notification service.

Endpoints:
- POST /api/v1/notifications      record a notification (empty body)
- GET  /api/v1/notifications/all  list every recorded notification

This API is called by the customer service once a registration passes the
fraud check. It performs no validation of the request.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Response, status

from clients.notification import NotificationRequest
from notification.service import NotificationService
from shared.config import LOG_DATE_FORMAT, LOG_FORMAT, Settings, load_settings
from shared.data_store import RecordStore
from shared.exceptions import install_exception_handlers
from shared.models import Notification

settings = load_settings()

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
logger = logging.getLogger("notification_api")

app = FastAPI(
    title="Notification Service API",
    description="Records notifications requested by other services",
    version="1.0.0",
)
install_exception_handlers(app)

# Module-level instance, built on first use
_service: Optional[NotificationService] = None


def build_notification_service(settings: Settings) -> NotificationService:
    """Build a NotificationService from settings."""
    return NotificationService(
        RecordStore(
            Notification,
            id_field="notification_id",
            path=settings.store_path("notifications.json"),
        ),
        sender=settings.notification_sender,
    )


def get_service() -> NotificationService:
    """Get the notification service instance."""
    global _service
    if _service is None:
        _service = build_notification_service(settings)
    return _service


def reset_api_state(service: Optional[NotificationService] = None) -> None:
    """Reset API state (for testing)."""
    global _service
    _service = service


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "notification"}


@app.post("/api/v1/notifications")
def send_notification(
    request: NotificationRequest,
    service: NotificationService = Depends(get_service),
) -> Response:
    """Record a notification for a customer."""
    logger.info(f"New notification... {request}")
    service.send(request)
    return Response(status_code=status.HTTP_200_OK)


@app.get("/api/v1/notifications/all", response_model=list[Notification], response_model_by_alias=True)
def get_all_notifications(
    service: NotificationService = Depends(get_service),
) -> list[Notification]:
    """List every recorded notification."""
    notifications = service.list_notifications()
    logger.info(f"Listing {len(notifications)} notifications")
    return notifications
