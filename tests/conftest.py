"""
Shared pytest fixtures for the customer registration tests.

These fixtures provide fresh in-memory stores, in-process services and test
doubles for the fraud and notification collaborators.
"""

from datetime import datetime
from typing import Optional

import pytest

from clients.fraud import FraudCheckResponse
from clients.notification import NotificationRequest
from customer.service import CustomerService
from fraud.service import FraudCheckService
from notification.service import LocalNotificationClient, NotificationService
from shared.data_store import RecordStore
from shared.exceptions import DownstreamUnavailable
from shared.models import Customer, FraudCheckHistory, Notification


FIXED_NOW = datetime(2026, 1, 15, 9, 30, 0)


class StubFraudClient:
    """Fraud client that flags a fixed set of customer ids and records calls."""
    
    def __init__(self, flagged: Optional[set[int]] = None, error: Optional[Exception] = None):
        self.flagged = flagged or set()
        self.error = error
        self.checked: list[int] = []
    
    def is_fraudster(self, customer_id: int, *, timeout: Optional[float] = None) -> FraudCheckResponse:
        self.checked.append(customer_id)
        if self.error is not None:
            raise self.error
        return FraudCheckResponse(is_fraudster=customer_id in self.flagged)


class FailingNotificationClient:
    """Notification client whose every call fails."""
    
    def __init__(self):
        self.attempts: list[NotificationRequest] = []
    
    def send(self, request: NotificationRequest, *, timeout: Optional[float] = None) -> None:
        self.attempts.append(request)
        raise DownstreamUnavailable("notification", "connection refused")


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def customer_store() -> RecordStore[Customer]:
    """Fresh in-memory customer store."""
    return RecordStore(Customer)


@pytest.fixture
def notification_store() -> RecordStore[Notification]:
    """Fresh in-memory notification store."""
    return RecordStore(Notification, id_field="notification_id")


@pytest.fixture
def fraud_store() -> RecordStore[FraudCheckHistory]:
    """Fresh in-memory fraud check store."""
    return RecordStore(FraudCheckHistory)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def notification_service(notification_store) -> NotificationService:
    """Notification service with a fixed clock."""
    return NotificationService(notification_store, sender="IssamCode", clock=lambda: FIXED_NOW)


@pytest.fixture
def fraud_service(fraud_store) -> FraudCheckService:
    """Fraud service that flags nobody."""
    return FraudCheckService(fraud_store, clock=lambda: FIXED_NOW)


@pytest.fixture
def fraud_client() -> StubFraudClient:
    """Fraud client that passes every customer."""
    return StubFraudClient()


@pytest.fixture
def customer_service(customer_store, fraud_client, notification_service) -> CustomerService:
    """Customer service talking to an in-process notification service."""
    return CustomerService(
        customer_store,
        fraud_client,
        LocalNotificationClient(notification_service),
    )
