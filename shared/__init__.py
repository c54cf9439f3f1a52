"""
Shared infrastructure for the customer registration services.

This package contains code used by every service:
- Domain models (Customer, Notification, FraudCheckHistory)
- Record storage with store-assigned ids
- The error taxonomy and its HTTP mapping
- Environment-driven settings
"""

from shared.models import Customer, Notification, FraudCheckHistory
from shared.data_store import RecordStore
from shared.exceptions import (
    ServiceError,
    PersistenceFailure,
    FraudDetected,
    DownstreamUnavailable,
)
from shared.config import Settings, load_settings

__all__ = [
    "Customer",
    "Notification",
    "FraudCheckHistory",
    "RecordStore",
    "ServiceError",
    "PersistenceFailure",
    "FraudDetected",
    "DownstreamUnavailable",
    "Settings",
    "load_settings",
]
