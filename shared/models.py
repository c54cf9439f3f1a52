"""
Domain models for the customer registration services.

Each service owns one kind of record:
- Customer service owns customers
- Notification service owns notifications
- Fraud service owns its fraud check history

Design decisions:
- Using Pydantic for validation and serialization
- JSON field names are camelCase, Python attributes are snake_case
- Identifiers are assigned by the record store, so they start out as None
- Models are frozen once built; the store hands back copies with the id set
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Customer Service
# =============================================================================

class Customer(CamelModel):
    """
    A registered customer.
    
    Nothing stops two customers from sharing an email address.
    """
    id: Optional[int] = Field(default=None, description="Assigned by storage on insert")
    first_name: str
    last_name: str
    email: str


# =============================================================================
# Notification Service
# =============================================================================

class Notification(CamelModel):
    """
    A recorded notification.
    
    Sending a notification only records the intent to notify; no message
    leaves the service. target_customer_id is informational and is not
    checked against the customer service.
    """
    notification_id: Optional[int] = Field(default=None, description="Assigned by storage on insert")
    message: str
    sent_at: datetime
    sender: str
    target_customer_id: int
    target_customer_email: str


# =============================================================================
# Fraud Service
# =============================================================================

class FraudCheckHistory(CamelModel):
    """One answered fraud check."""
    id: Optional[int] = None
    customer_id: int
    is_fraudster: bool
    created_at: datetime
