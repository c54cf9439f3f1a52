"""
Customer service.

Owns customer records and runs the registration workflow:
persist, fraud check, then welcome notification.
"""

from customer.models import CustomerRegistrationRequest
from customer.service import CustomerService

__all__ = [
    "CustomerRegistrationRequest",
    "CustomerService",
]
