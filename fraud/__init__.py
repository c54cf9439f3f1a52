"""
Fraud service.

The customer service only knows it through clients.fraud; this package is a
minimal implementation so the three services can run together.
"""

from fraud.service import FraudCheckService, LocalFraudClient

__all__ = [
    "FraudCheckService",
    "LocalFraudClient",
]
