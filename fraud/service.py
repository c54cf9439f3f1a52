"""
Fraud service.

Answers fraud checks and keeps a history of every check it answered. A
customer is a fraud risk only if their id is in the configured flagged set;
every other customer passes.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from clients.fraud import FraudCheckResponse
from shared.data_store import RecordStore
from shared.models import FraudCheckHistory

logger = logging.getLogger("fraud_service")


class FraudCheckService:
    """Decides whether a customer is a fraud risk and records the decision."""
    
    def __init__(
        self,
        store: RecordStore[FraudCheckHistory],
        *,
        flagged_customer_ids: Iterable[int] = (),
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.flagged_customer_ids = frozenset(flagged_customer_ids)
        self.clock = clock
    
    def is_fraudulent_customer(self, customer_id: int) -> bool:
        """Check a customer and record the check."""
        is_fraudster = customer_id in self.flagged_customer_ids
        self.store.insert(
            FraudCheckHistory(
                customer_id=customer_id,
                is_fraudster=is_fraudster,
                created_at=self.clock(),
            )
        )
        logger.info(f"Fraud check for customer {customer_id}: {is_fraudster}")
        return is_fraudster
    
    def list_checks(self) -> list[FraudCheckHistory]:
        return self.store.list_all()


class LocalFraudClient:
    """FraudClient that calls a FraudCheckService in-process."""
    
    def __init__(self, service: FraudCheckService):
        self.service = service
    
    def is_fraudster(self, customer_id: int, *, timeout: Optional[float] = None) -> FraudCheckResponse:
        return FraudCheckResponse(is_fraudster=self.service.is_fraudulent_customer(customer_id))
