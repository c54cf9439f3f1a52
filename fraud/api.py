"""
FastAPI fraud service.

Endpoints:
- GET /api/v1/fraud-check/{customerId}  answer a fraud check
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from clients.fraud import FraudCheckResponse
from fraud.service import FraudCheckService
from shared.config import LOG_DATE_FORMAT, LOG_FORMAT, Settings, load_settings
from shared.data_store import RecordStore
from shared.exceptions import install_exception_handlers
from shared.models import FraudCheckHistory

settings = load_settings()

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
logger = logging.getLogger("fraud_api")

app = FastAPI(
    title="Fraud Service API",
    description="Answers whether a customer is a fraud risk",
    version="1.0.0",
)
install_exception_handlers(app)

_service: Optional[FraudCheckService] = None


def build_fraud_service(settings: Settings) -> FraudCheckService:
    """Build a FraudCheckService from settings."""
    return FraudCheckService(
        RecordStore(FraudCheckHistory, path=settings.store_path("fraud_checks.json")),
        flagged_customer_ids=settings.fraud_flagged_customer_ids,
    )


def get_service() -> FraudCheckService:
    """Get the fraud service instance."""
    global _service
    if _service is None:
        _service = build_fraud_service(settings)
    return _service


def reset_api_state(service: Optional[FraudCheckService] = None) -> None:
    """Reset API state (for testing)."""
    global _service
    _service = service


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "fraud"}


@app.get(
    "/api/v1/fraud-check/{customer_id}",
    response_model=FraudCheckResponse,
    response_model_by_alias=True,
)
def is_fraudster(
    customer_id: int,
    service: FraudCheckService = Depends(get_service),
) -> FraudCheckResponse:
    """Answer a fraud check for one customer."""
    logger.info(f"Fraud check requested for customer {customer_id}")
    return FraudCheckResponse(is_fraudster=service.is_fraudulent_customer(customer_id))
