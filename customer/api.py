"""
FastAPI customer service.

Endpoints:
- POST /api/v1/customers      register a customer (empty body on success)
- GET  /api/v1/customers/all  list every registered customer

A registration makes two outbound calls before it answers, to the fraud
service and then to the notification service, so its latency is the sum of
both plus the storage write. Failures map to:
- 409 when the fraud service flags the customer
- 502 when the fraud or notification service fails
- 500 when storage fails
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Response, status

from clients.fraud import HttpFraudClient
from clients.notification import HttpNotificationClient
from customer.models import CustomerRegistrationRequest
from customer.service import CustomerService
from shared.config import LOG_DATE_FORMAT, LOG_FORMAT, Settings, load_settings
from shared.data_store import RecordStore
from shared.exceptions import install_exception_handlers
from shared.models import Customer

settings = load_settings()

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
logger = logging.getLogger("customer_api")

app = FastAPI(
    title="Customer Service API",
    description="Customer registration with fraud check and welcome notification",
    version="1.0.0",
)
install_exception_handlers(app)

# Module-level instance, built on first use
_service: Optional[CustomerService] = None


def build_customer_service(settings: Settings) -> CustomerService:
    """Wire a CustomerService to the HTTP clients described by settings."""
    return CustomerService(
        store=RecordStore(Customer, path=settings.store_path("customers.json")),
        fraud_client=HttpFraudClient(
            settings.fraud_service_url,
            timeout=settings.http_timeout,
            retries=settings.http_retries,
        ),
        notification_client=HttpNotificationClient(
            settings.notification_service_url,
            timeout=settings.http_timeout,
            retries=settings.http_retries,
        ),
        welcome_template=settings.welcome_message_template,
    )


def get_service() -> CustomerService:
    """Get the customer service instance."""
    global _service
    if _service is None:
        _service = build_customer_service(settings)
    return _service


def reset_api_state(service: Optional[CustomerService] = None) -> None:
    """Reset API state (for testing)."""
    global _service
    _service = service


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "customer"}


@app.post("/api/v1/customers")
def register_customer(
    request: CustomerRegistrationRequest,
    service: CustomerService = Depends(get_service),
) -> Response:
    """Register a new customer."""
    logger.info(f"New customer registration {request}")
    service.register_customer(request)
    return Response(status_code=status.HTTP_200_OK)


@app.get("/api/v1/customers/all", response_model=list[Customer], response_model_by_alias=True)
def get_all_customers(service: CustomerService = Depends(get_service)) -> list[Customer]:
    """List every registered customer."""
    return service.list_customers()
