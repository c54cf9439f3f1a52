"""
Error taxonomy shared by the services.

Nothing here is recovered locally: every error raised during a registration
reaches the original caller. Each FastAPI app maps these to status codes
through install_exception_handlers().
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger("service_errors")


class ServiceError(Exception):
    """Base class for errors the services report to their callers."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class PersistenceFailure(ServiceError):
    """A storage write failed."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class FraudDetected(ServiceError):
    """The fraud service flagged the customer. The customer record is kept."""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} was flagged as a fraudster")


class DownstreamUnavailable(ServiceError):
    """A collaborating service was unreachable or answered with an error."""
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, service: str, detail: str):
        self.service = service
        self.detail = detail
        super().__init__(f"{service} service unavailable: {detail}")


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


def install_exception_handlers(app: FastAPI) -> None:
    """Map ServiceError subclasses to JSON error responses."""
    app.add_exception_handler(ServiceError, _service_error_handler)
