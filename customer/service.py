"""
Customer service: registration and listing.

Registration runs the whole workflow on the caller's thread:

    Received -> Persisted -> FraudChecked -> Rejected | Notified

Each step blocks until it finishes and nothing is retried or compensated. If
the fraud check flags the customer, or any step after the insert fails, the
customer record stays in storage even though the registration failed.
"""

import logging

from clients.fraud import FraudClient
from clients.notification import NotificationClient, NotificationRequest
from customer.models import CustomerRegistrationRequest
from shared.data_store import RecordStore
from shared.exceptions import FraudDetected
from shared.models import Customer

logger = logging.getLogger("customer_service")

DEFAULT_WELCOME_TEMPLATE = "Hi {first_name}, Welcome to IssamCode."


class CustomerService:
    """
    Registers customers and lists them.
    
    Collaborators are passed in, so tests can hand it fakes.
    
    Example:
        service = CustomerService(store, fraud_client, notification_client)
        service.register_customer(
            CustomerRegistrationRequest(first_name="Ada", last_name="Lovelace", email="ada@x.io")
        )
    """
    
    def __init__(
        self,
        store: RecordStore[Customer],
        fraud_client: FraudClient,
        notification_client: NotificationClient,
        *,
        welcome_template: str = DEFAULT_WELCOME_TEMPLATE,
    ):
        """
        Initialize the customer service.
        
        Args:
            store: Where customers are persisted; assigns their ids.
            fraud_client: Answers whether a customer is a fraud risk.
            notification_client: Records the welcome notification.
            welcome_template: Message format; receives first_name, last_name
                and email as keyword arguments.
        """
        self.store = store
        self.fraud_client = fraud_client
        self.notification_client = notification_client
        self.welcome_template = welcome_template
    
    def register_customer(self, request: CustomerRegistrationRequest) -> None:
        """
        Register a new customer.
        
        Raises:
            PersistenceFailure: if the customer could not be stored.
            FraudDetected: if the fraud service flags the new customer. The
                customer record is not removed.
            DownstreamUnavailable: if the fraud or notification service could
                not be reached or answered with an error.
        """
        logger.info(f"Registration received for {request.email}")
        
        customer = Customer(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
        )
        # Email is neither validated nor checked for an existing customer.
        customer_id = self.store.insert(customer)
        logger.info(f"Customer {customer_id} persisted")
        
        fraud_check = self.fraud_client.is_fraudster(customer_id)
        if fraud_check.is_fraudster:
            logger.warning(f"Customer {customer_id} rejected by fraud check")
            raise FraudDetected(customer_id)
        logger.info(f"Customer {customer_id} passed fraud check")
        
        message = self.welcome_template.format(
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
        )
        self.notification_client.send(
            NotificationRequest(
                to_customer_id=customer_id,
                to_customer_email=customer.email,
                message=message,
            )
        )
        logger.info(f"Customer {customer_id} notified")
    
    def list_customers(self) -> list[Customer]:
        """All persisted customers, in storage order."""
        return self.store.list_all()
