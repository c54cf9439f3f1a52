"""
Demonstration of the registration workflow.

Runs all three services in-process: the customer service talks to the fraud
and notification services through local clients instead of HTTP, so the demo
needs no running servers.
"""

import logging
from typing import Iterable

from customer.models import CustomerRegistrationRequest
from customer.service import CustomerService
from fraud.service import FraudCheckService, LocalFraudClient
from notification.service import LocalNotificationClient, NotificationService
from shared.config import LOG_DATE_FORMAT, LOG_FORMAT
from shared.data_store import RecordStore
from shared.exceptions import FraudDetected
from shared.models import Customer, FraudCheckHistory, Notification

# Configure logging
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def build_local_services(flagged_customer_ids: Iterable[int] = ()):
    """Wire the three services together without HTTP."""
    fraud_service = FraudCheckService(
        RecordStore(FraudCheckHistory),
        flagged_customer_ids=flagged_customer_ids,
    )
    notification_service = NotificationService(
        RecordStore(Notification, id_field="notification_id"),
    )
    customer_service = CustomerService(
        RecordStore(Customer),
        LocalFraudClient(fraud_service),
        LocalNotificationClient(notification_service),
    )
    return customer_service, notification_service, fraud_service


def run_registration_demo():
    """
    Register two customers, the second of whom is flagged as a fraudster.
    
    Shows that the flagged customer is still persisted and gets no
    notification.
    """
    print("\n" + "=" * 70)
    print("DEMO: Customer Registration")
    print("=" * 70 + "\n")
    
    customer_service, notification_service, fraud_service = build_local_services(
        flagged_customer_ids={2},
    )
    
    print("-" * 70)
    print("ACTION 1: Registering Ada Lovelace")
    print("-" * 70 + "\n")
    customer_service.register_customer(
        CustomerRegistrationRequest(first_name="Ada", last_name="Lovelace", email="ada@x.io")
    )
    
    print("\n" + "-" * 70)
    print("ACTION 2: Registering Eve (flagged by the fraud service)")
    print("-" * 70 + "\n")
    try:
        customer_service.register_customer(
            CustomerRegistrationRequest(first_name="Eve", last_name="Hacker", email="eve@x.io")
        )
    except FraudDetected as e:
        print(f"\nRegistration failed: {e}")
    
    print("\n" + "-" * 70)
    print("RESULT:")
    print("-" * 70)
    print("\nCustomers (Eve is kept even though her registration failed):")
    for customer in customer_service.list_customers():
        print(f"  {customer.id}: {customer.first_name} {customer.last_name} <{customer.email}>")
    
    print("\nNotifications:")
    for notification in notification_service.list_notifications():
        print(
            f"  {notification.notification_id}: to customer {notification.target_customer_id} "
            f"from {notification.sender}: {notification.message}"
        )
    
    print(f"\nFraud checks answered: {len(fraud_service.list_checks())}")
    
    return customer_service.list_customers(), notification_service.list_notifications()


if __name__ == "__main__":
    run_registration_demo()
