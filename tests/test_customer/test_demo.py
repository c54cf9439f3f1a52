"""
Tests for the in-process registration demo.
"""

from customer.demo import build_local_services, run_registration_demo
from customer.models import CustomerRegistrationRequest


class TestRegistrationDemo:
    """Tests for the demo wiring."""
    
    def test_demo_outcome(self, capsys):
        """Test that the flagged customer is kept without a notification."""
        customers, notifications = run_registration_demo()
        
        assert [c.first_name for c in customers] == ["Ada", "Eve"]
        assert [n.target_customer_id for n in notifications] == [1]
        assert "Registration failed" in capsys.readouterr().out
    
    def test_local_services_wiring(self):
        customer_service, notification_service, fraud_service = build_local_services()
        
        customer_service.register_customer(
            CustomerRegistrationRequest(first_name="Ada", last_name="Lovelace", email="ada@x.io")
        )
        
        assert len(notification_service.list_notifications()) == 1
        assert len(fraud_service.list_checks()) == 1
