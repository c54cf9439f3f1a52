"""
Tests for the fraud service and its API.
"""

import pytest
from fastapi.testclient import TestClient

from fraud.api import app, reset_api_state
from fraud.service import FraudCheckService, LocalFraudClient

from conftest import FIXED_NOW


@pytest.fixture
def flagging_service(fraud_store) -> FraudCheckService:
    """Fraud service that flags customer 2."""
    return FraudCheckService(fraud_store, flagged_customer_ids={2}, clock=lambda: FIXED_NOW)


@pytest.fixture
def api_client(flagging_service):
    reset_api_state(flagging_service)
    yield TestClient(app)
    reset_api_state(None)


class TestFraudCheckService:
    """Tests for FraudCheckService."""
    
    def test_unflagged_customer_passes(self, fraud_service):
        assert fraud_service.is_fraudulent_customer(1) is False
    
    def test_flagged_customer(self, flagging_service):
        assert flagging_service.is_fraudulent_customer(2) is True
    
    def test_records_every_check(self, flagging_service):
        """Test that each answered check is kept in the history."""
        flagging_service.is_fraudulent_customer(1)
        flagging_service.is_fraudulent_customer(2)
        flagging_service.is_fraudulent_customer(1)
        
        checks = flagging_service.list_checks()
        assert [(c.customer_id, c.is_fraudster) for c in checks] == [(1, False), (2, True), (1, False)]
        assert all(c.created_at == FIXED_NOW for c in checks)
    
    def test_local_client(self, flagging_service):
        client = LocalFraudClient(flagging_service)
        
        assert client.is_fraudster(2).is_fraudster is True
        assert client.is_fraudster(3, timeout=1.0).is_fraudster is False


class TestFraudCheckEndpoint:
    """Tests for GET /api/v1/fraud-check/{customerId}."""
    
    def test_not_fraudster(self, api_client):
        response = api_client.get("/api/v1/fraud-check/1")
        
        assert response.status_code == 200
        assert response.json() == {"isFraudster": False}
    
    def test_fraudster(self, api_client):
        response = api_client.get("/api/v1/fraud-check/2")
        
        assert response.json() == {"isFraudster": True}
    
    def test_non_numeric_id(self, api_client, flagging_service):
        response = api_client.get("/api/v1/fraud-check/abc")
        
        assert response.status_code == 422
        assert flagging_service.list_checks() == []
    
    def test_health_check(self, api_client):
        assert api_client.get("/health").json()["service"] == "fraud"
