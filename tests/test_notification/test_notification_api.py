"""
Tests for the notification service API.
"""

import pytest
from fastapi.testclient import TestClient

from notification.api import app, reset_api_state


@pytest.fixture
def api_client(notification_service):
    """Create a test client with fresh state."""
    reset_api_state(notification_service)
    yield TestClient(app)
    reset_api_state(None)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""
    
    def test_health_check(self, api_client):
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json()["service"] == "notification"


class TestSendEndpoint:
    """Tests for POST /api/v1/notifications."""
    
    def test_send_notification(self, api_client, notification_service):
        response = api_client.post("/api/v1/notifications", json={
            "toCustomerId": 1,
            "toCustomerEmail": "ada@x.io",
            "message": "Hi Ada, Welcome to IssamCode.",
        })
        
        assert response.status_code == 200
        assert response.content == b""
        assert len(notification_service.list_notifications()) == 1
    
    def test_invalid_customer_id(self, api_client, notification_service):
        response = api_client.post("/api/v1/notifications", json={
            "toCustomerId": "abc",
            "toCustomerEmail": "ada@x.io",
            "message": "Hi",
        })
        
        assert response.status_code == 422
        assert notification_service.list_notifications() == []


class TestListEndpoint:
    """Tests for GET /api/v1/notifications/all."""
    
    def test_lists_notifications(self, api_client):
        api_client.post("/api/v1/notifications", json={
            "toCustomerId": 1,
            "toCustomerEmail": "ada@x.io",
            "message": "Hi Ada, Welcome to IssamCode.",
        })
        
        response = api_client.get("/api/v1/notifications/all")
        
        assert response.status_code == 200
        assert response.json() == [{
            "notificationId": 1,
            "message": "Hi Ada, Welcome to IssamCode.",
            "sentAt": "2026-01-15T09:30:00",
            "sender": "IssamCode",
            "targetCustomerId": 1,
            "targetCustomerEmail": "ada@x.io",
        }]
    
    def test_empty(self, api_client):
        assert api_client.get("/api/v1/notifications/all").json() == []
