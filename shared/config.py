"""
Environment-driven settings for the services.

All three services read the same Settings; each one only uses the fields it
needs. Values come from environment variables and fall back to defaults that
match running everything on localhost.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class Settings(BaseModel):
    """Configuration shared by the customer, notification and fraud services."""
    fraud_service_url: str = "http://localhost:8081"
    notification_service_url: str = "http://localhost:8082"
    notification_sender: str = "IssamCode"
    welcome_message_template: str = "Hi {first_name}, Welcome to IssamCode."
    http_timeout: Optional[float] = Field(
        default=None,
        description="Seconds; None keeps the HTTP transport default",
    )
    http_retries: int = Field(default=0, ge=0, description="Connection retries")
    data_dir: Optional[Path] = Field(
        default=None,
        description="Directory for JSON record files; None keeps records in memory",
    )
    fraud_flagged_customer_ids: frozenset[int] = frozenset()
    log_level: str = "INFO"
    
    @field_validator("fraud_flagged_customer_ids", mode="before")
    @classmethod
    def _parse_flagged_ids(cls, value):
        """Accept the comma separated form used by FRAUD_FLAGGED_CUSTOMER_IDS."""
        if not isinstance(value, str):
            return value
        parts = [part.strip() for part in value.split(",") if part.strip()]
        try:
            return frozenset(int(part) for part in parts)
        except ValueError:
            raise ValueError(
                f"FRAUD_FLAGGED_CUSTOMER_IDS must be comma separated integers, got {value!r}"
            ) from None
    
    def store_path(self, filename: str) -> Optional[Path]:
        """Path of a record file under data_dir, or None when in memory."""
        if self.data_dir is None:
            return None
        return self.data_dir / filename


def load_settings() -> Settings:
    """Build Settings from the environment."""
    values = {}
    env_map = {
        "FRAUD_SERVICE_URL": "fraud_service_url",
        "NOTIFICATION_SERVICE_URL": "notification_service_url",
        "NOTIFICATION_SENDER": "notification_sender",
        "WELCOME_MESSAGE_TEMPLATE": "welcome_message_template",
        "HTTP_TIMEOUT": "http_timeout",
        "HTTP_RETRIES": "http_retries",
        "DATA_DIR": "data_dir",
        "FRAUD_FLAGGED_CUSTOMER_IDS": "fraud_flagged_customer_ids",
        "LOG_LEVEL": "log_level",
    }
    for env_name, field_name in env_map.items():
        value = os.getenv(env_name)
        if value:
            values[field_name] = value
    
    return Settings(**values)
