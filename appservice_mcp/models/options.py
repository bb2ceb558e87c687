"""Bound command option models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RetryMode(str, Enum):
    """Retry backoff mode."""

    FIXED = "fixed"
    EXPONENTIAL = "exponential"


class AuthMethod(str, Enum):
    """Authentication method for Azure calls."""

    CREDENTIAL = "credential"
    KEY = "key"
    CONNECTION_STRING = "connectionString"


class RetryPolicyOptions(BaseModel):
    """Retry policy handed to the service as-is.

    ``None`` means the caller did not set the knob and the service applies
    its own default.
    """

    max_retries: Optional[int] = Field(None, description="Maximum retry attempts")
    delay: Optional[float] = Field(None, description="Base delay between retries in seconds")
    max_delay: Optional[float] = Field(None, description="Maximum delay between retries in seconds")
    mode: Optional[str] = Field(None, description="Retry mode: fixed or exponential")
    network_timeout: Optional[float] = Field(None, description="Network timeout per call in seconds")

    def is_empty(self) -> bool:
        """Return True when no retry knob is set."""
        return all(value is None for value in self.model_dump().values())


class DatabaseAddOptions(BaseModel):
    """Options bound for one ``appservice database add`` invocation."""

    subscription: Optional[str] = None
    resource_group: Optional[str] = None
    tenant: Optional[str] = None
    auth_method: Optional[str] = None
    app_name: Optional[str] = None
    database_type: Optional[str] = None
    database_server: Optional[str] = None
    database_name: Optional[str] = None
    connection_string: Optional[str] = None
    retry_policy: Optional[RetryPolicyOptions] = None
