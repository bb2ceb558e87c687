"""Data models for appservice-mcp."""

from appservice_mcp.models.database import (
    DatabaseType,
    DatabaseConnectionInfo,
)
from appservice_mcp.models.options import (
    RetryMode,
    AuthMethod,
    RetryPolicyOptions,
    DatabaseAddOptions,
)
from appservice_mcp.models.response import (
    ErrorDetails,
    CommandResponse,
    DatabaseAddResult,
)

__all__ = [
    "DatabaseType",
    "DatabaseConnectionInfo",
    "RetryMode",
    "AuthMethod",
    "RetryPolicyOptions",
    "DatabaseAddOptions",
    "ErrorDetails",
    "CommandResponse",
    "DatabaseAddResult",
]
