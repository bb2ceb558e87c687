"""Utility modules for appservice-mcp."""

from appservice_mcp.utils.constants import (
    ErrorCode,
    ERROR_MESSAGES,
    STATUS_OK,
    STATUS_BAD_REQUEST,
)
from appservice_mcp.utils.exceptions import (
    AppServiceMCPError,
    OptionValidationError,
    UnsupportedDatabaseTypeError,
    ResourceNotFoundError,
    AzureServiceError,
    AuthenticationError,
    OperationTimeoutError,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "STATUS_OK",
    "STATUS_BAD_REQUEST",
    "AppServiceMCPError",
    "OptionValidationError",
    "UnsupportedDatabaseTypeError",
    "ResourceNotFoundError",
    "AzureServiceError",
    "AuthenticationError",
    "OperationTimeoutError",
]
