"""Constants for appservice-mcp."""

from enum import Enum


STATUS_OK = 200
STATUS_BAD_REQUEST = 400


class ErrorCode(str, Enum):
    """Error code enumeration."""

    INVALID_REQUEST = "ERR_001"
    UNSUPPORTED_DATABASE_TYPE = "ERR_002"
    RESOURCE_NOT_FOUND = "ERR_003"
    AZURE_SERVICE_ERROR = "ERR_004"
    AUTHENTICATION_FAILED = "ERR_005"
    OPERATION_TIMEOUT = "ERR_006"
    INTERNAL_ERROR = "ERR_007"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_REQUEST: "Missing or malformed command options",
    ErrorCode.UNSUPPORTED_DATABASE_TYPE: "Unsupported database type",
    ErrorCode.RESOURCE_NOT_FOUND: "The requested Azure resource was not found",
    ErrorCode.AZURE_SERVICE_ERROR: "Azure service request failed",
    ErrorCode.AUTHENTICATION_FAILED: "Failed to authenticate with Azure",
    ErrorCode.OPERATION_TIMEOUT: "The operation timed out",
    ErrorCode.INTERNAL_ERROR: "The command failed unexpectedly",
}
