"""Exception classes for appservice-mcp."""

from appservice_mcp.utils.constants import ErrorCode, ERROR_MESSAGES


class AppServiceMCPError(Exception):
    """Base class for errors reported back to callers.

    ``details`` only carries values that are safe to return, such as the
    validation messages or the rejected database type.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict | None = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES[code]
        self.details = dict(details or {})
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Error fields as returned in a command response."""
        return {
            "code": self.code.value,
            "type": type(self).__name__,
            "message": self.message,
            "content": self.details,
        }


class OptionValidationError(AppServiceMCPError):
    """One or more command options are missing or malformed."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(
            code=ErrorCode.INVALID_REQUEST,
            message="; ".join(self.errors) or None,
            details={"errors": self.errors}
        )


class UnsupportedDatabaseTypeError(AppServiceMCPError):
    """Database type outside the supported set."""

    def __init__(self, database_type: str, supported: list[str] | None = None):
        self.database_type = database_type
        details = {"database_type": database_type}
        if supported:
            details["supported"] = supported
        super().__init__(
            code=ErrorCode.UNSUPPORTED_DATABASE_TYPE,
            message=f"Unsupported database type: '{database_type}'",
            details=details
        )


class ResourceNotFoundError(AppServiceMCPError):
    """Subscription, resource group or web app does not exist."""

    def __init__(self, message: str, resource: str | None = None):
        super().__init__(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=message,
            details={"resource": resource} if resource else None
        )


class AzureServiceError(AppServiceMCPError):
    """Azure management API error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            code=ErrorCode.AZURE_SERVICE_ERROR,
            message=message,
            details={"status_code": status_code} if status_code else None
        )


class AuthenticationError(AppServiceMCPError):
    """Credential acquisition error."""

    def __init__(self, message: str):
        super().__init__(
            code=ErrorCode.AUTHENTICATION_FAILED,
            message=message
        )


class OperationTimeoutError(AppServiceMCPError):
    """Network timeout from the retry policy expired."""

    def __init__(self, seconds: float):
        super().__init__(
            code=ErrorCode.OPERATION_TIMEOUT,
            message=f"Operation timed out after {seconds}s",
            details={"timeout_seconds": seconds}
        )
