"""Service modules for appservice-mcp."""

from appservice_mcp.services.appservice import (
    AddDatabase,
    AppServiceClient,
)
from appservice_mcp.services.connection_strings import (
    CONNECTION_STRING_TYPES,
    build_connection_string,
    connection_string_name,
)
from appservice_mcp.services.resilience import (
    client_kwargs,
    resolve_policy,
)

__all__ = [
    # App Service
    "AddDatabase",
    "AppServiceClient",
    # Connection strings
    "CONNECTION_STRING_TYPES",
    "build_connection_string",
    "connection_string_name",
    # Resilience
    "client_kwargs",
    "resolve_policy",
]
