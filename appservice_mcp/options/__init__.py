"""Command option definitions for appservice-mcp."""

from appservice_mcp.options.definitions import (
    OptionDefinition,
    SUBSCRIPTION,
    TENANT,
    AUTH_METHOD,
    RESOURCE_GROUP,
    APP,
    DATABASE_TYPE,
    DATABASE_SERVER,
    DATABASE,
    CONNECTION_STRING,
    RETRY_MAX_RETRIES,
    RETRY_DELAY,
    RETRY_MAX_DELAY,
    RETRY_MODE,
    RETRY_NETWORK_TIMEOUT,
    GLOBAL_OPTIONS,
    RETRY_OPTIONS,
    DATABASE_ADD_OPTIONS,
    add_to_parser,
)

__all__ = [
    "OptionDefinition",
    "SUBSCRIPTION",
    "TENANT",
    "AUTH_METHOD",
    "RESOURCE_GROUP",
    "APP",
    "DATABASE_TYPE",
    "DATABASE_SERVER",
    "DATABASE",
    "CONNECTION_STRING",
    "RETRY_MAX_RETRIES",
    "RETRY_DELAY",
    "RETRY_MAX_DELAY",
    "RETRY_MODE",
    "RETRY_NETWORK_TIMEOUT",
    "GLOBAL_OPTIONS",
    "RETRY_OPTIONS",
    "DATABASE_ADD_OPTIONS",
    "add_to_parser",
]
