"""Static option table for App Service commands."""

import argparse
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from appservice_mcp.models.options import AuthMethod, RetryMode


@dataclass(frozen=True)
class OptionDefinition:
    """A named command-line option."""

    name: str
    description: str
    required: bool = False
    type: type = str
    choices: Optional[tuple[str, ...]] = None
    default: Any = None

    @property
    def flag(self) -> str:
        return f"--{self.name}"

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")


# Global options
SUBSCRIPTION = OptionDefinition(
    "subscription",
    "The Azure subscription ID or name. Falls back to AZURE_SUBSCRIPTION_ID when omitted.",
    required=True
)
TENANT = OptionDefinition(
    "tenant",
    "The Microsoft Entra ID tenant ID or name."
)
AUTH_METHOD = OptionDefinition(
    "auth-method",
    "Authentication method to use: credential, key or connectionString.",
    choices=tuple(method.value for method in AuthMethod)
)
RESOURCE_GROUP = OptionDefinition(
    "resource-group",
    "The name of the Azure resource group.",
    required=True
)

# App Service options
APP = OptionDefinition(
    "app",
    "The name of the Azure App Service.",
    required=True
)
DATABASE_TYPE = OptionDefinition(
    "database-type",
    "The type of database (e.g., SqlServer, MySQL, PostgreSQL, CosmosDB).",
    required=True
)
DATABASE_SERVER = OptionDefinition(
    "database-server",
    "The server name or endpoint for the database.",
    required=True
)
DATABASE = OptionDefinition(
    "database",
    "The name of the database.",
    required=True
)
CONNECTION_STRING = OptionDefinition(
    "connection-string",
    "The connection string for the database. If not provided, a default will be generated."
)

# Retry policy options
RETRY_MAX_RETRIES = OptionDefinition(
    "retry-max-retries",
    "Maximum number of retry attempts for failed operations.",
    type=int
)
RETRY_DELAY = OptionDefinition(
    "retry-delay",
    "Initial delay in seconds between retry attempts.",
    type=float
)
RETRY_MAX_DELAY = OptionDefinition(
    "retry-max-delay",
    "Maximum delay in seconds between retries.",
    type=float
)
RETRY_MODE = OptionDefinition(
    "retry-mode",
    "Retry strategy: fixed or exponential.",
    choices=tuple(mode.value for mode in RetryMode)
)
RETRY_NETWORK_TIMEOUT = OptionDefinition(
    "retry-network-timeout",
    "Network operation timeout in seconds.",
    type=float
)

GLOBAL_OPTIONS = (SUBSCRIPTION, TENANT, AUTH_METHOD)

RETRY_OPTIONS = (
    RETRY_MAX_RETRIES,
    RETRY_DELAY,
    RETRY_MAX_DELAY,
    RETRY_MODE,
    RETRY_NETWORK_TIMEOUT,
)

DATABASE_ADD_OPTIONS = (
    *GLOBAL_OPTIONS,
    RESOURCE_GROUP,
    APP,
    DATABASE_TYPE,
    DATABASE_SERVER,
    DATABASE,
    CONNECTION_STRING,
    *RETRY_OPTIONS,
)


def add_to_parser(
    parser: argparse.ArgumentParser,
    definitions: Iterable[OptionDefinition]
) -> None:
    """Register option definitions on an argparse parser.

    Required options are not enforced by argparse; the command reports them
    so a missing value produces a 400 response instead of exiting.

    Args:
        parser: The parser to extend.
        definitions: Options to add.
    """
    for option in definitions:
        help_text = option.description
        if option.required:
            help_text = f"{help_text} (required)"
        parser.add_argument(
            option.flag,
            dest=option.dest,
            type=option.type,
            default=option.default,
            help=help_text
        )
