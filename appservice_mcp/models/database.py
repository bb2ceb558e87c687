"""Database-related data models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

from appservice_mcp.utils.exceptions import UnsupportedDatabaseTypeError


class DatabaseType(str, Enum):
    """Database types an App Service can be connected to."""

    SQL_SERVER = "SqlServer"
    MYSQL = "MySQL"
    POSTGRESQL = "PostgreSQL"
    COSMOSDB = "CosmosDB"

    @classmethod
    def parse(cls, value: str | None) -> "DatabaseType":
        """Look up a database type by name, ignoring case.

        Args:
            value: Database type as typed by the caller.

        Returns:
            The matching DatabaseType.

        Raises:
            UnsupportedDatabaseTypeError: If the value is not a known type.
        """
        key = (value or "").strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        if key in _ALIASES:
            return _ALIASES[key]
        raise UnsupportedDatabaseTypeError(
            value or "",
            supported=[member.value for member in cls]
        )


_ALIASES = {
    "sql": DatabaseType.SQL_SERVER,
    "azuresql": DatabaseType.SQL_SERVER,
    "postgres": DatabaseType.POSTGRESQL,
    "cosmos": DatabaseType.COSMOSDB,
}


class DatabaseConnectionInfo(BaseModel):
    """Connection settings configured on an App Service.

    Serialized with PascalCase keys (``DatabaseType``, ``ConnectionString``,
    ``IsConfigured``...).
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True
    )

    database_type: str
    database_server: str
    database_name: str
    connection_string: str
    connection_string_name: str
    is_configured: bool = False
    configured_at: datetime
