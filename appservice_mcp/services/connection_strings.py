"""Connection string templates per database type."""

from appservice_mcp.models.database import DatabaseType


# App Service connection string types (ConnectionStringType in the management API)
CONNECTION_STRING_TYPES: dict[DatabaseType, str] = {
    DatabaseType.SQL_SERVER: "SQLAzure",
    DatabaseType.MYSQL: "MySql",
    DatabaseType.POSTGRESQL: "PostgreSQL",
    DatabaseType.COSMOSDB: "DocDb",
}

_TEMPLATES: dict[DatabaseType, str] = {
    DatabaseType.SQL_SERVER: (
        "Server=tcp:{server},1433;Initial Catalog={database};"
        "Persist Security Info=False;User ID={{username}};Password={{password}};"
        "MultipleActiveResultSets=False;Encrypt=True;"
        "TrustServerCertificate=False;Connection Timeout=30;"
    ),
    DatabaseType.MYSQL: (
        "Server={server};Database={database};Uid={{username}};Pwd={{password}};"
        "SslMode=Required;"
    ),
    DatabaseType.POSTGRESQL: (
        "Host={server};Database={database};Username={{username}};"
        "Password={{password}};SslMode=Require;"
    ),
    DatabaseType.COSMOSDB: (
        "AccountEndpoint=https://{server}:443/;AccountKey={{key}};"
        "Database={database};"
    ),
}


def _qualify_server(database_type: DatabaseType, server: str) -> str:
    """Expand a bare server name to its Azure host name."""
    if "." in server:
        return server
    suffixes = {
        DatabaseType.SQL_SERVER: ".database.windows.net",
        DatabaseType.MYSQL: ".mysql.database.azure.com",
        DatabaseType.POSTGRESQL: ".postgres.database.azure.com",
        DatabaseType.COSMOSDB: ".documents.azure.com",
    }
    return server + suffixes[database_type]


def build_connection_string(
    database_type: DatabaseType,
    server: str,
    database: str
) -> str:
    """Generate a connection string for a database.

    Credentials are left as ``{username}``/``{password}``/``{key}``
    placeholders for the operator to fill in.

    Args:
        database_type: The database type.
        server: Server name or fully qualified host name.
        database: Database name.

    Returns:
        The generated connection string.
    """
    return _TEMPLATES[database_type].format(
        server=_qualify_server(database_type, server),
        database=database
    )


def connection_string_name(database: str) -> str:
    """Name of the App Service connection string entry for a database."""
    return f"{database}Connection"
