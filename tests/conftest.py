"""Pytest configuration and fixtures for appservice-mcp tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from appservice_mcp.commands.database_add import CommandContext
from appservice_mcp.config import Settings
from appservice_mcp.models.database import DatabaseConnectionInfo, DatabaseType


@pytest.fixture
def settings():
    """Settings with no subscription fallback."""
    return Settings(subscription_id=None, tenant_id=None, auth_method="credential")


async def fake_add_database(
    app_name,
    resource_group,
    database_type,
    database_server,
    database_name,
    connection_string,
    subscription,
    tenant=None,
    retry_policy=None,
):
    """Service double that echoes its inputs like the Azure client does."""
    DatabaseType.parse(database_type)
    return DatabaseConnectionInfo(
        database_type=database_type,
        database_server=database_server,
        database_name=database_name,
        connection_string=connection_string or f"Generated connection string for {database_type}",
        connection_string_name=f"{database_name}Connection",
        is_configured=True,
        configured_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def add_database():
    """AsyncMock service double."""
    return AsyncMock(side_effect=fake_add_database)


@pytest.fixture
def context(add_database, settings):
    """Command context wired to the service double."""
    return CommandContext(add_database=add_database, settings=settings)


@pytest.fixture
def valid_args():
    """A complete, valid argument mapping."""
    return {
        "subscription": "sub123",
        "resource-group": "rg1",
        "app": "test-app",
        "database-type": "SqlServer",
        "database-server": "test-server.database.windows.net",
        "database": "test-db",
    }
