"""Tests for the Azure App Service client."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceNotFoundError as AzureResourceNotFoundError,
    ServiceResponseTimeoutError,
)
from azure.core.pipeline.policies import RetryMode as PipelineRetryMode
from azure.mgmt.web.models import ConnectionStringDictionary, ConnStringValueTypePair

from appservice_mcp.config import Settings
from appservice_mcp.models.database import DatabaseType
from appservice_mcp.models.options import RetryPolicyOptions
from appservice_mcp.services.appservice import AppServiceClient
from appservice_mcp.services.connection_strings import (
    build_connection_string,
    connection_string_name,
)
from appservice_mcp.utils.exceptions import (
    AuthenticationError,
    AzureServiceError,
    OperationTimeoutError,
    ResourceNotFoundError,
    UnsupportedDatabaseTypeError,
)


MODULE = "appservice_mcp.services.appservice"


def _async_context(value):
    """MagicMock usable as ``async with`` yielding value."""
    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=value)
    manager.__aexit__ = AsyncMock(return_value=False)
    return manager


def _management_client(existing=None):
    client = MagicMock()
    client.web_apps.get = AsyncMock(return_value=MagicMock())
    client.web_apps.list_connection_strings = AsyncMock(
        return_value=ConnectionStringDictionary(properties=existing or {})
    )
    client.web_apps.update_connection_strings = AsyncMock(
        side_effect=lambda resource_group, name, strings: strings
    )
    return client


class TestConnectionStrings:
    """Connection string generation tests."""

    def test_sql_server_template(self):
        """Test SQL Server template with a bare server name."""
        value = build_connection_string(DatabaseType.SQL_SERVER, "test-server", "test-db")
        assert "Server=tcp:test-server.database.windows.net,1433" in value
        assert "Initial Catalog=test-db" in value
        assert "{password}" in value

    def test_keeps_qualified_host(self):
        """Test that fully qualified hosts are not expanded."""
        value = build_connection_string(
            DatabaseType.POSTGRESQL, "pg.example.com", "pg-db"
        )
        assert "Host=pg.example.com" in value

    @pytest.mark.parametrize("database_type", list(DatabaseType))
    def test_every_type_has_template(self, database_type):
        """Test that every supported type generates a string."""
        value = build_connection_string(database_type, "server", "db")
        assert "db" in value

    def test_connection_string_name(self):
        """Test connection string entry naming."""
        assert connection_string_name("orders") == "ordersConnection"


class TestAppServiceClient:
    """AppServiceClient tests."""

    def setup_method(self):
        """Set up client with fast retry defaults."""
        self.settings = Settings(
            subscription_id=None,
            tenant_id=None,
            retry_max_retries=0,
            retry_delay=0,
            retry_network_timeout=5.0
        )
        self.client = AppServiceClient(self.settings)

    async def _add(self, management_client, **overrides):
        values = dict(
            app_name="test-app",
            resource_group="rg1",
            database_type="SqlServer",
            database_server="test-server",
            database_name="test-db",
            connection_string="",
            subscription="sub123",
        )
        values.update(overrides)
        factory = MagicMock(return_value=_async_context(management_client))
        credential = MagicMock()
        with patch(f"{MODULE}.WebSiteManagementClient", factory), \
                patch.object(AppServiceClient, "_create_credential",
                             return_value=_async_context(credential)):
            info = await self.client.add_database(**values)
        return info, factory, credential

    @pytest.mark.asyncio
    async def test_generates_connection_string(self):
        """Test that an empty connection string is generated and configured."""
        management_client = _management_client()

        info, factory, credential = await self._add(management_client)

        factory.assert_called_once_with(
            credential,
            "sub123",
            retry_total=0,
            retry_connect=0,
            retry_read=0,
            retry_status=0,
            retry_backoff_factor=0,
            retry_backoff_max=60.0,
            retry_mode=PipelineRetryMode.Exponential,
            connection_timeout=5.0,
            read_timeout=5.0
        )
        assert info.is_configured is True
        assert info.connection_string_name == "test-dbConnection"
        assert "Initial Catalog=test-db" in info.connection_string
        assert info.configured_at.tzinfo is not None

        args = management_client.web_apps.update_connection_strings.await_args.args
        assert args[0] == "rg1"
        assert args[1] == "test-app"
        entry = args[2].properties["test-dbConnection"]
        assert entry.value == info.connection_string
        assert entry.type == "SQLAzure"

    @pytest.mark.asyncio
    async def test_keeps_existing_connection_strings(self):
        """Test that other connection strings on the app are preserved."""
        existing = {"Other": ConnStringValueTypePair(value="x", type="Custom")}
        management_client = _management_client(existing)

        await self._add(
            management_client,
            database_type="mysql",
            connection_string="Server=custom;"
        )

        properties = management_client.web_apps.update_connection_strings.await_args.args[2].properties
        assert set(properties) == {"Other", "test-dbConnection"}
        assert properties["test-dbConnection"].value == "Server=custom;"
        assert properties["test-dbConnection"].type == "MySql"

    @pytest.mark.asyncio
    async def test_returns_input_database_type(self):
        """Test that the returned type echoes the caller's spelling."""
        info, _, _ = await self._add(_management_client(), database_type="cosmosdb")
        assert info.database_type == "cosmosdb"

    @pytest.mark.asyncio
    async def test_unsupported_type_before_network(self):
        """Test that unknown types fail before any Azure call."""
        management_client = _management_client()

        with pytest.raises(UnsupportedDatabaseTypeError):
            await self._add(management_client, database_type="InvalidType")
        management_client.web_apps.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_app_not_found(self):
        """Test mapping of a 404 to ResourceNotFoundError."""
        management_client = _management_client()
        management_client.web_apps.get.side_effect = AzureResourceNotFoundError("missing")

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await self._add(management_client)
        assert "not found" in exc_info.value.message
        management_client.web_apps.update_connection_strings.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_authentication_failure(self):
        """Test mapping of credential errors."""
        management_client = _management_client()
        management_client.web_apps.get.side_effect = ClientAuthenticationError("no credential")

        with pytest.raises(AuthenticationError):
            await self._add(management_client)

    @pytest.mark.asyncio
    async def test_http_error(self):
        """Test mapping of other management API errors."""
        management_client = _management_client()
        management_client.web_apps.update_connection_strings.side_effect = HttpResponseError("conflict")

        with pytest.raises(AzureServiceError):
            await self._add(management_client)

    @pytest.mark.asyncio
    async def test_retry_policy_configures_sdk_client(self):
        """Test that the passed retry policy overrides the settings defaults on the SDK client."""
        info, factory, _ = await self._add(
            _management_client(),
            retry_policy=RetryPolicyOptions(max_retries=2, delay=0.5, mode="fixed")
        )

        assert info.is_configured is True
        kwargs = factory.call_args.kwargs
        assert kwargs["retry_total"] == 2
        assert kwargs["retry_connect"] == 2
        assert kwargs["retry_backoff_factor"] == 0.5
        assert kwargs["retry_backoff_max"] == 60.0
        assert kwargs["retry_mode"] == PipelineRetryMode.Fixed
        assert kwargs["connection_timeout"] == 5.0

    @pytest.mark.asyncio
    async def test_calls_are_not_retried_outside_sdk(self):
        """Test that a failing call is awaited once and surfaces as a service error."""
        management_client = _management_client()
        management_client.web_apps.get.side_effect = HttpResponseError("service unavailable")

        with pytest.raises(AzureServiceError):
            await self._add(
                management_client,
                retry_policy=RetryPolicyOptions(max_retries=3)
            )
        assert management_client.web_apps.get.await_count == 1

    @pytest.mark.asyncio
    async def test_timeout_mapped(self):
        """Test mapping of an SDK timeout to OperationTimeoutError."""
        management_client = _management_client()
        management_client.web_apps.list_connection_strings.side_effect = (
            ServiceResponseTimeoutError("read timed out")
        )

        with pytest.raises(OperationTimeoutError) as exc_info:
            await self._add(management_client)
        assert exc_info.value.details["timeout_seconds"] == 5.0
        management_client.web_apps.update_connection_strings.assert_not_awaited()

    def test_credential_without_tenant(self):
        """Test default credential selection."""
        with patch(f"{MODULE}.DefaultAzureCredential") as default_credential:
            credential = self.client._create_credential(None)
        default_credential.assert_called_once_with()
        assert credential is default_credential.return_value

    def test_credential_with_tenant(self):
        """Test tenant-scoped credential chain."""
        with patch(f"{MODULE}.DefaultAzureCredential") as default_credential, \
                patch(f"{MODULE}.AzureCliCredential") as cli_credential, \
                patch(f"{MODULE}.ChainedTokenCredential") as chained:
            credential = self.client._create_credential("tenant123")
        cli_credential.assert_called_once_with(tenant_id="tenant123")
        default_credential.assert_called_once_with(additionally_allowed_tenants=["tenant123"])
        chained.assert_called_once_with(cli_credential.return_value, default_credential.return_value)
        assert credential is chained.return_value
