"""App Service database operations."""

import logging
from datetime import datetime, timezone
from typing import Optional, Protocol

from azure.core.exceptions import (
    AzureError,
    ClientAuthenticationError,
    HttpResponseError,
    ResourceNotFoundError as AzureResourceNotFoundError,
    ServiceRequestTimeoutError,
    ServiceResponseTimeoutError,
)
from azure.identity.aio import AzureCliCredential, ChainedTokenCredential, DefaultAzureCredential
from azure.mgmt.web.aio import WebSiteManagementClient
from azure.mgmt.web.models import ConnectionStringDictionary, ConnStringValueTypePair

from appservice_mcp.config import Settings
from appservice_mcp.models.database import DatabaseConnectionInfo, DatabaseType
from appservice_mcp.models.options import RetryPolicyOptions
from appservice_mcp.services.connection_strings import (
    CONNECTION_STRING_TYPES,
    build_connection_string,
    connection_string_name,
)
from appservice_mcp.services.resilience import client_kwargs, resolve_policy
from appservice_mcp.utils.exceptions import (
    AuthenticationError,
    AzureServiceError,
    OperationTimeoutError,
    ResourceNotFoundError,
)

logger = logging.getLogger("appservice-client")


class AddDatabase(Protocol):
    """Capability that configures a database connection on an App Service.

    Raises UnsupportedDatabaseTypeError for unknown database types and
    ResourceNotFoundError when the subscription, resource group or app does
    not exist. An empty ``connection_string`` asks the implementation to
    generate one.
    """

    async def __call__(
        self,
        app_name: str,
        resource_group: str,
        database_type: str,
        database_server: str,
        database_name: str,
        connection_string: str,
        subscription: str,
        tenant: Optional[str] = None,
        retry_policy: Optional[RetryPolicyOptions] = None,
    ) -> DatabaseConnectionInfo:
        ...


class AppServiceClient:
    """Azure management client for App Service database connections."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the client.

        Args:
            settings: Application settings; supplies the default tenant and
                the retry defaults.
        """
        self.settings = settings or Settings()

    def _create_credential(self, tenant: Optional[str]):
        tenant = tenant or self.settings.tenant_id
        if tenant:
            return ChainedTokenCredential(
                AzureCliCredential(tenant_id=tenant),
                DefaultAzureCredential(additionally_allowed_tenants=[tenant])
            )
        return DefaultAzureCredential()

    async def add_database(
        self,
        app_name: str,
        resource_group: str,
        database_type: str,
        database_server: str,
        database_name: str,
        connection_string: str,
        subscription: str,
        tenant: Optional[str] = None,
        retry_policy: Optional[RetryPolicyOptions] = None,
    ) -> DatabaseConnectionInfo:
        """Add a database connection string to an App Service.

        Args:
            app_name: Name of the web app.
            resource_group: Resource group containing the web app.
            database_type: Database type, matched case-insensitively.
            database_server: Database server name or host.
            database_name: Database name.
            connection_string: Connection string; generated when empty.
            subscription: Subscription ID.
            tenant: Optional tenant ID.
            retry_policy: Optional retry policy overriding the defaults.

        Returns:
            The configured connection information.

        Raises:
            UnsupportedDatabaseTypeError: If the database type is unknown.
            ResourceNotFoundError: If the web app cannot be found.
            AuthenticationError: If no credential could be acquired.
            OperationTimeoutError: If a call timed out on its last try.
            AzureServiceError: For any other management API failure.
        """
        db_type = DatabaseType.parse(database_type)
        if not connection_string:
            connection_string = build_connection_string(
                db_type, database_server, database_name
            )
        name = connection_string_name(database_name)

        policy = resolve_policy(retry_policy, self.settings.default_retry_policy())
        kwargs = client_kwargs(policy)

        try:
            async with self._create_credential(tenant) as credential:
                async with WebSiteManagementClient(credential, subscription, **kwargs) as client:
                    await client.web_apps.get(resource_group, app_name)

                    existing = await client.web_apps.list_connection_strings(
                        resource_group, app_name
                    )
                    properties = dict(existing.properties or {})
                    properties[name] = ConnStringValueTypePair(
                        value=connection_string,
                        type=CONNECTION_STRING_TYPES[db_type]
                    )

                    await client.web_apps.update_connection_strings(
                        resource_group,
                        app_name,
                        ConnectionStringDictionary(properties=properties)
                    )
        except AzureResourceNotFoundError as e:
            raise ResourceNotFoundError(
                f"App Service '{app_name}' not found in resource group "
                f"'{resource_group}' (subscription '{subscription}')",
                resource=app_name
            ) from e
        except (ServiceRequestTimeoutError, ServiceResponseTimeoutError) as e:
            raise OperationTimeoutError(policy.network_timeout) from e
        except ClientAuthenticationError as e:
            raise AuthenticationError(e.message or str(e)) from e
        except HttpResponseError as e:
            raise AzureServiceError(e.message or str(e), status_code=e.status_code) from e
        except AzureError as e:
            raise AzureServiceError(str(e)) from e

        logger.info(
            "Configured %s connection '%s' on App Service '%s'",
            db_type.value, name, app_name
        )

        return DatabaseConnectionInfo(
            database_type=database_type,
            database_server=database_server,
            database_name=database_name,
            connection_string=connection_string,
            connection_string_name=name,
            is_configured=True,
            configured_at=datetime.now(timezone.utc)
        )
