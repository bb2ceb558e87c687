"""MCP App Service tool implementation."""

from typing import Optional

from mcp.server.fastmcp import FastMCP

from appservice_mcp.commands.database_add import CommandContext, METADATA, execute


DATABASE_ADD_TOOL = "appservice_database_add"


def register_appservice_tools(
    mcp: FastMCP,
    context: CommandContext
) -> None:
    """Register the App Service tools with the MCP server.

    Args:
        mcp: The FastMCP server instance.
        context: Collaborators shared by every tool call.
    """

    @mcp.tool(name=DATABASE_ADD_TOOL, description=METADATA.description)
    async def appservice_database_add(
        resource_group: Optional[str] = None,
        app: Optional[str] = None,
        database_type: Optional[str] = None,
        database_server: Optional[str] = None,
        database: Optional[str] = None,
        connection_string: Optional[str] = None,
        subscription: Optional[str] = None,
        tenant: Optional[str] = None,
        auth_method: Optional[str] = None,
        retry_max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        retry_max_delay: Optional[float] = None,
        retry_mode: Optional[str] = None,
        retry_network_timeout: Optional[float] = None
    ) -> dict:
        """
        Add a database connection to an Azure App Service.

        Args:
            resource_group: The name of the Azure resource group (required).
            app: The name of the Azure App Service (required).
            database_type: SqlServer, MySQL, PostgreSQL or CosmosDB (required).
            database_server: The server name or endpoint for the database (required).
            database: The name of the database (required).
            connection_string: Connection string; generated when omitted.
            subscription: Subscription ID; defaults to AZURE_SUBSCRIPTION_ID.
            tenant: Microsoft Entra ID tenant.
            auth_method: credential, key or connectionString.
            retry_max_retries: Maximum retry attempts.
            retry_delay: Initial delay between retries in seconds.
            retry_max_delay: Maximum delay between retries in seconds.
            retry_mode: fixed or exponential.
            retry_network_timeout: Network timeout in seconds.

        Returns:
            Response envelope with ``results.ConnectionInfo`` or ``error``.
        """
        arguments = {
            "resource_group": resource_group,
            "app": app,
            "database_type": database_type,
            "database_server": database_server,
            "database": database,
            "connection_string": connection_string,
            "subscription": subscription,
            "tenant": tenant,
            "auth_method": auth_method,
            "retry_max_retries": retry_max_retries,
            "retry_delay": retry_delay,
            "retry_max_delay": retry_max_delay,
            "retry_mode": retry_mode,
            "retry_network_timeout": retry_network_timeout,
        }
        response = await execute(context, arguments)
        return response.to_dict()
