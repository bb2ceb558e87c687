"""Main entry point for appservice-mcp."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from mcp.server.fastmcp import FastMCP

from appservice_mcp.commands.database_add import CommandContext, METADATA, execute
from appservice_mcp.config import Settings
from appservice_mcp.options.definitions import DATABASE_ADD_OPTIONS, add_to_parser
from appservice_mcp.services.appservice import AppServiceClient
from appservice_mcp.tools.appservice import register_appservice_tools


logger = logging.getLogger("appservice-mcp")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser.

    Returns:
        Parser with ``serve`` and ``appservice database add`` subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="appservice-mcp",
        description="Azure App Service operations as commands and MCP tools"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the MCP server")
    serve.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        help="MCP transport"
    )
    serve.add_argument("--host", type=str, help="Host for the SSE transport")
    serve.add_argument("--port", type=int, help="Port for the SSE transport")

    appservice = commands.add_parser(
        "appservice",
        help="App Service operations - Commands for managing Azure App Service resources"
    )
    appservice_groups = appservice.add_subparsers(dest="group", required=True)
    database = appservice_groups.add_parser(
        "database",
        help="App Service database operations"
    )
    database_commands = database.add_subparsers(dest="action", required=True)
    add = database_commands.add_parser(
        METADATA.name,
        help=METADATA.title,
        description=METADATA.description
    )
    add_to_parser(add, DATABASE_ADD_OPTIONS)

    return parser


def create_context(settings: Settings) -> CommandContext:
    """Wire the production collaborators.

    Args:
        settings: Application settings.

    Returns:
        Command context backed by the Azure management client.
    """
    client = AppServiceClient(settings)
    return CommandContext(
        add_database=client.add_database,
        settings=settings,
        logger=logger
    )


async def run_server(settings: Settings) -> None:
    """Run the MCP server.

    Args:
        settings: Application settings.
    """
    mcp = FastMCP("appservice-mcp", host=settings.mcp_host, port=settings.mcp_port)

    register_appservice_tools(mcp, create_context(settings))

    logger.info(
        "appservice-mcp server ready; transport=%s", settings.mcp_transport
    )
    if settings.mcp_transport == "sse":
        await mcp.run_sse_async()
    else:
        await mcp.run_stdio_async()


async def run_command(settings: Settings, args: argparse.Namespace) -> int:
    """Run ``appservice database add`` once and print the response.

    Args:
        settings: Application settings.
        args: Parsed command-line arguments.

    Returns:
        Process exit code.
    """
    response = await execute(create_context(settings), args)
    print(response.to_json())
    return 0 if response.is_success else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("azure").setLevel(logging.WARNING)

    args = build_parser().parse_args(argv)

    if args.command == "serve":
        if args.transport:
            settings.mcp_transport = args.transport
        if args.host:
            settings.mcp_host = args.host
        if args.port:
            settings.mcp_port = args.port
        logger.info("Starting appservice-mcp server")
        asyncio.run(run_server(settings))
        return 0

    return asyncio.run(run_command(settings, args))


if __name__ == "__main__":
    sys.exit(main())
