"""Commands for appservice-mcp."""

from appservice_mcp.commands.database_add import (
    METADATA,
    CommandMetadata,
    CommandContext,
    bind_options,
    validate_options,
    execute,
)

__all__ = [
    "METADATA",
    "CommandMetadata",
    "CommandContext",
    "bind_options",
    "validate_options",
    "execute",
]
