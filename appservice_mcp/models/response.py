"""Command response envelope."""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from appservice_mcp.models.database import DatabaseConnectionInfo
from appservice_mcp.utils.constants import STATUS_OK


class ErrorDetails(BaseModel):
    """Error section of a failed response."""

    code: str
    type: str
    message: str
    content: dict[str, Any] = Field(default_factory=dict)


class DatabaseAddResult(BaseModel):
    """Result payload of ``appservice database add``."""

    model_config = ConfigDict(populate_by_name=True)

    connection_info: DatabaseConnectionInfo = Field(alias="ConnectionInfo")


class CommandResponse(BaseModel):
    """Response envelope returned by every command."""

    status: int = STATUS_OK
    message: str = ""
    results: Optional[dict[str, Any]] = None
    error: Optional[ErrorDetails] = None
    duration_ms: float = 0.0

    @property
    def is_success(self) -> bool:
        """Return True when the command succeeded."""
        return self.status == STATUS_OK

    def to_dict(self) -> dict:
        """Dump the envelope as JSON-compatible data."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the envelope to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
