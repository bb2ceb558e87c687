"""Configuration management for appservice-mcp."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from appservice_mcp.models.options import RetryPolicyOptions


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="AZURE_")

    # Azure identity configuration
    subscription_id: Optional[str] = None
    tenant_id: Optional[str] = None
    auth_method: str = "credential"

    # Retry configuration
    retry_max_retries: int = 3
    retry_delay: float = 0.8
    retry_max_delay: float = 60.0
    retry_mode: str = "exponential"
    retry_network_timeout: float = 100.0

    # MCP configuration
    mcp_host: str = "127.0.0.1"
    mcp_port: int = 8989
    mcp_transport: str = "stdio"

    log_level: str = "INFO"

    def default_retry_policy(self) -> RetryPolicyOptions:
        """Build the retry policy used when the caller sets no retry knobs.

        Returns:
            Retry policy populated from the retry settings.
        """
        return RetryPolicyOptions(
            max_retries=self.retry_max_retries,
            delay=self.retry_delay,
            max_delay=self.retry_max_delay,
            mode=self.retry_mode,
            network_timeout=self.retry_network_timeout
        )
