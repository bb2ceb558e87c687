"""Retry policy resolution for the Azure management clients.

Retries and timeouts are carried out by the azure-core pipeline; this module
only turns a RetryPolicyOptions value into the keyword arguments the
pipeline understands.
"""

from typing import Any, Optional

from azure.core.pipeline.policies import RetryMode as PipelineRetryMode

from appservice_mcp.models.options import RetryMode, RetryPolicyOptions


def resolve_policy(
    policy: Optional[RetryPolicyOptions],
    defaults: RetryPolicyOptions
) -> RetryPolicyOptions:
    """Overlay the knobs a caller set on top of default values.

    Args:
        policy: Caller-provided policy, possibly partial or None.
        defaults: Fully populated default policy.

    Returns:
        A fully populated policy.
    """
    if policy is None:
        return defaults
    overrides = policy.model_dump(exclude_none=True)
    return defaults.model_copy(update=overrides)


def client_kwargs(policy: RetryPolicyOptions) -> dict[str, Any]:
    """Keyword arguments configuring an Azure SDK client for a policy.

    ``max_retries`` also bounds the connect, read and status counters, which
    azure-core otherwise caps at 3 on their own. ``network_timeout`` applies
    to each try, both when connecting and when reading.

    Args:
        policy: Fully populated retry policy.

    Returns:
        ``retry_*`` and timeout keyword arguments for the client constructor.
    """
    kwargs: dict[str, Any] = {}
    if policy.max_retries is not None:
        kwargs.update(
            retry_total=policy.max_retries,
            retry_connect=policy.max_retries,
            retry_read=policy.max_retries,
            retry_status=policy.max_retries,
        )
    if policy.delay is not None:
        kwargs["retry_backoff_factor"] = policy.delay
    if policy.max_delay is not None:
        kwargs["retry_backoff_max"] = policy.max_delay
    if policy.mode is not None:
        kwargs["retry_mode"] = (
            PipelineRetryMode.Fixed if RetryMode(policy.mode) is RetryMode.FIXED
            else PipelineRetryMode.Exponential
        )
    if policy.network_timeout is not None:
        kwargs["connection_timeout"] = policy.network_timeout
        kwargs["read_timeout"] = policy.network_timeout
    return kwargs
