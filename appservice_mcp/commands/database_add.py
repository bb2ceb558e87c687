"""``appservice database add`` command.

The command is split into three plain functions over a DatabaseAddOptions
value: ``bind_options`` turns parsed arguments into options,
``validate_options`` reports what is missing or malformed, and ``execute``
runs both and hands the options to the injected ``add_database``
capability.
"""

import argparse
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from appservice_mcp.config import Settings
from appservice_mcp.models.database import DatabaseType
from appservice_mcp.models.options import (
    AuthMethod,
    DatabaseAddOptions,
    RetryMode,
    RetryPolicyOptions,
)
from appservice_mcp.models.response import (
    CommandResponse,
    DatabaseAddResult,
    ErrorDetails,
)
from appservice_mcp.options import definitions as opts
from appservice_mcp.services.appservice import AddDatabase
from appservice_mcp.utils.constants import (
    ErrorCode,
    ERROR_MESSAGES,
    STATUS_BAD_REQUEST,
    STATUS_OK,
)
from appservice_mcp.utils.exceptions import AppServiceMCPError, OptionValidationError

logger = logging.getLogger("appservice-mcp")

ParsedArgs = Union[argparse.Namespace, Mapping[str, Any]]

_APP_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9-]{0,58}[A-Za-z0-9]$|^[A-Za-z0-9]$")
_RESOURCE_GROUP_PATTERN = re.compile(r"^[-\w._()]{1,90}$")

# Names accepted for each option besides its own name and dest
_LEGACY_NAMES = {
    "app": ("app-name", "app_name"),
    "database": ("database-name", "database_name"),
}

_REQUIRED = (
    (opts.SUBSCRIPTION, "subscription"),
    (opts.RESOURCE_GROUP, "resource_group"),
    (opts.APP, "app_name"),
    (opts.DATABASE_TYPE, "database_type"),
    (opts.DATABASE_SERVER, "database_server"),
    (opts.DATABASE, "database_name"),
)


@dataclass(frozen=True)
class CommandMetadata:
    """Descriptive metadata for a command."""

    name: str
    title: str
    description: str
    destructive: bool = False
    read_only: bool = True


METADATA = CommandMetadata(
    name="add",
    title="Add Database to App Service",
    description=(
        "Add a database connection to an App Service. This command configures "
        "database connection settings for the specified App Service, allowing it "
        "to connect to a database server."
    ),
    destructive=False,
    read_only=False,
)


@dataclass
class CommandContext:
    """Collaborators available to a command invocation."""

    add_database: AddDatabase
    settings: Optional[Settings] = None
    logger: Optional[logging.Logger] = None


def _lookup(parsed_args: Mapping[str, Any], option: opts.OptionDefinition) -> Any:
    for key in (option.name, option.dest, *_LEGACY_NAMES.get(option.name, ())):
        value = parsed_args.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def bind_options(
    parsed_args: ParsedArgs,
    settings: Optional[Settings] = None
) -> DatabaseAddOptions:
    """Bind parsed arguments into a DatabaseAddOptions value.

    Args:
        parsed_args: argparse namespace or mapping keyed by option name
            (``resource-group``) or dest (``resource_group``).
        settings: Settings supplying the subscription and auth method when
            they are not given.

    Returns:
        The bound options. Blank values are bound as ``None``, except a
        blank database type, which is kept as an empty string.

    Raises:
        OptionValidationError: If a retry knob cannot be coerced to its type.
    """
    if isinstance(parsed_args, argparse.Namespace):
        parsed_args = vars(parsed_args)

    subscription = _text(_lookup(parsed_args, opts.SUBSCRIPTION))
    auth_method = _text(_lookup(parsed_args, opts.AUTH_METHOD))
    if settings is not None:
        subscription = subscription or _text(settings.subscription_id)
        auth_method = auth_method or _text(settings.auth_method)

    # An explicitly blank database type is kept so it is reported as unsupported
    database_type = _lookup(parsed_args, opts.DATABASE_TYPE)

    retry_values = {
        option.dest.removeprefix("retry_"): _lookup(parsed_args, option)
        for option in opts.RETRY_OPTIONS
    }
    try:
        retry_policy = RetryPolicyOptions(**retry_values)
    except ValidationError as e:
        raise OptionValidationError([
            f"Invalid value for --retry-{str(err['loc'][0]).replace('_', '-')}: {err['msg']}"
            for err in e.errors()
        ]) from e

    return DatabaseAddOptions(
        subscription=subscription,
        resource_group=_text(_lookup(parsed_args, opts.RESOURCE_GROUP)),
        tenant=_text(_lookup(parsed_args, opts.TENANT)),
        auth_method=auth_method,
        app_name=_text(_lookup(parsed_args, opts.APP)),
        database_type=None if database_type is None else str(database_type).strip(),
        database_server=_text(_lookup(parsed_args, opts.DATABASE_SERVER)),
        database_name=_text(_lookup(parsed_args, opts.DATABASE)),
        connection_string=_text(_lookup(parsed_args, opts.CONNECTION_STRING)),
        retry_policy=None if retry_policy.is_empty() else retry_policy,
    )


def validate_options(options: DatabaseAddOptions) -> list[str]:
    """Check bound options before any service call.

    Only a blank database type is rejected here; the service owns the
    supported set.

    Args:
        options: The bound options.

    Returns:
        Validation messages; empty when the options are valid.
    """
    errors: list[str] = []

    missing = [
        option.flag for option, field in _REQUIRED
        if getattr(options, field) is None
    ]
    if missing:
        errors.append(f"Missing Required options: {', '.join(missing)}")
    if options.database_type == "":
        errors.append(
            "Unsupported database type: ''. Expected one of: "
            + ", ".join(member.value for member in DatabaseType)
        )

    if options.app_name and not _APP_NAME_PATTERN.match(options.app_name):
        errors.append(
            f"Invalid value for {opts.APP.flag}: '{options.app_name}'. "
            "App names use letters, digits and hyphens (1-60 characters)."
        )
    if options.resource_group and (
        not _RESOURCE_GROUP_PATTERN.match(options.resource_group)
        or options.resource_group.endswith(".")
    ):
        errors.append(
            f"Invalid value for {opts.RESOURCE_GROUP.flag}: '{options.resource_group}'."
        )
    if options.database_server and any(ch.isspace() for ch in options.database_server):
        errors.append(
            f"Invalid value for {opts.DATABASE_SERVER.flag}: server names cannot contain whitespace."
        )

    if options.auth_method and options.auth_method not in {m.value for m in AuthMethod}:
        errors.append(
            f"Invalid value for {opts.AUTH_METHOD.flag}: '{options.auth_method}'. "
            f"Expected one of: {', '.join(opts.AUTH_METHOD.choices)}."
        )

    policy = options.retry_policy
    if policy is not None:
        for option, value in (
            (opts.RETRY_MAX_RETRIES, policy.max_retries),
            (opts.RETRY_DELAY, policy.delay),
            (opts.RETRY_MAX_DELAY, policy.max_delay),
        ):
            if value is not None and value < 0:
                errors.append(f"Invalid value for {option.flag}: must not be negative.")
        if policy.network_timeout is not None and policy.network_timeout <= 0:
            errors.append(f"Invalid value for {opts.RETRY_NETWORK_TIMEOUT.flag}: must be positive.")
        if (
            policy.delay is not None
            and policy.max_delay is not None
            and policy.max_delay < policy.delay
        ):
            errors.append(
                f"{opts.RETRY_MAX_DELAY.flag} must be greater than or equal to {opts.RETRY_DELAY.flag}."
            )
        if policy.mode is not None and policy.mode not in {m.value for m in RetryMode}:
            errors.append(
                f"Invalid value for {opts.RETRY_MODE.flag}: '{policy.mode}'. "
                f"Expected one of: {', '.join(opts.RETRY_MODE.choices)}."
            )

    return errors


def _fail(response: CommandResponse, error: Exception) -> CommandResponse:
    """Turn an exception into an error response."""
    if isinstance(error, AppServiceMCPError):
        details = ErrorDetails(**error.to_dict())
    else:
        details = ErrorDetails(
            code=ErrorCode.INTERNAL_ERROR.value,
            type=type(error).__name__,
            message=str(error) or ERROR_MESSAGES[ErrorCode.INTERNAL_ERROR]
        )
    response.status = STATUS_BAD_REQUEST
    response.message = details.message
    response.error = details
    response.results = None
    return response


async def execute(context: CommandContext, parsed_args: ParsedArgs) -> CommandResponse:
    """Run ``appservice database add``.

    Validation failures return status 400 without calling the service.
    Service failures are logged and returned as error responses; they are
    never raised to the caller. Cancellation propagates.

    Args:
        context: Command collaborators.
        parsed_args: Parsed command-line or tool arguments.

    Returns:
        The command response.
    """
    start_time = time.perf_counter()
    response = CommandResponse()
    log = context.logger or logger

    try:
        options = bind_options(parsed_args, context.settings)
        errors = validate_options(options)
        if errors:
            raise OptionValidationError(errors)
    except OptionValidationError as e:
        _fail(response, e)
        response.duration_ms = (time.perf_counter() - start_time) * 1000
        return response

    try:
        connection_info = await context.add_database(
            app_name=options.app_name,
            resource_group=options.resource_group,
            database_type=options.database_type,
            database_server=options.database_server,
            database_name=options.database_name,
            connection_string=options.connection_string or "",
            subscription=options.subscription,
            tenant=options.tenant,
            retry_policy=options.retry_policy,
        )
        response.status = STATUS_OK
        response.results = DatabaseAddResult(
            connection_info=connection_info
        ).model_dump(mode="json", by_alias=True)
    except Exception as e:
        log.error(
            "Failed to add database connection to App Service '%s'",
            options.app_name,
            exc_info=True
        )
        _fail(response, e)

    response.duration_ms = (time.perf_counter() - start_time) * 1000
    return response
