"""Configuration for the admin command pipeline.

Values are resolved once at startup in the order: command line flag,
environment variable, built-in default. The resulting AdminConfig is
immutable and passed explicitly into each pipeline stage.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError
from .logging_config import logger


class AdminEnvVars:
    """Environment variable names."""

    NAMESPACE = "ELSA_DATA_NAMESPACE"
    SERVICE = "ELSA_DATA_SERVICE"
    READ_TIMEOUT = "ELSA_DATA_CLI_READ_TIMEOUT"


class AdminDefaults:
    """Default values."""

    # the namespace is created by the infrastructure stack of the deployment
    NAMESPACE = "elsa-data"
    # the command Lambda registers itself under this service name
    SERVICE = "Command"
    # command executions can take minutes
    READ_TIMEOUT = 600
    MAX_READ_TIMEOUT = 900
    PAGE_SIZE = 5


@dataclass(frozen=True)
class AdminConfig:
    """Configuration for a single admin command execution.

    Attributes:
        namespace: Cloud Map namespace holding the command service
        service: Cloud Map service the command Lambda is registered under
        region: AWS region, None to use the default resolution chain
        profile: AWS named profile, None to use the default credentials
        read_timeout: Seconds to wait for the Lambda to finish the command
        page_size: Number of log events requested per CloudWatch page
        color: Whether to colour the formatted log output
    """

    namespace: str = AdminDefaults.NAMESPACE
    service: str = AdminDefaults.SERVICE
    region: Optional[str] = None
    profile: Optional[str] = None
    read_timeout: int = AdminDefaults.READ_TIMEOUT
    page_size: int = AdminDefaults.PAGE_SIZE
    color: bool = True


def _get_env_int(name: str, default: int, min_val: int, max_val: int) -> int:
    """Get integer from environment with validation."""
    value = os.getenv(name)
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'")
    return _check_range(name, parsed, min_val, max_val)


def _get_env_str(name: str, default: str) -> str:
    """Get string from environment with validation."""
    value = os.getenv(name, default).strip()
    if not value:
        raise ConfigurationError(f"{name} cannot be empty")
    return value


def _check_range(name: str, value: int, min_val: int, max_val: int) -> int:
    if not (min_val <= value <= max_val):
        raise ConfigurationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )
    return value


def load_config(
    namespace: Optional[str] = None,
    service: Optional[str] = None,
    region: Optional[str] = None,
    profile: Optional[str] = None,
    read_timeout: Optional[int] = None,
    color: bool = True,
) -> AdminConfig:
    """Build the AdminConfig from explicit values and the environment.

    Any argument left as None falls back to its environment variable and then
    to the default.

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        if namespace is None:
            namespace = _get_env_str(AdminEnvVars.NAMESPACE, AdminDefaults.NAMESPACE)
        if service is None:
            service = _get_env_str(AdminEnvVars.SERVICE, AdminDefaults.SERVICE)
        if read_timeout is None:
            read_timeout = _get_env_int(
                AdminEnvVars.READ_TIMEOUT,
                AdminDefaults.READ_TIMEOUT,
                1,
                AdminDefaults.MAX_READ_TIMEOUT,
            )
        else:
            read_timeout = _check_range(
                "--timeout", read_timeout, 1, AdminDefaults.MAX_READ_TIMEOUT
            )
        if not namespace.strip() or not service.strip():
            raise ConfigurationError("Namespace and service names cannot be empty")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise

    config = AdminConfig(
        namespace=namespace.strip(),
        service=service.strip(),
        region=region,
        profile=profile,
        read_timeout=read_timeout,
        color=color,
    )
    logger.debug(f"Loaded configuration: {config}")
    return config
