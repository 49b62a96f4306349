"""boto3 client construction for the services the pipeline talks to."""

from dataclasses import dataclass
from typing import Any

import boto3
from botocore.config import Config

from .config import AdminConfig
from .logging_config import logger


@dataclass
class AwsClients:
    """The three AWS service clients used by the pipeline."""

    servicediscovery: Any
    lambda_: Any
    logs: Any


def create_clients(config: AdminConfig) -> AwsClients:
    """Create Cloud Map, Lambda and CloudWatch Logs clients for ``config``.

    Credentials and (when not configured) the region come from the boto3
    default resolution chain. botocore retries are switched off: every call is
    attempted once.
    """
    session = boto3.Session(region_name=config.region, profile_name=config.profile)
    client_config = Config(
        read_timeout=config.read_timeout,
        retries={"total_max_attempts": 1},
    )
    logger.debug(
        f"Creating AWS clients (region={session.region_name}, "
        f"read_timeout={config.read_timeout}s)"
    )
    return AwsClients(
        servicediscovery=session.client("servicediscovery", config=client_config),
        lambda_=session.client("lambda", config=client_config),
        logs=session.client("logs", config=client_config),
    )
