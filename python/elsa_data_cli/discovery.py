"""Resolve the command Lambda ARN from Cloud Map."""

from typing import Any

import jmespath
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import DiscoveryError
from .logging_config import logger

LAMBDA_ARN_ATTRIBUTE = "lambdaArn"

# compiled against a DiscoverInstances response / a single instance
_INSTANCES = jmespath.compile("Instances || `[]`")
_LAMBDA_ARN = jmespath.compile(f"Attributes.{LAMBDA_ARN_ATTRIBUTE}")


def resolve_lambda_arn(client: Any, namespace: str, service: str) -> str:
    """Find the ARN of the command Lambda registered in ``namespace/service``.

    Exactly one instance must be registered; guessing between several would
    run the command against an arbitrary deployment.

    Args:
        client: boto3 ``servicediscovery`` client
        namespace: Cloud Map namespace name
        service: Cloud Map service name

    Returns:
        The ``lambdaArn`` attribute of the single instance

    Raises:
        DiscoveryError: If the call fails, the instance count is not one, or
            the instance has no ``lambdaArn`` attribute
    """
    logger.debug(f"Discovering instances of {namespace}/{service}")
    try:
        response = client.discover_instances(
            NamespaceName=namespace, ServiceName=service
        )
    except (BotoCoreError, ClientError) as e:
        raise DiscoveryError(f"Failed to discover instances, {e}") from e

    instances = _INSTANCES.search(response)
    if len(instances) != 1:
        raise DiscoveryError(
            f"We discovered {len(instances)} lambda instances in the service "
            f"discovery of {namespace}/{service} - we need to find exactly one"
        )

    lambda_arn = _LAMBDA_ARN.search(instances[0])
    if lambda_arn is None:
        raise DiscoveryError(
            f"We discovered no {LAMBDA_ARN_ATTRIBUTE} attribute in {namespace}/{service}"
        )

    logger.info(f"Resolved command Lambda {lambda_arn}")
    return lambda_arn
