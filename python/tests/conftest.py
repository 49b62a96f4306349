"""Shared fixtures for the admin command tests."""

from unittest.mock import Mock

import pytest

from elsa_data_cli.aws import AwsClients
from helpers import LAMBDA_ARN, discover_response, invoke_response, log_page


@pytest.fixture
def clients():
    """AwsClients made of mocks, wired for a successful run."""
    servicediscovery = Mock()
    servicediscovery.discover_instances.return_value = discover_response(
        {"lambdaArn": LAMBDA_ARN}
    )

    lambda_ = Mock()
    lambda_.invoke.return_value = invoke_response(
        {"logGroupName": "/aws/ecs/elsa-data", "logStreamName": "command/1"}
    )

    logs = Mock()
    logs.get_log_events.side_effect = [
        log_page(["plain output"], "f/1"),
        log_page([], "f/1"),
    ]

    return AwsClients(servicediscovery=servicediscovery, lambda_=lambda_, logs=logs)
