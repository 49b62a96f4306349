"""Builders for the boto3 responses the admin command tests feed to mocks."""

import io
import json

LAMBDA_ARN = "arn:aws:lambda:ap-southeast-2:123456789012:function:elsa-data-command"


def discover_response(*attributes):
    """Build a DiscoverInstances response with one instance per attribute map."""
    return {
        "Instances": [
            {
                "InstanceId": f"instance-{i}",
                "NamespaceName": "elsa-data",
                "ServiceName": "Command",
                "Attributes": attrs,
            }
            for i, attrs in enumerate(attributes)
        ]
    }


def invoke_response(body, status_code=200, function_error=None):
    """Build a Lambda Invoke response whose payload is ``body``."""
    raw = body if isinstance(body, (str, bytes)) else json.dumps(body)
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    response = {"StatusCode": status_code, "Payload": io.BytesIO(raw)}
    if function_error:
        response["FunctionError"] = function_error
    return response


def log_page(messages, token, start=1700000000000):
    """Build a GetLogEvents response page."""
    return {
        "events": [
            {"timestamp": start + i, "message": message, "ingestionTime": start + i}
            for i, message in enumerate(messages)
        ],
        "nextForwardToken": token,
        "nextBackwardToken": "b/0",
    }
