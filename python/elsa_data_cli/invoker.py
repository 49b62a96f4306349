"""Invoke the command Lambda and decode where its output was logged."""

from http import HTTPStatus
from typing import Any, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import CommandFailedError, InvocationError
from .logging_config import logger
from .models import (
    CommandEnvelope,
    CommandFailure,
    LogLocation,
    parse_invocation_result,
)


def build_command(words: Sequence[str]) -> str:
    """Rebuild the command line from its words.

    Words are joined with single spaces; the original shell quoting is not
    preserved.
    """
    return " ".join(words)


def _read_payload(response: dict) -> bytes:
    payload = response.get("Payload")
    if payload is None:
        return b""
    # boto3 hands back a StreamingBody
    if hasattr(payload, "read"):
        return payload.read()
    return payload


def invoke_command(client: Any, lambda_arn: str, command: str) -> LogLocation:
    """Run ``command`` through the command Lambda and wait for it to finish.

    Args:
        client: boto3 ``lambda`` client
        lambda_arn: ARN of the command Lambda
        command: The admin command line

    Returns:
        The log group and stream holding the command's output

    Raises:
        InvocationError: If the invoke call fails or the function errored
        ProtocolError: If the reply cannot be decoded
        CommandFailedError: If the Lambda reported an error for the command
    """
    envelope = CommandEnvelope(cmd=command)
    logger.debug(f"Invoking {lambda_arn} with {envelope.model_dump_json()}")

    try:
        response = client.invoke(
            FunctionName=lambda_arn,
            InvocationType="RequestResponse",
            Payload=envelope.model_dump_json().encode("utf-8"),
        )
    except (BotoCoreError, ClientError) as e:
        raise InvocationError(f"Failed to invoke lambda, {e}") from e

    status_code = response.get("StatusCode")
    if status_code != HTTPStatus.OK.value:
        raise InvocationError(f"Lambda failed with status code, {status_code}")

    payload = _read_payload(response)

    function_error = response.get("FunctionError")
    if function_error:
        raise InvocationError(
            f"Lambda raised an unhandled {function_error} error: "
            f"{payload.decode('utf-8', errors='replace')}"
        )

    result = parse_invocation_result(payload)
    if isinstance(result, CommandFailure):
        raise CommandFailedError(result.error)

    logger.info(
        f"Command output is in {result.log_group_name} / {result.log_stream_name}"
    )
    return result
