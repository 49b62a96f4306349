"""Wire models exchanged with the command Lambda and CloudWatch Logs."""

import json
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ProtocolError
from .logging_config import logger


class CommandEnvelope(BaseModel):
    """Payload sent to the command Lambda."""

    model_config = ConfigDict(frozen=True)

    cmd: str


class CommandFailure(BaseModel):
    """Reply from the command Lambda when the command could not be run."""

    model_config = ConfigDict(strict=True, extra="ignore")

    error: str


class LogLocation(BaseModel):
    """Reply from the command Lambda naming where the command's output went."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    log_group_name: str = Field(alias="logGroupName")
    log_stream_name: str = Field(alias="logStreamName")


InvocationResult = Union[CommandFailure, LogLocation]


class LogEvent(BaseModel):
    """A single line from a CloudWatch log stream."""

    message: str
    timestamp: int = 0


def parse_invocation_result(payload: Union[str, bytes]) -> InvocationResult:
    """Decode the command Lambda's reply.

    The ``error`` variant takes precedence: when an ``error`` key is present
    the log location fields are not looked at.

    Raises:
        ProtocolError: If the payload is not a JSON object or matches neither
            variant
    """
    try:
        data: Dict[str, Any] = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise ProtocolError(f"Failed to decode Lambda JSON: {e}") from e

    if not isinstance(data, dict):
        raise ProtocolError(
            f"Lambda returned a JSON {type(data).__name__}, expected an object"
        )

    try:
        if "error" in data:
            return CommandFailure.model_validate(data)
        return LogLocation.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Lambda reply failed validation: {data}")
        if "error" in data:
            raise ProtocolError(f"Lambda returned a malformed error reply: {e}") from e
        raise ProtocolError(
            f"Lambda invoke did not return log information to fetch: {e}"
        ) from e
