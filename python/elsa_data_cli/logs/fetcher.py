"""Read the command's output back from CloudWatch Logs."""

from typing import Any, Dict, Iterator, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..config import AdminDefaults
from ..logging_config import logger
from ..models import LogEvent, LogLocation


def iter_log_events(
    client: Any, location: LogLocation, page_size: int = AdminDefaults.PAGE_SIZE
) -> Iterator[LogEvent]:
    """Yield the events of a log stream, oldest first.

    Pages are requested lazily, ``page_size`` events at a time. CloudWatch
    hands back the same forward token once the end of the stream is reached,
    so iteration stops as soon as the returned token equals the one sent.

    A failed page request is logged and ends the iteration; events already
    yielded are not affected.
    """
    next_token: Optional[str] = None
    page_count = 0

    while True:
        request: Dict[str, Any] = {
            "logGroupName": location.log_group_name,
            "logStreamName": location.log_stream_name,
            "startFromHead": True,
            "limit": page_size,
        }
        if next_token is not None:
            request["nextToken"] = next_token

        try:
            page = client.get_log_events(**request)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to fetch log events: {e}")
            return

        page_count += 1
        for event in page.get("events", []):
            yield LogEvent(
                message=event.get("message", ""),
                timestamp=event.get("timestamp", 0),
            )

        token = page.get("nextForwardToken")
        if not token or token == next_token:
            logger.debug(f"Reached end of log stream after {page_count} page(s)")
            return
        next_token = token
