"""Turn CloudWatch log lines from Elsa Data into readable console text.

Elsa Data logs through a JSON logger, so most lines decode to a record like::

    {"level": 30, "time": 1700000000000, "pid": 1, "hostname": "ip-10-0-0-1",
     "name": "elsa-data", "msg": "Started"}

Lines that are not JSON objects are output the command printed directly and
are passed through untouched, see :func:`format_raw_line`.

Every line is laid out in fixed columns::

    [HH:MM:SS.ff] LEVEL message
"""

import json
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from rich.text import Text

# fields emitted by the logger itself on every record
RESERVED_FIELDS = ("level", "msg", "name", "hostname", "time", "pid")

INDENT = " " * 6
TIME_PREFIX_WIDTH = len("[HH:MM:SS.ff] ")
LABEL_WIDTH = 5

LEVEL_LABELS: Dict[int, Tuple[str, str]] = {
    10: ("TRACE", "green"),
    20: ("DEBUG", "green"),
    30: ("INFO", "blue"),
    40: ("WARN", "cyan"),
    50: ("ERROR", "yellow"),
    60: ("FATAL", "red"),
}
UNKNOWN_LEVEL = ("?????", "red")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def decode_record(message: str) -> Optional[Dict[str, Any]]:
    """Decode a log line as a JSON object, or return None.

    Integers decode to Python ints, so epoch milliseconds keep every digit.
    """
    try:
        record = json.loads(message)
    except ValueError:
        return None
    return record if isinstance(record, dict) else None


def format_time_prefix(epoch_millis: Any) -> str:
    """Render ``[HH:MM:SS.ff] `` in local time, or blanks of the same width."""
    if not _is_number(epoch_millis):
        return " " * TIME_PREFIX_WIDTH
    try:
        millis = int(epoch_millis)
        moment = datetime.fromtimestamp(millis // 1000) + timedelta(
            milliseconds=millis % 1000
        )
    except (OverflowError, OSError, ValueError):
        return " " * TIME_PREFIX_WIDTH
    return f"[{moment:%H:%M:%S}.{moment.microsecond // 10000:02d}] "


def level_label(level: Any) -> Optional[Tuple[str, str]]:
    """Map a numeric logger level to its (label, colour), None when not numeric."""
    if not _is_number(level):
        return None
    # logger levels are integers, a float such as 30.0 is not one of them
    if isinstance(level, float):
        return UNKNOWN_LEVEL
    return LEVEL_LABELS.get(level, UNKNOWN_LEVEL)


def residual_fields(record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return the non-logger fields of ``record`` when it carries extra payload.

    A record with more fields than the logger emits is assumed to have had an
    object logged with it. Which reserved fields are actually present is not
    checked.
    """
    if len(record) <= len(RESERVED_FIELDS):
        return None
    return {k: v for k, v in record.items() if k not in RESERVED_FIELDS}


def _message_text(msg: Any) -> str:
    if msg is None:
        return ""
    if isinstance(msg, str):
        return msg
    return json.dumps(msg, ensure_ascii=False)


def format_raw_line(message: str) -> str:
    """Indent a line that is not a log record, leaving its characters as they are.

    Tabs and carriage returns are kept, so callers should write the result
    straight to the output rather than through rich rendering.
    """
    return INDENT + message


def format_log_message(message: str) -> Text:
    """Format one CloudWatch log line.

    The result depends only on ``message`` (and the local time zone), so the
    same line always formats identically.
    """
    record = decode_record(message)
    if record is None:
        return Text(format_raw_line(message))
    return format_record(record)


def format_record(record: Dict[str, Any]) -> Text:
    """Lay out a decoded log record in the time, level and message columns."""
    text = Text(format_time_prefix(record.get("time")))

    label = level_label(record.get("level"))
    if label is None:
        text.append(INDENT)
    else:
        name, style = label
        text.append(name.ljust(LABEL_WIDTH), style=style)
        text.append(" ")

    text.append(_message_text(record.get("msg")))

    residual = residual_fields(record)
    if residual is not None:
        block = json.dumps(residual, indent=2, sort_keys=True, ensure_ascii=False)
        for line in block.splitlines():
            text.append("\n" + INDENT + line)

    return text
