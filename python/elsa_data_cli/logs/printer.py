"""Console output for formatted log events."""

from typing import IO, Iterable, Optional

from rich.console import Console

from ..models import LogEvent
from .formatter import decode_record, format_raw_line, format_record


def create_console(color: bool = True, file: Optional[IO[str]] = None) -> Console:
    """Console that prints log text verbatim.

    Markup, highlighting and wrapping are off so the command's output is not
    reinterpreted. rich also honours NO_COLOR and disables colour when the
    output is not a terminal.
    """
    return Console(
        file=file,
        no_color=None if color else True,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


def print_log_events(events: Iterable[LogEvent], console: Console) -> int:
    """Print each event as soon as it arrives and return how many were printed.

    Lines that are not log records are written to the console file as is.
    """
    count = 0
    for event in events:
        record = decode_record(event.message)
        if record is None:
            console.file.write(format_raw_line(event.message) + "\n")
            console.file.flush()
        else:
            console.print(format_record(record))
        count += 1
    return count
