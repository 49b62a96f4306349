"""CloudWatch log retrieval and formatting."""

from .fetcher import iter_log_events
from .formatter import format_log_message
from .printer import create_console, print_log_events

__all__ = [
    "create_console",
    "format_log_message",
    "iter_log_events",
    "print_log_events",
]
