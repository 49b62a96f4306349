"""Run an admin command end to end: discover, invoke, fetch and print logs."""

from typing import Sequence

from rich.console import Console

from .aws import AwsClients
from .config import AdminConfig
from .discovery import resolve_lambda_arn
from .invoker import build_command, invoke_command
from .logging_config import logger
from .logs import iter_log_events, print_log_events


def run_admin_command(
    config: AdminConfig,
    words: Sequence[str],
    clients: AwsClients,
    console: Console,
) -> int:
    """Execute ``words`` as an admin command in the configured deployment.

    Blocks until the command has finished, then prints its log output.

    Returns:
        Number of log events printed

    Raises:
        AdminCommandError: Any failure before log output starts
    """
    command = build_command(words)

    lambda_arn = resolve_lambda_arn(
        clients.servicediscovery, config.namespace, config.service
    )

    console.print(
        f"Executing {command} in {config.namespace}/{config.service} using {lambda_arn}"
    )
    console.print("(command executions can take a while e.g. minutes - this CLI tool will wait)")

    location = invoke_command(clients.lambda_, lambda_arn, command)

    events = iter_log_events(clients.logs, location, page_size=config.page_size)
    count = print_log_events(events, console)
    logger.info(f"Printed {count} log event(s)")
    return count
