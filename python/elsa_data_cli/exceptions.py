"""Exceptions raised by the admin command pipeline.

Every failure except a log pagination error is fatal; the CLI maps all of
them to exit code 1.
"""


class AdminCommandError(Exception):
    """Base class for all admin command failures."""

    pass


class ConfigurationError(AdminCommandError):
    """Exception raised for configuration validation errors."""

    pass


class DiscoveryError(AdminCommandError):
    """The command Lambda could not be resolved from Cloud Map."""

    pass


class InvocationError(AdminCommandError):
    """The Lambda invoke call failed at the transport level."""

    pass


class ProtocolError(AdminCommandError):
    """The Lambda replied with a payload we cannot interpret."""

    pass


class CommandFailedError(AdminCommandError):
    """The command Lambda reported an application level error.

    The message is meaningful to the person running the command and is
    printed without decoration.
    """

    pass
