"""
Exception hierarchy for command registration and dispatch.

Programming errors (bad registrations, an empty registry) propagate to the
host. Option errors are handled inside the dispatcher and turned into
usage output.
"""


class DispatchError(Exception):
    """Base class for all errors raised by cmddispatch."""


class RegistrationError(DispatchError, ValueError):
    """A command was registered with an empty or duplicate name, or a None handler."""


class NoCommandsError(DispatchError, RuntimeError):
    """Dispatch was attempted before any command was registered."""

    def __init__(self, message: str = "program has no commands defined") -> None:
        super().__init__(message)


class OptionError(DispatchError):
    """Malformed options on the command line."""


class HelpRequested(OptionError):
    """An explicit help token (-h, -help, --help) was given."""

    def __init__(self, message: str = "help requested") -> None:
        super().__init__(message)
