"""
Two-tier command line dispatch.

Global options are parsed first, then the first positional token selects a
command whose own options and positional arguments follow. The dispatcher
never exits the process; it returns a DispatchResult describing what the
driver should print and which status to exit with.
"""

import logging
from typing import NamedTuple, Optional

from .cli import CommandRegistry, RegisteredCommand
from .errors import HelpRequested, NoCommandsError, OptionError
from .options import OptionSet
from .triggers import TriggerRegistry
from .usage import USAGE_EXIT_CODE, UsageReporter

logger = logging.getLogger(__name__)

NO_COMMAND_MESSAGE = "No command specified."


class DispatchResult(NamedTuple):
    """
    Outcome of a single dispatch.

    Attributes:
        exit_code: Status to exit with, or None to end normally
        error: Diagnostic message to print, if any
        usage: Usage text to print after the error, if any
        command: Name of the command that was resolved, if any
    """

    exit_code: Optional[int] = None
    error: Optional[str] = None
    usage: Optional[str] = None
    command: Optional[str] = None


class Dispatcher:
    """
    Routes a command line to the registered command.

    Args:
        registry: Commands available for dispatch
        global_options: Options accepted before the command name
        triggers: Trigger options declared on global_options
        reporter: Usage text renderer
        run_triggers: Run fired trigger callbacks and stop with status 0.
            When False, the host inspects the trigger registry itself.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        global_options: OptionSet,
        triggers: TriggerRegistry,
        reporter: UsageReporter,
        run_triggers: bool = True,
    ) -> None:
        self.registry = registry
        self.global_options = global_options
        self.triggers = triggers
        self.reporter = reporter
        self.run_triggers = run_triggers

    def dispatch(self, argv: list[str]) -> DispatchResult:
        """
        Parse argv and run the selected command.

        Args:
            argv: Command line tokens without the program name

        Returns:
            DispatchResult: Exit code and text for the driver to emit

        Raises:
            NoCommandsError: If no command has been registered
        """
        if len(self.registry) == 0:
            raise NoCommandsError()

        try:
            remaining = self.global_options.parse(argv)
        except HelpRequested:
            return self._program_usage()
        except OptionError as e:
            return self._program_usage(str(e))

        if self.run_triggers and self.triggers.fire(self.global_options.values):
            return DispatchResult(exit_code=0)

        if not remaining:
            return self._program_usage(NO_COMMAND_MESSAGE)

        name, args = remaining[0], remaining[1:]
        command = self.registry.lookup(name)
        if command is None:
            return self._program_usage(f"Unknown command: {name}")

        try:
            positional = command.options.parse(args)
        except HelpRequested:
            return self._command_usage(command)
        except OptionError as e:
            return self._command_usage(command, str(e))

        logger.debug("Executing command '%s' with %s", name, positional)
        try:
            command.handler.execute(positional)
        except Exception as e:
            logger.debug("Command '%s' failed", name, exc_info=True)
            return DispatchResult(error=str(e), command=name)
        return DispatchResult(command=name)

    def _program_usage(self, error: Optional[str] = None) -> DispatchResult:
        if error:
            logger.debug("Usage error: %s", error)
        return DispatchResult(
            exit_code=USAGE_EXIT_CODE, error=error, usage=self.reporter.program_usage()
        )

    def _command_usage(
        self, command: RegisteredCommand, error: Optional[str] = None
    ) -> DispatchResult:
        if error:
            logger.debug("Option error for '%s': %s", command.name, error)
        return DispatchResult(
            exit_code=USAGE_EXIT_CODE,
            error=error,
            usage=self.reporter.command_usage(command),
            command=command.name,
        )
