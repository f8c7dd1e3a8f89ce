"""
Program facade and process driver.

A Program owns the global options, the command registry, the trigger
options, and the dispatcher for one command line program. Its run() method
is the only place that writes usage text to stderr and exits the process.
"""

import sys
from typing import Callable, Optional

from rich.console import Console

from .cli import CommandFactory, CommandRegistry, RegisteredCommand
from .dispatcher import Dispatcher, DispatchResult
from .env import load_settings
from .options import OptionSet
from .triggers import TriggerOption, TriggerRegistry
from .usage import UsageReporter


class Program:
    """
    A command line program built from registered subcommands.

    Args:
        name: Program name for usage text. Defaults to the configured name
            (CMDDISPATCH_PROG) or the basename of sys.argv[0].
        console: Rich Console for diagnostics. Defaults to stderr.
        run_triggers: Whether fired trigger options run their callbacks
            during dispatch.

    Example:
        program = Program("tool")

        @program.command("build")
        def make_build(options):
            options.add_flag("verbose", "print each step")
            return BuildCommand(options)

        program.run()
    """

    def __init__(
        self,
        name: Optional[str] = None,
        console: Optional[Console] = None,
        run_triggers: bool = True,
    ) -> None:
        self.name = name or load_settings().program
        self.console = console or Console(stderr=True)
        self.global_options = OptionSet(self.name)
        self.registry = CommandRegistry(self.name)
        self.triggers = TriggerRegistry(self.global_options)
        self.reporter = UsageReporter(self.name, self.registry, self.global_options)
        self.dispatcher = Dispatcher(
            self.registry,
            self.global_options,
            self.triggers,
            self.reporter,
            run_triggers=run_triggers,
        )

    def register(self, name: str, factory: CommandFactory) -> RegisteredCommand:
        """Register a command; see CommandRegistry.register."""
        return self.registry.register(name, factory)

    def command(self, name: str) -> Callable[[CommandFactory], CommandFactory]:
        """Decorator form of register()."""

        def decorator(factory: CommandFactory) -> CommandFactory:
            self.register(name, factory)
            return factory

        return decorator

    def declare_trigger_option(
        self, name: str, description: str, callback: Callable[[], None]
    ) -> TriggerOption:
        """Declare a global -name flag that runs callback and ends the program."""
        return self.triggers.declare(name, description, callback)

    def version_option(self, show_version: Callable[[], None]) -> TriggerOption:
        """Declare the -version flag that runs show_version and ends the program."""
        return self.triggers.version_option(show_version)

    def dispatch(self, argv: list[str]) -> DispatchResult:
        """Dispatch argv without printing or exiting; see Dispatcher.dispatch."""
        return self.dispatcher.dispatch(argv)

    def report(self, result: DispatchResult) -> None:
        """Print the result's diagnostics to the console."""
        if result.error is not None:
            self.console.print(result.error, style="red", markup=False, highlight=False)
        if result.usage is not None:
            if result.error is not None:
                self.console.print()
            self.console.print(result.usage, markup=False, highlight=False, soft_wrap=True)

    def run(self, argv: Optional[list[str]] = None) -> DispatchResult:
        """
        Dispatch argv (default: sys.argv[1:]) and exit when the result asks to.

        Returns:
            DispatchResult: The result, when the process is not exiting

        Raises:
            SystemExit: With the result's exit code, when it has one
        """
        if argv is None:
            argv = sys.argv[1:]
        result = self.dispatch(argv)
        self.report(result)
        if result.exit_code is not None:
            sys.exit(result.exit_code)
        return result
