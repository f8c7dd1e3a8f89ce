#!/usr/bin/env python3
"""
Demo host for cmddispatch.

Registers an "echo" command and a -version flag, then dispatches the
process command line.
"""

from rich.console import Console

from . import OptionSet, Program, __version__
from .env import configure_logging, load_settings


class EchoCommand:
    """Print the positional arguments joined by spaces."""

    def __init__(self, options: OptionSet, console: Console) -> None:
        self.options = options
        self.console = console
        options.add_flag("n", "do not print the trailing newline")
        options.add_flag("upper", "print in upper case")

    def execute(self, args: list[str]) -> None:
        if not args:
            raise ValueError("echo needs at least one argument")
        text = " ".join(args)
        if self.options.values.upper:
            text = text.upper()
        self.console.print(
            text, end="" if self.options.values.n else "\n", markup=False, highlight=False
        )

    def arg_names(self) -> str:
        return "<text> [text...]"

    def describe(self) -> str:
        return "Print arguments to standard output."


def build_program(console: Console | None = None) -> Program:
    """Create the demo program with its commands and trigger options."""
    out = console or Console()
    program = Program()
    program.version_option(lambda: out.print(f"cmddispatch {__version__}", highlight=False))
    program.register("echo", lambda options: EchoCommand(options, out))
    return program


def main() -> None:
    """Entry point for the cmddispatch demo."""
    configure_logging(load_settings().log_level)
    build_program().run()


if __name__ == "__main__":
    main()
