"""
Subcommand dispatch for command line programs.

A host program registers named subcommands, each with its own option set,
and cmddispatch parses global options, the subcommand name, and the
subcommand's options before routing to its handler. Usage text is built
from the registry.

Main components:
- options: OptionSet, the per-scope option parser
- triggers: global flags that run a callback and end the program
- cli: command protocols and the CommandRegistry
- usage: program and command usage text
- dispatcher: the two-tier dispatch itself
- program: Program, the facade and process driver
"""

from .cli import Command, CommandRegistry, Describer, RegisteredCommand
from .dispatcher import Dispatcher, DispatchResult
from .errors import (
    DispatchError,
    HelpRequested,
    NoCommandsError,
    OptionError,
    RegistrationError,
)
from .options import OptionSet
from .program import Program
from .triggers import TriggerOption, TriggerRegistry
from .usage import USAGE_EXIT_CODE, UsageReporter

__version__ = "0.1.0"

__all__ = [
    # Registry
    "Command",
    "CommandRegistry",
    "Describer",
    "RegisteredCommand",
    # Options
    "OptionSet",
    "TriggerOption",
    "TriggerRegistry",
    # Dispatch
    "Dispatcher",
    "DispatchResult",
    "Program",
    "UsageReporter",
    "USAGE_EXIT_CODE",
    # Errors
    "DispatchError",
    "HelpRequested",
    "NoCommandsError",
    "OptionError",
    "RegistrationError",
]
