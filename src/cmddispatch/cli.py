"""
CLI infrastructure for subcommand dispatch.

Contains the command protocols, the registered command record, and the
registry that maps command names to their option sets and handlers.
"""

import logging
from typing import Callable, NamedTuple, Optional, Protocol, runtime_checkable

from .errors import RegistrationError
from .options import OptionSet

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available."


class Command(Protocol):
    """Protocol for subcommand handlers."""

    def execute(self, args: list[str]) -> None:
        """Run the command with its positional arguments. Raise to report failure."""
        ...

    def arg_names(self) -> str:
        """Describe the positional arguments for usage text, e.g. "<file> [more]"."""
        ...


@runtime_checkable
class Describer(Protocol):
    """Optional protocol for commands that describe themselves in one line."""

    def describe(self) -> str: ...


CommandFactory = Callable[[OptionSet], Optional[Command]]


class RegisteredCommand(NamedTuple):
    """A command as stored in the registry."""

    name: str
    options: OptionSet
    handler: Command

    def description(self) -> str:
        """Return the handler's one-line description, or the placeholder."""
        if isinstance(self.handler, Describer):
            return self.handler.describe()
        return NO_DESCRIPTION


class CommandRegistry:
    """
    Registry for CLI commands.

    Args:
        program: Program name, used to name each command's option scope
    """

    def __init__(self, program: str) -> None:
        self.program = program
        self._commands: dict[str, RegisteredCommand] = {}

    def register(self, name: str, factory: CommandFactory) -> RegisteredCommand:
        """
        Register a command.

        The factory receives an empty option set scoped to the command, must
        declare every option the command accepts on it, and returns the
        command handler.

        Raises:
            RegistrationError: If name is empty or already registered, or the
                factory returns None
        """
        if not name:
            raise RegistrationError("Command name must not be empty")
        if name in self._commands:
            raise RegistrationError(f"Command '{name}' is already registered")

        options = OptionSet(f"{self.program} {name}")
        handler = factory(options)
        if handler is None:
            raise RegistrationError(f"Command for '{name}' is None")

        command = RegisteredCommand(name, options, handler)
        self._commands[name] = command
        logger.debug("Registered command '%s'", name)
        return command

    def lookup(self, name: str) -> Optional[RegisteredCommand]:
        """Get the command registered under name, or None."""
        return self._commands.get(name)

    def names(self) -> list[str]:
        """Get registered command names in sorted order."""
        return sorted(self._commands.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a command is registered."""
        return name in self._commands

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
