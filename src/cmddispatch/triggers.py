"""
Function-triggered global options.

A trigger option is a boolean global flag such as -version: when it is
given, its callback runs and the program ends instead of dispatching a
command.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Callable

from .options import OptionSet

logger = logging.getLogger(__name__)


@dataclass
class TriggerOption:
    """A boolean global option bound to a zero-argument callback."""

    name: str
    description: str
    callback: Callable[[], None]
    dest: str
    triggered: bool = False


class TriggerRegistry:
    """
    Registry of trigger options declared on a global option set.

    Args:
        options: The global OptionSet the flags are declared on
    """

    def __init__(self, options: OptionSet) -> None:
        self.options = options
        self._triggers: list[TriggerOption] = []

    def declare(
        self, name: str, description: str, callback: Callable[[], None]
    ) -> TriggerOption:
        """
        Declare a -name flag that runs callback when given.

        Raises:
            ValueError: If name is empty, the callback is not callable, or
                -name is already declared on the option set
        """
        if not name:
            raise ValueError("Trigger option name must not be empty")
        if not callable(callback):
            raise ValueError(f"Callback for trigger option '{name}' is not callable")

        action = self.options.add_flag(name, help=description)
        trigger = TriggerOption(name, description, callback, dest=action.dest)
        self._triggers.append(trigger)
        logger.debug("Declared trigger option -%s", name)
        return trigger

    def version_option(self, show_version: Callable[[], None]) -> TriggerOption:
        """Declare the conventional -version flag."""
        return self.declare("version", "show version", show_version)

    def __iter__(self):
        return iter(self._triggers)

    def __len__(self) -> int:
        return len(self._triggers)

    def collect(self, values: argparse.Namespace) -> list[TriggerOption]:
        """
        Mark triggers from parsed global values.

        Returns:
            list[TriggerOption]: Triggers that fired, in declaration order
        """
        fired = []
        for trigger in self._triggers:
            trigger.triggered = bool(getattr(values, trigger.dest, False))
            if trigger.triggered:
                fired.append(trigger)
        return fired

    def fire(self, values: argparse.Namespace) -> bool:
        """
        Run the callback of every trigger that fired.

        Returns:
            bool: True if at least one callback ran
        """
        fired = self.collect(values)
        for trigger in fired:
            logger.debug("Trigger option -%s fired", trigger.name)
            trigger.callback()
        return bool(fired)
