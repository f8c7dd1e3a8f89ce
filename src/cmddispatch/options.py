"""
Option sets for global and per-command options.

An OptionSet wraps argparse so that parsing stops at the first positional
token, errors are raised instead of exiting the process, and the declared
options can be rendered into usage text.
"""

import argparse
from typing import Any, NoReturn

from .errors import HelpRequested, OptionError

HELP_TOKENS = ("-h", "-help", "--help")

OPTION_TERMINATOR = "--"

_REMAINING = "_remaining"


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises OptionError instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise OptionError(message)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested()


class OptionSet:
    """
    A single option-parsing scope.

    Options are declared with add_option(), which accepts the same arguments
    as argparse.ArgumentParser.add_argument(). Parsing consumes options up to
    the first positional token and hands back everything after it untouched.

    Args:
        prog: Name used for this scope (e.g. "tool" or "tool build")
    """

    def __init__(self, prog: str) -> None:
        self.prog = prog
        self.values = argparse.Namespace()
        self._declared: list[argparse.Action] = []
        self._parser = _RaisingArgumentParser(
            prog=prog,
            add_help=False,
            allow_abbrev=False,
            conflict_handler="resolve",
        )
        self._parser.add_argument(*HELP_TOKENS, action=_HelpAction)
        self._parser.add_argument(_REMAINING, nargs=argparse.REMAINDER)

    def add_option(self, *flags: str, **kwargs: Any) -> argparse.Action:
        """
        Declare an option in this scope.

        Returns:
            argparse.Action: The action argparse created for the option

        Raises:
            ValueError: If no flag is given, a flag does not start with '-',
                or a flag is already declared in this scope
        """
        if not flags or any(not flag.startswith("-") for flag in flags):
            raise ValueError(f"Options must be flags starting with '-': {flags!r}")
        taken = {s for action in self._declared for s in action.option_strings}
        redefined = [flag for flag in flags if flag in taken]
        if redefined:
            raise ValueError(f"Option redefined in {self.prog}: {', '.join(redefined)}")
        action = self._parser.add_argument(*flags, **kwargs)
        self._declared.append(action)
        return action

    def add_flag(self, name: str, help: str = "", default: bool = False) -> argparse.Action:
        """Declare a boolean -name option."""
        return self.add_option(f"-{name}", action="store_true", default=default, help=help)

    def has_options(self) -> bool:
        return bool(self._declared)

    @property
    def declared(self) -> list[argparse.Action]:
        return list(self._declared)

    def parse(self, tokens: list[str]) -> list[str]:
        """
        Parse tokens against the declared options.

        Parsed values are stored on self.values.

        Args:
            tokens: Command line tokens for this scope

        Returns:
            list[str]: Tokens left over after the options, starting at the
            first positional token

        Raises:
            HelpRequested: If a help token was given
            OptionError: If the tokens do not match the declared options
        """
        namespace = self._parser.parse_args(list(tokens))
        values = vars(namespace)
        remaining = list(values.pop(_REMAINING, None) or [])
        self.values = argparse.Namespace(**values)
        # argparse keeps the "--" terminator inside REMAINDER values
        if remaining[:1] == [OPTION_TERMINATOR]:
            return remaining[1:]
        return remaining

    def format_defaults(self) -> str:
        """Render each declared option with its description and default."""
        lines = []
        for action in self._declared:
            head = "  " + ", ".join(action.option_strings)
            if action.nargs != 0:
                head += f" {_value_name(action)}"
            lines.append(head)

            description = action.help or ""
            if action.default is not None and action.default is not argparse.SUPPRESS:
                description = f"{description} (default: {action.default})".strip()
            if description:
                lines.append(f"        {description}")
        return "\n".join(lines)


def _value_name(action: argparse.Action) -> str:
    if action.metavar:
        return action.metavar if isinstance(action.metavar, str) else " ".join(action.metavar)
    if action.type is not None and hasattr(action.type, "__name__"):
        return action.type.__name__
    return "value"
