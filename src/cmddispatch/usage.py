"""
Usage text rendered from the command registry and option sets.
"""

from .cli import CommandRegistry, RegisteredCommand
from .options import OptionSet

USAGE_EXIT_CODE = 2


class UsageReporter:
    """
    Builds program-level and command-level usage text.

    Rendering is pure; the caller decides where the text goes and exits
    with USAGE_EXIT_CODE.

    Args:
        program: Program name shown in usage lines
        registry: Registry whose commands are listed
        global_options: Options accepted before the command name
    """

    def __init__(
        self, program: str, registry: CommandRegistry, global_options: OptionSet
    ) -> None:
        self.program = program
        self.registry = registry
        self.global_options = global_options

    def program_usage(self) -> str:
        """Render the usage line, the sorted command list, and global options."""
        lines = [
            "Usage:",
            "",
            f"  {self.program} [globalopts] cmd [cmdopts] [cmdargs]",
            "",
            "Commands:",
        ]
        for name in self.registry.names():
            command = self.registry.lookup(name)
            lines.append(f"  {name}: {command.description()}")

        if self.global_options.has_options():
            lines.extend(["", "Global options:", self.global_options.format_defaults()])
        return "\n".join(lines)

    def command_usage(self, command: RegisteredCommand) -> str:
        """Render the usage block for a single command."""
        cmdopts = "[cmdopts] " if command.options.has_options() else ""
        lines = [
            "Usage:",
            "",
            f"  {self.program} [globalopts] {command.name} {cmdopts}{command.handler.arg_names()}".rstrip(),
        ]
        if command.options.has_options():
            lines.extend(["", f"{command.name} options:", command.options.format_defaults()])
        return "\n".join(lines)
