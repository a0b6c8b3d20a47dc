"""
Command descriptors: a program name plus its ordered argument list.

A descriptor is built once from a shell-style command line and then only grows
through with_args(). It holds no OS resources; the runner and pipeline modules
do the actual process work.
"""
import shlex
from typing import Iterable, List, Optional

from oscmd import runner


class Cmd:
    """An OS command that has not been started."""

    def __init__(self, name: str, args: Optional[Iterable[str]] = None):
        if not name:
            raise ValueError("command name must not be empty")
        self.name = name
        if isinstance(args, str):
            args = [args]
        self.args: List[str] = list(args or [])

    @classmethod
    def parse(cls, command_line: str) -> "Cmd":
        """
        Split a command line with POSIX shell quoting rules.
        The first token is the program, the rest are its arguments.

        Raises ValueError for malformed input such as unbalanced quotes.
        """
        tokens = shlex.split(command_line)
        if not tokens:
            raise ValueError(f"no command in {command_line!r}")
        return cls(tokens[0], tokens[1:])

    @property
    def argv(self) -> List[str]:
        return [self.name] + self.args

    def with_args(self, *args: str) -> "Cmd":
        """Append arguments in order and return the same command for chaining."""
        self.args.extend(args)
        return self

    def combined_output(self) -> str:
        return runner.combined_output(self)

    def run(self) -> None:
        runner.run(self)

    def spawn(self) -> None:
        runner.spawn(self)

    def exec(self) -> None:
        runner.exec_command(self)

    def __str__(self) -> str:
        return "%s %s" % (self.name, " ".join(self.args))

    def __repr__(self) -> str:
        return f"Cmd({self.name!r}, {self.args!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cmd):
            return NotImplemented
        return self.name == other.name and self.args == other.args


def new(command_line: str) -> Cmd:
    """Create a command from a command line string, e.g. new('git log -n 5')."""
    return Cmd.parse(command_line)
