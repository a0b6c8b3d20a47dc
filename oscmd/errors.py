"""
Exceptions raised while running commands and pipelines.

All of them are click exceptions so the CLI reports them without a traceback.
"""
import signal
from typing import Optional

import click


class CommandError(click.ClickException):
    """Base class for every error raised by oscmd."""


class CommandNotFoundError(CommandError):
    """The program could not be resolved on the executable search path."""

    def __init__(self, name: str):
        super().__init__(f"command not found: {name}")
        self.name = name


class CommandFailedError(CommandError):
    """
    A started process exited with a non-zero status or was killed by a signal.
    """

    def __init__(self, command: str, returncode: int, output: str = ""):
        super().__init__(f"{command}: {describe_returncode(returncode)}")
        self.command = command
        self.returncode = returncode
        self.output = output


class PipelineError(CommandError):
    """
    A pipeline stage failed to start or exited unsuccessfully.

    The output and stderr collected up to the failure are kept on the exception.
    """

    def __init__(self, cause: Exception, output: str = "", stderr: str = ""):
        super().__init__(str(cause))
        self.cause = cause
        self.output = output
        self.stderr = stderr


def describe_returncode(returncode: int) -> str:
    """
    Render a Popen return code the way a shell user expects to read it.
    Negative codes mean the process was terminated by that signal.
    """
    if returncode < 0:
        signame: Optional[str]
        try:
            signame = signal.Signals(-returncode).name
        except ValueError:
            signame = None
        return f"signal: {signame or -returncode}"
    return f"exit status {returncode}"
