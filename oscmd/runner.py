"""
Run a single command, either capturing its output or handing it the terminal.
"""
import logging
import os
import shutil
import subprocess
import sys
from typing import TYPE_CHECKING

from oscmd.errors import CommandFailedError, CommandNotFoundError
from oscmd.system import CAN_EXEC

if TYPE_CHECKING:
    from oscmd.command import Cmd

logger = logging.getLogger(__name__)


def decode_output(data: bytes) -> str:
    return data.decode(errors="replace")


def combined_output(cmd: "Cmd") -> str:
    """
    Run the command and return its standard output and standard error merged
    into one string. The caller's stdin is not shared with the child.

    Raises CommandNotFoundError if the program is not on PATH and
    CommandFailedError (with the captured output attached) on a non-zero exit.
    """
    logger.debug("Capturing output of %s", cmd)
    try:
        completed = subprocess.run(
            cmd.argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except FileNotFoundError:
        raise CommandNotFoundError(cmd.name)
    output = decode_output(completed.stdout)
    if completed.returncode != 0:
        raise CommandFailedError(str(cmd), completed.returncode, output)
    return output


def run(cmd: "Cmd") -> None:
    """
    Run the command interactively.

    Where the platform can replace the current process image this call does
    not return on success. Otherwise the command is spawned and waited on.
    """
    if CAN_EXEC:
        exec_command(cmd)
    else:
        spawn(cmd)


def spawn(cmd: "Cmd") -> None:
    """
    Start the command with the caller's stdin, stdout and stderr and block
    until it exits.
    """
    logger.debug("Spawning %s", cmd)
    try:
        returncode = subprocess.call(cmd.argv)
    except FileNotFoundError:
        raise CommandNotFoundError(cmd.name)
    if returncode != 0:
        raise CommandFailedError(str(cmd), returncode)


def exec_command(cmd: "Cmd") -> None:
    """
    Replace the current process with the command. Not available on Windows.
    """
    binary = shutil.which(cmd.name)
    if binary is None:
        raise CommandNotFoundError(cmd.name)
    logger.debug("Executing %s as %s", cmd, binary)
    # buffered output would be lost when the process image is replaced
    sys.stdout.flush()
    sys.stderr.flush()
    os.execv(binary, [binary] + cmd.args)
