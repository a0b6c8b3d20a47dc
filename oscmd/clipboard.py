"""
Clipboard and desktop helpers built on top of the pipeline runner.
Uses `clip` on Windows and `pbcopy` everywhere else.
"""
from oscmd.command import Cmd
from oscmd.pipe import pipeline
from oscmd.runner import run
from oscmd.system import IS_WINDOWS


def clipboard_command() -> Cmd:
    """
    Return the command that reads stdin into the system clipboard.
    """
    return Cmd("clip" if IS_WINDOWS else "pbcopy")


def copy_to_clipboard(text: str):
    """
    Copy the given text to the system clipboard by piping `echo <text>` into the
    platform's clipboard tool. The text is passed to echo as a single argument.
    """
    echo = Cmd("echo").with_args(text)
    pipeline(echo, clipboard_command())


def open_location(location: str):
    """
    Open a file, directory or URL with the desktop's default handler.
    macOS only.
    """
    run(Cmd("open").with_args(location))
