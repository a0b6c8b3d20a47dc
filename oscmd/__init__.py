"""
Build and run OS commands and pipelines.
"""
from oscmd.clipboard import clipboard_command, copy_to_clipboard, open_location
from oscmd.command import Cmd, new
from oscmd.errors import CommandError, CommandFailedError, CommandNotFoundError, PipelineError
from oscmd.pipe import pipeline
from oscmd.runner import combined_output, exec_command, run, spawn

__all__ = [
    "Cmd",
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "PipelineError",
    "clipboard_command",
    "combined_output",
    "copy_to_clipboard",
    "exec_command",
    "new",
    "open_location",
    "pipeline",
    "run",
    "spawn",
]
