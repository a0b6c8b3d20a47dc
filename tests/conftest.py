from __future__ import annotations

import sys

import pytest

from oscmd.command import Cmd


def python_cmd(source: str) -> Cmd:
    """A portable child process: the running interpreter executing `source`."""
    return Cmd(sys.executable, ["-c", source])


@pytest.fixture
def py():
    return python_cmd
