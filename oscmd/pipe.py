"""
Run commands as a pipeline, feeding each command's stdout into the next one's stdin.

Stages are connected with OS pipes and all of them are started before any is
waited on, so a stage blocked on a full pipe never deadlocks the pipeline.
The last stage's stdout and the stderr of every stage are written straight to
temporary files by the children themselves.
"""
import logging
import subprocess
import tempfile
from typing import IO, List, Optional, Tuple

from oscmd.command import Cmd
from oscmd.errors import CommandFailedError, CommandNotFoundError, PipelineError
from oscmd.runner import decode_output

logger = logging.getLogger(__name__)


def _read_back(buffer: IO[bytes]) -> str:
    buffer.flush()
    buffer.seek(0)
    return decode_output(buffer.read())


def pipeline(*cmds: Cmd) -> Tuple[str, str]:
    """
    Run the commands connected in series and return (output, stderr).

    output is the standard output of the last command; stderr is the standard
    error of all commands pooled together. An empty pipeline does nothing and
    returns two empty strings.

    Raises PipelineError if a command fails to start or exits unsuccessfully.
    The error carries the output and stderr collected so far. Commands after
    the failing one are neither started (start failure) nor waited on (exit
    failure).
    """
    if not cmds:
        return "", ""

    description = " | ".join(str(cmd).strip() for cmd in cmds)
    last = len(cmds) - 1

    with tempfile.TemporaryFile() as output, tempfile.TemporaryFile() as stderr:
        procs: List[subprocess.Popen] = []
        upstream: Optional[IO[bytes]] = None

        logger.debug("Starting pipeline: %s", description)
        for i, cmd in enumerate(cmds):
            try:
                proc = subprocess.Popen(
                    cmd.argv,
                    stdin=upstream if upstream is not None else subprocess.DEVNULL,
                    stdout=output if i == last else subprocess.PIPE,
                    stderr=stderr,
                )
            except (OSError, ValueError) as e:
                cause = CommandNotFoundError(cmd.name) if isinstance(e, FileNotFoundError) else e
                raise PipelineError(cause, _read_back(output), _read_back(stderr))
            finally:
                # Handed to this stage, or left dangling by a failed start
                if upstream is not None:
                    upstream.close()
            upstream = proc.stdout
            procs.append(proc)

        for cmd, proc in zip(cmds, procs):
            returncode = proc.wait()
            if returncode != 0:
                cause = CommandFailedError(str(cmd), returncode)
                raise PipelineError(cause, _read_back(output), _read_back(stderr))

        logger.debug("Pipeline finished: %s", description)
        return _read_back(output), _read_back(stderr)
