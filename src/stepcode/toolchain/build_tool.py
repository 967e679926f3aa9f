# build_tool.py
# Small, focused wrapper around the build tool's CLI.
# This module centralizes the one subprocess call the generator makes, so the
# rest of the codebase never needs to call subprocess directly.

from __future__ import annotations

import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List

from ..config import GeneratorConfig
from ..errors import BuildToolNotFound, OutputTooLarge


@dataclass(frozen=True)
class StepListing:
    """Captured result of one run of the step-listing command."""
    command: List[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _read_bounded(buf: IO[bytes], command: List[str], stream: str, limit: int) -> str:
    """
    Read a captured stream back, refusing anything over `limit` bytes.

    Large output is an error rather than something to truncate: a listing
    that size almost certainly is not the listing we asked for.
    """
    size = buf.seek(0, 2)
    if size > limit:
        raise OutputTooLarge(command=command, stream=stream, limit=limit)
    buf.seek(0)
    return buf.read().decode("utf-8", errors="replace")


def _read_tail(buf: IO[bytes], limit: int) -> str:
    # only the last `limit` bytes; the end of stderr carries the error
    size = buf.seek(0, 2)
    buf.seek(max(0, size - limit))
    return buf.read().decode("utf-8", errors="replace")


def run_build_tool(args: List[str], cwd: str | Path, max_output_bytes: int) -> StepListing:
    """
    Execute the build tool and capture stdout and stderr in full.

    Both streams go to temporary files instead of pipes so a chatty stderr
    cannot stall the child while we wait on stdout. The files are closed on
    every exit path.

    Args:
        args: Full command line, tool first (e.g. ["zig", "build", "-l"])
        cwd: Working directory for the command (the project directory)
        max_output_bytes: Upper bound for each captured stream

    Returns:
        StepListing with the exit status and decoded output. A non-zero exit
        is NOT raised here; callers decide what a failure means.

    Raises:
        BuildToolNotFound: If the executable cannot be found
        OutputTooLarge: If a successful run wrote more than max_output_bytes
            to either stream. A failed run keeps only the tail of stderr.
    """
    with tempfile.TemporaryFile() as out_buf, tempfile.TemporaryFile() as err_buf:
        try:
            # No timeout: a hanging build tool hangs the run.
            proc = subprocess.run(
                args,
                cwd=str(cwd),
                stdout=out_buf,
                stderr=err_buf,
                stdin=subprocess.DEVNULL,
            )
        except FileNotFoundError as e:
            raise BuildToolNotFound(tool=args[0]) from e

        if proc.returncode != 0:
            # a failed listing is reported through its stderr; stdout is not parsed
            return StepListing(
                command=list(args),
                returncode=proc.returncode,
                stdout="",
                stderr=_read_tail(err_buf, max_output_bytes),
            )

        stdout = _read_bounded(out_buf, args, "stdout", max_output_bytes)
        stderr = _read_bounded(err_buf, args, "stderr", max_output_bytes)

    return StepListing(command=list(args), returncode=proc.returncode, stdout=stdout, stderr=stderr)


def list_steps(project_dir: str | Path, config: GeneratorConfig) -> StepListing:
    """
    Run the build tool's "list steps" subcommand inside `project_dir`.

    With the default config this is `zig build -l`.
    """
    return run_build_tool(config.list_command, cwd=project_dir, max_output_bytes=config.max_output_bytes)
