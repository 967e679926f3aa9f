# errors.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List


class StepcodeError(Exception):
    """Base class for every fatal error reported by the generator."""

    title = "Generation failed"

    def details(self) -> List[str]:
        return []

    def suggestion(self) -> str | None:
        return None


@dataclass
class MissingBuildDescription(StepcodeError):
    path: Path

    title = "Build description not found"

    def __str__(self) -> str:
        return f"Cannot access build description at {self.path}"

    def suggestion(self) -> str | None:
        return "Point INPUT_DIR at a project root, or pass --build-file for a different build description name."


@dataclass
class SubprocessFailed(StepcodeError):
    """The step-listing command exited non-zero or was killed."""
    command: List[str]
    returncode: int
    stderr: str = ""

    title = "Step listing failed"

    def __str__(self) -> str:
        cmd = " ".join(self.command)
        if self.returncode < 0:
            return f"'{cmd}' did not terminate normally (signal {-self.returncode})"
        return f"'{cmd}' failed (exit={self.returncode})"

    def details(self) -> List[str]:
        return self.stderr.rstrip().splitlines()


@dataclass
class OutputTooLarge(StepcodeError):
    command: List[str]
    stream: str
    limit: int

    title = "Step listing output too large"

    def __str__(self) -> str:
        return f"'{' '.join(self.command)}' wrote more than {self.limit} bytes to {self.stream}"


@dataclass
class BuildToolNotFound(StepcodeError):
    tool: str

    title = "Build tool not found"

    def __str__(self) -> str:
        return f"Could not find build tool executable: {self.tool}"

    def suggestion(self) -> str | None:
        return f"Install {self.tool} or fix PATH, or pass --build-tool."


@dataclass
class WriteFailed(StepcodeError):
    path: Path
    reason: str = ""

    title = "Could not write file"

    def __str__(self) -> str:
        if self.reason:
            return f"Failed to write {self.path}: {self.reason}"
        return f"Failed to write {self.path}"


@dataclass
class DirectoryCreateFailed(StepcodeError):
    path: Path
    reason: str = ""

    title = "Could not create output directory"

    def __str__(self) -> str:
        if self.reason:
            return f"Failed to create {self.path}: {self.reason}"
        return f"Failed to create {self.path}"


__all__ = [
    "StepcodeError",
    "MissingBuildDescription",
    "SubprocessFailed",
    "OutputTooLarge",
    "BuildToolNotFound",
    "WriteFailed",
    "DirectoryCreateFailed",
]
