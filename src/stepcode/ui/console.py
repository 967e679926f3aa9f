"""Console output formatting utilities for stepcode."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False, quiet: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
            quiet: If True, suppress informational output (errors still print)
        """
        self.debug = debug
        self.quiet = quiet

    def print_header(self, title: str) -> None:
        """Print a section header."""
        if self.quiet:
            return
        print(f"\n{title}")
        print("-" * len(title))

    def print_build_description(self, path: Path) -> None:
        """Print where the build description was found."""
        self.print_info(f"Found build description at: {path}")

    def print_steps(self, steps: Sequence) -> None:
        """Print discovered steps as an aligned table."""
        if self.quiet:
            return
        if not steps:
            print("No steps found")
            return
        width = max(len(s.name) for s in steps)
        for s in steps:
            line = f"  {s.name.ljust(width)}  [{s.category.value}]"
            if s.description:
                line += f"  {s.description}"
            print(line)

    def print_file_written(self, path: Path) -> None:
        """Print file write message."""
        self.print_info(f"WROTE: {path}")

    def print_generated(self, output_dir: Path, count: int) -> None:
        """Print final success message."""
        self.print_info(f"\nSuccessfully generated {count} VSCode configuration file(s) in: {output_dir}")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        if not self.quiet:
            print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
