# extract.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Set, Union

from .config import GeneratorConfig
from .errors import SubprocessFailed
from .model import ProjectContext, StepRecord
from .toolchain.build_tool import StepListing, list_steps
from .ui.console import get_console

# exactly one level of indentation: two spaces, then a non-space
_STEP_LINE = re.compile(r"^  (\S.*)$")


# ----------------------------------------------------------------------
# Text-parsing variant
# ----------------------------------------------------------------------

def check_listing(listing: StepListing) -> None:
    """Raise SubprocessFailed unless the listing command exited 0."""
    if not listing.ok:
        raise SubprocessFailed(
            command=list(listing.command),
            returncode=listing.returncode,
            stderr=listing.stderr,
        )


def _is_section_header(line: str) -> bool:
    return bool(line) and not line[0].isspace()


def parse_step_lines(lines: Union[str, Iterable[str]]) -> List[StepRecord]:
    """
    Extract step records from the text of a step listing.

    Only lines indented by exactly two spaces count. The first token is the
    step name; the rest of the line, whitespace-collapsed, is the
    description. Option tables (sections whose header ends with "Options:")
    use the same indentation and are skipped. A repeated step name keeps its
    first occurrence; later lines with that name are dropped.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    records: List[StepRecord] = []
    seen: Set[str] = set()
    in_options = False

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        if _is_section_header(line):
            in_options = line.rstrip().endswith("Options:")
            continue
        if in_options:
            continue

        m = _STEP_LINE.match(line)
        if not m:
            continue

        name, *rest = m.group(1).split()
        if name in seen:
            continue
        seen.add(name)
        records.append(StepRecord.create(name, " ".join(rest)))

    return records


def extract_from_listing(listing: StepListing) -> List[StepRecord]:
    check_listing(listing)
    return parse_step_lines(listing.stdout)


# ----------------------------------------------------------------------
# In-process variant
# ----------------------------------------------------------------------

def extract_from_steps(steps: Union[Iterable[Any], Mapping[str, Any]]) -> List[StepRecord]:
    """
    Build records from step objects already known to a build description.

    Each object needs `name` and `description` attributes. A mapping of
    name -> step is iterated by value, in its native order.
    """
    if isinstance(steps, Mapping):
        steps = steps.values()
    return [StepRecord.create(s.name, getattr(s, "description", "") or "") for s in steps]


# ----------------------------------------------------------------------
# Context builders
# ----------------------------------------------------------------------

def context_from_project(project_dir: str | Path, config: GeneratorConfig) -> ProjectContext:
    """Standalone mode: run the listing command and parse its output."""
    console = get_console()
    root = Path(project_dir).resolve()

    console.print_debug(f"Running {' '.join(config.list_command)} in {root}")
    listing = list_steps(root, config)
    steps = extract_from_listing(listing)
    console.print_debug(f"Parsed {len(steps)} step(s) from listing")

    # the listing gives no artifact names, so executables stay unknown
    return ProjectContext(project_name=root.name, steps=steps, executable_names=[])


def context_from_build(build: Any) -> ProjectContext:
    """
    In-process mode: read steps straight off the build graph.

    Executable discovery is not implemented; `executable_names` carries the
    project name as a placeholder and is informational only.
    """
    project_name = Path(build.build_root).resolve().name
    steps = extract_from_steps(build.top_level_steps)
    return ProjectContext(
        project_name=project_name,
        steps=steps,
        executable_names=[project_name],
    )
