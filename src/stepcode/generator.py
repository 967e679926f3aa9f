# generator.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .config import GeneratorConfig
from .errors import DirectoryCreateFailed, MissingBuildDescription, WriteFailed
from .extract import context_from_project
from .model import ProjectContext
from .render import DOCUMENTS
from .ui.console import get_console


# ----------------------------------------------------------------------
# File-system collaborators
# ----------------------------------------------------------------------

def ensure_output_dir(path: str | Path) -> Path:
    """Create the output directory; an existing directory is fine."""
    out = Path(path)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # exist_ok still raises when the path exists as a file
        raise DirectoryCreateFailed(path=out, reason=e.strerror or str(e)) from e
    return out


def write_document(path: str | Path, text: str) -> Path:
    target = Path(path)
    try:
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise WriteFailed(path=target, reason=e.strerror or str(e)) from e
    return target


def require_build_description(project_dir: str | Path, config: GeneratorConfig) -> Path:
    build_file = Path(project_dir) / config.build_file
    if not build_file.is_file():
        raise MissingBuildDescription(path=build_file)
    return build_file


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def generate(
    context: ProjectContext,
    output_dir: str | Path,
    config: Optional[GeneratorConfig] = None,
) -> List[Path]:
    """
    Render and write the four documents, strictly in order.

    The first failure aborts the run. Files already written stay on disk.
    """
    config = config if config is not None else GeneratorConfig()
    console = get_console()

    out = ensure_output_dir(output_dir)
    written: List[Path] = []
    for filename, render in DOCUMENTS:
        path = write_document(out / filename, render(context, config))
        console.print_file_written(path)
        written.append(path)
    return written


def generate_for_project(
    project_dir: str | Path,
    output_dir: str | Path,
    config: Optional[GeneratorConfig] = None,
) -> List[Path]:
    """
    Standalone mode: check the build description, list and parse the
    project's steps, then generate. Nothing is written if any step before
    generation fails.
    """
    config = config if config is not None else GeneratorConfig()
    console = get_console()

    build_file = require_build_description(project_dir, config)
    console.print_build_description(build_file)

    context = context_from_project(project_dir, config)
    console.print_info(f"Discovered {len(context.steps)} step(s) in {context.project_name}")

    return generate(context, output_dir, config)
