# dsl.py
from __future__ import annotations

import runpy
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set

from .config import DEFAULT_VSCODE_DIR, GeneratorConfig
from .extract import context_from_build
from .generator import generate


# ---------------------------------------------------------------------
# Build graph
# ---------------------------------------------------------------------

class BuildStep:
    """A named step in an in-process build description."""

    def __init__(
        self,
        name: str,
        description: str = "",
        make_fn: Optional[Callable[[BuildStep], None]] = None,
    ):
        if not name:
            raise ValueError("step name must not be empty")
        self.name = name
        self.description = description
        self.make_fn = make_fn
        self.dependencies: List[BuildStep] = []

    def depend_on(self, *steps: BuildStep) -> BuildStep:
        self.dependencies.extend(steps)
        return self

    def make(self, _done: Optional[Set[int]] = None) -> None:
        """Run dependencies first (each step object once), then this step's own action."""
        done = _done if _done is not None else set()
        if id(self) in done:
            return
        for dep in self.dependencies:
            dep.make(done)
        if self.make_fn is not None:
            self.make_fn(self)
        done.add(id(self))

    def __repr__(self) -> str:
        return f"BuildStep({self.name!r})"


class Build:
    """
    Registry of top-level steps for one project.

    Example:
        b = Build("path/to/project")
        b.step("run", "Run the app")
        add_vscode_step(b)
        b.make("vscode")
    """

    def __init__(self, build_root: str | Path = "."):
        self.build_root = Path(build_root)
        self.top_level_steps: Dict[str, BuildStep] = {}

    def step(
        self,
        name: str,
        description: str = "",
        make_fn: Optional[Callable[[BuildStep], None]] = None,
    ) -> BuildStep:
        if name in self.top_level_steps:
            raise ValueError(f"Duplicate step name: {name}")
        s = BuildStep(name, description, make_fn)
        self.top_level_steps[name] = s
        return s

    def get(self, name: str) -> BuildStep:
        try:
            return self.top_level_steps[name]
        except KeyError:
            raise KeyError(
                f"No step named '{name}'. Known steps: {sorted(self.top_level_steps)}"
            ) from None

    def make(self, name: str) -> None:
        self.get(name).make()


# ---------------------------------------------------------------------
# Editor config from inside a build description
# ---------------------------------------------------------------------

def _resolve_output_dir(build: Build, output_dir: str | Path | None) -> Path:
    out = Path(output_dir) if output_dir is not None else Path(DEFAULT_VSCODE_DIR)
    if not out.is_absolute():
        out = build.build_root / out
    return out


def generate_vscode_config(
    build: Build,
    output_dir: str | Path | None = None,
    config: Optional[GeneratorConfig] = None,
) -> List[Path]:
    """
    Generate editor config from the build's registered steps.

    Relative output directories resolve against the build root; the default
    is `<build_root>/.vscode`.
    """
    context = context_from_build(build)
    return generate(context, _resolve_output_dir(build, output_dir), config)


def add_vscode_step(
    build: Build,
    output_dir: str | Path | None = None,
    config: Optional[GeneratorConfig] = None,
) -> BuildStep:
    """Register a top-level `vscode` step that writes the editor config."""
    vscode = build.step("vscode", "Generate VSCode configuration files")
    generate_step = BuildStep(
        "generate-vscode-config",
        make_fn=lambda _step: generate_vscode_config(build, output_dir, config),
    )
    vscode.depend_on(generate_step)
    return vscode


# ---------------------------------------------------------------------
# Loading a build description file
# ---------------------------------------------------------------------

def load_build(path: str | Path) -> Build:
    """
    Load a build description from a python file path.

    The file must define `build(b)`, which registers steps on the Build it
    is given. The Build is rooted at the file's directory.
    """
    build_path = Path(path).expanduser().resolve()
    if not build_path.exists():
        raise FileNotFoundError(f"Build description not found: {build_path}")
    if build_path.suffix != ".py":
        raise ValueError(f"Build description must be a .py file, got: {build_path.name}")

    module_name = f"stepcode_build_{build_path.stem}"
    globals_dict = runpy.run_path(str(build_path), run_name=module_name)

    build_fn = globals_dict.get("build")
    if not callable(build_fn):
        raise TypeError("Build description must define build(b) -> None.")

    b = Build(build_path.parent)
    build_fn(b)
    return b
