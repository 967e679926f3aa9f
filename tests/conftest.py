from __future__ import annotations

import sys

import pytest

from stepcode.config import GeneratorConfig
from stepcode.ui.console import Console, set_console

ZIG_LISTING = (
    "Steps:\n"
    "  install (default)            Copy build artifacts to prefix path\n"
    "  uninstall                    Remove build artifacts from prefix path\n"
    "  run                          Run the app\n"
    "  test                         Run unit tests\n"
    "\n"
    "General Options:\n"
    "  -p, --prefix [path]          Where to install files (default: zig-out)\n"
    "  --release[=mode]             Request release mode\n"
)


@pytest.fixture(autouse=True)
def fresh_console():
    console = Console()
    set_console(console)
    yield console
    set_console(Console())


def fake_tool_config(stdout: str = "", stderr: str = "", exit_code: int = 0, **overrides) -> GeneratorConfig:
    """Config whose 'build tool' is this interpreter printing canned output."""
    script = (
        "import sys\n"
        f"sys.stdout.write({stdout!r})\n"
        f"sys.stderr.write({stderr!r})\n"
        f"sys.exit({exit_code})\n"
    )
    return GeneratorConfig(build_tool=sys.executable, list_args=["-c", script], **overrides)


@pytest.fixture
def zig_project(tmp_path):
    project = tmp_path / "hello"
    project.mkdir()
    (project / "build.zig").write_text("// build description\n")
    return project


@pytest.fixture
def fake_tool():
    return fake_tool_config


@pytest.fixture
def zig_listing():
    return ZIG_LISTING
