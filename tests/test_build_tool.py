from __future__ import annotations

import sys

import pytest

from stepcode.errors import BuildToolNotFound, OutputTooLarge
from stepcode.toolchain.build_tool import list_steps, run_build_tool


def test_list_steps_captures_output(tmp_path, fake_tool):
    config = fake_tool(stdout="Steps:\n  run  Run it\n", stderr="warning\n")
    listing = list_steps(tmp_path, config)
    assert listing.ok
    assert listing.returncode == 0
    assert listing.stdout == "Steps:\n  run  Run it\n"
    assert listing.stderr == "warning\n"
    assert listing.command[0] == sys.executable


def test_list_steps_reports_exit_status(tmp_path, fake_tool):
    listing = list_steps(tmp_path, fake_tool(stderr="boom", exit_code=3))
    assert listing.returncode == 3
    assert not listing.ok
    assert listing.stderr == "boom"


def test_runs_in_project_directory(tmp_path):
    listing = run_build_tool(
        [sys.executable, "-c", "import os; print(os.getcwd())"],
        cwd=tmp_path,
        max_output_bytes=4096,
    )
    assert listing.stdout.strip() == str(tmp_path.resolve())


def test_oversized_output_fails_instead_of_truncating(tmp_path, fake_tool):
    config = fake_tool(stdout="x" * 200, max_output_bytes=100)
    with pytest.raises(OutputTooLarge) as info:
        list_steps(tmp_path, config)
    assert info.value.stream == "stdout"
    assert info.value.limit == 100


def test_output_at_limit_is_accepted(tmp_path, fake_tool):
    listing = list_steps(tmp_path, fake_tool(stdout="x" * 100, max_output_bytes=100))
    assert len(listing.stdout) == 100


def test_missing_tool(tmp_path):
    with pytest.raises(BuildToolNotFound) as info:
        run_build_tool(["definitely-not-a-build-tool-xyz", "build", "-l"], cwd=tmp_path, max_output_bytes=1024)
    assert info.value.tool == "definitely-not-a-build-tool-xyz"


def test_failed_run_skips_size_check_and_keeps_stderr_tail(tmp_path, fake_tool):
    config = fake_tool(stdout="x" * 500, stderr="y" * 300 + "error: last line\n", exit_code=2, max_output_bytes=100)
    listing = list_steps(tmp_path, config)
    assert listing.returncode == 2
    assert listing.stdout == ""
    assert len(listing.stderr) == 100
    assert listing.stderr.endswith("error: last line\n")
