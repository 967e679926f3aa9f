from __future__ import annotations

import json

import pytest

from stepcode.config import GeneratorConfig
from stepcode.model import ProjectContext, StepRecord
from stepcode.render import (
    DOCUMENTS,
    render_all,
    render_extensions,
    render_launch,
    render_settings,
    render_tasks,
)


def _ctx(*names: str, project: str = "hello", executables=None) -> ProjectContext:
    return ProjectContext(
        project_name=project,
        steps=[StepRecord.create(n, f"{n} step") for n in names],
        executable_names=list(executables or []),
    )


def _tasks(ctx, config=None):
    return json.loads(render_tasks(ctx, config))["tasks"]


def _launch(ctx, config=None):
    return json.loads(render_launch(ctx, config))["configurations"]


# ---------------------------------------------------------------------
# constant documents
# ---------------------------------------------------------------------

def test_extensions_document():
    doc = json.loads(render_extensions(_ctx()))
    assert doc == {"recommendations": ["ziglang.vscode-zig", "ms-vscode.cpptools"]}


def test_settings_document():
    doc = json.loads(render_settings(_ctx()))
    assert doc["debug.allowBreakpointsEverywhere"] is True
    assert doc["zig.buildOnSave"] is False
    assert doc["zig.buildFilePath"] == "${workspaceFolder}/build.zig"
    assert doc["editor.tabSize"] == 4
    assert doc["editor.insertSpaces"] is True


@pytest.mark.parametrize("render", [render_extensions, render_settings])
def test_constant_documents_ignore_context(render):
    small = _ctx()
    large = _ctx("run", "test", "install", "docs", project="other", executables=["a", "b"])
    assert render(small) == render(large)


def test_all_documents_end_with_newline():
    for filename, text in render_all(_ctx("run")).items():
        assert text.endswith("}\n"), filename


def test_rendering_is_deterministic():
    first = render_all(_ctx("install", "run", "test", "docs"))
    second = render_all(_ctx("install", "run", "test", "docs"))
    assert first == second
    assert list(first) == [name for name, _ in DOCUMENTS]


# ---------------------------------------------------------------------
# tasks.json
# ---------------------------------------------------------------------

def test_tasks_follow_step_order_after_default():
    tasks = _tasks(_ctx("build", "test", "run"))
    assert [t["label"] for t in tasks] == ["zig build", "zig build build", "zig build test", "zig build run"]
    assert tasks[0]["group"] == {"kind": "build", "isDefault": True}
    assert tasks[0]["args"] == ["build"]
    assert [t["args"] for t in tasks[1:]] == [["build", "build"], ["build", "test"], ["build", "run"]]


def test_task_groups_from_category():
    tasks = _tasks(_ctx("install", "test", "run", "docs"))[1:]
    assert [t["group"] for t in tasks] == ["build", "test", "build", "build"]


def test_task_count_without_default():
    config = GeneratorConfig(default_task=False)
    assert len(_tasks(_ctx("a", "b", "c"), config)) == 3
    assert _tasks(_ctx(), config) == []


def test_every_task_shares_presentation_and_matcher():
    tasks = _tasks(_ctx("install", "test", "docs"))
    for t in tasks:
        assert t["type"] == "shell"
        assert t["command"] == "zig"
        assert t["presentation"] == {
            "echo": True,
            "reveal": "always",
            "focus": False,
            "panel": "shared",
            "showReuseMessage": True,
            "clear": False,
        }
        assert t["problemMatcher"] == ["$gcc"]


def test_empty_steps_still_valid():
    doc = json.loads(render_tasks(_ctx()))
    assert doc["version"] == "2.0.0"
    assert len(doc["tasks"]) == 1


# ---------------------------------------------------------------------
# launch.json
# ---------------------------------------------------------------------

def test_run_step_drives_launch_entry():
    configs = _launch(_ctx("build", "test", "run"))
    assert len(configs) == 1
    (entry,) = configs
    assert entry["preLaunchTask"] == "zig build run"
    assert entry["name"] == "Debug hello"
    assert entry["program"] == "${workspaceFolder}/zig-out/bin/hello"
    assert entry["type"] == "cppdbg"
    assert entry["osx"] == {"MIMode": "lldb"}
    assert entry["linux"]["MIMode"] == "gdb"
    assert entry["windows"]["type"] == "cppvsdbg"


def test_run_step_uses_primary_executable():
    (entry,) = _launch(_ctx("run", executables=["app", "tool"]))
    assert entry["program"].endswith("/bin/app")


def test_executables_without_run_step():
    configs = _launch(_ctx("install", executables=["app", "tool"]))
    assert [c["name"] for c in configs] == ["Debug app", "Debug tool"]
    assert {c["preLaunchTask"] for c in configs} == {"zig build"}


def test_fallback_entry_when_nothing_runnable():
    configs = _launch(_ctx("docs", "test"))
    assert len(configs) == 1
    assert configs[0]["name"] == "Debug hello"
    assert configs[0]["preLaunchTask"] == "zig build"


def test_fallback_entry_with_no_steps():
    assert len(_launch(_ctx())) == 1


def test_pre_launch_task_without_default_uses_build_step():
    config = GeneratorConfig(default_task=False)
    (entry,) = _launch(_ctx("docs", "install"), config)
    assert entry["preLaunchTask"] == "zig build install"


def test_build_output_dir_is_configurable():
    config = GeneratorConfig(build_output_dir="out")
    (entry,) = _launch(_ctx(), config)
    assert entry["program"] == "${workspaceFolder}/out/bin/hello"
