# render.py
from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import GeneratorConfig
from .model import ProjectContext, StepCategory, StepRecord

WORKSPACE = "${workspaceFolder}"

# Identical on every task; nothing here depends on the step.
TASK_PRESENTATION = {
    "echo": True,
    "reveal": "always",
    "focus": False,
    "panel": "shared",
    "showReuseMessage": True,
    "clear": False,
}
PROBLEM_MATCHER = ["$gcc"]


def _dump(doc: Dict[str, Any]) -> str:
    return json.dumps(doc, indent=4, ensure_ascii=False) + "\n"


def _config(config: Optional[GeneratorConfig]) -> GeneratorConfig:
    return config if config is not None else GeneratorConfig()


# ----------------------------------------------------------------------
# Task labels (shared by tasks.json and launch.json)
# ----------------------------------------------------------------------

def default_task_label(config: GeneratorConfig) -> str:
    return f"{config.build_tool} build"


def step_task_label(step: StepRecord, config: GeneratorConfig) -> str:
    return f"{config.build_tool} build {step.name}"


def build_task_label(context: ProjectContext, config: GeneratorConfig) -> str:
    """The task a debug session should build with before launching."""
    if config.default_task:
        return default_task_label(config)
    step = context.first_step(StepCategory.BUILD)
    if step is not None:
        return step_task_label(step, config)
    return default_task_label(config)


# ----------------------------------------------------------------------
# extensions.json
# ----------------------------------------------------------------------

def render_extensions(context: Optional[ProjectContext] = None, config: Optional[GeneratorConfig] = None) -> str:
    config = _config(config)
    return _dump({"recommendations": list(config.extensions)})


# ----------------------------------------------------------------------
# tasks.json
# ----------------------------------------------------------------------

def _task(label: str, args: List[str], group: Any, config: GeneratorConfig) -> Dict[str, Any]:
    return {
        "label": label,
        "type": "shell",
        "command": config.build_tool,
        "args": args,
        "group": group,
        "presentation": dict(TASK_PRESENTATION),
        "problemMatcher": list(PROBLEM_MATCHER),
    }


def task_entries(context: ProjectContext, config: Optional[GeneratorConfig] = None) -> List[Dict[str, Any]]:
    config = _config(config)
    tasks: List[Dict[str, Any]] = []

    if config.default_task:
        tasks.append(_task(
            default_task_label(config),
            ["build"],
            {"kind": "build", "isDefault": True},
            config,
        ))

    for step in context.steps:
        tasks.append(_task(step_task_label(step, config), ["build", step.name], step.task_group, config))

    return tasks


def render_tasks(context: ProjectContext, config: Optional[GeneratorConfig] = None) -> str:
    return _dump({"version": "2.0.0", "tasks": task_entries(context, config)})


# ----------------------------------------------------------------------
# launch.json
# ----------------------------------------------------------------------

def _launch(exe_name: str, pre_launch_task: str, config: GeneratorConfig) -> Dict[str, Any]:
    return {
        "name": f"Debug {exe_name}",
        "type": "cppdbg",
        "request": "launch",
        "program": f"{WORKSPACE}/{config.build_output_dir}/bin/{exe_name}",
        "args": [],
        "stopAtEntry": False,
        "cwd": WORKSPACE,
        "environment": [],
        "preLaunchTask": pre_launch_task,
        "osx": {
            "MIMode": "lldb",
        },
        "linux": {
            "MIMode": "gdb",
            "setupCommands": [
                {
                    "description": "Enable pretty-printing for gdb",
                    "text": "-enable-pretty-printing",
                    "ignoreFailures": True,
                },
            ],
        },
        "windows": {
            "type": "cppvsdbg",
            "console": "integratedTerminal",
        },
    }


def launch_entries(context: ProjectContext, config: Optional[GeneratorConfig] = None) -> List[Dict[str, Any]]:
    """
    Debug configurations, never empty.

    Run steps win: each one launches the primary executable after running
    that step's task. Without run steps, each known executable gets an
    entry built by the build task. With neither, one fallback entry named
    after the project.
    """
    config = _config(config)
    build_label = build_task_label(context, config)

    run_steps = context.run_steps()
    if run_steps:
        exe = context.primary_executable
        return [_launch(exe, step_task_label(s, config), config) for s in run_steps]

    if context.executable_names:
        return [_launch(exe, build_label, config) for exe in context.executable_names]

    return [_launch(context.project_name, build_label, config)]


def render_launch(context: ProjectContext, config: Optional[GeneratorConfig] = None) -> str:
    return _dump({"version": "0.2.0", "configurations": launch_entries(context, config)})


# ----------------------------------------------------------------------
# settings.json
# ----------------------------------------------------------------------

def render_settings(context: Optional[ProjectContext] = None, config: Optional[GeneratorConfig] = None) -> str:
    config = _config(config)
    return _dump({
        "debug.allowBreakpointsEverywhere": True,
        "zig.buildOnSave": False,
        "zig.buildFilePath": f"{WORKSPACE}/{config.build_file}",
        "zig.zigPath": config.build_tool,
        "files.associations": {
            "*.zig": "zig",
        },
        "editor.formatOnSave": True,
        "editor.insertSpaces": True,
        "editor.tabSize": 4,
    })


# ----------------------------------------------------------------------
# All documents, in write order
# ----------------------------------------------------------------------

Renderer = Callable[[ProjectContext, GeneratorConfig], str]

DOCUMENTS: Tuple[Tuple[str, Renderer], ...] = (
    ("extensions.json", render_extensions),
    ("tasks.json", render_tasks),
    ("launch.json", render_launch),
    ("settings.json", render_settings),
)


def render_all(context: ProjectContext, config: Optional[GeneratorConfig] = None) -> Dict[str, str]:
    config = _config(config)
    return {filename: render(context, config) for filename, render in DOCUMENTS}
