from .config import GeneratorConfig
from .dsl import Build, BuildStep, add_vscode_step, generate_vscode_config, load_build
from .extract import context_from_build, context_from_project, parse_step_lines
from .generator import generate, generate_for_project
from .model import ProjectContext, StepCategory, StepRecord, categorize
from .render import render_all

__all__ = [
    "GeneratorConfig",
    "Build",
    "BuildStep",
    "add_vscode_step",
    "generate_vscode_config",
    "load_build",
    "context_from_build",
    "context_from_project",
    "parse_step_lines",
    "generate",
    "generate_for_project",
    "ProjectContext",
    "StepCategory",
    "StepRecord",
    "categorize",
    "render_all",
]
