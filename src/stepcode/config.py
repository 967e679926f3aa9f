# config.py
from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_BUILD_TOOL = "zig"
DEFAULT_BUILD_FILE = "build.zig"
DEFAULT_BUILD_OUTPUT_DIR = "zig-out"
DEFAULT_MAX_OUTPUT_BYTES = 1024 * 1024
DEFAULT_VSCODE_DIR = ".vscode"

DEFAULT_EXTENSIONS = ["ziglang.vscode-zig", "ms-vscode.cpptools"]


class GeneratorConfig(BaseModel):
    """Toolchain conventions the extractor and renderers depend on."""
    build_tool: str = DEFAULT_BUILD_TOOL
    list_args: list[str] = Field(default_factory=lambda: ["build", "-l"])
    build_file: str = DEFAULT_BUILD_FILE
    build_output_dir: str = DEFAULT_BUILD_OUTPUT_DIR
    max_output_bytes: int = Field(default=DEFAULT_MAX_OUTPUT_BYTES, gt=0)
    default_task: bool = True
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))

    @property
    def list_command(self) -> list[str]:
        return [self.build_tool, *self.list_args]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> GeneratorConfig:
        """
        Build a config from STEPCODE_* environment variables.

        Explicit keyword overrides win over the environment; None overrides
        are ignored so CLI options that were not given fall through.
        """
        env = os.environ if environ is None else environ
        values: dict = {}
        if "STEPCODE_BUILD_TOOL" in env:
            values["build_tool"] = env["STEPCODE_BUILD_TOOL"]
        if "STEPCODE_BUILD_FILE" in env:
            values["build_file"] = env["STEPCODE_BUILD_FILE"]
        if "STEPCODE_OUTPUT_DIR" in env:
            values["build_output_dir"] = env["STEPCODE_OUTPUT_DIR"]
        if "STEPCODE_MAX_OUTPUT" in env:
            values["max_output_bytes"] = env["STEPCODE_MAX_OUTPUT"]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
