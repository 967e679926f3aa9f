# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class StepCategory(str, Enum):
    """Coarse classification of a build step, used for editor grouping."""
    RUN = "run"
    TEST = "test"
    BUILD = "build"
    CUSTOM = "custom"


_BUILD_STEP_NAMES = ("build", "install")


def categorize(name: str) -> StepCategory:
    # exact, case-sensitive match on the step name only
    if name == "run":
        return StepCategory.RUN
    if name == "test":
        return StepCategory.TEST
    if name in _BUILD_STEP_NAMES:
        return StepCategory.BUILD
    return StepCategory.CUSTOM


@dataclass(frozen=True)
class StepRecord:
    """A single named step from the build tool's public surface."""
    name: str
    description: str
    category: StepCategory

    @classmethod
    def create(cls, name: str, description: str = "") -> StepRecord:
        if not name:
            raise ValueError("step name must not be empty")
        return cls(name=name, description=description or "", category=categorize(name))

    @property
    def task_group(self) -> str:
        return "test" if self.category is StepCategory.TEST else "build"


@dataclass
class ProjectContext:
    """
    Everything the renderers need for one generation run.

    `steps` keeps discovery order (listing order or build-graph order).
    `executable_names` is best effort: the in-process mode fills it with the
    project name as a placeholder, the listing mode leaves it empty.
    """
    project_name: str
    steps: List[StepRecord] = field(default_factory=list)
    executable_names: List[str] = field(default_factory=list)

    def run_steps(self) -> List[StepRecord]:
        return [s for s in self.steps if s.category is StepCategory.RUN]

    def first_step(self, category: StepCategory) -> Optional[StepRecord]:
        for s in self.steps:
            if s.category is category:
                return s
        return None

    @property
    def primary_executable(self) -> str:
        if self.executable_names:
            return self.executable_names[0]
        return self.project_name
