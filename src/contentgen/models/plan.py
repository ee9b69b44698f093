"""Scene planner outcomes."""

from dataclasses import dataclass
from typing import Union

from .scene import ScenePlan


@dataclass
class ParsedPlan:
    """The model returned a well-formed scene list."""

    scenes: list[ScenePlan]

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass
class FallbackPlan:
    """The model output was unusable; a single-scene plan was substituted."""

    scenes: list[ScenePlan]
    reason: str

    @property
    def is_fallback(self) -> bool:
        return True


PlanOutcome = Union[ParsedPlan, FallbackPlan]
