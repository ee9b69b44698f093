"""Data models for the content generator."""

from .scene import ScenePlan, RenderedScene
from .plan import ParsedPlan, FallbackPlan, PlanOutcome
from .result import VideoResult
from .content import ContentType, TextParams, ImageParams, CodeParams, ContentResult

__all__ = [
    "ScenePlan",
    "RenderedScene",
    "ParsedPlan",
    "FallbackPlan",
    "PlanOutcome",
    "VideoResult",
    "ContentType",
    "TextParams",
    "ImageParams",
    "CodeParams",
    "ContentResult",
]
