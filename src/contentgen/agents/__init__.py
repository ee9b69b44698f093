"""AI agents for planning and writing content."""

from .base import BaseAgent
from .planner import ScenePlannerAgent
from .writers import CodeWriterAgent, CopywriterAgent

__all__ = ["BaseAgent", "ScenePlannerAgent", "CopywriterAgent", "CodeWriterAgent"]
