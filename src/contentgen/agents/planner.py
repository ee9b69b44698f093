"""Scene planner agent: splits a narration script into illustrated scenes."""

import json
import logging
import re

from ..models import FallbackPlan, ParsedPlan, PlanOutcome, ScenePlan
from .base import BaseAgent

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a video scene planner. Given a script, break it into 3-5 visual scenes.
For each scene, provide:
1. A short segment of text for narration (2-3 sentences max)
2. A detailed image prompt that captures the visual for that scene

Respond in this exact JSON format:
{
  "scenes": [
    {
      "narration": "Text to be spoken for this scene",
      "imagePrompt": "Detailed visual description for AI image generation"
    }
  ]
}
Only output valid JSON, no markdown or explanation."""

FALLBACK_NARRATION_CHARS = 500
FALLBACK_PROMPT_CHARS = 200
FALLBACK_PROMPT_TEMPLATE = "A professional, cinematic scene representing: {excerpt}"

_FENCE_RE = re.compile(r"```(?:json)?\s*\n?|\n?```", re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    """Remove markdown code-fence markup around a model response."""
    return _FENCE_RE.sub("", text).strip()


def fallback_plan(script: str) -> list[ScenePlan]:
    """Single scene built from the head of the script."""
    return [
        ScenePlan(
            narration=script[:FALLBACK_NARRATION_CHARS],
            image_prompt=FALLBACK_PROMPT_TEMPLATE.format(
                excerpt=script[:FALLBACK_PROMPT_CHARS]
            ),
        )
    ]


class ScenePlannerAgent(BaseAgent[str, PlanOutcome]):
    """Agent that decomposes a script into (narration, image prompt) pairs.

    Never fails on bad model output: anything that is not a non-empty
    ``{"scenes": [...]}`` object yields a single-scene FallbackPlan.
    Upstream errors from the text generator itself are propagated.
    """

    temperature = 0.7

    @property
    def name(self) -> str:
        """Return the agent's name."""
        return "ScenePlannerAgent"

    @property
    def system_prompt(self) -> str:
        """Return the system prompt for scene planning."""
        return SYSTEM_PROMPT

    def run(self, input_data: str) -> PlanOutcome:
        """Plan scenes for a script.

        Args:
            input_data: Non-empty narration script.

        Returns:
            ParsedPlan when the response was usable, FallbackPlan otherwise.
        """
        self._logger.info(f"Planning scenes for script: {input_data[:100]}")

        response = self._create_message(prompt=input_data, temperature=self.temperature)
        self._logger.debug(f"Scene response: {response}")

        try:
            scenes = self._parse_response(response)
        except ValueError as e:
            self._logger.warning(f"Failed to parse scenes, using single-scene fallback: {e}")
            return FallbackPlan(scenes=fallback_plan(input_data), reason=str(e))

        self._logger.info(f"Generated {len(scenes)} scenes")
        return ParsedPlan(scenes=scenes)

    def _parse_response(self, response: str) -> list[ScenePlan]:
        """Parse the model response into scene plans.

        Raises:
            ValueError: If the response is not valid JSON of the expected shape.
        """
        if not isinstance(response, str):
            raise ValueError(f"Expected text response, got {type(response).__name__}")

        cleaned = strip_code_fence(response)
        if not cleaned:
            raise ValueError("Empty response")

        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in response: {e}")

        if not isinstance(data, dict) or "scenes" not in data:
            raise ValueError("Response does not contain a scenes key")

        scenes_data = data["scenes"]
        if not isinstance(scenes_data, list):
            raise ValueError("Response scenes is not an array")
        if not scenes_data:
            raise ValueError("Response contains no scenes")

        # pydantic's ValidationError is a ValueError
        return [ScenePlan.model_validate(scene_data) for scene_data in scenes_data]
