"""Video generation pipeline: script in, narrated slideshow out."""

import logging
from enum import Enum
from typing import Any, Optional

from ..agents import ScenePlannerAgent
from ..config import config
from ..errors import (
    ContentGenerationError,
    InvalidInputError,
    NarrationSynthesisFailedError,
    NoImagesProducedError,
)
from ..models import VideoResult
from ..services.providers import Providers
from .fanout import keep_imaged, render_scene_images
from .narration import synthesize_narration
from .timing import estimate_durations

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    """Pipeline stages, entered strictly in order."""
    VALIDATE = "validate"
    PLAN = "plan"
    FANOUT = "fanout"
    SYNTHESIZE = "synthesize"
    ESTIMATE = "estimate"
    ASSEMBLE = "assemble"
    COMPLETED = "completed"
    FAILED = "failed"


def validate_script(script: Any) -> str:
    """Return the script if it is a non-blank string.

    Raises:
        InvalidInputError: If the script is missing, not a string, or blank.
    """
    if not isinstance(script, str) or not script.strip():
        raise InvalidInputError("Script is required")
    return script


class VideoPipeline:
    """Turns a narration script into a VideoResult.

    Stages run in a fixed order with no retries; the first fatal error ends
    the run. Image failures for individual scenes drop those scenes instead.
    A pipeline holds no per-request state and may serve concurrent requests.
    """

    def __init__(
        self,
        providers: Providers,
        words_per_minute: Optional[float] = None,
        max_concurrent_images: Optional[int] = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            providers: Text, image and speech collaborators.
            words_per_minute: Speaking rate for duration estimates.
                Defaults to config.words_per_minute.
            max_concurrent_images: Cap on concurrent image requests.
                Defaults to config.max_concurrent_images.
        """
        self._providers = providers
        self._planner = ScenePlannerAgent(providers.text)
        self._words_per_minute = words_per_minute or config.words_per_minute
        self._max_concurrent_images = max_concurrent_images or config.max_concurrent_images

    @property
    def planner(self) -> ScenePlannerAgent:
        return self._planner

    def run(self, script: Any) -> VideoResult:
        """Run every stage for one script.

        Raises:
            InvalidInputError: Blank or missing script. Raised before any call.
            UpstreamRateLimitedError: A collaborator rate limited a request.
            UpstreamQuotaExceededError: A collaborator reported a quota problem.
            NoImagesProducedError: Every scene image failed.
            NarrationSynthesisFailedError: The narration could not be rendered.
            UnknownUpstreamError: Any other collaborator failure.
        """
        stage = PipelineStage.VALIDATE
        try:
            script = validate_script(script)
            if self._providers.speech is None:
                raise NarrationSynthesisFailedError("ELEVENLABS_API_KEY is not configured")
            logger.info(f"Processing script: {script[:100]}...")

            stage = PipelineStage.PLAN
            outcome = self._planner.run(script)
            if outcome.is_fallback:
                logger.warning(f"Scene planning degraded to fallback: {outcome.reason}")
            logger.info(f"Planned {len(outcome.scenes)} scenes")

            stage = PipelineStage.FANOUT
            rendered = render_scene_images(
                outcome.scenes,
                self._providers.image,
                max_workers=self._max_concurrent_images,
            )
            scenes = keep_imaged(rendered)
            if not scenes:
                raise NoImagesProducedError()
            logger.info(f"Successfully generated {len(scenes)} of {len(rendered)} images")

            stage = PipelineStage.SYNTHESIZE
            track = synthesize_narration(scenes, self._providers.speech)

            stage = PipelineStage.ESTIMATE
            estimate = estimate_durations(track.text, len(scenes), self._words_per_minute)

            stage = PipelineStage.ASSEMBLE
            for scene in scenes:
                scene.duration = estimate.per_scene_ms
            result = VideoResult(
                scenes=scenes,
                audio_base64=track.audio_base64,
                audio_type=track.mime_type,
                total_duration=estimate.total_ms,
            )
        except ContentGenerationError as e:
            logger.error(f"Video generation failed at {stage.value}: {e.message}")
            raise

        logger.info(
            f"Video generation {PipelineStage.COMPLETED.value}: {len(result.scenes)} scenes, "
            f"{result.total_duration / 1000:.1f}s"
        )
        return result
