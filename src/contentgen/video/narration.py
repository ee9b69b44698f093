"""Narration track synthesis."""

import base64
import logging
from dataclasses import dataclass
from typing import Sequence

from ..errors import ContentGenerationError, NarrationSynthesisFailedError
from ..models import RenderedScene
from ..services.base import SpeechSynthesizer

logger = logging.getLogger(__name__)


@dataclass
class NarrationTrack:
    """One synthesized narration track for the whole slideshow."""

    text: str
    audio_base64: str
    mime_type: str
    byte_count: int


def join_narration(scenes: Sequence[RenderedScene]) -> str:
    """Join scene narrations with single spaces, in scene order."""
    return " ".join(scene.narration for scene in scenes)


def synthesize_narration(
    scenes: Sequence[RenderedScene], synthesizer: SpeechSynthesizer
) -> NarrationTrack:
    """Render the combined narration of ``scenes`` with a single speech request.

    Raises:
        UpstreamRateLimitedError: If the speech service rate limits the request.
        UpstreamQuotaExceededError: If the speech service reports a quota problem.
        NarrationSynthesisFailedError: On any other speech failure.
    """
    text = join_narration(scenes)
    logger.info(f"Generating audio narration ({len(text.split())} words)")

    try:
        audio = synthesizer.synthesize(text)
    except ContentGenerationError:
        raise
    except Exception as e:
        logger.error(f"Speech synthesis failed: {e}")
        raise NarrationSynthesisFailedError() from e

    if not audio.data:
        raise NarrationSynthesisFailedError("Speech service returned no audio")

    logger.info(f"Audio generated successfully, size: {len(audio.data)}")
    return NarrationTrack(
        text=text,
        audio_base64=base64.b64encode(audio.data).decode("ascii"),
        mime_type=audio.mime_type,
        byte_count=len(audio.data),
    )
