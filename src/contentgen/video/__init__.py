"""Narrated slideshow generation."""

from .fanout import build_image_prompt, keep_imaged, render_scene_images
from .narration import NarrationTrack, join_narration, synthesize_narration
from .pipeline import PipelineStage, VideoPipeline, validate_script
from .timing import DEFAULT_WORDS_PER_MINUTE, DurationEstimate, count_words, estimate_durations

__all__ = [
    # Fanout
    "build_image_prompt",
    "keep_imaged",
    "render_scene_images",
    # Narration
    "NarrationTrack",
    "join_narration",
    "synthesize_narration",
    # Timing
    "DEFAULT_WORDS_PER_MINUTE",
    "DurationEstimate",
    "count_words",
    "estimate_durations",
    # Pipeline
    "PipelineStage",
    "VideoPipeline",
    "validate_script",
]
