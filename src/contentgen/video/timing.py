"""Playback duration estimates from narration word count."""

from dataclasses import dataclass

# Assumed average speaking rate. The client paces scene changes with it,
# so changing it changes playback timing.
DEFAULT_WORDS_PER_MINUTE = 150.0

MS_PER_MINUTE = 60_000


@dataclass(frozen=True)
class DurationEstimate:
    """Total and per-scene playback durations in milliseconds."""

    total_ms: float
    per_scene_ms: float
    word_count: int


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def estimate_durations(
    narration: str,
    scene_count: int,
    words_per_minute: float = DEFAULT_WORDS_PER_MINUTE,
) -> DurationEstimate:
    """Estimate playback time and split it evenly across scenes.

    Args:
        narration: Combined narration text.
        scene_count: Number of scenes sharing the narration.
        words_per_minute: Speaking rate.

    Raises:
        ValueError: If scene_count or words_per_minute is not positive.
    """
    if scene_count <= 0:
        raise ValueError("scene_count must be positive")
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")

    words = count_words(narration)
    total_ms = (words / words_per_minute) * MS_PER_MINUTE
    return DurationEstimate(
        total_ms=total_ms,
        per_scene_ms=total_ms / scene_count,
        word_count=words,
    )
