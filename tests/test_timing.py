"""
Tests for contentgen.video.timing
"""

import pytest

from contentgen.video import DEFAULT_WORDS_PER_MINUTE, count_words, estimate_durations


def test_default_rate_is_150_wpm():
    assert DEFAULT_WORDS_PER_MINUTE == 150


def test_count_words_collapses_whitespace_runs():
    assert count_words("one  two\tthree\n\nfour ") == 4
    assert count_words("") == 0


def test_150_words_is_one_minute():
    estimate = estimate_durations(" ".join(["word"] * 150), scene_count=3)
    assert estimate.total_ms == 60000
    assert estimate.per_scene_ms == 20000
    assert estimate.word_count == 150


def test_total_formula():
    narration = "Intro. Conclusion."
    estimate = estimate_durations(narration, scene_count=2)
    assert estimate.total_ms == (2 / 150) * 60000
    assert estimate.per_scene_ms * 2 == pytest.approx(estimate.total_ms)


def test_even_split_ignores_narration_lengths():
    estimate = estimate_durations("a b c d e f g", scene_count=3)
    assert estimate.per_scene_ms * 3 == pytest.approx(estimate.total_ms)


def test_rate_override():
    estimate = estimate_durations("one two three four", scene_count=1, words_per_minute=60)
    assert estimate.total_ms == pytest.approx(4000)


@pytest.mark.parametrize("scene_count", [0, -1])
def test_scene_count_must_be_positive(scene_count):
    with pytest.raises(ValueError):
        estimate_durations("words here", scene_count=scene_count)


def test_rate_must_be_positive():
    with pytest.raises(ValueError):
        estimate_durations("words here", scene_count=1, words_per_minute=0)
