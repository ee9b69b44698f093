"""
Tests for contentgen.config and contentgen.models
"""

import pytest
from pydantic import ValidationError

from contentgen.config import Config
from contentgen.models import RenderedScene, ScenePlan, VideoResult


def test_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("AI_GATEWAY_API_KEY", "gw")
    monkeypatch.setenv("CONTENTGEN_WORDS_PER_MINUTE", "120")
    monkeypatch.setenv("CONTENTGEN_MAX_CONCURRENT_IMAGES", "3")
    monkeypatch.setenv("CONTENTGEN_CORS_ORIGINS", "https://a.example, https://b.example")

    cfg = Config()

    assert cfg.gateway_api_key == "gw"
    assert cfg.words_per_minute == 120
    assert cfg.max_concurrent_images == 3
    assert cfg.cors_origins == ["https://a.example", "https://b.example"]


def test_builtin_defaults(monkeypatch):
    for name in ("CONTENTGEN_WORDS_PER_MINUTE", "ELEVENLABS_VOICE_ID", "ELEVENLABS_MODEL"):
        monkeypatch.delenv(name, raising=False)

    cfg = Config()

    assert cfg.words_per_minute == 150
    assert cfg.elevenlabs_voice_id == "EXAVITQu4vr4xnSDxMaL"
    assert cfg.elevenlabs_model == "eleven_multilingual_v2"
    assert cfg.voice_stability == 0.5
    assert cfg.voice_similarity_boost == 0.75


def test_validate_video_required_lists_missing():
    cfg = Config(gateway_api_key="", elevenlabs_api_key="", text_provider="gateway")
    with pytest.raises(ValueError, match="AI_GATEWAY_API_KEY, ELEVENLABS_API_KEY"):
        cfg.validate_video_required()


def test_validate_video_required_rejects_unknown_provider():
    cfg = Config(gateway_api_key="gw", elevenlabs_api_key="xi", text_provider="other")
    with pytest.raises(ValueError, match="CONTENTGEN_TEXT_PROVIDER"):
        cfg.validate_video_required()


def test_words_per_minute_must_be_positive():
    with pytest.raises(ValidationError):
        Config(words_per_minute=0)


def test_scene_plan_accepts_camel_case():
    plan = ScenePlan.model_validate({"narration": "n", "imagePrompt": "p"})
    assert plan.image_prompt == "p"


def test_video_result_requires_scenes():
    with pytest.raises(ValidationError):
        VideoResult(scenes=[], audio_base64="", audio_type="audio/mpeg", total_duration=0)


def test_video_result_rejects_imageless_scene():
    with pytest.raises(ValidationError):
        VideoResult(
            scenes=[RenderedScene(narration="n", image_url=None)],
            audio_base64="AAA",
            audio_type="audio/mpeg",
            total_duration=400,
        )
