"""
Tests for contentgen.agents.planner
"""

import json

import pytest

from contentgen.agents import ScenePlannerAgent
from contentgen.agents.planner import fallback_plan, strip_code_fence
from contentgen.errors import UpstreamRateLimitedError
from contentgen.models import FallbackPlan, ParsedPlan

from fakes import THREE_SCENES, FakeTextGenerator

SCENES = {
    "scenes": [
        {"narration": "First.", "imagePrompt": "a red door"},
        {"narration": "Second.", "imagePrompt": "a blue window"},
        {"narration": "Third.", "imagePrompt": "a green roof"},
    ]
}


def _plan(response: str, script: str = "A script about houses."):
    client = FakeTextGenerator(response=response)
    return ScenePlannerAgent(client).run(script), client


class TestStripCodeFence:
    """Test removal of markdown fences around model output."""

    def test_json_fence(self):
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fence('  {"a": 1}\n') == '{"a": 1}'


class TestParsedPlans:
    """Test well-formed planner responses."""

    def test_bare_json(self):
        outcome, _ = _plan(json.dumps(SCENES))
        assert isinstance(outcome, ParsedPlan)
        assert not outcome.is_fallback
        assert [s.narration for s in outcome.scenes] == ["First.", "Second.", "Third."]
        assert outcome.scenes[1].image_prompt == "a blue window"

    def test_fenced_json_matches_bare_json(self):
        bare, _ = _plan(json.dumps(SCENES))
        fenced, _ = _plan(f"```json\n{json.dumps(SCENES, indent=2)}\n```")
        assert fenced == bare

    def test_fixture_response(self):
        outcome, _ = _plan(THREE_SCENES)
        assert len(outcome.scenes) == 3

    def test_length_outside_target_range_is_accepted(self):
        one = {"scenes": [{"narration": "Only.", "imagePrompt": "one thing"}]}
        outcome, _ = _plan(json.dumps(one))
        assert isinstance(outcome, ParsedPlan)
        assert len(outcome.scenes) == 1

        many = {"scenes": [{"narration": f"n{i}", "imagePrompt": f"p{i}"} for i in range(8)]}
        outcome, _ = _plan(json.dumps(many))
        assert len(outcome.scenes) == 8

    def test_request_uses_system_prompt_and_script(self):
        _, client = _plan(json.dumps(SCENES), script="My script.")
        assert len(client.calls) == 1
        assert client.calls[0]["prompt"] == "My script."
        assert '"scenes"' in client.calls[0]["system"]
        assert client.calls[0]["temperature"] == 0.7


class TestFallbackPlans:
    """Test that unusable output degrades to a single scene."""

    @pytest.mark.parametrize("response", [
        "",
        "not json at all",
        "[1, 2, 3]",
        '{"other": []}',
        '{"scenes": []}',
        '{"scenes": "three scenes"}',
        '{"scenes": [{"narration": "no prompt"}]}',
        '{"scenes": [{"narration": "", "imagePrompt": "empty narration"}]}',
        '{"scenes": ["just a string"]}',
    ])
    def test_fallback_engaged(self, response):
        outcome, _ = _plan(response)
        assert isinstance(outcome, FallbackPlan)
        assert outcome.is_fallback
        assert outcome.reason
        assert len(outcome.scenes) == 1

    @pytest.mark.parametrize("response", [None, 42, {"scenes": []}])
    def test_non_text_response_falls_back(self, response):
        outcome, _ = _plan(response)
        assert isinstance(outcome, FallbackPlan)
        assert "Expected text response" in outcome.reason

    def test_fallback_content(self):
        script = "x" * 300 + "y" * 400
        outcome, _ = _plan("garbage", script=script)
        scene = outcome.scenes[0]
        assert scene.narration == script[:500]
        assert scene.image_prompt == (
            "A professional, cinematic scene representing: " + script[:200]
        )

    def test_fallback_plan_short_script(self):
        [scene] = fallback_plan("Hi.")
        assert scene.narration == "Hi."
        assert scene.image_prompt.endswith(": Hi.")


def test_upstream_errors_are_not_parse_failures():
    client = FakeTextGenerator(error=UpstreamRateLimitedError())
    with pytest.raises(UpstreamRateLimitedError):
        ScenePlannerAgent(client).run("A script.")
