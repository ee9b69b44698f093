"""
Tests for contentgen.content
"""

import pytest

from contentgen.content import ContentGenerator
from contentgen.errors import InvalidInputError, UnknownUpstreamError, UpstreamRateLimitedError
from contentgen.services import Providers

from fakes import FakeImageGenerator, FakeTextGenerator, image_url_for

TEXT_PARAMS = {"topic": "Solar panels", "tone": "friendly", "audience": "homeowners", "goal": "sign-ups"}
IMAGE_PARAMS = {"subject": "a lighthouse", "style": "watercolor", "lighting": "golden hour", "composition": "rule of thirds"}
CODE_PARAMS = {"task": "reverse a string", "language": "Python", "context": "utility module"}


@pytest.fixture
def generator():
    text = FakeTextGenerator(response="Generated output")
    images = FakeImageGenerator()
    return ContentGenerator(Providers(text=text, image=images)), text, images


def test_text(generator):
    content, text, _ = generator
    result = content.generate("text", TEXT_PARAMS)

    assert result.content == "Generated output"
    assert result.to_payload() == {"content": "Generated output"}
    call = text.calls[0]
    assert "marketing copy" in call["system"]
    assert "Topic: Solar panels" in call["prompt"]
    assert "Target Audience: homeowners" in call["prompt"]


def test_code(generator):
    content, text, _ = generator
    content.generate("code", CODE_PARAMS)

    call = text.calls[0]
    assert "expert programmer" in call["system"]
    assert "Task: reverse a string" in call["prompt"]
    assert "Language: Python" in call["prompt"]


def test_code_context_is_optional(generator):
    content, text, _ = generator
    content.generate("code", {"task": "sum a list", "language": "Go"})
    assert "Context: \n" in text.calls[0]["prompt"]


def test_image(generator):
    content, text, images = generator
    result = content.generate("image", IMAGE_PARAMS)

    prompt = "Create a watercolor image of a lighthouse. Lighting: golden hour. Composition: rule of thirds."
    assert images.prompts == [prompt]
    assert result.is_image
    assert result.to_payload() == {"content": image_url_for(prompt), "isImage": True}
    assert text.calls == []


@pytest.mark.parametrize("content_type", ["video", "", None, 3])
def test_unknown_type(generator, content_type):
    content, text, images = generator
    with pytest.raises(InvalidInputError, match="Invalid content type"):
        content.generate(content_type, TEXT_PARAMS)
    assert text.calls == [] and images.prompts == []


def test_missing_params(generator):
    content, text, _ = generator
    with pytest.raises(InvalidInputError) as exc_info:
        content.generate("text", {"topic": "x"})
    assert "tone" in exc_info.value.message
    assert exc_info.value.status_code == 400
    assert text.calls == []


def test_empty_text_output():
    content = ContentGenerator(Providers(text=FakeTextGenerator(response=""), image=FakeImageGenerator()))
    with pytest.raises(UnknownUpstreamError):
        content.generate("text", TEXT_PARAMS)


def test_upstream_errors_propagate():
    text = FakeTextGenerator(error=UpstreamRateLimitedError())
    content = ContentGenerator(Providers(text=text, image=FakeImageGenerator()))
    with pytest.raises(UpstreamRateLimitedError):
        content.generate("code", CODE_PARAMS)


def test_image_failure_propagates():
    content = ContentGenerator(
        Providers(text=FakeTextGenerator(), image=FakeImageGenerator(fail_on=("Create",)))
    )
    with pytest.raises(UnknownUpstreamError, match="No image generated"):
        content.generate("image", IMAGE_PARAMS)
