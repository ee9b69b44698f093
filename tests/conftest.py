import pytest

from contentgen.services import Providers

from fakes import THREE_SCENES, FakeImageGenerator, FakeSpeech, FakeTextGenerator


@pytest.fixture
def text_generator():
    return FakeTextGenerator(response=THREE_SCENES)


@pytest.fixture
def image_generator():
    return FakeImageGenerator()


@pytest.fixture
def speech():
    return FakeSpeech()


@pytest.fixture
def providers(text_generator, image_generator, speech):
    return Providers(text=text_generator, image=image_generator, speech=speech)
