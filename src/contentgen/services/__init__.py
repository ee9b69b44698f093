"""External service integrations."""

from .base import (
    ImageGenerator,
    SpeechAudio,
    SpeechSynthesizer,
    TextGenerator,
    raise_for_status,
)
from .anthropic import AnthropicClient
from .elevenlabs import ElevenLabsClient
from .gateway import GatewayClient
from .providers import Providers

__all__ = [
    "AnthropicClient",
    "ElevenLabsClient",
    "GatewayClient",
    "ImageGenerator",
    "Providers",
    "SpeechAudio",
    "SpeechSynthesizer",
    "TextGenerator",
    "raise_for_status",
]
