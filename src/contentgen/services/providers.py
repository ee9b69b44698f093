"""Container for the collaborator clients the generators depend on."""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from ..config import Config, config as default_config
from .base import ImageGenerator, SpeechSynthesizer, TextGenerator

logger = logging.getLogger(__name__)


@dataclass
class Providers:
    """Text, image and speech capabilities, injected into the generators.

    ``speech`` is optional so the single-shot content generators can run
    without speech credentials; the video pipeline refuses to run without it.
    """

    text: TextGenerator
    image: ImageGenerator
    speech: Optional[SpeechSynthesizer] = None

    @classmethod
    def from_config(cls, cfg: Optional[Config] = None) -> "Providers":
        """Build the real clients from configuration.

        Raises:
            ValueError: If a required API key is missing.
        """
        from .anthropic import AnthropicClient
        from .elevenlabs import ElevenLabsClient
        from .gateway import GatewayClient

        cfg = cfg or default_config
        session = requests.Session()

        gateway = GatewayClient(
            api_key=cfg.gateway_api_key,
            url=cfg.gateway_url,
            text_model=cfg.text_model,
            image_model=cfg.image_model,
            timeout=cfg.request_timeout,
            session=session,
        )

        if cfg.text_provider == "anthropic":
            text: TextGenerator = AnthropicClient(
                api_key=cfg.anthropic_api_key,
                model=cfg.anthropic_model,
                timeout=cfg.request_timeout,
            )
        elif cfg.text_provider == "gateway":
            text = gateway
        else:
            raise ValueError(f"Unknown text provider: {cfg.text_provider}")

        speech: Optional[SpeechSynthesizer] = None
        if cfg.elevenlabs_api_key:
            speech = ElevenLabsClient(
                api_key=cfg.elevenlabs_api_key,
                voice_id=cfg.elevenlabs_voice_id,
                model=cfg.elevenlabs_model,
                stability=cfg.voice_stability,
                similarity_boost=cfg.voice_similarity_boost,
                timeout=cfg.request_timeout,
                session=session,
            )
        else:
            logger.info("ELEVENLABS_API_KEY not set; video generation is unavailable")

        return cls(text=text, image=gateway, speech=speech)
