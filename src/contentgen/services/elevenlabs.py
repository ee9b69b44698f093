"""ElevenLabs text-to-speech client."""

import logging
from typing import Optional

import requests

from ..config import config
from ..errors import NarrationSynthesisFailedError
from .base import SpeechAudio, raise_for_status

logger = logging.getLogger(__name__)


class ElevenLabsClient:
    """Speech synthesizer backed by the ElevenLabs REST API."""

    BASE_URL = "https://api.elevenlabs.io/v1/text-to-speech"
    MIME_TYPE = "audio/mpeg"

    def __init__(
        self,
        api_key: Optional[str] = None,
        voice_id: Optional[str] = None,
        model: Optional[str] = None,
        stability: Optional[float] = None,
        similarity_boost: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the ElevenLabs client.

        Args:
            api_key: ElevenLabs API key. Defaults to ELEVENLABS_API_KEY env var.
            voice_id: Voice to render with. Defaults to config.elevenlabs_voice_id.
            model: Speech model id. Defaults to config.elevenlabs_model.
            stability: Voice stability (0-1). Defaults to config.voice_stability.
            similarity_boost: Voice similarity boost (0-1).
            timeout: Request timeout in seconds. Defaults to config.request_timeout.
            session: Shared HTTP session. Created if not provided.
        """
        self._api_key = api_key or config.elevenlabs_api_key
        if not self._api_key:
            raise ValueError("ELEVENLABS_API_KEY is not configured")

        self._voice_id = voice_id or config.elevenlabs_voice_id
        self._model = model or config.elevenlabs_model
        self._stability = config.voice_stability if stability is None else stability
        self._similarity_boost = (
            config.voice_similarity_boost if similarity_boost is None else similarity_boost
        )
        self._timeout = timeout or config.request_timeout
        self._session = session or requests.Session()

    @property
    def voice_id(self) -> str:
        return self._voice_id

    def synthesize(self, text: str) -> SpeechAudio:
        """Render text as MPEG audio.

        Raises:
            UpstreamRateLimitedError: On HTTP 429.
            UpstreamQuotaExceededError: On HTTP 402.
            NarrationSynthesisFailedError: On any other failure.
        """
        url = f"{self.BASE_URL}/{self._voice_id}"
        headers = {
            "xi-api-key": self._api_key,
            "Content-Type": "application/json",
            "Accept": self.MIME_TYPE,
        }
        body = {
            "text": text,
            "model_id": self._model,
            "voice_settings": {
                "stability": self._stability,
                "similarity_boost": self._similarity_boost,
            },
        }

        logger.info(f"Synthesizing {len(text)} characters with voice {self._voice_id}")
        try:
            response = self._session.post(url, json=body, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error(f"ElevenLabs request failed: {e}")
            raise NarrationSynthesisFailedError() from e

        raise_for_status(
            response,
            "ElevenLabs",
            error_cls=NarrationSynthesisFailedError,
            message="Failed to generate audio narration",
        )

        if not response.content:
            raise NarrationSynthesisFailedError("ElevenLabs returned no audio")

        return SpeechAudio(data=response.content, mime_type=self.MIME_TYPE)
