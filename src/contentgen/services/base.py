"""Capability protocols and shared HTTP error mapping for collaborator clients."""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Type

import requests

from ..errors import (
    ContentGenerationError,
    UnknownUpstreamError,
    UpstreamQuotaExceededError,
    UpstreamRateLimitedError,
)

logger = logging.getLogger(__name__)


@dataclass
class SpeechAudio:
    """Raw audio returned by a speech synthesizer."""

    data: bytes
    mime_type: str = "audio/mpeg"


class TextGenerator(Protocol):
    """Turns a system instruction plus user content into generated text."""

    def generate_text(
        self, system: str, prompt: str, temperature: Optional[float] = None
    ) -> str:
        ...


class ImageGenerator(Protocol):
    """Turns a prompt into an image locator (URL or data URL)."""

    def generate_image(self, prompt: str) -> str:
        ...


class SpeechSynthesizer(Protocol):
    """Renders text as speech audio."""

    def synthesize(self, text: str) -> SpeechAudio:
        ...


def raise_for_status(
    response: requests.Response,
    service: str,
    error_cls: Type[ContentGenerationError] = UnknownUpstreamError,
    message: Optional[str] = None,
) -> None:
    """Map a non-2xx collaborator response onto the error taxonomy.

    Args:
        response: Response returned by the collaborator.
        service: Human-readable service name for logs and messages.
        error_cls: Error raised for statuses other than 429 and 402.
        message: Message for ``error_cls``. Defaults to "<service> error".

    Raises:
        UpstreamRateLimitedError: On HTTP 429.
        UpstreamQuotaExceededError: On HTTP 402.
        ContentGenerationError: ``error_cls`` on any other non-2xx status.
    """
    if response.ok:
        return

    if response.status_code == 429:
        logger.warning(f"{service} rate limited the request")
        raise UpstreamRateLimitedError()
    if response.status_code == 402:
        logger.warning(f"{service} reported payment required")
        raise UpstreamQuotaExceededError()

    logger.error(f"{service} error {response.status_code}: {response.text[:500]}")
    raise error_cls(message or f"{service} error")
