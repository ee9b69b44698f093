"""AI gateway client (OpenAI-compatible chat completions) for text and images."""

import logging
from typing import Any, Optional

import requests

from ..config import config
from ..errors import UnknownUpstreamError
from .base import raise_for_status

logger = logging.getLogger(__name__)


class GatewayClient:
    """Client wrapper for the AI gateway.

    One chat-completions endpoint serves both text generation and image
    generation; images are requested with ``modalities=["image", "text"]``
    and come back as ``message.images[].image_url.url``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        text_model: Optional[str] = None,
        image_model: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the gateway client.

        Args:
            api_key: Gateway API key. Defaults to AI_GATEWAY_API_KEY env var.
            url: Chat completions endpoint. Defaults to config.gateway_url.
            text_model: Model used for text. Defaults to config.text_model.
            image_model: Model used for images. Defaults to config.image_model.
            timeout: Per-request timeout in seconds. Defaults to config.request_timeout.
            session: Shared HTTP session. Created if not provided.
        """
        self._api_key = api_key or config.gateway_api_key
        if not self._api_key:
            raise ValueError("AI_GATEWAY_API_KEY is not configured")

        self._url = url or config.gateway_url
        self._text_model = text_model or config.text_model
        self._image_model = image_model or config.image_model
        self._timeout = timeout or config.request_timeout
        self._session = session or requests.Session()

    @property
    def text_model(self) -> str:
        return self._text_model

    @property
    def image_model(self) -> str:
        return self._image_model

    def chat_completion(self, model: str, messages: list[dict], **extra: Any) -> dict:
        """Send one chat-completions request and return the decoded body.

        Raises:
            UpstreamRateLimitedError: On HTTP 429.
            UpstreamQuotaExceededError: On HTTP 402.
            UnknownUpstreamError: On any other failure.
        """
        body: dict[str, Any] = {"model": model, "messages": messages}
        body.update({key: value for key, value in extra.items() if value is not None})

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = self._session.post(
                self._url, json=body, headers=headers, timeout=self._timeout
            )
        except requests.RequestException as e:
            logger.error(f"AI gateway request failed: {e}")
            raise UnknownUpstreamError("AI gateway error") from e

        raise_for_status(response, "AI gateway")

        try:
            return response.json()
        except ValueError as e:
            raise UnknownUpstreamError("AI gateway returned invalid JSON") from e

    def generate_text(
        self, system: str, prompt: str, temperature: Optional[float] = None
    ) -> str:
        """Generate text from a system instruction and user prompt.

        Returns:
            The message content, or an empty string when the response carries none.

        Raises:
            UnknownUpstreamError: If the response envelope has an unexpected shape.
        """
        data = self.chat_completion(
            self._text_model,
            [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=temperature,
        )
        if not isinstance(data, dict):
            raise UnknownUpstreamError("AI gateway returned an unexpected response")

        choices = data.get("choices") or [{}]
        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise UnknownUpstreamError("AI gateway returned an unexpected response")

        message = choices[0].get("message") or {}
        if not isinstance(message, dict):
            raise UnknownUpstreamError("AI gateway returned an unexpected response")

        content = message.get("content")
        return content if isinstance(content, str) else ""

    def generate_image(self, prompt: str) -> str:
        """Generate one image and return its locator.

        Raises:
            UnknownUpstreamError: If the response contains no image.
        """
        logger.debug(f"Requesting image: {prompt[:50]}")
        data = self.chat_completion(
            self._image_model,
            [{"role": "user", "content": prompt}],
            modalities=["image", "text"],
        )

        try:
            url = data["choices"][0]["message"]["images"][0]["image_url"]["url"]
        except (KeyError, IndexError, TypeError):
            url = None

        if not isinstance(url, str) or not url:
            raise UnknownUpstreamError("No image generated")
        return url
