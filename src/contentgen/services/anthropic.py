"""Anthropic Claude API client wrapper."""

import logging
from typing import Optional

from anthropic import Anthropic, APIError, APIStatusError, RateLimitError

from ..config import config
from ..errors import UnknownUpstreamError, UpstreamQuotaExceededError, UpstreamRateLimitedError

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Text generator backed by the Claude Messages API.

    Failures are surfaced immediately; the SDK's own retries are disabled.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        max_tokens: int = 4096,
    ) -> None:
        """Initialize the Anthropic client.

        Args:
            api_key: Anthropic API key. Defaults to ANTHROPIC_API_KEY env var.
            model: Model to use. Defaults to config.anthropic_model.
            timeout: Request timeout in seconds. Defaults to config.request_timeout.
            max_tokens: Maximum tokens in each response.
        """
        self._api_key = api_key or config.anthropic_api_key
        if not self._api_key:
            raise ValueError(
                "Anthropic API key not provided. Set ANTHROPIC_API_KEY env var."
            )

        self._client = Anthropic(
            api_key=self._api_key,
            timeout=timeout or config.request_timeout,
            max_retries=0,
        )
        self._model = model or config.anthropic_model
        self._max_tokens = max_tokens

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._model

    def generate_text(
        self, system: str, prompt: str, temperature: Optional[float] = None
    ) -> str:
        """Create a message using Claude.

        Args:
            system: System prompt.
            prompt: The user prompt to send.
            temperature: Sampling temperature (0.0-1.0). SDK default when None.

        Returns:
            The text content of Claude's response.

        Raises:
            UpstreamRateLimitedError: If Claude rate limits the request.
            UpstreamQuotaExceededError: If the account is out of credit.
            UnknownUpstreamError: On any other API failure.
        """
        kwargs = {
            "model": self._model,
            "max_tokens": self._max_tokens,
            "system": system,
            "messages": [{"role": "user", "content": prompt}],
        }
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            response = self._client.messages.create(**kwargs)
        except RateLimitError as e:
            logger.warning(f"Rate limited by Claude: {e}")
            raise UpstreamRateLimitedError() from e
        except APIStatusError as e:
            if e.status_code == 402:
                raise UpstreamQuotaExceededError() from e
            logger.error(f"Claude API error {e.status_code}: {e}")
            raise UnknownUpstreamError("Claude API error") from e
        except APIError as e:
            logger.error(f"Claude API error: {e}")
            raise UnknownUpstreamError("Claude API error") from e

        # Extract text content from response
        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
