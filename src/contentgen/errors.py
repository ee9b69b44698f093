"""Error taxonomy shared by the pipeline, the clients and the HTTP layer."""

from typing import Optional


class ContentGenerationError(Exception):
    """Base class for errors surfaced to callers.

    Each subclass carries the HTTP status the API layer responds with.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> dict:
        return {"error": self.message}


class InvalidInputError(ContentGenerationError):
    """Caller input was missing or malformed. No upstream call was made."""

    status_code = 400


class UpstreamRateLimitedError(ContentGenerationError):
    """A collaborator reported rate-limit exhaustion."""

    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded. Please try again later.") -> None:
        super().__init__(message)


class UpstreamQuotaExceededError(ContentGenerationError):
    """A collaborator reported a billing or quota condition."""

    status_code = 402

    def __init__(
        self, message: str = "Payment required. Please add credits to your workspace."
    ) -> None:
        super().__init__(message)


class NoImagesProducedError(ContentGenerationError):
    """Every per-scene image request failed."""

    def __init__(self, message: str = "Failed to generate any images") -> None:
        super().__init__(message)


class NarrationSynthesisFailedError(ContentGenerationError):
    """The speech service did not return audio."""

    def __init__(self, message: str = "Failed to generate audio narration") -> None:
        super().__init__(message)


class UnknownUpstreamError(ContentGenerationError):
    """Any other non-success collaborator response."""
