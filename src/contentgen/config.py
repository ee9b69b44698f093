"""Configuration management."""

import os

from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


class Config(BaseModel):
    """Application configuration."""

    # AI gateway (OpenAI-compatible chat completions)
    gateway_api_key: str = Field(
        default_factory=lambda: os.getenv("AI_GATEWAY_API_KEY", ""),
        description="AI gateway API key"
    )
    gateway_url: str = Field(
        default_factory=lambda: os.getenv(
            "AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions"
        ),
        description="AI gateway chat completions endpoint"
    )
    text_model: str = Field(
        default_factory=lambda: os.getenv("CONTENTGEN_TEXT_MODEL", "google/gemini-2.5-flash"),
        description="Gateway model used for text generation"
    )
    image_model: str = Field(
        default_factory=lambda: os.getenv(
            "CONTENTGEN_IMAGE_MODEL", "google/gemini-2.5-flash-image-preview"
        ),
        description="Gateway model used for image generation"
    )
    text_provider: str = Field(
        default_factory=lambda: os.getenv("CONTENTGEN_TEXT_PROVIDER", "gateway"),
        description="Text generation backend: 'gateway' or 'anthropic'"
    )

    # Anthropic
    anthropic_api_key: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""),
        description="Anthropic API key"
    )
    anthropic_model: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514"),
        description="Claude model used when text_provider is 'anthropic'"
    )

    # ElevenLabs speech
    elevenlabs_api_key: str = Field(
        default_factory=lambda: os.getenv("ELEVENLABS_API_KEY", ""),
        description="ElevenLabs API key"
    )
    elevenlabs_voice_id: str = Field(
        default_factory=lambda: os.getenv("ELEVENLABS_VOICE_ID", "EXAVITQu4vr4xnSDxMaL"),
        description="ElevenLabs voice identifier"
    )
    elevenlabs_model: str = Field(
        default_factory=lambda: os.getenv("ELEVENLABS_MODEL", "eleven_multilingual_v2"),
        description="ElevenLabs speech model"
    )
    voice_stability: float = Field(default=0.5, ge=0, le=1)
    voice_similarity_boost: float = Field(default=0.75, ge=0, le=1)

    # Pipeline settings
    words_per_minute: float = Field(
        default_factory=lambda: _env_float("CONTENTGEN_WORDS_PER_MINUTE", 150.0),
        description="Assumed narration speaking rate; governs client playback pacing",
        gt=0
    )
    request_timeout: float = Field(
        default_factory=lambda: _env_float("CONTENTGEN_REQUEST_TIMEOUT", 120.0),
        description="Per-call timeout for collaborator requests in seconds",
        gt=0
    )
    max_concurrent_images: int = Field(
        default_factory=lambda: _env_int("CONTENTGEN_MAX_CONCURRENT_IMAGES", 8),
        description="Upper bound on concurrent scene image requests",
        ge=1
    )

    # HTTP API
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv("CONTENTGEN_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ],
        description="Allowed CORS origins"
    )

    def validate_gateway_required(self) -> None:
        """Validate that the AI gateway key is set."""
        if not self.gateway_api_key:
            raise ValueError("AI_GATEWAY_API_KEY is not configured")

    def validate_video_required(self) -> None:
        """Validate that every credential the video pipeline needs is set.

        Raises:
            ValueError: If any required configuration is missing.
        """
        missing: list[str] = []

        if not self.gateway_api_key:
            missing.append("AI_GATEWAY_API_KEY")
        if not self.elevenlabs_api_key:
            missing.append("ELEVENLABS_API_KEY")
        if self.text_provider == "anthropic" and not self.anthropic_api_key:
            missing.append("ANTHROPIC_API_KEY")

        if missing:
            raise ValueError(
                f"Missing required configuration: {', '.join(missing)}. "
                "Set the corresponding environment variables."
            )

        if self.text_provider not in ("gateway", "anthropic"):
            raise ValueError(
                f"CONTENTGEN_TEXT_PROVIDER must be 'gateway' or 'anthropic'. "
                f"Got: {self.text_provider}"
            )


# Global config instance
config = Config()
