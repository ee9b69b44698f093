"""Scene data models."""

from typing import Optional
from pydantic import BaseModel, Field


class ScenePlan(BaseModel):
    """One planned scene: narration text plus the prompt for its still image."""

    narration: str = Field(..., description="Text spoken over this scene", min_length=1)
    image_prompt: str = Field(
        ...,
        alias="imagePrompt",
        description="Visual description for AI image generation",
        min_length=1
    )

    class Config:
        """Pydantic config."""
        populate_by_name = True


class RenderedScene(BaseModel):
    """A planned scene after its image request has settled."""

    narration: str = Field(..., description="Text spoken over this scene")
    image_url: Optional[str] = Field(
        None,
        alias="imageUrl",
        description="Image locator (URL or data URL); None when generation failed"
    )
    duration: float = Field(default=0.0, description="Display duration in milliseconds", ge=0)

    class Config:
        """Pydantic config."""
        populate_by_name = True
        frozen = False
