"""Video pipeline result model."""

from typing import List
from pydantic import BaseModel, Field, field_validator

from .scene import RenderedScene


class VideoResult(BaseModel):
    """Client-playable slideshow: ordered scenes, one narration track, a duration schedule."""

    scenes: List[RenderedScene] = Field(..., description="Scenes in plan order", min_length=1)
    audio_base64: str = Field(..., alias="audioBase64", description="Base64-encoded narration audio")
    audio_type: str = Field(..., alias="audioType", description="MIME type of the narration audio")
    total_duration: float = Field(
        ..., alias="totalDuration", description="Estimated playback duration in milliseconds", ge=0
    )

    class Config:
        """Pydantic config."""
        populate_by_name = True

    @field_validator("scenes")
    @classmethod
    def _scenes_have_images(cls, scenes: List[RenderedScene]) -> List[RenderedScene]:
        for index, scene in enumerate(scenes):
            if not scene.image_url:
                raise ValueError(f"scene {index} has no image")
        return scenes

    def to_payload(self) -> dict:
        """Return the JSON body sent to clients."""
        payload = {"success": True}
        payload.update(self.model_dump(by_alias=True))
        return payload
