"""Single-shot content request and response models."""

from enum import Enum
from pydantic import BaseModel, Field


class ContentType(str, Enum):
    """Kinds of single-shot content."""
    TEXT = "text"
    IMAGE = "image"
    CODE = "code"


class TextParams(BaseModel):
    """Marketing copy request."""

    topic: str = Field(..., min_length=1)
    tone: str = Field(..., min_length=1)
    audience: str = Field(..., min_length=1)
    goal: str = Field(..., min_length=1)


class ImageParams(BaseModel):
    """Single image request."""

    subject: str = Field(..., min_length=1)
    style: str = Field(..., min_length=1)
    lighting: str = Field(..., min_length=1)
    composition: str = Field(..., min_length=1)


class CodeParams(BaseModel):
    """Code snippet request."""

    task: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    context: str = Field(default="", description="Optional surrounding context")


class ContentResult(BaseModel):
    """Generated artifact returned to the caller."""

    content: str
    is_image: bool = Field(default=False, alias="isImage")

    class Config:
        """Pydantic config."""
        populate_by_name = True

    def to_payload(self) -> dict:
        if self.is_image:
            return {"content": self.content, "isImage": True}
        return {"content": self.content}
