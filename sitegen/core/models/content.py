"""
Generated content data models.

This module defines the structured article record returned by the
content generator and the image records returned by the illustration
generator.
"""

import base64
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ContentSection(BaseModel):
    """One body section of the generated article."""

    model_config = ConfigDict(frozen=True)

    heading: str = Field(..., description="Section subheading")
    content: str = Field(..., description="Section paragraph text")


class GeneratedData(BaseModel):
    """Structured article produced by the content generator."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(..., description="Generator's optimised article title")
    introduction: str = Field(..., description="Introduction paragraph")
    sections: List[ContentSection] = Field(..., description="Body sections, in order")
    conclusion: str = Field(..., description="Conclusion paragraph")
    image_prompts: List[str] = Field(
        ...,
        alias="imagePrompts",
        description="English prompts for the illustration model, in order"
    )

    def to_dict(self) -> dict:
        """Wire form, using the generator's field names."""
        return self.model_dump(by_alias=True)


class GeneratedImage(BaseModel):
    """An encoded raster image returned as an inline data part."""

    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(default="image/png", description="Image MIME type")
    data: str = Field(..., min_length=1, description="Base64 encoded payload")

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    @property
    def content(self) -> bytes:
        """Decoded image bytes."""
        return base64.b64decode(self.data)

    @classmethod
    def from_bytes(cls, payload: bytes, mime_type: Optional[str] = None) -> 'GeneratedImage':
        return cls(
            mime_type=mime_type or "image/png",
            data=base64.b64encode(payload).decode("ascii")
        )


class IllustrationResult(BaseModel):
    """
    Outcome of one illustration request.

    An absent image is a normal result, not an exception: ``image`` is None
    and ``error`` optionally carries the reason.
    """

    position: int = Field(..., ge=1, description="1-based position of the prompt")
    prompt: str = Field(..., description="Prompt sent to the image model")
    image: Optional[GeneratedImage] = Field(None, description="Image, when one was returned")
    error: Optional[str] = Field(None, description="Failure reason, when the request failed")

    @property
    def is_absent(self) -> bool:
        return self.image is None
