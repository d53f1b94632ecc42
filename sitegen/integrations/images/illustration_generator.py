"""
Illustration generator adapter.

Requests one image per prompt from the Gemini image model and returns
the first inline-data part of the reply. Failures never propagate:
they come back as an absent IllustrationResult.
"""

import logging
from typing import Optional

from google import genai
from google.genai import types

from ...core.models.content import GeneratedImage, IllustrationResult


logger = logging.getLogger(__name__)


class IllustrationGenerator:
    """Illustration generator backed by the google-genai SDK."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-2.5-flash-image",
        client: Optional[genai.Client] = None
    ):
        """
        Initialize illustration generator.

        Args:
            api_key: Gemini API key
            model: Image model name
            client: Preconfigured client, used instead of api_key
        """
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

        logger.info(f"IllustrationGenerator initialized with model: {model}")

    async def generate(self, prompt: str, position: int = 1) -> IllustrationResult:
        """
        Generate one illustration.

        Args:
            prompt: Image prompt
            position: 1-based position of the prompt in the article

        Returns:
            IllustrationResult, absent when no image could be obtained
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_modalities=["IMAGE", "TEXT"],
                ),
            )
        except Exception as e:
            logger.warning(f"Image {position} generation failed: {str(e)}")
            return IllustrationResult(position=position, prompt=prompt, error=str(e))

        image = extract_inline_image(response)
        if image is None:
            logger.warning(f"Image {position}: model returned no inline image")
            return IllustrationResult(position=position, prompt=prompt, error="No image in response")

        logger.info(f"Image {position} received ({image.mime_type})")
        return IllustrationResult(position=position, prompt=prompt, image=image)


def extract_inline_image(response) -> Optional[GeneratedImage]:
    """First inline-data part of the first candidate, if any."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline_data = getattr(part, "inline_data", None)
        if inline_data and inline_data.data:
            data = inline_data.data
            if isinstance(data, str):
                return GeneratedImage(mime_type=inline_data.mime_type or "image/png", data=data)
            return GeneratedImage.from_bytes(data, mime_type=inline_data.mime_type)

    return None
