"""
Content generator adapter.

Sends one structured request for the article and parses the reply
into a GeneratedData record.
"""

import json
import logging
import re
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from ...core.models.content import GeneratedData
from ...core.models.errors import GenerationError
from ...core.models.llm import LLMConfig
from .litellm_client import LiteLLMClient
from .prompts import SYSTEM_PROMPT, build_content_prompt, build_content_schema


logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class ContentGenerator:
    """
    Article content generator.

    Failures are not retried: LLMError from the client and GenerationError
    for empty or malformed replies both propagate to the caller.
    """

    def __init__(
        self,
        llm_client: LiteLLMClient,
        model: str = "gemini/gemini-2.5-flash",
        language: str = "Simplified Chinese (简体中文)",
        temperature: float = 0.7,
        section_count: int = 3,
        prompt_count: int = 3,
        strict_cardinality: bool = True
    ):
        """
        Initialize content generator.

        Args:
            llm_client: Client used for the request
            model: LiteLLM model string
            language: Natural language the article is written in
            temperature: Sampling temperature
            section_count: Number of body sections requested
            prompt_count: Number of image prompts requested
            strict_cardinality: Reject replies whose section or prompt
                count differs from the requested counts
        """
        self.llm_client = llm_client
        self.model = model
        self.language = language
        self.temperature = temperature
        self.section_count = section_count
        self.prompt_count = prompt_count
        self.strict_cardinality = strict_cardinality

    async def generate(self, topic: str) -> GeneratedData:
        """
        Generate the article for a topic.

        Raises:
            GenerationError: If the reply is empty or not the requested JSON
            LLMError: If the request itself fails
        """
        config = LLMConfig(
            model=self.model,
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_content_prompt(topic, language=self.language),
            temperature=self.temperature,
            response_format={
                "type": "json_object",
                "response_schema": build_content_schema(
                    section_count=self.section_count,
                    prompt_count=self.prompt_count,
                    language=self.language
                )
            }
        )

        logger.info(f"Requesting article content for topic: {topic!r} ({self.model})")
        response = await self.llm_client.generate(config)

        if not response.content or not response.content.strip():
            raise GenerationError("The content model returned no text.")

        content = self.parse(response.content)
        logger.info(
            f"Article content received: {len(content.sections)} sections, "
            f"{len(content.image_prompts)} image prompts in {response.response_time:.1f}s"
        )
        return content

    def parse(self, text: str) -> GeneratedData:
        """Parse the model's JSON reply."""
        payload = _strip_fence(text.strip())

        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            logger.error(f"Content reply is not valid JSON: {e}")
            raise GenerationError(f"The content model returned malformed JSON: {e}", raw=text)

        if not isinstance(data, dict):
            raise GenerationError("The content model returned JSON that is not an object.", raw=text)

        try:
            content = GeneratedData.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Content reply does not match the schema: {e}")
            raise GenerationError(
                f"The content model returned JSON that does not match the article schema: "
                f"{e.error_count()} error(s)",
                raw=text
            )

        if self.strict_cardinality:
            self._check_cardinality(content, text)

        return content

    def _check_cardinality(self, content: GeneratedData, raw: Optional[str]):
        if len(content.sections) != self.section_count:
            raise GenerationError(
                f"Expected {self.section_count} sections, got {len(content.sections)}",
                raw=raw
            )
        if len(content.image_prompts) != self.prompt_count:
            raise GenerationError(
                f"Expected {self.prompt_count} image prompts, got {len(content.image_prompts)}",
                raw=raw
            )


def _strip_fence(text: str) -> str:
    match = _FENCE_RE.match(text)
    return match.group(1) if match else text
