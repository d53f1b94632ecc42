"""
LiteLLM client implementation.

This module provides the core LiteLLM integration for interacting
with the content generation model through a unified interface.
"""

import logging
import time
from datetime import datetime
from typing import Optional

import litellm
from litellm import acompletion
from litellm.exceptions import (
    AuthenticationError,
    RateLimitError,
    APIError,
    Timeout,
    ServiceUnavailableError
)

from ...core.models.llm import LLMConfig, LLMResponse
from ...core.models.errors import LLMError


logger = logging.getLogger(__name__)


class LiteLLMClient:
    """
    LiteLLM client for unified LLM provider access.

    Every failure is re-raised as LLMError; there is no retry here.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: int = 120
    ):
        """
        Initialize LiteLLM client.

        Args:
            api_key: API key for LLM provider
            base_url: Base URL for LLM API
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

        litellm.drop_params = True

        logger.info(f"LiteLLMClient initialized with timeout: {timeout}s")

    async def generate(self, config: LLMConfig) -> LLMResponse:
        """
        Generate text using LiteLLM.

        Args:
            config: LLM configuration

        Returns:
            LLMResponse with generated content

        Raises:
            LLMError: If the request fails
        """
        messages = []

        if config.system_prompt:
            messages.append({
                "role": "system",
                "content": config.system_prompt
            })

        messages.append({
            "role": "user",
            "content": config.user_prompt
        })

        params = {
            "model": config.model,
            "messages": messages,
            "temperature": config.temperature,
            "timeout": self.timeout
        }

        if config.max_tokens:
            params["max_tokens"] = config.max_tokens

        if config.response_format:
            params["response_format"] = config.response_format

        api_key = config.api_key or self.api_key
        if api_key:
            params["api_key"] = api_key

        base_url = config.base_url or self.base_url
        if base_url:
            params["api_base"] = base_url

        try:
            start_time = time.time()

            response = await acompletion(**params)

            response_time = time.time() - start_time

        except AuthenticationError as e:
            logger.error(f"Authentication error: {str(e)}")
            raise LLMError(
                message=f"Authentication failed: {str(e)}",
                provider=config.provider,
                model=config.model,
                retryable=False
            )

        except RateLimitError as e:
            logger.error(f"Rate limit error: {str(e)}")
            raise LLMError(
                message=f"Rate limit exceeded: {str(e)}",
                provider=config.provider,
                model=config.model
            )

        except Timeout as e:
            logger.error(f"Timeout error: {str(e)}")
            raise LLMError(
                message=f"Request timeout: {str(e)}",
                provider=config.provider,
                model=config.model
            )

        except ServiceUnavailableError as e:
            logger.error(f"Service unavailable: {str(e)}")
            raise LLMError(
                message=f"Service unavailable: {str(e)}",
                provider=config.provider,
                model=config.model
            )

        except APIError as e:
            logger.error(f"API error: {str(e)}")
            raise LLMError(
                message=f"API error: {str(e)}",
                provider=config.provider,
                model=config.model
            )

        except Exception as e:
            logger.error(f"Unexpected error: {str(e)}")
            raise LLMError(
                message=f"Unexpected error: {str(e)}",
                provider=config.provider,
                model=config.model
            )

        choice = response.choices[0]
        usage = getattr(response, "usage", None)

        return LLMResponse(
            content=choice.message.content,
            finish_reason=choice.finish_reason,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
            model=config.model,
            request_id=config.request_id,
            response_time=response_time,
            created_at=datetime.utcnow()
        )
