"""
LLM-related data models and schemas.

This module defines the data structures for LLM configuration,
requests, and responses.
"""

from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class LLMConfig(BaseModel):
    """LLM configuration for a single request."""

    model: str = Field(..., description="LiteLLM model string, e.g. 'gemini/gemini-2.5-flash'")
    api_key: Optional[str] = Field(None, description="API key")
    base_url: Optional[str] = Field(None, description="Base URL for API")

    system_prompt: Optional[str] = Field(None, description="System prompt")
    user_prompt: str = Field(..., description="User prompt")

    # Request Parameters
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Temperature")
    max_tokens: Optional[int] = Field(None, ge=1, le=100000, description="Maximum tokens")
    response_format: Optional[Dict[str, Any]] = Field(None, description="Structured output constraints")

    # Metadata
    request_id: Optional[str] = Field(None, description="Request ID for tracking")

    @property
    def provider(self) -> str:
        return self.model.split("/", 1)[0] if "/" in self.model else "unknown"


class LLMResponse(BaseModel):
    """LLM response model."""

    # Content
    content: Optional[str] = Field(None, description="Generated content")
    finish_reason: Optional[str] = Field(None, description="Reason for completion")

    # Usage Statistics
    prompt_tokens: int = Field(default=0, ge=0, description="Prompt tokens used")
    completion_tokens: int = Field(default=0, ge=0, description="Completion tokens used")
    total_tokens: int = Field(default=0, ge=0, description="Total tokens used")

    # Model Information
    model: str = Field(..., description="Model used")

    # Request Information
    request_id: Optional[str] = Field(None, description="Request ID")
    response_time: float = Field(default=0.0, ge=0.0, description="Response time in seconds")

    # Metadata
    created_at: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")
