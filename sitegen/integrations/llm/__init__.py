"""
LLM integration module.

This module provides the LiteLLM client and the article content
generator built on it.
"""

from .litellm_client import LiteLLMClient
from .content_generator import ContentGenerator

__all__ = [
    'LiteLLMClient',
    'ContentGenerator'
]
