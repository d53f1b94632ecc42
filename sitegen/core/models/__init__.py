"""
Data models and schemas for the AI Site Generator.

This module contains all the data models, validation schemas, and
type definitions used throughout the system.
"""

from .content import (
    ContentSection,
    GeneratedData,
    GeneratedImage,
    IllustrationResult
)

from .run import (
    GenerationRun,
    RunStatus
)

from .site import (
    SiteRequest,
    SiteResponse
)

from .llm import (
    LLMConfig,
    LLMResponse
)

from .errors import (
    SiteGeneratorError,
    ValidationError,
    LLMError,
    GenerationError,
    PackagingError,
    RunStateError,
    TaskError,
    ConfigurationError
)

__all__ = [
    # Content models
    'ContentSection',
    'GeneratedData',
    'GeneratedImage',
    'IllustrationResult',

    # Run models
    'GenerationRun',
    'RunStatus',

    # Site models
    'SiteRequest',
    'SiteResponse',

    # LLM models
    'LLMConfig',
    'LLMResponse',

    # Error models
    'SiteGeneratorError',
    'ValidationError',
    'LLMError',
    'GenerationError',
    'PackagingError',
    'RunStateError',
    'TaskError',
    'ConfigurationError'
]
