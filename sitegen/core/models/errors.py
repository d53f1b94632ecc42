"""
Error models and exception classes.

This module defines custom exception classes and error models
for the AI Site Generator.
"""

from datetime import datetime
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field


class SiteGeneratorError(Exception):
    """Base exception for the AI Site Generator."""

    def __init__(self, message: str, error_code: str = None, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(SiteGeneratorError):
    """Validation error."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value})


class LLMError(SiteGeneratorError):
    """LLM provider or transport error."""

    def __init__(self, message: str, provider: str = None, model: str = None, retryable: bool = True):
        self.provider = provider
        self.model = model
        self.retryable = retryable
        super().__init__(
            message,
            "LLM_ERROR",
            {"provider": provider, "model": model, "retryable": retryable}
        )


class GenerationError(SiteGeneratorError):
    """The content generator returned no text or text that is not the requested JSON."""

    def __init__(self, message: str, stage: str = "content", raw: str = None):
        self.stage = stage
        self.raw = raw
        super().__init__(
            message,
            "GENERATION_ERROR",
            {"stage": stage}
        )


class PackagingError(SiteGeneratorError):
    """Archive serialization error."""

    def __init__(self, message: str, archive_name: str = None):
        self.archive_name = archive_name
        super().__init__(
            message,
            "PACKAGING_ERROR",
            {"archive_name": archive_name}
        )


class RunStateError(SiteGeneratorError):
    """Illegal generation run transition."""

    def __init__(self, message: str, current: str = None, requested: str = None):
        self.current = current
        self.requested = requested
        super().__init__(
            message,
            "RUN_STATE_ERROR",
            {"current": current, "requested": requested}
        )


class TaskError(SiteGeneratorError):
    """Task processing error."""

    def __init__(self, message: str, task_id: str = None):
        self.task_id = task_id
        super().__init__(
            message,
            "TASK_ERROR",
            {"task_id": task_id}
        )


class ConfigurationError(SiteGeneratorError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str = None):
        self.config_key = config_key
        super().__init__(
            message,
            "CONFIGURATION_ERROR",
            {"config_key": config_key}
        )


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code")
    status: int = Field(..., description="HTTP status code")

    # Optional Details
    details: Optional[Dict[str, Any]] = Field(None, description="Error details")

    # Request Information
    request_id: Optional[str] = Field(None, description="Request ID")
    task_id: Optional[str] = Field(None, description="Task ID")

    # Timestamp
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")

    def to_json(self) -> Dict[str, Any]:
        """JSON-safe representation."""
        return self.model_dump(mode="json")


class ValidationErrorResponse(BaseModel):
    """Validation error response model."""

    error: str = Field(default="validation_error", description="Error type")
    message: str = Field(default="Validation failed", description="Error message")
    status: int = Field(default=400, description="HTTP status code")

    validation_errors: List[Dict[str, Any]] = Field(default_factory=list, description="Validation errors")

    # Timestamp
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")

    def to_json(self) -> Dict[str, Any]:
        """JSON-safe representation."""
        return self.model_dump(mode="json")

    def add_validation_error(self, field: str, message: str, value: Any = None):
        """Add a validation error."""
        error = {
            "field": field,
            "message": message
        }
        if value is not None:
            error["value"] = value

        self.validation_errors.append(error)
