"""
Site request data models.

This module defines the request and response structures for the
site generation endpoints.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from .run import RunStatus


class SiteRequest(BaseModel):
    """Request model for the site generation endpoint."""

    topic: str = Field(..., max_length=200, description="Article topic / page title")
    redirect_url: Optional[str] = Field(None, max_length=2048, description="URL the generated page redirects to")

    @field_validator('topic')
    @classmethod
    def validate_topic(cls, v):
        """Strip the topic and reject blank ones."""
        v = v.strip()
        if not v:
            raise ValueError('topic must not be blank')
        return v

    @field_validator('redirect_url')
    @classmethod
    def validate_redirect_url(cls, v):
        """Only the scheme is checked; reachability is not."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        if not v.startswith(('http://', 'https://')):
            raise ValueError('redirect_url must start with http:// or https://')
        return v


class SiteResponse(BaseModel):
    """Response model for a submitted generation run."""

    task_id: str = Field(..., description="Generation task ID")
    status: RunStatus = Field(..., description="Current run status")
    topic: str = Field(..., description="Topic")
    redirect_url: str = Field(..., description="Redirect URL")
    created_at: datetime = Field(default_factory=datetime.utcnow, description="Submission timestamp")
