"""
Generation run state record.

A GenerationRun holds everything one submission produces. The
orchestrator moves it through its states with the transition methods
below; the Celery task stores its dict form as task state so the API
can show partial progress.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field

from .content import GeneratedData, GeneratedImage, IllustrationResult
from .errors import RunStateError, ValidationError


class RunStatus(str, Enum):
    """Generation run states."""
    IDLE = "idle"
    GENERATING_CONTENT = "generating_content"
    GENERATING_IMAGES = "generating_images"
    DONE = "done"
    ERROR = "error"


class GenerationRun(BaseModel):
    """State of a single generation run."""

    topic: str = Field(..., description="User supplied topic")
    redirect_url: str = Field(..., description="Target of the generated page's redirect")
    status: RunStatus = Field(default=RunStatus.IDLE, description="Current run state")

    # Results
    content: Optional[GeneratedData] = Field(None, description="Generated article")
    images: List[GeneratedImage] = Field(default_factory=list, description="Images obtained so far")
    images_attempted: int = Field(default=0, ge=0, description="Image prompts attempted so far")
    images_total: int = Field(default=0, ge=0, description="Image prompts that will be attempted")

    # Progress
    progress_message: str = Field(default="", description="Human readable progress")
    error: Optional[str] = Field(None, description="Error message if the run failed")

    # Timestamps
    started_at: Optional[datetime] = Field(None, description="Start timestamp")
    completed_at: Optional[datetime] = Field(None, description="Completion timestamp")

    @property
    def is_finished(self) -> bool:
        return self.status in (RunStatus.DONE, RunStatus.ERROR)

    def begin(self):
        """idle -> generating_content."""
        self._require(RunStatus.IDLE, RunStatus.GENERATING_CONTENT)

        if not self.topic or not self.topic.strip():
            raise ValidationError("Topic must not be blank", field="topic", value=self.topic)

        self.content = None
        self.images = []
        self.images_attempted = 0
        self.images_total = 0
        self.error = None
        self.status = RunStatus.GENERATING_CONTENT
        self.progress_message = "Generating article content..."
        self.started_at = datetime.utcnow()

    def content_ready(self, content: GeneratedData, images_total: int):
        """generating_content -> generating_images."""
        self._require(RunStatus.GENERATING_CONTENT, RunStatus.GENERATING_IMAGES)

        self.content = content
        self.images_total = images_total
        self.status = RunStatus.GENERATING_IMAGES
        self.progress_message = "Article content ready"

    def image_started(self, position: int):
        self._require(RunStatus.GENERATING_IMAGES, RunStatus.GENERATING_IMAGES)
        self.progress_message = f"Generating image {position}/{self.images_total}..."

    def record_image(self, result: IllustrationResult):
        """Record one image attempt; absent results only count as attempted."""
        self._require(RunStatus.GENERATING_IMAGES, RunStatus.GENERATING_IMAGES)

        self.images_attempted += 1
        if not result.is_absent:
            self.images.append(result.image)

    def finish(self):
        """generating_images -> done."""
        self._require(RunStatus.GENERATING_IMAGES, RunStatus.DONE)

        self.status = RunStatus.DONE
        self.progress_message = ""
        self.completed_at = datetime.utcnow()

    def fail(self, message: str):
        """generating_content -> error."""
        self._require(RunStatus.GENERATING_CONTENT, RunStatus.ERROR)

        self.status = RunStatus.ERROR
        self.error = message
        self.progress_message = ""
        self.completed_at = datetime.utcnow()

    def _require(self, expected: RunStatus, requested: RunStatus):
        if self.status != expected:
            raise RunStateError(
                f"Cannot move run from {self.status.value} to {requested.value}",
                current=self.status.value,
                requested=requested.value
            )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe form stored as task state."""
        return self.model_dump(mode="json", by_alias=True)

    def to_payload(self) -> Dict[str, Any]:
        """Form returned to API clients; images become data URIs for previewing."""
        payload = self.model_dump(mode="json", by_alias=True, exclude={"images"})
        payload["images"] = [image.data_uri for image in self.images]
        return payload
