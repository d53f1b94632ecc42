"""
Tests for the Celery generation task.
"""

from dataclasses import replace
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from sitegen.core.models.content import IllustrationResult
from sitegen.core.models.errors import ConfigurationError, GenerationError, TaskError
from sitegen.core.models.run import GenerationRun, RunStatus
from sitegen.core.pipeline.orchestrator import GenerationOrchestrator
from sitegen.tasks import generation
from sitegen.utils.config import get_config


class StaticContentGenerator:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error

    async def generate(self, topic):
        if self.error is not None:
            raise self.error
        return self.content


class StaticIllustrationGenerator:
    def __init__(self, image):
        self.image = image

    async def generate(self, prompt, position=1):
        return IllustrationResult(position=position, prompt=prompt, image=self.image)


async def no_sleep(seconds):
    return None


def fake_builder(content_generator, illustration_generator, published):
    def build(config, on_update=None):
        def record(run):
            published.append(run.status)
            on_update(run)

        return GenerationOrchestrator(
            content_generator,
            illustration_generator,
            image_delay=0,
            sleep=no_sleep,
            on_update=record
        )
    return build


def test_build_orchestrator_requires_api_key():
    with pytest.raises(ConfigurationError) as exc_info:
        generation.build_orchestrator(replace(get_config('testing'), GEMINI_API_KEY=None))

    assert exc_info.value.config_key == "GEMINI_API_KEY"


def test_build_orchestrator_uses_config():
    config = replace(
        get_config('testing'),
        MAX_IMAGES=2,
        IMAGE_REQUEST_DELAY=1.5,
        SECTION_COUNT=4,
        PROMPT_COUNT=5,
        IMAGE_MODEL="img-model"
    )

    orchestrator = generation.build_orchestrator(config)

    assert orchestrator.max_images == 2
    assert orchestrator.image_delay == 1.5
    assert orchestrator.content_generator.section_count == 4
    assert orchestrator.content_generator.prompt_count == 5
    assert orchestrator.content_generator.model == config.CONTENT_MODEL
    assert orchestrator.illustration_generator.model == "img-model"


def test_task_returns_finished_run(content, png_image):
    published = []
    builder = fake_builder(StaticContentGenerator(content=content), StaticIllustrationGenerator(png_image), published)

    with patch.object(generation, "build_orchestrator", side_effect=builder):
        result = generation.generate_site_task.apply(args=("AI Trends", "https://example.com/x"))

    assert result.successful()
    run = GenerationRun.model_validate(result.result)
    assert run.status == RunStatus.DONE
    assert len(run.images) == 3
    assert published[0] == RunStatus.GENERATING_CONTENT
    assert published[-1] == RunStatus.DONE


def test_task_content_failure_is_a_finished_run(content, png_image):
    error = GenerationError("The content model returned no text.")
    builder = fake_builder(StaticContentGenerator(error=error), StaticIllustrationGenerator(png_image), [])

    with patch.object(generation, "build_orchestrator", side_effect=builder):
        result = generation.generate_site_task.apply(args=("AI Trends", "https://example.com/x"))

    assert result.successful()
    assert result.result["status"] == "error"
    assert result.result["error"] == "The content model returned no text."


def test_task_unexpected_failure_raises_task_error():
    with patch.object(generation, "build_orchestrator", side_effect=RuntimeError("boom")):
        result = generation.generate_site_task.apply(args=("AI Trends", "https://example.com/x"))

    assert result.failed()
    assert isinstance(result.result, TaskError)
    assert "boom" in str(result.result)


def test_get_task_status_with_run(content):
    run = GenerationRun(topic="AI Trends", redirect_url="https://example.com/x")
    run.begin()
    run.content_ready(content, images_total=3)

    fake_result = SimpleNamespace(state="PROGRESS", info=run.to_dict())
    with patch.object(generation.celery_app, "AsyncResult", return_value=fake_result):
        status = generation.get_task_status("abc")

    assert status["state"] == "PROGRESS"
    assert status["run"].status == RunStatus.GENERATING_IMAGES
    assert status["run"].content == content
    assert status["error"] is None


def test_get_task_status_pending_and_failure():
    with patch.object(generation.celery_app, "AsyncResult", return_value=SimpleNamespace(state="PENDING", info=None)):
        pending = generation.get_task_status("abc")

    with patch.object(
        generation.celery_app,
        "AsyncResult",
        return_value=SimpleNamespace(state="FAILURE", info=TaskError("Generation task failed: boom"))
    ):
        failed = generation.get_task_status("abc")

    assert pending["run"] is None and pending["error"] is None
    assert failed["run"] is None
    assert failed["error"] == "Generation task failed: boom"
