"""
Tests for the content and run models.
"""

import pytest

from sitegen.core.models.content import GeneratedData, GeneratedImage, IllustrationResult
from sitegen.core.models.errors import RunStateError, ValidationError
from sitegen.core.models.run import GenerationRun, RunStatus


def test_generated_data_uses_wire_field_names(content_payload):
    content = GeneratedData.model_validate(content_payload)

    assert len(content.sections) == 3
    assert content.image_prompts == content_payload["imagePrompts"]
    assert content.to_dict()["imagePrompts"] == content_payload["imagePrompts"]


def test_generated_data_requires_all_fields(content_payload):
    del content_payload["conclusion"]

    with pytest.raises(Exception):
        GeneratedData.model_validate(content_payload)


def test_generated_image_data_uri(png_image):
    assert png_image.data_uri == f"data:image/png;base64,{png_image.data}"
    assert png_image.content.startswith(b"\x89PNG")


def test_generated_image_from_bytes_keeps_mime_type():
    image = GeneratedImage.from_bytes(b"\xff\xd8\xff", mime_type="image/jpeg")

    assert image.data_uri == "data:image/jpeg;base64,/9j/"
    assert image.content == b"\xff\xd8\xff"


def test_illustration_result_absent():
    result = IllustrationResult(position=2, prompt="a cat", error="quota")

    assert result.is_absent
    assert result.error == "quota"


def test_run_happy_path(content, png_image):
    run = GenerationRun(topic="AI Trends", redirect_url="https://example.com/x")
    assert run.status == RunStatus.IDLE

    run.begin()
    assert run.status == RunStatus.GENERATING_CONTENT
    assert run.progress_message == "Generating article content..."

    run.content_ready(content, images_total=3)
    assert run.status == RunStatus.GENERATING_IMAGES

    run.image_started(1)
    assert run.progress_message == "Generating image 1/3..."

    run.record_image(IllustrationResult(position=1, prompt="a", image=png_image))
    run.record_image(IllustrationResult(position=2, prompt="b", error="boom"))
    run.record_image(IllustrationResult(position=3, prompt="c", image=png_image))

    assert run.images_attempted == 3
    assert len(run.images) == 2

    run.finish()
    assert run.status == RunStatus.DONE
    assert run.is_finished
    assert run.completed_at is not None


def test_run_fail_keeps_message():
    run = GenerationRun(topic="AI Trends", redirect_url="https://example.com/x")
    run.begin()
    run.fail("The content model returned no text.")

    assert run.status == RunStatus.ERROR
    assert run.error == "The content model returned no text."
    assert run.content is None


def test_run_rejects_blank_topic():
    run = GenerationRun(topic="   ", redirect_url="https://example.com/x")

    with pytest.raises(ValidationError):
        run.begin()

    assert run.status == RunStatus.IDLE


def test_run_rejects_illegal_transitions(content):
    run = GenerationRun(topic="AI Trends", redirect_url="https://example.com/x")

    with pytest.raises(RunStateError):
        run.finish()

    run.begin()
    run.content_ready(content, images_total=0)

    with pytest.raises(RunStateError):
        run.fail("too late")

    with pytest.raises(RunStateError):
        run.begin()


def test_run_dict_round_trip(content, png_image):
    run = GenerationRun(topic="AI Trends", redirect_url="https://example.com/x")
    run.begin()
    run.content_ready(content, images_total=1)
    run.record_image(IllustrationResult(position=1, prompt="a", image=png_image))
    run.finish()

    data = run.to_dict()
    assert data["status"] == "done"
    assert "imagePrompts" in data["content"]

    restored = GenerationRun.model_validate(data)
    assert restored.content == content
    assert restored.images == [png_image]


def test_run_payload_has_data_uris(content, png_image):
    run = GenerationRun(topic="AI Trends", redirect_url="https://example.com/x")
    run.begin()
    run.content_ready(content, images_total=1)
    run.record_image(IllustrationResult(position=1, prompt="a", image=png_image))

    payload = run.to_payload()

    assert payload["images"] == [png_image.data_uri]
    assert payload["status"] == "generating_images"
