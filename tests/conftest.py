"""
Shared fixtures for the AI Site Generator tests.
"""

import os

# Must be set before sitegen.tasks.celery_app reads its configuration
os.environ.setdefault('FLASK_ENV', 'testing')

import base64

import pytest

from sitegen.core.models.content import GeneratedData, GeneratedImage


PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


def make_content_payload(section_count: int = 3, prompt_count: int = 3) -> dict:
    """Content reply in the generator's wire format."""
    return {
        "title": "人工智能发展趋势",
        "introduction": "人工智能正在改变各行各业。" * 5,
        "sections": [
            {"heading": f"第{i + 1}部分", "content": f"这是第{i + 1}部分的详细内容。" * 10}
            for i in range(section_count)
        ],
        "conclusion": "未来值得期待。",
        "imagePrompts": [f"A futuristic illustration number {i + 1}" for i in range(prompt_count)],
    }


@pytest.fixture
def content_payload():
    return make_content_payload()


@pytest.fixture
def content(content_payload):
    return GeneratedData.model_validate(content_payload)


@pytest.fixture
def png_image():
    return GeneratedImage.from_bytes(PNG_BYTES)


@pytest.fixture
def app():
    from sitegen.api.app import create_app

    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()
