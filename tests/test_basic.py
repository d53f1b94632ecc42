"""
Basic tests for the AI Site Generator.

This module contains basic tests to verify the system structure
and basic functionality.
"""

from dataclasses import replace

import pytest

from sitegen.core.models.errors import ValidationError
from sitegen.core.models.site import SiteRequest
from sitegen.utils.config import get_config, validate_config


def test_site_request_creation():
    """Test creating a site request."""
    request = SiteRequest(topic="  2025年人工智能发展趋势  ", redirect_url="https://example.com/x")

    assert request.topic == "2025年人工智能发展趋势"
    assert request.redirect_url == "https://example.com/x"


def test_site_request_validation():
    """Test site request validation."""
    request = SiteRequest(topic="Valid topic", redirect_url="   ")
    assert request.redirect_url is None

    with pytest.raises(Exception):  # Pydantic validation error
        SiteRequest(topic="   ")

    with pytest.raises(Exception):
        SiteRequest(topic="Topic", redirect_url="ftp://example.com")

    with pytest.raises(Exception):
        SiteRequest(topic="x" * 201)


def test_config_loading():
    """Test configuration loading."""
    config = get_config('testing')

    assert config.TESTING is True
    assert config.DEBUG is True
    assert config.LOG_LEVEL == 'CRITICAL'
    assert config.IMAGE_REQUEST_DELAY == 0.0
    assert config.CELERY_TASK_ALWAYS_EAGER is True


def test_config_defaults():
    """Test default generation settings."""
    config = get_config('development')

    assert config.DEFAULT_REDIRECT_URL == 'https://byvn.net/mwYb'
    assert config.MAX_IMAGES == 3
    assert config.SECTION_COUNT == 3
    assert config.PROMPT_COUNT == 3
    assert config.SITE_LANG == 'zh-CN'


def test_validate_config():
    """Test configuration validation."""
    assert validate_config(get_config('testing')) == []

    config = replace(get_config('testing'), GEMINI_API_KEY=None, IMAGE_REQUEST_DELAY=-1.0)
    errors = validate_config(config)

    assert "GEMINI_API_KEY must be configured" in errors
    assert "IMAGE_REQUEST_DELAY must not be negative" in errors

    errors = validate_config(replace(get_config('testing'), MAX_IMAGES=5, PROMPT_COUNT=4))
    assert errors == ["MAX_IMAGES above PROMPT_COUNT has no effect"]


def test_error_codes():
    """Test custom error classes."""
    error = ValidationError("Topic must not be blank", field="topic", value="")

    assert error.error_code == "VALIDATION_ERROR"
    assert error.details == {"field": "topic", "value": ""}
    assert str(error) == "Topic must not be blank"


def test_imports():
    """Test that all modules can be imported."""
    # Test core models
    from sitegen.core.models import GeneratedData, GenerationRun, SiteRequest
    from sitegen.core.models.llm import LLMConfig, LLMResponse
    from sitegen.core.models.errors import SiteGeneratorError

    # Test core services
    from sitegen.core.pipeline import GenerationOrchestrator
    from sitegen.core.bundle import build_bundle, write_archive

    # Test integrations
    from sitegen.integrations.llm import LiteLLMClient, ContentGenerator
    from sitegen.integrations.images import IllustrationGenerator

    # Test API
    from sitegen.api.app import create_app

    # Test tasks
    from sitegen.tasks.celery_app import celery_app
    from sitegen.tasks.generation import generate_site_task

    # Test utils
    from sitegen.utils.config import get_config
    from sitegen.utils.logging import setup_logging
    from sitegen.utils.health import readiness_issues

    # If we get here, all imports succeeded
    assert True


def test_flask_app_creation():
    """Test Flask app creation."""
    from sitegen.api.app import create_app

    app = create_app('testing')

    assert app is not None
    assert app.config['TESTING'] is True
    assert app.config['DEBUG'] is True


def test_celery_app_creation():
    """Test Celery app creation."""
    from sitegen.tasks.celery_app import celery_app
    from sitegen.tasks.generation import generate_site_task  # noqa: F401

    assert celery_app is not None
    assert celery_app.main == 'sitegen'
    assert 'sitegen.tasks.generation.generate_site_task' in celery_app.tasks


if __name__ == '__main__':
    pytest.main([__file__])
