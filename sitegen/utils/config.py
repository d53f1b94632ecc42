"""
Configuration management for the AI Site Generator.

This module provides configuration loading and management
for the application.
"""

import os
from typing import Optional, List
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY: str = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG: bool = os.environ.get('DEBUG', 'false').lower() == 'true'
    TESTING: bool = os.environ.get('TESTING', 'false').lower() == 'true'

    # API settings
    API_TITLE: str = 'AI Site Generator'
    API_VERSION: str = '1.0.0'

    # Gemini credentials, API_KEY kept for existing deployments
    GEMINI_API_KEY: Optional[str] = os.environ.get('GEMINI_API_KEY') or os.environ.get('API_KEY')

    # Content generation
    CONTENT_MODEL: str = os.environ.get('CONTENT_MODEL', 'gemini/gemini-2.5-flash')
    CONTENT_LANGUAGE: str = os.environ.get('CONTENT_LANGUAGE', 'Simplified Chinese (简体中文)')
    CONTENT_TEMPERATURE: float = float(os.environ.get('CONTENT_TEMPERATURE', '0.7'))
    LLM_TIMEOUT: int = int(os.environ.get('LLM_TIMEOUT', '120'))
    SECTION_COUNT: int = int(os.environ.get('SECTION_COUNT', '3'))
    PROMPT_COUNT: int = int(os.environ.get('PROMPT_COUNT', '3'))
    STRICT_CARDINALITY: bool = os.environ.get('STRICT_CARDINALITY', 'true').lower() == 'true'

    # Image generation
    IMAGE_MODEL: str = os.environ.get('IMAGE_MODEL', 'gemini-2.5-flash-image')
    MAX_IMAGES: int = int(os.environ.get('MAX_IMAGES', '3'))
    IMAGE_REQUEST_DELAY: float = float(os.environ.get('IMAGE_REQUEST_DELAY', '5.0'))  # free-tier quota

    # Generated site
    DEFAULT_REDIRECT_URL: str = os.environ.get('DEFAULT_REDIRECT_URL', 'https://byvn.net/mwYb')
    SITE_LANG: str = os.environ.get('SITE_LANG', 'zh-CN')
    LICENSE_HOLDER: str = os.environ.get('LICENSE_HOLDER', 'Generated via AI Site Generator')

    # Rate limiting
    RATELIMIT_STORAGE_URL: str = os.environ.get('RATELIMIT_STORAGE_URL', 'memory://')
    SUBMIT_RATE_LIMIT: str = os.environ.get('SUBMIT_RATE_LIMIT', '10 per minute')

    # Logging
    LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE: str = os.environ.get('LOG_FILE', 'logs/app.log')
    LOG_MAX_BYTES: int = int(os.environ.get('LOG_MAX_BYTES', 10485760))  # 10MB
    LOG_BACKUP_COUNT: int = int(os.environ.get('LOG_BACKUP_COUNT', 5))
    LOG_REQUESTS: bool = os.environ.get('LOG_REQUESTS', 'true').lower() == 'true'

    # Celery configuration
    CELERY_BROKER_URL: str = os.environ.get('CELERY_BROKER_URL', 'redis://localhost:6379/0')
    CELERY_RESULT_BACKEND: str = os.environ.get('CELERY_RESULT_BACKEND', 'redis://localhost:6379/0')
    CELERY_TASK_TIME_LIMIT: int = int(os.environ.get('CELERY_TASK_TIME_LIMIT', '900'))  # 15 minutes
    CELERY_TASK_SOFT_TIME_LIMIT: int = int(os.environ.get('CELERY_TASK_SOFT_TIME_LIMIT', '840'))  # 14 minutes
    CELERY_TASK_ALWAYS_EAGER: bool = os.environ.get('CELERY_TASK_ALWAYS_EAGER', 'false').lower() == 'true'
    CELERY_WORKER_PREFETCH_MULTIPLIER: int = int(os.environ.get('CELERY_WORKER_PREFETCH_MULTIPLIER', '1'))
    CELERY_WORKER_MAX_TASKS_PER_CHILD: int = int(os.environ.get('CELERY_WORKER_MAX_TASKS_PER_CHILD', '1000'))

    # Request settings
    MAX_CONTENT_LENGTH: int = int(os.environ.get('MAX_CONTENT_LENGTH', 65536))  # 64KB

    # CORS settings
    CORS_ORIGINS: List[str] = field(default_factory=lambda: os.environ.get('CORS_ORIGINS', '*').split(','))


@dataclass
class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG: bool = True
    LOG_LEVEL: str = 'DEBUG'


@dataclass
class ProductionConfig(Config):
    """Production configuration."""
    DEBUG: bool = False
    LOG_LEVEL: str = 'WARNING'


@dataclass
class TestingConfig(Config):
    """Testing configuration."""
    TESTING: bool = True
    DEBUG: bool = True
    LOG_LEVEL: str = 'CRITICAL'
    LOG_FILE: str = ''
    GEMINI_API_KEY: Optional[str] = 'test-gemini-key'
    IMAGE_REQUEST_DELAY: float = 0.0
    CELERY_BROKER_URL: str = 'memory://'
    CELERY_RESULT_BACKEND: str = 'cache+memory://'
    CELERY_TASK_ALWAYS_EAGER: bool = True
    RATELIMIT_ENABLED: bool = False


def get_config(config_name: str = None) -> Config:
    """
    Get configuration based on environment.

    Args:
        config_name: Configuration name (development, production, testing)

    Returns:
        Configuration object
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development').lower()

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig
    }

    config_class = config_map.get(config_name, DevelopmentConfig)
    return config_class()


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors
    """
    errors = []

    if not config.GEMINI_API_KEY:
        errors.append("GEMINI_API_KEY must be configured")

    if config.SECRET_KEY == 'dev-secret-key-change-in-production' and config.DEBUG is False:
        errors.append("SECRET_KEY must be changed in production")

    if config.MAX_IMAGES < 0:
        errors.append("MAX_IMAGES must not be negative")

    if config.SECTION_COUNT < 1 or config.PROMPT_COUNT < 1:
        errors.append("SECTION_COUNT and PROMPT_COUNT must be at least 1")

    if config.MAX_IMAGES > config.PROMPT_COUNT:
        errors.append("MAX_IMAGES above PROMPT_COUNT has no effect")

    if config.IMAGE_REQUEST_DELAY < 0:
        errors.append("IMAGE_REQUEST_DELAY must not be negative")

    if not config.CELERY_BROKER_URL:
        errors.append("CELERY_BROKER_URL must be configured")

    if not config.CELERY_RESULT_BACKEND:
        errors.append("CELERY_RESULT_BACKEND must be configured")

    return errors
