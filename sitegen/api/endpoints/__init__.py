"""
API endpoints for the AI Site Generator.

This module contains the HTML page and the REST API endpoints.
"""

from .sites import sites_bp, limiter
from .health import health_bp
from .ui import ui_bp

__all__ = [
    'sites_bp',
    'health_bp',
    'ui_bp',
    'limiter'
]
