"""
Main Flask application for the AI Site Generator.

This module creates and configures the Flask application
with all necessary middleware, blueprints, and error handlers.
"""

import logging
from flask import Flask, jsonify
from flask_cors import CORS

from .endpoints import sites_bp, health_bp, ui_bp, limiter
from .middleware.logging import LoggingMiddleware
from .middleware.error_handler import ErrorHandler
from ..core.models.errors import ErrorResponse
from ..utils.config import get_config, validate_config
from ..utils.logging import setup_logging


def create_app(config_name: str = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config_name: Configuration name (development, production, testing)

    Returns:
        Configured Flask application
    """
    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    config = get_config(config_name)
    app.config.from_object(config)
    app.config['RATELIMIT_STORAGE_URI'] = config.RATELIMIT_STORAGE_URL
    app.config['RATELIMIT_ENABLED'] = getattr(config, 'RATELIMIT_ENABLED', True)

    # Setup logging
    setup_logging(app.config)
    logger = logging.getLogger(__name__)

    for problem in validate_config(config):
        logger.warning(f"Configuration problem: {problem}")

    # Initialize extensions
    CORS(app, origins=app.config.get('CORS_ORIGINS', ['*']))
    limiter.init_app(app)

    # Register middleware
    app.before_request(LoggingMiddleware.before_request)
    app.after_request(LoggingMiddleware.after_request)

    # Register blueprints
    app.register_blueprint(ui_bp)
    app.register_blueprint(sites_bp)
    app.register_blueprint(health_bp)

    # Register error handlers
    ErrorHandler.register_handlers(app)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify(ErrorResponse(
            error="not_found",
            message="The requested resource was not found",
            error_code="NOT_FOUND",
            status=404
        ).to_json()), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify(ErrorResponse(
            error="method_not_allowed",
            message="The method is not allowed for the requested URL",
            error_code="METHOD_NOT_ALLOWED",
            status=405
        ).to_json()), 405

    @app.errorhandler(429)
    def rate_limited(error):
        return jsonify(ErrorResponse(
            error="rate_limit_exceeded",
            message=f"Rate limit exceeded: {error.description}",
            error_code="RATE_LIMIT_EXCEEDED",
            status=429
        ).to_json()), 429

    # API documentation endpoint
    @app.route('/api/v1/docs')
    def api_docs():
        return jsonify({
            "title": f"{app.config['API_TITLE']} API",
            "version": app.config['API_VERSION'],
            "description": "Generates a redirecting static site (article, illustrations, SEO files) for a topic",
            "endpoints": {
                "ui": {
                    "method": "GET",
                    "path": "/",
                    "description": "Generator form page"
                },
                "sites": {
                    "create": {
                        "method": "POST",
                        "path": "/api/v1/sites",
                        "description": "Submit a generation run for a topic and redirect URL"
                    },
                    "status": {
                        "method": "GET",
                        "path": "/api/v1/sites/{task_id}",
                        "description": "Get run status, article and images generated so far"
                    },
                    "download": {
                        "method": "GET",
                        "path": "/api/v1/sites/{task_id}/download",
                        "description": "Download the site bundle of a finished run as a zip"
                    }
                },
                "health": {
                    "basic": {
                        "method": "GET",
                        "path": "/api/v1/health",
                        "description": "Basic health check"
                    },
                    "ready": {
                        "method": "GET",
                        "path": "/api/v1/health/ready",
                        "description": "Readiness check"
                    },
                    "live": {
                        "method": "GET",
                        "path": "/api/v1/health/live",
                        "description": "Liveness check"
                    }
                }
            },
            "rate_limiting": {
                "site_creation": app.config['SUBMIT_RATE_LIMIT']
            }
        })

    logger.info(f"Flask application created with config: {config_name}")

    return app
