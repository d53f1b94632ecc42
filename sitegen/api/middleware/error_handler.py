"""
Error handling middleware for the AI Site Generator.

Generation failures never reach a request: the worker stores them in the
run. The handlers here cover what a request itself can raise while
reading a run back or packaging it.
"""

import logging
from flask import jsonify, g
from werkzeug.exceptions import HTTPException

from ...core.models.errors import ErrorResponse, PackagingError, RunStateError


logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling for the API."""

    @staticmethod
    def register_handlers(app):
        """Register error handlers with Flask app."""

        @app.errorhandler(PackagingError)
        def handle_packaging_error(error):
            return ErrorHandler.handle_packaging_error(error)

        @app.errorhandler(RunStateError)
        def handle_run_state_error(error):
            return ErrorHandler.handle_run_state_error(error)

        @app.errorhandler(Exception)
        def handle_generic_error(error):
            # Routing errors and aborts keep their own status handlers
            if isinstance(error, HTTPException):
                return error
            return ErrorHandler.handle_generic_error(error)

    @staticmethod
    def handle_packaging_error(error: PackagingError):
        """Handle archive packaging errors."""
        logger.error(f"Packaging error for {error.archive_name}: {error.message}")

        return jsonify(ErrorResponse(
            error="packaging_error",
            message=error.message,
            error_code=error.error_code,
            status=500,
            details=error.details
        ).to_json()), 500

    @staticmethod
    def handle_run_state_error(error: RunStateError):
        """Handle requests that do not fit the run's current state."""
        logger.warning(f"Run state error: {error.message}")

        return jsonify(ErrorResponse(
            error="run_state_error",
            message=error.message,
            error_code=error.error_code,
            status=409,
            details=error.details
        ).to_json()), 409

    @staticmethod
    def handle_generic_error(error: Exception):
        """Handle generic errors."""
        request_id = getattr(g, 'request_id', 'unknown')

        logger.error(
            f"Unhandled error in request {request_id}: {str(error)}",
            exc_info=True
        )

        return jsonify(ErrorResponse(
            error="internal_server_error",
            message="An unexpected error occurred",
            error_code="INTERNAL_SERVER_ERROR",
            status=500,
            request_id=request_id,
            details={
                "error_type": type(error).__name__
            }
        ).to_json()), 500
