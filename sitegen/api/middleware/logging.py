"""
Logging middleware for the AI Site Generator.

This module provides request/response logging middleware
for monitoring and debugging.
"""

import logging
import time
import uuid
from flask import request, g


logger = logging.getLogger(__name__)


class LoggingMiddleware:
    """Logging middleware for request/response logging."""

    @staticmethod
    def before_request():
        """Log request details."""
        g.start_time = time.time()
        g.request_id = f"req_{uuid.uuid4().hex[:12]}"

        logger.info(
            f"Request started: {g.request_id} - {request.method} {request.path} "
            f"from {request.remote_addr}"
        )

        if request.method == 'POST' and request.is_json:
            data = request.get_json(silent=True)
            if isinstance(data, dict):
                logger.debug(f"Request body: {data}")

    @staticmethod
    def after_request(response):
        """Log response details."""
        if hasattr(g, 'start_time'):
            duration = time.time() - g.start_time

            logger.info(
                f"Request completed: {g.request_id} - {response.status_code} "
                f"in {duration:.3f}s"
            )

            if response.status_code >= 400:
                logger.warning(
                    f"Error response: {g.request_id} - {response.status_code} "
                    f"for {request.method} {request.path}"
                )

            response.headers['X-Request-ID'] = g.request_id

        return response

    @staticmethod
    def log_performance(operation: str, duration: float, details: dict = None):
        """
        Log performance metrics.

        Args:
            operation: Operation name
            duration: Duration in seconds
            details: Additional details
        """
        request_id = getattr(g, 'request_id', 'unknown')

        logger.info(
            f"Performance: {operation} took {duration:.3f}s",
            extra={
                'request_id': request_id,
                'operation': operation,
                'duration': duration,
                'details': details or {}
            }
        )
