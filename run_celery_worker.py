#!/usr/bin/env python3
"""
Celery worker runner for the AI Site Generator.

This script starts a Celery worker to process generation tasks.
"""

import sys
import logging

from sitegen.tasks.celery_app import celery_app
from sitegen.utils.config import get_config
from sitegen.utils.logging import setup_logging

# Import tasks to register them
from sitegen.tasks.generation import generate_site_task  # noqa: F401

logger = logging.getLogger(__name__)


def main():
    """Start the Celery worker."""
    config = get_config()
    setup_logging(vars(config))

    try:
        logger.info("Starting AI Site Generator Celery Worker...")
        logger.info("Worker will process tasks from the 'generation' queue")

        # Start the worker
        worker = celery_app.Worker(
            queues=['generation'],
            concurrency=2,  # Adjust based on your system
            loglevel='info',
            hostname='sitegen-worker@%h'
        )

        worker.start()

    except KeyboardInterrupt:
        logger.info("Worker stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Worker failed to start: {str(e)}")
        sys.exit(1)


if __name__ == '__main__':
    main()
