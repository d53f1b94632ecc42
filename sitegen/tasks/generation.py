"""
Generation tasks for the AI Site Generator.

This module contains the Celery task that executes a generation run
and the helpers the API uses to read its state back.
"""

import asyncio
import logging
import time
from typing import Dict, Any, Optional

from .celery_app import celery_app
from ..core.models.errors import ConfigurationError, TaskError
from ..core.models.run import GenerationRun
from ..core.pipeline.orchestrator import GenerationOrchestrator
from ..integrations.images.illustration_generator import IllustrationGenerator
from ..integrations.llm.content_generator import ContentGenerator
from ..integrations.llm.litellm_client import LiteLLMClient
from ..utils.config import Config, get_config
from ..utils.logging import TaskLogger

logger = logging.getLogger(__name__)
task_logger = TaskLogger()


def build_orchestrator(config: Config, on_update=None) -> GenerationOrchestrator:
    """
    Wire the adapters and orchestrator from configuration.

    Raises:
        ConfigurationError: If no Gemini API key is configured
    """
    if not config.GEMINI_API_KEY:
        raise ConfigurationError("GEMINI_API_KEY not set. Add it to your .env file.", config_key="GEMINI_API_KEY")

    llm_client = LiteLLMClient(api_key=config.GEMINI_API_KEY, timeout=config.LLM_TIMEOUT)

    content_generator = ContentGenerator(
        llm_client,
        model=config.CONTENT_MODEL,
        language=config.CONTENT_LANGUAGE,
        temperature=config.CONTENT_TEMPERATURE,
        section_count=config.SECTION_COUNT,
        prompt_count=config.PROMPT_COUNT,
        strict_cardinality=config.STRICT_CARDINALITY
    )

    illustration_generator = IllustrationGenerator(
        api_key=config.GEMINI_API_KEY,
        model=config.IMAGE_MODEL
    )

    return GenerationOrchestrator(
        content_generator,
        illustration_generator,
        image_delay=config.IMAGE_REQUEST_DELAY,
        max_images=config.MAX_IMAGES,
        on_update=on_update
    )


@celery_app.task(bind=True, name='sitegen.tasks.generation.generate_site_task')
def generate_site_task(self, topic: str, redirect_url: str) -> Dict[str, Any]:
    """
    Execute one generation run.

    Args:
        topic: User supplied topic
        redirect_url: Redirect target for the generated page

    Returns:
        Final run record (``done`` or ``error``) as a dict
    """
    task_id = self.request.id
    start_time = time.time()

    task_logger.log_task_start(task_id, 'generate_site_task', topic=topic)

    def publish(run: GenerationRun):
        self.update_state(state='PROGRESS', meta=run.to_dict())
        task_logger.log_task_progress(task_id, run.status.value, run.progress_message or run.error or '')

    try:
        orchestrator = build_orchestrator(get_config(), on_update=publish)
        run = asyncio.run(orchestrator.run(topic, redirect_url))

    except Exception as e:
        error_msg = f"Generation task failed: {str(e)}"
        logger.error(error_msg, exc_info=True)
        task_logger.log_task_error(task_id, 'generate_site_task', error_msg)
        raise TaskError(error_msg, task_id=task_id)

    task_logger.log_task_complete(
        task_id,
        'generate_site_task',
        time.time() - start_time,
        run_status=run.status.value,
        images=len(run.images)
    )

    return run.to_dict()


def get_task_status(task_id: str) -> Dict[str, Any]:
    """
    Get task status.

    Args:
        task_id: Task ID

    Returns:
        Dict with the Celery ``state``, the ``run`` record when one has been
        published, and ``error`` when the task itself failed
    """
    task = celery_app.AsyncResult(task_id)
    state = task.state
    info = task.info

    run: Optional[GenerationRun] = None
    error: Optional[str] = None

    if state in ('PROGRESS', 'SUCCESS') and isinstance(info, dict):
        run = GenerationRun.model_validate(info)
    elif state == 'FAILURE':
        error = str(info)

    return {
        'task_id': task_id,
        'state': state,
        'run': run,
        'error': error
    }
