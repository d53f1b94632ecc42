"""
Generation orchestrator.

Drives one generation run: a single content request, then a strictly
sequential loop over the image prompts with a fixed delay between
requests. Only a content failure ends the run early.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

from ..models.errors import GenerationError, LLMError
from ..models.run import GenerationRun


logger = logging.getLogger(__name__)

UpdateCallback = Callable[[GenerationRun], None]
SleepFunc = Callable[[float], Awaitable[None]]


class GenerationOrchestrator:
    """
    Sequential generation pipeline.

    At most one upstream request is in flight at a time. The delay before
    every image request except the first keeps the run inside the image
    model's free-tier quota; it is not derived from observed failures.
    """

    def __init__(
        self,
        content_generator,
        illustration_generator,
        image_delay: float = 5.0,
        max_images: int = 3,
        sleep: SleepFunc = asyncio.sleep,
        on_update: Optional[UpdateCallback] = None
    ):
        """
        Initialize orchestrator.

        Args:
            content_generator: Object with ``async generate(topic) -> GeneratedData``
            illustration_generator: Object with
                ``async generate(prompt, position) -> IllustrationResult``
            image_delay: Seconds to wait before each image request after the first
            max_images: Maximum number of image prompts attempted
            sleep: Awaitable sleep used for the delay
            on_update: Called with the run after every state change
        """
        self.content_generator = content_generator
        self.illustration_generator = illustration_generator
        self.image_delay = image_delay
        self.max_images = max_images
        self.sleep = sleep
        self.on_update = on_update

    async def run(self, topic: str, redirect_url: str) -> GenerationRun:
        """
        Execute a full generation run.

        Args:
            topic: User supplied topic
            redirect_url: Redirect target for the generated page

        Returns:
            The run in ``done`` or ``error`` state

        Raises:
            ValidationError: If the topic is blank
        """
        run = GenerationRun(topic=topic.strip(), redirect_url=redirect_url.strip())
        run.begin()
        self._publish(run)

        start_time = time.time()

        try:
            content = await self.content_generator.generate(run.topic)
        except (GenerationError, LLMError) as e:
            logger.error(f"Content generation failed for {run.topic!r}: {e.message}")
            run.fail(e.message)
            self._publish(run)
            return run

        prompts = list(content.image_prompts)[:self.max_images]
        run.content_ready(content, images_total=len(prompts))
        self._publish(run)

        await self._generate_images(run, prompts)

        run.finish()
        self._publish(run)

        logger.info(
            f"Run for {run.topic!r} finished in {time.time() - start_time:.1f}s "
            f"with {len(run.images)}/{run.images_total} images"
        )
        return run

    async def _generate_images(self, run: GenerationRun, prompts):
        for index, prompt in enumerate(prompts):
            position = index + 1
            run.image_started(position)
            self._publish(run)

            if index > 0:
                await self.sleep(self.image_delay)

            result = await self.illustration_generator.generate(prompt, position)
            if result.is_absent:
                logger.warning(f"Skipping image {position}/{len(prompts)}: {result.error or 'no image'}")

            run.record_image(result)
            self._publish(run)

    def _publish(self, run: GenerationRun):
        if self.on_update is not None:
            self.on_update(run)
