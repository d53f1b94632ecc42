"""Generation pipeline for the AI Site Generator."""

from .orchestrator import GenerationOrchestrator

__all__ = [
    'GenerationOrchestrator'
]
