"""
External service integrations for the AI Site Generator.

This module contains clients for the content (LLM) and image
generation services.
"""
