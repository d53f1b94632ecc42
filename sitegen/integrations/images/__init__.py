"""
Image integration module.

This module provides the illustration generator used for the
article's images.
"""

from .illustration_generator import IllustrationGenerator, extract_inline_image

__all__ = [
    'IllustrationGenerator',
    'extract_inline_image'
]
