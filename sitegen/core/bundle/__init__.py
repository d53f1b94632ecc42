"""Static-site bundle assembly and packaging."""

from .assembler import Bundle, build_bundle
from .archive import write_archive
from .slug import slugify_topic, image_filename

__all__ = [
    'Bundle',
    'build_bundle',
    'write_archive',
    'slugify_topic',
    'image_filename'
]
