"""Filesystem-safe slugs for generated file names."""

import re

DEFAULT_SLUG = "image"

# Runs of anything other than ASCII lowercase letters, digits and CJK
# unified ideographs collapse into one separator.
_SEPARATOR_RE = re.compile(r"[^a-z0-9一-龥]+")


def slugify_topic(topic: str, default: str = DEFAULT_SLUG) -> str:
    """
    Derive a slug from a topic.

    >>> slugify_topic("  Hello World!!  ")
    'hello-world'
    """
    slug = _SEPARATOR_RE.sub("-", topic.strip().lower()).strip("-")
    return slug or default


def image_filename(slug: str, position: int) -> str:
    """``<slug>-<position>.png``, position 1-based."""
    return f"{slug}-{position}.png"
