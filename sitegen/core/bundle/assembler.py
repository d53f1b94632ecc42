"""
Bundle assembler.

Builds the static-site file set for a finished run. The output depends
only on the inputs and the licence year, so two builds of the same run
in the same year produce identical HTML and Markdown.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..models.content import GeneratedData, GeneratedImage
from .slug import image_filename, slugify_topic


logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

META_DESCRIPTION_LENGTH = 160
DEFAULT_LICENSE_HOLDER = "Generated via AI Site Generator"
DEFAULT_SITE_LANG = "zh-CN"

GITIGNORE = "node_modules/\ndist/\n.DS_Store\n"
ROBOTS_TXT = "User-agent: *\nAllow: /\nSitemap: sitemap.xml\n"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html", "xml")),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


@dataclass(frozen=True)
class Bundle:
    """In-memory file set, keyed by path relative to the site root."""

    slug: str
    files: Dict[str, Union[str, bytes]] = field(default_factory=dict)

    @property
    def archive_name(self) -> str:
        return f"{self.slug}.zip"

    @property
    def filenames(self) -> List[str]:
        return list(self.files)

    def image_filenames(self) -> List[str]:
        return [name for name in self.files if name.endswith(".png")]


def build_bundle(
    topic: str,
    redirect_url: str,
    content: GeneratedData,
    images: Sequence[GeneratedImage],
    year: Optional[int] = None,
    license_holder: str = DEFAULT_LICENSE_HOLDER,
    lang: str = DEFAULT_SITE_LANG
) -> Bundle:
    """
    Assemble the site files.

    Args:
        topic: User supplied topic, used as page title and H1
        redirect_url: Target of the meta refresh and every link
        content: Generated article
        images: Images obtained for the article, in order
        year: Licence year, defaults to the current year
        license_holder: Copyright holder named in the licence
        lang: ``lang`` attribute of the HTML document

    Returns:
        Bundle with images, index.html, README.md, LICENSE, .gitignore,
        robots.txt and sitemap.xml
    """
    topic = topic.strip()
    redirect_url = redirect_url.strip()
    slug = slugify_topic(topic)

    files: Dict[str, Union[str, bytes]] = {}

    image_filenames = []
    for position, image in enumerate(images, start=1):
        filename = image_filename(slug, position)
        files[filename] = image.content
        image_filenames.append(filename)

    context = {
        "topic": topic,
        "redirect_url": redirect_url,
        "content": content,
        "image_filenames": image_filenames,
        "meta_description": meta_description(content.introduction),
        "lang": lang,
    }

    files["index.html"] = render_template("index.html", **context)
    files["README.md"] = render_template("README.md", **context)
    files["LICENSE"] = render_template(
        "LICENSE.txt",
        year=year or datetime.now().year,
        holder=license_holder
    )
    files[".gitignore"] = GITIGNORE
    files["robots.txt"] = ROBOTS_TXT
    files["sitemap.xml"] = render_template("sitemap.xml", redirect_url=redirect_url)

    logger.info(f"Bundle assembled for {topic!r}: {len(files)} files, {len(image_filenames)} images")
    return Bundle(slug=slug, files=files)


def meta_description(introduction: str) -> str:
    """Introduction cut to the meta description length; escaping happens in the template."""
    return introduction[:META_DESCRIPTION_LENGTH]


def render_template(name: str, **context) -> str:
    return _env.get_template(name).render(**context)
