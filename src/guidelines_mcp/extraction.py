"""Turn fetched guideline markup into plain text and section excerpts."""

from __future__ import annotations

import re
from typing import Optional

from .models import ExtractionConfig
from .utils.text_cleaning import plain_text

SECTION_TEMPLATE = 'Content for section "{section}":\n\n{excerpt}'
NOT_FOUND_TEMPLATE = (
    'Section "{section}" was not found.\n\nPart of the available content:\n{sample}'
)

DEFAULT_CONFIG = ExtractionConfig()


def _tag_region(markup: str, tag: str) -> Optional[str]:
    """Return the text between ``<tag ...>`` and the first ``</tag>`` after it."""
    opening = re.search(f"<{re.escape(tag)}", markup, re.IGNORECASE)
    if not opening:
        return None
    tag_end = markup.find(">", opening.end())
    if tag_end == -1:
        return None
    closing = re.compile(f"</{re.escape(tag)}>", re.IGNORECASE).search(markup, tag_end + 1)
    if not closing:
        return None
    return markup[tag_end + 1 : closing.start()]


def locate_body(markup: str, config: ExtractionConfig = DEFAULT_CONFIG) -> str:
    """Pick the most specific readable region: primary tag, then secondary, then all."""
    for tag in (config.primary_tag, config.secondary_tag):
        region = _tag_region(markup, tag)
        if region is not None:
            return region
    return markup


def section_excerpt(
    text: str, section: str, config: ExtractionConfig = DEFAULT_CONFIG
) -> str:
    """Return up to ``config.line_cap`` lines starting at the first match of ``section``.

    Matching is a case-insensitive substring search, so the excerpt can start
    mid-line. An empty ``section`` matches at the start of the text.
    """
    match = re.search(re.escape(section), text, re.IGNORECASE)
    if match is None:
        return NOT_FOUND_TEMPLATE.format(
            section=section, sample=text[: config.sample_length]
        )
    lines = text[match.start() :].splitlines()
    excerpt = "\n".join(lines[: config.line_cap])
    return SECTION_TEMPLATE.format(section=section, excerpt=excerpt)


class DocumentPipeline:
    """Body locator, tag stripper and section matcher bound to one config."""

    def __init__(self, config: ExtractionConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def plain_text(self, markup: str) -> str:
        region = locate_body(markup, self.config)
        return plain_text(region, self.config.entities)

    def run(self, markup: str, section: Optional[str] = None) -> str:
        text = self.plain_text(markup)
        if section is None:
            return text
        return section_excerpt(text, section, self.config)


def extract(
    raw_markup: str,
    section: Optional[str] = None,
    config: ExtractionConfig | None = None,
) -> str:
    """Pure entry point: raw markup plus optional section in, text out."""
    return DocumentPipeline(config).run(raw_markup, section)
