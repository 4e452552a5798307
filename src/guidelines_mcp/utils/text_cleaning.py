"""Regex-based markup cleanup used by the extraction pipeline."""

from __future__ import annotations

import re
from typing import Iterable, Tuple

from ..models import DEFAULT_ENTITIES

HTML_TAG_RE = re.compile(r"<[^>]+>")
INLINE_WHITESPACE_RE = re.compile(r"[ \t]+")


def strip_tags(value: str) -> str:
    """Remove crude HTML tags. Attributes and nesting are not understood."""
    return HTML_TAG_RE.sub("", value)


def decode_entities(
    value: str, entities: Iterable[Tuple[str, str]] = DEFAULT_ENTITIES
) -> str:
    """Replace each listed entity once, in table order.

    Unlisted entities are left alone. Because ``&amp;`` comes last, text such as
    ``&amp;lt;`` becomes ``&lt;`` rather than ``<``.
    """
    for entity, literal in entities:
        value = value.replace(entity, literal)
    return value


def collapse_inline_whitespace(value: str) -> str:
    """Collapse spaces and tabs within a line, keeping line breaks."""
    return INLINE_WHITESPACE_RE.sub(" ", value)


def plain_text(
    value: str, entities: Iterable[Tuple[str, str]] = DEFAULT_ENTITIES
) -> str:
    """Full cleaning pipeline applied to a markup region."""
    text = strip_tags(value or "")
    text = decode_entities(text, entities)
    text = collapse_inline_whitespace(text)
    return text.strip()
