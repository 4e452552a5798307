"""Public retrieval API consumed by the MCP tool."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

from .config import Settings, get_settings
from .extraction import DocumentPipeline
from .models import ToolResponse
from .sources.base import BaseSource
from .sources.swift_guidelines import SwiftGuidelinesSource
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


async def read_guidelines(
    section: Optional[str] = None,
    source: BaseSource | None = None,
    settings: Settings | None = None,
) -> ToolResponse:
    """Fetch the guidelines and return the full text or one section."""
    settings = settings or get_settings()
    source = source or SwiftGuidelinesSource(settings=settings)
    result = await source.fetch_markup()
    if result.failure is not None:
        return ToolResponse(text=f"Error: {result.failure.message}", is_error=True)

    if section is not None:
        logger.debug("Looking up section %r in %s", section, source.name)
    pipeline = DocumentPipeline(settings.extraction_config())
    return ToolResponse(text=pipeline.run(result.text, section))


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the Swift API Design Guidelines as plain text."
    )
    parser.add_argument(
        "--section",
        default=None,
        help="Only print the part starting at this section name (case-insensitive).",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Override the guidelines URL.",
    )
    return parser


def main() -> None:
    parser = _build_arg_parser()
    args = parser.parse_args()
    settings = get_settings()
    if args.url:
        settings = settings.model_copy(update={"guidelines_url": args.url})
    configure_logging(settings)
    response = asyncio.run(read_guidelines(section=args.section, settings=settings))
    print(response.text)
    if response.is_error:
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - CLI helper
    main()
