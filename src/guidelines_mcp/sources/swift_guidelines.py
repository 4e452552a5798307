"""Swift API Design Guidelines fetched from swift.org."""

from __future__ import annotations

import logging

import httpx

from ..config import Settings, get_settings
from ..models import FailureKind, FetchResult, Source
from .base import BaseSource

logger = logging.getLogger(__name__)


def is_fetchable_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.host)


class SwiftGuidelinesSource(BaseSource):
    """Fetches the guidelines page with a single GET."""

    name = "swift_guidelines"

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._transport = transport
        super().__init__()

    def build_source(self) -> Source:
        return Source(
            id="source_swift_api_guidelines",
            name="Swift API Design Guidelines",
            kind="website",
            canonical_url=self.settings.guidelines_url,
            description="Naming and API design conventions published on swift.org.",
        )

    async def fetch_markup(self) -> FetchResult:
        url = self.registry_source.canonical_url
        if not is_fetchable_url(url):
            logger.error("Refusing to fetch invalid URL %r", url)
            return FetchResult.failed(FailureKind.INVALID_SOURCE, url)

        logger.info("Fetching %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.request_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            return FetchResult.failed(
                FailureKind.TRANSPORT_FAILURE, str(exc) or type(exc).__name__
            )

        if response.status_code != 200:
            logger.warning("Request to %s returned HTTP %s", url, response.status_code)
            return FetchResult.failed(
                FailureKind.TRANSPORT_FAILURE,
                f"HTTP request failed (status {response.status_code})",
            )

        try:
            markup = response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Response from %s is not valid UTF-8: %s", url, exc)
            return FetchResult.failed(FailureKind.DECODE_FAILURE, str(exc))
        return FetchResult.success(markup)
