from typing import Callable

import httpx
import pytest

from guidelines_mcp.config import Settings
from guidelines_mcp.models import FetchResult, Source
from guidelines_mcp.sources.base import BaseSource

GUIDELINES_URL = "https://example.com/api-design-guidelines/"

GUIDELINES_HTML = """<!DOCTYPE html>
<html>
<head><title>API Design Guidelines</title></head>
<body>
<nav>Site navigation</nav>
<main class="content">
<h1>API Design Guidelines</h1>
<h2>Fundamentals</h2>
<p>Clarity at the point of use is your most important goal.</p>
<h2>Naming</h2>
<p>Use descriptive names.</p>
<p>Write <code>Array&lt;Int&gt;</code> &amp; friends.</p>
</main>
<footer>Copyright</footer>
</body>
</html>
"""

GUIDELINES_TEXT = (
    "API Design Guidelines\n"
    "Fundamentals\n"
    "Clarity at the point of use is your most important goal.\n"
    "Naming\n"
    "Use descriptive names.\n"
    "Write Array<Int> & friends."
)


class StaticSource(BaseSource):
    """Source returning a canned FetchResult."""

    name = "static"

    def __init__(self, result: FetchResult) -> None:
        self.result = result
        self.calls = 0
        super().__init__()

    def build_source(self) -> Source:
        return Source(
            id="source_static",
            name="Static Fixture",
            kind="fixture",
            canonical_url=GUIDELINES_URL,
        )

    async def fetch_markup(self) -> FetchResult:
        self.calls += 1
        return self.result


@pytest.fixture()
def test_settings():
    return Settings(
        guidelines_url=GUIDELINES_URL,
        request_timeout=5,
        section_line_limit=50,
        not_found_sample_chars=500,
    )


@pytest.fixture()
def guidelines_html():
    return GUIDELINES_HTML


@pytest.fixture()
def guidelines_text():
    return GUIDELINES_TEXT


@pytest.fixture()
def static_source() -> Callable[[FetchResult], StaticSource]:
    return StaticSource


@pytest.fixture()
def make_transport() -> Callable[..., httpx.MockTransport]:
    def factory(status_code: int = 200, content: bytes = GUIDELINES_HTML.encode("utf-8")):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, content=content)

        return httpx.MockTransport(handler)

    return factory
