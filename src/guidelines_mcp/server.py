"""MCP server exposing the guidelines reader as a single tool."""

import argparse
import logging
import sys
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from .config import Settings, get_settings
from .retrieval import read_guidelines
from .sources.base import BaseSource
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)

TOOL_DESCRIPTION = "Read the Swift API Design Guidelines from swift.org."
SECTION_DESCRIPTION = (
    'Optional section name, for example "Naming" or "Clarity". '
    "The whole document is returned when omitted."
)


def build_server(
    settings: Optional[Settings] = None,
    source: Optional[BaseSource] = None,
) -> FastMCP:
    """Create a FastMCP server with the guidelines tool registered."""
    settings = settings or get_settings()
    server = FastMCP(settings.server_name)
    # FastMCP has no public version argument; the low-level server reports it.
    server._mcp_server.version = settings.server_version

    async def read_swift_guidelines(
        section: Annotated[Optional[str], Field(description=SECTION_DESCRIPTION)] = None,
    ) -> str:
        response = await read_guidelines(section=section, source=source, settings=settings)
        if response.is_error:
            raise ToolError(response.text)
        return response.text

    server.add_tool(
        read_swift_guidelines,
        name=settings.tool_name,
        description=TOOL_DESCRIPTION,
    )
    return server


def _build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve the Swift API Design Guidelines over the Model Context Protocol."
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default=settings.transport,
        help=f"Transport to serve on (default: {settings.transport})",
    )
    return parser


def main() -> None:
    settings = get_settings()
    parser = _build_arg_parser(settings)
    args = parser.parse_args()
    configure_logging(settings)
    server = build_server(settings)
    logger.info(
        "Starting %s %s on %s", settings.server_name, settings.server_version, args.transport
    )
    try:
        server.run(transport=args.transport)
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except Exception:
        logger.exception("Failed to start the server")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - CLI helper
    main()
