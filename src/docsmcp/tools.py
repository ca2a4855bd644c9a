"""Tool table and request routing.

``TOOL_SPECS`` names and describes the four tools the server exposes; input
schemas come from the FastMCP function signatures in ``server``. ``dispatch``
routes a call by exact tool name to the DocHandler and is the single place
where failures become error-flagged ``CallToolResult`` envelopes.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog
from mcp.types import CallToolResult, TextContent

from docsmcp.errors import DocsError, ErrorCode, UnknownToolError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from docsmcp.handler import DocHandler

log = structlog.get_logger()


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="fetch_docs",
        description="Fetch documentation content for a path on the documentation site.",
    ),
    ToolSpec(
        name="search_docs",
        description="Search for documentation pages containing specific terms.",
    ),
    ToolSpec(
        name="list_sections",
        description="Dynamically discover and list all available documentation sections.",
    ),
    ToolSpec(
        name="discover_docs",
        description="Crawl the main docs page to discover all available documentation paths.",
    ),
)

TOOLS_BY_NAME: dict[str, ToolSpec] = {spec.name: spec for spec in TOOL_SPECS}


def _route(
    name: str, arguments: Mapping[str, Any], handler: DocHandler
) -> Callable[[], Awaitable[str]]:
    if name == "fetch_docs":
        return lambda: handler.fetch(arguments.get("path"))
    if name == "search_docs":
        return lambda: handler.search(arguments.get("query"))
    if name == "list_sections":
        return handler.list_sections
    if name == "discover_docs":
        return handler.discover
    raise UnknownToolError(name)


def serialise_tool_error(error: DocsError) -> CallToolResult:
    """Convert a DocsError to the MCP tool error result envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(error.to_dict()))],
        isError=True,
    )


async def dispatch(
    name: str,
    arguments: Mapping[str, Any] | None,
    handler: DocHandler,
) -> CallToolResult:
    """Run one tool call and always return a structured result."""
    arguments = arguments or {}
    try:
        text = await _route(name, arguments, handler)()
    except DocsError as exc:
        log.warning(
            "tool_error",
            tool=name,
            code=exc.code,
            message=exc.message,
            recoverable=exc.recoverable,
        )
        return serialise_tool_error(exc)
    except Exception as exc:
        log.error("tool_unexpected_error", tool=name, exc_info=True)
        return serialise_tool_error(
            DocsError(
                code=ErrorCode.INTERNAL_ERROR,
                message=f"Unexpected error in {name}: {exc}",
                suggestion="This is a server bug; check the server logs.",
                recoverable=False,
            )
        )

    return CallToolResult(content=[TextContent(type="text", text=text)])
