"""MCP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState via the FastMCP lifespan context manager
- Register tools
- Serve over stdio
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from mcp.server.fastmcp import Context, FastMCP

from docsmcp import __version__
from docsmcp.cache import PageCache
from docsmcp.config import Settings
from docsmcp.fetcher import Fetcher, build_http_client
from docsmcp.handler import DocHandler
from docsmcp.state import AppState
from docsmcp.tools import TOOLS_BY_NAME, dispatch

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr; stdout is reserved for the MCP JSON-RPC stream
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


def build_state(settings: Settings) -> AppState:
    """Wire the HTTP client, cache and document handler for one server run."""
    http_client = build_http_client(settings.fetcher)
    handler = DocHandler(
        fetcher=Fetcher(http_client),
        cache=PageCache(ttl_minutes=settings.cache.ttl_minutes),
        root_url=settings.site.root_url,
        fallback_sections=settings.site.fallback_sections,
    )
    return AppState(settings=settings, handler=handler, http_client=http_client)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncGenerator[AppState, None]:
    """Create and tear down all shared resources for the server's lifetime."""
    settings = Settings()
    _setup_logging(settings)

    state = build_state(settings)

    log.info(
        "server_started",
        version=__version__,
        root_url=settings.site.root_url,
    )

    try:
        yield state
    finally:
        if state.http_client is not None:
            await state.http_client.aclose()
        log.info("server_stopping")


# ---------------------------------------------------------------------------
# FastMCP instance and tool registration
# ---------------------------------------------------------------------------

mcp = FastMCP("docsmcp", lifespan=lifespan)
# FastMCP doesn't expose a version kwarg; set it on the underlying Server
# so the MCP initialize handshake reports our version, not the SDK's.
mcp._mcp_server.version = __version__  # pyright: ignore[reportPrivateUsage]


def _handler(ctx: Context) -> DocHandler:
    state: AppState = ctx.request_context.lifespan_context
    return state.handler


@mcp.tool(name="fetch_docs", description=TOOLS_BY_NAME["fetch_docs"].description)
async def fetch_docs(path: str, ctx: Context) -> object:
    return await dispatch("fetch_docs", {"path": path}, _handler(ctx))


@mcp.tool(name="search_docs", description=TOOLS_BY_NAME["search_docs"].description)
async def search_docs(query: str, ctx: Context) -> object:
    return await dispatch("search_docs", {"query": query}, _handler(ctx))


@mcp.tool(name="list_sections", description=TOOLS_BY_NAME["list_sections"].description)
async def list_sections(ctx: Context) -> object:
    return await dispatch("list_sections", {}, _handler(ctx))


@mcp.tool(name="discover_docs", description=TOOLS_BY_NAME["discover_docs"].description)
async def discover_docs(ctx: Context) -> object:
    return await dispatch("discover_docs", {}, _handler(ctx))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
