"""Application state container.

AppState is created once at server startup (inside the FastMCP lifespan context
manager) and injected into every tool call via the MCP Context object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from docsmcp.config import Settings
    from docsmcp.handler import DocHandler


@dataclass
class AppState:
    """Holds all shared runtime state. Passed to every tool call."""

    settings: Settings
    handler: DocHandler
    http_client: httpx.AsyncClient | None = None
