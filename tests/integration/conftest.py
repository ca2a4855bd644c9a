"""Integration test fixtures.

Provides a DocHandler wired to a real httpx client (mocked per test with
respx), an in-memory PageCache driven by the shared FakeClock, and the
default fallback sections.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from docsmcp.cache import PageCache
from docsmcp.config import SiteSettings
from docsmcp.fetcher import Fetcher
from docsmcp.handler import DocHandler

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from conftest import FakeClock

ROOT_URL = "https://docs.example.com"


@pytest.fixture()
async def handler(clock: FakeClock) -> AsyncGenerator[DocHandler, None]:
    """DocHandler for https://docs.example.com with a controllable cache clock."""
    async with httpx.AsyncClient() as client:
        yield DocHandler(
            fetcher=Fetcher(client),
            cache=PageCache(ttl_minutes=10, clock=clock),
            root_url=ROOT_URL,
            fallback_sections=SiteSettings().fallback_sections,
        )


@pytest.fixture()
def subprocess_env() -> dict[str, str]:
    """Baseline env dict for subprocess-based MCP integration tests.

    Points the site at an unroutable address so no test ever reaches the
    real documentation site.
    """
    env = os.environ.copy()
    env["DOCSMCP__SITE__ROOT_URL"] = "http://127.0.0.1:1"
    env["DOCSMCP__LOGGING__LEVEL"] = "WARNING"
    return env
