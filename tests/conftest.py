"""Shared test fixtures for the docsmcp test suite."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

LANDING_HTML = """
<html>
  <head><title>Example Docs</title></head>
  <body>
    <nav>
      <a href="/getting-started/quickstart">Quickstart</a>
      <a href="/concepts/components">Components</a>
      <a href="/concepts/components">Components again</a>
      <a href="/api-reference/react-hooks">React Hooks</a>
      <a href="/docs/intro">Intro</a>
      <a href="/blog/post">Blog post</a>
      <a href="//cdn.example.com/docs/asset">CDN</a>
      <a href="https://github.com/example">GitHub</a>
      <a href="/guides/theming"></a>
      <a href="/cli/init">CLI init</a>
    </nav>
  </body>
</html>
"""


def doc_page(title: str, body: str) -> str:
    """Build a minimal documentation page with an h1 and a main container."""
    return (
        f"<html><head><title>{title} | Example</title></head>"
        f"<body><nav>Menu</nav><main><h1>{title}</h1><p>{body}</p></main></body></html>"
    )


@pytest.fixture()
def landing_html() -> str:
    return LANDING_HTML


@pytest.fixture()
def make_page():
    return doc_page


class FakeClock:
    """Manually advanced clock for cache TTL tests."""

    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
