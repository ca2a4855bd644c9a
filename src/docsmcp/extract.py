"""HTML extraction for documentation pages.

Pure functions over raw HTML: link discovery on the site root, category
derivation, title and body extraction for a single page, and snippet
extraction for search hits. No network I/O and no DOM mutation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from docsmcp.models.docs import DocSection

# Fixed prefix set; anchored at the start but not at a segment boundary,
# so "/api-reference/..." and "/guides/..." both match.
_SECTION_PREFIX_RE = re.compile(r"^/(concepts?|api|cli|examples?|getting-started|guides?)")
_WHITESPACE_RE = re.compile(r"\s+")

_TITLE_SELECTORS = ("h1", "[data-title]", "title")
_CONTENT_SELECTORS = ("main", "article", ".content, [data-content], .markdown-body")

NO_CONTENT = "No content found"
SNIPPET_BEFORE = 50
SNIPPET_AFTER = 100
SNIPPET_DEFAULT_LENGTH = 150


@dataclass(frozen=True)
class ExtractedPage:
    title: str
    text: str


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def extract_category(path: str) -> str | None:
    """Return the first non-empty path segment, or None for ``/``."""
    segments = [segment for segment in path.split("/") if segment]
    return segments[0] if segments else None


def is_doc_link(href: str) -> bool:
    """Check whether a root-relative href points at a documentation page."""
    return "/docs/" in href or _SECTION_PREFIX_RE.match(href) is not None


def discover_sections(html: str) -> list[DocSection]:
    """Collect documentation sections linked from a page.

    Links are kept in document order, de-duplicated by path (first anchor
    text wins) and returned sorted by path.
    """
    seen: dict[str, DocSection] = {}

    for anchor in _soup(html).find_all("a", href=True):
        href = anchor["href"]
        text = anchor.get_text().strip()

        if not href or not text:
            continue
        if not href.startswith("/") or href.startswith("//"):
            continue
        if not is_doc_link(href):
            continue
        if href in seen:
            continue

        seen[href] = DocSection(path=href, title=text, category=extract_category(href))

    return sorted(seen.values(), key=lambda section: section.path)


def clean_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_page(html: str) -> ExtractedPage:
    """Extract the title and normalised body text of a documentation page.

    The title falls back from the first ``<h1>`` to a ``[data-title]``
    element to the document ``<title>``; an empty match counts as missing.
    The body is taken from the first matching container in order ``main``,
    ``article``, then the content/markdown-body selectors. A page with no
    container yields the ``No content found`` placeholder.
    """
    soup = _soup(html)

    title = ""
    for selector in _TITLE_SELECTORS:
        element = soup.select_one(selector)
        if element is not None:
            title = element.get_text().strip()
            if title:
                break

    text = ""
    for selector in _CONTENT_SELECTORS:
        container = soup.select_one(selector)
        if container is not None:
            text = clean_text(container.get_text())
            break

    return ExtractedPage(title=title, text=text or NO_CONTENT)


def extract_snippet(text: str, query: str, length: int = SNIPPET_DEFAULT_LENGTH) -> str:
    """Return an excerpt of ``text`` around the first occurrence of ``query``.

    Matching is case-insensitive. Without a match the first ``length``
    characters are returned with a trailing ellipsis.
    """
    index = text.lower().find(query.lower())
    if index == -1:
        return text[:length] + "..."

    start = max(0, index - SNIPPET_BEFORE)
    end = min(len(text), index + len(query) + SNIPPET_AFTER)
    return "..." + text[start:end] + "..."
