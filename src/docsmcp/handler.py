"""Document handler: discovery, fetch, search and listing for one site.

DocHandler owns the discovered section set and the fetch cache. It performs
HTTP fetches through the injected fetcher, parses HTML with the pure
functions in ``docsmcp.extract`` and returns plain text results.
No MCP or FastMCP imports; ``docsmcp.tools`` handles the tool wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from docsmcp.errors import DiscoveryError, DocsError, FetchError, InvalidArgumentError
from docsmcp.extract import discover_sections, extract_page, extract_snippet
from docsmcp.models.docs import SearchResult
from docsmcp.models.tools import FetchDocsInput, SearchDocsInput

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docsmcp.models.docs import DocSection
    from docsmcp.protocols import CacheProtocol, FetcherProtocol

log = structlog.get_logger()

OTHER_CATEGORY = "Other"


def _first_error(exc: ValidationError) -> str:
    return str(exc.errors()[0]["msg"]).removeprefix("Value error, ")


class DocHandler:
    """Section index and cache-backed page access for a documentation site."""

    def __init__(
        self,
        fetcher: FetcherProtocol,
        cache: CacheProtocol,
        root_url: str,
        fallback_sections: Sequence[DocSection] = (),
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self.root_url = root_url.rstrip("/")
        self._fallback_sections = list(fallback_sections)
        self._sections: list[DocSection] = []
        self._loaded = False

    @property
    def sections(self) -> list[DocSection]:
        return list(self._sections)

    @property
    def loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    async def discover(self) -> str:
        """Crawl the site root and replace the section set.

        All-or-nothing: on failure the previous sections and loaded state
        are left untouched and DiscoveryError is raised.
        """
        url = self.root_url + "/"
        try:
            html = await self._fetcher.fetch(url)
            sections = discover_sections(html)
        except DocsError as exc:
            log.warning("discovery_failed", url=url, code=exc.code, message=exc.message)
            raise DiscoveryError(f"Failed to discover documentation: {exc.message}") from exc
        except Exception as exc:
            log.warning("discovery_failed", url=url, exc_info=True)
            raise DiscoveryError(f"Failed to discover documentation: {exc}") from exc

        self._sections = sections
        self._loaded = True
        log.info("discovery_complete", url=url, section_count=len(sections))

        lines = [
            f"• **{s.title}** - {s.path}" + (f" ({s.category})" if s.category else "")
            for s in sections
        ]
        return f"Discovered {len(sections)} documentation sections:\n\n" + "\n".join(lines)

    async def ensure_loaded(self) -> None:
        """Run discovery once if it has never succeeded; otherwise do nothing."""
        if not self._loaded:
            await self.discover()

    # ------------------------------------------------------------------
    # Fetch
    # ------------------------------------------------------------------

    async def fetch(self, path: str | None) -> str:
        """Return the formatted content of one documentation page.

        Served from the cache while the entry is younger than the TTL.
        Failures are never cached.
        """
        try:
            validated = FetchDocsInput(path=path or "")
        except ValidationError as exc:
            raise InvalidArgumentError(
                _first_error(exc),
                suggestion="Provide a documentation path such as /concepts/components.",
            ) from exc

        path = validated.path
        cached = self._cache.get(path)
        if cached is not None:
            log.debug("cache_hit", path=path)
            return cached

        url = self.root_url + path
        log.info("cache_miss_fetching", path=path, url=url)
        try:
            html = await self._fetcher.fetch(url)
            page = extract_page(html)
        except FetchError as exc:
            raise FetchError(
                f"Failed to fetch documentation: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except Exception as exc:
            raise FetchError(f"Failed to fetch documentation: {exc}") from exc

        result = f"# {page.title}\n\nPath: {path}\nURL: {url}\n\n{page.text}"
        self._cache.set(path, result)
        return result

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, query: str | None) -> str:
        """Case-insensitive substring search over every known section.

        A page that fails to fetch is logged and skipped; the search as a
        whole only fails on invalid input or a failed first discovery.
        """
        try:
            validated = SearchDocsInput(query=query or "")
        except ValidationError as exc:
            raise InvalidArgumentError(
                _first_error(exc),
                suggestion="Provide a non-empty search term.",
            ) from exc

        query = validated.query
        await self.ensure_loaded()

        candidates = self._sections or self._fallback_sections
        needle = query.lower()
        results: list[SearchResult] = []

        for section in candidates:
            try:
                text = await self.fetch(section.path)
            except DocsError as exc:
                log.warning(
                    "search_candidate_failed",
                    path=section.path,
                    code=exc.code,
                    message=exc.message,
                )
                continue

            if needle in text.lower():
                results.append(
                    SearchResult(
                        path=section.path,
                        title=section.title,
                        category=section.category,
                        snippet=extract_snippet(text, query),
                    )
                )

        log.info(
            "search_complete",
            query=query,
            candidate_count=len(candidates),
            result_count=len(results),
        )

        if not results:
            return f'No results found for "{query}"'

        blocks = [
            f"**{r.title}** ({r.path})"
            + (f" [{r.category}]" if r.category else "")
            + f"\n{r.snippet}\n"
            for r in results
        ]
        return f'Found {len(results)} results for "{query}":\n\n' + "\n".join(blocks)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def group_sections(self) -> dict[str, list[DocSection]]:
        """Group the section set by category, keeping set order within groups."""
        grouped: dict[str, list[DocSection]] = {}
        for section in self._sections:
            grouped.setdefault(section.category or OTHER_CATEGORY, []).append(section)
        return grouped

    async def list_sections(self) -> str:
        await self.ensure_loaded()

        if not self._sections:
            return "No documentation sections discovered. Try running discover_docs first."

        output = "\n\n".join(
            f"## {category}\n" + "\n".join(f"• **{s.title}** - {s.path}" for s in members)
            for category, members in self.group_sections().items()
        )
        return (
            f"Available documentation sections ({len(self._sections)} total):\n\n{output}"
        )
