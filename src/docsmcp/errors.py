from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    PAGE_FETCH_FAILED = "PAGE_FETCH_FAILED"
    DISCOVERY_FAILED = "DISCOVERY_FAILED"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DocsError(Exception):
    """Raised by the document handler for all expected failure conditions.

    Caught by ``tools.dispatch`` and serialised into the MCP error result.
    Business logic lets it propagate so the host receives a structured
    error with a suggestion instead of a raw exception.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }


class InvalidArgumentError(DocsError):
    """A required tool argument is missing or empty."""

    def __init__(self, message: str, suggestion: str) -> None:
        super().__init__(ErrorCode.INVALID_INPUT, message, suggestion, recoverable=False)


class FetchError(DocsError):
    """Non-success HTTP status or transport failure while fetching a page."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        if status_code == 404:
            super().__init__(
                ErrorCode.PAGE_NOT_FOUND,
                message,
                "The requested documentation page does not exist. "
                "Use list_sections to see known paths.",
                recoverable=False,
            )
        else:
            super().__init__(
                ErrorCode.PAGE_FETCH_FAILED,
                message,
                "The documentation site may be temporarily unavailable. Try again later.",
                recoverable=True,
            )
        self.status_code = status_code


class DiscoveryError(DocsError):
    """Crawling the site root failed. The previous section set is kept."""

    def __init__(self, message: str) -> None:
        super().__init__(
            ErrorCode.DISCOVERY_FAILED,
            message,
            "Run discover_docs again once the documentation site is reachable.",
            recoverable=True,
        )


class UnknownToolError(DocsError):
    def __init__(self, name: str) -> None:
        super().__init__(
            ErrorCode.UNKNOWN_TOOL,
            f"Unknown tool: {name}",
            "Available tools: fetch_docs, search_docs, list_sections, discover_docs.",
            recoverable=False,
        )
