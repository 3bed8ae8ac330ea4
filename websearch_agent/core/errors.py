"""
Search errors raised between the search client, the formatter and the handler.

The search handler catches SearchError (and transport errors) and turns them into
an apology utterance, so none of these reach the HTTP layer.
"""


class SearchError(Exception):
    """Base class for failures while producing a web search answer."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SearchProviderError(SearchError):
    """Raised when the search provider is unreachable or answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class NoResultsError(SearchError):
    """Raised when the provider answered but no field had usable content."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"No search results found for: {query}")
