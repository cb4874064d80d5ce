# =============================================================================
# core/results.py  -  Search Responses for Front Ends
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   core/search.py only knows about matches.  A front end (the CLI, the MCP
#   server) also has to tell three "nothing to show" situations apart:
#
#     EMPTY_QUERY   the user did not type anything        -> prompt them
#     UNAVAILABLE   the catalog never loaded (or not yet) -> failure notice
#     NO_MATCHES    a real search that found nothing       -> "no results"
#
#   run_search() makes that decision once, so every front end shows the
#   same wording for the same situation.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional

from core import catalog as catalog_module
from core.catalog import LOADED, PENDING, CatalogStore
from core.models import ResultRecord
from core.search import normalize_query, search

# Response statuses
OK = "ok"
EMPTY_QUERY = "empty_query"
UNAVAILABLE = "unavailable"
NO_MATCHES = "no_matches"

EMPTY_QUERY_MESSAGE = "Please enter a keyword and click Search."
LOAD_FAILURE_MESSAGE = "Failed to load recommendation data."
LOADING_MESSAGE = "Recommendation data is still loading. Try again in a moment."
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/140x90?text=No+Image"


def display_image_url(record: ResultRecord) -> str:
    """The record's image, or the placeholder when it has none."""
    return record.image_url or PLACEHOLDER_IMAGE_URL


def headline(count: int, query: str) -> str:
    plural = "" if count == 1 else "s"
    return f'Showing {count} recommendation{plural} for "{query}"'


@dataclass
class SearchResponse:
    """Everything a front end needs to render one search."""

    status: str
    query: str                          # Trimmed, original casing
    results: list[ResultRecord] = field(default_factory=list)
    message: str = ""

    @property
    def count(self) -> int:
        return len(self.results)

    @property
    def headline(self) -> str:
        if self.status in (OK, NO_MATCHES):
            return headline(self.count, self.query)
        return ""

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "query": self.query,
            "count": self.count,
            "headline": self.headline,
            "message": self.message,
            "results": [record.to_dict() for record in self.results],
        }


def run_search(query: Optional[str], store: Optional[CatalogStore] = None) -> SearchResponse:
    """Search the published catalog and classify the outcome.

    Args:
        query: Raw user input.
        store: Store to read the catalog from (defaults to the process-wide one).
    """
    store = store or catalog_module.default_store
    trimmed = (query or "").strip()

    if normalize_query(trimmed) is None:
        return SearchResponse(status=EMPTY_QUERY, query="", message=EMPTY_QUERY_MESSAGE)

    if store.status != LOADED:
        message = LOADING_MESSAGE if store.status == PENDING else LOAD_FAILURE_MESSAGE
        return SearchResponse(status=UNAVAILABLE, query=trimmed, message=message)

    records = search(store.catalog, trimmed)
    if not records:
        return SearchResponse(
            status=NO_MATCHES,
            query=trimmed,
            message=f'No results found for "{trimmed}".',
        )
    return SearchResponse(status=OK, query=trimmed, results=records)
