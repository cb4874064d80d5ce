# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the catalog search as MCP tools.  Each tool is a thin wrapper
#   around core/: it logs the call, runs the core function, and returns a
#   plain dict that serializes straight to JSON.
#
# HOW IT WORKS (the flow):
#   1. The server starts and loads the catalog once (core/catalog.py)
#   2. An MCP client calls a tool by name (e.g., "search_travel_recommendations")
#   3. FastMCP routes the call to the decorated function below
#   4. The function asks core/ for a SearchResponse and returns its dict
#
# TOOL NAMING CONVENTIONS:
#   - get_*    -> Read-only retrieval (idempotent, safe to retry)
#   - search_* -> Query with filters (idempotent, safe to retry)
#   Both tools here are read-only; no tool ever raises to the client, a
#   failed load is reported through the "status" field instead.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server       (stdio transport)
# =============================================================================

import json
import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

from core import catalog
from core.catalog import LoadError
from core.results import run_search

# =============================================================================
# Logging Setup
# =============================================================================
# Log to STDERR: STDOUT carries the MCP protocol, and stray log lines there
# would corrupt the JSON message stream.
#
# ANSI colors: CYAN for requests, GREEN for responses, YELLOW for status.
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  -> {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  <- {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


mcp = FastMCP("travel-recommendation")


# =============================================================================
# TOOL 1: search_travel_recommendations
# =============================================================================
@mcp.tool()
def search_travel_recommendations(query: str) -> dict:
    """Search the travel catalog for cities, countries, temples and beaches.

    Matching is case-insensitive substring matching on names and
    descriptions.  Queries containing "beach", "temple" or "country"
    (or their plurals) also return every item of that category.

    Args:
        query: Free text, e.g. "beach", "japan", "temples", "countries".

    Returns:
        A dict with:
          - status: "ok", "no_matches", "empty_query" or "unavailable"
          - query, count, headline, message
          - results: list of {title, description, imageUrl, category}
    """
    _log_request("search_travel_recommendations", query=query)

    response = run_search(query, catalog.default_store)
    _log_status(f"status={response.status}, count={response.count}")
    return _log_response("search_travel_recommendations", response.to_dict())


# =============================================================================
# TOOL 2: get_catalog_status
# =============================================================================
@mcp.tool()
def get_catalog_status() -> dict:
    """Report whether the travel catalog is loaded and how big it is.

    Returns:
        A dict with:
          - status: "pending", "loaded" or "unavailable"
          - countries, cities, temples, beaches: collection sizes (0 unless loaded)
          - error: the load failure message, only when unavailable
    """
    _log_request("get_catalog_status")

    store = catalog.default_store
    loaded = store.catalog
    result = {
        "status": store.status,
        "countries": len(loaded.countries) if loaded else 0,
        "cities": loaded.city_count if loaded else 0,
        "temples": len(loaded.temples) if loaded else 0,
        "beaches": len(loaded.beaches) if loaded else 0,
    }
    if store.error is not None:
        result["error"] = str(store.error)
    return _log_response("get_catalog_status", result)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    load_dotenv()
    try:
        catalog.load()
    except LoadError:
        # Keep serving: tools report the "unavailable" status.
        _log_status("Catalog unavailable; searches will return no results")
    mcp.run()
