# =============================================================================
# core/catalog.py  -  Catalog Loading & the Published Snapshot
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the travel catalog document ONCE, turns it into frozen Catalog
#   models, and publishes the result for the search engine to read.
#
# DATA SOURCE:
#   TRAVEL_CATALOG_SOURCE may be a local path or an http(s) URL.  Unset, it
#   points at the sample catalog shipped in data/.  Relative paths are
#   resolved against the project root, so the CLI and the MCP server (which
#   may be spawned from another working directory) read the same file.
#
# LIFECYCLE:
#   PENDING  ->  LOADED       (catalog published, read many times)
#            ->  UNAVAILABLE  (LoadError kept, reported once)
#   There is no way back to PENDING: no retry, no refresh.  A search that
#   runs while the store is still PENDING simply sees no catalog.
# =============================================================================

import json
import logging
import os
import urllib.request
from pathlib import Path
from typing import Optional

from core.models import BEACH, TEMPLE, Catalog, City, Country, Site

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG_SOURCE = "data/travel_recommendation_api.json"

# Load status signal for the presentation layer
PENDING = "pending"
LOADED = "loaded"
UNAVAILABLE = "unavailable"


class LoadError(Exception):
    """The catalog could not be fetched or did not have the expected shape."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


def catalog_source() -> str:
    """Return the configured catalog location (env var or the bundled sample)."""
    return os.environ.get("TRAVEL_CATALOG_SOURCE", "").strip() or DEFAULT_CATALOG_SOURCE


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


# =============================================================================
# Reading the raw document
# =============================================================================
def read_document(source: str):
    """Fetch and JSON-decode the catalog document.

    Raises:
        LoadError: non-success HTTP status, unreadable file, text that is not
            UTF-8, or invalid JSON.
    """
    try:
        if _is_url(source):
            # No timeout and no retry: the fetch completes or fails once.
            with urllib.request.urlopen(urllib.request.Request(source)) as response:
                status = getattr(response, "status", 200)
                if status < 200 or status >= 300:
                    raise LoadError(f"Network response was not ok: {status}")
                raw = response.read()
        else:
            path = Path(source)
            if not path.is_absolute():
                path = PROJECT_ROOT / path
            raw = path.read_bytes()
    except LoadError:
        raise
    except OSError as e:
        # urllib.error.HTTPError and URLError are both OSErrors.
        raise LoadError(f"Could not read catalog from {source}: {e}", cause=e) from e

    try:
        return json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise LoadError(f"Catalog at {source} is not UTF-8 text: {e}", cause=e) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Catalog at {source} is not valid JSON: {e}", cause=e) from e


# =============================================================================
# Document -> models
# =============================================================================
def _collection(document: dict, key: str) -> list:
    # Absent or null collections are empty, anything else must be a list.
    value = document.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _text(entry: dict, key: str, required: bool = False) -> str:
    value = entry.get(key)
    if value is None:
        if required:
            raise KeyError(key)
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _entry(item, what: str) -> dict:
    if not isinstance(item, dict):
        raise TypeError(f"each {what} must be an object, got {type(item).__name__}")
    return item


def _site(item, category: str) -> Site:
    entry = _entry(item, category.lower())
    return Site(
        name=_text(entry, "name", required=True),
        description=_text(entry, "description"),
        image_url=_text(entry, "imageUrl"),
        category=category,
    )


def parse_catalog(document) -> Catalog:
    """Build a Catalog from an already-decoded JSON document.

    Missing top-level collections are treated as empty.  Every entry needs a
    string `name`; `description` and `imageUrl` default to "".

    Raises:
        LoadError: the document is not shaped like a catalog.
    """
    try:
        if not isinstance(document, dict):
            raise TypeError(f"catalog must be an object, got {type(document).__name__}")

        countries = []
        for item in _collection(document, "countries"):
            entry = _entry(item, "country")
            cities = tuple(
                City(
                    name=_text(_entry(city, "city"), "name", required=True),
                    description=_text(city, "description"),
                    image_url=_text(city, "imageUrl"),
                )
                for city in _collection(entry, "cities")
            )
            countries.append(Country(name=_text(entry, "name", required=True), cities=cities))

        temples = tuple(_site(item, TEMPLE) for item in _collection(document, "temples"))
        beaches = tuple(_site(item, BEACH) for item in _collection(document, "beaches"))
    except KeyError as e:
        raise LoadError(f"Catalog entry is missing required field {e}", cause=e) from e
    except (TypeError, ValueError) as e:
        raise LoadError(f"Catalog has an unexpected structure: {e}", cause=e) from e

    return Catalog(countries=tuple(countries), temples=temples, beaches=beaches)


def load_catalog(source: str) -> Catalog:
    """Read and parse the catalog at `source` (no publishing)."""
    return parse_catalog(read_document(source))


# =============================================================================
# CatalogStore  -  the process-wide, publish-once snapshot
# =============================================================================
class CatalogStore:
    """Holds the single Catalog snapshot for the life of the process.

    `load()` runs at most once.  Later calls return the published catalog,
    or re-raise the original LoadError, without touching the source again.
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source
        self.status = PENDING
        self.error: Optional[LoadError] = None
        self._catalog: Optional[Catalog] = None

    @property
    def catalog(self) -> Optional[Catalog]:
        """The published catalog, or None while pending or after a failure."""
        return self._catalog

    def load(self) -> Catalog:
        if self.status == LOADED:
            return self._catalog
        if self.status == UNAVAILABLE:
            raise self.error

        source = self.source or catalog_source()
        try:
            catalog = load_catalog(source)
        except LoadError as e:
            logger.error("Failed to load recommendation data from %s: %s", source, e)
            self.error = e
            self.status = UNAVAILABLE
            raise

        logger.info(
            "Loaded recommendation data from %s: %d countries, %d cities, %d temples, %d beaches",
            source, len(catalog.countries), catalog.city_count,
            len(catalog.temples), len(catalog.beaches),
        )
        # Publish the snapshot before flipping the status flag.
        self._catalog = catalog
        self.status = LOADED
        return catalog


default_store = CatalogStore()


def load() -> Catalog:
    """Load the configured catalog into the process-wide store."""
    return default_store.load()


def get_catalog() -> Optional[Catalog]:
    return default_store.catalog


def load_status() -> str:
    return default_store.status
