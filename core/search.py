# =============================================================================
# core/search.py  -  Keyword Search over the Travel Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a free-text query into an ordered, de-duplicated list of
#   ResultRecords.  Pure functions only: no I/O, no shared state, and the
#   catalog is never modified.  The same (catalog, query) always produces the
#   same list.
#
# THE PIPELINE:
#   1. normalize_query   "  Beaches " -> "beaches"   (None when blank)
#   2. classify_query    which categories were asked for by keyword
#   3. bulk_matches      every item of each requested category
#   4. generic_matches   substring hits on names/descriptions (always runs)
#   5. dedupe_by_title   first occurrence of each title wins
#
# ORDER MATTERS:
#   Bulk records come BEFORE generic records, so when both produce the same
#   title the bulk version is the one the user sees.
# =============================================================================

import logging
from typing import Iterable, Optional

from core.models import (
    BEACH,
    COUNTRY,
    TEMPLE,
    Catalog,
    Country,
    QueryIntent,
    ResultRecord,
    Site,
)

logger = logging.getLogger(__name__)

BEACH_KEYWORDS = ("beach", "beaches")
TEMPLE_KEYWORDS = ("temple", "temples")
COUNTRY_KEYWORDS = ("country", "countries")


def normalize_query(query: Optional[str]) -> Optional[str]:
    """Trim and lower-case a raw query.

    Returns None for a missing or whitespace-only query; that is the
    "empty query" signal, distinct from a query with no matches.
    """
    trimmed = (query or "").strip()
    if not trimmed:
        return None
    return trimmed.lower()


def classify_query(normalized_query: str) -> QueryIntent:
    """Detect bulk intents by plain substring containment."""
    return QueryIntent(
        beach=any(keyword in normalized_query for keyword in BEACH_KEYWORDS),
        temple=any(keyword in normalized_query for keyword in TEMPLE_KEYWORDS),
        country=any(keyword in normalized_query for keyword in COUNTRY_KEYWORDS),
    )


# -----------------------------------------------------------------------------
# Record builders
# -----------------------------------------------------------------------------
def _site_record(site: Site) -> ResultRecord:
    return ResultRecord(
        title=site.name,
        description=site.description,
        image_url=site.image_url,
        category=site.category,
    )


def _country_record(country: Country) -> ResultRecord:
    city_names = ", ".join(city.name for city in country.cities)
    return ResultRecord(
        title=country.name,
        description="Cities: " + city_names,
        image_url=country.cities[0].image_url if country.cities else "",
        category=COUNTRY,
    )


def _site_matches(site: Site, q: str) -> bool:
    return q in site.name.lower() or q in site.description.lower()


# -----------------------------------------------------------------------------
# The two passes
# -----------------------------------------------------------------------------
def bulk_matches(catalog: Catalog, intent: QueryIntent) -> list[ResultRecord]:
    """Whole categories requested by keyword, in beach/temple/country order."""
    records = []
    if intent.beach:
        records.extend(_site_record(beach) for beach in catalog.beaches)
    if intent.temple:
        records.extend(_site_record(temple) for temple in catalog.temples)
    if intent.country:
        records.extend(_country_record(country) for country in catalog.countries)
    return records


def generic_matches(catalog: Catalog, q: str) -> list[ResultRecord]:
    """Substring matches across cities, temples and beaches.

    A city also matches when its COUNTRY name contains the query, so
    "japan" returns every Japanese city tagged with category "Japan".
    """
    records = []
    for country in catalog.countries:
        country_hit = q in country.name.lower()
        for city in country.cities:
            if country_hit or q in city.name.lower() or q in city.description.lower():
                records.append(ResultRecord(
                    title=city.name,
                    description=city.description,
                    image_url=city.image_url,
                    category=country.name,
                ))

    records.extend(_site_record(temple) for temple in catalog.temples if _site_matches(temple, q))
    records.extend(_site_record(beach) for beach in catalog.beaches if _site_matches(beach, q))
    return records


def dedupe_by_title(records: Iterable[ResultRecord]) -> list[ResultRecord]:
    """Keep the first record for each title, preserving order."""
    seen = set()
    unique = []
    for record in records:
        if record.title in seen:
            continue
        seen.add(record.title)
        unique.append(record)
    return unique


# =============================================================================
# PUBLIC API
# =============================================================================
def search(catalog: Optional[Catalog], query: Optional[str]) -> list[ResultRecord]:
    """Search the catalog for `query`.

    Never raises.  An unavailable catalog (None), a blank query and a query
    without hits all give an empty list; telling those apart is up to the
    caller (see core.results.run_search).

    Args:
        catalog: The loaded catalog, or None if it is not available.
        query: The raw text the user typed.

    Returns:
        ResultRecords with unique titles: bulk-category records first, then
        generic substring matches.  No count limit is applied.
    """
    q = normalize_query(query)
    if catalog is None or q is None:
        return []

    intent = classify_query(q)
    unique = dedupe_by_title(bulk_matches(catalog, intent) + generic_matches(catalog, q))

    logger.debug("Search for %r -> found %d items", query, len(unique))
    return unique
