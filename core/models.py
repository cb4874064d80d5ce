# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the search.  The catalog types are FROZEN: once the loader builds a
# Catalog, nothing downstream can change it.  Collections are tuples for the
# same reason.
#
# NAMING:
#   The catalog document uses camelCase keys ("imageUrl").  Inside Python we
#   use snake_case (image_url); the translation happens in exactly two
#   places: core/catalog.py (reading) and ResultRecord.to_dict (writing).
# =============================================================================

from dataclasses import dataclass


# -----------------------------------------------------------------------------
# Category tags
# -----------------------------------------------------------------------------
# Temples and beaches get a fixed tag from the collection they live in.
# Cities are tagged with their country's NAME, and country summaries with
# COUNTRY, so the category of a ResultRecord is a plain string.
# -----------------------------------------------------------------------------
BEACH = "Beach"
TEMPLE = "Temple"
COUNTRY = "Country"


@dataclass(frozen=True)
class City:
    """A city inside a country."""

    name: str
    description: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class Country:
    """A country and the cities it owns, in catalog order."""

    name: str
    cities: tuple[City, ...] = ()


@dataclass(frozen=True)
class Site:
    """A standalone temple or beach.

    `category` is set by the loader from the collection the site came from,
    so a Site always knows whether it is a BEACH or a TEMPLE.
    """

    name: str
    description: str
    image_url: str
    category: str


@dataclass(frozen=True)
class Catalog:
    """The whole travel dataset, read-only after load."""

    countries: tuple[Country, ...] = ()
    temples: tuple[Site, ...] = ()
    beaches: tuple[Site, ...] = ()

    @property
    def city_count(self) -> int:
        return sum(len(country.cities) for country in self.countries)


# -----------------------------------------------------------------------------
# ResultRecord  -  the only type handed to the presentation layer
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ResultRecord:
    """One search hit, normalized across cities, countries, temples, beaches."""

    title: str
    description: str
    image_url: str
    category: str

    def to_dict(self) -> dict:
        # Same key spelling as the catalog document.
        return {
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
            "category": self.category,
        }


@dataclass(frozen=True)
class QueryIntent:
    """Which categories a query asks for in bulk.

    The three flags are independent: "beach temples" sets both
    `beach` and `temple`.
    """

    beach: bool = False
    temple: bool = False
    country: bool = False
