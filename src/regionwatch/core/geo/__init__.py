"""Offline country lookup helpers."""

from regionwatch.core.geo.countries import (
    COUNTRIES,
    BoundingBox,
    CountryMatch,
    country_at,
    country_name,
)

__all__ = [
    "COUNTRIES",
    "BoundingBox",
    "CountryMatch",
    "country_at",
    "country_name",
]
