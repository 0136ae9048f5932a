"""Country resolution pipeline."""

from regionwatch.core.resolver.ip_lookup import IpCountryLookup, IpReadings, extract_country
from regionwatch.core.resolver.location import LocationProbe, LocationReading, read_locale_region
from regionwatch.core.resolver.merge import merge_readings, provisional_country
from regionwatch.core.resolver.resolver import CountryResolver, ResolverAlreadyStartedError

__all__ = [
    "CountryResolver",
    "IpCountryLookup",
    "IpReadings",
    "LocationProbe",
    "LocationReading",
    "ResolverAlreadyStartedError",
    "extract_country",
    "merge_readings",
    "provisional_country",
    "read_locale_region",
]
