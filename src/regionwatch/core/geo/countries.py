"""Country bounding boxes used for offline reverse geocoding.

Each country maps to its name and one or more boxes of
(min_lat, max_lat, min_lon, max_lon) in decimal degrees. Boxes overlap near
borders, so a position is attributed to the smallest box containing it.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)

BoundingBox = tuple[float, float, float, float]

COUNTRIES: dict[str, tuple[str, tuple[BoundingBox, ...]]] = {
    # Americas
    "US": (
        "United States",
        (
            (24.4, 49.0, -124.8, -66.9),
            (51.2, 71.4, -179.2, -129.9),
            (18.9, 22.3, -160.3, -154.8),
        ),
    ),
    "CA": ("Canada", ((41.7, 83.1, -141.0, -52.6),)),
    "MX": ("Mexico", ((14.5, 32.7, -118.4, -86.7),)),
    "BR": ("Brazil", ((-33.8, 5.3, -74.0, -34.8),)),
    "AR": ("Argentina", ((-55.1, -21.8, -73.6, -53.6),)),
    "CO": ("Colombia", ((-4.2, 12.5, -79.0, -66.9),)),
    "CL": ("Chile", ((-56.0, -17.5, -75.7, -66.4),)),
    "PE": ("Peru", ((-18.4, -0.04, -81.4, -68.7),)),
    "VE": ("Venezuela", ((0.6, 12.2, -73.4, -59.8),)),
    "CU": ("Cuba", ((19.8, 23.3, -85.0, -74.1),)),
    "DO": ("Dominican Republic", ((17.5, 19.95, -72.0, -68.3),)),
    "PR": ("Puerto Rico", ((17.9, 18.5, -67.3, -65.2),)),
    "JM": ("Jamaica", ((17.7, 18.5, -78.4, -76.2),)),
    "PA": ("Panama", ((7.2, 9.65, -83.05, -77.2),)),
    "CR": ("Costa Rica", ((8.0, 11.2, -85.95, -82.55),)),
    "GT": ("Guatemala", ((13.7, 17.8, -92.3, -88.2),)),
    "EC": ("Ecuador", ((-5.0, 1.7, -81.1, -75.2),)),
    "UY": ("Uruguay", ((-35.0, -30.1, -58.5, -53.1),)),
    "PY": ("Paraguay", ((-27.6, -19.3, -62.65, -54.3),)),
    "BO": ("Bolivia", ((-22.9, -9.7, -69.6, -57.5),)),
    # Europe
    "GB": ("United Kingdom", ((49.9, 60.9, -8.2, 1.8),)),
    "DE": ("Germany", ((47.3, 55.1, 5.9, 15.0),)),
    "FR": ("France", ((42.3, 51.1, -5.2, 8.2), (41.3, 43.1, 8.5, 9.6))),
    "IT": ("Italy", ((36.6, 47.1, 6.6, 18.5),)),
    "ES": ("Spain", ((36.0, 43.8, -9.3, 3.3), (27.6, 29.5, -18.2, -13.4))),
    "PT": ("Portugal", ((36.9, 42.2, -9.5, -6.2),)),
    "NL": ("Netherlands", ((50.75, 53.55, 3.36, 7.23),)),
    "BE": ("Belgium", ((49.5, 51.5, 2.5, 6.4),)),
    "CH": ("Switzerland", ((45.8, 47.8, 5.95, 10.5),)),
    "AT": ("Austria", ((46.37, 47.6, 9.53, 13.0), (46.37, 49.02, 13.0, 17.16))),
    "IE": ("Ireland", ((51.4, 55.4, -10.5, -6.0),)),
    "SE": ("Sweden", ((55.3, 69.1, 11.1, 24.2),)),
    "NO": ("Norway", ((57.9, 71.2, 4.6, 31.1),)),
    "DK": ("Denmark", ((54.5, 57.8, 8.0, 12.7),)),
    "FI": ("Finland", ((59.8, 70.1, 20.6, 31.6),)),
    "IS": ("Iceland", ((63.3, 66.6, -24.5, -13.5),)),
    "PL": ("Poland", ((49.0, 54.8, 14.1, 24.2),)),
    "CZ": ("Czech Republic", ((48.55, 51.06, 12.09, 18.86),)),
    "HU": ("Hungary", ((45.7, 48.6, 16.1, 22.9),)),
    "RO": ("Romania", ((43.6, 48.3, 20.2, 29.7),)),
    "BG": ("Bulgaria", ((41.2, 44.2, 22.4, 28.6),)),
    "SK": ("Slovakia", ((47.7, 49.6, 16.8, 22.6),)),
    "HR": ("Croatia", ((42.4, 46.6, 13.5, 19.4),)),
    "SI": ("Slovenia", ((45.4, 46.9, 13.4, 16.6),)),
    "RS": ("Serbia", ((42.2, 46.2, 18.8, 23.0),)),
    "UA": ("Ukraine", ((44.4, 52.4, 22.1, 40.2),)),
    "RU": ("Russia", ((41.2, 81.9, 19.6, 180.0), (64.3, 71.6, -180.0, -168.9))),
    "BY": ("Belarus", ((51.3, 56.2, 23.2, 32.8),)),
    "GR": ("Greece", ((34.8, 41.7, 19.4, 28.2),)),
    "TR": ("Turkey", ((35.8, 42.1, 26.0, 44.8),)),
    "CY": ("Cyprus", ((34.6, 35.7, 32.3, 34.6),)),
    "MT": ("Malta", ((35.8, 36.1, 14.2, 14.6),)),
    # Asia
    "JP": ("Japan", ((24.0, 45.6, 122.9, 154.0),)),
    "KR": ("South Korea", ((33.1, 38.6, 124.6, 131.9),)),
    "CN": ("China", ((18.2, 53.6, 73.5, 134.8),)),
    "TW": ("Taiwan", ((21.9, 25.3, 120.0, 122.0),)),
    "HK": ("Hong Kong", ((22.15, 22.56, 113.8, 114.4),)),
    "MO": ("Macau", ((22.1, 22.22, 113.53, 113.6),)),
    "MN": ("Mongolia", ((41.6, 52.2, 87.7, 119.9),)),
    "SG": ("Singapore", ((1.16, 1.47, 103.6, 104.1),)),
    "MY": ("Malaysia", ((0.85, 7.4, 99.6, 119.3),)),
    "TH": ("Thailand", ((5.6, 20.5, 97.3, 105.6),)),
    "VN": ("Vietnam", ((8.4, 23.4, 102.1, 109.5),)),
    "ID": ("Indonesia", ((-11.0, 6.1, 95.0, 141.0),)),
    "PH": ("Philippines", ((4.6, 21.1, 116.9, 126.6),)),
    "MM": ("Myanmar", ((9.8, 28.5, 92.2, 101.2),)),
    "KH": ("Cambodia", ((10.4, 14.7, 102.3, 107.6),)),
    "LA": ("Laos", ((13.9, 22.5, 100.1, 107.7),)),
    "BN": ("Brunei", ((4.0, 5.05, 114.1, 115.4),)),
    "IN": ("India", ((6.7, 35.5, 68.1, 97.4),)),
    "PK": ("Pakistan", ((23.7, 37.1, 60.9, 77.8),)),
    "BD": ("Bangladesh", ((20.7, 26.6, 88.0, 92.7),)),
    "LK": ("Sri Lanka", ((5.9, 9.8, 79.7, 81.9),)),
    "NP": ("Nepal", ((26.3, 30.4, 80.1, 88.2),)),
    "KZ": ("Kazakhstan", ((40.6, 55.4, 46.5, 87.3),)),
    "UZ": ("Uzbekistan", ((37.2, 45.6, 56.0, 73.1),)),
    # Middle East
    "AE": ("United Arab Emirates", ((22.6, 26.1, 51.6, 56.4),)),
    "SA": ("Saudi Arabia", ((16.4, 32.2, 34.5, 55.7),)),
    "IL": ("Israel", ((29.5, 33.3, 34.3, 35.9),)),
    "QA": ("Qatar", ((24.5, 26.2, 50.7, 51.7),)),
    "KW": ("Kuwait", ((28.5, 30.1, 46.5, 48.4),)),
    "BH": ("Bahrain", ((25.8, 26.3, 50.4, 50.7),)),
    "OM": ("Oman", ((16.6, 26.4, 52.0, 59.8),)),
    "JO": ("Jordan", ((29.2, 33.4, 34.9, 39.3),)),
    "LB": ("Lebanon", ((33.05, 34.7, 35.1, 36.6),)),
    "IR": ("Iran", ((25.1, 39.8, 44.0, 63.3),)),
    "IQ": ("Iraq", ((29.1, 37.4, 38.8, 48.6),)),
    # Oceania
    "AU": ("Australia", ((-43.7, -10.7, 113.3, 153.6),)),
    "NZ": ("New Zealand", ((-47.3, -34.4, 166.4, 178.6),)),
    # Africa
    "ZA": ("South Africa", ((-34.8, -22.1, 16.5, 32.9),)),
    "EG": ("Egypt", ((22.0, 31.7, 24.7, 36.9),)),
    "NG": ("Nigeria", ((4.3, 13.9, 2.7, 14.7),)),
    "KE": ("Kenya", ((-4.7, 5.0, 33.9, 41.9),)),
    "MA": ("Morocco", ((27.7, 35.9, -13.2, -1.0),)),
    "DZ": ("Algeria", ((19.0, 37.1, -8.7, 12.0),)),
    "TN": ("Tunisia", ((30.2, 37.4, 7.5, 11.6),)),
    "GH": ("Ghana", ((4.7, 11.2, -3.3, 1.2),)),
    "ET": ("Ethiopia", ((3.4, 14.9, 33.0, 48.0),)),
    "TZ": ("Tanzania", ((-11.7, -1.0, 29.3, 40.4),)),
    "UG": ("Uganda", ((-1.5, 4.2, 29.6, 35.0),)),
}


@dataclass(frozen=True)
class CountryMatch:
    """Country whose bounds contain a position."""

    country_code: str
    country_name: str


def _area(box: BoundingBox) -> float:
    min_lat, max_lat, min_lon, max_lon = box
    return (max_lat - min_lat) * (max_lon - min_lon)


# Sorted smallest first; the first box containing a position wins
_BOXES_BY_AREA: list[tuple[BoundingBox, str]] = sorted(
    ((box, code) for code, (_, boxes) in COUNTRIES.items() for box in boxes),
    key=lambda item: _area(item[0]),
)


def country_at(latitude: float, longitude: float) -> CountryMatch | None:
    """Find the country containing a position.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        CountryMatch for the smallest containing box, or None outside every box
    """
    for (min_lat, max_lat, min_lon, max_lon), code in _BOXES_BY_AREA:
        if min_lat <= latitude <= max_lat and min_lon <= longitude <= max_lon:
            return CountryMatch(country_code=code, country_name=COUNTRIES[code][0])

    logger.debug("No country contains position", latitude=latitude, longitude=longitude)
    return None


def country_name(country_code: str) -> str | None:
    """Get the country name for an ISO code."""
    entry = COUNTRIES.get(country_code.upper())
    return entry[0] if entry else None
