"""Deterministic merge of per-source readings into one detection result."""

from __future__ import annotations

from regionwatch.core.models.config import DEFAULT_ERROR_MESSAGE
from regionwatch.core.models.detection import (
    DetectionResult,
    DetectionSource,
    PermissionStatus,
    SourceReading,
)


def provisional_country(
    location: SourceReading,
    region: SourceReading,
) -> tuple[str | None, DetectionSource]:
    """Country and source before IP data is taken into account."""
    if location.is_present:
        return location.value, DetectionSource.LOCATION
    if region.is_present:
        return region.value, DetectionSource.REGION
    return None, DetectionSource.UNKNOWN


def merge_readings(
    *,
    location: SourceReading,
    region: SourceReading,
    primary_ip: SourceReading,
    fallback_ip: SourceReading,
    location_permission: PermissionStatus | None = None,
    error_message: str = DEFAULT_ERROR_MESSAGE,
) -> DetectionResult:
    """Combine source readings.

    Location beats region, and both beat IP. When a non-IP country and an IP
    country coexist the non-IP value is kept and the source becomes ``mixed``.
    The fallback IP reading only counts when the primary one is absent.

    Args:
        location: Country from position and reverse geocoding
        region: Country from the device locale
        primary_ip: Country from the primary IP provider
        fallback_ip: Country from the secondary IP provider
        location_permission: Permission status recorded by the location branch
        error_message: Text used when no source produced anything

    Returns:
        Final DetectionResult with ``loading=False``
    """
    if primary_ip.is_present:
        fallback_ip = SourceReading.absent("primary present")

    country, source = provisional_country(location, region)
    best_ip = primary_ip.or_else(fallback_ip)

    if best_ip.is_present:
        if country is None:
            country, source = best_ip.value, DetectionSource.IP
        else:
            source = DetectionSource.MIXED

    error = None
    if country is None and not primary_ip.is_present and not fallback_ip.is_present:
        error = error_message

    return DetectionResult(
        country=country,
        region_country=region.value,
        location_country=location.value,
        ip_country=primary_ip.value,
        ip_country_fallback=fallback_ip.value,
        source=source,
        location_permission_status=location_permission,
        error=error,
        loading=False,
        metadata={
            "reasons": {
                name: reading.reason
                for name, reading in (
                    ("location", location),
                    ("region", region),
                    ("ip", primary_ip),
                    ("ip_fallback", fallback_ip),
                )
                if not reading.is_present
            }
        },
    )
