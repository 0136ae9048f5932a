"""Notification message composition."""

from __future__ import annotations

from regionwatch.core.models.config import NotifierConfig
from regionwatch.core.models.detection import CapabilityStatus, DetectionResult


def has_information(result: DetectionResult, capability: CapabilityStatus) -> bool:
    """Check if there is anything worth showing yet."""
    return bool(
        result.has_any_country
        or result.error
        or capability != CapabilityStatus.CHECKING
    )


def source_parts(result: DetectionResult) -> list[str]:
    """Per-source labels for the values that are present."""
    parts = []
    if result.location_country:
        parts.append(f"Location: {result.location_country}")
    if result.region_country:
        parts.append(f"Device region: {result.region_country}")
    if result.ip_country:
        parts.append(f"IP: {result.ip_country}")
    elif result.ip_country_fallback:
        parts.append(f"IP (fallback): {result.ip_country_fallback}")
    return parts


def compose_message(
    result: DetectionResult,
    capability: CapabilityStatus,
    config: NotifierConfig | None = None,
) -> str:
    """Build the notification body.

    Args:
        result: Current detection result (may still be pending)
        capability: Current secondary capability status
        config: Notification texts

    Returns:
        Newline separated message; identical inputs give identical output
    """
    config = config or NotifierConfig()
    lines = [config.advisory]

    if result.country:
        lines.append(f"Detected region/country: {result.country}.")
    else:
        parts = source_parts(result)
        if parts:
            lines.append(config.separator.join(parts))

    permission = (
        result.location_permission_status.value
        if result.location_permission_status
        else "unknown"
    )
    lines.append(
        f"Location permission: {permission}. "
        f"{config.capability_label} permission: {capability.value}."
    )

    if result.error:
        lines.append(result.error)

    return "\n".join(lines)
