"""Detection result models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class DetectionSource(str, Enum):
    """Which strategy supplied the final country."""

    LOCATION = "location"
    REGION = "region"
    IP = "ip"
    MIXED = "mixed"
    UNKNOWN = "unknown"


class PermissionStatus(str, Enum):
    """Permission state reported by a capability provider."""

    GRANTED = "granted"
    DENIED = "denied"
    UNDETERMINED = "undetermined"


class CapabilityStatus(str, Enum):
    """Secondary capability status as tracked by the notifier."""

    CHECKING = "checking"
    GRANTED = "granted"
    DENIED = "denied"
    UNDETERMINED = "undetermined"

    @classmethod
    def from_permission(cls, status: PermissionStatus) -> CapabilityStatus:
        """Map a provider permission to a capability status."""
        return cls(status.value)


@dataclass(frozen=True)
class SourceReading:
    """Value read from one detection source, or the absence of one."""

    value: str | None = None
    reason: str | None = None

    @classmethod
    def of(cls, value: Any) -> SourceReading:
        """Wrap a raw value; blank or non-string values are absent."""
        if isinstance(value, str) and value.strip():
            return cls(value=value.strip())
        return cls(reason="empty")

    @classmethod
    def absent(cls, reason: str = "empty") -> SourceReading:
        return cls(reason=reason)

    @property
    def is_present(self) -> bool:
        return self.value is not None

    def or_else(self, other: SourceReading) -> SourceReading:
        """Return this reading if present, otherwise ``other``."""
        return self if self.is_present else other


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one resolver run.

    Produced once per activation and never mutated afterwards.
    """

    country: str | None = None
    region_country: str | None = None
    location_country: str | None = None
    ip_country: str | None = None
    ip_country_fallback: str | None = None
    source: DetectionSource = DetectionSource.UNKNOWN
    location_permission_status: PermissionStatus | None = None
    error: str | None = None
    loading: bool = False
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _freeze(self.metadata))

    @classmethod
    def pending(cls) -> DetectionResult:
        """Initial value before the resolver has finished."""
        return cls(loading=True)

    @property
    def has_any_country(self) -> bool:
        """Check if any source produced a country."""
        return any(
            (
                self.country,
                self.region_country,
                self.location_country,
                self.ip_country,
                self.ip_country_fallback,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "country": self.country,
            "region_country": self.region_country,
            "location_country": self.location_country,
            "ip_country": self.ip_country,
            "ip_country_fallback": self.ip_country_fallback,
            "source": self.source.value,
            "location_permission_status": (
                self.location_permission_status.value
                if self.location_permission_status
                else None
            ),
            "error": self.error,
            "loading": self.loading,
        }


def _freeze(value: Any) -> Any:
    """Wrap mappings, nested ones included, in read-only proxies."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value
