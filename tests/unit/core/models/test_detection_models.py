"""Tests for detection and notification models."""

from __future__ import annotations

import pytest

from regionwatch.core.models.detection import (
    CapabilityStatus,
    DetectionResult,
    DetectionSource,
    PermissionStatus,
    SourceReading,
)
from regionwatch.core.models.notification import NotificationState, NotifierPhase


class TestSourceReading:
    """Tests for the per-source reading type."""

    def test_of_keeps_non_empty_string(self):
        """Test that a real value is present."""
        reading = SourceReading.of("France")
        assert reading.is_present
        assert reading.value == "France"
        assert reading.reason is None

    def test_of_strips_whitespace(self):
        """Test that surrounding whitespace is removed."""
        assert SourceReading.of("  DE ").value == "DE"

    def test_of_treats_blank_and_non_strings_as_absent(self):
        """Test that empty, blank, None and non-string values are absent."""
        for raw in ("", "   ", None, 42, {"country": "DE"}):
            reading = SourceReading.of(raw)
            assert not reading.is_present
            assert reading.value is None

    def test_absent_records_reason(self):
        """Test absent readings keep their reason."""
        reading = SourceReading.absent("HTTP 500")
        assert not reading.is_present
        assert reading.reason == "HTTP 500"

    def test_or_else(self):
        """Test fallback selection between readings."""
        present = SourceReading.of("JP")
        absent = SourceReading.absent()
        assert present.or_else(SourceReading.of("US")) is present
        assert absent.or_else(present) is present
        assert not absent.or_else(SourceReading.absent()).is_present


class TestDetectionResult:
    """Tests for DetectionResult."""

    def test_pending(self):
        """Test the initial value before detection finishes."""
        result = DetectionResult.pending()
        assert result.loading is True
        assert result.source == DetectionSource.UNKNOWN
        assert result.country is None
        assert result.error is None
        assert not result.has_any_country

    def test_has_any_country_from_single_source(self):
        """Test that any populated country field counts."""
        assert DetectionResult(region_country="DE").has_any_country
        assert DetectionResult(ip_country_fallback="JP").has_any_country
        assert not DetectionResult(error="nothing").has_any_country

    def test_to_dict(self):
        """Test dictionary conversion uses enum values."""
        result = DetectionResult(
            country="France",
            location_country="France",
            source=DetectionSource.LOCATION,
            location_permission_status=PermissionStatus.GRANTED,
        )
        data = result.to_dict()
        assert data["country"] == "France"
        assert data["source"] == "location"
        assert data["location_permission_status"] == "granted"
        assert data["loading"] is False
        assert data["error"] is None

    def test_metadata_ignored_in_equality(self):
        """Test that diagnostic metadata does not affect equality."""
        a = DetectionResult(country="DE", metadata={"reasons": {"ip": "HTTP 500"}})
        b = DetectionResult(country="DE")
        assert a == b

    def test_metadata_is_read_only(self):
        """Test metadata cannot be changed after the result is built."""
        source = {"reasons": {"ip": "HTTP 500"}}
        result = DetectionResult(country="DE", metadata=source)

        with pytest.raises(TypeError):
            result.metadata["extra"] = True
        with pytest.raises(TypeError):
            result.metadata["reasons"]["ip"] = "changed"

        source["reasons"]["ip"] = "changed"
        assert result.metadata["reasons"]["ip"] == "HTTP 500"


class TestEnums:
    """Tests for status enums."""

    def test_detection_source_values(self):
        """Test DetectionSource enum values."""
        assert DetectionSource.LOCATION == "location"
        assert DetectionSource.REGION == "region"
        assert DetectionSource.IP == "ip"
        assert DetectionSource.MIXED == "mixed"
        assert DetectionSource.UNKNOWN == "unknown"

    def test_capability_from_permission(self):
        """Test mapping of provider permissions to capability status."""
        assert CapabilityStatus.from_permission(PermissionStatus.GRANTED) == CapabilityStatus.GRANTED
        assert CapabilityStatus.from_permission(PermissionStatus.DENIED) == CapabilityStatus.DENIED
        assert (
            CapabilityStatus.from_permission(PermissionStatus.UNDETERMINED)
            == CapabilityStatus.UNDETERMINED
        )


class TestNotificationState:
    """Tests for NotificationState."""

    def test_defaults(self):
        """Test a fresh state is idle and unlatched."""
        state = NotificationState()
        assert state.has_shown_once is False
        assert state.phase == NotifierPhase.IDLE
        assert state.display_count == 0
        assert state.redisplay_count == 0
        assert state.torn_down is False

    def test_redisplay_count(self):
        """Test that only displays after the first one count as redisplays."""
        state = NotificationState(display_count=4)
        assert state.redisplay_count == 3
        assert state.to_dict()["display_count"] == 4
        assert state.to_dict()["redisplay_count"] == 3
