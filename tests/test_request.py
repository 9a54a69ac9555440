"""Tests for the request payload models."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from telraam.models.codecs import parse_rfc3339_weak
from telraam.models.request import TrafficLevel, TrafficRequest


def make_request(**overrides) -> TrafficRequest:
    fields = {
        "level": TrafficLevel.SEGMENTS,
        "format": "per-hour",
        "id": "348917",
        "time_start": parse_rfc3339_weak("2020-10-30 07:00:00Z"),
        "time_end": parse_rfc3339_weak("2020-10-30 09:00:00Z"),
    }
    fields.update(overrides)
    return TrafficRequest(**fields)


class TestTrafficRequestSerialization:
    """Test the JSON body sent to reports/traffic."""

    def test_serialize_traffic(self) -> None:
        """Test that every field is rendered the way the API expects."""
        parsed = json.loads(make_request().model_dump_json())

        assert parsed["level"] == "segments"
        assert parsed["format"] == "per-hour"
        assert parsed["id"] == "348917"
        assert parsed["time_start"] == "2020-10-30T07:00:00.000Z"
        assert parsed["time_end"] == "2020-10-30T09:00:00.000Z"

    def test_instance_level_literal(self) -> None:
        parsed = json.loads(make_request(level=TrafficLevel.INSTANCE).model_dump_json())

        assert parsed["level"] == "instance"

    def test_level_accepts_wire_string(self) -> None:
        assert make_request(level="instance").level is TrafficLevel.INSTANCE

    def test_defaults(self) -> None:
        request = TrafficRequest(
            id="1",
            time_start=datetime(2021, 1, 1, tzinfo=timezone.utc),
            time_end=datetime(2021, 1, 2, tzinfo=timezone.utc),
        )

        assert request.level is TrafficLevel.SEGMENTS
        assert request.format == "per-hour"

    def test_naive_timestamps_are_utc(self) -> None:
        request = make_request(time_start=datetime(2020, 10, 30, 7), time_end=datetime(2020, 10, 30, 9))
        parsed = json.loads(request.model_dump_json())

        assert parsed["time_start"] == "2020-10-30T07:00:00.000Z"

    def test_end_before_start_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="time_end must not be before time_start"):
            make_request(time_end=parse_rfc3339_weak("2020-10-30 06:00:00Z"))

    def test_unknown_level_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_request(level="city")
