"""
Field-level codecs shared by the request and response models

- timestamps are written as RFC3339 in UTC with exactly millisecond precision
- calibration flags travel over the wire as the strings "yes" / "no"
"""
from datetime import datetime, timezone
from typing import Annotated, Any

from dateutil import parser
from pydantic import PlainSerializer, PlainValidator

YES = "yes"
NO = "no"


def as_utc(value: datetime) -> datetime:
    """Convert to UTC, taking naive datetimes to already be UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_rfc3339_millis(value: datetime) -> str:
    """
    Render a timestamp as RFC3339 with millisecond precision, e.g. 2020-10-30T07:00:00.000Z

    Naive datetimes are taken to be UTC. Sub-millisecond digits are truncated.
    """
    value = as_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def parse_rfc3339_weak(value: str) -> datetime:
    """
    Parse an RFC3339-like timestamp, tolerating a space instead of the T separator

    "2020-10-30 07:00:00Z" and "2020-10-30T07:00:00.000Z" both parse; a value
    without an offset is taken to be UTC.
    """
    parsed = parser.isoparse(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def from_yes_no(value: Any) -> bool:
    if value == YES:
        return True
    if value == NO:
        return False
    raise ValueError(f"unknown variant `{value}`, expected `{YES}` or `{NO}`")


def to_yes_no(value: bool) -> str:
    return YES if value else NO


# Annotated field types
Rfc3339Millis = Annotated[datetime, PlainSerializer(format_rfc3339_millis, return_type=str, when_used="json")]
YesNoBool = Annotated[bool, PlainValidator(from_yes_no), PlainSerializer(to_yes_no, return_type=str)]
