"""
Request payloads sent in the body of POST endpoints
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from telraam.models.codecs import Rfc3339Millis, as_utc


class TrafficLevel(str, Enum):
    """How detailed the traffic statistics should be"""
    SEGMENTS = "segments"  # calculated per road segment
    INSTANCE = "instance"  # calculated per individual camera


class TrafficRequest(BaseModel):
    """
    Body of the reports/traffic call

    The time interval is closed-open (UTC) and may span at most three months.
    """
    model_config = ConfigDict(frozen=True)

    level: TrafficLevel = TrafficLevel.SEGMENTS
    format: str = "per-hour"
    # segment (or instance) identifier, e.g. the 348917 in https://telraam.net/nl/location/348917
    id: str
    time_start: Rfc3339Millis
    time_end: Rfc3339Millis = Field(description="end of the interval, not included")

    @model_validator(mode="after")
    def _check_interval(self) -> "TrafficRequest":
        if as_utc(self.time_end) < as_utc(self.time_start):
            raise ValueError("time_end must not be before time_start")
        return self
