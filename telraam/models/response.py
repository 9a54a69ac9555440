"""
Response models for the Telraam API

Every response body carries the status envelope (status_code, message) at its
top level, next to the endpoint specific payload. The payload is only handed
out after the status has been checked.
"""
import logging
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from telraam.errors import NonSuccessResponse
from telraam.models.codecs import Rfc3339Millis, YesNoBool
from telraam.models.geojson import GeoJSON

logger = logging.getLogger(__name__)

# members of the status envelope, never part of an embedded document
STATUS_MEMBERS = ("status_code", "message", "msg")

# highest status_code still considered a success
MAX_SUCCESS_CODE = 299


class Status(BaseModel):
    """Success/failure indicator returned by Telraam inside every body"""
    model_config = ConfigDict(frozen=True)

    status_code: int = Field(default=0, ge=0)
    message: str = Field(validation_alias=AliasChoices("message", "msg"))

    @property
    def is_success(self) -> bool:
        return self.status_code <= MAX_SUCCESS_CODE

    def check(self) -> "Status":
        """
        Raise NonSuccessResponse unless the status denotes success

        Returns:
            The status itself, so calls can be chained
        """
        if not self.is_success:
            logger.debug(f"Non-success status {self.status_code}: {self.message}")
            raise NonSuccessResponse(self)
        return self


class Response(BaseModel):
    """
    Base class of all responses: the status envelope merged into the body

    Subclasses name their payload field in `payload_field`. The status is not
    checked on decode; `take()` and the per-endpoint accessors check it.
    """
    model_config = ConfigDict(frozen=True)

    payload_field: ClassVar[Optional[str]] = None

    status_code: int = Field(default=0, ge=0)
    message: str = Field(validation_alias=AliasChoices("message", "msg"))

    @property
    def status(self) -> Status:
        return Status(status_code=self.status_code, message=self.message)

    def check(self) -> Status:
        return self.status.check()

    def take(self) -> Any:
        """Check the status and hand out the payload"""
        self.check()
        if self.payload_field is None:
            return self.message
        return getattr(self, self.payload_field)


class WelcomeResponse(Response):
    """Response from the Welcome endpoint, the message is the only payload"""


class Report(BaseModel):
    """Traffic statistics for one reporting interval"""
    model_config = ConfigDict(frozen=True)

    instance_id: int  # -1 for segment level calls
    segment_id: int  # -1 for instance level calls
    date: Rfc3339Millis  # beginning of the interval (UTC)
    interval: str  # "hourly" | "daily"
    uptime: float  # between 0 and 1, portion of the interval actively spent counting
    heavy: float  # anything larger than a car, called lorry in older APIs
    car: float
    bike: float  # two-wheelers, mainly cyclists and motorbikes
    pedestrian: float
    heavy_lft: float
    heavy_rgt: float
    car_lft: float
    car_rgt: float
    bike_lft: float
    bike_rgt: float
    pedestrian_lft: float
    pedestrian_rgt: float
    direction: int  # internal consistency value, always 1
    timezone: str  # e.g. Europe/Brussels, to convert the UTC dates to local time
    car_speed_hist_0to70plus: List[float]  # 10 km/h bins, percentages
    car_speed_hist_0to120plus: List[float]  # 5 km/h bins, percentages
    v85: float  # speed in km/h respected by 85% of cars


class TrafficResponse(Response):
    """Response from the Traffic endpoint"""
    payload_field: ClassVar[Optional[str]] = "report"

    report: Tuple[Report, ...] = ()

    def reports(self) -> Tuple[Report, ...]:
        """All reports returned, after checking the status"""
        self.check()
        return self.report

    def take_reports(self) -> List[Report]:
        self.check()
        return list(self.report)


class Camera(BaseModel):
    """
    A camera instance

    An instance is defined by mac, user_id, segment_id and direction. When any of
    them changes a new instance is created and the old one is closed by setting
    time_end.
    """
    model_config = ConfigDict(frozen=True)

    instance_id: int
    mac: int
    user_id: int
    segment_id: int
    direction: bool  # side of the road relative to the segment's coordinate chain
    status: str  # "active" | "non_active" | "problematic"
    manual: bool
    time_added: Rfc3339Millis
    time_end: Optional[Rfc3339Millis] = None  # None while the instance is active
    last_data_package: Rfc3339Millis
    first_data_package: Rfc3339Millis
    pedestrians_left: bool
    pedestrians_right: bool
    bikes_left: bool
    bikes_right: bool
    cars_left: bool
    cars_right: bool
    # "yes" once heavy vehicles are counted separately from cars
    is_calibration_done: YesNoBool

    @property
    def is_active(self) -> bool:
        return self.time_end is None


class CamerasResponse(Response):
    """Response from AllAvailableCameras, CamerasBySegmentId and CameraByMacId"""
    payload_field: ClassVar[Optional[str]] = "camera_list"

    camera_list: Tuple[Camera, ...] = Field(default=(), validation_alias=AliasChoices("cameras", "camera"))

    def cameras(self) -> Tuple[Camera, ...]:
        self.check()
        return self.camera_list

    def take_cameras(self) -> List[Camera]:
        self.check()
        return list(self.camera_list)


class GeoJSONResponse(Response):
    """
    A status envelope whose body is at the same time a GeoJSON document

    Decoded in two passes: the status fields are read leniently from the body,
    then the whole body is read again as the document.
    """
    payload_field: ClassVar[Optional[str]] = "document"

    document: Optional[GeoJSON] = None

    @model_validator(mode="before")
    @classmethod
    def _embed_document(cls, data: Any) -> Any:
        # error bodies carry only the status envelope
        if isinstance(data, dict) and "type" in data:
            document = {key: value for key, value in data.items() if key not in STATUS_MEMBERS}
            data = {**data, "document": document}
        return data

    @model_validator(mode="after")
    def _require_document(self) -> "GeoJSONResponse":
        if self.document is None and self.status.is_success:
            raise ValueError("successful response without a GeoJSON document")
        return self


class TrafficSnapshotResponse(GeoJSONResponse):
    """Response from LiveTrafficSnapshot"""

    def snapshot(self) -> GeoJSON:
        self.check()
        return self.document

    def take_snapshot(self) -> GeoJSON:
        self.check()
        return self.document.model_copy(deep=True)


class SegmentResponse(GeoJSONResponse):
    """Response from AllSegments and SegmentById"""

    def segments(self) -> GeoJSON:
        self.check()
        return self.document

    def take_segments(self) -> GeoJSON:
        self.check()
        return self.document.model_copy(deep=True)
