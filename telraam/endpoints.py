"""
Endpoint descriptors for the Telraam API, all sent through TelraamClient.send

Each descriptor fixes the path, the HTTP method and the response model of one
operation at class level; an instance carries the per-call data (body, query
parameters, trailing path segment).
"""
from dataclasses import dataclass
from typing import ClassVar, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from telraam.models.request import TrafficRequest
from telraam.models.response import (
    CamerasResponse,
    Response,
    SegmentResponse,
    TrafficResponse,
    TrafficSnapshotResponse,
    WelcomeResponse,
)

R = TypeVar("R", bound=Response)


class Endpoint(Generic[R]):
    """
    Shape shared by every Telraam endpoint

    PATH is the part after the API version, e.g. `reports/traffic` in
    https://telraam-api.net/v1/reports/traffic
    """
    PATH: ClassVar[str]
    METHOD: ClassVar[str]  # "GET" or "POST"
    response_model: ClassVar[Type[Response]]
    request_model: ClassVar[Optional[Type[BaseModel]]] = None

    def payload(self) -> Optional[BaseModel]:
        """Body to send, only POST endpoints return one"""
        return None

    def params(self) -> Dict[str, Optional[str]]:
        """Query parameters to add to the request"""
        return {}

    def path_params(self) -> Optional[str]:
        """Extra segment appended to PATH, such as a segment or MAC id"""
        return None


@dataclass(frozen=True)
class Welcome(Endpoint[WelcomeResponse]):
    """Checks that the Telraam API is alive and well"""
    PATH: ClassVar[str] = ""
    METHOD: ClassVar[str] = "GET"
    response_model: ClassVar[Type[Response]] = WelcomeResponse


@dataclass(frozen=True)
class Traffic(Endpoint[TrafficResponse]):
    """Observed traffic statistics for a segment or instance over a time interval (max. 3 months)"""
    PATH: ClassVar[str] = "reports/traffic"
    METHOD: ClassVar[str] = "POST"
    response_model: ClassVar[Type[Response]] = TrafficResponse
    request_model: ClassVar[Optional[Type[BaseModel]]] = TrafficRequest

    request: TrafficRequest

    def payload(self) -> Optional[BaseModel]:
        return self.request


@dataclass(frozen=True)
class LiveTrafficSnapshot(Endpoint[TrafficSnapshotResponse]):
    """
    Live traffic snapshot of all segments as GeoJSON

    The document is compiled and cached on the Telraam servers every 5 minutes.
    """
    PATH: ClassVar[str] = "reports/traffic_snapshot_live"
    METHOD: ClassVar[str] = "GET"
    response_model: ClassVar[Type[Response]] = TrafficSnapshotResponse


@dataclass(frozen=True)
class AllAvailableCameras(Endpoint[CamerasResponse]):
    """All camera instances, active and archived"""
    PATH: ClassVar[str] = "cameras"
    METHOD: ClassVar[str] = "GET"
    response_model: ClassVar[Type[Response]] = CamerasResponse


@dataclass(frozen=True)
class CamerasBySegmentId(Endpoint[CamerasResponse]):
    """All camera instances, archived ones included, installed on one segment"""
    PATH: ClassVar[str] = "cameras/segment"
    METHOD: ClassVar[str] = "GET"
    response_model: ClassVar[Type[Response]] = CamerasResponse

    segment_id: str

    def path_params(self) -> Optional[str]:
        return self.segment_id


@dataclass(frozen=True)
class CameraByMacId(Endpoint[CamerasResponse]):
    """All camera instances of one device"""
    PATH: ClassVar[str] = "cameras"
    METHOD: ClassVar[str] = "GET"
    response_model: ClassVar[Type[Response]] = CamerasResponse

    mac_id: str

    def path_params(self) -> Optional[str]:
        return self.mac_id


@dataclass(frozen=True)
class AllSegments(Endpoint[SegmentResponse]):
    """All road segments as GeoJSON, coordinates in EPSG:31370"""
    PATH: ClassVar[str] = "segments/all"
    METHOD: ClassVar[str] = "GET"
    response_model: ClassVar[Type[Response]] = SegmentResponse


@dataclass(frozen=True)
class SegmentById(Endpoint[SegmentResponse]):
    PATH: ClassVar[str] = "segments/id"
    METHOD: ClassVar[str] = "GET"
    response_model: ClassVar[Type[Response]] = SegmentResponse

    segment_id: str

    def path_params(self) -> Optional[str]:
        return self.segment_id


# CLI command name -> descriptor
ENDPOINTS: Dict[str, Type[Endpoint]] = {
    "welcome": Welcome,
    "traffic": Traffic,
    "traffic-snapshot-live": LiveTrafficSnapshot,
    "cameras": AllAvailableCameras,
    "cameras-by-segment": CamerasBySegmentId,
    "camera-by-mac": CameraByMacId,
    "segments": AllSegments,
    "segment-by-id": SegmentById,
}
