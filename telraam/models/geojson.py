"""
GeoJSON (RFC 7946) document models

The segment and traffic snapshot endpoints answer with a GeoJSON document whose
top level also carries the status envelope; those members are stripped before the
document is decoded, any other foreign member is kept.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer

Position = List[float]


class GeoJSONObject(BaseModel):
    """Common members of every GeoJSON object, foreign members are kept as extras"""
    model_config = ConfigDict(extra="allow")

    bbox: Optional[List[float]] = None

    @model_serializer(mode="wrap")
    def _drop_absent_members(self, handler):
        data = handler(self)
        for key in ("bbox", "id"):
            if key in data and data[key] is None:
                del data[key]
        return data


class Point(GeoJSONObject):
    type: Literal["Point"]
    coordinates: Position


class MultiPoint(GeoJSONObject):
    type: Literal["MultiPoint"]
    coordinates: List[Position]


class LineString(GeoJSONObject):
    type: Literal["LineString"]
    coordinates: List[Position]


class MultiLineString(GeoJSONObject):
    type: Literal["MultiLineString"]
    coordinates: List[List[Position]]


class Polygon(GeoJSONObject):
    type: Literal["Polygon"]
    coordinates: List[List[Position]]


class MultiPolygon(GeoJSONObject):
    type: Literal["MultiPolygon"]
    coordinates: List[List[List[Position]]]


class GeometryCollection(GeoJSONObject):
    type: Literal["GeometryCollection"]
    geometries: List["Geometry"]


Geometry = Annotated[
    Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection],
    Field(discriminator="type"),
]

GeometryCollection.model_rebuild()


class Feature(GeoJSONObject):
    type: Literal["Feature"]
    id: Optional[Union[str, int, float]] = None
    geometry: Optional[Geometry] = None
    properties: Optional[Dict[str, Any]] = None


class FeatureCollection(GeoJSONObject):
    type: Literal["FeatureCollection"]
    features: List[Feature]


# Any top-level GeoJSON document
GeoJSON = Annotated[
    Union[FeatureCollection, Feature, Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection],
    Field(discriminator="type"),
]
