"""노선도 모델"""

from .domain import Line, MetroMap, Route, RouteStep, Station, normalize_name
from .schemas import LineRecord, LineRef, StationRecord, TubeRecord
from .types import MapStats

__all__ = [
    # domain
    "Station",
    "Line",
    "Route",
    "RouteStep",
    "MetroMap",
    "normalize_name",
    # schemas
    "TubeRecord",
    "LineRecord",
    "LineRef",
    "StationRecord",
    # types
    "MapStats",
]
