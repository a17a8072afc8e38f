"""Nanjing Metro - 남경 지하철 노선도 데이터 및 경로 탐색"""

from .config import MapConfig, Settings, settings
from .exceptions import (
    InvalidLineError,
    InvalidStationError,
    MetroError,
    NotFoundError,
    ParseError,
    ResourceError,
)
from .logging_config import setup_logger
from .models import Line, MapStats, MetroMap, Route, RouteStep, Station
from .services import (
    GraphEngine,
    MetroGraph,
    NanjingMetro,
    load_map,
    parse_map,
    resolve_document_path,
)

__version__ = "0.6.0"

__all__ = [
    # config
    "MapConfig",
    "Settings",
    "settings",
    # exceptions
    "MetroError",
    "ResourceError",
    "ParseError",
    "NotFoundError",
    "InvalidLineError",
    "InvalidStationError",
    # logging
    "setup_logger",
    # models
    "Station",
    "Line",
    "Route",
    "RouteStep",
    "MetroMap",
    "MapStats",
    # services
    "GraphEngine",
    "MetroGraph",
    "NanjingMetro",
    "load_map",
    "parse_map",
    "resolve_document_path",
]
