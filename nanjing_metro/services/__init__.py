"""노선도 서비스 모듈"""
from .base import GraphEngine
from .loader import load_map, parse_map
from .metro_graph import MetroGraph
from .nanjing import NanjingMetro, resolve_document_path

__all__ = [
    "GraphEngine",
    "load_map",
    "parse_map",
    "MetroGraph",
    "NanjingMetro",
    "resolve_document_path",
]
