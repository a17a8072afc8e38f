"""TypedDict 정의 - 내부 데이터 구조 타입 정의"""

from typing import TypedDict


class MapStats(TypedDict):
    """노선도 통계"""
    stations: int
    edges: int
    lines: int
    interchanges: int
