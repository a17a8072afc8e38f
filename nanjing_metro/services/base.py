"""
노선도 그래프 엔진 인터페이스

파사드(NanjingMetro)는 이 인터페이스를 구현한 엔진에 모든 조회를 위임합니다.
"""

from abc import ABC, abstractmethod
from typing import List, Union

from nanjing_metro.models.domain import Line, Route, Station


class GraphEngine(ABC):
    """노선도 조회/경로 탐색 엔진"""

    @property
    @abstractmethod
    def name(self) -> str:
        """지하철 시스템 표시명"""

    @abstractmethod
    def get_node_by_id(self, station_id: str) -> Station:
        """역 ID로 조회 (없으면 NotFoundError)"""

    @abstractmethod
    def get_node_by_name(self, name: str) -> List[Station]:
        """역명으로 조회 (없으면 빈 리스트)"""

    @abstractmethod
    def get_line_by_id(self, line_id: str) -> Line:
        """노선 ID로 조회 (없으면 NotFoundError)"""

    @abstractmethod
    def get_line_by_name(self, name: str) -> Line:
        """노선명으로 조회 (없으면 NotFoundError)"""

    @abstractmethod
    def get_lines(self) -> List[Line]:
        """전체 노선"""

    @abstractmethod
    def get_stations(self, line: Union[Line, str]) -> List[Station]:
        """노선의 역 목록 (노선 순서, 없는 노선이면 InvalidLineError)"""

    @abstractmethod
    def get_shortest_route(self, from_name: str, to_name: str) -> Route:
        """최단 경로 (역명을 해석할 수 없으면 InvalidStationError)"""

    @abstractmethod
    def get_all_routes(self, from_name: str, to_name: str) -> List[Route]:
        """가능한 경로 열거 (실험적)"""
