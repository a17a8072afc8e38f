"""
남경 지하철 노선도 인터페이스

노선도 문서 위치만 결정하고, 모든 조회는 그래프 엔진(MetroGraph)에 위임합니다.

Usage:
    metro = NanjingMetro()
    route = metro.get_shortest_route("鼓楼", "大厂")
    print(route)
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from nanjing_metro.config import MapConfig, Settings, settings
from nanjing_metro.models.domain import Line, Route, Station
from nanjing_metro.models.types import MapStats
from nanjing_metro.services.loader import load_map
from nanjing_metro.services.metro_graph import MetroGraph

logger = logging.getLogger(__name__)


def resolve_document_path(
    document_path: Optional[Union[str, Path]] = None,
    config: Optional[Settings] = None,
) -> Path:
    """
    노선도 문서 경로 결정

    우선순위: 인자 > config.DOCUMENT_PATH > 패키지 내장 파일
    """
    if document_path:
        return Path(document_path)

    config = config or settings
    if config.DOCUMENT_PATH:
        return Path(config.DOCUMENT_PATH)

    return MapConfig.get_default_document_path()


class NanjingMetro:
    """남경 지하철 노선도

    생성 시 노선도 문서를 한 번 로드하며 이후 변경되지 않습니다.

    Raises:
        ResourceError: 노선도 파일이 없거나 읽을 수 없는 경우
        ParseError: 노선도 문서 형식이 잘못된 경우
    """

    def __init__(
        self,
        document_path: Optional[Union[str, Path]] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config or settings
        self._document_path = resolve_document_path(document_path, self.config)

        metro_map = load_map(self._document_path)
        self._engine = MetroGraph(
            metro_map,
            interchange_cost=self.config.INTERCHANGE_COST,
            max_routes=self.config.MAX_ROUTES,
        )

        stats = self._engine.get_stats()
        logger.info(
            f"NanjingMetro 초기화 완료: "
            f"{stats['lines']}개 노선, {stats['stations']}개 역, {stats['edges']}개 구간"
        )

    @property
    def engine(self) -> MetroGraph:
        return self._engine

    @property
    def name(self) -> str:
        """지하철 시스템 표시명"""
        return self._engine.name

    @property
    def document_path(self) -> Path:
        """노선도 문서 경로"""
        return self._document_path

    # 하위 호환성을 위한 별칭
    xml = document_path

    def get_node_by_id(self, station_id: str) -> Station:
        return self._engine.get_node_by_id(station_id)

    def get_node_by_name(self, name: str) -> List[Station]:
        return self._engine.get_node_by_name(name)

    def get_line_by_id(self, line_id: str) -> Line:
        return self._engine.get_line_by_id(line_id)

    def get_line_by_name(self, name: str) -> Line:
        return self._engine.get_line_by_name(name)

    def get_lines(self) -> List[Line]:
        return self._engine.get_lines()

    def get_stations(self, line: Union[Line, str]) -> List[Station]:
        return self._engine.get_stations(line)

    def get_shortest_route(self, from_name: str, to_name: str) -> Route:
        return self._engine.get_shortest_route(from_name, to_name)

    def get_all_routes(self, from_name: str, to_name: str) -> List[Route]:
        """경로 열거 [실험적]"""
        return self._engine.get_all_routes(from_name, to_name)

    def get_stats(self) -> MapStats:
        """통계 정보"""
        return self._engine.get_stats()

    def __repr__(self) -> str:
        return f"NanjingMetro(document_path={str(self._document_path)!r})"
