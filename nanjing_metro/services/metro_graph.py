"""
노선도 그래프 자료구조

같은 노선의 인접 역은 비용 1, 같은 이름의 다른 노선 역(환승)은
환승 비용으로 연결한 무방향 가중 그래프 위에서
Dijkstra 알고리즘으로 최단경로를 계산합니다.
"""

import heapq
import itertools
import logging
from collections import deque
from typing import Dict, List, Optional, Set, Tuple, Union

from nanjing_metro.config import MapConfig
from nanjing_metro.exceptions import InvalidLineError, InvalidStationError, NotFoundError
from nanjing_metro.logging_config import log_function
from nanjing_metro.models.domain import (
    Line,
    MetroMap,
    Route,
    RouteStep,
    Station,
    normalize_name,
)
from nanjing_metro.models.types import MapStats
from nanjing_metro.services.base import GraphEngine

logger = logging.getLogger(__name__)

# (이웃 역 ID, 비용, 노선 ID) - 노선 ID가 None이면 환승 엣지
Edge = Tuple[str, float, Optional[str]]


class MetroGraph(GraphEngine):
    """노선도 그래프 엔진"""

    def __init__(
        self,
        metro_map: MetroMap,
        interchange_cost: float = 0.5,
        max_routes: int = 100,
    ):
        if interchange_cost < 0:
            raise ValueError(f"환승 비용은 0 이상이어야 함: {interchange_cost}")
        if max_routes < 1:
            raise ValueError(f"max_routes는 1 이상이어야 함: {max_routes}")

        self.metro_map = metro_map
        self.interchange_cost = interchange_cost
        self.max_routes = max_routes

        # 인접 리스트: {station_id: [(neighbor_id, cost, line_id), ...]}
        self.adjacency: Dict[str, List[Edge]] = {
            station_id: [] for station_id in metro_map.stations
        }

        # 노선명 → Line 매핑 (빠른 조회용)
        self._line_names: Dict[str, Line] = {
            normalize_name(line.name): line for line in metro_map.lines.values()
        }

        self._segment_count = 0
        self._build_adjacency()

    def _build_adjacency(self) -> None:
        """노선 구간 + 환승 엣지 구성 (양방향)"""
        for line in self.metro_map.lines.values():
            for a, b in zip(line.stations, line.stations[1:]):
                self.adjacency[a.id].append((b.id, MapConfig.LINE_EDGE_COST, line.id))
                self.adjacency[b.id].append((a.id, MapConfig.LINE_EDGE_COST, line.id))
                self._segment_count += 1

        transfer_count = 0
        for ids in self.metro_map.name_to_ids.values():
            for i, from_id in enumerate(ids):
                for to_id in ids[i + 1:]:
                    self.adjacency[from_id].append((to_id, self.interchange_cost, None))
                    self.adjacency[to_id].append((from_id, self.interchange_cost, None))
                    transfer_count += 1

        logger.debug(f"엣지 구성: 구간 {self._segment_count}개, 환승 {transfer_count}개")

    # ========== 조회 ==========

    @property
    def name(self) -> str:
        return self.metro_map.name

    def get_node_by_id(self, station_id: str) -> Station:
        station = self.metro_map.stations.get(station_id)
        if station is None:
            raise NotFoundError(f"역 ID 없음: {station_id}")
        return station

    def get_node_by_name(self, name: str) -> List[Station]:
        """역명에 해당하는 모든 노선의 역 반환 (없거나 문자열이 아니면 빈 리스트)"""
        if not isinstance(name, str):
            return []
        ids = self.metro_map.name_to_ids.get(normalize_name(name), [])
        return [self.metro_map.stations[station_id] for station_id in ids]

    def get_line_by_id(self, line_id: str) -> Line:
        line = self.metro_map.lines.get(line_id)
        if line is None:
            raise NotFoundError(f"노선 ID 없음: {line_id}")
        return line

    def get_line_by_name(self, name: str) -> Line:
        line = self._line_names.get(normalize_name(name))
        if line is None:
            raise NotFoundError(f"노선명 없음: {name}")
        return line

    def get_lines(self) -> List[Line]:
        return list(self.metro_map.lines.values())

    def get_stations(self, line: Union[Line, str]) -> List[Station]:
        """
        노선의 역 목록

        Args:
            line: Line 객체, 노선명 또는 노선 ID

        Returns:
            노선 순서대로의 역 목록 (복사본)

        Raises:
            InvalidLineError: 노선을 해석할 수 없는 경우
        """
        return list(self._resolve_line(line).stations)

    def _resolve_line(self, line: Union[Line, str]) -> Line:
        if isinstance(line, Line):
            resolved = self.metro_map.lines.get(line.id)
            if resolved is None:
                raise InvalidLineError(line.name)
            return resolved

        if isinstance(line, str):
            resolved = self._line_names.get(normalize_name(line))
            if resolved is None:
                resolved = self.metro_map.lines.get(line.strip())
            if resolved is not None:
                return resolved

        raise InvalidLineError(line)

    def _resolve_station_ids(self, name: str) -> List[str]:
        ids = None
        if isinstance(name, str):
            ids = self.metro_map.name_to_ids.get(normalize_name(name))
        if not ids:
            raise InvalidStationError(name)
        return ids

    # ========== 경로 탐색 ==========

    @log_function(logger)
    def get_shortest_route(self, from_name: str, to_name: str) -> Route:
        """
        최단 경로 계산

        출발역명의 모든 레코드에서 동시에 시작하여
        도착역명의 레코드 중 가장 먼저 확정되는 지점에서 종료합니다.

        Args:
            from_name: 출발역명 (대소문자 무시)
            to_name: 도착역명 (대소문자 무시)

        Returns:
            Route

        Raises:
            InvalidStationError: 역명을 해석할 수 없는 경우
            NotFoundError: 두 역이 연결되어 있지 않은 경우
        """
        start_ids = self._resolve_station_ids(from_name)
        end_ids = set(self._resolve_station_ids(to_name))

        cost, path, edge_lines = self.dijkstra(start_ids, end_ids)
        if cost is None:
            raise NotFoundError(f"경로 없음: {from_name} -> {to_name}")

        return self._build_route(path, edge_lines, cost)

    def dijkstra(
        self,
        start_ids: List[str],
        end_ids: Set[str],
    ) -> Tuple[Optional[float], List[str], List[Optional[str]]]:
        """
        Dijkstra 알고리즘 (다중 출발/다중 도착)

        동일 비용은 역 ID 문자열 순서로 먼저 확정됩니다.

        Returns:
            (총 비용, 역 ID 경로, 구간별 노선 ID) 또는 (None, [], [])
        """
        distances: Dict[str, float] = {}
        previous: Dict[str, Optional[Tuple[str, Optional[str]]]] = {}
        heap: List[Tuple[float, str]] = []

        for station_id in start_ids:
            if station_id not in self.adjacency:
                continue
            distances[station_id] = 0.0
            previous[station_id] = None
            heap.append((0.0, station_id))
        heapq.heapify(heap)

        visited: Set[str] = set()

        while heap:
            current_dist, current = heapq.heappop(heap)

            if current in visited:
                continue
            visited.add(current)

            if current in end_ids:
                # 경로 재구성
                path = [current]
                edge_lines: List[Optional[str]] = []
                step = previous[current]
                while step is not None:
                    prev_id, line_id = step
                    path.append(prev_id)
                    edge_lines.append(line_id)
                    step = previous[prev_id]
                return current_dist, path[::-1], edge_lines[::-1]

            for neighbor, weight, line_id in self.adjacency[current]:
                if neighbor in visited:
                    continue

                new_dist = current_dist + weight
                if new_dist < distances.get(neighbor, float('inf')):
                    distances[neighbor] = new_dist
                    previous[neighbor] = (current, line_id)
                    heapq.heappush(heap, (new_dist, neighbor))

        return None, [], []

    @log_function(logger)
    def get_all_routes(self, from_name: str, to_name: str) -> List[Route]:
        """
        가능한 경로 열거 [실험적]

        같은 역명을 두 번 지나지 않는 경로만 열거합니다.
        출발역에서의 환승, 연속 환승은 제외합니다.
        (비용, 정류 지점 수)가 가장 작은 max_routes개만 유지하며,
        완성된 경로가 한 번이라도 버려진 뒤에는 현재 최악 비용을 넘는 분기를 잘라냅니다.

        Returns:
            비용, 정류 지점 수 순으로 정렬된 Route 목록
        """
        start_ids = self._resolve_station_ids(from_name)
        end_ids = set(self._resolve_station_ids(to_name))

        if normalize_name(from_name) == normalize_name(to_name):
            return [self._build_route([start_ids[0]], [], 0.0)]

        # 최대 힙: (-비용, -정류 지점 수, -발견 순번, Route), best[0]이 현재 최악 경로
        best: List[Tuple[float, int, int, Route]] = []
        order = itertools.count()
        truncated = False

        path: List[str] = []
        edge_lines: List[Optional[str]] = []
        visited_ids: Set[str] = set()
        visited_names: Set[str] = set()

        def keep(route: Route) -> None:
            nonlocal truncated
            entry = (-route.cost, -len(route), -next(order), route)
            if len(best) < self.max_routes:
                heapq.heappush(best, entry)
                return

            truncated = True
            if entry > best[0]:
                heapq.heapreplace(best, entry)

        def visit(station_id: str, cost: float) -> None:
            # 비용은 음수가 아니므로 최악 비용을 넘은 분기는 더 나아질 수 없음
            if truncated and cost > -best[0][0]:
                return

            if station_id in end_ids:
                keep(self._build_route(list(path), list(edge_lines), cost))
                return

            for neighbor, weight, line_id in self.adjacency[station_id]:
                if neighbor in visited_ids:
                    continue
                neighbor_name = self._station_key(neighbor)
                if line_id is None:
                    # 출발역 환승, 연속 환승 제외
                    if not edge_lines or edge_lines[-1] is None:
                        continue
                elif neighbor_name in visited_names:
                    continue

                path.append(neighbor)
                edge_lines.append(line_id)
                visited_ids.add(neighbor)
                added_name = neighbor_name not in visited_names
                visited_names.add(neighbor_name)

                visit(neighbor, cost + weight)

                path.pop()
                edge_lines.pop()
                visited_ids.discard(neighbor)
                if added_name:
                    visited_names.discard(neighbor_name)

        for start_id in start_ids:
            path.append(start_id)
            visited_ids.add(start_id)
            visited_names.add(self._station_key(start_id))

            visit(start_id, 0.0)

            path.pop()
            visited_ids.discard(start_id)
            visited_names.discard(self._station_key(start_id))

        if truncated:
            logger.warning(
                f"경로 열거 중단: {from_name} -> {to_name} (상위 {self.max_routes}개만 유지)"
            )

        # 내림차순 정렬 = 비용, 정류 지점 수, 발견 순 오름차순
        return [entry[-1] for entry in sorted(best, reverse=True)]

    def _station_key(self, station_id: str) -> str:
        return normalize_name(self.metro_map.stations[station_id].name)

    def _build_route(
        self,
        path: List[str],
        edge_lines: List[Optional[str]],
        cost: float,
    ) -> Route:
        """역 ID 경로 -> Route (환승 구간은 다음 노선의 역이 대표)"""
        stations = self.metro_map.stations
        lines = self.metro_map.lines
        steps: List[RouteStep] = []

        for i, station_id in enumerate(path):
            station = stations[station_id]
            if i < len(edge_lines):
                line_id = edge_lines[i]
                if line_id is None:
                    continue
            elif edge_lines:
                line_id = edge_lines[-1]
            else:
                line_id = None

            line = lines[line_id] if line_id is not None else station.lines[0]
            steps.append(RouteStep(station=station, line=line))

        return Route(steps=steps, cost=cost)

    # ========== 통계 ==========

    def get_stats(self) -> MapStats:
        """통계 정보"""
        interchanges = 0
        for ids in self.metro_map.name_to_ids.values():
            line_ids = {
                line_id
                for station_id in ids
                for line_id in self.metro_map.stations[station_id].line_ids
            }
            if len(line_ids) > 1:
                interchanges += 1

        return {
            "stations": len(self.metro_map.stations),
            "edges": self._segment_count,
            "lines": len(self.metro_map.lines),
            "interchanges": interchanges,
        }

    def is_connected(self) -> bool:
        """모든 역이 하나의 연결 요소인지 확인 (BFS)"""
        if not self.adjacency:
            return False

        start = next(iter(self.adjacency))
        visited = {start}
        queue = deque([start])

        while queue:
            node = queue.popleft()
            for neighbor, _, _ in self.adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        if len(visited) < len(self.adjacency):
            disconnected = [s for s in self.adjacency if s not in visited]
            logger.warning(f"연결 안 된 역 (샘플): {disconnected[:5]}")
            return False
        return True
