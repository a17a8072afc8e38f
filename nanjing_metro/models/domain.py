"""노선도 도메인 객체

로더가 만드는 연결된 그래프 객체(Station, Line)와
경로 탐색 결과(Route)를 정의합니다.
Station과 Line은 서로를 참조하므로 repr/비교에서 참조 필드를 제외합니다.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(eq=False)
class Station:
    """역 (노선별로 하나의 레코드)

    Attributes:
        id: 역 ID (예: "1-11")
        name: 역명 (환승역은 노선마다 같은 이름의 레코드가 존재)
        line_ids: 소속 노선 ID 목록 (문서 순서, 중복 없음)
        lines: 소속 노선 객체 (로더가 연결)
    """
    id: str
    name: str
    line_ids: List[str]
    lines: List["Line"] = field(default_factory=list, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("station", self.id))

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Line:
    """노선

    Attributes:
        id: 노선 ID (예: "1", "S8")
        name: 노선명 (예: "南京地铁1号线")
        color: 표시 색상 (#RRGGBB, 없으면 None)
        stations: 노선 순서대로 정렬된 역 목록
    """
    id: str
    name: str
    color: Optional[str] = None
    stations: List[Station] = field(default_factory=list, repr=False)

    @property
    def station_ids(self) -> List[str]:
        return [s.id for s in self.stations]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("line", self.id))

    def __lt__(self, other: "Line") -> bool:
        return self.name < other.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class RouteStep:
    """경로의 한 정류 지점

    line은 이 역에서 타고 떠나는 노선입니다 (마지막 역은 도착한 노선).
    """
    station: Station
    line: Line

    def __str__(self) -> str:
        return f"{self.station.name} ({self.line.name})"


@dataclass
class Route:
    """경로 탐색 결과

    Attributes:
        steps: 출발역부터 도착역까지의 정류 지점 (환승은 하나로 합쳐짐)
        cost: 총 비용 (구간 1 + 환승 비용)
    """
    steps: List[RouteStep]
    cost: float

    @property
    def from_station(self) -> Station:
        return self.steps[0].station

    @property
    def to_station(self) -> Station:
        return self.steps[-1].station

    @property
    def stations(self) -> List[Station]:
        return [step.station for step in self.steps]

    @property
    def lines(self) -> List[Line]:
        """탑승 순서대로의 노선 목록 (연속 중복 제거)"""
        lines: List[Line] = []
        for step in self.steps:
            if not lines or lines[-1] != step.line:
                lines.append(step.line)
        return lines

    @property
    def transfers(self) -> int:
        """환승 횟수"""
        return max(len(self.lines) - 1, 0)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return ", ".join(str(step) for step in self.steps)


@dataclass
class MetroMap:
    """로드된 노선도 컨테이너

    Attributes:
        name: 지하철 시스템 표시명
        lines: 노선 ID → Line (문서 순서)
        stations: 역 ID → Station (문서 순서)
        name_to_ids: 정규화된 역명 → 역 ID 목록
    """
    name: str
    lines: Dict[str, Line]
    stations: Dict[str, Station]
    name_to_ids: Dict[str, List[str]]


def normalize_name(name: str) -> str:
    """이름 조회용 정규화 (앞뒤 공백 제거 + 대소문자 무시)"""
    return name.strip().casefold()
