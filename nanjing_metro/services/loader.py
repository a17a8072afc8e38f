"""
노선도 문서 로더

XML 노선도 문서를 파싱/검증하여 서로 연결된 Station/Line 그래프를 만듭니다.
검증이 모두 통과한 뒤에만 MetroMap을 반환하므로 부분 로드 상태는 없습니다.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from lxml import etree
from pydantic import ValidationError

from nanjing_metro.exceptions import ParseError, ResourceError
from nanjing_metro.logging_config import log_timing
from nanjing_metro.models.domain import Line, MetroMap, Station, normalize_name
from nanjing_metro.models.schemas import LineRecord, StationRecord, TubeRecord

logger = logging.getLogger(__name__)

ROOT_TAG = "tube"


def load_map(path: Union[str, Path]) -> MetroMap:
    """
    파일에서 노선도 로드

    Args:
        path: 노선도 XML 파일 경로

    Returns:
        연결이 완료된 MetroMap

    Raises:
        ResourceError: 파일이 없거나 읽을 수 없는 경우
        ParseError: 문서 형식이 잘못된 경우
    """
    document = Path(path)
    if not document.is_file():
        raise ResourceError(f"노선도 파일 없음: {document}")

    try:
        data = document.read_bytes()
    except OSError as e:
        raise ResourceError(f"노선도 파일 읽기 실패: {document}: {e}") from e

    return parse_map(data, source=str(document))


def parse_map(data: Union[str, bytes], source: str = "<string>") -> MetroMap:
    """
    노선도 문서 파싱

    Args:
        data: XML 문서 (str 또는 utf-8 bytes)
        source: 오류 메시지에 표시할 출처

    Returns:
        연결이 완료된 MetroMap

    Raises:
        ParseError: XML 문법 오류, 필수 속성 누락, 중복 ID, 미정의 노선 참조 등
    """
    if isinstance(data, str):
        # lxml은 인코딩 선언이 있는 str을 받지 않음
        data = data.encode("utf-8")

    with log_timing(f"노선도 파싱 {source}", logger):
        root = _parse_xml(data, source)
        tube = _validate(TubeRecord, dict(root.attrib), f"{source}: <{ROOT_TAG}>")

        lines = _build_lines(root, source)
        stations, memberships = _build_stations(root, lines, source)
        _link_lines(lines, stations, memberships, source)

    name_to_ids: Dict[str, List[str]] = {}
    for station in stations.values():
        name_to_ids.setdefault(normalize_name(station.name), []).append(station.id)

    logger.info(
        f"노선도 로드: {tube.name} - {len(lines)}개 노선, {len(stations)}개 역 ({source})"
    )

    return MetroMap(
        name=tube.name,
        lines=lines,
        stations=stations,
        name_to_ids=name_to_ids,
    )


def _parse_xml(data: bytes, source: str) -> etree._Element:
    """XML 문법 파싱 (외부 엔티티/네트워크 접근 차단)"""
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
    )
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise ParseError(f"XML 파싱 실패 ({source}): {e}") from e

    if root.tag != ROOT_TAG:
        raise ParseError(f"루트 요소가 <{ROOT_TAG}>가 아님 ({source}): <{root.tag}>")
    return root


def _validate(model, attrib: dict, where: str):
    """pydantic 레코드 검증 (ValidationError -> ParseError)"""
    try:
        return model.model_validate(attrib)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '-'}: {err['msg']}"
            for err in e.errors()
        )
        raise ParseError(f"잘못된 정의 {where}: {problems}") from e


def _build_lines(root: etree._Element, source: str) -> Dict[str, Line]:
    """<lines>/<line> 파싱"""
    lines: Dict[str, Line] = {}
    names = set()

    for index, elem in enumerate(root.iterfind("lines/line"), start=1):
        record = _validate(LineRecord, dict(elem.attrib), f"{source}: line #{index}")

        if record.id in lines:
            raise ParseError(f"노선 ID 중복 ({source}): {record.id}")
        normalized = normalize_name(record.name)
        if normalized in names:
            raise ParseError(f"노선명 중복 ({source}): {record.name}")
        names.add(normalized)

        lines[record.id] = Line(id=record.id, name=record.name, color=record.color)

    if not lines:
        raise ParseError(f"정의된 노선 없음 ({source})")

    return lines


def _build_stations(
    root: etree._Element,
    lines: Dict[str, Line],
    source: str,
) -> Tuple[Dict[str, Station], Dict[str, List[Tuple[Optional[int], int, Station]]]]:
    """
    <stations>/<station> 파싱

    Returns:
        (역 ID → Station, 노선 ID → [(순번, 문서 위치, Station), ...])
    """
    stations: Dict[str, Station] = {}
    memberships: Dict[str, List[Tuple[Optional[int], int, Station]]] = {
        line_id: [] for line_id in lines
    }

    for index, elem in enumerate(root.iterfind("stations/station"), start=1):
        where = f"{source}: station #{index}"
        record = _validate(StationRecord, dict(elem.attrib), where)

        if record.id in stations:
            raise ParseError(f"역 ID 중복 ({source}): {record.id}")

        try:
            refs = record.line_refs()
        except ValueError as e:
            raise ParseError(f"잘못된 정의 {where} ({record.id}): {e}") from e

        line_ids: List[str] = []
        for ref in refs:
            if ref.line_id not in lines:
                raise ParseError(
                    f"미정의 노선 참조 ({source}): 역 {record.id} -> 노선 {ref.line_id}"
                )
            if ref.line_id in line_ids:
                raise ParseError(
                    f"노선 중복 소속 ({source}): 역 {record.id} -> 노선 {ref.line_id}"
                )
            line_ids.append(ref.line_id)

        station = Station(id=record.id, name=record.name, line_ids=line_ids)
        stations[record.id] = station

        for ref in refs:
            memberships[ref.line_id].append((ref.position, index, station))

    return stations, memberships


def _link_lines(
    lines: Dict[str, Line],
    stations: Dict[str, Station],
    memberships: Dict[str, List[Tuple[Optional[int], int, Station]]],
    source: str,
) -> None:
    """노선별 역 순서 결정 + Station <-> Line 상호 연결"""
    for line_id, members in memberships.items():
        line = lines[line_id]

        if not members:
            raise ParseError(f"역이 없는 노선 ({source}): {line_id}")

        positions = [position for position, _, _ in members]
        if any(p is not None for p in positions):
            if any(p is None for p in positions):
                raise ParseError(f"노선 {line_id}의 일부 역에만 순번 지정됨 ({source})")
            if len(set(positions)) != len(positions):
                raise ParseError(f"노선 {line_id}의 역 순번 중복 ({source})")
            members = sorted(members, key=lambda m: m[0])

        line.stations = [station for _, _, station in members]

    for station in stations.values():
        station.lines = [lines[line_id] for line_id in station.line_ids]
