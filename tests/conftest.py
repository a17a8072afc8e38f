"""
pytest fixtures for nanjing_metro tests
"""
import pytest

from nanjing_metro import NanjingMetro, parse_map
from nanjing_metro.services.metro_graph import MetroGraph


# 3개 노선, 환승역 Central/East/Harbor
#
#   West ─Red─ Central ─Red─ East
#                │             │
#   North ─Blue─ Central      Green
#                │             │
#              South ─Blue─ Harbor
SAMPLE_MAP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<tube name="Sample Metro">
  <lines>
    <line id="1" name="Red Line" color="#ff0000"/>
    <line id="2" name="Blue Line" color="#0000FF"/>
    <line id="3" name="Green Line"/>
  </lines>
  <stations>
    <station id="1-1" name="West" line="1"/>
    <station id="1-2" name="Central" line="1"/>
    <station id="1-3" name="East" line="1"/>
    <station id="2-1" name="North" line="2"/>
    <station id="2-2" name="Central" line="2"/>
    <station id="2-3" name="South" line="2"/>
    <station id="2-4" name="Harbor" line="2"/>
    <station id="3-1" name="East" line="3"/>
    <station id="3-2" name="Harbor" line="3"/>
  </stations>
</tube>
"""


@pytest.fixture
def sample_map_xml() -> str:
    """샘플 노선도 문서"""
    return SAMPLE_MAP_XML


@pytest.fixture
def sample_map():
    """샘플 노선도 MetroMap"""
    return parse_map(SAMPLE_MAP_XML, source="sample")


@pytest.fixture
def sample_graph(sample_map) -> MetroGraph:
    """샘플 노선도 그래프 엔진 (기본 환승 비용 0.5)"""
    return MetroGraph(sample_map)


@pytest.fixture
def write_map(tmp_path):
    """문서를 임시 파일로 저장하고 경로를 반환하는 헬퍼"""
    def _write(content: str, filename: str = "map.xml"):
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="session")
def metro() -> NanjingMetro:
    """내장 노선도를 로드한 NanjingMetro (세션 공유, 읽기 전용)"""
    return NanjingMetro()
