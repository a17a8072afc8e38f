"""도메인 모델 테스트"""

from nanjing_metro.models.domain import Line, Route, RouteStep, Station, normalize_name


def _line(line_id, name):
    return Line(id=line_id, name=name)


class TestStationAndLine:
    """Station / Line 테스트"""

    def test_station_equality_by_id(self):
        a = Station(id="1-1", name="A", line_ids=["1"])
        b = Station(id="1-1", name="A", line_ids=["1"])
        assert a == b
        assert len({a, b}) == 1

    def test_station_str(self):
        assert str(Station(id="1-11", name="中华门", line_ids=["1"])) == "中华门"

    def test_linked_repr_does_not_recurse(self):
        line = _line("1", "One")
        station = Station(id="1-1", name="A", line_ids=["1"], lines=[line])
        line.stations.append(station)
        assert "One" in repr(line)
        assert "A" in repr(station)

    def test_line_station_ids(self):
        line = _line("1", "One")
        line.stations = [
            Station(id="1-1", name="A", line_ids=["1"]),
            Station(id="1-2", name="B", line_ids=["1"]),
        ]
        assert line.station_ids == ["1-1", "1-2"]

    def test_lines_sort_by_name(self):
        lines = [_line("2", "B"), _line("1", "A")]
        assert [line.id for line in sorted(lines)] == ["1", "2"]

    def test_normalize_name(self):
        assert normalize_name("  Xinjiekou ") == "xinjiekou"
        assert normalize_name("新街口") == "新街口"


class TestRoute:
    """Route 테스트"""

    def _route(self):
        one, two = _line("1", "One"), _line("2", "Two")
        a = Station(id="1-1", name="A", line_ids=["1"])
        b = Station(id="2-2", name="B", line_ids=["2"])
        c = Station(id="2-3", name="C", line_ids=["2"])
        return Route(
            steps=[RouteStep(a, one), RouteStep(b, two), RouteStep(c, two)],
            cost=2.5,
        )

    def test_endpoints(self):
        route = self._route()
        assert route.from_station.id == "1-1"
        assert route.to_station.id == "2-3"
        assert len(route) == 3

    def test_lines_and_transfers(self):
        route = self._route()
        assert [line.id for line in route.lines] == ["1", "2"]
        assert route.transfers == 1

    def test_str(self):
        assert str(self._route()) == "A (One), B (Two), C (Two)"

    def test_single_step(self):
        one = _line("1", "One")
        route = Route(steps=[RouteStep(Station(id="1-1", name="A", line_ids=["1"]), one)], cost=0)
        assert route.transfers == 0
        assert str(route) == "A (One)"
