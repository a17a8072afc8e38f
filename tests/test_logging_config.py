"""로깅 설정 테스트"""

import logging

import pytest

from nanjing_metro.exceptions import InvalidStationError
from nanjing_metro.logging_config import (
    _format_result_preview,
    _truncate,
    log_function,
    log_timing,
    setup_logger,
)


@pytest.fixture
def fresh_logger_name(request):
    """테스트마다 고유한 로거 이름 (핸들러 정리 포함)"""
    name = f"nanjing_metro_test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogger:
    """setup_logger 테스트"""

    def test_console_only(self, fresh_logger_name):
        logger = setup_logger(fresh_logger_name, level=logging.DEBUG, log_file=None)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_file_handler_utf8(self, fresh_logger_name, tmp_path):
        log_file = tmp_path / "metro.log"
        logger = setup_logger(fresh_logger_name, level=logging.INFO, log_file=str(log_file))
        logger.info("中华门")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "中华门" in log_file.read_text(encoding="utf-8")

    def test_idempotent(self, fresh_logger_name):
        first = setup_logger(fresh_logger_name, level=logging.INFO)
        second = setup_logger(fresh_logger_name, level=logging.DEBUG)

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.INFO


class TestLogHelpers:
    """log_function / log_timing 테스트"""

    def test_log_function_enter_exit(self, caplog):
        logger = logging.getLogger("nanjing_metro_test.helpers")

        class Engine:
            @log_function(logger)
            def lookup(self, name):
                return [name]

        with caplog.at_level(logging.DEBUG, logger="nanjing_metro_test.helpers"):
            assert Engine().lookup("鼓楼") == ["鼓楼"]

        assert "[ENTER] lookup('鼓楼')" in caplog.text
        assert "[EXIT] lookup -> [1 items]" in caplog.text

    def test_log_function_reraises(self, caplog):
        logger = logging.getLogger("nanjing_metro_test.helpers")

        class Engine:
            @log_function(logger)
            def fail(self):
                raise KeyError("x")

        with caplog.at_level(logging.DEBUG, logger="nanjing_metro_test.helpers"):
            with pytest.raises(KeyError):
                Engine().fail()

        assert "[ERROR] fail failed" in caplog.text

    def test_log_function_expected_error_is_debug(self, caplog):
        logger = logging.getLogger("nanjing_metro_test.helpers")

        class Engine:
            @log_function(logger)
            def lookup(self, name):
                raise InvalidStationError(name)

        with caplog.at_level(logging.DEBUG, logger="nanjing_metro_test.helpers"):
            with pytest.raises(InvalidStationError):
                Engine().lookup("foo")

        assert "[REJECT] lookup: InvalidStationError" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_log_function_custom_expected(self, caplog):
        logger = logging.getLogger("nanjing_metro_test.helpers")

        class Engine:
            @log_function(logger, expected=(KeyError,))
            def fail(self):
                raise KeyError("x")

        with caplog.at_level(logging.DEBUG, logger="nanjing_metro_test.helpers"):
            with pytest.raises(KeyError):
                Engine().fail()

        assert "[REJECT] fail: KeyError" in caplog.text
        assert "[ERROR]" not in caplog.text

    def test_log_timing(self, caplog):
        logger = logging.getLogger("nanjing_metro_test.helpers")
        with caplog.at_level(logging.DEBUG, logger="nanjing_metro_test.helpers"):
            with log_timing("노선도 파싱", logger):
                pass

        assert "[START] 노선도 파싱" in caplog.text
        assert "[END] 노선도 파싱" in caplog.text

    def test_truncate(self):
        assert _truncate("abc", 5) == "abc"
        assert _truncate("abcdefgh", 6) == "abc..."

    def test_format_result_preview(self):
        assert _format_result_preview(None) == "None"
        assert _format_result_preview({"a": 1}) == "{'a': 1}"
        assert _format_result_preview([1, 2]) == "[2 items]"

    def test_format_route_preview(self, sample_graph):
        route = sample_graph.get_shortest_route("West", "Harbor")
        assert _format_result_preview(route) == "Route(cost=3.5, stops=4, transfers=1)"

        routes = sample_graph.get_all_routes("North", "East")
        assert _format_result_preview(routes) == "[2 routes, cost 2.5~4.5]"
