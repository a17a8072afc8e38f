"""노선도 로깅 설정 모듈

라이브러리는 import 시 핸들러를 설치하지 않습니다.
콘솔/파일 출력이 필요하면 애플리케이션에서 setup_logger()를 한 번 호출하세요.
"""

import functools
import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Optional, Tuple, Type

from nanjing_metro.config import settings
from nanjing_metro.exceptions import MetroError
from nanjing_metro.models.domain import Route


# 로거 이름 상수
LOGGER_NAME = "nanjing_metro"


def setup_logger(
    name: str = LOGGER_NAME,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    노선도 로거 설정

    Args:
        name: 로거 이름
        level: 로그 레벨 (None이면 settings.LOG_LEVEL 사용)
        log_file: 파일 출력 경로 (None이면 settings.LOG_FILE 사용)

    Returns:
        설정된 로거
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 설정되어 있으면 스킵
    if logger.handlers:
        return logger

    # 로그 레벨 결정 (환경변수 우선)
    if level is None:
        level_name = settings.LOG_LEVEL.upper()
        level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    if log_file is None:
        log_file = settings.LOG_FILE

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 파일 핸들러 (옵션) - 역명이 한자이므로 utf-8 고정
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # 상위 로거로 전파 방지
    logger.propagate = False

    return logger


# ========== 데코레이터 ==========

def log_function(
    logger: Optional[logging.Logger] = None,
    expected: Tuple[Type[BaseException], ...] = (MetroError,),
):
    """
    조회 진입/종료 + 소요시간 로깅 데코레이터

    잘못된 역명/노선명처럼 호출자가 처리할 오류(expected)는 DEBUG로,
    그 외 예외는 ERROR로 남긴 뒤 그대로 다시 발생시킵니다.

    Usage:
        @log_function(logger)
        def get_shortest_route(self, from_name, to_name):
            ...
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger or logging.getLogger(LOGGER_NAME)
            func_name = func.__name__

            args_preview = _format_args_preview(args, kwargs)
            _logger.debug(f"[ENTER] {func_name}({args_preview})")
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except expected as e:
                elapsed = time.perf_counter() - start_time
                _logger.debug(
                    f"[REJECT] {func_name}: {type(e).__name__}: {e} ({elapsed:.3f}s)"
                )
                raise
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                _logger.error(f"[ERROR] {func_name} failed: {e} ({elapsed:.3f}s)")
                raise

            elapsed = time.perf_counter() - start_time
            result_preview = _format_result_preview(result)
            _logger.debug(f"[EXIT] {func_name} -> {result_preview} ({elapsed:.3f}s)")
            return result

        return wrapper

    return decorator


@contextmanager
def log_timing(operation: str, logger: Optional[logging.Logger] = None):
    """
    컨텍스트 매니저로 구간 소요시간 측정

    Usage:
        with log_timing("노선도 파싱", logger):
            root = etree.fromstring(data)
    """
    _logger = logger or logging.getLogger(LOGGER_NAME)
    start_time = time.perf_counter()
    _logger.debug(f"[START] {operation}")

    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        _logger.debug(f"[END] {operation} ({elapsed:.3f}s)")


# ========== 유틸리티 ==========

def _format_args_preview(args: tuple, kwargs: dict, max_len: int = 100) -> str:
    """인자 미리보기 포맷팅 (첫 위치 인자는 self로 간주)"""
    parts = [_truncate(repr(arg), 30) for arg in args[1:]]

    for k, v in kwargs.items():
        parts.append(f"{k}={_truncate(repr(v), 30)}")

    return _truncate(", ".join(parts), max_len)


def _format_result_preview(result: Any, max_len: int = 100) -> str:
    """결과 미리보기 포맷팅 (Route는 비용/정류 지점 수/환승 횟수)"""
    if isinstance(result, Route):
        return f"Route(cost={result.cost}, stops={len(result)}, transfers={result.transfers})"
    if isinstance(result, list):
        costs = [r.cost for r in result if isinstance(r, Route)]
        if costs and len(costs) == len(result):
            return f"[{len(result)} routes, cost {min(costs)}~{max(costs)}]"
        return f"[{len(result)} items]"
    if result is None:
        return "None"
    return _truncate(str(result), max_len)


def _truncate(text: Any, max_len: int) -> str:
    """텍스트 길이 제한"""
    text = str(text)
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."
