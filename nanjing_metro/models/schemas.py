"""Pydantic 스키마 정의 - 노선도 문서 레코드

XML 속성을 그대로 검증하는 용도입니다.
검증을 통과한 레코드만 도메인 객체(Station, Line)로 변환됩니다.
"""

import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class TubeRecord(BaseModel):
    """<tube> 루트 요소"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1, description="지하철 시스템 표시명")


class LineRecord(BaseModel):
    """<line> 요소"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    id: str = Field(..., min_length=1, description="노선 ID")
    name: str = Field(..., min_length=1, description="노선명")
    color: Optional[str] = Field(None, description="표시 색상 (#RRGGBB)")

    @field_validator("color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        if not _COLOR_PATTERN.match(value):
            raise ValueError(f"색상 형식 오류: {value}")
        return value.upper()


class LineRef(BaseModel):
    """역의 노선 소속 (line 속성의 한 항목)"""
    line_id: str = Field(..., min_length=1)
    position: Optional[int] = Field(None, ge=1)


class StationRecord(BaseModel):
    """<station> 요소

    line 속성은 "1" 또는 "1:11" 형식 항목을 쉼표로 나열합니다.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    id: str = Field(..., min_length=1, description="역 ID")
    name: str = Field(..., min_length=1, description="역명")
    line: str = Field(..., min_length=1, description="소속 노선 목록")

    def line_refs(self) -> List[LineRef]:
        """line 속성 파싱

        Raises:
            ValueError: 항목이 비어 있거나 순번이 양의 정수가 아닌 경우
        """
        refs: List[LineRef] = []
        for token in self.line.split(","):
            line_id, position = _split_line_token(token)
            if not line_id:
                raise ValueError(f"빈 노선 항목: {self.line!r}")
            if position is None:
                refs.append(LineRef(line_id=line_id))
                continue
            if not position.isdigit() or int(position) < 1:
                raise ValueError(f"순번 형식 오류: {token.strip()!r}")
            refs.append(LineRef(line_id=line_id, position=int(position)))
        return refs


def _split_line_token(token: str) -> Tuple[str, Optional[str]]:
    """노선 항목 분리 (예: "1:11" -> ("1", "11"))"""
    token = token.strip()
    if ":" not in token:
        return token, None
    line_id, position = token.split(":", 1)
    return line_id.strip(), position.strip()
