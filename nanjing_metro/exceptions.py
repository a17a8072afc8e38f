"""남경 지하철 노선도 커스텀 예외 모듈"""


class MetroError(Exception):
    """노선도 기본 예외"""
    pass


class ResourceError(MetroError):
    """노선도 문서를 찾을 수 없거나 읽을 수 없음"""
    pass


class ParseError(MetroError):
    """노선도 문서 파싱/검증 실패"""
    pass


class NotFoundError(MetroError):
    """ID 또는 이름에 해당하는 노선/역 없음"""
    pass


class InvalidLineError(MetroError):
    """조회 인자가 알려진 노선으로 해석되지 않음"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid Line Name [{value}].")


class InvalidStationError(MetroError):
    """조회 인자가 알려진 역으로 해석되지 않음"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid Station Name [{value}].")
