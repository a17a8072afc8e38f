"""환경 설정 모듈"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 노선도 문서 (None이면 패키지 내장 파일 사용)
    DOCUMENT_PATH: Optional[str] = None

    # 경로 탐색
    INTERCHANGE_COST: float = Field(default=0.5, ge=0)
    MAX_ROUTES: int = Field(default=100, ge=1)

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    LOG_FILE: Optional[str] = None  # 파일 로깅 경로 (None이면 콘솔만)

    class Config:
        env_prefix = "NANJING_METRO_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()


# ========== 노선도 상수 (중앙화) ==========

class MapConfig:
    """노선도 관련 상수 중앙 관리"""

    # 내장 데이터
    DATA_DIR = Path(__file__).parent / "data"
    DEFAULT_DOCUMENT = "nanjing-map.xml"

    # 같은 노선 인접 역 사이 비용
    LINE_EDGE_COST = 1.0

    @classmethod
    def get_default_document_path(cls) -> Path:
        return cls.DATA_DIR / cls.DEFAULT_DOCUMENT
