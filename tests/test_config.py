"""환경 설정 테스트"""

import pytest
from pydantic import ValidationError

from nanjing_metro.config import MapConfig, Settings
from nanjing_metro.services.nanjing import resolve_document_path


class TestSettings:
    """Settings 테스트"""

    def test_defaults(self, monkeypatch):
        for key in ("DOCUMENT_PATH", "INTERCHANGE_COST", "MAX_ROUTES", "LOG_LEVEL", "LOG_FILE"):
            monkeypatch.delenv(f"NANJING_METRO_{key}", raising=False)

        config = Settings()
        assert config.DOCUMENT_PATH is None
        assert config.INTERCHANGE_COST == 0.5
        assert config.MAX_ROUTES == 100
        assert config.LOG_LEVEL == "INFO"
        assert config.LOG_FILE is None

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("NANJING_METRO_INTERCHANGE_COST", "2")
        monkeypatch.setenv("NANJING_METRO_DOCUMENT_PATH", "/tmp/custom.xml")

        config = Settings()
        assert config.INTERCHANGE_COST == 2.0
        assert config.DOCUMENT_PATH == "/tmp/custom.xml"

    def test_negative_interchange_cost_rejected(self):
        with pytest.raises(ValidationError):
            Settings(INTERCHANGE_COST=-0.5)

    def test_zero_max_routes_rejected(self):
        with pytest.raises(ValidationError):
            Settings(MAX_ROUTES=0)


class TestMapConfig:
    """MapConfig 테스트"""

    def test_default_document_path(self):
        path = MapConfig.get_default_document_path()
        assert path.parent == MapConfig.DATA_DIR
        assert path.name == MapConfig.DEFAULT_DOCUMENT

    def test_resolve_falls_back_to_bundled(self):
        assert resolve_document_path(None, Settings(DOCUMENT_PATH=None)) == (
            MapConfig.get_default_document_path()
        )
