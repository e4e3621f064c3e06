import pytest
from pydantic import ValidationError

from api_doc_builder.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("INDENT", "OUTPUT_FORMAT", "EXAMPLE_SEED", "STRICT", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(f"API_DOC_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.indent == 2
        assert settings.output_format == "json"
        assert settings.example_seed is None
        assert settings.strict is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("API_DOC_INDENT", "4")
        monkeypatch.setenv("API_DOC_STRICT", "true")
        monkeypatch.setenv("API_DOC_EXAMPLE_SEED", "11")
        settings = get_settings()
        assert settings.indent == 4
        assert settings.strict is True
        assert settings.example_seed == 11

    def test_invalid_format_rejected(self, monkeypatch):
        monkeypatch.setenv("API_DOC_OUTPUT_FORMAT", "xml")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("API_DOC_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("API_DOC_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
