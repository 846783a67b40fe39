"""Unit tests for environment configuration."""

from structlog.testing import capture_logs

from tdee_engine.domain.core.value_objects import TEFLevel
from tdee_engine.infrastructure.config import (
    EngineSettings,
    get_default_calibration,
    get_default_tef_level,
    get_log_level,
    is_strict_validation,
    load_env_file,
    load_settings,
)


class TestDefaults:
    """Test values when nothing is configured."""

    def test_load_settings_defaults(self):
        """Test defaults match the engine's built-in defaults."""
        assert load_settings() == EngineSettings()
        assert EngineSettings().default_tef_level == TEFLevel.BALANCED
        assert EngineSettings().default_calibration == 1.0


class TestEnvironmentOverrides:
    """Test environment variables override defaults."""

    def test_tef_level(self, monkeypatch):
        """Test TEF level read case-insensitively."""
        monkeypatch.setenv("TDEE_DEFAULT_TEF_LEVEL", " High ")

        assert get_default_tef_level() == TEFLevel.HIGH

    def test_invalid_tef_level_falls_back(self, monkeypatch):
        """Test unknown TEF level logs a warning and uses balanced."""
        monkeypatch.setenv("TDEE_DEFAULT_TEF_LEVEL", "carnivore")

        with capture_logs() as logs:
            assert get_default_tef_level() == TEFLevel.BALANCED

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["value"] == "carnivore"
        assert logs[0]["default"] == "balanced"

    def test_calibration(self, monkeypatch):
        """Test calibration parsed as float."""
        monkeypatch.setenv("TDEE_DEFAULT_CALIBRATION", "0.92")

        assert get_default_calibration() == 0.92

    def test_calibration_not_a_number(self, monkeypatch):
        """Test malformed calibration falls back to 1.0."""
        monkeypatch.setenv("TDEE_DEFAULT_CALIBRATION", "ninety")

        with capture_logs() as logs:
            assert get_default_calibration() == 1.0

        assert logs[0]["event"] == "Invalid TDEE_DEFAULT_CALIBRATION, using default"
        assert logs[0]["value"] == "ninety"

    def test_calibration_out_of_range(self, monkeypatch):
        """Test calibration outside 0.85-1.15 falls back to 1.0."""
        monkeypatch.setenv("TDEE_DEFAULT_CALIBRATION", "1.4")

        with capture_logs() as logs:
            assert get_default_calibration() == 1.0

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["value"] == 1.4

    def test_strict_validation(self, monkeypatch):
        """Test strict flag accepts 'true' only."""
        assert not is_strict_validation()

        monkeypatch.setenv("TDEE_STRICT_VALIDATION", "TRUE")
        assert is_strict_validation()

        monkeypatch.setenv("TDEE_STRICT_VALIDATION", "1")
        assert not is_strict_validation()

    def test_log_level(self, monkeypatch):
        """Test log level upper-cased."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_log_level() == "DEBUG"


class TestEnvFile:
    """Test .env loading."""

    def test_missing_file(self, tmp_path):
        """Test missing .env is not an error."""
        assert load_env_file(tmp_path / ".env") is False

    def test_loads_values(self, tmp_path, monkeypatch):
        """Test values from .env become visible to getters."""
        # Register both names so values written by dotenv are removed afterwards
        for name in ("TDEE_DEFAULT_TEF_LEVEL", "TDEE_DEFAULT_CALIBRATION"):
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)
        env_file = tmp_path / ".env"
        env_file.write_text("TDEE_DEFAULT_TEF_LEVEL=low\nTDEE_DEFAULT_CALIBRATION=1.1\n")

        assert load_env_file(env_file) is True
        settings = load_settings()

        assert settings.default_tef_level == TEFLevel.LOW
        assert settings.default_calibration == 1.1

    def test_does_not_override_environment(self, tmp_path, monkeypatch):
        """Test process environment wins over .env."""
        monkeypatch.setenv("TDEE_DEFAULT_TEF_LEVEL", "high")
        env_file = tmp_path / ".env"
        env_file.write_text("TDEE_DEFAULT_TEF_LEVEL=low\n")

        load_env_file(env_file)

        assert get_default_tef_level() == TEFLevel.HIGH
