"""Unit tests for application settings."""

import os

import pytest
from pydantic import ValidationError

from tokenvest.config.settings import Settings, get_settings


class TestSettingsValidation:
    """Tests for Settings validation."""

    def test_default_settings_are_valid(self) -> None:
        """Default settings should pass all validation."""
        env_vars_to_clear = ["DEBUG", "LOG_LEVEL", "PORT", "STORE_BACKEND", "STORE_PATH"]
        original_values = {k: os.environ.pop(k, None) for k in env_vars_to_clear}

        try:
            # Use _env_file=None to ignore .env and test true defaults
            settings = Settings(_env_file=None)  # type: ignore[call-arg]
            assert settings.port == 8000
            assert settings.debug is False
            assert settings.log_level == "INFO"
            assert settings.store_backend == "memory"
            assert settings.store_path is None
            assert settings.registry_admin is None
        finally:
            for k, v in original_values.items():
                if v is not None:
                    os.environ[k] = v

    def test_port_must_be_valid_range(self) -> None:
        """Port must be between 1 and 65535."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(port=0)
        assert "greater than or equal to 1" in str(exc_info.value)

        with pytest.raises(ValidationError) as exc_info:
            Settings(port=70000)
        assert "less than or equal to 65535" in str(exc_info.value)

    def test_log_level_must_be_valid(self) -> None:
        """Log level must be one of the allowed values."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            settings = Settings(log_level=level)  # type: ignore[arg-type]
            assert settings.log_level == level

        with pytest.raises(ValidationError):
            Settings(log_level="INVALID")  # type: ignore[arg-type]

    def test_log_level_is_case_insensitive(self) -> None:
        settings = Settings(log_level="debug")  # type: ignore[arg-type]
        assert settings.log_level == "DEBUG"

    def test_store_backend_must_be_known(self) -> None:
        with pytest.raises(ValidationError):
            Settings(store_backend="redis")  # type: ignore[arg-type]

    def test_file_backend_requires_path(self) -> None:
        """File backend without a path is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(store_backend="file", store_path=None)
        assert "store_path is required" in str(exc_info.value)

        with pytest.raises(ValidationError):
            Settings(store_backend="file", store_path="   ")

    def test_file_backend_with_path(self, tmp_path) -> None:
        path = str(tmp_path / "registry.json")
        settings = Settings(store_backend="file", store_path=path)
        assert settings.store_path == path

    def test_blank_registry_admin_is_unset(self) -> None:
        assert Settings(registry_admin="  ").registry_admin is None
        assert Settings(registry_admin=" GADMIN ").registry_admin == "GADMIN"


class TestSettingsFromEnvironment:
    """Tests for environment variable loading."""

    def test_reads_values_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9100")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("APP_NAME", "RegistryTest")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.port == 9100
        assert settings.debug is True
        assert settings.app_name == "RegistryTest"

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
