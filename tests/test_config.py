from __future__ import annotations

import pytest

from user_directory_api.app.core.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("PORT", "HOST", "APP_ENV", "PUBLIC_DIR", "PROJECT_NAME", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.environment == "development"
    assert settings.is_development
    assert settings.public_dir == "public"
    assert settings.project_name == "Directorio de Usuarios"
    assert settings.log_file is None


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("LOG_FILE", "usuarios.log")

    settings = Settings()

    assert settings.port == 5000
    assert settings.environment == "production"
    assert not settings.is_development
    assert settings.log_file == "usuarios.log"


def test_blank_port_uses_default(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "  ")
    assert Settings().port == 3000


def test_invalid_port_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "tres mil")
    with pytest.raises(ValueError, match="PORT"):
        Settings()
