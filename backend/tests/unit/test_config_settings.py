"""Unit tests for application settings configuration."""

from pathlib import Path

from inventory.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("POKEAPI_BASE_URL", "https://pokeapi.test/api/v2")
    monkeypatch.setenv("MAX_IMAGE_SIZE_MB", "2")

    settings = Settings()

    assert settings.pokeapi_base_url == "https://pokeapi.test/api/v2"
    assert settings.max_image_size_bytes == 2 * 1024 * 1024
