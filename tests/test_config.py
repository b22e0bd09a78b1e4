from notebook_content.config import Settings


def test_missing_generation_settings(monkeypatch) -> None:
    monkeypatch.delenv("NOTEBOOK_GENERATION_URL", raising=False)
    monkeypatch.delenv("NOTEBOOK_GENERATION_AUTH", raising=False)
    settings = Settings(_env_file=None)
    assert settings.missing_generation_settings() == ["NOTEBOOK_GENERATION_URL", "NOTEBOOK_GENERATION_AUTH"]
    assert settings.generation_timeout_seconds is None
    assert settings.source_content_char_limit == 5000


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("NOTEBOOK_GENERATION_URL", "https://n8n.example.com/webhook/x")
    monkeypatch.setenv("NOTEBOOK_GENERATION_AUTH", "token")
    monkeypatch.setenv("SOURCE_CONTENT_CHAR_LIMIT", "100")
    settings = Settings(_env_file=None)
    assert settings.missing_generation_settings() == []
    assert settings.generation_url == "https://n8n.example.com/webhook/x"
    assert settings.source_content_char_limit == 100
