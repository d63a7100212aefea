import empleos.core.config as config


def test_comma_separated_origins_are_split(monkeypatch):
    class DummySettings:
        allowed_origins = "http://a.test, http://b.test,"

    monkeypatch.setattr(config, "Settings", lambda: DummySettings())
    config.get_settings.cache_clear()
    try:
        settings = config.get_settings()
    finally:
        config.get_settings.cache_clear()

    assert settings.allowed_origins == ["http://a.test", "http://b.test"]


def test_cors_header_echoes_wildcard():
    from fastapi.testclient import TestClient

    from empleos.main import create_app

    response = TestClient(create_app()).get("/health", headers={"Origin": "http://x.test"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_welcome_message_from_environment(monkeypatch):
    from fastapi.testclient import TestClient

    from empleos.main import create_app

    monkeypatch.setenv("WELCOME_MESSAGE", "Hola desde el entorno")
    config.get_settings.cache_clear()
    try:
        data = TestClient(create_app()).get("/api/v1/").json()
    finally:
        config.get_settings.cache_clear()

    assert data["mensaje"] == "Hola desde el entorno"
