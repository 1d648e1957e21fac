"""Lifespan and entry point tests: startup log line and uvicorn wiring."""

import logging

import app.server as server_module
from app.config import Settings, get_settings
from app.main import create_app, lifespan


async def test_lifespan_logs_listening_port(caplog, monkeypatch):
    monkeypatch.setattr("app.main.setup_logging", lambda level, fmt: None)
    port = get_settings().port

    with caplog.at_level(logging.INFO, logger="app.main"):
        async with lifespan(create_app()):
            pass

    messages = [r.getMessage() for r in caplog.records if r.name == "app.main"]
    assert f"Servidor rodando na porta {port}" in messages
    assert "Demo server shutting down" in messages


async def test_lifespan_uses_settings_given_to_create_app(caplog, monkeypatch):
    configured = {}
    monkeypatch.setattr(
        "app.main.setup_logging",
        lambda level, fmt: configured.update(level=level, fmt=fmt),
    )
    settings = Settings(port=8181, log_level="DEBUG", log_format="text")

    with caplog.at_level(logging.INFO, logger="app.main"):
        async with lifespan(create_app(settings)):
            pass

    messages = [r.getMessage() for r in caplog.records if r.name == "app.main"]
    assert "Servidor rodando na porta 8181" in messages
    assert configured == {"level": "DEBUG", "fmt": "text"}


def test_run_starts_uvicorn_on_configured_port(monkeypatch):
    calls = {}
    monkeypatch.setattr(
        server_module.uvicorn, "run",
        lambda target, **kwargs: calls.update(target=target, **kwargs),
    )

    server_module.run()

    settings = get_settings()
    assert calls["target"] == "app.main:app"
    assert calls["port"] == settings.port
    assert calls["host"] == settings.host
    assert calls["log_config"] is None
