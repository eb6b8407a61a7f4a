"""Testes do entrypoint main()."""

from __future__ import annotations

import pytest

from app import app as app_module


@pytest.fixture
def required_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setenv("LINE_CHANNEL_SECRET", "secret")
    monkeypatch.setenv("LINE_CHANNEL_ACCESS_TOKEN", "token")
    monkeypatch.setenv("GCS_BUCKET", "bkt")
    monkeypatch.delenv("LINE_PRESETS", raising=False)
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    return monkeypatch


def test_main_exits_on_unreadable_timeout(required_env: pytest.MonkeyPatch) -> None:
    started: list[int] = []
    required_env.setattr("uvicorn.run", lambda *args, **kwargs: started.append(1))
    required_env.setenv("LINE_REQUEST_TIMEOUT_SECONDS", "thirty")

    with pytest.raises(SystemExit) as exc_info:
        app_module.main()

    assert exc_info.value.code == 1
    assert started == []


def test_main_starts_uvicorn_with_valid_settings(required_env: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    required_env.setattr("uvicorn.run", lambda *args, **kwargs: calls.append(kwargs))
    required_env.delenv("LINE_REQUEST_TIMEOUT_SECONDS", raising=False)

    app_module.main()

    assert calls == [{"host": "0.0.0.0", "port": 8080, "log_config": None}]
