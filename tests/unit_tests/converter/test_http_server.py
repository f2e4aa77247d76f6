"""Unit tests for the HTTP transport."""

from __future__ import annotations

import argparse
import types
from typing import TYPE_CHECKING, Protocol, cast

import pytest

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class _UvicornLike(Protocol):
    def run(self, app_ref: str, *, host: str, port: int, reload: bool) -> None: ...


def _client() -> TestClient:
    pytest.importorskip("fastapi")
    pytest.importorskip("httpx")

    from fastapi.testclient import TestClient

    module = __import__("bytes_converter.converter.http_server", fromlist=["create_app"])

    return TestClient(module.create_app())


def test_convert_returns_all_views() -> None:
    """Return flags, text and every rendering."""
    client = _client()
    response = client.post("/v1/convert", json={"format": "text", "input": "€"})

    assert response.status_code == 200
    body = response.json()
    assert body["format"] == "text"
    assert body["bytes_valid"] is True
    assert body["text_valid"] is True
    assert body["hex"] == "E2 82 AC"
    assert body["base64"] == "4oKs"
    assert body["uri"] == "%E2%82%AC"
    assert body["unicode"] == "U+0020ac"
    assert body["code_points"] == [0x20AC]


def test_convert_binary_bytes_is_not_an_error() -> None:
    """Bytes that are not UTF-8 still return 200."""
    client = _client()
    response = client.post("/v1/convert", json={"format": "HEX", "input": "FF FE"})

    assert response.status_code == 200
    body = response.json()
    assert body["bytes_valid"] is True
    assert body["text_valid"] is False
    assert body["unicode"] == ""
    assert body["state"] == "text_invalid"


def test_convert_invalid_input_returns_400() -> None:
    """Byte-level failures map to 400 with the error message."""
    client = _client()
    response = client.post("/v1/convert", json={"format": "base64", "input": "S=G"})

    assert response.status_code == 400
    assert response.json()["detail"] == "base64-string can only have = at end of string"


@pytest.mark.parametrize(
    "payload",
    [
        {"format": "latin1", "input": "abc"},
        {"format": "hex"},
        {"format": "hex", "input": "41", "block_size": 2},
    ],
)
def test_convert_rejects_invalid_payload(payload: dict[str, object]) -> None:
    """Schema violations are rejected before conversion."""
    client = _client()
    response = client.post("/v1/convert", json=payload)
    assert response.status_code == 422


def test_health_and_ready_endpoints() -> None:
    """Expose liveness and readiness endpoints with 200 responses."""
    client = _client()
    health = client.get("/healthz")
    ready = client.get("/readyz")

    assert health.status_code == 200
    assert health.json() == {"status": "ok"}
    assert ready.status_code == 200
    assert ready.json() == {"status": "ready"}


def test_main_runs_uvicorn(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Parse CLI args and pass them to uvicorn."""
    pytest.importorskip("fastapi")
    calls: dict[str, str | int | bool] = {}

    import bytes_converter.converter.http_server as module

    monkeypatch.setattr(
        argparse.ArgumentParser,
        "parse_args",
        lambda self: argparse.Namespace(host="127.0.0.1", port=9999),
    )

    def fake_run(app_ref: str, *, host: str, port: int, reload: bool) -> None:
        calls["app_ref"] = app_ref
        calls["host"] = host
        calls["port"] = port
        calls["reload"] = reload

    monkeypatch.setattr(
        module,
        "uvicorn",
        cast(_UvicornLike, types.SimpleNamespace(run=fake_run)),
    )
    module.main()
    assert calls == {
        "app_ref": "bytes_converter.converter.http_server:app",
        "host": "127.0.0.1",
        "port": 9999,
        "reload": False,
    }


def test_main_requires_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail clearly when uvicorn is not installed."""
    pytest.importorskip("fastapi")
    import bytes_converter.converter.http_server as module

    monkeypatch.setattr(module, "uvicorn", None)
    with pytest.raises(RuntimeError, match="uvicorn is required"):
        module.main()
