from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import orjson
import pytest

from codis_config import env
from codis_config.client import DashboardClient


class FakeDashboard:
    """Records requests and answers them from a fixed response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b'{"ok": true}'
        self.error: Exception | None = None

    def respond(self, value: Any = None, *, status_code: int = 200, raw: bytes | None = None) -> None:
        self.status_code = status_code
        self.body = raw if raw is not None else orjson.dumps(value)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    def client(self, addr: str = "dashboard:18087") -> DashboardClient:
        return DashboardClient(addr, transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def dashboard() -> FakeDashboard:
    return FakeDashboard()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    # no stray config.ini or CODIS_* variables from the developer machine
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(env, "CODIS_DASHBOARD_ADDR", None)
    monkeypatch.setattr(env, "CODIS_CONFIG_FILE", env.DEFAULT_CONFIG_FILE)
    monkeypatch.setattr(env, "CODIS_HTTP_TIMEOUT", None)
    yield


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str = "config.ini", **values: str) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{k}={v}\n" for k, v in values.items()), encoding="utf-8")
        return path

    return _write
