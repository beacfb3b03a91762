from __future__ import annotations

import httpx
import orjson
import pytest

from codis_config.client import DashboardClient, HttpMethod, dashboard_base_url
from codis_config.errors import ApiError


@pytest.mark.parametrize(
    ("addr", "expected"),
    [
        ("localhost:18087", "http://localhost:18087"),
        ("10.0.0.1:18087/", "http://10.0.0.1:18087"),
        ("https://dashboard.example:443", "https://dashboard.example:443"),
    ],
)
def test_dashboard_base_url(addr: str, expected: str) -> None:
    assert dashboard_base_url(addr) == expected


def test_call_api_decodes_json(dashboard) -> None:  # noqa: ANN001
    dashboard.respond({"msg": "OK", "ret": 0})

    with dashboard.client() as client:
        value = client.call_api(HttpMethod.GET, "/api/action/gc?keep=5")

    assert value == {"msg": "OK", "ret": 0}
    (request,) = dashboard.requests
    assert request.method == "GET"
    assert str(request.url) == "http://dashboard:18087/api/action/gc?keep=5"
    assert request.url.params["keep"] == "5"
    assert request.content == b""


def test_call_api_sends_json_body(dashboard) -> None:  # noqa: ANN001
    with dashboard.client() as client:
        client.call_api(HttpMethod.POST, "/api/slots", body={"from": 0, "to": 1023})

    (request,) = dashboard.requests
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert orjson.loads(request.content) == {"from": 0, "to": 1023}


def test_call_api_rejects_relative_path(dashboard) -> None:  # noqa: ANN001
    with dashboard.client() as client, pytest.raises(ApiError) as exc_info:
        client.call_api(HttpMethod.GET, "api/remove_fence")

    assert "must start with '/'" in str(exc_info.value)
    assert dashboard.requests == []


def test_call_api_non_200_status(dashboard) -> None:  # noqa: ANN001
    dashboard.respond(raw=b"zk lock not found", status_code=500)

    with dashboard.client() as client, pytest.raises(ApiError) as exc_info:
        client.call_api(HttpMethod.GET, "/api/force_remove_locks")

    err = exc_info.value
    assert err.status_code == 500
    assert err.body == "zk lock not found"
    assert err.method == "GET"
    assert err.path == "/api/force_remove_locks"
    assert str(err) == "http status code 500, zk lock not found"


def test_call_api_transport_error_is_chained(dashboard) -> None:  # noqa: ANN001
    dashboard.error = httpx.ConnectError("connection refused")

    with dashboard.client() as client, pytest.raises(ApiError) as exc_info:
        client.call_api(HttpMethod.GET, "/api/remove_fence")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_call_api_invalid_json(dashboard) -> None:  # noqa: ANN001
    dashboard.respond(raw=b"<html>not json</html>")

    with dashboard.client() as client, pytest.raises(ApiError) as exc_info:
        client.call_api(HttpMethod.GET, "/api/remove_fence")

    assert exc_info.value.status_code == 200
    assert isinstance(exc_info.value.__cause__, orjson.JSONDecodeError)


@pytest.mark.parametrize("value", [None, 3, "done", [1, "two", None], {"b": 1, "a": {"c": []}}])
def test_call_api_any_json_value(dashboard, value) -> None:  # noqa: ANN001
    dashboard.respond(value)

    with dashboard.client() as client:
        assert client.call_api(HttpMethod.GET, "/api/remove_fence") == value


def test_close_is_idempotent(dashboard) -> None:  # noqa: ANN001
    client = dashboard.client()
    client.close()
    client.close()
    assert isinstance(client, DashboardClient)
