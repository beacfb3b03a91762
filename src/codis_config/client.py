from __future__ import annotations

from enum import Enum
from typing import Any

import httpx
import orjson

from codis_config.errors import ApiError
from codis_config.logging import get_logger

logger = get_logger("client")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


def dashboard_base_url(dashboard_addr: str) -> str:
    addr = dashboard_addr.strip().rstrip("/")
    if "://" not in addr:
        addr = f"http://{addr}"
    return addr


class DashboardClient:
    """Synchronous client for the dashboard HTTP API.

    Usage:
        with DashboardClient("localhost:18087") as client:
            value = client.call_api(HttpMethod.GET, "/api/remove_fence")
    """

    def __init__(
        self,
        dashboard_addr: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = dashboard_base_url(dashboard_addr)
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> DashboardClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if not self._client.is_closed:
            self._client.close()

    def call_api(self, method: HttpMethod, path: str, body: Any = None) -> Any:
        """Perform one request and return the decoded JSON body.

        Raises:
            ApiError: bad path, transport failure, non-200 status or undecodable body.
        """
        method_name = HttpMethod(method).value
        if not path.startswith("/"):
            raise ApiError(
                f"api path must start with '/': {path!r}",
                method=method_name,
                path=path,
            )

        content: bytes | None = None
        headers: dict[str, str] = {}
        if body is not None:
            content = orjson.dumps(body)
            headers["Content-Type"] = "application/json"

        logger.debug("API request: %s %s%s", method_name, self.base_url, path)
        try:
            response = self._client.request(method_name, path, content=content, headers=headers)
        except httpx.HTTPError as exc:
            logger.debug("API request failed: %s %s: %s", method_name, path, exc)
            raise ApiError(
                f"{method_name} {path} failed: {exc}",
                method=method_name,
                path=path,
            ) from exc

        text = response.text
        logger.debug(
            "API response: %s %s status=%s body=%s",
            method_name,
            path,
            response.status_code,
            text,
        )

        if response.status_code != httpx.codes.OK:
            raise ApiError(
                f"http status code {response.status_code}, {text}",
                method=method_name,
                path=path,
                status_code=response.status_code,
                body=text,
            )

        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            raise ApiError(
                f"{method_name} {path} returned invalid JSON: {exc}",
                method=method_name,
                path=path,
                status_code=response.status_code,
                body=text,
            ) from exc
