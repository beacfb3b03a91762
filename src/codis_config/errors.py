from __future__ import annotations

__all__ = ["CodisConfigError", "UsageError", "InvalidArgumentError", "ApiError"]


class CodisConfigError(Exception):
    """Base class for errors raised by codis-config."""


class UsageError(CodisConfigError):
    """The arguments do not match the command grammar."""


class InvalidArgumentError(CodisConfigError):
    def __init__(self, name: str, value: str, reason: str = "not a valid integer") -> None:
        super().__init__(f"invalid value for {name}: {value!r} ({reason})")
        self.name = name
        self.value = value


class ApiError(CodisConfigError):
    """A dashboard API call failed.

    ``status_code`` is None when no response was received.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
