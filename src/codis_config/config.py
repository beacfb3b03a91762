from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from codis_config import env
from codis_config.errors import InvalidArgumentError, UsageError
from codis_config.logging import get_logger

logger = get_logger("config")


@dataclass(slots=True)
class GlobalOptions:
    """Holds process-wide CLI options."""

    verbose: int = 0
    pretty: bool = False
    config_path: Path | None = None
    dashboard_addr: str | None = None


GLOBAL_OPTIONS = GlobalOptions()


@dataclass(frozen=True, slots=True)
class Settings:
    dashboard_addr: str
    product: str | None = None
    zk: str | None = None
    timeout: float = env.DEFAULT_HTTP_TIMEOUT


def read_config_file(path: Path) -> dict[str, str]:
    """Read a ``key=value`` config file, dropping keys without a value."""
    values = dotenv_values(path)
    return {k: v.strip() for k, v in values.items() if v is not None and v.strip()}


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise InvalidArgumentError("CODIS_HTTP_TIMEOUT", raw) from None
    if timeout <= 0:
        raise InvalidArgumentError("CODIS_HTTP_TIMEOUT", raw, "must be positive")
    return timeout


def load_settings(
    config_path: str | Path | None = None,
    *,
    dashboard_addr: str | None = None,
) -> Settings:
    """Resolve settings from, in order: explicit override, environment, config file.

    ``config_path`` defaults to ``$CODIS_CONFIG_FILE``; the default file may be
    absent, an explicitly given one must exist.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise UsageError(f"config file not found: {path}")
        file_values = read_config_file(path)
    else:
        path = Path(env.CODIS_CONFIG_FILE)
        file_values = read_config_file(path) if path.is_file() else {}

    logger.debug("Loaded config from %s: %s", path, file_values)

    addr = (
        dashboard_addr
        or env.CODIS_DASHBOARD_ADDR
        or file_values.get("dashboard_addr")
        or env.DEFAULT_DASHBOARD_ADDR
    )
    timeout = (
        _parse_timeout(env.CODIS_HTTP_TIMEOUT)
        if env.CODIS_HTTP_TIMEOUT
        else env.DEFAULT_HTTP_TIMEOUT
    )

    return Settings(
        dashboard_addr=addr,
        product=file_values.get("product"),
        zk=file_values.get("zk"),
        timeout=timeout,
    )
