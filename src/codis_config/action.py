"""Dashboard maintenance actions: gc, remove-lock and remove-fence.

The parsed option set is turned into exactly one action variant by
:func:`select_action`; :func:`run_action` performs it against the dashboard.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from codis_config.client import HttpMethod
from codis_config.errors import InvalidArgumentError, UsageError
from codis_config.formatting import jsonify
from codis_config.logging import get_logger

logger = get_logger("action")

_INT_RE = re.compile(r"[+-]?[0-9]+")


class ApiCaller(Protocol):
    def call_api(self, method: HttpMethod, path: str, body: Any = None) -> Any: ...


@dataclass(frozen=True, slots=True)
class ActionOptions:
    """Options parsed from the command line for one invocation."""

    gc: bool = False
    remove_lock: bool = False
    remove_fence: bool = False
    num: str | None = None
    seconds: str | None = None


@dataclass(frozen=True, slots=True)
class RemoveLock:
    @property
    def path(self) -> str:
        return "/api/force_remove_locks"


@dataclass(frozen=True, slots=True)
class RemoveFence:
    @property
    def path(self) -> str:
        return "/api/remove_fence"


@dataclass(frozen=True, slots=True)
class GcKeepN:
    keep: int

    @property
    def path(self) -> str:
        return f"/api/action/gc?keep={self.keep}"


@dataclass(frozen=True, slots=True)
class GcKeepSeconds:
    secs: int

    @property
    def path(self) -> str:
        return f"/api/action/gc?secs={self.secs}"


@dataclass(frozen=True, slots=True)
class NoAction:
    path: None = None


Action = RemoveLock | RemoveFence | GcKeepN | GcKeepSeconds | NoAction


def parse_int_option(name: str, text: str) -> int:
    # int() alone would also accept " 5" and "1_000"
    if _INT_RE.fullmatch(text) is None:
        raise InvalidArgumentError(name, text)
    return int(text)


def select_action(options: ActionOptions) -> Action:
    if options.remove_lock:
        return RemoveLock()

    if options.remove_fence:
        return RemoveFence()

    if options.gc:
        if options.num is not None and options.seconds is not None:
            raise UsageError("gc accepts only one of -n <num> and -s <seconds>")
        if options.num is not None:
            return GcKeepN(parse_int_option("<num>", options.num))
        if options.seconds is not None:
            return GcKeepSeconds(parse_int_option("<seconds>", options.seconds))

    # gc without -n/-s does nothing
    return NoAction()


def run_action(
    action: Action,
    client: ApiCaller,
    echo: Callable[[str], Any] = print,
    *,
    pretty: bool = False,
) -> Any:
    """Call the dashboard for ``action`` and echo the JSON response.

    Returns the decoded response, or None for :class:`NoAction`. Errors from
    ``client`` are not caught.
    """
    if isinstance(action, NoAction):
        logger.debug("No action selected; nothing to do.")
        return None

    logger.debug("Running %s via GET %s", type(action).__name__, action.path)
    value = client.call_api(HttpMethod.GET, action.path)
    echo(jsonify(value, pretty=pretty))
    return value
