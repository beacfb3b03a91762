from .action import (
    ActionOptions,
    GcKeepN,
    GcKeepSeconds,
    NoAction,
    RemoveFence,
    RemoveLock,
    run_action,
    select_action,
)
from .client import DashboardClient, HttpMethod
from .config import Settings, load_settings
from .errors import ApiError, CodisConfigError, InvalidArgumentError, UsageError
from .formatting import jsonify
from .logging import configure_logger, get_logger, set_module_level
from .version import __version__

__all__ = [
    "ActionOptions",
    "GcKeepN",
    "GcKeepSeconds",
    "NoAction",
    "RemoveFence",
    "RemoveLock",
    "run_action",
    "select_action",
    "DashboardClient",
    "HttpMethod",
    "Settings",
    "load_settings",
    "CodisConfigError",
    "UsageError",
    "InvalidArgumentError",
    "ApiError",
    "jsonify",
    "configure_logger",
    "get_logger",
    "set_module_level",
    "__version__",
]
