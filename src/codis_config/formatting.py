from __future__ import annotations

from typing import Any

import orjson


def jsonify(value: Any, *, pretty: bool = False) -> str:
    """Serialize a decoded JSON document for display.

    Compact single line unless ``pretty`` is set.
    """
    option = orjson.OPT_INDENT_2 if pretty else None
    return orjson.dumps(value, option=option).decode("utf-8")
