"""Line-delimited JSON framing.

One JSON document per line in, one JSON object per line out. The decoder
never looks across line boundaries and never repairs input.
"""

from __future__ import annotations

import json
import math
from typing import Any

from simple_mcp.protocol.errors import ParseError


def strip_line(raw: str) -> str | None:
    """Drop the line terminator; return ``None`` for blank lines."""
    line = raw.rstrip("\n").rstrip("\r")
    if not line.strip():
        return None
    return line


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    msg = f"invalid JSON constant: {name}"
    raise ValueError(msg)


def _parse_float(text: str) -> float:
    # Overflowing literals such as 1e400 would otherwise decode to inf.
    value = float(text)
    if not math.isfinite(value):
        msg = f"number out of range: {text}"
        raise ValueError(msg)
    return value


def decode_line(line: str) -> Any:
    """Decode one line as a single JSON value.

    Raises
    ------
    ParseError
        If the line is not a valid JSON document.
    """
    try:
        return json.loads(line, parse_float=_parse_float, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ParseError() from exc


def encode_message(message: dict[str, Any]) -> str:
    """Serialize *message* as one line of compact JSON, newline included.

    Raises ``ValueError`` for NaN or infinite floats instead of writing them.
    """
    # ASCII-only output escapes every line separator inside strings.
    return json.dumps(message, separators=(",", ":"), allow_nan=False) + "\n"
