"""Value parsing and formatting shared by the catalog transforms."""

import json
import math
import re
from datetime import date
from typing import Any, Union

Scalar = Union[str, int, float, bool, None]

_INTEGER_RE = re.compile(r"[+-]?\d+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(literal: str) -> Union[int, float, None]:
    """Parse a numeric literal, or return None if it is not one.

    Integral values come back as int so that "2" and "2.0" both print as 2.
    """
    literal = literal.strip()
    if _INTEGER_RE.fullmatch(literal):
        return int(literal)
    if not _NUMBER_RE.fullmatch(literal):
        return None
    number = float(literal)
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def parse_float_prefix(value: str, default: Union[int, float] = 0) -> Union[int, float]:
    """Parse the longest numeric prefix of value, like a lenient parseFloat.

    "12abc" gives 12; values without a numeric prefix give default.
    """
    match = _LEADING_NUMBER_RE.match(value)
    if match is None:
        return default
    number = parse_number(match.group(1))
    return default if number is None else number


def is_numeric(value: str) -> bool:
    """True for numeric literals and for blank cells."""
    trimmed = value.strip()
    return trimmed == "" or parse_number(trimmed) is not None


def infer_scalar(value: str) -> Scalar:
    """Infer a typed value from a cell.

    Blank is None, "true"/"false" (any case) are booleans, numeric literals
    are numbers, anything else is the trimmed string.
    """
    trimmed = value.strip()
    if trimmed == "":
        return None
    lowered = trimmed.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    number = parse_number(trimmed)
    if number is not None:
        return number
    return trimmed


def _plain_value(value: Any) -> str:
    """Text for YAML values JSON has no type for (dates, binary)."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def to_json(value: Any) -> str:
    """Serialize compactly, keeping non-ASCII characters as-is."""
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_plain_value
    )


def format_cell(value: Any) -> str:
    """Render a decoded JSON/YAML value as plain cell text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float, date, bytes)):
        return _plain_value(value)
    try:
        return to_json(value)
    except (TypeError, ValueError):
        # Non-string mapping keys or self-referencing YAML anchors.
        return str(value)
    except RecursionError:
        return "Invalid input: nested too deeply"


def split_rows(text: str, delimiter: str = ",") -> list[list[str]]:
    """Split text into rows of trimmed cells."""
    return [
        [cell.strip() for cell in line.split(delimiter)]
        for line in text.split("\n")
    ]


def rows_to_csv(rows: list[list[str]]) -> str:
    return "\n".join(",".join(row) for row in rows)


def key_value_rows(text: str, delimiter: str = ",") -> list[tuple[str, str]]:
    """Read two-column rows as (key, value) pairs, skipping blank lines.

    A row without a second column has an empty value.
    """
    pairs = []
    for row in split_rows(text.strip(), delimiter):
        if row == [""]:
            continue
        pairs.append((row[0], row[1] if len(row) > 1 else ""))
    return pairs
