"""
Type coercion - Converts domain values into wire-ready strings

Supports:
- Plain values (booleans rendered lowercase, everything else via str())
- Timestamps (datetime, date, Unix seconds, ISO-8601 strings) → UTC ISO-8601
- List expansion (values → Name.1, Name.2, ...)
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional

from mwsfba.errors import InvalidTimestampError

logger = logging.getLogger(__name__)


def to_wire_string(value: Any) -> str:
    """Render a single value the way the remote API expects it"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return coerce_timestamp(value)
    return str(value)


def coerce_timestamp(value: Any, field_name: Optional[str] = None) -> str:
    """
    Convert a date/time value to an ISO-8601 UTC string

    Accepts:
        datetime: naive values are taken as UTC, aware values are converted
        date: midnight UTC
        int/float: Unix timestamp in seconds
        str: ISO-8601 text, a trailing "Z" is allowed

    Returns:
        String in the form YYYY-MM-DDTHH:MM:SS.sssZ

    Raises:
        InvalidTimestampError: if the value cannot be read as a date/time
    """
    moment = _to_datetime(value, field_name)

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)

    millis = moment.microsecond // 1000
    return f"{moment.strftime('%Y-%m-%dT%H:%M:%S')}.{millis:03d}Z"


def _to_datetime(value: Any, field_name: Optional[str]) -> datetime:
    """Interpret a caller-supplied value as a datetime"""
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTimestampError(value, field_name) from e

    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(value, field_name) from e

    raise InvalidTimestampError(value, field_name)


def expand_list(
    wire_path: str,
    values: Iterable[Any],
    coerce: Callable[[Any], str] = to_wire_string,
) -> Dict[str, str]:
    """
    Expand a sequence into indexed wire keys

    Example:
        expand_list("ShipmentIdList.member", ["A", "B"])
        → {"ShipmentIdList.member.1": "A", "ShipmentIdList.member.2": "B"}

    None entries are skipped and do not consume an index.
    """
    result = {}
    index = 0

    for value in values:
        if value is None:
            continue
        index += 1
        result[f"{wire_path}.{index}"] = coerce(value)

    logger.debug(f"Expanded {index} values under {wire_path}")
    return result
