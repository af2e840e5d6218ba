"""Validation of caller-supplied query fragments.

Every value checked here ends up inside the outbound URL. Disallowed
characters are rejected outright rather than escaped, so no caller input can
change the shape of the request path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from ..core.errors import (
    InvalidFilterError,
    InvalidPeriodError,
    InvalidQueryError,
    UnknownDataflowError,
)

MAX_FILTER_LENGTH = 200
ALLOWED_FILTER_CHARS = "._-:+*"

_FILTER_RE = re.compile(r"[A-Za-z0-9._\-:+*]+")
_DATAFLOW_ID_RE = re.compile(r"[A-Za-z0-9_@.\-]{1,100}")
_PERIOD_RE = re.compile(
    r"[0-9]{4}"
    r"(?:-(?:0[1-9]|1[0-2])(?:-(?:0[1-9]|[12][0-9]|3[01]))?"
    r"|-Q[1-4]"
    r"|-S[12]"
    r"|-W(?:0[1-9]|[1-4][0-9]|5[0-3])"
    r"|-M(?:0[1-9]|1[0-2]))?"
)


@dataclass(slots=True, frozen=True)
class SanitizedFilter:
    raw: str
    encoded: str

    def __str__(self) -> str:
        return self.encoded


def _preview(value: str, width: int = 40) -> str:
    if len(value) <= width:
        return repr(value)
    return repr(value[:width]) + "..."


def sanitize_filter(raw: object, *, max_length: int = MAX_FILTER_LENGTH) -> SanitizedFilter:
    if not isinstance(raw, str):
        raise InvalidFilterError(
            f"Invalid filter format: expected a string, got {type(raw).__name__}",
            value=raw,
        )
    if raw == "":
        raise InvalidFilterError("Invalid filter: filter cannot be empty", value=raw)
    if len(raw) > max_length:
        raise InvalidFilterError(
            f"Invalid filter: length {len(raw)} exceeds maximum length of {max_length}",
            value=raw,
        )
    if _FILTER_RE.fullmatch(raw) is None:
        raise InvalidFilterError(
            f"Invalid filter format: {_preview(raw)}. "
            f"Only alphanumeric characters and {ALLOWED_FILTER_CHARS} are allowed.",
            value=raw,
        )
    return SanitizedFilter(raw=raw, encoded=quote(raw, safe="*"))


def validate_period(value: str | None, *, name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or _PERIOD_RE.fullmatch(value) is None:
        preview = _preview(value) if isinstance(value, str) else type(value).__name__
        raise InvalidPeriodError(
            f"Invalid {name}: {preview}. Expected YYYY, YYYY-MM, YYYY-MM-DD, "
            "YYYY-Qn, YYYY-Sn, YYYY-Wnn or YYYY-Mnn."
        )
    return value


def validate_positive_int(value: int | None, *, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidQueryError(f"{name} must be a positive integer")
    return value


def validate_dataflow_id(value: object) -> str:
    if not isinstance(value, str) or _DATAFLOW_ID_RE.fullmatch(value) is None:
        preview = _preview(value) if isinstance(value, str) else type(value).__name__
        raise UnknownDataflowError(
            f"Unknown dataflow: {preview}. Use list_dataflows() to see available dataflows."
        )
    return value


__all__ = [
    "MAX_FILTER_LENGTH",
    "ALLOWED_FILTER_CHARS",
    "SanitizedFilter",
    "sanitize_filter",
    "validate_period",
    "validate_positive_int",
    "validate_dataflow_id",
]
