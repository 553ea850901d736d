"""Timezone-less date/time helpers and UUID text/byte conversion."""

from __future__ import annotations

import datetime as _dt

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DASH_POSITIONS = (8, 13, 18, 23)
_BYTE_POSITIONS = (0, 2, 4, 6, 9, 11, 14, 16, 19, 21, 24, 26, 28, 30, 32, 34)
_GROUPS = ((0, 4), (4, 6), (6, 8), (8, 10), (10, 16))


class InvalidUUIDFormatError(ValueError):
    """Raised when a UUID string is not in canonical dashed form."""

    def __init__(self, message: str = "invalid UUID format") -> None:
        super().__init__(message)


def truncate_date(value: _dt.date) -> _dt.datetime:
    """Keep the calendar day of ``value`` as midnight UTC, dropping its zone."""
    return _dt.datetime(value.year, value.month, value.day, tzinfo=_dt.timezone.utc)


def truncate_datetime(value: _dt.datetime) -> _dt.datetime:
    """Keep the wall-clock fields of ``value`` to the second, reinterpreted as UTC."""
    return _dt.datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        tzinfo=_dt.timezone.utc,
    )


def uuid_to_bytes(text: str) -> bytes:
    """Convert a dashed UUID string into its 16 raw bytes."""
    if len(text) < 36 or any(text[i] != "-" for i in _DASH_POSITIONS):
        raise InvalidUUIDFormatError()
    pairs = [text[i : i + 2] for i in _BYTE_POSITIONS]
    if not all(c in _HEX_DIGITS for pair in pairs for c in pair):
        raise InvalidUUIDFormatError()
    return bytes(int(pair, 16) for pair in pairs)


def uuid_from_bytes(data: bytes | bytearray | str) -> str:
    """Format 16 raw bytes (or a 16-byte string) as a lower-case dashed UUID."""
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray)):
        raw = bytes(data)
    else:
        raw = b""
    if len(raw) != 16:
        raise ValueError(f"invalid UUID length: {len(raw)}")
    return "-".join(raw[start:end].hex() for start, end in _GROUPS)