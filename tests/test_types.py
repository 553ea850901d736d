import datetime as dt

import pytest

from chwire.types import (
    InvalidUUIDFormatError,
    truncate_date,
    truncate_datetime,
    uuid_from_bytes,
    uuid_to_bytes,
)

UTC = dt.timezone.utc


def test_uuid_zero_round_trip():
    origin = "00000000-0000-0000-0000-000000000000"
    raw = uuid_to_bytes(origin)
    assert raw == bytes(16)
    assert uuid_from_bytes(raw) == origin


def test_uuid_to_bytes_known_value():
    text = "123e4567-e89b-12d3-a456-426655440000"
    assert uuid_to_bytes(text) == bytes.fromhex("123e4567e89b12d3a456426655440000")
    assert uuid_from_bytes(uuid_to_bytes(text)) == text


def test_uuid_to_bytes_accepts_upper_case():
    assert uuid_to_bytes("ABCDEF01-2345-6789-ABCD-EF0123456789") == bytes.fromhex(
        "abcdef0123456789abcdef0123456789"
    )


@pytest.mark.parametrize(
    "text",
    [
        "00000000x0000-0000-0000-000000000000",
        "00000000-0000-0000-0000-00000000000g",
        "0000000z-0000-0000-0000-000000000000",
        "00000000-0000",
    ],
)
def test_uuid_to_bytes_rejects_bad_format(text):
    with pytest.raises(InvalidUUIDFormatError):
        uuid_to_bytes(text)


def test_uuid_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError, match="invalid UUID length: 3"):
        uuid_from_bytes(b"abc")


def test_uuid_from_bytes_rejects_other_types():
    with pytest.raises(ValueError, match="invalid UUID length: 0"):
        uuid_from_bytes(12345)


def test_uuid_from_str_of_sixteen_characters():
    assert uuid_from_bytes("A" * 16) == "41414141-4141-4141-4141-414141414141"


def test_truncate_date_drops_time_and_zone():
    moment = dt.datetime(2017, 1, 1, 15, 30, 45, tzinfo=dt.timezone(dt.timedelta(hours=3)))
    assert truncate_date(moment) == dt.datetime(2017, 1, 1, tzinfo=UTC)


def test_truncate_date_accepts_plain_date():
    assert truncate_date(dt.date(2021, 7, 11)) == dt.datetime(2021, 7, 11, tzinfo=UTC)


def test_truncate_datetime_keeps_wall_clock():
    moment = dt.datetime(
        2017, 1, 1, 15, 30, 45, 123456, tzinfo=dt.timezone(dt.timedelta(hours=-5))
    )
    assert truncate_datetime(moment) == dt.datetime(2017, 1, 1, 15, 30, 45, tzinfo=UTC)