import json
from datetime import datetime, timedelta, timezone

import pytest

from netron.records import Datetime, RecordId, RecordIdError


def test_serialization_round_trip_matches_backend_form():
    backend = RecordId.from_table_key("meter", "12345")
    be_s = backend.to_json()
    fe_r = RecordId.from_json(be_s)
    fe_s = fe_r.to_json()
    assert be_s == fe_s
    assert RecordId.from_json(fe_s) == backend


def test_json_wire_shape():
    rid = RecordId.from_table_key("meter", "12345")
    assert json.loads(rid.to_json()) == {"tb": "meter", "id": {"String": "12345"}}


def test_display_and_parse_round_trip():
    rid = RecordId.from_table_key("meter", "12345")
    assert str(rid) == "meter:12345"
    assert RecordId.parse(str(rid)) == rid


def test_table_and_key_fields():
    rid = RecordId.parse("meter:12345")
    assert rid.table == "meter"
    assert rid.key == "12345"


@pytest.mark.parametrize("text", ["meter", "a:b:c", ""])
def test_parse_rejects_bad_format(text):
    with pytest.raises(RecordIdError):
        RecordId.parse(text)


@pytest.mark.parametrize("text", ["meter", "a:b:c"])
def test_lenient_falls_back_to_unknown(text):
    assert RecordId.from_lenient(text) == RecordId("unknown", "unknown")


def test_lenient_accepts_good_input():
    assert RecordId.from_lenient("meter:12345") == RecordId("meter", "12345")


@pytest.mark.parametrize(
    "data",
    ["not json", "[1]", '{"tb": 1, "id": {"String": "x"}}', '{"tb": "t", "id": "x"}',
     '{"tb": "t", "id": {"Number": 3}}'],
)
def test_from_json_rejects_malformed(data):
    with pytest.raises(RecordIdError):
        RecordId.from_json(data)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        RecordId.parse("nope")


def test_datetime_display_is_rfc3339_utc():
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert str(Datetime(moment)) == "2024-01-02T03:04:05+00:00"


def test_datetime_converts_to_utc():
    offset = timezone(timedelta(hours=2))
    local = datetime(2024, 1, 2, 5, 4, 5, tzinfo=offset)
    utc = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert Datetime(local) == Datetime(utc)


def test_datetime_format_and_ordering():
    early = Datetime(datetime(2024, 1, 2, tzinfo=timezone.utc))
    late = Datetime(datetime(2024, 1, 3, tzinfo=timezone.utc))
    assert early < late
    assert early.format("%Y-%m-%d") == "2024-01-02"