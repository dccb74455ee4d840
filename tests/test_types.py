import datetime
import io
import ipaddress
import uuid
from dataclasses import dataclass

import pytest

from oasvalidate.types import (
    Header,
    Items,
    Kind,
    Parameter,
    Schema,
    TypeValidator,
    kind_of,
    schema_info_for_type,
)
from oasvalidate.values import INVALID_TYPE_CODE


@dataclass
class _Record:
    value: int = 0


@pytest.mark.parametrize(
    "value,json_type,swagger_format",
    [
        (b"abc", "string", "byte"),
        (datetime.date(2014, 10, 10), "string", "date"),
        (datetime.datetime(2014, 10, 10, 12, 0, tzinfo=datetime.timezone.utc), "string", "date-time"),
        (io.BytesIO(b""), "file", ""),
        (ipaddress.ip_address("192.168.224.1"), "string", "ipv4"),
        (ipaddress.ip_address("::1"), "string", "ipv6"),
        (uuid.UUID("a8098c1a-f86e-11da-bd1a-00112444be1e"), "string", "uuid"),
        (datetime.timedelta(0), "string", "duration"),
        (True, "boolean", ""),
        (12, "integer", "int64"),
        (12.0, "number", "float64"),
        ([], "array", ""),
        (_Record(), "object", ""),
        ({"key": False}, "object", ""),
        ("simply a string", "string", ""),
        ((1, 2, 4, 4), "", ""),
    ],
)
def test_schema_info_for_type(value, json_type, swagger_format):
    assert schema_info_for_type(value) == (json_type, swagger_format)


def test_kind_of():
    assert kind_of(None) is Kind.INVALID
    assert kind_of(True) is Kind.BOOL
    assert kind_of(3) is Kind.INT
    assert kind_of(3.5) is Kind.FLOAT64
    assert kind_of("x") is Kind.STRING
    assert kind_of([1]) is Kind.SLICE
    assert kind_of((1,)) is Kind.ARRAY
    assert kind_of({}) is Kind.MAP
    assert kind_of(_Record()) is Kind.STRUCT


def test_integer_kinds_form_a_range():
    assert Kind.INT <= kind_of(7) <= Kind.UINT64
    assert not (Kind.INT <= kind_of(7.5) <= Kind.UINT64)
    assert not (Kind.INT <= kind_of("7") <= Kind.UINT64)


def test_applies_to_schema_parameter_header_only():
    v = TypeValidator(type=["string"])
    assert v.applies(Schema(), Kind.STRING)
    assert v.applies(Parameter(), Kind.STRING)
    assert v.applies(Header(), Kind.STRING)
    assert not v.applies(Items(), Kind.STRING)
    assert not v.applies("a string", Kind.STRING)


def test_applies_needs_type_or_format():
    assert not TypeValidator().applies(Schema(), Kind.STRING)
    assert TypeValidator(format="date").applies(Schema(), Kind.STRING)


def test_none_requires_null_type():
    res = TypeValidator(type=["string"], path="p", in_="query").validate(None)
    assert res.has_errors()
    assert res.errors[0].code == INVALID_TYPE_CODE
    assert TypeValidator(type=["string"], nullable=True).validate(None).is_valid()
    assert TypeValidator(type=["string", "null"]).validate(None).is_valid()
    assert TypeValidator().validate(None).is_valid()


def test_matching_type_counts_one_match():
    res = TypeValidator(type=["string"]).validate("abc")
    assert res.is_valid()
    assert res.match_count == 1


def test_integer_accepted_as_number():
    assert TypeValidator(type=["number"]).validate(5).is_valid()


def test_integral_float_accepted_as_integer():
    assert TypeValidator(type=["integer"]).validate(5.0).is_valid()


def test_fractional_float_rejected_as_integer():
    res = TypeValidator(type=["integer"], path="n").validate(5.5)
    assert res.has_errors()
    assert "must be of type integer" in str(res.errors[0])


def test_string_rejected_as_integer():
    res = TypeValidator(type=["integer"]).validate("abc")
    assert res.errors[0].code == INVALID_TYPE_CODE


def test_format_mismatch_on_non_string():
    res = TypeValidator(type=["string"], format="date", path="d").validate(12)
    assert res.has_errors()
    assert "must be of type date" in str(res.errors[0])


def test_formatted_string_accepted_without_type_check():
    assert TypeValidator(type=["string"], format="date").validate("2014-10-10").is_valid()


def test_lower_int_format_accepted():
    assert TypeValidator(type=["integer"], format="int64").validate(3).is_valid()


def test_date_object_accepted_as_string():
    assert TypeValidator(type=["string"], format="date").validate(datetime.date(2020, 1, 1)).is_valid()


def test_object_rejected_as_array():
    res = TypeValidator(type=["array"]).validate({"a": 1})
    assert "must be of type array" in str(res.errors[0])