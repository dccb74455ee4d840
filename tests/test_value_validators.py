import pytest

from oasvalidate.types import Header, Items, Kind, Parameter, Schema
from oasvalidate.value_validators import BasicCommonValidator, NumberValidator, StringValidator
from oasvalidate.values import (
    ENUM_FAIL_CODE,
    INVALID_TYPE_CODE,
    MAX_FAIL_CODE,
    MULTIPLE_OF_MUST_BE_POSITIVE_CODE,
    PATTERN_FAIL_CODE,
    REQUIRED_FAIL_CODE,
    TOO_LONG_FAIL_CODE,
)

MIN_INT32 = -(2**31)
MAX_INT32 = 2**31 - 1

NUMBER_SOURCES = [Parameter(), Schema(), Items(), Header()]


def _edge_number_validator():
    return NumberValidator(
        path="path",
        in_="in",
        maximum=float(MAX_INT32 + 1),
        exclusive_maximum=False,
        minimum=float(MIN_INT32 - 1),
        exclusive_minimum=False,
        type="integer",
        format="int32",
    )


@pytest.mark.parametrize("source", NUMBER_SOURCES)
def test_number_validator_applies(source):
    v = _edge_number_validator()
    assert not v.applies(source, Kind.STRING)
    assert not v.applies(source, Kind.STRUCT)
    for kind in (
        Kind.INT,
        Kind.INT8,
        Kind.UINT16,
        Kind.UINT32,
        Kind.UINT64,
        Kind.UINT,
        Kind.UINT8,
        Kind.FLOAT32,
        Kind.FLOAT64,
    ):
        assert v.applies(source, kind)


def test_number_validator_does_not_apply_to_plain_value():
    assert not _edge_number_validator().applies(32.0, Kind.FLOAT64)


def test_number_validator_edge_cases():
    v = _edge_number_validator()
    assert v.validate(MAX_INT32 + 2).has_errors()
    assert v.validate(MIN_INT32 - 2).has_errors()


def test_number_validator_exclusive_maximum():
    v = NumberValidator(path="n", in_="query", maximum=10.0, exclusive_maximum=True, type="integer")
    assert v.validate(5).is_valid()
    res = v.validate(10)
    assert [e.code for e in res.errors] == [MAX_FAIL_CODE]


def test_number_validator_multiple_of():
    v = NumberValidator(path="n", in_="query", multiple_of=3.0, type="number")
    assert v.validate(9.0).is_valid()
    assert v.validate(10.0).has_errors()


def test_number_validator_zero_factor():
    v = NumberValidator(path="n", in_="query", multiple_of=0.0, type="integer")
    res = v.validate(5)
    assert [e.code for e in res.errors] == [MULTIPLE_OF_MUST_BE_POSITIVE_CODE]


def test_number_validator_float_for_integer_type():
    v = NumberValidator(path="n", in_="query", type="integer")
    res = v.validate(5.5)
    assert res.has_errors()
    assert "must be of type integer" in str(res.errors[0])


@pytest.mark.parametrize("source", NUMBER_SOURCES)
def test_string_validator_applies(source):
    v = StringValidator()
    assert not v.applies(source, Kind.STRUCT)
    assert not v.applies(source, Kind.INT)
    assert v.applies(source, Kind.STRING)


def test_string_validator_does_not_apply_to_plain_value():
    assert not StringValidator().applies("A string", Kind.STRING)


def test_string_validator_required():
    v = StringValidator(path="s", in_="query", required=True)
    assert [e.code for e in v.validate("").errors] == [REQUIRED_FAIL_CODE]
    assert v.validate("x").is_valid()
    assert StringValidator(path="s", required=True, allow_empty_value=True).validate("").is_valid()
    assert StringValidator(path="s", required=True, default="d").validate("").is_valid()


def test_string_validator_length_and_pattern():
    v = StringValidator(path="s", in_="query", max_length=3, pattern="^[a-z]+$")
    assert v.validate("abc").is_valid()
    assert [e.code for e in v.validate("abcd").errors] == [TOO_LONG_FAIL_CODE]
    assert [e.code for e in v.validate("AB").errors] == [PATTERN_FAIL_CODE]


def test_string_validator_rejects_non_string():
    res = StringValidator(path="s", in_="query").validate(12)
    assert [e.code for e in res.errors] == [INVALID_TYPE_CODE]


@pytest.mark.parametrize("source", [Parameter(), Schema(), Header()])
def test_common_validator_applies(source):
    assert BasicCommonValidator().applies(source, Kind.STRING)


def test_common_validator_does_not_apply_elsewhere():
    v = BasicCommonValidator()
    assert not v.applies("A string", Kind.STRING)
    assert not v.applies(Items(), Kind.STRING)


def test_common_validator_enum():
    v = BasicCommonValidator(path="e", in_="query", enum=["aa", "bb", 3])
    assert v.validate("bb").is_valid()
    assert v.validate(3.0).is_valid()
    res = v.validate("cc")
    assert [e.code for e in res.errors] == [ENUM_FAIL_CODE]
    assert v.validate(None).has_errors()


def test_common_validator_without_enum_accepts_anything():
    assert BasicCommonValidator(path="e").validate("anything").is_valid()