import pytest

from oasvalidate.types import Header, Items, Kind, Parameter, Schema
from oasvalidate.validators import (
    BasicSliceValidator,
    HeaderValidator,
    ItemsValidator,
    ParamValidator,
)
from oasvalidate.values import (
    ENUM_FAIL_CODE,
    INVALID_TYPE_CODE,
    MAX_FAIL_CODE,
    MAX_ITEMS_FAIL_CODE,
    MIN_FAIL_CODE,
    MIN_ITEMS_FAIL_CODE,
    REQUIRED_FAIL_CODE,
    TOO_LONG_FAIL_CODE,
    UNIQUE_FAIL_CODE,
)


@pytest.mark.parametrize("source", [Parameter(), Items(), Header()])
def test_slice_validator_applies_to_slices(source):
    assert BasicSliceValidator().applies(source, Kind.SLICE) is True


def test_slice_validator_does_not_apply_to_schema_or_strings():
    v = BasicSliceValidator()
    assert v.applies(Schema(), Kind.SLICE) is False
    assert v.applies(Parameter(), Kind.STRING) is False
    assert v.applies(Parameter(), Kind.ARRAY) is False


def test_slice_validator_max_items():
    res = BasicSliceValidator(path="p", in_="query", max_items=1).validate([1, 2])
    assert res.has_errors()
    assert res.errors[0].code == MAX_ITEMS_FAIL_CODE


def test_string_param_max_length():
    pv = ParamValidator(Parameter(name="q", in_="query", type="string", max_length=3))
    res = pv.validate("abcd")
    assert len(res.errors) == 1
    assert res.errors[0].code == TOO_LONG_FAIL_CODE
    assert pv.validate("ab").is_valid()


def test_integer_param_maximum():
    pv = ParamValidator(Parameter(name="n", in_="query", type="integer", maximum=10.0))
    res = pv.validate(12)
    assert res.errors[0].code == MAX_FAIL_CODE
    assert pv.validate(5).is_valid()


def test_param_type_mismatch_stops_chain():
    pv = ParamValidator(Parameter(name="n", in_="query", type="integer"))
    res = pv.validate("x")
    assert len(res.errors) == 1
    assert res.errors[0].code == INVALID_TYPE_CODE


def test_array_param_min_items():
    param = Parameter(name="tags", in_="query", type="array", min_items=2, items=Items(type="string"))
    pv = ParamValidator(param)
    assert pv.validate(["a"]).errors[0].code == MIN_ITEMS_FAIL_CODE
    assert pv.validate(["a", "b"]).is_valid()


def test_array_param_unique_items():
    param = Parameter(name="tags", in_="query", type="array", unique_items=True, items=Items(type="string"))
    res = ParamValidator(param).validate(["a", "a"])
    assert res.errors[0].code == UNIQUE_FAIL_CODE


def test_array_item_enum_failure_carries_indexed_path():
    param = Parameter(
        name="tags", in_="query", type="array", items=Items(type="string", enum=["x", "y"])
    )
    res = ParamValidator(param).validate(["x", "z"])
    assert res.errors[0].code == ENUM_FAIL_CODE
    assert res.errors[0].name == "tags.1"


def test_array_item_type_mismatch():
    param = Parameter(name="tags", in_="query", type="array", items=Items(type="integer"))
    res = ParamValidator(param).validate(["a"])
    assert res.errors[0].code == INVALID_TYPE_CODE
    assert "tags.0" in str(res.errors[0])


def test_nested_array_items():
    param = Parameter(
        name="p",
        in_="query",
        type="array",
        items=Items(type="array", items=Items(type="integer", maximum=5.0)),
    )
    pv = ParamValidator(param)
    assert pv.validate([[1, 2], [7]]).errors[0].code == MAX_FAIL_CODE
    assert pv.validate([[1, 2], [3]]).is_valid()


def test_items_validator_direct():
    iv = ItemsValidator("p", "query", Items(type="integer", maximum=3.0), Parameter())
    res = iv.validate(0, 5)
    assert res.errors[0].code == MAX_FAIL_CODE
    assert res.errors[0].name == "p.0"
    assert iv.validate(1, 2).is_valid()


def test_header_minimum():
    hv = HeaderValidator("X-Rate", Header(type="integer", minimum=1.0))
    res = hv.validate(0)
    assert res.errors[0].code == MIN_FAIL_CODE
    assert res.errors[0].name == "X-Rate"
    assert hv.validate(3).is_valid()


def test_header_string_is_required():
    hv = HeaderValidator("X-Name", Header(type="string"))
    res = hv.validate("")
    assert res.errors[0].code == REQUIRED_FAIL_CODE
    assert hv.validate("value").is_valid()


def test_header_enum():
    hv = HeaderValidator("X-Mode", Header(type="string", enum=["on", "off"]))
    assert hv.validate("maybe").errors[0].code == ENUM_FAIL_CODE
    assert hv.validate("on").is_valid()