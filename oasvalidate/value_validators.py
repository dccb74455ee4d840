"""Validators for single values: enumerations, numbers and strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import values as _values
from .types import STRING_TYPE, Header, Items, Kind, Parameter, Schema, _invalid_type
from .values import Result, ValidationError


def _fail(err: Exception) -> Result:
    return Result(errors=[err])


@dataclass
class BasicCommonValidator:
    """Checks that a value belongs to the declared enumeration."""

    path: str = ""
    in_: str = ""
    default: Any = None
    enum: list[Any] | None = field(default=None)

    def applies(self, source: Any, kind: Kind) -> bool:
        return isinstance(source, (Parameter, Schema, Header))

    def validate(self, data: Any) -> Result:
        if self.enum:
            try:
                _values.enum(self.path, self.in_, data, list(self.enum))
            except ValidationError as err:
                return _fail(err)
        return Result()


_NUMERIC_KINDS = frozenset(
    {
        Kind.INT,
        Kind.INT8,
        Kind.INT16,
        Kind.INT32,
        Kind.INT64,
        Kind.UINT,
        Kind.UINT8,
        Kind.UINT16,
        Kind.UINT32,
        Kind.UINT64,
        Kind.FLOAT32,
        Kind.FLOAT64,
    }
)


@dataclass
class NumberValidator:
    """Checks numeric bounds and multiples, honouring the declared type and format."""

    path: str = ""
    in_: str = ""
    default: Any = None
    multiple_of: float | None = None
    maximum: float | None = None
    exclusive_maximum: bool = False
    minimum: float | None = None
    exclusive_minimum: bool = False
    type: str = ""
    format: str = ""

    def applies(self, source: Any, kind: Kind) -> bool:
        return isinstance(source, (Parameter, Schema, Items, Header)) and kind in _NUMERIC_KINDS

    def _in_range(self, value: Any, prefix: str) -> Result:
        res = Result()
        try:
            _values.is_value_valid_against_range(value, self.type, self.format, prefix, self.path)
        except ValueError as err:
            res.add_errors(err)
        return res

    @staticmethod
    def _check(res: Result, check: Any, *args: Any) -> None:
        try:
            check(*args)
        except ValidationError as err:
            res.add_errors(err)

    def validate(self, data: Any) -> Result:
        """Validate a number; out-of-range constraints fall back to float comparison."""
        as_float = _values._as_float(data)
        res = self._in_range(data, "Checked")
        res_multiple = Result()
        res_minimum = Result()
        res_maximum = Result()

        if self.multiple_of is not None:
            res_multiple.merge(self._in_range(self.multiple_of, "MultipleOf"))
            if res_multiple.is_valid():
                self._check(res_multiple, _values.multiple_of_native_type, self.path, self.in_, data, self.multiple_of)
            else:
                self._check(res_multiple, _values.multiple_of, self.path, self.in_, as_float, self.multiple_of)

        if self.maximum is not None:
            res_maximum.merge(self._in_range(self.maximum, "Maximum boundary"))
            args = (self.path, self.in_)
            if res_maximum.is_valid():
                self._check(
                    res_maximum, _values.maximum_native_type, *args, data, self.maximum, self.exclusive_maximum
                )
            else:
                self._check(res_maximum, _values.maximum, *args, as_float, self.maximum, self.exclusive_maximum)

        if self.minimum is not None:
            res_minimum.merge(self._in_range(self.minimum, "Minimum boundary"))
            args = (self.path, self.in_)
            if res_minimum.is_valid():
                self._check(
                    res_minimum, _values.minimum_native_type, *args, data, self.minimum, self.exclusive_minimum
                )
            else:
                self._check(res_minimum, _values.minimum, *args, as_float, self.minimum, self.exclusive_minimum)

        res.merge(res_multiple, res_minimum, res_maximum)
        res.inc()
        return res


@dataclass
class StringValidator:
    """Checks requiredness, length and pattern of a string."""

    default: Any = None
    required: bool = False
    allow_empty_value: bool = False
    max_length: int | None = None
    min_length: int | None = None
    pattern: str = ""
    path: str = ""
    in_: str = ""

    def applies(self, source: Any, kind: Kind) -> bool:
        return isinstance(source, (Parameter, Schema, Items, Header)) and kind == Kind.STRING

    def validate(self, data: Any) -> Result:
        if not isinstance(data, str):
            return _fail(_invalid_type(self.path, self.in_, STRING_TYPE, data))
        try:
            if self.required and not self.allow_empty_value and self.default in (None, ""):
                _values.required_string(self.path, self.in_, data)
            if self.max_length is not None:
                _values.max_length(self.path, self.in_, data, self.max_length)
            if self.min_length is not None:
                _values.min_length(self.path, self.in_, data, self.min_length)
            if self.pattern:
                _values.pattern(self.path, self.in_, data, self.pattern)
        except ValidationError as err:
            return _fail(err)
        return Result()