"""Elementary validation checks on values, and the result container they feed."""

from __future__ import annotations

import base64
import datetime as _dt
import enum as _enum
import functools
import ipaddress
import json
import math
import re
import struct
import uuid as _uuid
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

# Validation error codes.
COMPOSITE_ERROR_CODE = 422
INVALID_TYPE_CODE = 600
REQUIRED_FAIL_CODE = 601
TOO_LONG_FAIL_CODE = 602
TOO_SHORT_FAIL_CODE = 603
PATTERN_FAIL_CODE = 604
ENUM_FAIL_CODE = 605
MULTIPLE_OF_FAIL_CODE = 606
MAX_FAIL_CODE = 607
MIN_FAIL_CODE = 608
UNIQUE_FAIL_CODE = 609
MAX_ITEMS_FAIL_CODE = 610
MIN_ITEMS_FAIL_CODE = 611
MULTIPLE_OF_MUST_BE_POSITIVE_CODE = 617
READ_ONLY_FAIL_CODE = 618

_INT_RANGES = {
    "int32": (-(2**31), 2**31 - 1),
    "uint32": (0, 2**32 - 1),
    "uint64": (0, 2**64 - 1),
    "int64": (-(2**63), 2**63 - 1),
}
_MAX_JSON_INTEGER = float(2**53 - 1)
_EPSILON = 1e-9


class ValidationError(Exception):
    """A failed validation, carrying a code and the location of the value."""

    def __init__(self, code: int, message: str, name: str = "", in_: str = "", value: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.name = name
        self.in_ = in_
        self.value = value

    def __str__(self) -> str:
        return self.message


class OperationType(_enum.Enum):
    """Direction of the operation a value belongs to."""

    REQUEST = "request"
    RESPONSE = "response"


@dataclass
class Result:
    """Errors and warnings gathered while validating."""

    errors: list[Exception] = field(default_factory=list)
    warnings: list[Exception] = field(default_factory=list)
    match_count: int = 0

    def add_errors(self, *args: Exception | None) -> None:
        self.errors.extend(e for e in args if e is not None)

    def add_warnings(self, *args: Exception | None) -> None:
        self.warnings.extend(w for w in args if w is not None)

    def merge(self, *args: Result | None) -> Result:
        for other in args:
            if other is None:
                continue
            self.errors.extend(other.errors)
            self.warnings.extend(other.warnings)
            self.match_count += other.match_count
        return self

    def merge_as_warnings(self, *args: Result | None) -> Result:
        for other in args:
            if other is None:
                continue
            self.warnings.extend(other.errors)
            self.warnings.extend(other.warnings)
            self.match_count += other.match_count
        return self

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def is_valid(self) -> bool:
        return not self.errors

    def inc(self) -> None:
        self.match_count += 1


# ---------------------------------------------------------------- helpers


def _where(path: str, in_: str) -> str:
    return f"{path} in {in_}" if in_ else path


def _num(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str)):
        return value == type(value)()
    return False


def _deep_equal(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k]) for k in a)
    return a == b


_NOT_CONVERTIBLE = object()


def _convert(data: Any, target: Any) -> Any:
    """Convert data to the type of target, the way numeric and string kinds convert."""
    if _is_number(data) and _is_number(target):
        if _is_int(target):
            if isinstance(data, float) and not math.isfinite(data):
                return _NOT_CONVERTIBLE
            return int(data)
        return float(data)
    if isinstance(data, str) and isinstance(target, str):
        return str(data)
    return _NOT_CONVERTIBLE


def _is_json_integer(value: float) -> bool:
    if not math.isfinite(value) or abs(value) > _MAX_JSON_INTEGER:
        return False
    truncated = float(math.trunc(value))
    if value == truncated:
        return True
    diff = abs(value - truncated)
    if truncated == 0:
        return diff < _EPSILON * 5e-324
    return diff / min(abs(value) + abs(truncated), 1.7976931348623157e308) < _EPSILON


@functools.lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


# --------------------------------------------------------------- formats

_HOSTNAME = re.compile(
    r"^(?=.{1,255}$)[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*\.?$"
)
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_UUID = re.compile(r"^[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}$")


def _valid_date(text: str) -> bool:
    try:
        _dt.date.fromisoformat(text)
    except ValueError:
        return False
    return len(text) == 10


def _valid_datetime(text: str) -> bool:
    candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        _dt.datetime.fromisoformat(candidate.replace("t", "T"))
    except ValueError:
        return False
    return "T" in text.upper()


def _valid_ip(version: int) -> Callable[[str], bool]:
    def check(text: str) -> bool:
        try:
            return ipaddress.ip_address(text).version == version
        except ValueError:
            return False

    return check


def _valid_uri(text: str) -> bool:
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    return bool(parts.scheme)


def _valid_byte(text: str) -> bool:
    try:
        base64.b64decode(text, validate=True)
    except ValueError:
        return False
    return True


def _valid_uuid(text: str) -> bool:
    if not _UUID.match(text):
        return False
    try:
        _uuid.UUID(text)
    except ValueError:
        return False
    return True


DEFAULT_FORMATS: Mapping[str, Callable[[str], bool]] = MappingProxyType(
    {
        "date": _valid_date,
        "date-time": _valid_datetime,
        "email": lambda s: bool(_EMAIL.match(s)),
        "hostname": lambda s: bool(_HOSTNAME.match(s)),
        "ipv4": _valid_ip(4),
        "ipv6": _valid_ip(6),
        "uri": _valid_uri,
        "byte": _valid_byte,
        "uuid": _valid_uuid,
    }
)


# ----------------------------------------------------------------- checks


def enum(path: str, in_: str, data: Any, values: Any) -> None:
    """Check that data is a member of values."""
    enum_case(path, in_, data, values, True)


def enum_case(path: str, in_: str, data: Any, values: Any, case_sensitive: bool) -> None:
    """Check membership, optionally ignoring case for strings."""
    if not isinstance(values, (list, tuple)):
        return
    data_string = data if (not case_sensitive and isinstance(data, str)) else None
    if data is not None:
        for candidate in values:
            if _deep_equal(data, candidate):
                return
            if (
                data_string is not None
                and isinstance(candidate, str)
                and data_string.casefold() == candidate.casefold()
            ):
                return
            converted = _convert(data, candidate)
            if converted is not _NOT_CONVERTIBLE and _deep_equal(converted, candidate):
                return
    raise ValidationError(
        ENUM_FAIL_CODE,
        f"{_where(path, in_)} should be one of {list(values)}",
        path,
        in_,
        data,
    )


def min_items(path: str, in_: str, size: int, minimum: int) -> None:
    if size < minimum:
        raise ValidationError(
            MIN_ITEMS_FAIL_CODE, f"{_where(path, in_)} should have at least {minimum} items", path, in_, size
        )


def max_items(path: str, in_: str, size: int, maximum: int) -> None:
    if size > maximum:
        raise ValidationError(
            MAX_ITEMS_FAIL_CODE, f"{_where(path, in_)} should have at most {maximum} items", path, in_, size
        )


def unique_items(path: str, in_: str, data: Any) -> None:
    """Check that a sequence holds no duplicates; other values pass."""
    if not isinstance(data, (list, tuple)):
        return
    seen: list[Any] = []
    for item in data:
        if any(_deep_equal(item, known) for known in seen):
            raise ValidationError(
                UNIQUE_FAIL_CODE, f"{_where(path, in_)} shouldn't contain duplicates", path, in_, data
            )
        seen.append(item)


def min_length(path: str, in_: str, data: str, min_length: int) -> None:
    if len(data) < min_length:
        raise ValidationError(
            TOO_SHORT_FAIL_CODE, f"{_where(path, in_)} should be at least {min_length} chars long", path, in_, data
        )


def max_length(path: str, in_: str, data: str, max_length: int) -> None:
    if len(data) > max_length:
        raise ValidationError(
            TOO_LONG_FAIL_CODE, f"{_where(path, in_)} should be at most {max_length} chars long", path, in_, data
        )


def read_only(path: str, in_: str, data: Any, operation: OperationType | None = None) -> None:
    """In a request, a read-only value must be absent or the zero value."""
    if operation is not OperationType.REQUEST:
        return
    if _is_zero(data):
        return
    raise ValidationError(READ_ONLY_FAIL_CODE, f"{_where(path, in_)} is readOnly", path, in_, data)


def required(path: str, in_: str, data: Any) -> None:
    if _is_zero(data):
        raise ValidationError(REQUIRED_FAIL_CODE, f"{_where(path, in_)} is required", path, in_, data)


def required_string(path: str, in_: str, data: str) -> None:
    if data == "":
        raise ValidationError(REQUIRED_FAIL_CODE, f"{_where(path, in_)} is required", path, in_, data)


def required_number(path: str, in_: str, data: float) -> None:
    if data == 0:
        raise ValidationError(REQUIRED_FAIL_CODE, f"{_where(path, in_)} is required", path, in_, data)


def pattern(path: str, in_: str, data: str, pattern: str) -> None:
    """Check that data contains a match of the regular expression."""
    try:
        regex = _compile(pattern)
    except re.error as err:
        shown = f"{pattern}, but pattern is invalid: {err}"
        raise ValidationError(
            PATTERN_FAIL_CODE, f"{_where(path, in_)} should match '{shown}'", path, in_, data
        ) from err
    if not regex.search(data):
        raise ValidationError(PATTERN_FAIL_CODE, f"{_where(path, in_)} should match '{pattern}'", path, in_, data)


def _raise_max(path: str, in_: str, data: Any, bound: Any, exclusive: bool) -> None:
    relation = "less than" if exclusive else "less than or equal to"
    raise ValidationError(MAX_FAIL_CODE, f"{_where(path, in_)} should be {relation} {_num(bound)}", path, in_, data)


def _raise_min(path: str, in_: str, data: Any, bound: Any, exclusive: bool) -> None:
    relation = "greater than" if exclusive else "greater than or equal to"
    raise ValidationError(MIN_FAIL_CODE, f"{_where(path, in_)} should be {relation} {_num(bound)}", path, in_, data)


def maximum(path: str, in_: str, data: float, maximum: float, exclusive: bool) -> None:
    if (not exclusive and data > maximum) or (exclusive and data >= maximum):
        _raise_max(path, in_, data, maximum, exclusive)


def minimum(path: str, in_: str, data: float, minimum: float, exclusive: bool) -> None:
    if (not exclusive and data < minimum) or (exclusive and data <= minimum):
        _raise_min(path, in_, data, minimum, exclusive)


def _must_be_positive(path: str, in_: str, factor: Any) -> ValidationError:
    return ValidationError(
        MULTIPLE_OF_MUST_BE_POSITIVE_CODE,
        f"factor MultipleOf declared for {path} must be positive: {_num(factor)}",
        path,
        in_,
        factor,
    )


def _not_multiple(path: str, in_: str, factor: Any, data: Any) -> ValidationError:
    return ValidationError(
        MULTIPLE_OF_FAIL_CODE, f"{_where(path, in_)} should be a multiple of {_num(factor)}", path, in_, data
    )


def multiple_of(path: str, in_: str, data: float, factor: float) -> None:
    """Check that data is a multiple of a positive factor."""
    if factor <= 0:
        raise _must_be_positive(path, in_, factor)
    mult = 1 / factor * data if factor < 1 else data / factor
    if not _is_json_integer(mult):
        raise _not_multiple(path, in_, factor, data)


def format_of(
    path: str,
    in_: str,
    format_name: str,
    data: str,
    registry: Mapping[str, Callable[[str], bool]] | None = None,
) -> None:
    """Check data against a named format from the registry."""
    formats = DEFAULT_FORMATS if registry is None else registry
    if format_name not in formats:
        raise ValidationError(INVALID_TYPE_CODE, f"{format_name} is an invalid type name", format_name)
    if not formats[format_name](data):
        raise ValidationError(
            INVALID_TYPE_CODE,
            f"{_where(path, in_)} must be of type {format_name}: {json.dumps(data)}",
            path,
            in_,
            data,
        )


def maximum_native_type(path: str, in_: str, value: Any, maximum: float, exclusive: bool) -> None:
    """Maximum check that compares integers as integers."""
    if _is_int(value) and math.isfinite(maximum):
        bound = int(maximum)
        if (not exclusive and value > bound) or (exclusive and value >= bound):
            _raise_max(path, in_, value, bound, exclusive)
        return
    globals_maximum(path, in_, _as_float(value), maximum, exclusive)


def minimum_native_type(path: str, in_: str, value: Any, minimum: float, exclusive: bool) -> None:
    """Minimum check that compares integers as integers."""
    if _is_int(value) and math.isfinite(minimum):
        bound = int(minimum)
        if (not exclusive and value < bound) or (exclusive and value <= bound):
            _raise_min(path, in_, value, bound, exclusive)
        return
    globals_minimum(path, in_, _as_float(value), minimum, exclusive)


def multiple_of_native_type(path: str, in_: str, value: Any, factor: float) -> None:
    """MultipleOf check that divides integers as integers."""
    if _is_int(value) and math.isfinite(factor):
        int_factor = int(factor)
        if int_factor <= 0:
            raise _must_be_positive(path, in_, int_factor)
        if value % int_factor != 0:
            raise _not_multiple(path, in_, int_factor, value)
        return
    multiple_of(path, in_, _as_float(value), factor)


# Aliases to the float checks, shadowed by parameter names inside the native facades.
globals_maximum = maximum
globals_minimum = minimum


def _fits_float32(number: float) -> bool:
    try:
        struct.pack("<f", number)
    except OverflowError:
        return False
    return True


def is_value_valid_against_range(value: Any, type_name: str, format_name: str, prefix: str, path: str) -> None:
    """Check that a number can be held without loss by the given type and format.

    Raises ValueError when it cannot, or when the value is not numeric.
    """
    if not _is_number(value):
        raise ValueError(f"{prefix} value number range checking called with invalid (non numeric) val type in {path}")

    fits = True
    if type_name == "integer":
        if isinstance(value, float):
            as_int = int(value) if math.isfinite(value) and value.is_integer() else None
        else:
            as_int = value
        low, high = _INT_RANGES.get(format_name, _INT_RANGES["int64"])
        fits = as_int is not None and low <= as_int <= high
    elif format_name in ("float", "float32"):
        try:
            fits = _fits_float32(float(value))
        except OverflowError:
            fits = False

    if not fits:
        if format_name:
            raise ValueError(f"{prefix} value must be of type {type_name} with format {format_name} in {path}")
        raise ValueError(f"{prefix} value must be of type {type_name} (default format) in {path}")


def _iter_errors(results: Iterable[Result]) -> Iterable[Exception]:
    for res in results:
        yield from res.errors