"""Specification objects for simple values and the JSON type check applied to data."""

from __future__ import annotations

import datetime as _dt
import enum as _enum
import io
import ipaddress
import json
import uuid as _uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .values import INVALID_TYPE_CODE, Result, ValidationError, _is_json_integer

STRING_TYPE = "string"
INTEGER_TYPE = "integer"
NUMBER_TYPE = "number"
BOOLEAN_TYPE = "boolean"
ARRAY_TYPE = "array"
OBJECT_TYPE = "object"
FILE_TYPE = "file"
NULL_TYPE = "null"

INTEGER_FORMAT_INT32 = "int32"
INTEGER_FORMAT_INT64 = "int64"
NUMBER_FORMAT_FLOAT32 = "float32"
NUMBER_FORMAT_FLOAT64 = "float64"

STRING_FORMAT_BYTE = "byte"
STRING_FORMAT_DATE = "date"
STRING_FORMAT_DATE_TIME = "date-time"
STRING_FORMAT_DURATION = "duration"
STRING_FORMAT_IPV4 = "ipv4"
STRING_FORMAT_IPV6 = "ipv6"
STRING_FORMAT_UUID = "uuid"


class Kind(_enum.IntEnum):
    """Runtime kind of a value, ordered so integer kinds form a contiguous range."""

    INVALID = 0
    BOOL = 1
    INT = 2
    INT8 = 3
    INT16 = 4
    INT32 = 5
    INT64 = 6
    UINT = 7
    UINT8 = 8
    UINT16 = 9
    UINT32 = 10
    UINT64 = 11
    FLOAT32 = 13
    FLOAT64 = 14
    COMPLEX128 = 16
    ARRAY = 17
    INTERFACE = 20
    MAP = 21
    POINTER = 22
    SLICE = 23
    STRING = 24
    STRUCT = 25


@dataclass(kw_only=True)
class _SimpleSchema:
    type: str = ""
    format: str = ""
    nullable: bool = False
    items: Items | None = None
    collection_format: str = ""
    default: Any = None
    maximum: float | None = None
    exclusive_maximum: bool = False
    minimum: float | None = None
    exclusive_minimum: bool = False
    max_length: int | None = None
    min_length: int | None = None
    pattern: str = ""
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool = False
    multiple_of: float | None = None
    enum: list[Any] | None = None
    example: Any = None


@dataclass(kw_only=True)
class Items(_SimpleSchema):
    """Element description of an array parameter or header."""


@dataclass(kw_only=True)
class Header(_SimpleSchema):
    """A response header description."""

    description: str = ""


@dataclass(kw_only=True)
class Schema:
    """A JSON schema object as used by the specification."""

    type: list[str] = field(default_factory=list)
    format: str = ""
    nullable: bool = False
    title: str = ""
    description: str = ""
    ref: str = ""
    default: Any = None
    example: Any = None
    enum: list[Any] | None = None
    maximum: float | None = None
    exclusive_maximum: bool = False
    minimum: float | None = None
    exclusive_minimum: bool = False
    multiple_of: float | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str = ""
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool = False
    max_properties: int | None = None
    min_properties: int | None = None
    required: list[str] = field(default_factory=list)
    items: Schema | list[Schema] | None = None
    properties: dict[str, Schema] = field(default_factory=dict)
    pattern_properties: dict[str, Schema] = field(default_factory=dict)
    additional_properties: bool | Schema | None = None
    all_of: list[Schema] = field(default_factory=list)
    any_of: list[Schema] = field(default_factory=list)
    one_of: list[Schema] = field(default_factory=list)
    not_: Schema | None = None
    read_only: bool = False
    discriminator: str = ""


@dataclass(kw_only=True)
class Parameter(_SimpleSchema):
    """An operation parameter description."""

    name: str = ""
    in_: str = ""
    description: str = ""
    required: bool = False
    allow_empty_value: bool = False
    schema: Schema | None = None


def kind_of(value: Any) -> Kind:
    """Classify a Python value by runtime kind."""
    if value is None:
        return Kind.INVALID
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT64
    if isinstance(value, complex):
        return Kind.COMPLEX128
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, list)):
        return Kind.SLICE
    if isinstance(value, tuple):
        return Kind.ARRAY
    if isinstance(value, Mapping):
        return Kind.MAP
    return Kind.STRUCT


_FORMATTED_TYPES: tuple[tuple[type | tuple[type, ...], str, str], ...] = (
    ((bytes, bytearray), STRING_TYPE, STRING_FORMAT_BYTE),
    (_dt.datetime, STRING_TYPE, STRING_FORMAT_DATE_TIME),
    (_dt.date, STRING_TYPE, STRING_FORMAT_DATE),
    (_dt.timedelta, STRING_TYPE, STRING_FORMAT_DURATION),
    (io.IOBase, FILE_TYPE, ""),
    (_uuid.UUID, STRING_TYPE, STRING_FORMAT_UUID),
    (ipaddress.IPv4Address, STRING_TYPE, STRING_FORMAT_IPV4),
    (ipaddress.IPv6Address, STRING_TYPE, STRING_FORMAT_IPV6),
)

_KIND_INFO = {
    Kind.BOOL: (BOOLEAN_TYPE, ""),
    Kind.STRING: (STRING_TYPE, ""),
    Kind.INT: (INTEGER_TYPE, INTEGER_FORMAT_INT64),
    Kind.FLOAT64: (NUMBER_TYPE, NUMBER_FORMAT_FLOAT64),
    Kind.SLICE: (ARRAY_TYPE, ""),
    Kind.MAP: (OBJECT_TYPE, ""),
    Kind.STRUCT: (OBJECT_TYPE, ""),
}


def schema_info_for_type(data: Any) -> tuple[str, str]:
    """Infer the JSON type and the format name matching a Python value."""
    for python_type, json_type, format_name in _FORMATTED_TYPES:
        if isinstance(data, python_type):
            return json_type, format_name
    return _KIND_INFO.get(kind_of(data), ("", ""))


def _invalid_type(path: str, in_: str, type_name: str, value: Any) -> ValidationError:
    where = f"{path} in {in_}" if in_ else path
    message = f"{where} must be of type {type_name}"
    if isinstance(value, str):
        message += f": {json.dumps(value, ensure_ascii=False)}"
    return ValidationError(INVALID_TYPE_CODE, message, path, in_, value)


@dataclass
class TypeValidator:
    """Checks that a value has the JSON type and format a description expects."""

    type: list[str] = field(default_factory=list)
    nullable: bool = False
    format: str = ""
    in_: str = ""
    path: str = ""

    def applies(self, source: Any, kind: Kind) -> bool:
        """The check applies to schemas, parameters and headers that declare a type or format."""
        return bool(self.type or self.format) and isinstance(source, (Schema, Parameter, Header))

    def _fail(self, type_name: str, value: Any) -> Result:
        return Result(errors=[_invalid_type(self.path, self.in_, type_name, value)])

    def validate(self, data: Any) -> Result:
        result = Result()
        result.inc()
        if data is None:
            if self.type and NULL_TYPE not in self.type and not self.nullable:
                return self._fail(",".join(self.type), NULL_TYPE)
            return result

        kind = kind_of(data)
        sch_type, format_name = schema_info_for_type(data)

        is_lower_int = self.format == INTEGER_FORMAT_INT64 and format_name == INTEGER_FORMAT_INT32
        is_lower_float = self.format == NUMBER_FORMAT_FLOAT64 and format_name == NUMBER_FORMAT_FLOAT32
        is_float_int = (
            sch_type == NUMBER_TYPE and _is_json_integer(float(data)) and INTEGER_TYPE in self.type
        )
        is_int_float = sch_type == INTEGER_TYPE and NUMBER_TYPE in self.type

        textual = kind in (Kind.STRING, Kind.SLICE)
        if not textual and self.format and not (
            sch_type in self.type
            or format_name == self.format
            or is_float_int
            or is_int_float
            or is_lower_int
            or is_lower_float
        ):
            return self._fail(self.format, format_name)

        numeric_expected = NUMBER_TYPE in self.type or INTEGER_TYPE in self.type
        if not numeric_expected and self.format and textual:
            return result

        if not (sch_type in self.type or is_float_int or is_int_float):
            return self._fail(",".join(self.type), sch_type)
        return result