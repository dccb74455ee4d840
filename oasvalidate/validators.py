"""Validators for parameters, headers and the items of array values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from . import values as _values
from .types import Header, Items, Kind, Parameter, TypeValidator, kind_of
from .value_validators import BasicCommonValidator, NumberValidator, StringValidator
from .values import Result, ValidationError


class _ValueValidator(Protocol):
    path: str

    def applies(self, source: Any, kind: Kind) -> bool: ...

    def validate(self, data: Any) -> Result: ...


def _fail(err: Exception) -> Result:
    return Result(errors=[err])


def _run_chain(validators: list[_ValueValidator], source: Any, data: Any) -> Result:
    """Run each applicable validator in turn, stopping at the first failure."""
    kind = kind_of(data)
    for validator in validators:
        if not validator.applies(source, kind):
            continue
        outcome = validator.validate(data)
        if outcome.has_errors():
            return Result().merge(outcome)
    return Result()


class ItemsValidator:
    """Validates the elements of an array against an items description."""

    def __init__(self, path: str, in_: str, items: Items, root: Any) -> None:
        self.path = path
        self.in_ = in_
        self.items = items
        self.root = root
        self.validators: list[_ValueValidator] = [
            TypeValidator(
                type=[items.type],
                nullable=items.nullable,
                format=items.format,
                in_=in_,
                path=path,
            ),
            StringValidator(
                in_=in_,
                default=items.default,
                max_length=items.max_length,
                min_length=items.min_length,
                pattern=items.pattern,
                allow_empty_value=False,
            ),
            NumberValidator(
                in_=in_,
                default=items.default,
                multiple_of=items.multiple_of,
                maximum=items.maximum,
                exclusive_maximum=items.exclusive_maximum,
                minimum=items.minimum,
                exclusive_minimum=items.exclusive_minimum,
                type=items.type,
                format=items.format,
            ),
            BasicSliceValidator(
                in_=in_,
                default=items.default,
                max_items=items.max_items,
                min_items=items.min_items,
                unique_items=items.unique_items,
                source=root,
                items=items.items,
            ),
            BasicCommonValidator(
                in_=in_,
                default=items.default,
                enum=items.enum,
            ),
        ]

    def validate(self, index: int, data: Any) -> Result:
        """Validate the element at the given index of the array."""
        kind = kind_of(data)
        main = Result()
        path = f"{self.path}.{index}"
        for validator in self.validators:
            validator.path = path
            if not validator.applies(self.root, kind):
                continue
            outcome = validator.validate(data)
            main.merge(outcome)
            main.inc()
            if outcome.has_errors():
                return main
        return main


@dataclass
class BasicSliceValidator:
    """Checks the size, uniqueness and elements of an array value."""

    path: str = ""
    in_: str = ""
    default: Any = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool = False
    items: Items | None = None
    source: Any = None
    _items_validator: ItemsValidator | None = field(default=None, repr=False, compare=False)

    def applies(self, source: Any, kind: Kind) -> bool:
        return isinstance(source, (Parameter, Items, Header)) and kind == Kind.SLICE

    def validate(self, data: Any) -> Result:
        size = len(data)
        checks: list[tuple[Callable[..., None], tuple[Any, ...]]] = []
        if self.min_items is not None:
            checks.append((_values.min_items, (size, self.min_items)))
        if self.max_items is not None:
            checks.append((_values.max_items, (size, self.max_items)))
        if self.unique_items:
            checks.append((_values.unique_items, (data,)))
        for check, args in checks:
            try:
                check(self.path, self.in_, *args)
            except ValidationError as err:
                return _fail(err)

        if self._items_validator is None and self.items is not None:
            self._items_validator = ItemsValidator(self.path, self.in_, self.items, self.source)

        if self._items_validator is not None:
            for index, element in enumerate(data):
                outcome = self._items_validator.validate(index, element)
                if outcome.has_errors():
                    return outcome
        return Result()


class HeaderValidator:
    """Validates the value of a response header against its description."""

    def __init__(self, name: str, header: Header) -> None:
        self.name = name
        self.header = header
        self.validators: list[_ValueValidator] = [
            TypeValidator(
                type=[header.type],
                nullable=header.nullable,
                format=header.format,
                in_="header",
                path=name,
            ),
            StringValidator(
                path=name,
                in_="response",
                default=header.default,
                required=True,
                max_length=header.max_length,
                min_length=header.min_length,
                pattern=header.pattern,
                allow_empty_value=False,
            ),
            NumberValidator(
                path=name,
                in_="response",
                default=header.default,
                multiple_of=header.multiple_of,
                maximum=header.maximum,
                exclusive_maximum=header.exclusive_maximum,
                minimum=header.minimum,
                exclusive_minimum=header.exclusive_minimum,
                type=header.type,
                format=header.format,
            ),
            BasicSliceValidator(
                path=name,
                in_="response",
                default=header.default,
                max_items=header.max_items,
                min_items=header.min_items,
                unique_items=header.unique_items,
                items=header.items,
                source=header,
            ),
            BasicCommonValidator(
                path=name,
                in_="response",
                default=header.default,
                enum=header.enum,
            ),
        ]

    def validate(self, data: Any) -> Result:
        """Validate a header value; the result holds the first failure found."""
        return _run_chain(self.validators, self.header, data)


class ParamValidator:
    """Validates a value against the description of an operation parameter."""

    def __init__(self, param: Parameter) -> None:
        self.param = param
        self.validators: list[_ValueValidator] = [
            TypeValidator(
                type=[param.type],
                nullable=param.nullable,
                format=param.format,
                in_=param.in_,
                path=param.name,
            ),
            StringValidator(
                path=param.name,
                in_=param.in_,
                default=param.default,
                allow_empty_value=param.allow_empty_value,
                required=param.required,
                max_length=param.max_length,
                min_length=param.min_length,
                pattern=param.pattern,
            ),
            NumberValidator(
                path=param.name,
                in_=param.in_,
                default=param.default,
                multiple_of=param.multiple_of,
                maximum=param.maximum,
                exclusive_maximum=param.exclusive_maximum,
                minimum=param.minimum,
                exclusive_minimum=param.exclusive_minimum,
                type=param.type,
                format=param.format,
            ),
            BasicSliceValidator(
                path=param.name,
                in_=param.in_,
                default=param.default,
                max_items=param.max_items,
                min_items=param.min_items,
                unique_items=param.unique_items,
                items=param.items,
                source=param,
            ),
            BasicCommonValidator(
                path=param.name,
                in_=param.in_,
                default=param.default,
                enum=param.enum,
            ),
        ]

    def validate(self, data: Any) -> Result:
        """Validate a parameter value; the result holds the first failure found."""
        return _run_chain(self.validators, self.param, data)