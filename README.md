# oasvalidate

Validation building blocks for OpenAPI 2.0 (Swagger) documents: checks on
individual values (enums, lengths, ranges, patterns, multiples, formats),
validators for parameters, headers and array items, and the catalogue of
messages that a specification validator reports.

The package has no dependencies beyond the standard library.

## Installation

```
pip install oasvalidate
```

To run the test suite:

```
pip install "oasvalidate[test]"
pytest
```

## Value checks

The functions in `oasvalidate.values` return `None` when the value is
acceptable and raise `ValidationError` when it is not. A `ValidationError`
carries a numeric `code` (for example `MAX_FAIL_CODE` or `ENUM_FAIL_CODE`),
its `message`, and the `name`, `in_` and `value` it concerns.

```python
from oasvalidate.values import ValidationError, enum, max_length, multiple_of, pattern

enum("status", "query", "open", ["open", "closed"])     # passes
multiple_of("price", "body", 9.3, 3.1)                   # passes

try:
    max_length("name", "body", "abcdef", 5)
except ValidationError as err:
    print(err)        # name in body should be at most 5 chars long

try:
    pattern("code", "path", "pick-8-boo", r".*-[a-z]-.*")
except ValidationError as err:
    print(err.code)   # 604
```

Available checks: `enum`, `enum_case` (optionally case-insensitive for
strings), `min_items`, `max_items`, `unique_items`, `min_length`,
`max_length`, `required`, `required_string`, `required_number`, `pattern`,
`maximum`, `minimum`, `multiple_of`, `format_of` and `read_only`.

`read_only` takes an optional `OperationType`: a non-zero value is only
rejected when the operation is `OperationType.REQUEST`.

`format_of` looks the format name up in a registry, a mapping from names to
functions taking a string and returning a boolean. Without a registry it uses
`DEFAULT_FORMATS`, which knows `date`, `date-time`, `email`, `hostname`,
`ipv4`, `ipv6`, `uri`, `byte` and `uuid`. An unknown format name raises a
`ValidationError` with code `INVALID_TYPE_CODE`.

`maximum_native_type`, `minimum_native_type` and `multiple_of_native_type`
compare integers as integers and everything else as floats.
`is_value_valid_against_range` raises `ValueError` when a number cannot be
held by the given type and format (`int32`, `uint32`, `int64`, `uint64`,
`float`/`float32`), or when the value is not numeric.

## Results

`Result` collects `errors` and `warnings`, and counts checks in
`match_count`. Results merge into one another, and `merge_as_warnings`
folds another result's errors and warnings in as warnings:

```python
from oasvalidate.values import Result, ValidationError, min_items

res = Result()
try:
    min_items("tags", "query", 0, 1)
except ValidationError as err:
    res.add_errors(err)
res.is_valid()       # False
```

## Parameters, headers and items

`oasvalidate.types` describes `Parameter`, `Header`, `Items` and `Schema`
definitions as dataclasses, and provides `TypeValidator`, `kind_of` and
`schema_info_for_type`, which infers the JSON type and format of a Python
value (for example `datetime.date` gives `("string", "date")`).

`oasvalidate.value_validators` holds `BasicCommonValidator` (enumerations),
`NumberValidator` and `StringValidator`. `oasvalidate.validators` holds
`ParamValidator`, `HeaderValidator`, `ItemsValidator` and
`BasicSliceValidator`. `ParamValidator` and `HeaderValidator` run the type,
string, number, array and enum checks that apply to a value and return a
`Result` holding the first failure found:

```python
from oasvalidate.types import Parameter
from oasvalidate.validators import ParamValidator

limit = Parameter(name="limit", in_="query", type="integer", maximum=100.0)
result = ParamValidator(limit).validate(250)
result.has_errors()  # True
```

Array values are checked for size and uniqueness, and each element is
checked against the parameter's `items` description, nested arrays included.

## Messages

`oasvalidate.messages` and `oasvalidate.value_messages` build the
`ValidationError` objects used when validating a whole specification, such
as `path_overlap_msg`, `unused_definition_msg` or
`default_value_does_not_validate_msg`.

## What this package does not do

It does not load, parse or resolve references in a specification document,
and it has no validator for a whole document or for full JSON schemas: it
provides the value checks, the parameter and header validators, and the
message catalogue that such a validator would use. It has no command-line
tool.