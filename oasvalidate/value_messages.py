"""Messages about default values, examples, headers and parameter definitions."""

from __future__ import annotations

from typing import Any

from .messages import _composite, _q, _v
from .values import ValidationError

CANNOT_RESOLVE_REFERENCE_ERROR = "could not resolve reference in %s to $ref %s: %s"
DEFAULT_VALUE_DOES_NOT_VALIDATE_ERROR = "default value for %s in %s does not validate its schema"
DEFAULT_VALUE_ITEMS_DOES_NOT_VALIDATE_ERROR = "default value for %s.items in %s does not validate its schema"
DEFAULT_VALUE_HEADER_DOES_NOT_VALIDATE_ERROR = (
    "in operation %s, default value in header %s for %s does not validate its schema"
)
DEFAULT_VALUE_HEADER_ITEMS_DOES_NOT_VALIDATE_ERROR = (
    "in operation %s, default value in header.items %s for %s does not validate its schema"
)
DEFAULT_VALUE_IN_DOES_NOT_VALIDATE_ERROR = "in operation %s, default value in %s does not validate its schema"
EXAMPLE_VALUE_DOES_NOT_VALIDATE_ERROR = "example value for %s in %s does not validate its schema"
EXAMPLE_VALUE_ITEMS_DOES_NOT_VALIDATE_ERROR = "example value for %s.items in %s does not validate its schema"
EXAMPLE_VALUE_HEADER_DOES_NOT_VALIDATE_ERROR = (
    "in operation %s, example value in header %s for %s does not validate its schema"
)
EXAMPLE_VALUE_HEADER_ITEMS_DOES_NOT_VALIDATE_ERROR = (
    "in operation %s, example value in header.items %s for %s does not validate its schema"
)
EXAMPLE_VALUE_IN_DOES_NOT_VALIDATE_ERROR = "in operation %s, example value in %s does not validate its schema"
INVALID_PARAMETER_DEFINITION_ERROR = "invalid definition for parameter %s in %s in operation %s"
INVALID_PARAMETER_DEFINITION_AS_SCHEMA_ERROR = (
    "invalid definition as Schema for parameter %s in %s in operation %s"
)
INVALID_PATTERN_IN_ERROR = "%s in %s has invalid pattern: %s"
INVALID_PATTERN_IN_HEADER_ERROR = "in operation %s, header %s for %s has invalid pattern %s: %s"
NO_VALID_RESPONSE_ERROR = "operation %s has no valid response"
REF_NOT_ALLOWED_IN_HEADER_ERROR = (
    "IMPORTANT!in %s: $ref are not allowed in headers. In context for header %s%s"
)
SOME_PARAMETERS_BROKEN_ERROR = (
    "some parameters definitions are broken in %s.%s. "
    "Cannot carry on full checks on parameters for operation %s"
)

EXAMPLES_WITHOUT_SCHEMA_WARNING = "Examples provided without schema in operation %s, %s"
EXAMPLES_MIME_NOT_SUPPORTED_WARNING = (
    "No validation attempt for examples for media types other than application/json, in operation %s, %s"
)
PARAM_VALIDATION_TYPE_MISMATCH = "validation keywords of parameter %s in path %s don't match its type %s"
REF_SHOULD_NOT_HAVE_SIBLINGS_WARNING = "$ref property should have no sibling in %s.%s"
REQUIRED_HAS_DEFAULT_WARNING = "%s in %s has a default value and is required as parameter"


def required_has_default_msg(param: str, path: str) -> ValidationError:
    return _composite(REQUIRED_HAS_DEFAULT_WARNING, param, path)


def default_value_does_not_validate_msg(param: str, path: str) -> ValidationError:
    return _composite(DEFAULT_VALUE_DOES_NOT_VALIDATE_ERROR, param, path)


def default_value_items_does_not_validate_msg(param: str, path: str) -> ValidationError:
    return _composite(DEFAULT_VALUE_ITEMS_DOES_NOT_VALIDATE_ERROR, param, path)


def no_valid_response_msg(operation: str) -> ValidationError:
    return _composite(NO_VALID_RESPONSE_ERROR, _q(operation))


def default_value_header_does_not_validate_msg(operation: str, header: str, path: str) -> ValidationError:
    return _composite(DEFAULT_VALUE_HEADER_DOES_NOT_VALIDATE_ERROR, _q(operation), header, path)


def default_value_header_items_does_not_validate_msg(operation: str, header: str, path: str) -> ValidationError:
    return _composite(DEFAULT_VALUE_HEADER_ITEMS_DOES_NOT_VALIDATE_ERROR, _q(operation), header, path)


def invalid_pattern_in_header_msg(
    operation: str, header: str, path: str, pattern: str, args: Any
) -> ValidationError:
    return _composite(INVALID_PATTERN_IN_HEADER_ERROR, _q(operation), header, path, _q(pattern), _v(args))


def invalid_pattern_in_msg(path: str, in_: str, pattern: str) -> ValidationError:
    return _composite(INVALID_PATTERN_IN_ERROR, path, in_, _q(pattern))


def default_value_in_does_not_validate_msg(operation: str, path: str) -> ValidationError:
    return _composite(DEFAULT_VALUE_IN_DOES_NOT_VALIDATE_ERROR, _q(operation), path)


def example_value_does_not_validate_msg(param: str, path: str) -> ValidationError:
    return _composite(EXAMPLE_VALUE_DOES_NOT_VALIDATE_ERROR, param, path)


def example_value_items_does_not_validate_msg(param: str, path: str) -> ValidationError:
    return _composite(EXAMPLE_VALUE_ITEMS_DOES_NOT_VALIDATE_ERROR, param, path)


def example_value_header_does_not_validate_msg(operation: str, header: str, path: str) -> ValidationError:
    return _composite(EXAMPLE_VALUE_HEADER_DOES_NOT_VALIDATE_ERROR, _q(operation), header, path)


def example_value_header_items_does_not_validate_msg(operation: str, header: str, path: str) -> ValidationError:
    return _composite(EXAMPLE_VALUE_HEADER_ITEMS_DOES_NOT_VALIDATE_ERROR, _q(operation), header, path)


def example_value_in_does_not_validate_msg(operation: str, path: str) -> ValidationError:
    return _composite(EXAMPLE_VALUE_IN_DOES_NOT_VALIDATE_ERROR, _q(operation), path)


def examples_without_schema_msg(operation: str, response: str) -> ValidationError:
    return _composite(EXAMPLES_WITHOUT_SCHEMA_WARNING, _q(operation), response)


def examples_mime_not_supported_msg(operation: str, response: str) -> ValidationError:
    return _composite(EXAMPLES_MIME_NOT_SUPPORTED_WARNING, _q(operation), response)


def ref_not_allowed_in_header_msg(path: str, header: str, ref: str) -> ValidationError:
    return _composite(REF_NOT_ALLOWED_IN_HEADER_ERROR, _q(path), _q(header), ref)


def cannot_resolve_ref_msg(path: str, ref: str, err: Any) -> ValidationError:
    return _composite(CANNOT_RESOLVE_REFERENCE_ERROR, path, ref, _v(err))


def invalid_parameter_definition_msg(path: str, method: str, operation_id: str) -> ValidationError:
    return _composite(INVALID_PARAMETER_DEFINITION_ERROR, path, method, _q(operation_id))


def invalid_parameter_definition_as_schema_msg(path: str, method: str, operation_id: str) -> ValidationError:
    return _composite(INVALID_PARAMETER_DEFINITION_AS_SCHEMA_ERROR, path, method, _q(operation_id))


def parameter_validation_type_mismatch_msg(param: str, path: str, typ: str) -> ValidationError:
    return _composite(PARAM_VALIDATION_TYPE_MISMATCH, _q(param), _q(path), typ)


def some_parameters_broken_msg(path: str, method: str, operation_id: str) -> ValidationError:
    return _composite(SOME_PARAMETERS_BROKEN_ERROR, _q(path), method, operation_id)


def ref_should_not_have_siblings_msg(path: str, operation_id: str) -> ValidationError:
    return _composite(REF_SHOULD_NOT_HAVE_SIBLINGS_WARNING, _q(operation_id), path)