"""Messages reported while validating a specification document."""

from __future__ import annotations

import json
from typing import Any

from .values import COMPOSITE_ERROR_CODE, ValidationError

INTERNAL_ERROR_CODE = 500
NOT_FOUND_ERROR_CODE = 404

ARRAY_REQUIRES_ITEMS_ERROR = (
    "%s for %s is a collection without an element type (array requires items definition)"
)
ARRAY_IN_PARAM_REQUIRES_ITEMS_ERROR = (
    "param %s for %s is a collection without an element type (array requires item definition)"
)
ARRAY_IN_HEADER_REQUIRES_ITEMS_ERROR = (
    "header %s for %s is a collection without an element type (array requires items definition)"
)
BOTH_FORM_DATA_AND_BODY_ERROR = (
    "operation %s has both formData and body parameters. "
    "Only one such In: type may be used for a given operation"
)
CIRCULAR_ANCESTRY_DEFINITION_ERROR = "definition %s has circular ancestry: %s"
DUPLICATE_PARAM_NAME_ERROR = "duplicate parameter name %s for %s in operation %s"
DUPLICATE_PROPERTIES_ERROR = "definition %s contains duplicate properties: %s"
EMPTY_PATH_PARAMETER_ERROR = "%s contains an empty path parameter"
INVALID_DOCUMENT_ERROR = "spec validator can only validate spec.Document objects"
INVALID_ITEMS_PATTERN_ERROR = "%s for %s has invalid items pattern: %s"
INVALID_PATTERN_ERROR = "pattern %s is invalid in %s"
INVALID_PATTERN_IN_PARAM_ERROR = "operation %s has invalid pattern in param %s: %s"
INVALID_REFERENCE_ERROR = "invalid ref %s"
MULTIPLE_BODY_PARAM_ERROR = "operation %s has more than 1 body param: %s"
NON_UNIQUE_OPERATION_ID_ERROR = "%s is defined %d times"
NO_PARAMETER_IN_PATH_ERROR = "path param %s has no parameter definition"
NO_VALID_PATH_ERROR_OR_WARNING = "spec has no valid path defined"
PATH_OVERLAP_ERROR = "path %s overlaps with %s"
PATH_PARAM_NOT_IN_PATH_ERROR = "path param %s is not present in path %s"
PATH_PARAM_NOT_UNIQUE_ERROR = "params in path %s must be unique: %s conflicts with %s"
PATH_PARAM_REQUIRED_ERROR = "in operation %s,path param %s must be declared as required"
REQUIRED_BUT_NOT_DEFINED_ERROR = "%s is present in required but not defined as property in definition %s"
UNRESOLVED_REFERENCES_ERROR = "some references could not be resolved in spec. First found: %s"

PATH_PARAM_GARBLED_WARNING = (
    "in path %s, param %s contains {,} or white space. "
    "Albeit not stricly illegal, this is probably no what you want"
)
PATH_STRIPPED_PARAM_GARBLED_WARNING = (
    "path stripped from path parameters %s contains {,} or white space. This is probably no what you want."
)
READ_ONLY_AND_REQUIRED_WARNING = "Required property %s in %s should not be marked as both required and readOnly"
UNUSED_DEFINITION_WARNING = "definition %s is not used anywhere"
UNUSED_PARAM_WARNING = "parameter %s is not used anywhere"
UNUSED_RESPONSE_WARNING = "response %s is not used anywhere"


def _q(text: Any) -> str:
    """Render a value as a double-quoted string literal."""
    return json.dumps(str(text), ensure_ascii=False)


def _v(value: Any) -> str:
    """Render a value plainly; sequences as space-separated items in brackets."""
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_v(item) for item in value) + "]"
    return str(value)


def _composite(template: str, *args: Any) -> ValidationError:
    return ValidationError(COMPOSITE_ERROR_CODE, template % args)


def invalid_document_msg() -> ValidationError:
    return ValidationError(INTERNAL_ERROR_CODE, INVALID_DOCUMENT_ERROR)


def invalid_ref_msg(path: str) -> ValidationError:
    return ValidationError(NOT_FOUND_ERROR_CODE, INVALID_REFERENCE_ERROR % (_q(path),))


def unresolved_references_msg(err: Any) -> ValidationError:
    return _composite(UNRESOLVED_REFERENCES_ERROR, _v(err))


def no_valid_path_msg() -> ValidationError:
    return _composite(NO_VALID_PATH_ERROR_OR_WARNING)


def empty_path_parameter_msg(path: str) -> ValidationError:
    return _composite(EMPTY_PATH_PARAMETER_ERROR, _q(path))


def non_unique_operation_id_msg(path: str, count: int) -> ValidationError:
    return _composite(NON_UNIQUE_OPERATION_ID_ERROR, _q(path), count)


def circular_ancestry_definition_msg(path: str, args: Any) -> ValidationError:
    return _composite(CIRCULAR_ANCESTRY_DEFINITION_ERROR, _q(path), _v(args))


def duplicate_properties_msg(path: str, args: Any) -> ValidationError:
    return _composite(DUPLICATE_PROPERTIES_ERROR, _q(path), _v(args))


def path_param_not_in_path_msg(path: str, param: str) -> ValidationError:
    return _composite(PATH_PARAM_NOT_IN_PATH_ERROR, _q(param), _q(path))


def array_requires_items_msg(path: str, operation: str) -> ValidationError:
    return _composite(ARRAY_REQUIRES_ITEMS_ERROR, path, _q(operation))


def array_in_param_requires_items_msg(path: str, operation: str) -> ValidationError:
    return _composite(ARRAY_IN_PARAM_REQUIRES_ITEMS_ERROR, _q(path), _q(operation))


def array_in_header_requires_items_msg(path: str, operation: str) -> ValidationError:
    return _composite(ARRAY_IN_HEADER_REQUIRES_ITEMS_ERROR, _q(path), _q(operation))


def invalid_items_pattern_msg(path: str, operation: str, pattern: str) -> ValidationError:
    return _composite(INVALID_ITEMS_PATTERN_ERROR, path, _q(operation), _q(pattern))


def invalid_pattern_msg(pattern: str, path: str) -> ValidationError:
    return _composite(INVALID_PATTERN_ERROR, _q(pattern), path)


def required_but_not_defined_msg(path: str, definition: str) -> ValidationError:
    return _composite(REQUIRED_BUT_NOT_DEFINED_ERROR, _q(path), _q(definition))


def path_param_garbled_msg(path: str, param: str) -> ValidationError:
    return _composite(PATH_PARAM_GARBLED_WARNING, _q(path), _q(param))


def path_stripped_param_garbled_msg(path: str) -> ValidationError:
    return _composite(PATH_STRIPPED_PARAM_GARBLED_WARNING, path)


def path_overlap_msg(path: str, arg: str) -> ValidationError:
    return _composite(PATH_OVERLAP_ERROR, path, arg)


def invalid_pattern_in_param_msg(operation: str, param: str, pattern: str) -> ValidationError:
    return _composite(INVALID_PATTERN_IN_PARAM_ERROR, _q(operation), _q(param), _q(pattern))


def path_param_required_msg(operation: str, param: str) -> ValidationError:
    return _composite(PATH_PARAM_REQUIRED_ERROR, _q(operation), _q(param))


def both_form_data_and_body_msg(operation: str) -> ValidationError:
    return _composite(BOTH_FORM_DATA_AND_BODY_ERROR, _q(operation))


def multiple_body_param_msg(operation: str, args: Any) -> ValidationError:
    return _composite(MULTIPLE_BODY_PARAM_ERROR, _q(operation), _v(args))


def path_param_not_unique_msg(path: str, param: str, arg: str) -> ValidationError:
    return _composite(PATH_PARAM_NOT_UNIQUE_ERROR, _q(path), _q(param), _q(arg))


def duplicate_param_name_msg(path: str, param: str, operation: str) -> ValidationError:
    return _composite(DUPLICATE_PARAM_NAME_ERROR, _q(param), _q(path), _q(operation))


def unused_param_msg(arg: str) -> ValidationError:
    return _composite(UNUSED_PARAM_WARNING, _q(arg))


def unused_definition_msg(arg: str) -> ValidationError:
    return _composite(UNUSED_DEFINITION_WARNING, _q(arg))


def unused_response_msg(arg: str) -> ValidationError:
    return _composite(UNUSED_RESPONSE_WARNING, _q(arg))


def read_only_and_required_msg(path: str, param: str) -> ValidationError:
    return _composite(READ_ONLY_AND_REQUIRED_WARNING, param, _q(path))


def no_parameter_in_path_msg(param: str) -> ValidationError:
    return _composite(NO_PARAMETER_IN_PATH_ERROR, _q(param))