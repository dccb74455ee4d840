"""Value checks, parameter and header validators, and messages for OpenAPI 2.0 documents."""

__version__ = "0.1.0"

__all__ = [
    "messages",
    "types",
    "value_messages",
    "value_validators",
    "validators",
    "values",
]