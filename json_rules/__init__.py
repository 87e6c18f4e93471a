"""
json_rules – path-addressed structural validation for decoded JSON.
"""
import logging

from .validator import Validator
from .errors import (
    ErrorBag,
    InvalidJSONError,
    JsonRulesError,
    SchemaDefinitionError,
    UnknownEnumError,
    ValidationError,
)
from .enums import EnumSpec, register_enum, unregister_enum
from .paths import NOT_FOUND, Found, resolve
from .schema import compile_schema
from .typecheck import TypeTag
from .card import to_markdown_report

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Validator",
    "ErrorBag",
    "InvalidJSONError",
    "JsonRulesError",
    "SchemaDefinitionError",
    "UnknownEnumError",
    "ValidationError",
    "EnumSpec",
    "register_enum",
    "unregister_enum",
    "NOT_FOUND",
    "Found",
    "resolve",
    "compile_schema",
    "TypeTag",
    "to_markdown_report",
]
