"""
schema.py - declarative rule trees
==================================

A schema is a mapping from field name to a rule.  Four kinds of rule exist::

    {
        "id":      "integer",                                # Shorthand
        "email":   {"type": "string", "pattern": r"@"},      # Descriptor
        "address": {"city": "string", "zip": "string"},      # Nested
        "age":     lambda v, path: v.is_between(path, 0, 130),  # Callback
    }

``compile_schema`` turns such a mapping into the closed set of rule classes
below, and ``evaluate`` walks the compiled tree, dispatching every field to the
matching :class:`~json_rules.validator.Validator` check.

Descriptor keys
---------------
``type`` (mandatory, it is what makes a mapping a descriptor), ``required``,
``enum``, ``min``, ``max``, ``minLength``, ``maxLength``, ``pattern`` and
``items`` - a rule applied to every element of an array at ``path.<index>``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Union

from . import paths
from . import utils
from .errors import SchemaDefinitionError
from .typecheck import TypeSpec, TypeTag

if TYPE_CHECKING:  # pragma: no cover
    from .validator import Validator

__all__ = [
    "Shorthand",
    "Descriptor",
    "Nested",
    "Callback",
    "Rule",
    "compile_rule",
    "compile_schema",
    "evaluate",
]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Rule variants                                                               #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Shorthand:
    """A bare type name: ``is_type(path, type)``."""

    type: TypeSpec


@dataclass(frozen=True)
class Descriptor:
    type: TypeSpec
    required: bool = False
    enum: Any = None
    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    items: Optional["Rule"] = None


@dataclass(frozen=True)
class Nested:
    """A sub-schema applied with the field's path as prefix."""

    fields: Dict[str, "Rule"] = field(default_factory=dict)


@dataclass(frozen=True)
class Callback:
    """``fn(validator, path)`` performs its own checks."""

    fn: Callable[["Validator", str], Any]


Rule = Union[Shorthand, Descriptor, Nested, Callback]

_DESCRIPTOR_KEYS = {
    "type": "type",
    "required": "required",
    "enum": "enum",
    "min": "min",
    "max": "max",
    "minLength": "min_length",
    "maxLength": "max_length",
    "pattern": "pattern",
    "items": "items",
}


# --------------------------------------------------------------------------- #
# Compilation                                                                 #
# --------------------------------------------------------------------------- #

def compile_rule(raw: Any) -> Rule:
    """Classify one raw rule.  Already-compiled rules pass through."""
    if isinstance(raw, (Shorthand, Descriptor, Nested, Callback)):
        return raw

    # classes are callable, but here they name a structural type
    if isinstance(raw, (str, TypeTag, type)):
        return Shorthand(raw)

    if isinstance(raw, Mapping):
        if "type" in raw:
            return _compile_descriptor(raw)
        return compile_schema(raw)

    if callable(raw):
        return Callback(raw)

    raise SchemaDefinitionError(f"Unsupported schema rule: {raw!r}")


def _compile_descriptor(raw: Mapping[str, Any]) -> Descriptor:
    unknown = sorted(str(key) for key in raw if key not in _DESCRIPTOR_KEYS)
    if unknown:
        raise SchemaDefinitionError(f"Unknown descriptor key(s): {unknown}")
    if not isinstance(raw["type"], (str, TypeTag, type)):
        raise SchemaDefinitionError(f"Unsupported descriptor type: {raw['type']!r}")

    kwargs = {attr: raw[key] for key, attr in _DESCRIPTOR_KEYS.items() if key in raw}
    if "items" in kwargs:
        kwargs["items"] = compile_rule(kwargs["items"])
    kwargs["required"] = bool(kwargs.get("required", False))
    return Descriptor(**kwargs)


def compile_schema(tree: Mapping[str, Any]) -> Nested:
    if isinstance(tree, Nested):
        return tree
    if not isinstance(tree, Mapping):
        raise SchemaDefinitionError(f"A schema must be a mapping, got {type(tree).__name__}")
    return Nested({str(name): compile_rule(rule) for name, rule in tree.items()})


# --------------------------------------------------------------------------- #
# Evaluation                                                                  #
# --------------------------------------------------------------------------- #

def evaluate(validator: "Validator", tree: Union[Mapping[str, Any], Nested], path: str = "") -> None:
    """Apply *tree* to the object found at *path* (``""`` = document root).

    An absent *path* records the required error, a non-object records
    ``must be an object``; neither descends any further.
    """
    schema = compile_schema(tree)

    found = validator.lookup(path)
    if not found or not isinstance(found.value, Mapping):
        validator.is_object(path)
        return

    log.debug("Evaluating %d schema field(s) under %r", len(schema.fields), path or "<root>")
    for name, rule in schema.fields.items():
        _apply(validator, rule, paths.join(path, name))


def _apply(validator: "Validator", rule: Rule, path: str) -> None:
    if isinstance(rule, Callback):
        rule.fn(validator, path)
    elif isinstance(rule, Descriptor):
        _apply_descriptor(validator, rule, path)
    elif isinstance(rule, Nested):
        evaluate(validator, rule, path)
    elif isinstance(rule, Shorthand):
        validator.is_type(path, rule.type)
    else:
        raise SchemaDefinitionError(f"Unsupported schema rule: {rule!r}")


def _apply_descriptor(validator: "Validator", rule: Descriptor, path: str) -> None:
    found = validator.lookup(path)
    if not found:
        # optional fields that are absent are simply not checked
        if rule.required:
            validator.exists(path)
        return

    validator.is_type(path, rule.type)

    if rule.enum is not None:
        validator.is_in(path, rule.enum)

    if rule.min is not None or rule.max is not None:
        validator.is_between(path, rule.min, rule.max)

    if rule.min_length is not None or rule.max_length is not None:
        validator.has_length(path, None, rule.min_length, rule.max_length)

    if rule.pattern is not None:
        validator.matches_regex(path, rule.pattern)

    if rule.items is not None:
        value = found.value
        if utils._is_array(value):
            for index in range(len(value)):
                _apply(validator, rule.items, paths.join(path, index))
