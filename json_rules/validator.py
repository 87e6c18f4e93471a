"""
validator.py - the path-addressed rule engine
=============================================

A :class:`Validator` wraps exactly one decoded JSON document and exposes a
family of chainable checks.  Every check

1. resolves its path against the *original* document,
2. records a single ``"The '<path>' is required"`` error when the path is
   absent (and stops there),
3. otherwise evaluates its predicate and records a message on failure,
4. returns the validator so that calls can be chained.

Nothing a check does is visible to any other check, so issuing the same
checks in a different order only changes message order within a path.

Example
-------
>>> v = Validator('{"user": {"age": -5}}')
>>> v.is_between("user.age", 0, 120).exists("user.name").passes()
False
>>> sorted(v.errors())
['user.age', 'user.name']

Outcome
-------
``passes()`` / ``fails()`` / ``errors()`` finalise the session (idempotent);
``validate()`` raises :class:`~json_rules.errors.ValidationError` instead of
returning a boolean.
"""

from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from . import formats
from . import loader
from . import paths
from . import schema as _schema
from . import utils
from .card import to_markdown_report
from .enums import AllowList, expand
from .errors import ErrorBag, ValidationError
from .typecheck import TypeSpec, matches_type, type_name

__all__ = ["Validator"]

log = logging.getLogger(__name__)

Number = Union[int, float]


class Validator:
    """Accumulates path-keyed validation errors over one document."""

    def __init__(self, data: Any):
        """Build a validator.

        Parameters
        ----------
        data
            JSON text (``str``/``bytes``), a ``Path`` to a JSON file, or data
            that has already been decoded.  Text that fails to decode raises
            :class:`~json_rules.errors.InvalidJSONError` and no validator is
            created.
        """
        self._data = loader.load_document(data)
        self._errors = ErrorBag()
        self._validated = False

    @classmethod
    def of(cls, data: Any) -> "Validator":
        return cls(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "Validator":
        return cls(Path(path))

    @property
    def data(self) -> Any:
        """A copy of the document under validation."""
        return copy.deepcopy(self._data)

    @property
    def validated(self) -> bool:
        return self._validated

    # ------------------------------------------------------------------ #
    # Internals                                                          #
    # ------------------------------------------------------------------ #

    def _fail(self, path: str, message: str) -> None:
        log.debug("Rule failed at %r: %s", path, message)
        self._errors.add(path, message)

    def _require(self, path: str) -> paths.Resolution:
        """Resolve *path*, recording the standard required error if absent."""
        found = paths.resolve(self._data, path)
        if not found:
            self._fail(path, f"The '{path}' is required")
        return found

    def _lookup(self, path: str) -> paths.Resolution:
        """Resolve *path* without recording anything; ``""`` is the root."""
        if path == "":
            return paths.Found(self._data)
        return paths.resolve(self._data, path)

    def lookup(self, path: str) -> paths.Resolution:
        """Read-only resolution of *path* (``""`` = document); nothing is recorded.

        The returned value is a copy, so the document stays frozen.
        """
        found = self._lookup(path)
        return paths.Found(copy.deepcopy(found.value)) if found else found

    # ------------------------------------------------------------------ #
    # Existence                                                          #
    # ------------------------------------------------------------------ #

    def exists(self, path: str, *, message: Optional[str] = None) -> "Validator":
        """Record a required error (or *message*) when *path* is absent."""
        if message is None:
            self._require(path)
        elif not paths.exists(self._data, path):
            self._fail(path, message)
        return self

    has = exists

    def not_exists(self, path: str, *, message: Optional[str] = None) -> "Validator":
        if paths.resolve(self._data, path):
            self._fail(path, message or f"The '{path}' must not be present")
        return self

    has_not = not_exists

    def is_object(self, path: str = "", *, message: Optional[str] = None) -> "Validator":
        """The value at *path* (``""`` = document root) must be an object."""
        found = self._lookup(path)
        if not found:
            self._fail(path, f"The '{path}' is required")
        elif not isinstance(found.value, Mapping):
            subject = "data" if path == "" else f"'{path}'"
            self._fail(path, message or f"The {subject} must be an object")
        return self

    def has_all(self, keys: Iterable[str]) -> "Validator":
        for path in keys:
            self.exists(path)
        return self

    def has_none_of(self, keys: Iterable[str]) -> "Validator":
        for path in keys:
            self.not_exists(path)
        return self

    def has_any_of(self, *keys: str, message: Optional[str] = None) -> "Validator":
        """Record one ``anyOf`` error when every one of *keys* is absent."""
        if not any(paths.exists(self._data, path) for path in keys):
            self._fail("anyOf", message or f"At least one of these keys must exist: {', '.join(keys)}")
        return self

    # ------------------------------------------------------------------ #
    # Equality and types                                                 #
    # ------------------------------------------------------------------ #

    def equals(self, path: str, expected: Any, *, message: Optional[str] = None) -> "Validator":
        """Loose equality: a numeric string equals the matching number."""
        found = self._require(path)
        if found and not utils._loosely_equal(found.value, expected):
            self._fail(
                path,
                message or f"The '{path}' must be exactly: {utils._value_to_string(expected)}",
            )
        return self

    def optional(self, path: str, expected: Any, *, message: Optional[str] = None) -> "Validator":
        if paths.exists(self._data, path):
            self.equals(path, expected, message=message)
        return self

    def is_type(self, path: str, expected: TypeSpec, *, message: Optional[str] = None) -> "Validator":
        found = self._require(path)
        if found and not matches_type(found.value, expected):
            self._fail(path, message or f"The '{path}' must be of type: {type_name(expected)}")
        return self

    def optional_type(self, path: str, expected: TypeSpec, *, message: Optional[str] = None) -> "Validator":
        if paths.exists(self._data, path):
            self.is_type(path, expected, message=message)
        return self

    def all_types(self, type_map: Mapping[str, TypeSpec]) -> "Validator":
        for path, expected in type_map.items():
            self.is_type(path, expected)
        return self

    def is_in(self, path: str, allowed: AllowList, *, message: Optional[str] = None) -> "Validator":
        """Strict membership in a literal list or a described enumeration."""
        found = self._require(path)
        if not found:
            return self

        values = expand(allowed)
        if not any(utils._strictly_equal(found.value, v) for v in values):
            rendered = ", ".join(utils._value_to_string(v) for v in values)
            self._fail(path, message or f"The '{path}' must be one of: {rendered}")
        return self

    # ------------------------------------------------------------------ #
    # Numbers and sizes                                                  #
    # ------------------------------------------------------------------ #

    def is_between(
        self,
        path: str,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
        *,
        message: Optional[str] = None,
    ) -> "Validator":
        """Inclusive numeric range; either bound may be omitted."""
        found = self._require(path)
        if not found:
            return self

        number = utils._to_number(found.value)
        if number is None:
            self._fail(path, message or f"The '{path}' must be numeric")
            return self

        too_small = min is not None and number < min
        too_large = max is not None and number > max
        if too_small or too_large:
            if min is not None and max is not None:
                text = f"must be between {min} and {max}"
            elif min is not None:
                text = f"must be at least {min}"
            else:
                text = f"must be at most {max}"
            self._fail(path, message or f"The '{path}' {text}")
        return self

    def has_length(
        self,
        path: str,
        exact: Optional[int] = None,
        min: Optional[int] = None,
        max: Optional[int] = None,
        *,
        message: Optional[str] = None,
    ) -> "Validator":
        """Character count for strings, element count for arrays.

        Every supplied bound is checked and reported on its own.
        """
        found = self._require(path)
        if not found:
            return self

        value = found.value
        if not isinstance(value, str) and not utils._is_array(value):
            self._fail(path, message or f"The '{path}' must be a string or array")
            return self

        length = len(value)
        kind, unit = utils._kind(value), utils._unit(value)

        if exact is not None and length != exact:
            self._fail(path, message or f"The '{path}' {kind} must be exactly {exact} {unit} long")
        if min is not None and length < min:
            self._fail(path, message or f"The '{path}' {kind} must be at least {min} {unit} long")
        if max is not None and length > max:
            self._fail(path, message or f"The '{path}' {kind} must not exceed {max} {unit} long")
        return self

    def not_empty(self, path: str, *, message: Optional[str] = None) -> "Validator":
        found = self._require(path)
        if not found:
            return self

        value = found.value
        if value == "" or ((utils._is_array(value) or isinstance(value, Mapping)) and len(value) == 0):
            self._fail(path, message or f"The '{path}' {utils._kind(value)} must not be empty")
        return self

    # ------------------------------------------------------------------ #
    # Strings                                                            #
    # ------------------------------------------------------------------ #

    def matches_regex(
        self,
        path: str,
        pattern: Union[str, re.Pattern],
        match_all: bool = False,
        *,
        message: Optional[str] = None,
    ) -> "Validator":
        """Fail when *pattern* finds no match anywhere in the string.

        ``match_all`` counts every non-overlapping match instead of stopping
        at the first; the outcome is the same, zero matches fails.
        """
        found = self._require(path)
        if not found:
            return self

        value = found.value
        if not isinstance(value, str):
            self._fail(path, message or f"The '{path}' must be a string for regex validation")
            return self

        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            log.warning("Invalid pattern %r for %r: %s", source, path, exc)
            compiled = None

        if compiled is None:
            matches = 0
        elif match_all:
            matches = sum(1 for _ in compiled.finditer(value))
        else:
            matches = 1 if compiled.search(value) else 0

        if matches <= 0:
            self._fail(path, message or f"The '{path}' must match the pattern: {source}")
        return self

    def contains(
        self,
        path: str,
        needle: str,
        case_sensitive: bool = True,
        *,
        message: Optional[str] = None,
    ) -> "Validator":
        found = self._require(path)
        if not found:
            return self

        value = found.value
        if not isinstance(value, str):
            self._fail(path, message or f"The '{path}' must be a string")
            return self

        if case_sensitive:
            present = needle in value
        else:
            present = needle.casefold() in value.casefold()

        if not present:
            suffix = "" if case_sensitive else " (case insensitive)"
            self._fail(path, message or f"The '{path}' must contain '{needle}'{suffix}")
        return self

    def is_date(self, path: str, format: str = "%Y-%m-%d", *, message: Optional[str] = None) -> "Validator":
        """The string must parse under *format* and render back identically."""
        found = self._require(path)
        if not found:
            return self

        value = found.value
        if not isinstance(value, str):
            self._fail(path, message or f"The '{path}' must be a string for date validation")
            return self

        if not formats.is_strict_date(value, format):
            self._fail(path, message or f"The '{path}' must be a valid date in format: {format}")
        return self

    def is_file(self, path: str, must_exist: bool = True, *, message: Optional[str] = None) -> "Validator":
        """The value is a file-system path; with *must_exist* it must exist.

        This is the only check that touches anything outside the document.
        """
        found = self._require(path)
        if not found:
            return self

        value = found.value
        if not isinstance(value, str):
            self._fail(path, message or f"The '{path}' must be a string representing a file path")
            return self

        if must_exist and not Path(value).exists():
            self._fail(path, message or f"The file specified in '{path}' does not exist: {value}")
        return self

    def is_email(self, path: str, *, message: Optional[str] = None) -> "Validator":
        return self.is_valid(path, lambda value: formats.is_email(value, path), message=message)

    def is_url(self, path: str, *, message: Optional[str] = None) -> "Validator":
        return self.is_valid(path, lambda value: formats.is_url(value, path), message=message)

    def is_ip(self, path: str, version: Optional[int] = None, *, message: Optional[str] = None) -> "Validator":
        if version not in formats.IP_VERSIONS:
            self._fail(path, f"Invalid IP version: {version}")
            return self
        return self.is_valid(path, lambda value: formats.is_ip(value, path, version), message=message)

    # ------------------------------------------------------------------ #
    # Arrays                                                             #
    # ------------------------------------------------------------------ #

    def _require_array(self, path: str, message: Optional[str]) -> Optional[Any]:
        found = self._require(path)
        if not found:
            return None
        if not utils._is_array(found.value):
            self._fail(path, message or f"The '{path}' must be an array")
            return None
        return found.value

    def array_of_type(self, path: str, expected: TypeSpec, *, message: Optional[str] = None) -> "Validator":
        """Every element must match *expected*; failures land on ``path.<i>``."""
        items = self._require_array(path, message)
        if items is None:
            return self

        for index, item in enumerate(items):
            if not matches_type(item, expected):
                item_path = paths.join(path, index)
                self._fail(item_path, message or f"The '{item_path}' must be of type: {type_name(expected)}")
        return self

    def passes_each(
        self,
        path: str,
        callback: Callable[[Any, int], Any],
        *,
        message: Optional[str] = None,
    ) -> "Validator":
        """Run ``callback(item, index)`` for every element.

        ``True`` passes; a string is recorded verbatim at ``path.<i>``;
        anything else records a generic message.
        """
        items = self._require_array(path, message)
        if items is None:
            return self

        for index, item in enumerate(items):
            result = callback(item, index)
            if result is not True:
                text = result if isinstance(result, str) else (
                    message or f"Item at index {index} failed validation"
                )
                self._fail(paths.join(path, index), text)
        return self

    # ------------------------------------------------------------------ #
    # Custom predicates                                                  #
    # ------------------------------------------------------------------ #

    def satisfies(self, path: str, predicate: Callable[[Any], Any], message: Optional[str] = None) -> "Validator":
        found = self._require(path)
        if found and predicate(found.value) is not True:
            self._fail(path, message or f"The '{path}' failed validation")
        return self

    def is_valid(
        self,
        path: str,
        check: Callable[[Any], Any],
        *,
        message: Optional[str] = None,
    ) -> "Validator":
        """``check(value)`` returns ``True`` or an error message.

        A caller-supplied *message* takes precedence over the returned one.
        """
        found = self._require(path)
        if not found:
            return self

        result = check(found.value)
        if result is not True:
            if message is None:
                message = result if isinstance(result, str) else f"The '{path}' failed validation"
            self._fail(path, message)
        return self

    def schema(self, tree: Mapping[str, Any], path: str = "") -> "Validator":
        """Apply a declarative rule tree rooted at *path* (``""`` = document)."""
        _schema.evaluate(self, tree, path)
        return self

    # ------------------------------------------------------------------ #
    # Outcome                                                            #
    # ------------------------------------------------------------------ #

    def passes(self) -> bool:
        """Finalise (idempotent) and report whether no rule failed."""
        if not self._validated:
            self._validated = True
            log.info(
                "Validation finalised: %s",
                "passed" if not self._errors else f"{len(self._errors)} path(s) failed",
            )
        return not self._errors

    def fails(self) -> bool:
        return not self.passes()

    def errors(self) -> dict[str, list[str]]:
        """Finalise if needed and return a copy of the error map."""
        self.passes()
        return self._errors.as_dict()

    def validate(self) -> Any:
        """Return the document, or raise :class:`ValidationError`."""
        if self.fails():
            raise ValidationError(self._errors.as_dict())
        return self.data

    def valid_data(self) -> Any:
        return self.data if self.passes() else None

    def report(self, *, heading_level: int = 2) -> str:
        """Markdown rendering of :meth:`errors`."""
        return to_markdown_report(self.errors(), heading_level=heading_level)

    def __repr__(self) -> str:
        state = "validated" if self._validated else "pending"
        return f"<Validator {state} errors={len(self._errors)}>"
