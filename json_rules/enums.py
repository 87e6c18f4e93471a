"""
enums.py - named allow-lists for ``Validator.is_in``
===================================================

An enumeration is described explicitly by the caller instead of being
discovered by introspection.  A description is an ordered list of variants,
each either

* a bare symbolic name - ``"PENDING"``, or
* a ``(name, value)`` pair - ``("PENDING", "pending")``.

A description is either *backed* (every variant carries a scalar value, and
the values are what a document may contain) or *bare* (the names are what a
document may contain).  The first variant decides which.

Descriptions can be passed to ``is_in`` directly or registered under their
name so that ``is_in(path, "Status")`` works.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type, Union

from .errors import UnknownEnumError

__all__ = [
    "EnumSpec",
    "register_enum",
    "unregister_enum",
    "get_enum",
    "expand",
]

log = logging.getLogger(__name__)

Variant = Union[str, Tuple[str, Any]]

_SCALARS = (str, int, float, bool)


class EnumSpec:
    """An explicit, ordered description of an enumeration."""

    def __init__(self, name: str, variants: Iterable[Variant]):
        self.name = name
        self.variants: List[Variant] = list(variants)
        if not self.variants:
            raise ValueError(f"Enumeration '{name}' has no variants")
        self.backed = isinstance(self.variants[0], tuple)
        for variant in self.variants:
            if isinstance(variant, tuple) != self.backed:
                raise ValueError(
                    f"Enumeration '{name}' mixes bare and valued variants"
                )

    @classmethod
    def from_enum(cls, enum_cls: Type[enum.Enum], by: Optional[str] = None) -> "EnumSpec":
        """Describe a Python ``Enum``.

        With ``by=None`` members whose values are JSON scalars give a backed
        description and anything else falls back to member names.  Values made
        by ``enum.auto()`` are plain ints and cannot be told apart from
        explicit ones, so such enums are backed by ``1, 2, ...``; pass
        ``by="name"`` to admit the member names instead.  ``by="value"``
        forces a backed description.
        """
        if by not in (None, "name", "value"):
            raise ValueError(f"by must be 'name' or 'value', got {by!r}")
        members = list(enum_cls)
        if by == "name":
            return cls(enum_cls.__name__, [m.name for m in members])
        if by == "value" or (members and isinstance(members[0].value, _SCALARS)):
            return cls(enum_cls.__name__, [(m.name, m.value) for m in members])
        return cls(enum_cls.__name__, [m.name for m in members])

    def names(self) -> List[str]:
        return [v[0] if isinstance(v, tuple) else v for v in self.variants]

    def values(self) -> List[Any]:
        """The representations a document value is compared against."""
        if self.backed:
            return [v[1] for v in self.variants]
        return self.names()

    def __repr__(self) -> str:
        return f"EnumSpec({self.name!r}, {self.variants!r})"


# --------------------------------------------------------------------------- #
# Registry                                                                    #
# --------------------------------------------------------------------------- #

_REGISTRY: Dict[str, EnumSpec] = {}


def register_enum(spec: Union[EnumSpec, Type[enum.Enum]]) -> EnumSpec:
    """Make *spec* addressable by name; returns the stored description."""
    if isinstance(spec, type) and issubclass(spec, enum.Enum):
        spec = EnumSpec.from_enum(spec)
    if spec.name in _REGISTRY:
        log.debug("Replacing registered enumeration %r", spec.name)
    _REGISTRY[spec.name] = spec
    return spec


def unregister_enum(name: str) -> None:
    _REGISTRY.pop(name, None)


def get_enum(name: str) -> EnumSpec:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownEnumError(f"No enumeration registered as '{name}'") from None


# --------------------------------------------------------------------------- #
# Expansion                                                                   #
# --------------------------------------------------------------------------- #

AllowList = Union[Sequence[Any], set, frozenset, EnumSpec, str, Type[enum.Enum]]


def expand(allowed: AllowList) -> List[Any]:
    """Return the admissible values described by *allowed*."""
    if isinstance(allowed, EnumSpec):
        return allowed.values()
    if isinstance(allowed, str):
        return get_enum(allowed).values()
    if isinstance(allowed, type) and issubclass(allowed, enum.Enum):
        return EnumSpec.from_enum(allowed).values()
    if isinstance(allowed, (list, tuple, set, frozenset)):
        return list(allowed)
    raise TypeError(f"Unsupported allow-list: {allowed!r}")
