"""
formats.py - leaf format predicates.

Each ``is_*`` predicate takes the resolved value plus the path it came from
and returns ``True`` or an error message, which is exactly the contract of
:meth:`json_rules.Validator.is_valid`.
"""

from __future__ import annotations

import datetime as _dt
import ipaddress
from typing import Any, Optional, Union
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email

__all__ = ["is_email", "is_url", "is_ip", "is_strict_date", "IP_VERSIONS"]

Verdict = Union[bool, str]

IP_VERSIONS = (None, 4, 6)


def is_email(value: Any, path: str) -> Verdict:
    if not isinstance(value, str):
        return f"{path} must be a string"
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return f"{path} must be a valid email address"
    return True


def is_url(value: Any, path: str) -> Verdict:
    if not isinstance(value, str):
        return f"{path} must be a string"
    try:
        parts = urlsplit(value)
    except ValueError:
        return f"{path} must be a valid URL"
    if parts.scheme and parts.netloc and not any(c.isspace() for c in value):
        return True
    if parts.scheme in ("mailto", "urn", "news") and parts.path:
        return True
    return f"{path} must be a valid URL"


def is_ip(value: Any, path: str, version: Optional[int] = None) -> Verdict:
    if not isinstance(value, str):
        return f"{path} must be a string"
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return f"{path} must be a valid IP address"
    if version is not None and address.version != version:
        return f"{path} must be a valid IP address"
    return True


def is_strict_date(value: str, fmt: str) -> bool:
    """Parse *value* with *fmt* and require an identical re-rendering.

    The round trip rejects inputs that ``strptime`` accepts leniently, such as
    ``2024-1-5`` for ``%Y-%m-%d``.
    """
    try:
        parsed = _dt.datetime.strptime(value, fmt)
    except ValueError:
        return False
    return parsed.strftime(fmt) == value
