# json_rules/card.py
from __future__ import annotations
from typing import Mapping, Sequence

__all__ = ["to_markdown_report"]

def _format_messages(messages: Sequence[str]) -> str:
    """Return a bulleted Markdown list (no surrounding blank lines)."""
    return "\n".join(f"- {m}" for m in messages)

def to_markdown_report(errors: Mapping[str, Sequence[str]], *, heading_level: int = 2) -> str:
    """
    Convert an error map into a Markdown report.

    Parameters
    ----------
    errors : Mapping[str, Sequence[str]]
        Path -> messages, as returned by ``Validator.errors()``.
    heading_level : int, default 2
        Markdown heading level for each path (##, ###, …).

    Returns
    -------
    str
        Markdown document; ``All checks passed.`` when *errors* is empty.
    """
    if not errors:
        return "All checks passed."
    h = "#" * heading_level
    parts: list[str] = []
    for path, messages in errors.items():
        parts.append(f"{h} `{path or '<root>'}`")
        parts.append(_format_messages(messages))
        parts.append("")             # blank line after each section
    return "\n".join(parts).rstrip()
