"""Identifier convention shared by the row extractor and shape metadata."""

from __future__ import annotations


def column_name(identifier: str) -> str:
    """Convert a camelCase attribute name to its snake_case column name.

    Every uppercase letter is replaced by `_` plus its lowercase form, so
    `numRequired` becomes `num_required` and `ID` becomes `_i_d`. No
    pluralization or acronym handling is applied.
    """

    parts: list[str] = []
    for ch in identifier:
        if ch.isupper():
            parts.append("_")
            parts.append(ch.lower())
        else:
            parts.append(ch)
    return "".join(parts)
