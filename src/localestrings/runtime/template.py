"""Token substitution for ``@token`` and ``@token:default`` references.

Template grammar:
    template  := (literal | reference)*
    reference := "@" token [":" default]

The token runs from just after "@" to the next unescaped ":" or "@" (or
the end of the string). A default runs from after ":" to the next
unescaped "@" (or the end). "@@" and "::" are escapes for a literal "@"
and ":" and never delimit anything.

Examples (table: greet -> "howdy"):
    "@greet:hi there"              -> "howdy"
    "@missing:hi there"            -> "hi there"
    "@greet: @name:friend"         -> "howdy friend"
    "@@literal::value"             -> "@literal:value"
    "mail me @@ home"              -> "mail me @ home"

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable

from localestrings.constants import DEFAULT_SEPARATOR, TOKEN_MARKER

__all__ = ["TemplateLookup", "resolve_template"]

type TemplateLookup = Callable[[str, str | None], str]
"""Resolves (token, default-or-None) to display text."""

# Private-use code points stand in for escaped delimiters while scanning.
_ESCAPED_MARKER = "\ue000"
_ESCAPED_SEPARATOR = "\ue001"

_ESCAPES = (
    (TOKEN_MARKER * 2, _ESCAPED_MARKER),
    (DEFAULT_SEPARATOR * 2, _ESCAPED_SEPARATOR),
)


def _escape(text: str) -> str:
    for sequence, sentinel in _ESCAPES:
        text = text.replace(sequence, sentinel)
    return text


def _restore(text: str) -> str:
    return text.replace(_ESCAPED_MARKER, TOKEN_MARKER).replace(
        _ESCAPED_SEPARATOR, DEFAULT_SEPARATOR
    )


def _split_trailing_spaces(text: str) -> tuple[str, str]:
    stripped = text.rstrip(" ")
    return stripped, text[len(stripped):]


def resolve_template(text: str, lookup: TemplateLookup) -> str:
    """Expand every reference in a template string.

    Each reference is resolved through ``lookup(token, default)``, where
    default is None when the reference has no ":" part. Trailing spaces of
    a reference (after its default, or after a bare token) are kept as a
    literal separator following the resolved value.

    Args:
        text: Template text
        lookup: Resolver, normally LocaleContext.get_locale_string with
            warnings disabled

    Returns:
        Text with every reference replaced and escapes restored. Strings
        without any "@" are returned unchanged.
    """
    if TOKEN_MARKER not in text:
        return text

    work = _escape(text)
    parts: list[str] = []
    pos = 0
    while True:
        start = work.find(TOKEN_MARKER, pos)
        if start < 0:
            parts.append(_restore(work[pos:]))
            break
        parts.append(_restore(work[pos:start]))

        end = work.find(TOKEN_MARKER, start + 1)
        if end < 0:
            end = len(work)
        body = work[start + 1 : end]
        pos = end

        token, separator, default = body.partition(DEFAULT_SEPARATOR)
        if separator:
            default, spacing = _split_trailing_spaces(default)
            token = token.rstrip(" ")
            value = lookup(_restore(token), _restore(default))
        else:
            token, spacing = _split_trailing_spaces(token)
            if not token:
                # A lone "@" is literal text
                parts.append(TOKEN_MARKER + spacing)
                continue
            value = lookup(_restore(token), None)
        parts.append(value)
        parts.append(spacing)

    return "".join(parts)
