"""Raw string store: identifier -> text mapping merged from JSON.

A StringTable holds no fallback logic. Tables are layered by LocaleContext,
which merges several JSON sources into one table per locale; within a table
later merges overwrite earlier values for the same identifier.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

from localestrings.diagnostics import ErrorTemplate, MalformedSourceError
from localestrings.localization.types import JSONSource, StringId

__all__ = ["StringTable"]

logger = logging.getLogger(__name__)


class StringTable:
    """Ordered mapping from string identifier to localized text.

    Identifiers keep first-insertion order; re-loading an identifier replaces
    its value without moving it.

    Example:
        >>> table = StringTable()
        >>> table.load('{"item.cow": "cow", "item.cow.plural": "cows"}')
        >>> table.get_string("item.cow.plural")
        'cows'
        >>> table.load('{"item.cow": "Cow"}')
        >>> table.get_string("item.cow")
        'Cow'
        >>> table.num_strings()
        2
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        """Initialize empty string table."""
        self._data: dict[StringId, str] = {}

    def load(self, source: JSONSource, source_path: str = "") -> None:
        """Parse a flat JSON object and merge it into the table.

        The whole document is validated before anything is merged, so a
        failed call leaves the table exactly as it was.

        Args:
            source: JSON text of one string-table file
            source_path: File the text came from (diagnostics only)

        Raises:
            MalformedSourceError: If the text is not valid JSON, is not an
                object, or maps an identifier to a non-string value
        """
        where = source_path or "<string>"
        try:
            parsed = json.loads(source)
        except json.JSONDecodeError as e:
            raise MalformedSourceError(
                ErrorTemplate.malformed_source(where, str(e)), source_path=source_path
            ) from e

        if not isinstance(parsed, dict):
            raise MalformedSourceError(
                ErrorTemplate.malformed_source(
                    where, f"expected a JSON object, got {type(parsed).__name__}"
                ),
                source_path=source_path,
            )
        for key, value in parsed.items():
            if not isinstance(value, str):
                raise MalformedSourceError(
                    ErrorTemplate.malformed_source(
                        where, f"value of '{key}' is {type(value).__name__}, not a string"
                    ),
                    source_path=source_path,
                )

        self._data.update(parsed)
        logger.debug("Merged %d strings from %s", len(parsed), where)

    def get_string(self, string_id: StringId) -> str | None:
        """Return the text for an identifier, or None if absent."""
        return self._data.get(string_id)

    def set_string(self, string_id: StringId, value: str) -> None:
        """Set (or replace) the text for an identifier."""
        self._data[string_id] = value

    def num_strings(self) -> int:
        """Number of identifiers in the table."""
        return len(self._data)

    def ids(self) -> tuple[StringId, ...]:
        """All identifiers in insertion order."""
        return tuple(self._data)

    def __contains__(self, string_id: object) -> bool:
        """Check if identifier exists (supports 'in' operator)."""
        return string_id in self._data

    def __len__(self) -> int:
        """Number of identifiers in the table."""
        return len(self._data)

    def __iter__(self) -> Iterator[StringId]:
        """Iterate over identifiers in insertion order."""
        return iter(self._data)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"StringTable(strings={len(self._data)})"
