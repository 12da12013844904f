"""Template expansion over trees of string leaves.

Walks a tree made of mappings, sequences, strings and scalars and runs
every string leaf through a transform (normally resolve_template bound to
a LocaleContext):

- populate_object_strings mutates mutable containers in place
- translate_object_strings builds a new tree and leaves the input untouched

Mapping keys are never transformed. Tuples are rebuilt by translation but
cannot be changed in place, so population only descends into them.

Recursion is bounded by a DepthGuard, and a container met again while it is
still on the current path raises CyclicStructureError instead of recursing
forever.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping, MutableSequence, Sequence

from localestrings.constants import MAX_DEPTH
from localestrings.core.depth_guard import DepthGuard
from localestrings.diagnostics import CyclicStructureError, ErrorTemplate

__all__ = ["populate_object_strings", "translate_object_strings"]

type StringTransform = Callable[[str], str]


def _is_container(value: object) -> bool:
    return isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
    )


class _Walker:
    """Shared recursion state for one traversal."""

    __slots__ = ("_active", "_guard", "_shallow", "_transform")

    def __init__(self, transform: StringTransform, shallow: bool, max_depth: int) -> None:
        self._transform = transform
        self._shallow = shallow
        self._guard = DepthGuard(max_depth=max_depth)
        self._active: set[int] = set()

    def _enter(self, container: object) -> None:
        marker = id(container)
        if marker in self._active:
            raise CyclicStructureError(ErrorTemplate.cyclic_structure(type(container).__name__))
        self._active.add(marker)

    def populate(self, container: object) -> None:
        self._enter(container)
        try:
            with self._guard:
                if isinstance(container, Mapping):
                    for key, value in container.items():
                        if isinstance(value, str):
                            if isinstance(container, MutableMapping):
                                container[key] = self._transform(value)
                        elif not self._shallow and _is_container(value):
                            self.populate(value)
                else:
                    for index, value in enumerate(container):
                        if isinstance(value, str):
                            if isinstance(container, MutableSequence):
                                container[index] = self._transform(value)
                        elif not self._shallow and _is_container(value):
                            self.populate(value)
        finally:
            self._active.discard(id(container))

    def translate(self, value: object) -> object:
        if isinstance(value, str):
            return self._transform(value)
        if not _is_container(value):
            return value

        self._enter(value)
        try:
            with self._guard:
                if isinstance(value, Mapping):
                    return {
                        key: self._translate_child(child) for key, child in value.items()
                    }
                items = [self._translate_child(child) for child in value]
                return tuple(items) if isinstance(value, tuple) else items
        finally:
            self._active.discard(id(value))

    def _translate_child(self, child: object) -> object:
        if isinstance(child, str):
            return self._transform(child)
        if self._shallow:
            return child
        return self.translate(child)


def populate_object_strings(
    obj: MutableMapping[str, object] | MutableSequence[object],
    transform: StringTransform,
    *,
    shallow: bool = False,
    max_depth: int = MAX_DEPTH,
) -> None:
    """Replace every string leaf of ``obj`` in place.

    Args:
        obj: Mapping or sequence to rewrite
        transform: Applied to each string value
        shallow: If True, nested containers are left alone
        max_depth: Maximum container nesting

    Raises:
        TypeError: If obj is not a mapping or sequence
        CyclicStructureError: If a container contains itself
        DepthLimitExceededError: If nesting exceeds max_depth
    """
    if not _is_container(obj):
        msg = f"Expected a mapping or sequence, got {type(obj).__name__}"
        raise TypeError(msg)
    _Walker(transform, shallow, max_depth).populate(obj)


def translate_object_strings[T](
    obj: T,
    transform: StringTransform,
    *,
    shallow: bool = False,
    max_depth: int = MAX_DEPTH,
) -> T:
    """Return a copy of ``obj`` with every string leaf transformed.

    Mappings become dicts, lists stay lists, tuples stay tuples. Scalars
    are shared with the input. In shallow mode nested containers are
    shared with the input as well.

    Args:
        obj: Tree to translate
        transform: Applied to each string value
        shallow: If True, nested containers are copied by reference
        max_depth: Maximum container nesting

    Raises:
        CyclicStructureError: If a container contains itself
        DepthLimitExceededError: If nesting exceeds max_depth
    """
    return _Walker(transform, shallow, max_depth).translate(obj)  # type: ignore[return-value]
