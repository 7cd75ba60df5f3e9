"""Utility functions for wamp-util."""

from collections.abc import Mapping
from collections.abc import MutableMapping
from typing import Any

from .exceptions import InvalidArgumentError


def defaults(
    base: MutableMapping[str, Any] | None = None,
    *sources: Mapping[str, Any] | None,
    recursive: bool = False,
) -> MutableMapping[str, Any]:
    """Fill keys missing from base with values from sources, left to right.

    Existing keys in base are never overwritten, and the first source to
    provide a key wins over later ones. With recursive=True, a key holding a
    mapping in both base and source is completed the same way at every depth.
    Lists and other sequences are not mapping-like and are left untouched.

    This mutates and returns base. The caller keeps ownership of it. Pass
    None (or a new empty dict) as base to get a fresh merged dict instead.

    Args:
        base: Mapping to fill in (default: a new empty dict)
        *sources: Mappings of default values; falsy entries are skipped
        recursive: Whether to complete nested mappings (default: False)

    Returns:
        The same base object, mutated

    Raises:
        InvalidArgumentError: If a source is truthy but not a mapping

    Examples:
        >>> defaults({"a": 1}, {"a": 2, "b": 2}, {"b": 3, "c": 3})
        {'a': 1, 'b': 2, 'c': 3}

        >>> defaults({"a": {"k1": 1}}, {"a": {"k2": 2}})
        {'a': {'k1': 1}}

        >>> defaults({"a": {"k1": 1}}, {"a": {"k2": 2}}, recursive=True)
        {'a': {'k1': 1, 'k2': 2}}
    """
    if base is None:
        base = {}

    for index, source in enumerate(sources, start=1):
        if not source:
            continue

        if not isinstance(source, Mapping):
            raise InvalidArgumentError(index)

        for key, value in source.items():
            if key not in base:
                base[key] = value
            elif recursive and isinstance(base[key], MutableMapping) and isinstance(value, Mapping):
                # Both sides hold a mapping at this key - complete the nested one
                defaults(base[key], value, recursive=True)

    return base
