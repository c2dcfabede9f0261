"""Static helpers for compound-name escaping, splitting and joining.

A data string masks two characters inside each component: the escape
character itself and the delimiter. The escape character always consumes
exactly the next character, whatever it is, so ``\\x`` reads as ``x``. A
dangling escape character at the very end of the input has nothing to
consume and is dropped.
"""

from __future__ import annotations

from collections.abc import Iterable

from compound_names.constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER


def mask_component(raw: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Return ``raw`` with the escape character and ``delimiter`` masked.

    The escape character is masked first so the markers introduced for the
    delimiter are not escaped a second time.

    Example:
        >>> mask_component("a.b")
        'a\\\\.b'
    """
    masked = raw.replace(ESCAPE_CHARACTER, ESCAPE_CHARACTER + ESCAPE_CHARACTER)
    return masked.replace(delimiter, ESCAPE_CHARACTER + delimiter)


def unmask_component(escaped: str) -> str:
    """Remove masking from a single component.

    Each escape character is dropped and the following character is copied
    literally. A trailing escape character with no successor is dropped.
    """
    chars: list[str] = []
    escaped_next = False
    for ch in escaped:
        if escaped_next:
            chars.append(ch)
            escaped_next = False
        elif ch == ESCAPE_CHARACTER:
            escaped_next = True
        else:
            chars.append(ch)
    return "".join(chars)


def split_components(source: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split a data string into raw components.

    End of input always closes the current component, so a string without
    delimiters yields one component and ``""`` yields ``[""]``.

    Example:
        >>> split_components("oss.cs.fau.de")
        ['oss', 'cs', 'fau', 'de']
        >>> split_components("a\\\\.b.c")
        ['a.b', 'c']
    """
    components: list[str] = []
    current: list[str] = []
    escaped_next = False
    for ch in source:
        if escaped_next:
            current.append(ch)
            escaped_next = False
        elif ch == ESCAPE_CHARACTER:
            escaped_next = True
        elif ch == delimiter:
            components.append("".join(current))
            current = []
        else:
            current.append(ch)
    components.append("".join(current))
    return components


def join_components(
    components: Iterable[str], delimiter: str = DEFAULT_DELIMITER
) -> str:
    """Mask each component and join them into a data string.

    Inverse of :func:`split_components` for any non-empty sequence.
    """
    return delimiter.join(mask_component(c, delimiter) for c in components)


__all__ = [
    "mask_component",
    "unmask_component",
    "split_components",
    "join_components",
]
