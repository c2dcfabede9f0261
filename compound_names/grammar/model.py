"""Immutable compound Name model and friendly parse/format wrappers.

A :class:`Name` is a frozen Pydantic model holding a delimiter and a tuple
of raw components. Every mutator returns a new instance; the receiver is
never altered.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from compound_names.constants import DEFAULT_DELIMITER, HASH_BITS, HASH_MULTIPLIER
from compound_names.contracts import (
    ensure,
    require,
    require_component,
    require_delimiter,
    require_index,
    require_source,
)
from compound_names.exceptions import InvalidArgumentError
from compound_names.grammar.support import join_components, split_components
from compound_names.log import logger

_HASH_MASK = (1 << HASH_BITS) - 1
_HASH_SIGN = 1 << (HASH_BITS - 1)


class Name(BaseModel):
    """Ordered sequence of raw components joined by a single delimiter.

    Parameters
    ----------
    components : Iterable[str]
        Raw (unmasked) components, in order. May be empty.
    delimiter : str
        Single character other than the escape character (default ``.``).

    Examples
    --------
    >>> Name(["oss", "cs"]).append("fau").as_string()
    'oss.cs.fau'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    components: tuple[str, ...] = ()
    delimiter: str = DEFAULT_DELIMITER

    def __init__(
        self,
        components: Iterable[str] = (),
        delimiter: str = DEFAULT_DELIMITER,
    ) -> None:
        require_delimiter(delimiter)
        require(components is not None, "Components cannot be None")
        # a bare string would silently split into characters
        require(
            not isinstance(components, str),
            "Components must be a sequence of strings, not a single string",
        )
        values = tuple(require_component(c) for c in components)
        super().__init__(components=values, delimiter=delimiter)

    @field_validator("delimiter")
    @classmethod
    def _validate_delimiter(cls, value: str) -> str:
        try:
            return require_delimiter(value)
        except InvalidArgumentError as exc:
            raise ValueError(str(exc)) from exc

    # -- construction -----------------------------------------------------
    @classmethod
    def parse(cls, source: str, delimiter: str = DEFAULT_DELIMITER) -> Name:
        """Parse a data string; ``""`` yields one empty component."""
        require_source(source)
        require_delimiter(delimiter)
        components = split_components(source, delimiter)
        logger.debug("Parsed %r into %d component(s)", source, len(components))
        return cls(components, delimiter)

    def _derive(self, components: Iterable[str]) -> Name:
        return type(self)(components, self.delimiter)

    # -- read access ------------------------------------------------------
    def count(self) -> int:
        return len(self.components)

    def get_no_components(self) -> int:
        return len(self.components)

    def get_delimiter_character(self) -> str:
        return self.delimiter

    def get_component(self, i: int) -> str:
        require_index(i, self.count() - 1)
        return self.components[i]

    def is_empty(self) -> bool:
        return self.count() == 0

    # -- functional updates -----------------------------------------------
    def set_component(self, i: int, c: str) -> Name:
        require_index(i, self.count() - 1)
        require_component(c)
        values = list(self.components)
        values[i] = c
        result = self._derive(values)
        ensure(result.get_component(i) == c, "set_component did not store the value")
        return result

    def insert(self, i: int, c: str) -> Name:
        require_index(i, self.count())
        require_component(c)
        values = list(self.components)
        values.insert(i, c)
        result = self._derive(values)
        ensure(
            result.count() == self.count() + 1,
            "insert did not increase the number of components by one",
        )
        return result

    def append(self, c: str) -> Name:
        return self.insert(self.count(), c)

    def remove(self, i: int) -> Name:
        require_index(i, self.count() - 1)
        values = list(self.components)
        del values[i]
        result = self._derive(values)
        ensure(
            result.count() == self.count() - 1,
            "remove did not decrease the number of components by one",
        )
        return result

    def concat(self, other: Name) -> Name:
        """Append all of ``other``'s raw components; the delimiter stays this one's."""
        require(other is not None, "Cannot concatenate None")
        require(isinstance(other, Name), "Can only concatenate another Name")
        result = self._derive(self.components + other.components)
        ensure(
            result.count() == self.count() + other.count(),
            "concat did not produce the combined number of components",
        )
        return result

    def clone(self) -> Name:
        result = self.model_copy()
        ensure(self.is_equal(result), "clone is not equal to its source")
        return result

    # -- representations --------------------------------------------------
    def as_string(self, delimiter: str | None = None) -> str:
        """Join raw components for display; not guaranteed to parse back."""
        if delimiter is None:
            delimiter = self.delimiter
        require_delimiter(delimiter)
        return delimiter.join(self.components)

    def as_data_string(self) -> str:
        """Join masked components with this name's delimiter (round-trippable)."""
        return join_components(self.components, self.delimiter)

    # -- equality ---------------------------------------------------------
    def is_equal(self, other: Any) -> bool:
        if not isinstance(other, Name):
            return False
        return (
            self.delimiter == other.delimiter
            and self.components == other.components
        )

    def hash_code(self) -> int:
        """Polynomial rolling hash (x31) of the data string, as signed 32-bit."""
        value = 0
        for ch in self.as_data_string():
            value = (value * HASH_MULTIPLIER + ord(ch)) & _HASH_MASK
        return value - (1 << HASH_BITS) if value & _HASH_SIGN else value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return self.hash_code()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self):
        return iter(self.components)

    def __str__(self) -> str:
        return self.as_data_string()


def parse_name(source: str, delimiter: str = DEFAULT_DELIMITER) -> Name:
    return Name.parse(source, delimiter)


def format_name(name: Name) -> str:
    require(isinstance(name, Name), "Can only format a Name")
    return name.as_data_string()


__all__ = ["Name", "parse_name", "format_name"]
