"""Enumeration and flag set declarations shared between schemas."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import TypeVar

from .key_definitions import DefinitionError

_HANDLES = itertools.count(1)

_TableT = TypeVar("_TableT", bound="_NickTable")


class _NickTable(ABC):
    """Ordered nick-to-integer table identified by instance, not by content.

    Two tables with the same id and values are still distinct declarations;
    callers share a declaration by reusing the same instance.
    """

    kind = "nick table"

    def __init__(self, id: str, values: Mapping[str, int] | Sequence[str]) -> None:
        if not isinstance(id, str) or not id:
            raise DefinitionError(f"{self.kind} id must be a non-empty string.")
        self.id = id
        self.values: Mapping[str, int] = MappingProxyType(self._assign_values(values))
        self.handle = next(_HANDLES)

    @property
    def nicks(self) -> tuple[str, ...]:
        return tuple(self.values)

    def _assign_values(self, values: Mapping[str, int] | Sequence[str]) -> dict[str, int]:
        if isinstance(values, Mapping):
            return dict(values)
        if isinstance(values, str) or not isinstance(values, Sequence):
            raise DefinitionError(f"{self.kind} '{self.id}' values must be a list or a mapping.")
        return {nick: self._value_for_position(index) for index, nick in enumerate(values)}

    @abstractmethod
    def _value_for_position(self, index: int) -> int:
        """Value assigned to the nick at ``index`` of a list declaration."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, values={dict(self.values)!r})"


class Enumeration(_NickTable):
    """Enumeration whose list form numbers nicks 0, 1, 2, ..."""

    kind = "enum"

    def _value_for_position(self, index: int) -> int:
        return index


class FlagSet(_NickTable):
    """Flag set whose list form assigns one bit per nick."""

    kind = "flags"

    def _value_for_position(self, index: int) -> int:
        return 2**index


def unique_by_handle(tables: Iterable[_TableT]) -> tuple[_TableT, ...]:
    """Drop repeated instances while keeping first-seen order."""
    seen: dict[int, _TableT] = {}
    for table in tables:
        seen.setdefault(table.handle, table)
    return tuple(seen.values())
