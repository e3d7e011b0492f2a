"""Validation errors raised while building dispatch tables."""

from __future__ import annotations

from typing import Optional


class TableBuildError(ValueError):
    """Base class for input rejected by the table builder."""

    def __init__(
        self,
        message: str,
        *,
        mode_name: Optional[str] = None,
        entry_index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.mode_name = mode_name
        self.entry_index = entry_index


class EmptyModeName(TableBuildError):
    """A mode specification has an empty or non-string name."""

    def __init__(self, position: int, name: object = "") -> None:
        super().__init__(
            f"Mode at position {position} has no usable name: {name!r}", mode_name=""
        )
        self.position = position
        self.name = name


class DuplicateModeName(TableBuildError):
    """Two mode specifications share a name."""

    def __init__(self, mode_name: str, first: int, second: int) -> None:
        super().__init__(
            f"Mode '{mode_name}' is defined at positions {first} and {second}",
            mode_name=mode_name,
        )
        self.positions = (first, second)


class EmptyEntryList(TableBuildError):
    """A mode specification has no entries."""

    def __init__(self, mode_name: str) -> None:
        super().__init__(f"Mode '{mode_name}' has no entries", mode_name=mode_name)


class EmptyTriggerList(TableBuildError):
    """An entry binds its action to no triggers."""

    def __init__(self, mode_name: str, entry_index: int, action: object) -> None:
        super().__init__(
            f"Entry {entry_index} ({action!r}) of mode '{mode_name}' has no triggers",
            mode_name=mode_name,
            entry_index=entry_index,
        )
        self.action = action


class FlatSpecError(TableBuildError):
    """A flat mode group could not be turned into a mode specification."""


__all__ = [
    "TableBuildError",
    "EmptyModeName",
    "DuplicateModeName",
    "EmptyEntryList",
    "EmptyTriggerList",
    "FlatSpecError",
]
