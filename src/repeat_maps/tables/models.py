"""Dataclasses describing mode specifications and the tables built from them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Hashable, Iterable, Iterator, NamedTuple, Optional


def _normalize_triggers(triggers: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(triggers, str):
        triggers = (triggers,)
    return tuple(dict.fromkeys(triggers))


@dataclass(frozen=True, slots=True)
class EntrySpec:
    """One action and the triggers bound to it inside a mode.

    ``exit_only`` entries are reachable from the mode's table but never make
    the action re-enter the mode when it is invoked from outside.
    """

    action: Hashable
    triggers: tuple[str, ...] = ()
    exit_only: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "triggers", _normalize_triggers(self.triggers))


@dataclass(frozen=True, slots=True)
class ModeSpec:
    """Named mode made of ordered entries.

    Structural checks (empty names, empty entry lists) are left to
    ``build`` so a whole input is accepted or rejected at once.
    """

    name: str
    entries: tuple[EntrySpec, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(frozen=True, slots=True, eq=False)
class DispatchTable(Mapping):
    """Read-only trigger -> action mapping for one mode."""

    mode_name: str
    bindings: Mapping[str, Hashable]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    def __getitem__(self, trigger: str) -> Hashable:
        return self.bindings[trigger]

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __repr__(self) -> str:
        return f"DispatchTable({self.mode_name!r}, {dict(self.bindings)!r})"

    def lookup(
        self, trigger: str, default: Optional[Hashable] = None
    ) -> Optional[Hashable]:
        return self.bindings.get(trigger, default)

    def triggers(self) -> tuple[str, ...]:
        return tuple(self.bindings)

    def actions(self) -> tuple[Hashable, ...]:
        return tuple(dict.fromkeys(self.bindings.values()))


@dataclass(frozen=True, slots=True, eq=False)
class ReentryIndex(Mapping):
    """Read-only action -> mode mapping; each action owns at most one mode."""

    owners: Mapping[Hashable, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "owners", MappingProxyType(dict(self.owners)))

    def __getitem__(self, action: Hashable) -> str:
        return self.owners[action]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.owners)

    def __len__(self) -> int:
        return len(self.owners)

    def __repr__(self) -> str:
        return f"ReentryIndex({dict(self.owners)!r})"

    def mode_for(self, action: Hashable) -> Optional[str]:
        return self.owners.get(action)

    def actions_for(self, mode_name: str) -> tuple[Hashable, ...]:
        return tuple(
            action for action, owner in self.owners.items() if owner == mode_name
        )


@dataclass(frozen=True, slots=True)
class BuildStats:
    """Lightweight snapshot describing a build result."""

    mode_count: int
    binding_count: int
    action_count: int
    reentry_count: int
    modes: tuple[str, ...]


class BuildResult(NamedTuple):
    """Tables keyed by mode name plus the re-entry index."""

    tables: Mapping[str, DispatchTable]
    reentry: ReentryIndex

    def table_for(self, mode_name: str) -> DispatchTable:
        try:
            return self.tables[mode_name]
        except KeyError as exc:
            raise KeyError(f"Mode '{mode_name}' was not built") from exc

    def stats(self) -> BuildStats:
        actions: dict[Hashable, None] = {}
        for table in self.tables.values():
            actions.update(dict.fromkeys(table.values()))
        return BuildStats(
            mode_count=len(self.tables),
            binding_count=sum(len(table) for table in self.tables.values()),
            action_count=len(actions),
            reentry_count=len(self.reentry),
            modes=tuple(self.tables),
        )


__all__ = [
    "EntrySpec",
    "ModeSpec",
    "DispatchTable",
    "ReentryIndex",
    "BuildStats",
    "BuildResult",
]
