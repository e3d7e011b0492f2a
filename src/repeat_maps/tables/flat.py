"""Flat-list front end for writing many modes compactly.

A group lists a mode name followed by actions, each trailed by its triggers::

    ("yank-popping", action("yank_pop"), "M-y", ":exit-only", action("yank"), "C-y")

Plain strings are triggers. Every other token is an action and opens a new
entry: non-string objects, ``ActionName`` values built with ``action(...)``,
and ``Enum`` members, including members of ``str``-mixin enums.
``":exit-only"`` applies to the next entry only.
"""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Iterable, List, Optional, Sequence

from .errors import FlatSpecError
from .models import EntrySpec, ModeSpec

EXIT_ONLY = ":exit-only"


class ActionName(str):
    """String action identifier that the flat parser will not read as a trigger."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"action({str.__repr__(self)})"


def action(name: str) -> ActionName:
    return ActionName(name)


def _is_action(token: object) -> bool:
    return isinstance(token, (ActionName, Enum)) or not isinstance(token, str)


def parse_flat_mode(group: Sequence[object]) -> ModeSpec:
    if not group or not isinstance(group[0], str) or _is_action(group[0]):
        raise FlatSpecError(
            f"Flat group {tuple(group)!r} does not start with a mode name"
        )

    name = group[0]
    entries: List[EntrySpec] = []
    current: Optional[Hashable] = None
    triggers: List[str] = []
    exit_only = False
    pending_exit = False

    def close() -> None:
        if current is not None:
            entries.append(EntrySpec(current, tuple(triggers), exit_only=exit_only))

    for position, token in enumerate(group[1:], start=1):
        if token == EXIT_ONLY and not _is_action(token):
            if pending_exit:
                raise FlatSpecError(
                    f"Mode '{name}': repeated '{EXIT_ONLY}' at position {position}",
                    mode_name=name,
                )
            pending_exit = True
        elif _is_action(token):
            close()
            current, triggers = token, []
            exit_only, pending_exit = pending_exit, False
        elif pending_exit:
            raise FlatSpecError(
                f"Mode '{name}': '{EXIT_ONLY}' must be followed by an action, "
                f"got trigger {token!r}",
                mode_name=name,
            )
        elif current is None:
            raise FlatSpecError(
                f"Mode '{name}': trigger {token!r} appears before any action",
                mode_name=name,
            )
        else:
            triggers.append(str(token))

    if pending_exit:
        raise FlatSpecError(
            f"Mode '{name}': trailing '{EXIT_ONLY}' has no action", mode_name=name
        )
    close()
    return ModeSpec(name, tuple(entries))


def parse_flat_modes(groups: Iterable[Sequence[object]]) -> tuple[ModeSpec, ...]:
    """Convert flat groups to ``ModeSpec``s, preserving group and token order.

    Empty modes or entries are passed through untouched; ``build`` rejects them.
    """

    return tuple(parse_flat_mode(group) for group in groups)


__all__ = [
    "EXIT_ONLY",
    "ActionName",
    "action",
    "parse_flat_mode",
    "parse_flat_modes",
]
