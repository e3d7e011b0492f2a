"""Built-in mode catalogue covering the usual repeatable commands."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .flat import action, parse_flat_modes
from .models import ModeSpec

DEFAULT_MODES: tuple[ModeSpec, ...] = parse_flat_modes(
    (
        (
            "buffer-switch",
            action("buffer.previous"), "C-x <left>", "<left>",
            action("buffer.next"), "C-x <right>", "<right>",
        ),
        (
            "window-resize",
            action("window.enlarge"), "C-x ^", "^",
            action("window.shrink"), "C-x -", "-",
            action("window.enlarge_horizontally"), "C-x }", "}",
            action("window.shrink_horizontally"), "C-x {", "{",
            ":exit-only",
            action("window.balance"), "C-x +", "+",
        ),
        (
            "other-window",
            action("window.other"), "C-x o", "o",
            action("window.delete"), "0",
            ":exit-only",
            action("window.delete_others"), "1",
        ),
        (
            "undo",
            action("edit.undo"), "C-x u", "u",
            action("edit.redo"), "C-?", "r",
        ),
        (
            "scroll",
            action("view.page_down"), "C-v", "v",
            action("view.page_up"), "M-v", "V",
            action("view.recenter"), "l",
        ),
        (
            "yank-only",
            action("edit.yank"), "C-y", "y",
            ":exit-only",
            action("edit.yank_pop"), "M-y",
        ),
        (
            "yank-popping",
            action("edit.yank_pop"), "M-y", "y",
            ":exit-only",
            action("edit.yank"), "C-y",
        ),
    )
)


def load_default_modes(
    *,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    overrides: Mapping[str, ModeSpec] | None = None,
    extra: Iterable[ModeSpec] = (),
) -> tuple[ModeSpec, ...]:
    """Select built-in modes in catalogue order, then append ``extra``.

    ``overrides`` swaps a catalogue mode for a caller-supplied one with the
    same name, keeping its position. Overriding a mode that is not in the
    catalogue, or that the filters leave out, raises ``ValueError``. The
    result feeds straight into ``build``.
    """

    allowed = _build_filters(include, exclude)
    replacements = dict(overrides or {})
    for name, spec in replacements.items():
        if spec.name != name:
            raise ValueError(f"Override for mode '{name}' is named '{spec.name}'")

    selected = [spec for spec in DEFAULT_MODES if _selected(spec.name, allowed)]
    unmatched = set(replacements).difference(spec.name for spec in selected)
    if unmatched:
        raise ValueError(
            f"Overrides {sorted(unmatched)} match no selected default mode"
        )

    selected = [replacements.get(spec.name, spec) for spec in selected]
    selected.extend(extra)
    return tuple(selected)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(name: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and name not in include:
        return False
    return name not in exclude


__all__ = ["DEFAULT_MODES", "load_default_modes"]
