"""Single-pass construction of dispatch tables and the re-entry index."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Hashable, Iterable, Optional, Sequence

from repeat_maps.runtime.telemetry import record_event, span

from .errors import DuplicateModeName, EmptyEntryList, EmptyModeName, EmptyTriggerList
from .models import BuildResult, DispatchTable, ModeSpec, ReentryIndex


def validate(mode_specs: Sequence[ModeSpec]) -> None:
    """Raise the first structural problem found in ``mode_specs``, in input order."""

    seen: Dict[str, int] = {}
    for position, spec in enumerate(mode_specs):
        if not isinstance(spec.name, str) or not spec.name.strip():
            raise EmptyModeName(position, spec.name)
        if spec.name in seen:
            raise DuplicateModeName(spec.name, seen[spec.name], position)
        seen[spec.name] = position

        if not spec.entries:
            raise EmptyEntryList(spec.name)
        for index, entry in enumerate(spec.entries):
            if not entry.triggers:
                raise EmptyTriggerList(spec.name, index, entry.action)


def _bind_mode(spec: ModeSpec, reentry: Dict[Hashable, str]) -> DispatchTable:
    bindings: Dict[str, Hashable] = {}
    for entry in spec.entries:
        for trigger in entry.triggers:
            bindings[trigger] = entry.action
        if not entry.exit_only:
            reentry[entry.action] = spec.name
    return DispatchTable(spec.name, bindings)


def build(
    mode_specs: Iterable[ModeSpec], *, logger_name: Optional[str] = None
) -> BuildResult:
    """Build one dispatch table per mode plus the action re-entry index.

    Modes, entries and triggers are processed in input order and every tie
    resolves to the last one processed: a trigger bound twice in one mode
    keeps the later action, and an action claimed for re-entry by several
    non-exit-only entries belongs to the last claimant. The whole input is
    validated before any table is built, so either every mode is returned
    or a ``TableBuildError`` is raised.
    """

    specs = tuple(mode_specs)
    with span(
        "tables::build",
        logger_name=logger_name,
        component="tables",
        metadata={"mode_count": len(specs)},
    ) as handle:
        validate(specs)

        tables: Dict[str, DispatchTable] = {}
        reentry: Dict[Hashable, str] = {}
        for spec in specs:
            table = _bind_mode(spec, reentry)
            tables[spec.name] = table
            record_event(
                "tables.mode_built",
                level="debug",
                data={"mode": spec.name, "bindings": len(table)},
                logger_name=logger_name,
            )

        result = BuildResult(
            tables=MappingProxyType(tables), reentry=ReentryIndex(reentry)
        )
        stats = result.stats()
        handle.add_metadata("binding_count", stats.binding_count)
        record_event(
            "tables.built",
            data={
                "modes": stats.mode_count,
                "bindings": stats.binding_count,
                "reentry": stats.reentry_count,
            },
            logger_name=logger_name,
        )
        return result


__all__ = ["build", "validate"]
