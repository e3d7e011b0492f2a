"""Mode specifications, the table builder and the built-in catalogue."""

from .models import (
    BuildResult,
    BuildStats,
    DispatchTable,
    EntrySpec,
    ModeSpec,
    ReentryIndex,
)
from .errors import (
    DuplicateModeName,
    EmptyEntryList,
    EmptyModeName,
    EmptyTriggerList,
    FlatSpecError,
    TableBuildError,
)
from .builder import build, validate
from .flat import EXIT_ONLY, ActionName, action, parse_flat_mode, parse_flat_modes
from .defaults import DEFAULT_MODES, load_default_modes

__all__ = [
    "EntrySpec",
    "ModeSpec",
    "DispatchTable",
    "ReentryIndex",
    "BuildResult",
    "BuildStats",
    "TableBuildError",
    "EmptyModeName",
    "DuplicateModeName",
    "EmptyEntryList",
    "EmptyTriggerList",
    "FlatSpecError",
    "build",
    "validate",
    "EXIT_ONLY",
    "ActionName",
    "action",
    "parse_flat_mode",
    "parse_flat_modes",
    "DEFAULT_MODES",
    "load_default_modes",
]
