"""Style resolution and rendering."""

from cardbg.style.protocols import RecordingStyleSink, StyleSink
from cardbg.style.render import StylesheetRenderer, StylesheetSink
from cardbg.style.resolver import StyleResolver
from cardbg.style.targets import (
    ALL_TARGET,
    CATEGORY_TARGETS,
    EVERY_TARGET,
    ResolvedState,
    StyleTarget,
    resolve,
    resolve_state,
)

__all__ = [
    "ALL_TARGET",
    "CATEGORY_TARGETS",
    "EVERY_TARGET",
    "RecordingStyleSink",
    "ResolvedState",
    "StyleResolver",
    "StyleSink",
    "StyleTarget",
    "StylesheetRenderer",
    "StylesheetSink",
    "resolve",
    "resolve_state",
]
