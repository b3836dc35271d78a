"""Mapping from settings to the style targets that must be active.

Every settings value falls in exactly one of three states:

- DISABLED: the master switch is off, nothing is styled
- ALL_ACTIVE: apply-to-all is on, the single wildcard target is active
- SUBSET_ACTIVE: exactly the targets of the selected categories are active
  (possibly none, which still differs from DISABLED only in intent)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cardbg.common.enums import ALL_CATEGORIES, EmbedCategory
from cardbg.settings.user import PluginSettings


@dataclass(frozen=True)
class StyleTarget:
    """Symbolic name of one treatment rule.

    ``category`` is None for the wildcard covering every category.
    """

    name: str
    category: Optional[EmbedCategory] = None

    @property
    def is_wildcard(self) -> bool:
        return self.category is None

    @property
    def selector_class(self) -> str:
        """Class suffix appended to the node content selector ("" for all)."""
        return "" if self.category is None else f".{self.category.style_target}"

    def expand(self) -> tuple[EmbedCategory, ...]:
        """Categories this target covers."""
        return ALL_CATEGORIES if self.category is None else (self.category,)

    @classmethod
    def for_category(cls, category: EmbedCategory) -> StyleTarget:
        return cls(name=category.style_target, category=category)


ALL_TARGET = StyleTarget(name="ALL")
CATEGORY_TARGETS: frozenset[StyleTarget] = frozenset(
    StyleTarget.for_category(category) for category in ALL_CATEGORIES
)
# Everything clear() has to remove
EVERY_TARGET: frozenset[StyleTarget] = CATEGORY_TARGETS | {ALL_TARGET}


class ResolvedState(Enum):
    DISABLED = "disabled"
    ALL_ACTIVE = "all"
    SUBSET_ACTIVE = "subset"


def resolve_state(settings: PluginSettings) -> ResolvedState:
    if not settings.enabled:
        return ResolvedState.DISABLED
    if settings.apply_all_embed:
        return ResolvedState.ALL_ACTIVE
    return ResolvedState.SUBSET_ACTIVE


def resolve(settings: PluginSettings) -> frozenset[StyleTarget]:
    """Return the style targets that must be active for ``settings``."""
    state = resolve_state(settings)
    if state is ResolvedState.DISABLED:
        return frozenset()
    if state is ResolvedState.ALL_ACTIVE:
        return frozenset({ALL_TARGET})
    return frozenset(StyleTarget.for_category(category) for category in settings.categories)
