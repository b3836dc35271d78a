"""Shared enumerations."""

from cardbg.common.enums import ALL_CATEGORIES, EmbedCategory, RuleState

__all__ = ["ALL_CATEGORIES", "EmbedCategory", "RuleState"]
