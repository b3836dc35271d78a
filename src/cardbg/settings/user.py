"""Persisted plugin configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    computed_field,
    field_validator,
)

from cardbg.common.enums import EmbedCategory

logger: Final = logging.getLogger(__name__)


class EmbedTarget(BaseModel):
    """One selected category as stored in the data file.

    Only ``type`` is read back; ``display`` is written for the benefit of
    anyone reading the file and ignored on input.
    """

    model_config = ConfigDict(frozen=True)

    type: EmbedCategory

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display(self) -> str:
        return self.type.display

    @classmethod
    def of(cls, category: EmbedCategory) -> EmbedTarget:
        return cls(type=category)


def _default_targets() -> list[EmbedTarget]:
    return [EmbedTarget.of(EmbedCategory.IMAGE), EmbedTarget.of(EmbedCategory.CANVAS)]


class PluginSettings(BaseModel):
    """Configuration for the card background remover.

    Missing keys fall back to their defaults, so validating a stored mapping
    is the same as overlaying it onto the defaults key by key. A stored
    ``targets`` list replaces the default list wholesale.

    Examples:
        settings = PluginSettings.merged({"applyAllEmbed": True})
        settings.apply_all_embed  # True
        settings.categories       # (IMAGE, CANVAS)
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    enabled: bool = Field(
        True,
        validation_alias=AliasChoices("isEnabled", "enabled"),
        serialization_alias="isEnabled",
        description="Master switch for the whole feature",
    )
    apply_all_embed: bool = Field(
        False,
        alias="applyAllEmbed",
        description="Treat every embed category regardless of targets",
    )
    targets: list[EmbedTarget] = Field(
        default_factory=_default_targets,
        description="Explicitly selected categories, used when apply_all_embed is off",
    )

    # ---- validators ----
    @field_validator("targets")
    @classmethod
    def drop_duplicate_targets(cls, v: list[EmbedTarget]) -> list[EmbedTarget]:
        """Keep the first occurrence of each category."""
        seen: set[EmbedCategory] = set()
        unique: list[EmbedTarget] = []
        for target in v:
            if target.type not in seen:
                seen.add(target.type)
                unique.append(target)
        return unique

    # ---- convenience methods ----
    @property
    def categories(self) -> tuple[EmbedCategory, ...]:
        """Selected categories in selection order."""
        return tuple(target.type for target in self.targets)

    def has_target(self, category: EmbedCategory) -> bool:
        return self.index_of(category) >= 0

    def index_of(self, category: EmbedCategory) -> int:
        """Position of ``category`` in targets, matched by identifier, or -1."""
        for index, target in enumerate(self.targets):
            if target.type.identifier == category.identifier:
                return index
        return -1

    def to_data(self) -> dict[str, Any]:
        """Return the JSON-compatible mapping written to the data file."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def defaults(cls) -> PluginSettings:
        return cls()

    @classmethod
    def merged(cls, stored: Mapping[str, Any] | None) -> PluginSettings:
        """Overlay stored data onto the defaults key by key.

        Each stored key is validated on its own. A key whose value does not
        validate is logged and left at its default; the other stored keys
        still win.

        Args:
            stored: Mapping read from the data file, or None when nothing is stored

        Returns:
            Validated settings
        """
        if not stored:
            return cls.defaults()

        accepted: dict[str, Any] = {}
        for key, value in stored.items():
            try:
                cls.model_validate({key: value})
            except ValidationError as err:
                logger.warning("Ignoring invalid stored value for %r, using default:\n%s", key, err)
                continue
            accepted[key] = value
        return cls.model_validate(accepted)
