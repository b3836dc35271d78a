from __future__ import annotations

from enum import Enum


class EmbedCategory(Enum):
    """Kinds of embedded content a canvas node can hold.

    The value is the stable identifier used for persistence and equality;
    it is also the CSS class the host puts on the node content element.
    """

    IMAGE = "image-embed"
    CANVAS = "canvas-embed"
    MARKDOWN = "markdown-embed"

    @property
    def identifier(self) -> str:
        return self.value

    @property
    def display(self) -> str:
        """Human readable label shown in the settings panel."""
        return _DISPLAY_LABELS[self]

    @property
    def style_target(self) -> str:
        """Class name addressing this category's node content."""
        return self.value

    @classmethod
    def from_identifier(cls, identifier: str) -> EmbedCategory:
        """Look up a category by its persisted identifier.

        Raises:
            ValueError: If the identifier names no known category
        """
        try:
            return cls(identifier)
        except ValueError:
            raise ValueError(f"Unknown embed category: {identifier!r}") from None


_DISPLAY_LABELS: dict[EmbedCategory, str] = {
    EmbedCategory.IMAGE: "Image",
    EmbedCategory.CANVAS: "Canvas",
    EmbedCategory.MARKDOWN: "Markdown",
}

# Order of settings fields and stylesheet rules
ALL_CATEGORIES: tuple[EmbedCategory, ...] = (
    EmbedCategory.IMAGE,
    EmbedCategory.CANVAS,
    EmbedCategory.MARKDOWN,
)


class RuleState(Enum):
    """Interaction states of a canvas node that get their own rule block."""

    NORMAL = "Normal"  # neither focused nor hovered
    FOCUS = "Focus"
    HOVER = "Hover"
