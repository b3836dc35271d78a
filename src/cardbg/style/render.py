"""Stylesheet rendering for active style targets."""

from __future__ import annotations

import logging
from collections.abc import Set
from pathlib import Path
from typing import Final, Optional, cast

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from cardbg.common.enums import ALL_CATEGORIES, RuleState
from cardbg.constants import STYLE_ELEMENT_ID
from cardbg.style.targets import StyleTarget
from cardbg.utils.file import ensure_directory_exists

logger: Final = logging.getLogger(__name__)

TEMPLATES_DIR: Final = Path(__file__).parent / "templates"
STYLESHEET_TEMPLATE: Final = "card_background.css.j2"


def ordered_targets(targets: Set[StyleTarget]) -> list[StyleTarget]:
    """Wildcard first, then categories in settings-panel order."""
    order = {category: index for index, category in enumerate(ALL_CATEGORIES)}
    return sorted(
        targets,
        key=lambda t: -1 if t.category is None else order[t.category],
    )


class StylesheetRenderer:
    """Renders the background-removal rules with Jinja2.

    Each active target gets a rule block per enabled node state. A
    category target scopes its selectors with the category class, the
    wildcard target matches every node content.
    """

    template: Template

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        states: Optional[Set[RuleState]] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            templates_dir: Directory containing the stylesheet template
            states: Node states to emit rules for (default: all of them)
        """
        self.states = frozenset(RuleState) if states is None else frozenset(states)
        self.env = Environment(
            loader=FileSystemLoader(templates_dir or TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
        )
        self.template = self.env.get_template(STYLESHEET_TEMPLATE)

    def render(self, targets: Set[StyleTarget]) -> str:
        """Return the stylesheet text for ``targets`` ("" for none)."""
        rules = [
            {
                "label": "ALL" if target.is_wildcard else target.selector_class,
                "scope": f".canvas-node-content{target.selector_class}",
            }
            for target in ordered_targets(targets)
        ]
        if not rules:
            return ""
        return cast(
            str,
            self.template.render(
                rules=rules,
                normal=RuleState.NORMAL in self.states,
                focus=RuleState.FOCUS in self.states,
                hover=RuleState.HOVER in self.states,
            ),
        )


class StylesheetSink:
    """StyleSink backed by the text of a single <style> element.

    The host injects ``as_style_element()`` into the document head. When an
    output path is given the stylesheet is also written there after every
    change. A failed file write is logged; ``css`` is still updated.
    """

    def __init__(
        self,
        renderer: Optional[StylesheetRenderer] = None,
        output_path: Optional[Path] = None,
        element_id: str = STYLE_ELEMENT_ID,
    ) -> None:
        self.renderer = renderer or StylesheetRenderer()
        self.output_path = output_path
        self.element_id = element_id
        self.css = ""

    def deactivate_all(self) -> None:
        self._set_css("")

    def activate(self, targets: Set[StyleTarget]) -> None:
        self._set_css(self.renderer.render(targets))

    def as_style_element(self) -> str:
        return f'<style type="text/css" id="{self.element_id}">{self.css}</style>'

    def _set_css(self, css: str) -> None:
        self.css = css
        if self.output_path is None:
            return
        try:
            ensure_directory_exists(self.output_path.parent)
            self.output_path.write_text(css, encoding="utf-8")
        except OSError:
            logger.exception("Failed to write stylesheet to %s", self.output_path)
            return
        logger.debug("Stylesheet written to %s", self.output_path)
