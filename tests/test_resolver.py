from itertools import chain, combinations

import pytest

from cardbg.common.enums import ALL_CATEGORIES, EmbedCategory
from cardbg.settings.model import SettingsModel
from cardbg.settings.user import EmbedTarget, PluginSettings
from cardbg.store.protocols import MemoryStore
from cardbg.style.protocols import RecordingStyleSink
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

SUBSETS = list(
    chain.from_iterable(combinations(ALL_CATEGORIES, n) for n in range(len(ALL_CATEGORIES) + 1))
)


def make_settings(
    enabled: bool, apply_all: bool, categories: tuple[EmbedCategory, ...]
) -> PluginSettings:
    return PluginSettings(
        enabled=enabled,
        apply_all_embed=apply_all,
        targets=[EmbedTarget.of(c) for c in categories],
    )


@pytest.mark.parametrize("categories", SUBSETS)
@pytest.mark.parametrize("apply_all", [False, True])
@pytest.mark.parametrize("enabled", [False, True])
def test_resolve_is_total_and_exclusive(
    enabled: bool, apply_all: bool, categories: tuple[EmbedCategory, ...]
) -> None:
    settings = make_settings(enabled, apply_all, categories)
    targets = resolve(settings)
    state = resolve_state(settings)

    if not enabled:
        assert state is ResolvedState.DISABLED
        assert targets == frozenset()
    elif apply_all:
        assert state is ResolvedState.ALL_ACTIVE
        assert targets == frozenset({ALL_TARGET})
    else:
        assert state is ResolvedState.SUBSET_ACTIVE
        assert targets == frozenset(StyleTarget.for_category(c) for c in categories)
        assert ALL_TARGET not in targets


def test_empty_subset_differs_from_apply_all() -> None:
    assert resolve(make_settings(True, False, ())) == frozenset()
    assert resolve(make_settings(True, True, ())) == frozenset({ALL_TARGET})


def test_wildcard_covers_the_same_categories_as_the_union() -> None:
    union = {c for target in CATEGORY_TARGETS for c in target.expand()}
    assert set(ALL_TARGET.expand()) == union == set(EmbedCategory)
    assert ALL_TARGET.is_wildcard
    assert not any(target.is_wildcard for target in CATEGORY_TARGETS)


def test_every_target_is_the_closed_set() -> None:
    assert EVERY_TARGET == CATEGORY_TARGETS | {ALL_TARGET}
    assert len(EVERY_TARGET) == 4


def test_category_target_selector() -> None:
    target = StyleTarget.for_category(EmbedCategory.MARKDOWN)
    assert target.name == "markdown-embed"
    assert target.selector_class == ".markdown-embed"
    assert ALL_TARGET.selector_class == ""


class TestStyleResolver:
    def test_apply_clears_before_activating(self, sink: RecordingStyleSink) -> None:
        resolver = StyleResolver(sink)
        resolver.apply(PluginSettings.defaults())

        assert [name for name, _ in sink.calls] == ["deactivate_all", "activate"]
        assert sink.active == {
            StyleTarget.for_category(EmbedCategory.IMAGE),
            StyleTarget.for_category(EmbedCategory.CANVAS),
        }

    def test_switching_subset_leaves_no_residue(self, sink: RecordingStyleSink) -> None:
        resolver = StyleResolver(sink)
        resolver.apply(make_settings(True, False, (EmbedCategory.IMAGE,)))
        resolver.apply(make_settings(True, False, (EmbedCategory.MARKDOWN,)))

        assert not sink.is_active(StyleTarget.for_category(EmbedCategory.IMAGE))
        assert sink.is_active(StyleTarget.for_category(EmbedCategory.MARKDOWN))
        assert resolver.active == sink.active

    def test_disabling_removes_everything(self, sink: RecordingStyleSink) -> None:
        resolver = StyleResolver(sink)
        resolver.apply(make_settings(True, True, ()))
        assert resolver.apply(make_settings(False, True, ())) == frozenset()
        assert sink.active == set()

    def test_clear(self, sink: RecordingStyleSink) -> None:
        resolver = StyleResolver(sink)
        resolver.apply(PluginSettings.defaults())
        resolver.clear()
        assert sink.active == set()
        assert resolver.active == frozenset()

    def test_mutation_reapplies_through_listener(self) -> None:
        sink = RecordingStyleSink()
        model = SettingsModel(MemoryStore({"targets": [{"type": "image-embed"}]}))
        model.add_listener(StyleResolver(sink))
        model.load()

        model.set_target_selected(EmbedCategory.MARKDOWN, True)
        model.set_target_selected(EmbedCategory.IMAGE, False)

        assert sink.active == {StyleTarget.for_category(EmbedCategory.MARKDOWN)}

    def test_removing_last_target_styles_nothing(self, model: SettingsModel, sink: RecordingStyleSink) -> None:
        model.set_target_selected(EmbedCategory.CANVAS, False)
        model.set_target_selected(EmbedCategory.IMAGE, False)

        assert model.settings.categories == ()
        assert resolve(model.settings) == frozenset()
        assert sink.active == set()
