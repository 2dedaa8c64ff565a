from itertools import permutations
from pathlib import Path

from locale_merge.core.errors import IssueType
from locale_merge.core.models import TranslationFragment
from locale_merge.features.merging import merge_translations


def frag(namespace: str, content: dict, locale: str = "en", name: str | None = None) -> TranslationFragment:
    path = Path("/src") / (name or namespace.replace(".", "/")) / "locale" / f"{locale}.json"
    return TranslationFragment(path=path, locale=locale, namespace=namespace, content=content)


def test_every_locale_gets_a_tree_even_without_fragments():
    result = merge_translations([], ["en", "es", "fr"])

    assert result.ok
    assert result.as_dicts() == {"en": {}, "es": {}, "fr": {}}


def test_content_lands_at_namespace_path():
    content = {"label": "Click", "plural": {"one": "item", "other": "items"}}
    result = merge_translations([frag("components.button", content)], ["en"])

    assert result.ok
    assert result.as_dicts()["en"] == {"components": {"button": content}}


def test_sibling_namespaces_share_branches():
    result = merge_translations(
        [
            frag("components.button", {"label": "Click"}),
            frag("components.layout.header", {"title": "Home"}),
            frag("hooks", {"loading": "Loading"}),
        ],
        ["en"],
    )

    assert result.ok
    assert result.as_dicts()["en"] == {
        "components": {
            "button": {"label": "Click"},
            "layout": {"header": {"title": "Home"}},
        },
        "hooks": {"loading": "Loading"},
    }


def test_locales_do_not_interfere():
    result = merge_translations(
        [frag("components.button", {"label": "Click"}, "en"),
         frag("components.button", {"label": "Clic"}, "es")],
        ["en", "es"],
    )

    assert result.ok
    assert result.as_dicts()["es"] == {"components": {"button": {"label": "Clic"}}}


def test_result_does_not_depend_on_order():
    fragments = [
        frag("components.button", {"label": "Click"}),
        frag("components.card", {"title": "Card"}),
        frag("components.common.error", {"retry": "Retry"}),
    ]
    expected = merge_translations(fragments, ["en"]).as_dicts()

    for order in permutations(fragments):
        assert merge_translations(list(order), ["en"]).as_dicts() == expected


def test_duplicate_namespace_is_key_conflict_naming_both_files():
    first = frag("components.button", {"label": "A"}, name="components/button")
    second = frag("components.button", {"label": "B"}, name="other/button")

    result = merge_translations([second, first], ["en"])

    assert [i.type for i in result.issues] == [IssueType.KEY_CONFLICT]
    msg = result.issues[0].message
    assert '"components.button"' in msg and '"en"' in msg
    assert str(first.path) in msg and str(second.path) in msg
    # first claimant (by path) is kept
    assert result.as_dicts()["en"]["components"]["button"] == {"label": "A"}


def test_namespace_through_a_leaf_is_prefix_collision():
    leaf = frag("components", {"title": "All"})
    deeper = frag("components.button", {"label": "Click"})

    for order in ([leaf, deeper], [deeper, leaf]):
        result = merge_translations(order, ["en"])
        assert [i.type for i in result.issues] == [IssueType.NAMESPACE_COLLISION]
        msg = result.issues[0].message
        assert str(leaf.path) in msg and str(deeper.path) in msg


def test_issues_are_collected_across_locales():
    result = merge_translations(
        [
            frag("a", {"x": "1"}, "en", name="one/a"),
            frag("a", {"x": "2"}, "en", name="two/a"),
            frag("a", {"x": "1"}, "es", name="one/a"),
            frag("a", {"x": "2"}, "es", name="two/a"),
        ],
        ["en", "es"],
    )

    assert [(i.type, i.locale) for i in result.issues] == [
        (IssueType.KEY_CONFLICT, "en"),
        (IssueType.KEY_CONFLICT, "es"),
    ]
