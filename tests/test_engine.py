"""Tests for search/engine.py — catalog queries over a store snapshot."""

import pytest

from carbon_mcp.catalog import (
    ArgumentError,
    CatalogStore,
    Component,
    ComponentNotFoundError,
    Icon,
    Pictogram,
    Prop,
    TokenCollection,
    TokensNotLoadedError,
)
from carbon_mcp.search import (
    MAX_SUGGESTIONS,
    get_component,
    get_component_props,
    get_tokens,
    list_components,
    search_components,
    search_icons,
    search_pictograms,
    suggest_components,
)


def _button() -> Component:
    return Component(
        name="Button",
        description="A clickable action control",
        category="Actions",
        import_path="@carbon/react/Button",
        props=[Prop(name="kind", type="string", required=False)],
    )


def _make_store(*components: Component, **collections) -> CatalogStore:
    store = CatalogStore()
    store.load(components=list(components), **collections)
    return store


@pytest.fixture()
def catalog():
    return _make_store(
        _button(),
        Component(
            name="Modal",
            description="Dialog shown above the page",
            when_to_use="Confirm a destructive action",
            examples=["Delete confirmation", "Form in a dialog"],
            category="Feedback",
        ),
        Component(
            name="TextInput",
            description="Single-line text field",
            when_to_use="Collect short text in a form",
            category="Form",
        ),
        Component(name="Tag"),
    )


class TestListComponents:
    def test_no_filters_returns_all_in_snapshot_order(self, catalog):
        result = list_components(catalog)
        assert [c["name"] for c in result["components"]] == [
            "Button",
            "Modal",
            "TextInput",
            "Tag",
        ]
        assert result["total"] == 4

    def test_row_shape(self, catalog):
        row = list_components(catalog)["components"][0]
        assert row == {
            "name": "Button",
            "description": "A clickable action control",
            "category": "Actions",
            "importPath": "@carbon/react/Button",
            "propsCount": 1,
        }

    def test_category_substring_case_insensitive(self, catalog):
        result = list_components(catalog, category="FORM")
        assert [c["name"] for c in result["components"]] == ["TextInput"]

    def test_component_without_category_excluded_by_category_filter(self, catalog):
        names = [c["name"] for c in list_components(catalog, category="a")["components"]]
        assert "Tag" not in names

    def test_search_matches_when_to_use(self, catalog):
        result = list_components(catalog, search="destructive")
        assert [c["name"] for c in result["components"]] == ["Modal"]

    def test_search_ignores_examples(self, catalog):
        assert list_components(catalog, search="confirmation")["total"] == 0

    def test_filters_are_anded(self, catalog):
        assert list_components(catalog, category="Form", search="dialog")["total"] == 0
        assert list_components(catalog, category="Feedback", search="dialog")["total"] == 1

    def test_empty_filters_are_ignored(self, catalog):
        assert list_components(catalog, category="", search="") == list_components(catalog)

    def test_empty_catalog(self):
        assert list_components(CatalogStore()) == {"components": [], "total": 0}


class TestSearchComponents:
    def test_name_match_scores_ten(self):
        store = _make_store(_button())
        result = search_components(store, "button")
        assert result["total"] == 1
        assert result["results"][0]["relevance"] == 10

    def test_description_match_scores_five(self):
        store = _make_store(_button())
        result = search_components(store, "clickable")
        assert result["results"][0]["relevance"] == 5

    def test_name_and_description_scores_fifteen(self):
        store = _make_store(
            Component(name="Toggle", description="Toggle between two states")
        )
        assert search_components(store, "toggle")["results"][0]["relevance"] == 15

    def test_multiple_examples_count_once(self):
        store = _make_store(
            Component(name="Grid", examples=["zebra rows", "zebra columns", "zebra"])
        )
        assert search_components(store, "zebra")["results"][0]["relevance"] == 2

    def test_example_only_match_included(self, catalog):
        result = search_components(catalog, "confirmation")
        assert [r["name"] for r in result["results"]] == ["Modal"]

    def test_results_not_sorted_by_relevance(self):
        store = _make_store(
            Component(name="Card", description="Holds a menu"),
            Component(name="Menu"),
        )
        result = search_components(store, "menu")
        assert [r["name"] for r in result["results"]] == ["Card", "Menu"]
        assert [r["relevance"] for r in result["results"]] == [5, 10]

    def test_category_filter(self, catalog):
        result = search_components(catalog, "a", category="feedback")
        assert [r["name"] for r in result["results"]] == ["Modal"]

    def test_query_echoed(self, catalog):
        assert search_components(catalog, "Button")["query"] == "Button"

    def test_missing_query_raises(self, catalog):
        with pytest.raises(ArgumentError):
            search_components(catalog, None)

    def test_non_string_query_raises(self, catalog):
        with pytest.raises(ArgumentError):
            search_components(catalog, 42)

    def test_empty_catalog_returns_no_results(self):
        assert search_components(CatalogStore(), "button")["total"] == 0


class TestGetComponent:
    @pytest.mark.parametrize("name", ["BUTTON", "Button", "button"])
    def test_case_insensitive(self, name):
        result = get_component(_make_store(_button()), name)
        assert result["name"] == "Button"
        assert result["resourceLink"] == "comp://Button"

    def test_descriptor_fields(self):
        result = get_component(_make_store(_button()), "button")
        assert result == {
            "resourceLink": "comp://Button",
            "name": "Button",
            "description": "A clickable action control",
            "category": "Actions",
            "importPath": "@carbon/react/Button",
        }

    def test_unknown_name_raises(self):
        with pytest.raises(ComponentNotFoundError, match="Nope"):
            get_component(_make_store(_button()), "Nope")

    def test_duplicate_names_last_wins(self):
        store = _make_store(
            Component(name="Button", description="old"),
            Component(name="button", description="new"),
        )
        result = get_component(store, "BUTTON")
        assert result["description"] == "new"
        assert result["resourceLink"] == "comp://button"


class TestGetComponentProps:
    def test_props_in_order(self):
        store = _make_store(
            Component(
                name="Select",
                props=[
                    Prop("value", "string"),
                    Prop("options", "Array", required=True),
                    Prop("size", "string", default_value="md"),
                ],
            )
        )
        result = get_component_props(store, "select")
        assert result["name"] == "Select"
        assert result["total"] == 3
        assert [p["name"] for p in result["props"]] == ["value", "options", "size"]
        assert result["props"][1]["required"] is True
        assert result["props"][2]["defaultValue"] == "md"

    def test_scenario_button_props(self):
        result = get_component_props(_make_store(_button()), "BUTTON")
        assert result["total"] == 1
        assert result["props"][0]["name"] == "kind"

    def test_unknown_name_raises(self):
        with pytest.raises(ComponentNotFoundError):
            get_component_props(CatalogStore(), "Button")

    def test_missing_name_raises_before_lookup(self):
        with pytest.raises(ArgumentError):
            get_component_props(CatalogStore(), None)


class TestSuggestComponents:
    def test_scenario_clickable_action(self):
        store = _make_store(_button())
        result = suggest_components(store, "I need a clickable action")
        assert result["intent"] == "I need a clickable action"
        [suggestion] = result["suggestions"]
        assert suggestion["name"] == "Button"
        # "clickable" and "action" occur in the description
        assert suggestion["score"] >= 2

    def test_short_words_ignored(self):
        store = _make_store(Component(name="Tab", description="to go on"))
        assert suggest_components(store, "to go on")["suggestions"] == []

    def test_duplicate_words_count_each_time(self):
        store = _make_store(Component(name="Slider", description="pick a range"))
        result = suggest_components(store, "range range range")
        assert result["suggestions"][0]["score"] == 3

    def test_missing_fields_not_rendered_as_text(self):
        store = _make_store(Component(name="Tag"))
        assert suggest_components(store, "none undefined")["suggestions"] == []

    def test_sorted_descending_stable(self):
        store = _make_store(
            Component(name="Alpha", description="form"),
            Component(name="Beta", description="form input"),
            Component(name="Gamma", description="form"),
        )
        result = suggest_components(store, "form input")
        assert [s["name"] for s in result["suggestions"]] == ["Beta", "Alpha", "Gamma"]
        assert [s["score"] for s in result["suggestions"]] == [2, 1, 1]

    def test_truncated_to_limit(self):
        components = [Component(name=f"Field{i}", description="form") for i in range(8)]
        result = suggest_components(_make_store(*components), "form")
        assert len(result["suggestions"]) == MAX_SUGGESTIONS
        assert result["suggestions"][0]["name"] == "Field0"

    def test_examples_contribute(self, catalog):
        result = suggest_components(catalog, "delete confirmation")
        assert result["suggestions"][0]["name"] == "Modal"
        assert result["suggestions"][0]["score"] == 2

    def test_missing_intent_raises(self, catalog):
        with pytest.raises(ArgumentError):
            suggest_components(catalog, None)


class TestGetTokens:
    def test_not_loaded_raises(self):
        with pytest.raises(TokensNotLoadedError):
            get_tokens(CatalogStore())

    def test_returns_loaded_structure(self):
        data = {"colors": {"blue60": "#0f62fe"}, "themes": {}, "custom": [1, 2]}
        store = CatalogStore()
        store.load(tokens=TokenCollection.from_dict(data))
        assert get_tokens(store) == data

    def test_empty_collection_is_loaded(self):
        store = CatalogStore()
        store.load(tokens=TokenCollection.from_dict({}))
        assert get_tokens(store) == {}


class TestSearchIcons:
    @pytest.fixture()
    def icons(self):
        return _make_store(
            icons=[
                Icon("Add", "@carbon/icons-react/Add", "Actions", 16),
                Icon("Add", "@carbon/icons-react/Add", "Actions", 24),
                Icon("AddAlt", "@carbon/icons-react/AddAlt", None, 24),
                Icon("Home", "@carbon/icons-react/Home", "Navigation", 24),
                Icon("Padding", "@carbon/icons-react/Padding", "Layout"),
            ]
        )

    def test_size_filter_exact(self, icons):
        result = search_icons(icons, "add", size=24)
        assert [(r["name"], r["size"]) for r in result["results"]] == [
            ("Add", 24),
            ("AddAlt", 24),
        ]

    def test_matches_name_substring(self, icons):
        result = search_icons(icons, "add")
        assert [r["name"] for r in result["results"]] == ["Add", "Add", "AddAlt", "Padding"]

    def test_matches_category(self, icons):
        result = search_icons(icons, "navig")
        assert [r["name"] for r in result["results"]] == ["Home"]

    def test_category_filter(self, icons):
        result = search_icons(icons, "add", category="actions")
        assert result["total"] == 2

    def test_zero_size_is_ignored(self, icons):
        assert search_icons(icons, "add", size=0) == search_icons(icons, "add")

    def test_empty_category_is_ignored(self, icons):
        result = search_icons(icons, "add", category="")
        assert result["total"] == 4
        assert "AddAlt" in [r["name"] for r in result["results"]]

    def test_invalid_size_raises(self, icons):
        with pytest.raises(ArgumentError):
            search_icons(icons, "add", size="24")

    def test_missing_query_raises(self, icons):
        with pytest.raises(ArgumentError):
            search_icons(icons, None)


class TestSearchPictograms:
    def test_name_or_category(self):
        store = _make_store(
            pictograms=[
                Pictogram("CloudServices", "@carbon/pictograms-react/CloudServices", "Cloud & Data"),
                Pictogram("Bank", "@carbon/pictograms-react/Bank", "Finance"),
                Pictogram("Datastore", "@carbon/pictograms-react/Datastore"),
            ]
        )
        result = search_pictograms(store, "data")
        assert [r["name"] for r in result["results"]] == ["CloudServices", "Datastore"]
        assert result["results"][0] == {
            "name": "CloudServices",
            "importPath": "@carbon/pictograms-react/CloudServices",
            "category": "Cloud & Data",
        }

    def test_category_filter(self):
        store = _make_store(
            pictograms=[
                Pictogram("Bank", "", "Finance"),
                Pictogram("BankVault", "", "Security"),
            ]
        )
        result = search_pictograms(store, "bank", category="secur")
        assert [r["name"] for r in result["results"]] == ["BankVault"]

    def test_empty_category_is_ignored(self):
        store = _make_store(
            pictograms=[
                Pictogram("Bank", "", "Finance"),
                Pictogram("BankNote", ""),
            ]
        )
        result = search_pictograms(store, "bank", category="")
        assert [r["name"] for r in result["results"]] == ["Bank", "BankNote"]
