from app.core.enums import OptionSource
from app.services.catalog_resolver import CatalogOption, is_other, option_names, resolve


def test_pinned_then_remote_then_custom():
    options = resolve("Biceps", ["Curl", "Hammer Curl"], ["21s"], pinned_name="Hammer Curl")
    assert option_names(options) == ["Hammer Curl", "Curl", "21s"]


def test_other_is_always_empty():
    assert resolve("Other", ["Curl"], ["21s"], pinned_name="Curl") == []
    assert resolve("other", ["Curl"], [], None) == []
    assert is_other(" OTHER ")


def test_unset_muscle_group_is_empty():
    assert resolve("", ["Curl"], ["21s"]) == []
    assert resolve(None, ["Curl"], ["21s"]) == []


def test_duplicates_removed_first_occurrence_wins():
    options = resolve("Chest", ["Bench Press", "Dips", "Bench Press"], ["Dips", "Svend Press", "Svend Press"])
    assert option_names(options) == ["Bench Press", "Dips", "Svend Press"]
    assert [o.source for o in options] == [OptionSource.CATALOG, OptionSource.CATALOG, OptionSource.CUSTOM]


def test_empty_and_missing_names_dropped():
    options = resolve("Chest", ["", None, "Dips"], [None, ""], pinned_name="")
    assert option_names(options) == ["Dips"]


def test_failed_lookups_count_as_empty():
    assert option_names(resolve("Chest", None, ["Svend Press"], "Bench Press")) == ["Bench Press", "Svend Press"]
    assert option_names(resolve("Chest", None, None, "Bench Press")) == ["Bench Press"]
    assert resolve("Chest", None, None) == []


def test_pinned_provenance():
    missing = resolve("Biceps", ["Curl"], ["21s"], pinned_name="Zottman Curl")
    assert missing[0] == CatalogOption(name="Zottman Curl", source=OptionSource.PINNED)

    from_catalog = resolve("Biceps", ["Curl"], ["21s"], pinned_name="Curl")
    assert from_catalog == [
        CatalogOption(name="Curl", source=OptionSource.CATALOG),
        CatalogOption(name="21s", source=OptionSource.CUSTOM),
    ]

    from_custom = resolve("Biceps", ["Curl"], ["21s"], pinned_name="21s")
    assert from_custom[0] == CatalogOption(name="21s", source=OptionSource.CUSTOM)
    assert option_names(from_custom) == ["21s", "Curl"]


def test_deterministic_for_identical_inputs():
    args = ("Back", ["Row", "Pulldown"], ["Row", "Meadows Row"], "Pulldown")
    assert resolve(*args) == resolve(*args)


def test_accepts_generators():
    options = resolve("Chest", (n for n in ["Dips"]), iter(["Dips", "Push-up"]))
    assert option_names(options) == ["Dips", "Push-up"]
