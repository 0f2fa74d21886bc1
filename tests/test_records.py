from __future__ import annotations

from core.records import as_text, first_not_none, first_present, get_path, is_blank


def test_first_present_skips_blank_values_in_order() -> None:
    record = {"a": "", "b": None, "c": 0, "d": "value", "e": "later"}

    assert first_present(record, ("a", "b", "c", "d", "e")) == "value"


def test_first_present_keeps_empty_containers() -> None:
    record = {"levels": [], "fallback": "Master"}

    assert first_present(record, ("levels", "fallback")) == []


def test_first_present_follows_nested_paths() -> None:
    record = {"detail": {"nimi": {"fi": "Tietojenkäsittely"}}}

    assert first_present(record, (("detail", "nimi", "en"), ("detail", "nimi", "fi"))) == "Tietojenkäsittely"


def test_first_present_on_non_mapping_is_none() -> None:
    assert first_present(["not", "a", "dict"], ("title",)) is None
    assert get_path({"detail": "flat"}, ("detail", "nimi")) is None


def test_first_not_none_keeps_zero() -> None:
    assert first_not_none({"id": 0, "scholarship_id": 7}, ("id", "scholarship_id")) == 0


def test_is_blank() -> None:
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(False)
    assert is_blank(0)
    assert not is_blank(" ")
    assert not is_blank({})
    assert not is_blank(True)


def test_as_text_canonical_forms() -> None:
    assert as_text(None) == ""
    assert as_text("42") == "42"
    assert as_text(42) == "42"
    assert as_text(42.0) == "42"
    assert as_text(2.5) == "2.5"
    assert as_text(True) == "true"


def test_as_text_joins_list_items_with_commas() -> None:
    assert as_text(["A", "B"]) == "A,B"
    assert as_text([1, None, 2.0]) == "1,,2"
    assert as_text([]) == ""
