import logging

from kwfilter import KeywordSelection, create, keywords_match, select_tests
from kwfilter.selection import KEYWORD_OP_PROPERTY, KEYWORDS_PROPERTY

DESCRIPTIONS = [
    {"id": "api/list", "keywords": "positive  Fast"},
    {"id": "api/map", "keywords": "negative fast"},
    {"id": "gui/button", "keywords": "interactive"},
    {"id": "misc/untagged"},
]


def ids(selected):
    return [test["id"] for test in selected]


def test_select_tests_by_expression():
    k = create("expr", "fast & !negative")
    assert ids(select_tests(DESCRIPTIONS, k)) == ["api/list"]


def test_select_tests_untagged_tests_have_no_keywords():
    k = create("expr", "!interactive")
    assert ids(select_tests(DESCRIPTIONS, k)) == ["api/list", "api/map", "misc/untagged"]


def test_select_tests_without_filter_selects_everything():
    assert ids(select_tests(DESCRIPTIONS, None)) == [test["id"] for test in DESCRIPTIONS]


def test_selection_from_properties():
    selection = KeywordSelection.from_properties(
        {KEYWORD_OP_PROPERTY: "anyOf", KEYWORDS_PROPERTY: "interactive negative"}
    )
    assert selection.mode == "any of"
    assert ids(select_tests(DESCRIPTIONS, selection.keywords)) == ["api/map", "gui/button"]


def test_selection_round_trips_through_properties():
    properties = {KEYWORD_OP_PROPERTY: "allOf", KEYWORDS_PROPERTY: "Fast positive"}
    selection = KeywordSelection.from_properties(properties)
    assert selection.to_properties() == properties
    assert selection.keywords.summary == "all of (fast positive)"


def test_selection_without_keywords_is_ignored():
    selection = KeywordSelection.from_properties({KEYWORD_OP_PROPERTY: "expr"})
    assert selection.mode == "ignore"
    assert selection.keywords is None
    assert selection.is_valid()
    assert selection.to_properties() == {KEYWORD_OP_PROPERTY: "ignore"}


def test_selection_unknown_operator_is_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        selection = KeywordSelection.from_properties(
            {KEYWORD_OP_PROPERTY: "noneOf", KEYWORDS_PROPERTY: "a"}
        )
    assert selection.mode == "ignore"
    assert "noneOf" in caplog.text


def test_selection_caches_until_changed():
    selection = KeywordSelection("expr", "a | b")
    first = selection.keywords
    assert selection.keywords is first
    selection.set("expr", "a & b")
    second = selection.keywords
    assert second is not first
    assert second.summary == "a & b"


def test_selection_reports_errors():
    selection = KeywordSelection("expr", "a &", vocabulary={"a"})
    assert selection.keywords is None
    assert not selection.is_valid()
    assert selection.error.startswith("bad keywords:")

    selection.set("expr", "x")
    assert not selection.is_valid()
    assert "x" in selection.error

    selection.set("expr", "a")
    assert selection.is_valid()
    assert selection.error is None


def test_keywords_match():
    assert keywords_match("b a  c", "a b c")
    assert not keywords_match("a b", "a b c")
    assert not keywords_match("a b", "A b")
