"""
Tests for the shared field extraction helpers.
"""

import pytest

from fanedit_parser.document import inner_text, parse_document, select_one
from fanedit_parser.exceptions import DocumentError
from fanedit_parser.toolkit import (
    YearRule,
    attribute_of,
    collect_ordered_text_list,
    first_matching_text,
    first_non_blank,
    null_if_blank,
    parse_invariant_float,
    parse_invariant_int,
    parse_runtime_minutes,
    parse_year_from_free_text,
)


@pytest.mark.parametrize("text, expected", [
    ("7.5", 7.5),
    (" 9 ", 9.0),
    ("0", None),
    ("0.0", None),
    ("-2", None),
    ("n/a", None),
    ("1,5", None),
    ("nan", None),
    ("1e400", None),
    ("", None),
    (None, None),
])
def test_parse_invariant_float(text, expected):
    assert parse_invariant_float(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("July 2025", 2025),
    ("Unknown", None),
    ("2025", None),
    ("TBD 2025 extra", 2025),
    ("  March   2011 ", 2011),
    ("July 20x5", None),
    ("12 July", None),
    ("March 2011 12", 12),
    ("Released 2019 (remaster)", 2019),
    ("", None),
    (None, None),
])
def test_year_from_detail_dates(text, expected):
    assert parse_year_from_free_text(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("July 2025", 2025),
    ("TBD 2025 extra", None),
    ("2025", None),
    ("July twenty", None),
])
def test_year_from_listing_dates_needs_exactly_two_tokens(text, expected):
    assert parse_year_from_free_text(text, YearRule.EXACTLY_TWO) == expected


@pytest.mark.parametrize("text, expected", [
    ("120 minutes", 120),
    ("  95 minutes ", 95),
    ("90", 90),
    ("", None),
    (None, None),
    ("about 2 hours", None),
])
def test_parse_runtime_minutes(text, expected):
    assert parse_runtime_minutes(text) == expected


def test_parse_invariant_int_rejects_non_ascii_digits():
    assert parse_invariant_int("+42") == 42
    assert parse_invariant_int("٤٢") is None
    assert parse_invariant_int("4_2") is None


def test_null_if_blank():
    assert null_if_blank("  x ") == "x"
    assert null_if_blank("   ") is None
    assert null_if_blank(None) is None


def test_first_matching_text_follows_selector_priority():
    doc = parse_document(
        '<div class="a"><span>first</span></div><div class="b"><span>second</span></div>'
    )
    assert first_matching_text(doc, ("//div[@class='missing']/span", "//div[@class='b']/span")) == "second"
    assert first_matching_text(doc, ("//div[@class='a']/span", "//div[@class='b']/span")) == "first"
    assert first_matching_text(doc, "//div[@class='nothing']") is None


def test_first_matching_text_stops_at_blank_match():
    doc = parse_document('<div class="a"><span>  </span></div><div class="b"><span>later</span></div>')
    assert first_matching_text(doc, ("//div[@class='a']/span", "//div[@class='b']/span")) is None


def test_first_non_blank_only_calls_fallbacks_when_needed():
    calls = []

    def fallback():
        calls.append(1)
        return "fallback"

    assert first_non_blank("direct", fallback) == "direct"
    assert calls == []
    assert first_non_blank("  ", None, fallback) == "fallback"
    assert calls == [1]
    assert first_non_blank(None, lambda: " ") is None


def test_attribute_of():
    doc = parse_document('<input class="c" value=" 12 " data-empty="  ">')
    node = select_one(doc, "//input")
    assert attribute_of(node, "value") == "12"
    assert attribute_of(node, "data-empty") is None
    assert attribute_of(node, "data-missing") is None
    assert attribute_of(None, "value") is None


def test_collect_ordered_text_list_distinguishes_absent_from_blank():
    doc = parse_document(
        '<ul class="g"><li>Drama</li><li> </li><li>Action </li></ul><ul class="e"><li> </li></ul>'
    )
    assert collect_ordered_text_list(doc, "//ul[@class='g']/li") == ("Drama", "Action")
    assert collect_ordered_text_list(doc, "//ul[@class='e']/li") == ()
    assert collect_ordered_text_list(doc, "//ul[@class='none']/li") is None


def test_inner_text_decodes_entities_and_ignores_comments():
    doc = parse_document("<p><a>Tom &amp; <!-- hidden -->Jerry</a></p>")
    assert inner_text(select_one(doc, "//a")) == "Tom & Jerry"
    assert inner_text(None) is None


@pytest.mark.parametrize("raw", [None, "", "   \n", b""])
def test_parse_document_rejects_empty_input(raw):
    with pytest.raises(DocumentError):
        parse_document(raw)


def test_parse_document_accepts_xml_declaration():
    doc = parse_document('<?xml version="1.0" encoding="utf-8"?><html><body><p>ok</p></body></html>')
    assert first_matching_text(doc, "//p") == "ok"
