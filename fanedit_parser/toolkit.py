"""
Field extraction helpers shared by the search and detail parsers.

Everything here is pure: no I/O, no logging, no state. Absence and parse
failure both come back as None; nothing raises for bad field content.
"""

import math
import re
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from .document import inner_text, select_all, select_one

# Culture-invariant decimal: "." separator, optional sign and exponent.
# Rejects thousands separators, "nan", "inf" and "1_000" which float() accepts.
INVARIANT_FLOAT_PATTERN = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)
INVARIANT_INT_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)
YEAR_PATTERN = re.compile(r"\d{4}", re.ASCII)

RUNTIME_SUFFIX = " minutes"


class YearRule(Enum):
    """
    How a free-text date is reduced to a year.

    EXACTLY_TWO  - listing rows: "<month> <year>", the second token must be an integer
    AT_LEAST_TWO - detail pages: two or more tokens; the last token if it is an
                   integer, otherwise the last four-digit token before it
    """
    EXACTLY_TWO = "exactly_two"
    AT_LEAST_TWO = "at_least_two"


def null_if_blank(text: Optional[str]) -> Optional[str]:
    """Trim text and map empty results to None."""
    if text is None:
        return None
    text = text.strip()
    return text or None


def first_matching_text(node, selectors: Union[str, Iterable[str]]) -> Optional[str]:
    """
    Trimmed text of the first node found by the first selector that matches.

    Selectors are tried in priority order. The first selector that matches
    anything decides the result, so a blank match returns None rather than
    falling through to the next selector.
    """
    if node is None:
        return None
    if isinstance(selectors, str):
        selectors = (selectors,)
    for selector in selectors:
        match = select_one(node, selector)
        if match is not None:
            return null_if_blank(inner_text(match))
    return None


def first_non_blank(*candidates: Union[Optional[str], Callable[[], Optional[str]]]) -> Optional[str]:
    """
    Evaluate candidates in order and return the first non-blank value.

    Candidates may be plain values or zero-argument callables; callables
    are only invoked when every earlier candidate was blank.
    """
    for candidate in candidates:
        value = candidate() if callable(candidate) else candidate
        value = null_if_blank(value)
        if value is not None:
            return value
    return None


def attribute_of(node, name: str) -> Optional[str]:
    """Trimmed attribute value, or None if the node or the value is missing."""
    if node is None or isinstance(node, str):
        return None
    return null_if_blank(node.get(name))


def parse_invariant_int(text: Optional[str]) -> Optional[int]:
    """Integer with optional sign and ASCII digits only, or None."""
    if text is None:
        return None
    text = text.strip()
    if not INVARIANT_INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_invariant_float(text: Optional[str]) -> Optional[float]:
    """Parse a rating. Only strictly positive values count; 0 means "unrated"."""
    if text is None:
        return None
    text = text.strip()
    if not INVARIANT_FLOAT_PATTERN.fullmatch(text):
        return None
    value = float(text)
    # "1e400" overflows to inf
    if not math.isfinite(value):
        return None
    return value if value > 0 else None


def parse_year_from_free_text(text: Optional[str],
                              rule: YearRule = YearRule.AT_LEAST_TWO) -> Optional[int]:
    """
    Pull a year out of a free-form date such as "July 2025".

    A single token ("Unknown", "2025") never yields a year under either rule.
    """
    if text is None:
        return None
    tokens = text.split()

    if rule is YearRule.EXACTLY_TWO:
        if len(tokens) != 2:
            return None
        return parse_invariant_int(tokens[-1])

    if len(tokens) < 2:
        return None
    year = parse_invariant_int(tokens[-1])
    if year is not None:
        return year
    for token in reversed(tokens[:-1]):
        if YEAR_PATTERN.fullmatch(token):
            return int(token)
    return None


def parse_runtime_minutes(text: Optional[str]) -> Optional[int]:
    """Parse "120 minutes" style running times into whole minutes."""
    text = null_if_blank(text)
    if text is None:
        return None
    if text.endswith(RUNTIME_SUFFIX):
        text = text[:-len(RUNTIME_SUFFIX)]
    return parse_invariant_int(text)


def collect_ordered_text_list(node, selector: str) -> Optional[tuple[str, ...]]:
    """
    Trimmed, non-blank texts of every matching node in document order.

    None means nothing matched; () means nodes matched but all were blank.
    """
    matches = select_all(node, selector)
    if not matches:
        return None
    texts = []
    for match in matches:
        text = null_if_blank(inner_text(match))
        if text is not None:
            texts.append(text)
    return tuple(texts)
