"""
Search results parser.

Turns a fanedit.org search-results page into an ordered list of
SearchResultCandidate records, one per result row that carries a listing id.

Input:  a parsed document (see document.parse_document) or raw HTML
Output: list[SearchResultCandidate], possibly empty, never an exception
"""

from typing import Optional

from . import selectors
from .config import UNKNOWN_TITLE
from .document import parse_document, select_all, select_one
from .exceptions import DocumentError, ExtractionError
from .logger import get_module_logger
from .schemas import SearchResultCandidate
from .toolkit import (
    YearRule,
    attribute_of,
    first_matching_text,
    first_non_blank,
    parse_year_from_free_text,
)

logger = get_module_logger("search")


class SearchResultsParser:
    """Extracts candidate records from a search-results page."""

    def parse_html(self, raw_html: Optional[str]) -> list[SearchResultCandidate]:
        """Parse raw HTML and extract candidates. Unreadable input yields []."""
        try:
            document = parse_document(raw_html)
        except DocumentError as e:
            logger.error(f"Search results page could not be parsed: {e.message}")
            return []
        return self.parse(document)

    def parse(self, document) -> list[SearchResultCandidate]:
        """
        Extract candidates from every result row, in document order.

        A row without a listing id is skipped. A row that fails for any other
        reason is logged and skipped; the remaining rows are still returned.
        sequence_index counts emitted candidates only, starting at 1.
        """
        if document is None:
            logger.error("No search results document to parse")
            return []

        try:
            rows = select_all(document, selectors.RESULT_ROWS)
        except Exception as e:
            logger.error(f"Failed to read search result rows: {e}")
            return []

        if not rows:
            logger.info("Search results page has no result rows")
            return []

        candidates = []
        for position, row in enumerate(rows, start=1):
            try:
                candidate = self._parse_row(row, sequence_index=len(candidates) + 1)
            except ExtractionError as e:
                logger.warning(f"Skipping search result row {position}: {e.message} "
                               f"(read so far: {e.partial_result})")
                continue
            if candidate is not None:
                candidates.append(candidate)

        logger.info(f"Extracted {len(candidates)} candidates from {len(rows)} rows")
        return candidates

    def _parse_row(self, row, sequence_index: int) -> Optional[SearchResultCandidate]:
        """
        Build one candidate from a result row.

        Returns None for rows without a listing id.

        Raises:
            ExtractionError: on any unexpected failure inside the row
        """
        fields = {}
        try:
            control = select_one(row, selectors.ROW_LISTING_CONTROL)
            external_id = attribute_of(control, selectors.ATTR_ID)
            if external_id is None:
                logger.debug("Result row has no listing id, skipping")
                return None
            fields["external_id"] = external_id

            fields["title"] = first_non_blank(
                attribute_of(control, selectors.ATTR_TITLE),
                lambda: first_matching_text(row, selectors.ROW_TITLE_LINK),
            ) or UNKNOWN_TITLE
            fields["thumbnail_url"] = attribute_of(control, selectors.ATTR_THUMB_URL)
            fields["detail_url"] = attribute_of(control, selectors.ATTR_LISTING_URL)
            fields["synopsis"] = first_matching_text(row, selectors.ROW_SYNOPSIS)
            fields["release_year"] = parse_year_from_free_text(
                first_matching_text(row, selectors.ROW_RELEASE_DATE),
                YearRule.EXACTLY_TWO,
            )

            return SearchResultCandidate(sequence_index=sequence_index, **fields)
        except Exception as e:
            raise ExtractionError(
                f"{type(e).__name__}: {e}",
                partial_result=fields,
            ) from e


def parse_search_results(raw_html: Optional[str]) -> list[SearchResultCandidate]:
    """Convenience function to extract candidates from raw HTML."""
    return SearchResultsParser().parse_html(raw_html)
