"""
Detail page parser.

Turns the fanedit.org page for one listing into a MovieMetadataRecord,
including the fan editor credit when the page names one.

Input:  a parsed document (or raw HTML) plus the listing id the caller asked for
Output: MovieMetadataRecord; has_metadata=False when the page was unreadable
"""

from typing import Optional

from . import selectors
from .config import EDITOR_ROLE
from .document import parse_document, select_one
from .exceptions import DocumentError
from .logger import get_module_logger
from .schemas import MovieMetadataRecord, PersonCredit
from .toolkit import (
    YearRule,
    attribute_of,
    collect_ordered_text_list,
    first_matching_text,
    parse_invariant_float,
    parse_runtime_minutes,
    parse_year_from_free_text,
)

logger = get_module_logger("detail")


class DetailPageParser:
    """Extracts the full metadata record from a detail page."""

    def parse_html(self, raw_html: Optional[str], known_external_id: str) -> MovieMetadataRecord:
        """Parse raw HTML and extract the record. Unreadable input yields has_metadata=False."""
        try:
            document = parse_document(raw_html)
        except DocumentError as e:
            logger.error(f"Detail page for {known_external_id} could not be parsed: {e.message}")
            return self._empty_record(known_external_id)
        return self.parse(document, known_external_id)

    def parse(self, document, known_external_id: str) -> MovieMetadataRecord:
        """
        Extract every field independently; missing fields stay None.

        The record's external_id is always the caller's id, whatever id the
        page itself carries.
        """
        if document is None:
            logger.error(f"No detail document to parse for {known_external_id}")
            return self._empty_record(known_external_id)

        try:
            record = self._extract(document, known_external_id)
        except Exception as e:
            logger.error(f"Failed to parse detail page for {known_external_id}: {e}")
            return self._empty_record(known_external_id)

        logger.info(f"Extracted metadata for {known_external_id}: {record.title!r}")
        return record

    def _extract(self, document, known_external_id: str) -> MovieMetadataRecord:
        listing = select_one(document, selectors.LISTING_CONTROL)
        if listing is None:
            logger.debug(f"Detail page for {known_external_id} has no listing control")

        runtime = parse_runtime_minutes(first_matching_text(document, selectors.RUNTIME))

        return MovieMetadataRecord(
            external_id=known_external_id,
            title=attribute_of(listing, selectors.ATTR_TITLE),
            original_title=first_matching_text(document, selectors.ORIGINAL_TITLE),
            overview=first_matching_text(document, selectors.OVERVIEW),
            editor_rating=parse_invariant_float(first_matching_text(document, selectors.EDITOR_RATING)),
            user_rating=parse_invariant_float(first_matching_text(document, selectors.USER_RATING)),
            runtime_minutes=runtime if runtime and runtime > 0 else None,
            genres=collect_ordered_text_list(document, selectors.GENRES),
            media_format=first_matching_text(document, selectors.MEDIA_FORMAT),
            collection_name=first_matching_text(document, selectors.FRANCHISE),
            release_year=parse_year_from_free_text(
                first_matching_text(document, selectors.RELEASE_DATE),
                YearRule.AT_LEAST_TWO,
            ),
            homepage_url=attribute_of(listing, selectors.ATTR_LISTING_URL),
            credit=self._editor_credit(document),
            has_metadata=True,
        )

    def _editor_credit(self, document) -> Optional[PersonCredit]:
        name = first_matching_text(document, selectors.EDITOR_NAME)
        if name is None:
            return None
        return PersonCredit(name=name, role=EDITOR_ROLE)

    @staticmethod
    def _empty_record(known_external_id: str) -> MovieMetadataRecord:
        return MovieMetadataRecord(external_id=known_external_id, has_metadata=False)


def parse_detail_page(raw_html: Optional[str], known_external_id: str) -> MovieMetadataRecord:
    """Convenience function to extract a detail record from raw HTML."""
    return DetailPageParser().parse_html(raw_html, known_external_id)
