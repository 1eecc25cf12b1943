"""
Main orchestrator for the fanedit metadata parser.

Wires preprocessing, document parsing and the page parsers together so
callers can go straight from raw HTML (or a saved page on disk) to records.
Fetching the pages is left to the caller; Settings only builds the URLs.
"""

from pathlib import Path
from typing import Optional, Union

from .config import Settings
from .detail import DetailPageParser
from .document import parse_document
from .exceptions import DocumentError, PreprocessorError
from .images import ImageReferenceParser
from .logger import get_module_logger, setup_logger
from .preprocessor import Preprocessor
from .schemas import MovieMetadataRecord, RemoteImage, SearchResultCandidate
from .search import SearchResultsParser

logger = get_module_logger("main")


class FaneditParser:
    """
    Main entry point for turning fanedit.org pages into records.

    Pipeline per page:
    1. Preprocessor: sanitizes and repairs the markup (optional)
    2. parse_document: builds the lxml tree
    3. SearchResultsParser / DetailPageParser / ImageReferenceParser
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        preprocess: bool = True,
        log_level: Optional[Union[int, str]] = None
    ):
        self.settings = settings or Settings()
        if log_level is not None:
            setup_logger(level=log_level)

        self.preprocessor = Preprocessor() if preprocess else None
        self.search_parser = SearchResultsParser()
        self.detail_parser = DetailPageParser()
        self.image_parser = ImageReferenceParser()

    def _load(self, html: Optional[str], declared_charset: Optional[str] = None):
        """Preprocess (when enabled) and parse. Returns None if the page is unreadable."""
        if self.preprocessor is not None and html and html.strip():
            try:
                html = self.preprocessor.process(html, declared_charset=declared_charset)["normalized_html"]
            except PreprocessorError as e:
                logger.warning(f"Preprocessing failed, using raw HTML: {e.message}")
        try:
            return parse_document(html)
        except DocumentError as e:
            logger.error(f"Page could not be parsed: {e.message}")
            return None

    def search(self, html: Optional[str], declared_charset: Optional[str] = None) -> list[SearchResultCandidate]:
        """Extract candidates from a search results page."""
        return self.search_parser.parse(self._load(html, declared_charset))

    def details(self, html: Optional[str], external_id: str,
                declared_charset: Optional[str] = None) -> MovieMetadataRecord:
        """Extract the metadata record from a detail page."""
        return self.detail_parser.parse(self._load(html, declared_charset), external_id)

    def images(self, html: Optional[str], declared_charset: Optional[str] = None) -> list[RemoteImage]:
        """Extract primary and thumbnail image URLs from a detail page."""
        return self.image_parser.parse(self._load(html, declared_charset))

    @staticmethod
    def read_file(file_path: Union[str, Path]) -> tuple[str, str]:
        """
        Read a saved page, decoding with the charset it declares.

        Returns:
            Tuple of (html text, charset used)
        """
        raw_bytes = Path(file_path).read_bytes()
        return Preprocessor.decode_bytes(raw_bytes)

    def search_file(self, file_path: Union[str, Path]) -> list[SearchResultCandidate]:
        """Extract candidates from a saved search results page."""
        html, charset = self.read_file(file_path)
        return self.search(html, declared_charset=charset)

    def details_file(self, file_path: Union[str, Path], external_id: str) -> MovieMetadataRecord:
        """Extract the metadata record from a saved detail page."""
        html, charset = self.read_file(file_path)
        return self.details(html, external_id, declared_charset=charset)


def search_html(html: str) -> list[SearchResultCandidate]:
    """Convenience function to extract search candidates from HTML."""
    return FaneditParser().search(html)


def details_html(html: str, external_id: str) -> MovieMetadataRecord:
    """Convenience function to extract a detail record from HTML."""
    return FaneditParser().details(html, external_id)
