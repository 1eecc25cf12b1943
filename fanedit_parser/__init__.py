"""
Fanedit Metadata Parser

Rule-based extraction of movie metadata from fanedit.org (IFDB) pages.
- SearchResultsParser: search-results listing → SearchResultCandidate list
- DetailPageParser: one detail page → MovieMetadataRecord (+ editor credit)
- ImageReferenceParser: detail page → primary/thumb image URLs

Public API surface:
  Orchestrator   — FaneditParser
  Page parsers   — SearchResultsParser, DetailPageParser, ImageReferenceParser
  Data models    — SearchResultCandidate, MovieMetadataRecord, PersonCredit, RemoteImage
  Configuration  — Settings
  Error types    — FaneditParserError, DocumentError, ExtractionError

The parsers never raise for bad pages: unreadable input comes back as an
empty list or a record with has_metadata=False.
"""

from .main import FaneditParser
from .search import SearchResultsParser, parse_search_results
from .detail import DetailPageParser, parse_detail_page
from .images import ImageReferenceParser
from .document import parse_document
from .preprocessor import Preprocessor, preprocess
from .config import Settings
from .schemas import (
    SearchResultCandidate,
    MovieMetadataRecord,
    PersonCredit,
    RemoteImage,
    ImageKind,
)
from .exceptions import FaneditParserError, DocumentError, ExtractionError

__version__ = "0.1.0"
__all__ = [
    "FaneditParser",
    "SearchResultsParser",
    "DetailPageParser",
    "ImageReferenceParser",
    "parse_search_results",
    "parse_detail_page",
    "parse_document",
    "Preprocessor",
    "preprocess",
    "Settings",
    "SearchResultCandidate",
    "MovieMetadataRecord",
    "PersonCredit",
    "RemoteImage",
    "ImageKind",
    "FaneditParserError",
    "DocumentError",
    "ExtractionError",
]
