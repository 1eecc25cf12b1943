"""
Custom exceptions for the fanedit metadata parser.

Error philosophy:
  - DocumentError     → WHOLE PAGE LOST: the parser returns an empty result
                        (no candidates, or a record with has_metadata=False).
  - ExtractionError   → ROW LOST: the offending search row is skipped, the
                        rest of the page is still extracted.
  - PreprocessorError → NON-FATAL: the raw HTML is used as-is.

None of these cross the public parse methods. They exist so that internal
helpers can signal failures precisely and the boundary can log them well.
"""

from typing import Optional


class FaneditParserError(Exception):
    """Base exception for all fanedit parser errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DocumentError(FaneditParserError):
    """
    Raised when raw HTML cannot be turned into a traversable document.

    Typical causes are empty input or markup lxml refuses to build a tree for.
    """
    pass


class ExtractionError(FaneditParserError):
    """
    Raised when a single search-result row cannot be extracted.

    Carries whatever fields were already read so the warning log shows
    how far extraction got.
    """

    def __init__(
        self,
        message: str,
        partial_result: Optional[dict] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.partial_result = partial_result or {}


class PreprocessorError(FaneditParserError):
    """
    Raised when the preprocessor cannot repair the markup.

    Non-fatal - callers fall back to the raw HTML and log a warning.
    """
    pass
