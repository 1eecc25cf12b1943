"""
Preprocessor for saved or freshly fetched fanedit.org pages.

Runs before the XPath parsers:
- Decodes raw bytes using the charset the page declares
- Sanitizes the raw HTML string (NUL bytes, control characters, broken brackets)
- Rebuilds the tree with html5lib and strips comments and script/style content

Design principle: NEVER FAIL on bad HTML. If no tree builder copes, callers
fall back to the raw markup.

Input:  raw HTML string (or bytes via decode_bytes)
Output: dict with normalized_html, sanitized_html, original_html, declared_charset, warnings
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Comment

from .exceptions import PreprocessorError
from .logger import get_module_logger

logger = get_module_logger("preprocessor")


class Preprocessor:
    """
    Rule-based HTML preprocessor.

    Leaves every element and attribute the parsers read untouched; only
    content that can never hold metadata is emptied.
    """

    # Elements whose content is cleared; the empty tags stay in place
    CONTENT_STRIP_ELEMENTS = ['script', 'style', 'noscript']

    # WHATWG encoding spec: browsers silently remap these charsets.
    # https://encoding.spec.whatwg.org/#names-and-labels
    WHATWG_CHARSET_MAP = {
        'iso-8859-1': 'windows-1252',
        'iso8859-1': 'windows-1252',
        'iso88591': 'windows-1252',
        'latin-1': 'windows-1252',
        'latin1': 'windows-1252',
        'us-ascii': 'windows-1252',
        'ascii': 'windows-1252',
        'iso-8859-9': 'windows-1254',
        'iso-8859-11': 'windows-874',
    }

    # BeautifulSoup tree builders, most tolerant first
    TREE_BUILDERS = ['html5lib', 'lxml', 'html.parser']

    @staticmethod
    def detect_charset_from_bytes(raw_bytes: bytes) -> str:
        """
        Detect the charset declared in the first 2048 bytes of a page.

        Applies the WHATWG browser mapping (e.g. iso-8859-1 → windows-1252).
        Returns 'utf-8' when nothing is declared.
        """
        head_str = raw_bytes[:2048].decode('ascii', errors='ignore')

        charset = None

        # Modern form first: <meta charset="...">
        m = re.search(r'<meta[^>]+charset=["\']?\s*([^\s"\';>]+)', head_str, re.IGNORECASE)
        if m:
            charset = m.group(1).strip().lower()

        # Legacy: <meta http-equiv="Content-Type" content="...; charset=...">
        if not charset:
            m = re.search(
                r'<meta[^>]+content=["\'][^"\']*charset=([^\s"\';>]+)',
                head_str, re.IGNORECASE
            )
            if m:
                charset = m.group(1).strip().lower()

        if not charset:
            return 'utf-8'

        return Preprocessor.WHATWG_CHARSET_MAP.get(charset, charset)

    @staticmethod
    def decode_bytes(raw_bytes: bytes) -> tuple[str, str]:
        """
        Decode raw page bytes with the declared charset.

        Returns:
            Tuple of (html text, charset used)
        """
        charset = Preprocessor.detect_charset_from_bytes(raw_bytes)
        try:
            return raw_bytes.decode(charset, errors='replace'), charset
        except LookupError:
            # Declared charset Python does not know about
            logger.warning(f"Unknown charset '{charset}', decoding as utf-8")
            return raw_bytes.decode('utf-8', errors='replace'), 'utf-8'

    def _sanitize_html(self, html: str) -> tuple[str, list[str]]:
        """
        Fix string-level breakage before any tree is built.

        Returns:
            Tuple of (sanitized HTML, list of warnings)
        """
        warnings = []
        sanitized = html

        # NULL bytes crash lxml and are never valid in HTML text content
        if '\x00' in sanitized:
            sanitized = sanitized.replace('\x00', '')
            warnings.append("Removed NULL bytes")

        # <<div>> style copy-paste corruption
        double_bracket_pattern = r'<{2,}(\/?[a-zA-Z][^>]*?)>{2,}'
        if re.search(double_bracket_pattern, sanitized):
            sanitized = re.sub(double_bracket_pattern, r'<\1>', sanitized)
            warnings.append("Fixed double angle brackets")

        # value=="123" breaks the listing control's attributes
        malformed_attr_pattern = r'([\w-]+)==(["\'])'
        if re.search(malformed_attr_pattern, sanitized):
            sanitized = re.sub(malformed_attr_pattern, r'\1=\2', sanitized)
            warnings.append("Fixed malformed attributes (double equals)")

        sanitized = sanitized.replace('\r\n', '\n').replace('\r', '\n')

        # Control characters other than tab/newline
        control_chars = ''.join(chr(c) for c in range(32) if c not in (9, 10, 13))
        if any(c in sanitized for c in control_chars):
            sanitized = sanitized.translate(str.maketrans('', '', control_chars))
            warnings.append("Removed control characters")

        logger.debug(f"Sanitization complete. {len(warnings)} fixes applied.")
        return sanitized, warnings

    def _build_soup(self, html: str, warnings: list[str]) -> BeautifulSoup:
        """
        Parse with the first tree builder that succeeds.

        Raises:
            PreprocessorError: if every builder fails
        """
        errors = {}
        for builder in self.TREE_BUILDERS:
            try:
                return BeautifulSoup(html, builder)
            except Exception as e:
                logger.warning(f"{builder} parsing failed: {e}")
                warnings.append(f"{builder} parsing failed: {e}")
                errors[builder] = str(e)
        raise PreprocessorError("No tree builder could parse the HTML", details=errors)

    def process(self, html: str, declared_charset: Optional[str] = None) -> dict:
        """
        Sanitize and normalize HTML for the XPath parsers.

        Args:
            html: Raw HTML string
            declared_charset: Charset the bytes were decoded with, if known

        Returns:
            dict with:
                - normalized_html: repaired HTML, comments and script bodies removed
                - sanitized_html: HTML after string-level fixes only
                - original_html: the input, untouched
                - declared_charset: charset passed in, or utf-8
                - warnings: list of fixes applied

        Raises:
            PreprocessorError: if no tree builder could parse the sanitized HTML
        """
        sanitized_html, warnings = self._sanitize_html(html or "")

        soup = self._build_soup(sanitized_html, warnings)

        removed = self._remove_comments(soup)
        if removed:
            logger.debug(f"Removed {removed} comments")

        cleared = self._clear_non_content(soup)
        if cleared:
            warnings.append(f"Cleared content of {cleared} script/style/noscript tags")

        return {
            "normalized_html": str(soup),
            "sanitized_html": sanitized_html,
            "original_html": html,
            "declared_charset": declared_charset or "utf-8",
            "warnings": warnings,
        }

    def _remove_comments(self, soup: BeautifulSoup) -> int:
        """Remove HTML comments. Returns count of removed comments."""
        comments = soup.find_all(string=lambda text: isinstance(text, Comment))
        for comment in comments:
            comment.extract()
        return len(comments)

    def _clear_non_content(self, soup: BeautifulSoup) -> int:
        """Empty script, style and noscript tags. Returns how many were cleared."""
        count = 0
        for elem in soup.find_all(self.CONTENT_STRIP_ELEMENTS):
            elem.clear()
            count += 1
        return count


def preprocess(html: str, declared_charset: Optional[str] = None) -> dict:
    """Convenience function to preprocess HTML."""
    return Preprocessor().process(html, declared_charset=declared_charset)
