"""
Image references on a detail page.

Two images are offered: the main listing image (primary) and the listing
thumbnail (thumb). Only URLs are extracted; pixel sizes are left to whoever
downloads the images.
"""

from typing import Optional

from . import selectors
from .document import parse_document, select_one
from .exceptions import DocumentError
from .logger import get_module_logger
from .schemas import ImageKind, RemoteImage
from .toolkit import attribute_of

logger = get_module_logger("images")


class ImageReferenceParser:
    """Finds the primary and thumbnail image URLs on a detail page."""

    def parse_html(self, raw_html: Optional[str]) -> list[RemoteImage]:
        """Parse raw HTML and extract image references. Unreadable input yields []."""
        try:
            document = parse_document(raw_html)
        except DocumentError as e:
            logger.error(f"Detail page could not be parsed for images: {e.message}")
            return []
        return self.parse(document)

    def parse(self, document) -> list[RemoteImage]:
        """Return the primary image then the thumbnail, each only if present."""
        if document is None:
            return []

        images = []
        try:
            primary_url = attribute_of(select_one(document, selectors.MAIN_IMAGE_LINK), "href")
            if primary_url:
                images.append(RemoteImage(url=primary_url, kind=ImageKind.PRIMARY))

            thumb_url = attribute_of(select_one(document, selectors.LISTING_CONTROL),
                                     selectors.ATTR_THUMB_URL)
            if thumb_url:
                images.append(RemoteImage(url=thumb_url, kind=ImageKind.THUMB))
        except Exception as e:
            logger.error(f"Failed to read image references: {e}")
            return []

        logger.debug(f"Found {len(images)} image references")
        return images
