"""
Settings and URL builders for the fanedit catalog.

Values come from environment variables (a .env file is honoured when the
CLIs call load_dotenv()). The parsers themselves never fetch anything; the
URLs are exposed for whatever fetch layer feeds them HTML.
"""

import os
from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel

PROVIDER_NAME = "IFDB"

# Role label attached to the single person credit a detail page can yield
EDITOR_ROLE = "Faneditor"

# Title used for search candidates whose row carries no readable title
UNKNOWN_TITLE = "Unknown"

DEFAULT_SEARCH_URL = (
    "https://fanedit.org/fanedit-search/search-results/"
    "?query=all&scope=title&keywords={0}&order=alpha"
)
DEFAULT_DETAIL_URL = "https://fanedit.org/fanedit-search/search-results/?p={0}"


class Settings(BaseModel):
    """Runtime configuration, normally built with Settings.from_env()."""
    search_url_template: str = DEFAULT_SEARCH_URL
    detail_url_template: str = DEFAULT_DETAIL_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            search_url_template=os.getenv("FANEDIT_SEARCH_URL", DEFAULT_SEARCH_URL),
            detail_url_template=os.getenv("FANEDIT_DETAIL_URL", DEFAULT_DETAIL_URL),
            log_level=os.getenv("FANEDIT_LOG_LEVEL", "INFO"),
        )

    def search_url(self, query: Optional[str]) -> str:
        """Build the listing URL for a title search. The query is URL-escaped."""
        return self.search_url_template.format(quote(query or "", safe=""))

    def detail_url(self, external_id: str) -> str:
        """Build the detail page URL for one listing id."""
        return self.detail_url_template.format(quote(str(external_id), safe=""))
