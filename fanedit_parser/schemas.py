"""
Pydantic schemas for the records the parsers hand back to callers.

SearchResultCandidate: one row of a search-results page
MovieMetadataRecord:   everything a detail page says about one fanedit
PersonCredit:          the fan editor credited on a detail page
RemoteImage:           an image URL found on a detail page

Every model is frozen: records are built once per parse call and never
mutated afterwards.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .config import PROVIDER_NAME

# 100 ns ticks per minute, for hosts that store runtimes as ticks
TICKS_PER_MINUTE = 600_000_000


class SearchResultCandidate(BaseModel):
    """A lightweight search result, one per listing row that carried an id."""
    model_config = ConfigDict(frozen=True)

    external_id: str = Field(min_length=1)
    title: str
    thumbnail_url: Optional[str] = None
    detail_url: Optional[str] = None
    synopsis: Optional[str] = None
    release_year: Optional[int] = None
    sequence_index: int = Field(ge=1, description="1-based position among emitted candidates")

    @computed_field
    @property
    def provider_ids(self) -> dict[str, str]:
        return {PROVIDER_NAME: self.external_id}


class PersonCredit(BaseModel):
    """A credited person. Detail pages yield at most one: the fan editor."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    role: str
    kind: str = "editor"


class MovieMetadataRecord(BaseModel):
    """
    Full metadata for one fanedit.

    has_metadata says whether the page could be read at all. It is True even
    when every optional field came back None.

    genres keeps three states apart:
      None      = the page has no genre nodes
      ()        = genre nodes exist but every one was blank
      (..)      = genre names in page order
    """
    model_config = ConfigDict(frozen=True)

    external_id: str
    title: Optional[str] = None
    original_title: Optional[str] = None
    overview: Optional[str] = None
    editor_rating: Optional[float] = None
    user_rating: Optional[float] = None
    runtime_minutes: Optional[int] = None
    genres: Optional[tuple[str, ...]] = None
    media_format: Optional[str] = None
    collection_name: Optional[str] = None
    release_year: Optional[int] = None
    homepage_url: Optional[str] = None
    has_metadata: bool = False
    credit: Optional[PersonCredit] = None

    @computed_field
    @property
    def provider_ids(self) -> dict[str, str]:
        return {PROVIDER_NAME: self.external_id}

    @property
    def run_time_ticks(self) -> Optional[int]:
        if self.runtime_minutes is None:
            return None
        return self.runtime_minutes * TICKS_PER_MINUTE


class ImageKind(str, Enum):
    """Image slots a detail page can fill."""
    PRIMARY = "primary"
    THUMB = "thumb"


class RemoteImage(BaseModel):
    """An image URL found on a detail page. Pixel size is probed elsewhere."""
    model_config = ConfigDict(frozen=True)

    url: str
    kind: ImageKind
    provider_name: str = PROVIDER_NAME
    language: str = "en"
