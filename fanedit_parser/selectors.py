"""
XPath selectors for the fanedit.org listing and detail markup.

The site is built on a JReviews-style template: every field sits in a
<div class="jrFieldName ..."> wrapper holding a jrFieldValue container, and
the listing "compare" checkbox (input.jrCheckListing) carries the canonical
id, title, thumbnail and URL as attributes on both page kinds.

Tuples are fallback chains, tried in order (see toolkit.first_matching_text).
Row-relative selectors start with "./" and are evaluated against one result row.
"""

# --- Shared ---

LISTING_CONTROL = "//input[contains(@class,'jrCheckListing')]"

ATTR_ID = "value"
ATTR_TITLE = "data-listingtitle"
ATTR_THUMB_URL = "data-thumburl"
ATTR_LISTING_URL = "data-listingurl"

# --- Search results page (row-relative) ---

RESULT_ROWS = "//div[contains(@class,'jrRow')]"

ROW_LISTING_CONTROL = ".//input[contains(@class,'jrCheckListing')]"
ROW_TITLE_LINK = (
    ".//div[@class='jrListingTitle']/a",
    ".//div[contains(@class,'jrListingTitle')]//a",
)
ROW_SYNOPSIS = (
    ".//div[contains(@class,'jrBriefsynopsis')]//div[@class='jrFieldValue']",
    ".//div[contains(@class,'jrBriefsynopsis')]//div[contains(@class,'jrFieldValue')]",
)
ROW_RELEASE_DATE = (".//div[contains(@class,'jrFaneditreleasedate')]//a",)

# --- Detail page ---

ORIGINAL_TITLE = (
    "//div[contains(@class,'jrOriginalmovietitle')]//div[contains(@class,'jrFieldValue')]//li//a",
    "//div[contains(@class,'jrOriginalmovietitle')]//div[contains(@class,'jrFieldValue')]",
)
OVERVIEW = ("//div[contains(@class,'jrBriefsynopsis')]//div[contains(@class,'jrFieldValue')]",)
EDITOR_RATING = (
    "//div[contains(@class,'jrOverallEditor')]//span[contains(@class,'jrRatingValue')]/span[1]",
)
USER_RATING = (
    "//div[contains(@class,'jrOverallUser')]//span[contains(@class,'jrRatingValue')]/span[1]",
)
RUNTIME = ("//div[contains(@class,'jrFaneditrunningtimemin')]//div[contains(@class,'jrFieldValue')]",)
GENRES = "//div[contains(@class,'jrGenre')]//li//a"
MEDIA_FORMAT = ("//div[contains(@class,'jrReleaseinformation')]//li",)
FRANCHISE = (
    "//div[contains(@class,'jrFranchise')]//li//a",
    "//div[contains(@class,'jrFranchise')]//div[contains(@class,'jrFieldValue')]",
)
RELEASE_DATE = (
    "//div[contains(@class,'jrFaneditreleasedate')]//div[contains(@class,'jrFieldValue')]//a",
)
EDITOR_NAME = (
    "//div[contains(@class,'jrFaneditorname')]//li//a",
    "//div[contains(@class,'jrFaneditorname')]//div[contains(@class,'jrFieldValue')]",
)

# --- Images (detail page) ---

MAIN_IMAGE_LINK = "//div[contains(@class,'jrListingMainImage')]//a"
