"""
Shared HTML fixtures modelled on fanedit.org's search and detail markup.
"""

import pytest


def result_row(external_id=None, title=None, link_title=None, synopsis=None, release_date=None):
    """Build one search result row; None leaves the corresponding markup out."""
    parts = ['<div class="jrRow jrListItem">']
    if link_title is not None:
        parts.append(f'<div class="jrListingTitle"><a href="/listing">{link_title}</a></div>')
    if external_id is not None:
        title_attr = f' data-listingtitle="{title}"' if title is not None else ''
        parts.append(
            f'<input type="checkbox" class="jrCheckListing checkbox" value="{external_id}"{title_attr}'
            f' data-thumburl="https://fanedit.org/thumbs/{external_id}.jpg"'
            f' data-listingurl="https://fanedit.org/listing-{external_id}/">'
        )
    if synopsis is not None:
        parts.append(
            '<div class="jrFieldRow jrBriefsynopsis"><div class="jrFieldLabel">Brief Synopsis</div>'
            f'<div class="jrFieldValue">{synopsis}</div></div>'
        )
    if release_date is not None:
        parts.append(
            '<div class="jrFieldRow jrFaneditreleasedate"><div class="jrFieldValue">'
            f'<ul><li><a href="/dates">{release_date}</a></li></ul></div></div>'
        )
    parts.append('</div>')
    return "\n".join(parts)


def search_page(*rows):
    return (
        "<html><head><title>Search results</title></head><body>"
        '<div class="jrListingList">' + "\n".join(rows) + "</div></body></html>"
    )


DETAIL_PAGE = """<!DOCTYPE html>
<html>
<head><title>Star Wars: Despecialized</title></head>
<body>
<div class="jrListingMainImage"><a href="https://fanedit.org/images/101-full.jpg"><img src="https://fanedit.org/images/101-small.jpg"></a></div>
<input type="checkbox" class="jrCheckListing checkbox" value="999"
       data-listingtitle=" Star Wars: Despecialized "
       data-thumburl="https://fanedit.org/images/101-thumb.jpg"
       data-listingurl="https://fanedit.org/star-wars-despecialized/">
<div class="jrOverallEditor"><span class="jrRatingValue"><span>8.5</span><span>/10</span></span></div>
<div class="jrOverallUser"><span class="jrRatingValue"><span>0</span><span>/10</span></span></div>
<div class="jrFieldRow jrOriginalmovietitle"><div class="jrFieldLabel">Original Movie Title</div>
  <div class="jrFieldValue"><ul><li><a href="/original">Star Wars</a></li></ul></div></div>
<div class="jrFieldRow jrBriefsynopsis"><div class="jrFieldLabel">Brief Synopsis</div>
  <div class="jrFieldValue">  The original trilogy, restored &amp; cleaned.  </div></div>
<div class="jrFieldRow jrFaneditrunningtimemin"><div class="jrFieldValue">121 minutes</div></div>
<div class="jrFieldRow jrGenre"><div class="jrFieldValue"><ul>
  <li><a href="/genre/scifi">Sci-Fi</a></li>
  <li><a href="/genre/adventure"> Adventure </a></li>
</ul></div></div>
<div class="jrFieldRow jrReleaseinformation"><div class="jrFieldValue"><ul><li>Blu-ray</li></ul></div></div>
<div class="jrFieldRow jrFranchise"><div class="jrFieldValue"><ul><li><a href="/franchise">Star Wars</a></li></ul></div></div>
<div class="jrFieldRow jrFaneditreleasedate"><div class="jrFieldValue"><ul><li><a href="/date">March 2011</a></li></ul></div></div>
<div class="jrFieldRow jrFaneditorname"><div class="jrFieldValue"><ul><li><a href="/editor">Harmy</a></li></ul></div></div>
<script>var listing = {"id": 999};</script>
</body>
</html>
"""

MINIMAL_DETAIL_PAGE = """<html><body>
<input type="checkbox" class="jrCheckListing" value="202" data-listingtitle="Bare Edit">
</body></html>
"""


@pytest.fixture
def mixed_search_html():
    """Five rows: three usable, one without a control, one with a blank id."""
    return search_page(
        result_row("101", title="Star Wars: Despecialized", synopsis="A restoration.",
                   release_date="July 2025"),
        result_row(None, link_title="No Control"),
        result_row("103", link_title="Fallback Title", release_date="2024"),
        result_row("104", title="  ", release_date="Summer of 2023"),
        result_row("   ", title="Blank Id"),
    )


@pytest.fixture
def detail_html():
    return DETAIL_PAGE


@pytest.fixture
def minimal_detail_html():
    return MINIMAL_DETAIL_PAGE
