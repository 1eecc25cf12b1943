"""
Parsed-document access on top of lxml.

The parsers only need four things from a document: select the first node
for an XPath, select all nodes, read an attribute, and read the inner text.
lxml's HTML parser provides the tree; it is tolerant of broken markup and
builds a best-effort tree rather than failing.
"""

import re
from typing import Optional, Union

from lxml import etree

from .exceptions import DocumentError
from .logger import get_module_logger

logger = get_module_logger("document")

# XPath results are elements for node paths and strings for @attr/text() paths
Node = Union[etree._Element, str]

XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


def parse_document(raw_html: Optional[Union[str, bytes]]) -> etree._Element:
    """
    Build a traversable tree from raw HTML.

    Raises:
        DocumentError: if the input is empty or lxml cannot produce a root
    """
    if raw_html is None:
        raise DocumentError("No HTML supplied")
    if not raw_html.strip():
        raise DocumentError("HTML document is empty")

    if isinstance(raw_html, str):
        # lxml refuses str input that carries an <?xml encoding=...?> declaration
        raw_html = XML_DECLARATION.sub("", raw_html, count=1)

    try:
        root = etree.HTML(raw_html)
    except (etree.LxmlError, ValueError) as e:
        raise DocumentError(f"HTML could not be parsed: {e}") from e

    if root is None:
        raise DocumentError("HTML parser produced no document root")

    logger.debug(f"Parsed document with root <{root.tag}>")
    return root


def select_all(node, xpath: str) -> list:
    """Return every node matching the XPath, in document order."""
    if node is None:
        return []
    result = node.xpath(xpath)
    if isinstance(result, list):
        return result
    # Scalar XPath results (count(), string()) are not node sets
    return [result]


def select_one(node, xpath: str) -> Optional[Node]:
    """Return the first node matching the XPath, or None."""
    matches = select_all(node, xpath)
    return matches[0] if matches else None


def inner_text(node) -> Optional[str]:
    """
    Trimmed text content of a node, including all descendants.

    Returns None for a missing node. String results from attribute or
    text() selectors are returned trimmed as they are.
    """
    if node is None:
        return None
    if isinstance(node, str):
        return node.strip()
    return etree.tostring(node, method="text", encoding="unicode", with_tail=False).strip()
