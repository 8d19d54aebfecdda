# xaml_autouid/loader.py
"""
@file loader.py
@brief Parse XAML text into an lxml element tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from lxml import etree

from .constants import XML_NAMESPACE
from .exceptions import MarkupParseError


@dataclass(frozen=True)
class TextNode:
    """Character data between markup: an element's leading text or a child's tail."""
    text: str


Child = Union[etree._Element, TextNode]


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        remove_blank_text=False,
        remove_comments=False,
        remove_pis=False,
        resolve_entities=False,
        strip_cdata=True,
    )


def _has_content(text: Optional[str]) -> bool:
    return bool(text) and not text.isspace()


def parse_markup(content: Union[bytes, str], path: Optional[str] = None) -> etree._Element:
    """
    Parse markup into its root element.

    Text is given to the parser as bytes so an XML declaration naming an
    encoding is honored. ``str`` input is encoded as UTF-8 first.

    @param content Raw markup
    @param path Source path, used only in error messages
    @return Root element of the parsed document
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    try:
        return etree.fromstring(content, _make_parser())
    except etree.XMLSyntaxError as e:
        raise MarkupParseError(e.msg or str(e), path=path, line=e.lineno) from e


def load_file(path: Union[str, Path]) -> etree._Element:
    """Read a file and parse it. A UTF-8 byte-order mark is accepted."""
    path = Path(path)
    return parse_markup(path.read_bytes(), path=str(path))


def iter_children(element: etree._Element) -> Iterator[Child]:
    """
    Yield the children of an element in document order.

    Elements, comments and processing instructions are yielded as lxml
    nodes. Leading text and tails become TextNode values; whitespace-only
    text is layout and is not yielded.
    """
    if _has_content(element.text):
        yield TextNode(element.text)
    for child in element:
        yield child
        if _has_content(child.tail):
            yield TextNode(child.tail)


def qualified_name(element: etree._Element) -> str:
    """Element name as written in the markup, e.g. ``local:Foo`` or ``Grid.RowDefinitions``."""
    local = etree.QName(element).localname
    if element.prefix:
        return f"{element.prefix}:{local}"
    return local


def attribute_name(element: etree._Element, key: str) -> str:
    """Prefixed attribute name for an lxml attribute key (``{uri}local`` -> ``x:local``)."""
    if not key.startswith("{"):
        return key
    qname = etree.QName(key)
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in element.nsmap.items():
        if prefix is not None and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname
