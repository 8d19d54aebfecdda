# xaml_autouid/formatter.py
"""
@file formatter.py
@brief Serialize an element tree in the one-attribute-per-line XAML layout.

Elements with no children, or a single text child, and no binding
attribute are written on one line. Everything else is written as a block:

    <Grid x:Name="root"
          Margin="4">
        <Button x:Name="ok" />
    </Grid>
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from lxml import etree

from .constants import BINDING_PREFIX, INDENT_UNIT
from .exceptions import StructuralError
from .loader import Child, TextNode, attribute_name, iter_children, qualified_name

_ATTR_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    ('"', "&quot;"),
    ("\n", "&#xA;"),
    ("\r", "&#xD;"),
    ("\t", "&#x9;"),
)

_TEXT_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def _escape(value: str, table: Tuple[Tuple[str, str], ...]) -> str:
    for raw, escaped in table:
        value = value.replace(raw, escaped)
    return value


def escape_attribute(value: str) -> str:
    return _escape(value, _ATTR_ESCAPES)


def escape_text(value: str) -> str:
    return _escape(value, _TEXT_ESCAPES)


def has_binding_attribute(element: etree._Element) -> bool:
    """True if any attribute value is a markup extension such as ``{Binding Path=Foo}``."""
    return any(value.startswith(BINDING_PREFIX) for value in element.attrib.values())


def _namespace_declarations(
    element: etree._Element,
    parent_nsmap: Dict[Optional[str], str],
) -> List[Tuple[str, str]]:
    declared = []
    for prefix, uri in element.nsmap.items():
        if parent_nsmap.get(prefix) == uri:
            continue
        declared.append(("xmlns" if prefix is None else f"xmlns:{prefix}", uri))
    return declared


def _rendered_attributes(
    element: etree._Element,
    parent_nsmap: Dict[Optional[str], str],
) -> List[str]:
    pairs = _namespace_declarations(element, parent_nsmap)
    pairs.extend((attribute_name(element, key), value) for key, value in element.attrib.items())
    return [f'{name}="{escape_attribute(value)}"' for name, value in pairs]


class MarkupFormatter:
    """Accumulates formatted lines for one tree."""

    def __init__(self, indent_unit: str = INDENT_UNIT):
        self.indent_unit = indent_unit
        self._out: List[str] = []

    def format(self, root: etree._Element) -> str:
        self._out = []
        self._element(root, "", {})
        return "".join(self._out)

    def _element(
        self,
        element: etree._Element,
        indent: str,
        parent_nsmap: Dict[Optional[str], str],
    ) -> None:
        name = qualified_name(element)
        attributes = _rendered_attributes(element, parent_nsmap)
        children = list(iter_children(element))

        compact = (
            not children or (len(children) == 1 and isinstance(children[0], TextNode))
        ) and not has_binding_attribute(element)

        if compact:
            head = f"{indent}<{name}"
            if attributes:
                head += " " + " ".join(attributes)
            if children:
                self._out.append(f"{head}>{escape_text(children[0].text)}</{name}>\n")
            else:
                self._out.append(f"{head} />\n")
            return

        head = f"{indent}<{name}"
        self._out.append(head)
        attribute_indent = " " * len(head)
        for i, attribute in enumerate(attributes):
            if i == 0:
                self._out.append(f" {attribute}")
            else:
                self._out.append(f"\n{attribute_indent} {attribute}")
        self._out.append(">\n")

        child_indent = indent + self.indent_unit
        for child in children:
            self._child(child, child_indent, element.nsmap)

        self._out.append(f"{indent}</{name}>\n")

    def _child(
        self,
        child: Child,
        indent: str,
        parent_nsmap: Dict[Optional[str], str],
    ) -> None:
        if isinstance(child, TextNode):
            # layout whitespace around mixed content is regenerated on every pass
            self._out.append(f"{indent}{escape_text(child.text.strip())}\n")
        elif isinstance(child, etree._Comment):
            self._out.append(f"{indent}<!--{child.text or ''}-->\n")
        elif isinstance(child.tag, str):
            self._element(child, indent, parent_nsmap)
        else:
            raise StructuralError(type(child).__name__)


def format_markup(root: etree._Element) -> str:
    """Format a tree starting at indent level zero."""
    return MarkupFormatter().format(root)
