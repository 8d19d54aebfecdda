# xaml_autouid/rewriter.py
"""
@file rewriter.py
@brief Normalize x:Name, x:Uid and AutomationProperties.AutomationId on every element.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Optional

from lxml import etree

from .constants import (AUTOMATION_ID_ATTRIBUTE, DEFAULT_ALIAS, NAME_ATTRIBUTE,
                        QUALIFIED_NAME, QUALIFIED_UID, XAML_NAMESPACE)
from .kinds import EligibleKinds
from .loader import qualified_name
from .logging_setup import get_logger

logger = get_logger(__name__)

_IDENTITY_RE = re.compile(r"[0-9A-Fa-f]{32}")


def new_identity() -> str:
    """Fresh 128-bit random identity as 32 lowercase hex digits."""
    return uuid.uuid4().hex


def parse_identity(value: Optional[str]) -> Optional[str]:
    """Return the normalized identity if value is exactly 32 hex digits, else None."""
    if value is None or not _IDENTITY_RE.fullmatch(value):
        return None
    return value.lower()


def is_property_element(element: Optional[etree._Element]) -> bool:
    """True for property-element syntax (a dot in the element name)."""
    return element is not None and "." in qualified_name(element)


def _xaml_alias(element: etree._Element) -> Optional[str]:
    for prefix, uri in element.nsmap.items():
        if prefix is not None and uri == XAML_NAMESPACE:
            return prefix
    return None


def _free_alias(nsmap: Dict[Optional[str], str]) -> str:
    alias = DEFAULT_ALIAS
    n = 1
    while alias in nsmap:
        alias = f"{DEFAULT_ALIAS}{n}"
        n += 1
    return alias


def ensure_xaml_namespace(root: etree._Element) -> etree._Element:
    """
    Make sure the root binds a prefix to the XAML language namespace.

    lxml cannot add a namespace declaration to an existing element, so when
    the binding is missing a new root is built with the extra declaration and
    the old root's attributes and children are moved onto it.

    @return The root to keep using (the same object when nothing changed)
    """
    if _xaml_alias(root) is not None:
        return root

    nsmap = dict(root.nsmap)
    alias = _free_alias(nsmap)
    nsmap[alias] = XAML_NAMESPACE

    new_root = etree.Element(root.tag, nsmap=nsmap)
    for key, value in root.attrib.items():
        new_root.set(key, value)
    new_root.text = root.text
    new_root.extend(list(root))
    logger.debug(f"Declared xmlns:{alias} on <{qualified_name(new_root)}>")
    return new_root


@dataclass
class RewriteStats:
    visited: int = 0
    skipped: int = 0
    names_migrated: int = 0
    identities_reused: int = 0
    identities_generated: int = 0
    decorated: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class IdentityRewriter:
    """
    Applies the identity rules to one tree.

    Elements named with a dot, and direct children of such elements, are
    left untouched. Only the immediate parent is checked.
    """

    def __init__(
        self,
        kinds: EligibleKinds,
        id_factory: Callable[[], str] = new_identity,
    ):
        self.kinds = kinds
        self.id_factory = id_factory
        self.stats = RewriteStats()

    def rewrite(self, root: etree._Element) -> etree._Element:
        """
        Rewrite the tree in place.

        @param root Root element from the loader
        @return The root to format (may be a new element, see ensure_xaml_namespace)
        """
        self.stats = RewriteStats()
        root = ensure_xaml_namespace(root)

        for element in root.iter(tag=etree.Element):
            if is_property_element(element) or is_property_element(element.getparent()):
                self.stats.skipped += 1
                continue
            self.stats.visited += 1
            self._rewrite_element(element)

        return root

    def _rewrite_element(self, element: etree._Element) -> None:
        attrib = element.attrib

        if QUALIFIED_NAME not in attrib and NAME_ATTRIBUTE in attrib:
            element.set(QUALIFIED_NAME, attrib[NAME_ATTRIBUTE])
            del attrib[NAME_ATTRIBUTE]
            self.stats.names_migrated += 1

        identity = parse_identity(attrib.get(QUALIFIED_UID))
        if identity is None:
            identity = self.id_factory()
            self.stats.identities_generated += 1
        else:
            self.stats.identities_reused += 1
        attrib.pop(QUALIFIED_UID, None)

        attrib.pop(AUTOMATION_ID_ATTRIBUTE, None)

        if etree.QName(element).localname not in self.kinds:
            return

        element.set(QUALIFIED_UID, identity)
        element.set(AUTOMATION_ID_ATTRIBUTE, identity)
        self.stats.decorated += 1


def rewrite_identities(root: etree._Element, kinds: EligibleKinds) -> etree._Element:
    """Rewrite identities on a tree and return the root to format."""
    return IdentityRewriter(kinds).rewrite(root)
