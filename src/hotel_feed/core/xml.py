"""Hardened lxml parsing shared by the validator and the JSON converter."""
from __future__ import annotations

import logging
from typing import Optional

from lxml import etree

logger = logging.getLogger(__name__)


class DtdProhibitedError(ValueError):
    """Raised when a document carries a DOCTYPE declaration."""

    def __init__(self, location: Optional[str] = None) -> None:
        super().__init__("DTD is prohibited in this XML document.")
        self.location = location


def build_parser(*, recover: bool = False) -> etree.XMLParser:
    """Return a parser that never loads DTDs, expands entities or touches the network."""
    return etree.XMLParser(
        resolve_entities=False,
        load_dtd=False,
        dtd_validation=False,
        no_network=True,
        recover=recover,
    )


def ensure_no_dtd(tree: etree._ElementTree, location: Optional[str] = None) -> None:
    docinfo = tree.docinfo
    if docinfo.internalDTD is not None or docinfo.doctype:
        raise DtdProhibitedError(location)


def parse_document(data: bytes, *, location: Optional[str] = None) -> etree._ElementTree:
    """Parse ``data`` into a tree, rejecting DOCTYPE declarations.

    Raises ``lxml.etree.XMLSyntaxError`` for malformed input and
    ``DtdProhibitedError`` when a DTD is present.
    """
    root = etree.fromstring(data, build_parser(), base_url=location)
    tree = root.getroottree()
    ensure_no_dtd(tree, location)
    logger.debug("Parsed %s (root <%s>)", location or "<bytes>", root.tag)
    return tree


def recover_document(data: bytes, *, location: Optional[str] = None) -> Optional[etree._ElementTree]:
    """Parse as much of a malformed document as libxml2 can salvage.

    Returns ``None`` when nothing usable was recovered. A DOCTYPE still
    raises ``DtdProhibitedError``, since it precedes any later syntax error.
    """
    try:
        root = etree.fromstring(data, build_parser(recover=True), base_url=location)
    except etree.XMLSyntaxError:
        return None
    if root is None:
        return None
    tree = root.getroottree()
    ensure_no_dtd(tree, location)
    return tree
