"""Validate hotel documents against an XML Schema and collect diagnostics."""
from __future__ import annotations

import logging
from typing import Optional

from lxml import etree

from hotel_feed.core.xml import DtdProhibitedError, parse_document, recover_document
from hotel_feed.services.document_client import DocumentClient, DocumentFetchError

from .diagnostics import Diagnostic, ValidationReport

logger = logging.getLogger(__name__)

_READ_FAILURES = (DocumentFetchError, DtdProhibitedError, etree.LxmlError)


def load_schema(client: DocumentClient, schema_location: str) -> etree.XMLSchema:
    data = client.fetch(schema_location)
    return etree.XMLSchema(parse_document(data, location=schema_location))


def _collect(report: ValidationReport, schema: etree.XMLSchema, tree: etree._ElementTree) -> None:
    schema.validate(tree)
    for entry in schema.error_log:
        report.add(Diagnostic.from_log_entry(entry))


def _collect_before_failure(
    report: ValidationReport,
    schema: etree.XMLSchema,
    data: bytes,
    location: str,
    failure: etree.XMLSyntaxError,
) -> None:
    """Keep schema diagnostics that precede the line where parsing broke."""
    tree = recover_document(data, location=location)
    if tree is None or not failure.lineno:
        return
    schema.validate(tree)
    for entry in schema.error_log:
        if entry.line and entry.line < failure.lineno:
            report.add(Diagnostic.from_log_entry(entry))


def validate_document(
    document_location: str,
    schema_location: str,
    *,
    client: Optional[DocumentClient] = None,
) -> ValidationReport:
    """Validate ``document_location`` against ``schema_location``.

    Every schema error and warning is collected in document order. A failure
    to fetch, parse or compile stops the pass and is recorded as the final
    ``Exception`` diagnostic; nothing is raised for document problems.
    """
    report = ValidationReport(document_location=document_location, schema_location=schema_location)
    owns_client = client is None
    active = client or DocumentClient()
    try:
        schema = load_schema(active, schema_location)
        data = active.fetch(document_location)
        try:
            tree = parse_document(data, location=document_location)
        except etree.XMLSyntaxError as exc:
            _collect_before_failure(report, schema, data, document_location, exc)
            raise
        _collect(report, schema, tree)
    except _READ_FAILURES as exc:
        logger.debug("Validation of %s aborted: %s", document_location, exc)
        report.add_exception(exc)
    finally:
        if owns_client:
            active.close()

    logger.debug("Validated %s: %s diagnostic(s)", document_location, len(report))
    return report


def validate(
    document_location: str,
    schema_location: str,
    *,
    client: Optional[DocumentClient] = None,
) -> str:
    """Return ``"No errors are found"`` or the newline-joined diagnostics."""
    return validate_document(document_location, schema_location, client=client).render()
