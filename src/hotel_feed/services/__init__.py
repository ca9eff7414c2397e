"""Clients for reading hotel documents and schemas."""

from .document_client import DocumentClient, DocumentFetchError

__all__ = [
    "DocumentClient",
    "DocumentFetchError",
]
