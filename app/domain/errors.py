# app/domain/errors.py
from __future__ import annotations


class CatalogError(Exception):
    """Base class for errors surfaced by the medicine catalog service."""


class ConfigurationError(CatalogError):
    """Required configuration is missing; the process must not start."""


class DatabaseConnectionError(CatalogError):
    """Establishing the document-store connection failed."""


class NotFoundError(CatalogError):
    """No medicine matches the requested identifier."""


class QueryError(CatalogError):
    """A store operation failed after the connection was established."""
