"""Audit HTTP responses for security headers and cookie attributes."""

from header_audit.audit import (
    Cookie,
    CookieAuditResult,
    CookieFinding,
    HeaderAuditResult,
    HeaderFinding,
    audit_cookies,
    audit_headers,
)
from header_audit.catalog import DEFAULT_CATALOG, HeaderCatalogEntry

__version__ = "1.0.0"

__all__ = [
    "Cookie",
    "CookieAuditResult",
    "CookieFinding",
    "DEFAULT_CATALOG",
    "HeaderAuditResult",
    "HeaderCatalogEntry",
    "HeaderFinding",
    "audit_cookies",
    "audit_headers",
]
