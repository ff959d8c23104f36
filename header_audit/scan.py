"""Run both audits against one target."""

import logging
from datetime import datetime
from typing import NamedTuple

from header_audit.audit import CookieAuditResult, HeaderAuditResult, audit_cookies, audit_headers
from header_audit.catalog import DEFAULT_CATALOG
from header_audit.fetch import DEFAULT_TIMEOUT, FetchedResponse, make_request

logger = logging.getLogger(__name__)


class TargetReport(NamedTuple):
    response: FetchedResponse
    headers: HeaderAuditResult
    cookies: CookieAuditResult
    tested_on: datetime


def audit_response(response, catalog=DEFAULT_CATALOG, tested_on=None):
    """Audit an already fetched response"""
    if tested_on is None:
        tested_on = datetime.now().astimezone()

    header_result = audit_headers(catalog, response.headers)
    cookie_result = audit_cookies(response.cookies)

    logger.debug(
        "%s: %d/%d catalog headers present, %d cookie(s) flagged",
        response.url,
        len(header_result.present),
        len(header_result.findings),
        len(cookie_result.flagged),
    )
    return TargetReport(response, header_result, cookie_result, tested_on)


def audit_target(url, catalog=DEFAULT_CATALOG, timeout=DEFAULT_TIMEOUT, tested_on=None):
    """Fetch ``url`` and audit it. Raises FetchError when the request fails."""
    if tested_on is None:
        tested_on = datetime.now().astimezone()
    response = make_request(url, timeout=timeout)
    return audit_response(response, catalog, tested_on)
