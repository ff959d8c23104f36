"""
Header and cookie auditing.

Both auditors are pure: they take plain values, never touch the network
and never modify what they are given.
"""

from typing import Iterable, List, Mapping, NamedTuple, Sequence, Tuple


class HeaderFinding(NamedTuple):
    catalog_name: str
    present: bool
    matched_values: Tuple[str, ...]
    explanation: str = ''


class HeaderAuditResult(NamedTuple):
    findings: Tuple[HeaderFinding, ...]
    raw_headers: Mapping[str, Tuple[str, ...]]

    @property
    def present(self):
        return [f for f in self.findings if f.present]

    @property
    def missing(self):
        return [f for f in self.findings if not f.present]


class Cookie(NamedTuple):
    name: str
    secure: bool
    http_only: bool
    raw: str = ''


class CookieFinding(NamedTuple):
    name: str
    missing_secure: bool
    missing_http_only: bool

    @property
    def ok(self):
        return not (self.missing_secure or self.missing_http_only)

    @property
    def missing_attributes(self):
        missing = []
        if self.missing_secure:
            missing.append('Secure')
        if self.missing_http_only:
            missing.append('HttpOnly')
        return missing


class CookieAuditResult(NamedTuple):
    findings: Tuple[CookieFinding, ...]
    raw_cookies: Tuple[str, ...]

    @property
    def flagged(self):
        return [f for f in self.findings if not f.ok]


def _lowercase_index(headers: Mapping[str, Sequence[str]]):
    # First key in iteration order wins when several casings collide
    index = {}
    for name, values in headers.items():
        index.setdefault(name.lower(), values)
    return index


def audit_headers(catalog: Iterable, headers: Mapping[str, Sequence[str]]) -> HeaderAuditResult:
    """
    Report presence of every catalog entry in ``headers``.

    Header names are compared case-insensitively, values are returned
    untouched. Exactly one finding is produced per catalog entry.
    """
    index = _lowercase_index(headers)

    findings = []
    for entry in catalog:
        values = index.get(entry.name.lower())
        if values is None:
            findings.append(HeaderFinding(entry.name, False, (), entry.explanation))
        else:
            findings.append(HeaderFinding(entry.name, True, tuple(values), entry.explanation))

    raw = {name: tuple(values) for name, values in headers.items()}
    return HeaderAuditResult(tuple(findings), raw)


def audit_cookies(cookies: Iterable[Cookie]) -> CookieAuditResult:
    """Flag cookies missing the Secure or HttpOnly attribute, in input order."""
    findings: List[CookieFinding] = []
    raw: List[str] = []
    for cookie in cookies:
        findings.append(CookieFinding(cookie.name, not cookie.secure, not cookie.http_only))
        raw.append(cookie.raw)
    return CookieAuditResult(tuple(findings), tuple(raw))
