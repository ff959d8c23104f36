"""Issue the GET request for a target and adapt the response for auditing."""

import logging
from http.cookiejar import parse_ns_headers
from typing import Dict, List, NamedTuple, Tuple

import requests
import urllib3

from header_audit.audit import Cookie

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10

# Certificate checks are off on purpose, so the warning is noise on every request
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class FetchError(Exception):
    """Raised when the request for a target cannot be completed."""

    def __init__(self, url, error):
        super().__init__(f"Error making request to {url}: {error}")
        self.url = url
        self.error = error


class FetchedResponse(NamedTuple):
    original_url: str
    url: str
    status_code: int
    headers: Dict[str, Tuple[str, ...]]
    cookies: List[Cookie]
    redirects: int = 0


def normalize_url(url):
    """Add a scheme when the target was given as a bare host"""
    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        url = 'http://' + url
    return url


def headers_from_response(response):
    """
    Return the response headers as name -> tuple of values.

    urllib3 keeps every value of a repeated header, requests joins them,
    so the raw container is preferred when there is one.
    """
    raw_headers = getattr(response.raw, 'headers', None)
    if raw_headers is not None and hasattr(raw_headers, 'getlist'):
        return {name: tuple(raw_headers.getlist(name)) for name in raw_headers.keys()}
    return {name: (value,) for name, value in response.headers.items()}


def parse_set_cookie(line):
    """
    Turn one Set-Cookie line into a Cookie, or None when it has no name.

    Attribute names are matched case-insensitively. No cookie policy is
    applied, so expired or foreign-domain cookies are still reported.
    """
    parsed = parse_ns_headers([line])
    if not parsed:
        return None

    pairs = parsed[0]
    name = pairs[0][0]
    attributes = {key.lower() for key, _ in pairs[1:]}
    return Cookie(
        name=name,
        secure='secure' in attributes,
        http_only='httponly' in attributes,
        raw=line.strip(),
    )


def cookies_from_headers(headers):
    """Every Set-Cookie line in ``headers``, in the order received"""
    cookies = []
    for name, values in headers.items():
        if name.lower() != 'set-cookie':
            continue
        for line in values:
            cookie = parse_set_cookie(line)
            if cookie is None:
                logger.debug("Skipping Set-Cookie line without a name: %r", line)
                continue
            cookies.append(cookie)
    return cookies


def make_request(url, timeout=DEFAULT_TIMEOUT):
    """
    GET ``url`` without certificate verification and return what the
    auditors need. The session and response are closed before returning.
    """
    original_url = url
    url = normalize_url(url)

    with requests.Session() as session:
        logger.debug("GET %s (timeout=%ss, verify=False)", url, timeout)
        try:
            response = session.get(url, timeout=timeout, allow_redirects=True, verify=False)
        except requests.RequestException as e:
            raise FetchError(url, e) from e

        try:
            if response.history:
                logger.debug("Followed %d redirect(s) to %s", len(response.history), response.url)
            logger.debug("Status %s from %s", response.status_code, response.url)

            headers = headers_from_response(response)
            fetched = FetchedResponse(
                original_url=original_url,
                url=response.url,
                status_code=response.status_code,
                headers=headers,
                cookies=cookies_from_headers(headers),
                redirects=len(response.history),
            )
        finally:
            response.close()

    logger.debug("Received %d header(s) and %d cookie(s)", len(fetched.headers), len(fetched.cookies))
    return fetched
