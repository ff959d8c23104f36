"""
Rendering of audit reports.

The text renderer reproduces the console layout (banners, tick/cross
lines, raw dumps). Colours are optional so the same text can be written
to a file. The JSON renderer emits one single-line document per target (JSON Lines).
"""

import json


class Colors:
    """ANSI color codes for terminal output"""
    GREEN = '\033[1m\033[32m'
    RED = '\033[1m\033[31m'
    YELLOW = '\033[1m\033[33m'
    CYAN = '\033[1m\033[36m'
    BLUE = '\033[1m\033[34m'
    MAGENTA = '\033[1m\033[35m'
    BANNER = '\033[30m\033[47m'  # Black text, white background
    RESET = '\033[0m'


SEPARATOR = '*********'

RFC1123 = '%a, %d %b %Y %H:%M:%S %Z'


def paint(text, color, enabled=True):
    if not enabled:
        return text
    return f"{color}{text}{Colors.RESET}"


def format_values(values):
    return '[' + ' '.join(values) + ']'


def render_intro(url, tested_on, color=True):
    """The lines announcing a target, printed before it is requested"""
    return '\n'.join([
        '',
        f"Checking {paint(url, Colors.MAGENTA, color)} for security configuration issues",
        f"Tested on: {paint(tested_on.strftime(RFC1123), Colors.BLUE, color)}",
        '',
    ])


def render_header_audit(result, details=False, color=True):
    lines = ['', paint('== HEADER AUDIT ==', Colors.BANNER, color)]

    for finding in result.findings:
        if finding.present:
            line = paint(f"[✔️] {finding.catalog_name} {format_values(finding.matched_values)}", Colors.GREEN, color)
        else:
            line = paint(f"[✖️] {finding.catalog_name} (Not present)", Colors.RED, color)

        if details:
            line += f" ➡ {paint(finding.explanation, Colors.YELLOW, color)}"
        lines.append(line)

    lines.append('')
    lines.append(paint('== RAW HEADERS ==', Colors.BANNER, color))
    for name, values in result.raw_headers.items():
        label = paint(f"{name}:", Colors.CYAN, color)
        for value in values:
            lines.append(f"{label} {value}")
    return lines


def render_cookie_audit(result, color=True):
    lines = ['', paint('== COOKIE AUDIT ==', Colors.BANNER, color)]

    for finding in result.flagged:
        missing = ' '.join(
            f"Missing {paint(attribute, Colors.RED, color)} attribute;"
            for attribute in finding.missing_attributes
        )
        lines.append(f"{paint(finding.name, Colors.CYAN, color)}: {missing}")

    lines.append('')
    lines.append(paint('== RAW COOKIES ==', Colors.BANNER, color))
    lines.extend(result.raw_cookies)
    return lines


def render_audit(report, details=False, color=True):
    """Render the audit sections of one target's report"""
    lines = render_header_audit(report.headers, details, color)
    lines.extend(render_cookie_audit(report.cookies, color))
    return '\n'.join(lines)


def render_text(report, details=False, color=True):
    """Render one target's report as console text"""
    intro = render_intro(report.response.original_url, report.tested_on, color)
    return intro + '\n' + render_audit(report, details, color)


def report_to_dict(report, details=False):
    headers = []
    for finding in report.headers.findings:
        row = {
            'name': finding.catalog_name,
            'present': finding.present,
            'values': list(finding.matched_values),
        }
        if details:
            row['explanation'] = finding.explanation
        headers.append(row)

    cookies = [
        {
            'name': finding.name,
            'missing_secure': finding.missing_secure,
            'missing_http_only': finding.missing_http_only,
        }
        for finding in report.cookies.findings
    ]

    return {
        'url': report.response.original_url,
        'final_url': report.response.url,
        'status_code': report.response.status_code,
        'tested_on': report.tested_on.strftime(RFC1123),
        'headers': headers,
        'raw_headers': {name: list(values) for name, values in report.headers.raw_headers.items()},
        'cookies': cookies,
        'raw_cookies': list(report.cookies.raw_cookies),
    }


def render_json(report, details=False):
    """One JSON document on a single line, so a run prints JSON Lines"""
    return json.dumps(report_to_dict(report, details), ensure_ascii=False)


def render_error_json(url, error):
    return json.dumps({'url': url, 'error': str(error)}, ensure_ascii=False)
