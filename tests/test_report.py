import json
from datetime import datetime, timezone

from header_audit.audit import Cookie
from header_audit.fetch import FetchedResponse
from header_audit.report import Colors, render_json, render_text
from header_audit.scan import audit_response

TESTED_ON = datetime(2024, 3, 1, 12, 30, 0, tzinfo=timezone.utc)


def build_report():
    response = FetchedResponse(
        original_url='https://site.test',
        url='https://site.test/',
        status_code=200,
        headers={'x-frame-options': ('DENY',), 'Server': ('nginx',)},
        cookies=[
            Cookie('sid', secure=True, http_only=False, raw='sid=1; Path=/; Secure'),
            Cookie('pref', secure=True, http_only=True, raw='pref=2; Path=/; Secure; HttpOnly'),
        ],
    )
    return audit_response(response, tested_on=TESTED_ON)


def test_plain_text_report_layout():
    text = render_text(build_report(), color=False)

    assert 'Checking https://site.test for security configuration issues' in text
    assert 'Tested on: Fri, 01 Mar 2024 12:30:00 UTC' in text
    assert '[✔️] X-Frame-Options [DENY]' in text
    assert '[✖️] Strict-Transport-Security (Not present)' in text
    assert 'Server: nginx' in text
    assert 'sid: Missing HttpOnly attribute;' in text
    assert 'pref:' not in text
    assert 'sid=1; Path=/; Secure' in text
    assert Colors.RESET not in text

    banners = ['== HEADER AUDIT ==', '== RAW HEADERS ==', '== COOKIE AUDIT ==', '== RAW COOKIES ==']
    positions = [text.index(banner) for banner in banners]
    assert positions == sorted(positions)


def test_details_adds_explanations():
    report = build_report()

    assert 'clickjacking' not in render_text(report, details=False, color=False)
    assert 'clickjacking' in render_text(report, details=True, color=False)


def test_colored_report_marks_presence_and_absence():
    text = render_text(build_report(), color=True)

    assert f"{Colors.GREEN}[✔️] X-Frame-Options [DENY]{Colors.RESET}" in text
    assert f"{Colors.RED}[✖️] Feature-Policy (Not present){Colors.RESET}" in text


def test_json_report():
    document = json.loads(render_json(build_report()))

    assert document['url'] == 'https://site.test'
    assert document['final_url'] == 'https://site.test/'
    assert document['status_code'] == 200
    present = [row['name'] for row in document['headers'] if row['present']]
    assert present == ['X-Frame-Options']
    assert len(document['headers']) == 7
    assert document['raw_headers']['Server'] == ['nginx']
    assert document['cookies'][0] == {'name': 'sid', 'missing_secure': False, 'missing_http_only': True}
    assert 'explanation' not in document['headers'][0]


def test_json_report_with_details():
    document = json.loads(render_json(build_report(), details=True))

    assert all(row['explanation'] for row in document['headers'])
