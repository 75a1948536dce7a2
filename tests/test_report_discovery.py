"""
Test module for situation report discovery and download.
"""

from unittest.mock import Mock

import pytest
import requests

from src.config import Config
from src.exceptions import MalformedTableError, ReportNotFoundError
from src.report_discovery import (
    discover_latest_report_url,
    fetch_report,
    find_latest_report_url,
)

INDEX_HTML = b"""
<html><body>
  <a href="/emergencies/diseases/novel-coronavirus-2019">Overview</a>
  <a name="top">Top</a>
  <a href="/docs/default-source/coronaviruse/situation-reports/20200214-sitrep-25-covid-19.pdf?sfvrsn=61dda7d_2">
    Situation report - 25</a>
  <a href="/docs/default-source/coronaviruse/situation-reports/20200213-sitrep-24-covid-19.pdf?sfvrsn=9a7406a4_4">
    Situation report - 24</a>
</body></html>
"""

LATEST_URL = (
    "https://www.who.int/docs/default-source/coronaviruse/situation-reports/"
    "20200214-sitrep-25-covid-19.pdf?sfvrsn=61dda7d_2"
)


def make_session(content: bytes, status_error: Exception = None) -> Mock:
    """Mock session whose GET returns the given body."""
    response = Mock()
    response.content = content
    if status_error:
        response.raise_for_status.side_effect = status_error
    session = Mock()
    session.get.return_value = response
    return session


class TestFindLatestReportUrl:
    """Test cases for find_latest_report_url."""

    def test_first_matching_link(self):
        """The first report link is qualified against the base URL."""
        assert find_latest_report_url(INDEX_HTML) == LATEST_URL

    def test_no_matching_link(self):
        """No report link is a None result, not an error."""
        html = b'<html><a href="/news">News</a></html>'

        assert find_latest_report_url(html) is None

    def test_custom_prefix_and_base(self):
        """Base URL and path prefix are parameters."""
        html = b'<a href="/reports/week-7.pdf">Week 7</a>'

        url = find_latest_report_url(html, "https://example.org", "/reports/")

        assert url == "https://example.org/reports/week-7.pdf"


class TestDiscoverLatestReportUrl:
    """Test cases for discover_latest_report_url."""

    def test_fetches_index_page(self):
        """The configured index page is fetched and scanned."""
        session = make_session(INDEX_HTML)

        assert discover_latest_report_url(session) == LATEST_URL
        assert session.get.call_args[0][0] == Config.index_url()

    def test_not_found(self):
        """An index without report links raises ReportNotFoundError."""
        session = make_session(b"<html></html>")

        with pytest.raises(ReportNotFoundError):
            discover_latest_report_url(session)

    def test_lookup_failure_is_distinct(self):
        """HTTP failures propagate as request errors."""
        session = make_session(b"", requests.HTTPError("503 Server Error"))

        with pytest.raises(requests.HTTPError):
            discover_latest_report_url(session)


class TestFetchReport:
    """Test cases for fetch_report."""

    def test_returns_pdf_bytes(self):
        """A PDF body is returned unchanged."""
        body = b"%PDF-1.5\n" + b"0" * 2048
        session = make_session(body)

        assert fetch_report(session, LATEST_URL) == body

    def test_rejects_non_pdf(self):
        """An HTML error page is not accepted as a report."""
        session = make_session(b"<html>" + b" " * 2048 + b"</html>")

        with pytest.raises(MalformedTableError):
            fetch_report(session, LATEST_URL)
