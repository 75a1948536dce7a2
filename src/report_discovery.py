"""
Discovery and download of the latest WHO COVID-19 situation report.
"""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .config import Config
from .exceptions import MalformedTableError, ReportNotFoundError
from .utils.pdf_download_utils import fetch_bytes, is_pdf_content

logger = logging.getLogger(__name__)


def find_latest_report_url(
    index_html: bytes,
    base_url: str = Config.BASE_URL,
    path_prefix: str = Config.REPORT_PATH_PREFIX,
) -> Optional[str]:
    """
    Find the newest situation report link on the index page.

    The index lists reports newest first, so the first anchor whose href
    starts with the report path prefix is the latest one.

    Args:
        index_html: Raw bytes of the index page
        base_url: Site root the relative href is joined to
        path_prefix: Path prefix of report documents

    Returns:
        Absolute report URL, or None if no anchor matches
    """
    soup = BeautifulSoup(index_html, "html.parser")

    for link in soup.find_all("a", href=True):
        href = link["href"]
        if href.startswith(path_prefix):
            url = f"{base_url}{href}"
            logger.info(f"Found latest situation report: {url}")
            return url

    return None


def discover_latest_report_url(session: requests.Session, config=Config) -> str:
    """
    Fetch the index page and return the latest report URL.

    Raises:
        ReportNotFoundError: If the index page links no report
        requests.RequestException: If the index page cannot be fetched
    """
    index_url = config.index_url()
    index_html = fetch_bytes(session, index_url)

    url = find_latest_report_url(
        index_html, config.BASE_URL, config.REPORT_PATH_PREFIX
    )
    if url is None:
        raise ReportNotFoundError(
            f"No link starting with {config.REPORT_PATH_PREFIX!r} on {index_url}"
        )
    return url


def fetch_report(session: requests.Session, url: str) -> bytes:
    """
    Download a report PDF into memory.

    Raises:
        MalformedTableError: If the response is not a PDF document
        requests.RequestException: If the download fails
    """
    content = fetch_bytes(session, url)
    if not is_pdf_content(content):
        raise MalformedTableError(f"Report at {url} is not a PDF document", raw_text=url)
    logger.info(f"Downloaded report: {len(content) / 1024:.1f} KB")
    return content
