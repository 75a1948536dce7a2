#!/usr/bin/env python3
"""
Shared utilities for fetching WHO pages and report PDFs.

All downloads are held in memory; the extraction pipeline only ever sees
the decoded text lines.
"""

import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import Config

logger = logging.getLogger(__name__)


def create_download_session(
    user_agent: Optional[str] = None, max_retries: Optional[int] = None
) -> requests.Session:
    """
    Create a requests session configured for WHO downloads.

    Args:
        user_agent: Browser user agent string (defaults to Config.USER_AGENT)
        max_retries: Retries for transient HTTP failures (defaults to Config.MAX_RETRIES)

    Returns:
        Configured requests.Session with retry strategy and browser-like headers
    """
    session = requests.Session()

    session.headers.update(
        {
            "User-Agent": user_agent or Config.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,application/pdf,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "Connection": "keep-alive",
        }
    )

    retry_strategy = Retry(
        total=Config.MAX_RETRIES if max_retries is None else max_retries,
        status_forcelist=[429, 500, 502, 503, 504],
        backoff_factor=2,
        respect_retry_after_header=True,
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    return session


def is_pdf_content(content: bytes, min_size_bytes: int = 1024) -> bool:
    """
    Check that downloaded bytes look like a PDF document.

    Args:
        content: Downloaded bytes
        min_size_bytes: Smallest size considered a real document

    Returns:
        True if content appears valid, False if truncated or not a PDF
    """
    if len(content) < min_size_bytes:
        logger.warning(f"Downloaded content is too small ({len(content)} bytes)")
        return False

    if not content.startswith(b"%PDF"):
        logger.warning("Downloaded content does not have a valid PDF header")
        return False

    return True


def fetch_bytes(
    session: requests.Session, url: str, timeout: Optional[int] = None
) -> bytes:
    """
    GET a URL and return the response body.

    Raises:
        requests.RequestException: On connection failure or HTTP error status
    """
    logger.info(f"Fetching {url}")
    response = session.get(
        url, timeout=timeout or Config.REQUEST_TIMEOUT, allow_redirects=True
    )
    response.raise_for_status()
    logger.debug(f"Fetched {len(response.content)} bytes from {url}")
    return response.content
