"""
Exceptions raised by the situation report scraper.
"""

from typing import Optional


class SitrepScraperError(Exception):
    """Base class for scraper failures."""


class ReportNotFoundError(SitrepScraperError):
    """The index page holds no link to a situation report."""


class MalformedTableError(SitrepScraperError, ValueError):
    """
    The case table text does not have the expected shape.

    Attributes:
        raw_text: Offending line or cell text, when there is one
        position: Index into the line or group sequence, when known
    """

    def __init__(
        self,
        message: str,
        raw_text: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.raw_text = raw_text
        self.position = position
