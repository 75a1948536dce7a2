"""
Configuration settings for the COVID-19 situation report scraper.

Every literal the extraction depends on (URLs, table sentinels, summary
labels, the name repair table and the output field orders) lives here so a
report layout change only means editing this module or the environment.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Configuration class for the project."""

    # Source website
    BASE_URL = os.getenv("WHO_BASE_URL", "https://www.who.int")
    INDEX_PATH = os.getenv(
        "WHO_INDEX_PATH",
        "/emergencies/diseases/novel-coronavirus-2019/situation-reports/",
    )
    REPORT_PATH_PREFIX = os.getenv(
        "WHO_REPORT_PATH_PREFIX",
        "/docs/default-source/coronaviruse/situation-reports/",
    )

    # HTTP Configuration
    REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))
    MAX_RETRIES = int(os.getenv("MAX_RETRIES", "3"))
    USER_AGENT = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/118.0.0.0 Safari/537.36",
    )

    # PDF text decoding backend: pypdf2 | pdfplumber
    TEXT_EXTRACTOR = os.getenv("TEXT_EXTRACTOR", "pypdf2").lower()

    # Table window sentinels (start line is kept, end line is dropped)
    TABLE_START_SENTINEL = os.getenv("TABLE_START_SENTINEL", "Hubei")
    TABLE_END_SENTINEL = os.getenv("TABLE_END_SENTINEL", "Case classifications are")

    # The country whose rows close the province table and which nests them
    DESIGNATED_COUNTRY = os.getenv("DESIGNATED_COUNTRY", "China")

    # Header label of the name column in the country table
    NAME_HEADER_LABEL = "Country/Territory/Area"

    # Name fragments containing any of these are repeated headers or artifacts
    HEADER_FRAGMENT_MARKERS: Tuple[str, ...] = ("Region", " - ", "Unimplemented?")

    # Trailing footnote glyphs ("ยง" is how some decoders render the section sign)
    FOOTNOTE_MARKERS: Tuple[str, ...] = ("§", "ยง")

    # Rows that summarise other rows
    SUMMARY_LABELS: Tuple[str, ...] = ("Subtotal for all regions", "Grand total")

    MIN_COUNT_GROUPS = 6

    # Literal repairs for names split or mislabelled by text extraction.
    # Applied in order; override with a JSON object file via NAME_SUBSTITUTIONS_FILE.
    NAME_SUBSTITUTIONS: List[Tuple[str, str]] = [
        ("Total", "China"),
        ("Uni ted", "United"),
        ("Finlan d", "Finland"),
        ("Jian gsu", "Jiangsu"),
        ("South - ", ""),
    ]
    NAME_SUBSTITUTIONS_FILE = os.getenv("NAME_SUBSTITUTIONS_FILE", "")

    # Output schemas
    REGION_FIELDS: Tuple[str, ...] = (
        "population",
        "today_confirmed",
        "today_suspected",
        "today_deaths",
        "total_confirmed",
        "total_deaths",
    )
    COUNTRY_FIELDS: Tuple[str, ...] = (
        "name",
        "today_confirmed",
        "today_suspected",
        "total_confirmed",
        "today_likely_exposure_china",
        "total_likely_exposure_china",
        "today_likely_exposure_in_country",
        "total_likely_exposure_in_country",
        "today_likely_exposure_other",
        "total_likely_exposure_other",
        "today_likely_exposure_unknown",
        "total_likely_exposure_unknown",
        "today_deaths",
        "total_deaths",
        "regions",
    )

    # Paths
    PROJECT_ROOT = Path(__file__).parent.parent
    OUTPUTS_DIR = Path(os.getenv("OUTPUTS_DIR", str(PROJECT_ROOT / "outputs")))
    LOGS_DIR = Path(os.getenv("LOGS_DIR", str(PROJECT_ROOT / "logs")))

    @classmethod
    def index_url(cls) -> str:
        """Full URL of the situation report index page."""
        return f"{cls.BASE_URL}{cls.INDEX_PATH}"

    @classmethod
    def create_directories(cls):
        """Create necessary directories."""
        for directory in [cls.OUTPUTS_DIR, cls.LOGS_DIR]:
            directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def load_name_substitutions(cls) -> List[Tuple[str, str]]:
        """
        Get the ordered name substitution table.

        When NAME_SUBSTITUTIONS_FILE is set, it must point at a JSON object
        mapping each literal to its replacement; key order is kept.

        Returns:
            List of (old, new) pairs
        """
        if not cls.NAME_SUBSTITUTIONS_FILE:
            return list(cls.NAME_SUBSTITUTIONS)

        with open(cls.NAME_SUBSTITUTIONS_FILE, encoding="utf-8") as f:
            table = json.load(f)

        if not isinstance(table, dict):
            raise ValueError(
                f"{cls.NAME_SUBSTITUTIONS_FILE} must contain a JSON object"
            )
        return [(str(old), str(new)) for old, new in table.items()]

    @classmethod
    def validate_config(cls) -> Dict[str, Any]:
        """
        Validate configuration settings.

        Returns:
            Dictionary with validation results
        """
        issues = []

        if not cls.BASE_URL.startswith(("http://", "https://")):
            issues.append(f"Invalid WHO_BASE_URL: {cls.BASE_URL}")

        if not cls.REPORT_PATH_PREFIX.startswith("/"):
            issues.append(
                f"WHO_REPORT_PATH_PREFIX must start with '/': {cls.REPORT_PATH_PREFIX}"
            )

        if not cls.TABLE_START_SENTINEL or not cls.TABLE_END_SENTINEL:
            issues.append("Table sentinels must not be empty")

        if not cls.DESIGNATED_COUNTRY:
            issues.append("DESIGNATED_COUNTRY not set")

        if cls.TEXT_EXTRACTOR not in ["pypdf2", "pdfplumber"]:
            issues.append(f"Invalid TEXT_EXTRACTOR: {cls.TEXT_EXTRACTOR}")

        if cls.REQUEST_TIMEOUT <= 0:
            issues.append(f"Invalid REQUEST_TIMEOUT: {cls.REQUEST_TIMEOUT}")

        if cls.MAX_RETRIES < 0:
            issues.append(f"Invalid MAX_RETRIES: {cls.MAX_RETRIES}")

        if cls.NAME_SUBSTITUTIONS_FILE and not Path(cls.NAME_SUBSTITUTIONS_FILE).exists():
            issues.append(
                f"NAME_SUBSTITUTIONS_FILE not found: {cls.NAME_SUBSTITUTIONS_FILE}"
            )

        return {"valid": len(issues) == 0, "issues": issues}
