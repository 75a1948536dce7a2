#!/usr/bin/env python3
"""
Main entry point for the COVID-19 situation report scraper.

This module provides a command-line interface for finding the latest WHO
situation report, extracting its case tables and writing them out.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import requests

from src.config import Config
from src.exceptions import MalformedTableError, ReportNotFoundError
from src.models import CountryOutput
from src.report_discovery import discover_latest_report_url, fetch_report
from src.serialize import countries_to_json, write_csv, write_text
from src.table_extract import extract_countries
from src.utils.pdf_download_utils import create_download_session
from src.utils.pdf_text import extract_lines, split_lines

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Set up logging configuration."""
    Config.create_directories()
    log_level = getattr(logging, level.upper())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(Config.LOGS_DIR / "sitrep_scraper.log"),
            logging.StreamHandler(sys.stderr),
        ],
    )


def emit_output(
    countries: List[CountryOutput], output_path: Optional[str], fmt: str = "json"
) -> None:
    """
    Write extracted countries to a file, or JSON to stdout.

    Args:
        countries: Extracted countries
        output_path: Destination file, stdout when None
        fmt: "json" or "csv"
    """
    if fmt == "csv":
        if not output_path:
            output_path = str(Config.OUTPUTS_DIR / "countries.csv")
        write_csv(countries, Path(output_path))
        return

    text = countries_to_json(countries)
    if output_path:
        write_text(text, Path(output_path))
    else:
        sys.stdout.write(text)


def fetch_latest(output_path: Optional[str] = None, fmt: str = "json") -> None:
    """
    Find, download and extract the latest situation report.

    Args:
        output_path: Optional output file path
        fmt: Output format
    """
    session = create_download_session()
    url = discover_latest_report_url(session)
    document = fetch_report(session, url)
    lines = extract_lines(document, Config.TEXT_EXTRACTOR)
    countries = extract_countries(lines)
    emit_output(countries, output_path, fmt)


def extract_from_pdf(
    pdf_path: str, output_path: Optional[str] = None, fmt: str = "json"
) -> None:
    """
    Extract case tables from a local report PDF.

    Args:
        pdf_path: Path to the PDF file
        output_path: Optional output file path
        fmt: Output format
    """
    logger.info(f"Extracting data from PDF: {pdf_path}")
    document = Path(pdf_path).read_bytes()
    lines = extract_lines(document, Config.TEXT_EXTRACTOR)
    countries = extract_countries(lines)
    emit_output(countries, output_path, fmt)


def extract_from_text(
    text_path: str, output_path: Optional[str] = None, fmt: str = "json"
) -> None:
    """
    Extract case tables from text already decoded from a report.

    Args:
        text_path: Path to a UTF-8 text file, one extracted line per line
        output_path: Optional output file path
        fmt: Output format
    """
    logger.info(f"Extracting data from text: {text_path}")
    lines = split_lines(Path(text_path).read_text(encoding="utf-8"))
    countries = extract_countries(lines)
    emit_output(countries, output_path, fmt)


def print_latest_url() -> None:
    """Print the URL of the latest situation report."""
    session = create_download_session()
    print(discover_latest_report_url(session))


def validate_config() -> None:
    """Validate project configuration."""
    validation = Config.validate_config()

    if validation["valid"]:
        print("✓ Configuration is valid")
    else:
        print("✗ Configuration issues found:")
        for issue in validation["issues"]:
            print(f"  - {issue}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="WHO situation report scraper - COVID-19 case table extraction"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Fetch command
    fetch_parser = subparsers.add_parser(
        "fetch", help="Download and extract the latest report"
    )
    fetch_parser.add_argument("--output", help="Output file path")
    fetch_parser.add_argument("--format", choices=["json", "csv"], default="json")

    # Extract command
    extract_parser = subparsers.add_parser("extract", help="Extract data from PDF")
    extract_parser.add_argument("pdf_path", help="Path to PDF file")
    extract_parser.add_argument("--output", help="Output file path")
    extract_parser.add_argument("--format", choices=["json", "csv"], default="json")

    # Lines command
    lines_parser = subparsers.add_parser(
        "lines", help="Extract data from pre-decoded report text"
    )
    lines_parser.add_argument("text_path", help="Path to text file")
    lines_parser.add_argument("--output", help="Output file path")
    lines_parser.add_argument("--format", choices=["json", "csv"], default="json")

    # URL command
    subparsers.add_parser("find-url", help="Print the latest report URL")

    # Config command
    subparsers.add_parser("validate-config", help="Validate configuration")

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    setup_logging(args.log_level)

    try:
        if args.command == "fetch":
            fetch_latest(args.output, args.format)
        elif args.command == "extract":
            extract_from_pdf(args.pdf_path, args.output, args.format)
        elif args.command == "lines":
            extract_from_text(args.text_path, args.output, args.format)
        elif args.command == "find-url":
            print_latest_url()
        elif args.command == "validate-config":
            validate_config()
        else:
            parser.print_help()
    except ReportNotFoundError as e:
        logger.error(f"Situation report not found: {e}")
        sys.exit(1)
    except MalformedTableError as e:
        detail = f" (at {e.raw_text!r})" if e.raw_text else ""
        logger.error(f"Extraction failed: {e}{detail}")
        sys.exit(1)
    except requests.RequestException as e:
        logger.error(f"Download failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
