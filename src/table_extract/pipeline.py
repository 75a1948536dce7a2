"""
End-to-end case table extraction over report text lines.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Tuple

from ..config import Config
from ..models import CountryOutput
from .batcher import RecordBatcher
from .coalesce import coalesce_lines
from .record_filter import filter_records
from .schema_mapper import partition_records
from .window import select_table_window

logger = logging.getLogger(__name__)


@dataclass
class PipelineStats:
    """Line and record counts of one extraction run."""

    window_lines: int = 0
    coalesced_lines: int = 0
    records_batched: int = 0
    records_kept: int = 0
    regions: int = 0
    countries: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return asdict(self)


def extract_countries_with_stats(
    lines: Iterable[str], config=Config
) -> Tuple[List[CountryOutput], PipelineStats]:
    """
    Run the extraction pipeline and report stage counts.

    Args:
        lines: Report text lines in document order
        config: Configuration class supplying sentinels and tables

    Returns:
        Tuple of (countries, stats)

    Raises:
        MalformedTableError: If the table cannot be extracted
    """
    stats = PipelineStats()

    window = select_table_window(
        lines, config.TABLE_START_SENTINEL, config.TABLE_END_SENTINEL
    )
    stats.window_lines = len(window)

    coalesced = list(coalesce_lines(window))
    stats.coalesced_lines = len(coalesced)

    batcher = RecordBatcher(
        header_label=config.NAME_HEADER_LABEL,
        fragment_markers=config.HEADER_FRAGMENT_MARKERS,
        footnote_markers=config.FOOTNOTE_MARKERS,
        substitutions=config.load_name_substitutions(),
    )
    records = list(batcher.batch(coalesced))
    stats.records_batched = len(records)

    kept = list(
        filter_records(
            records,
            min_groups=config.MIN_COUNT_GROUPS,
            summary_labels=config.SUMMARY_LABELS,
        )
    )
    stats.records_kept = len(kept)

    countries = partition_records(kept, config.DESIGNATED_COUNTRY)
    stats.countries = len(countries)
    stats.regions = sum(len(c.regions) for c in countries if c.regions is not None)

    logger.info(f"Extraction stats: {stats.to_dict()}")
    return countries, stats


def extract_countries(lines: Iterable[str], config=Config) -> List[CountryOutput]:
    """Run the extraction pipeline over report text lines."""
    countries, _ = extract_countries_with_stats(lines, config)
    return countries
