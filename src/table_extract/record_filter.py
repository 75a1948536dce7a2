"""
Removal of short and summary rows.
"""

import logging
from typing import Iterable, Iterator, Sequence

from ..config import Config
from ..models import Record

logger = logging.getLogger(__name__)


def filter_records(
    records: Iterable[Record],
    min_groups: int = Config.MIN_COUNT_GROUPS,
    summary_labels: Sequence[str] = Config.SUMMARY_LABELS,
) -> Iterator[Record]:
    """
    Keep real entity rows, in order.

    Args:
        records: Batched records
        min_groups: Fewest count groups a real row carries
        summary_labels: Names of subtotal/total rows

    Yields:
        Records with enough count groups and a non-summary name
    """
    for record in records:
        if len(record.counts) < min_groups:
            logger.debug(
                f"Dropping {record.name!r}: {len(record.counts)} count groups"
            )
            continue
        if record.name in summary_labels:
            logger.debug(f"Dropping summary row {record.name!r}")
            continue
        yield record
