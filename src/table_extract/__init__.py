"""
Case table extraction from the text of a WHO situation report.

Stages, in order: window selection, wrapped-cell coalescing, record
batching, record filtering, and partitioning into the output schemas.
"""

from .batcher import RecordBatcher, batch_records
from .coalesce import coalesce_lines
from .count_cells import is_count_cell, parse_count_cell
from .pipeline import PipelineStats, extract_countries, extract_countries_with_stats
from .record_filter import filter_records
from .schema_mapper import (
    map_country,
    map_designated_country,
    map_region,
    partition_records,
)
from .window import select_table_window

__all__ = [
    "RecordBatcher",
    "batch_records",
    "coalesce_lines",
    "is_count_cell",
    "parse_count_cell",
    "PipelineStats",
    "extract_countries",
    "extract_countries_with_stats",
    "filter_records",
    "map_country",
    "map_designated_country",
    "map_region",
    "partition_records",
    "select_table_window",
]
