"""
Grouping of table lines into (name, counts) records.

Text extraction flattens every table cell onto its own line, so a row is a
run of name fragments followed by a run of count cells. The batcher walks the
lines with an explicit cursor and cuts a record at each name/count boundary.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from ..config import Config
from ..models import CountGroup, Record
from .count_cells import is_count_cell, parse_count_cell

logger = logging.getLogger(__name__)


class RecordBatcher:
    """
    Turns the coalesced table lines into Records.

    Args:
        header_label: Name column header; when present among the fragments,
            the real name is the last fragment
        fragment_markers: Substrings marking fragments to drop
        footnote_markers: Trailing glyphs stripped from names
        substitutions: Ordered (old, new) literal name repairs
    """

    def __init__(
        self,
        header_label: str = Config.NAME_HEADER_LABEL,
        fragment_markers: Sequence[str] = Config.HEADER_FRAGMENT_MARKERS,
        footnote_markers: Sequence[str] = Config.FOOTNOTE_MARKERS,
        substitutions: Optional[Sequence[Tuple[str, str]]] = None,
    ):
        self.header_label = header_label
        self.fragment_markers = tuple(fragment_markers)
        self.footnote_markers = tuple(footnote_markers)
        if substitutions is None:
            substitutions = Config.load_name_substitutions()
        self.substitutions = list(substitutions)

    def is_noise_fragment(self, fragment: str) -> bool:
        """Repeated headers and continuation artifacts are not name parts."""
        return any(marker in fragment for marker in self.fragment_markers)

    def resolve_name(self, fragments: List[str]) -> str:
        if any(fragment == self.header_label for fragment in fragments):
            return fragments[-1]
        return " ".join(fragments)

    def clean_name(self, name: str) -> str:
        """
        Strip extraction artifacts from a resolved name.

        Drops a leading ")" and a trailing footnote marker, trims, then
        applies the substitution table in order.
        """
        if name.startswith(")"):
            name = name[1:]
        for marker in self.footnote_markers:
            if name.endswith(marker):
                name = name[: -len(marker)]
                break
        name = name.strip()
        for old, new in self.substitutions:
            name = name.replace(old, new)
        return name

    def batch(self, lines: Sequence[str]) -> Iterator[Record]:
        """
        Yield one Record per table row.

        Args:
            lines: Coalesced table lines

        Yields:
            Records with a non-empty name and at least one count group
        """
        pos = 0
        end = len(lines)

        while pos < end:
            row_start = pos

            fragments = []
            while pos < end and not is_count_cell(lines[pos]):
                if not self.is_noise_fragment(lines[pos]):
                    fragments.append(lines[pos])
                pos += 1

            name = self.clean_name(self.resolve_name(fragments)) if fragments else ""

            counts: List[CountGroup] = []
            while pos < end and is_count_cell(lines[pos]):
                counts.append(parse_count_cell(lines[pos]))
                pos += 1

            if not name or not counts:
                logger.debug(
                    f"Skipping noise at lines {row_start}-{pos}: "
                    f"name={name!r}, {len(counts)} count groups"
                )
                continue

            yield Record(name=name, counts=tuple(counts))


def batch_records(lines: Sequence[str], **kwargs) -> Iterator[Record]:
    """Batch lines into Records with a RecordBatcher built from kwargs."""
    return RecordBatcher(**kwargs).batch(lines)
