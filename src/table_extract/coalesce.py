"""
Repair of "today (total)" cells wrapped onto two lines.
"""

from typing import Iterable, Iterator

from .count_cells import is_count_cell


def should_merge(prev: str, cur: str) -> bool:
    """A "(total)" line continues a bare count on the previous line."""
    return cur.startswith("(") and is_count_cell(prev) and "(" not in prev


def coalesce_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Merge wrapped count cells in a single left-to-right pass.

    "50" followed by "(100)" becomes "50 (100)". A merged line already holds
    a parenthesis, so it never absorbs a further line.

    Args:
        lines: Table lines

    Yields:
        Lines with wrapped cells joined
    """
    prev = None
    for cur in lines:
        if prev is None:
            prev = cur
        elif should_merge(prev, cur):
            prev = f"{prev} {cur}"
        else:
            yield prev
            prev = cur

    if prev is not None:
        yield prev
