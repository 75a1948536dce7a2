"""
Selection of the case table region within the extracted report text.
"""

import logging
from typing import Iterable, List

from ..exceptions import MalformedTableError

logger = logging.getLogger(__name__)


def select_table_window(
    lines: Iterable[str], start_sentinel: str, end_sentinel: str
) -> List[str]:
    """
    Keep the lines between the table start and end sentinels.

    The start sentinel line is kept since it is the first row's name; the end
    sentinel line and everything after it are dropped. Lines are trimmed and
    blank lines skipped.

    Args:
        lines: Report text lines in document order
        start_sentinel: Line that opens the province table
        end_sentinel: Line that follows the country table

    Returns:
        Lines of the table region

    Raises:
        MalformedTableError: If the start sentinel never appears
    """
    window = []
    started = False
    ended = False

    for line in lines:
        line = line.strip()
        if not line:
            continue
        if not started:
            if line != start_sentinel:
                continue
            started = True
        if line == end_sentinel:
            ended = True
            break
        window.append(line)

    if not started:
        raise MalformedTableError(
            f"table start marker not found: {start_sentinel!r}",
            raw_text=start_sentinel,
        )

    if not ended:
        logger.warning(
            f"Table end marker {end_sentinel!r} not found, keeping all remaining lines"
        )

    logger.debug(f"Selected {len(window)} table lines")
    return window
