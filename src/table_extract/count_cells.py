"""
Count cell recognition and parsing.

A count cell is a line holding either a bare integer ("12") or a
"today (total)" pair ("12 (345)"). Anything else is a name fragment.
"""

import re

from ..exceptions import MalformedTableError
from ..models import CountGroup, make_count_group

COUNT_CELL_RE = re.compile(r"^\s*\d+(\s+\(\s*\d+\s*\))?\s*$")


def is_count_cell(line: str) -> bool:
    """Check whether a line is a data cell rather than a name fragment."""
    return COUNT_CELL_RE.match(line) is not None


def _parse_token(token: str, raw: str) -> int:
    try:
        return int(token.strip())
    except ValueError:
        raise MalformedTableError(f"failed to parse: {token!r}", raw_text=raw)


def parse_count_cell(text: str) -> CountGroup:
    """
    Parse a count cell into a CountGroup.

    Args:
        text: Raw cell text, e.g. "58500000" or "50 (100)"

    Returns:
        (value,) for a bare integer, (outside, inside) for a pair

    Raises:
        MalformedTableError: If the text is not a count cell or a token
            does not parse
    """
    if not is_count_cell(text):
        raise MalformedTableError(f"not a count cell: {text!r}", raw_text=text)

    if "(" in text:
        tokens = re.split(r"[()]", text)[:2]
        return make_count_group(_parse_token(token, text) for token in tokens)

    return make_count_group([_parse_token(text, text)])
