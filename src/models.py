"""
Records produced by the case table extraction pipeline.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .exceptions import MalformedTableError

# One table cell: (total,) or (outside_parens, inside_parens)
CountGroup = Tuple[int, ...]


def make_count_group(values: Iterable[int]) -> CountGroup:
    """Build a CountGroup, rejecting anything but one or two values."""
    group = tuple(values)
    if len(group) not in (1, 2):
        raise MalformedTableError(
            f"Count group must hold 1 or 2 values, got {len(group)}: {group!r}"
        )
    return group


@dataclass(frozen=True)
class Record:
    """A table row: entity name plus its cells, left to right."""

    name: str
    counts: Tuple[CountGroup, ...]


@dataclass
class RegionOutput:
    """Case counts for one province of the designated country."""

    name: str
    population: int
    today_confirmed: int
    today_suspected: int
    today_deaths: int
    total_confirmed: int
    total_deaths: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class CountryOutput:
    """Case counts for one country, territory or area."""

    name: str
    today_confirmed: int
    today_suspected: Optional[int]
    total_confirmed: int
    today_likely_exposure_china: Optional[int]
    total_likely_exposure_china: Optional[int]
    today_likely_exposure_in_country: Optional[int]
    total_likely_exposure_in_country: Optional[int]
    today_likely_exposure_other: Optional[int]
    total_likely_exposure_other: Optional[int]
    today_likely_exposure_unknown: Optional[int]
    total_likely_exposure_unknown: Optional[int]
    today_deaths: int
    total_deaths: int
    regions: Optional[List[RegionOutput]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, keeping null fields and nesting regions."""
        return asdict(self)
