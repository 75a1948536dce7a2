"""
Mapping of filtered records onto the region and country output schemas.

Rows before the designated country's row are its provinces. From that row on
every row is a country. The two tables lay their cells out differently:

- province rows hold six single values: population, today confirmed,
  today suspected, today deaths, total confirmed, total deaths;
- country rows hold six "total (today)" pairs: confirmed, likely exposure in
  China, other, in country, unknown, then deaths.

The designated country's own row follows the province layout.
"""

import logging
from typing import Iterable, List

from ..config import Config
from ..exceptions import MalformedTableError
from ..models import CountGroup, CountryOutput, Record, RegionOutput

logger = logging.getLogger(__name__)

# Country table column index of each likely-exposure category
EXPOSURE_COLUMNS = {"china": 1, "other": 2, "in_country": 3, "unknown": 4}


def _group(record: Record, index: int, size: int) -> CountGroup:
    if index >= len(record.counts):
        raise MalformedTableError(
            f"{record.name!r} has no count group {index}",
            raw_text=record.name,
            position=index,
        )
    group = record.counts[index]
    if len(group) < size:
        raise MalformedTableError(
            f"{record.name!r} count group {index} has {len(group)} value(s), "
            f"expected {size}: {group!r}",
            raw_text=record.name,
            position=index,
        )
    return group


def _single(record: Record, index: int) -> int:
    group = _group(record, index, 1)
    return group[0]


def _exact_single(record: Record, index: int) -> int:
    group = _group(record, index, 1)
    if len(group) != 1:
        raise MalformedTableError(
            f"{record.name!r} count group {index} should be a single value: {group!r}",
            raw_text=record.name,
            position=index,
        )
    return group[0]


def map_region(record: Record) -> RegionOutput:
    """Map a province row; every cell must be a single value."""
    values = {
        field: _exact_single(record, index)
        for index, field in enumerate(Config.REGION_FIELDS)
    }
    return RegionOutput(name=record.name, **values)


def map_designated_country(
    record: Record, regions: List[RegionOutput]
) -> CountryOutput:
    """Map the designated country's row, which uses the province layout."""
    return CountryOutput(
        name=record.name,
        today_confirmed=_single(record, 1),
        today_suspected=_single(record, 2),
        total_confirmed=_single(record, 4),
        today_likely_exposure_china=None,
        total_likely_exposure_china=None,
        today_likely_exposure_in_country=None,
        total_likely_exposure_in_country=None,
        today_likely_exposure_other=None,
        total_likely_exposure_other=None,
        today_likely_exposure_unknown=None,
        total_likely_exposure_unknown=None,
        today_deaths=_single(record, 3),
        total_deaths=_single(record, 5),
        regions=list(regions),
    )


def map_country(record: Record) -> CountryOutput:
    """Map a country row; each cell is read as (total, today)."""
    confirmed = _group(record, 0, 2)
    deaths = _group(record, 5, 2)
    exposure = {}
    for category, index in EXPOSURE_COLUMNS.items():
        total, today = _group(record, index, 2)[:2]
        exposure[f"today_likely_exposure_{category}"] = today
        exposure[f"total_likely_exposure_{category}"] = total

    return CountryOutput(
        name=record.name,
        today_confirmed=confirmed[1],
        today_suspected=None,
        total_confirmed=confirmed[0],
        today_deaths=deaths[1],
        total_deaths=deaths[0],
        regions=None,
        **exposure,
    )


def partition_records(
    records: Iterable[Record],
    designated_country: str = Config.DESIGNATED_COUNTRY,
) -> List[CountryOutput]:
    """
    Split records at the designated country and map both tables.

    Args:
        records: Filtered records in table order
        designated_country: Name of the row that ends the province table

    Returns:
        Countries in table order; the designated country carries the regions

    Raises:
        MalformedTableError: If the designated country's row is missing or a
            row does not fit its layout
    """
    regions: List[RegionOutput] = []
    countries: List[CountryOutput] = []
    in_countries = False

    for record in records:
        if record.name == designated_country:
            in_countries = True
            countries.append(map_designated_country(record, regions))
        elif in_countries:
            countries.append(map_country(record))
        else:
            regions.append(map_region(record))

    if not in_countries:
        raise MalformedTableError(
            f"designated country row not found: {designated_country!r}",
            raw_text=designated_country,
        )

    logger.info(f"Mapped {len(regions)} regions and {len(countries)} countries")
    return countries
