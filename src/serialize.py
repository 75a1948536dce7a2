"""
Serialization of extracted case tables to JSON and CSV.
"""

import json
import logging
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from .config import Config
from .models import CountryOutput

logger = logging.getLogger(__name__)


def countries_to_json(countries: Sequence[CountryOutput]) -> str:
    """
    Serialize countries as a pretty-printed JSON array.

    Keys follow the field order of the output schemas and null fields are
    written out, so identical input always gives identical text.
    """
    payload = [country.to_dict() for country in countries]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def countries_to_dataframe(countries: Sequence[CountryOutput]) -> pd.DataFrame:
    """One row per country, without the nested regions."""
    columns = [field for field in Config.COUNTRY_FIELDS if field != "regions"]
    rows = [country.to_dict() for country in countries]
    df = pd.DataFrame(rows, columns=columns)
    # Nullable integers keep missing exposure counts as empty cells, not floats
    int_columns = [c for c in columns if c != "name"]
    df[int_columns] = df[int_columns].astype("Int64")
    return df


def regions_to_dataframe(countries: Sequence[CountryOutput]) -> pd.DataFrame:
    """One row per region, with the name of the country it belongs to."""
    columns = ["country", "name", *Config.REGION_FIELDS]
    rows: List[dict] = []
    for country in countries:
        for region in country.regions or []:
            rows.append({"country": country.name, **region.to_dict()})
    df = pd.DataFrame(rows, columns=columns)
    df[list(Config.REGION_FIELDS)] = df[list(Config.REGION_FIELDS)].astype("Int64")
    return df


def write_text(text: str, output_path: Path) -> None:
    """Write serialized output in one go."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info(f"Output saved to {output_path}")


def write_csv(countries: Sequence[CountryOutput], output_path: Path) -> List[Path]:
    """
    Write the country table and, next to it, the region table.

    Args:
        countries: Extracted countries
        output_path: Country CSV path; regions go to "<stem>_regions.csv"

    Returns:
        Paths written
    """
    countries_df = countries_to_dataframe(countries)
    regions_df = regions_to_dataframe(countries)

    regions_path = output_path.with_name(f"{output_path.stem}_regions.csv")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    countries_df.to_csv(output_path, index=False)
    regions_df.to_csv(regions_path, index=False)

    logger.info(
        f"Saved {len(countries_df)} countries to {output_path} "
        f"and {len(regions_df)} regions to {regions_path}"
    )
    return [output_path, regions_path]
