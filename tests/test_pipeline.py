"""
Test module for the end-to-end extraction pipeline.
"""

import json

import pytest

from src.config import Config
from src.exceptions import MalformedTableError
from src.serialize import countries_to_json
from src.table_extract import extract_countries, extract_countries_with_stats


class TestExtractCountries:
    """Test cases for extract_countries over a full report."""

    @pytest.fixture
    def countries(self, report_lines):
        return extract_countries(report_lines)

    def test_country_order(self, countries):
        """Countries keep table order with the designated country first."""
        assert [c.name for c in countries] == [
            "China",
            "Republic of Korea",
            "Singapore",
            "Finland",
            "United States of America",
            "Cambodia",
        ]

    def test_designated_country(self, countries):
        """The renamed total row carries the nested provinces."""
        china = countries[0]

        assert china.to_dict() == {
            "name": "China",
            "today_confirmed": 2015,
            "today_suspected": 1500,
            "total_confirmed": 63851,
            "today_likely_exposure_china": None,
            "total_likely_exposure_china": None,
            "today_likely_exposure_in_country": None,
            "total_likely_exposure_in_country": None,
            "today_likely_exposure_other": None,
            "total_likely_exposure_other": None,
            "today_likely_exposure_unknown": None,
            "total_likely_exposure_unknown": None,
            "today_deaths": 143,
            "total_deaths": 1380,
            "regions": [
                {
                    "name": "Hubei",
                    "population": 58500000,
                    "today_confirmed": 1638,
                    "today_suspected": 1048,
                    "today_deaths": 48,
                    "total_confirmed": 48206,
                    "total_deaths": 1310,
                },
                {
                    "name": "Guangdong",
                    "population": 113460000,
                    "today_confirmed": 52,
                    "today_suspected": 1,
                    "today_deaths": 0,
                    "total_confirmed": 1294,
                    "total_deaths": 2,
                },
                {
                    "name": "Jiangsu",
                    "population": 80400000,
                    "today_confirmed": 19,
                    "today_suspected": 2,
                    "today_deaths": 0,
                    "total_confirmed": 570,
                    "total_deaths": 0,
                },
            ],
        }

    def test_subtotal_not_in_output(self, countries):
        """The subtotal row appears in neither list."""
        names = [c.name for c in countries]
        names += [r.name for r in countries[0].regions]

        assert "Subtotal for all regions" not in names
        assert "Grand total" not in names

    def test_wrapped_cell_country(self, countries):
        """Singapore's wrapped confirmed cell is read as one pair."""
        singapore = countries[2]

        assert singapore.total_confirmed == 58
        assert singapore.today_confirmed == 11
        assert singapore.total_likely_exposure_in_country == 31
        assert singapore.today_likely_exposure_in_country == 11

    def test_stats(self, report_lines):
        """Stage counts are reported."""
        countries, stats = extract_countries_with_stats(report_lines)

        assert stats.records_batched == 11
        assert stats.records_kept == 9
        assert stats.regions == 3
        assert stats.countries == len(countries) == 6
        assert stats.coalesced_lines == stats.window_lines - 1

    def test_missing_table(self):
        """A report without the province table fails."""
        with pytest.raises(MalformedTableError, match="table start marker not found"):
            extract_countries(["Situation Report - 25", "No data today"])

    def test_shape_error_produces_no_output(self, report_lines):
        """A malformed row fails the whole run."""
        broken = list(report_lines)
        broken[broken.index("1048")] = "1048 (3)"

        with pytest.raises(MalformedTableError):
            extract_countries(broken)

    def test_byte_identical_reruns(self, report_lines):
        """Two runs over the same lines serialize identically."""
        first = countries_to_json(extract_countries(report_lines)).encode("utf-8")
        second = countries_to_json(extract_countries(list(report_lines))).encode("utf-8")

        assert first == second
        assert json.loads(first)[0]["name"] == "China"

    def test_custom_config(self, report_lines):
        """Sentinels and the designated country come from the config."""

        class GuangdongFirst(Config):
            TABLE_START_SENTINEL = "Guangdong"

        countries = extract_countries(report_lines, config=GuangdongFirst)

        assert [r.name for r in countries[0].regions] == ["Guangdong", "Jiangsu"]
