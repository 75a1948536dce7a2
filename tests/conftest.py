"""
Shared fixtures: report text as PyPDF2 renders the case tables.
"""

import pytest

PREAMBLE = [
    "Coronavirus disease 2019 (COVID-19)",
    "Situation Report - 25",
    "Table 1. Confirmed and suspected cases of COVID-19 acquired in China",
    "Province/",
    "Region/",
    "City",
    "Population",
    "(10000s)",
]

PROVINCE_TABLE = [
    "Hubei", "58500000", "1638", "1048", "48", "48206", "1310",
    "Guangdong", "113460000", "52", "1", "0", "1294", "2",
    "Jian", "gsu", "80400000", "19", "2", "0", "570", "0",
    "Subtotal for all regions", "1341550000", "377", "452", "95", "15645", "70",
    "Total", "1400050000", "2015", "1500", "143", "63851", "1380",
]

COUNTRY_TABLE = [
    "Table 2. Countries, territories or areas with reported confirmed cases",
    "Western Pacific Region",
    "Country/Territory/Area",
    "Republic of Korea",
    "28 (0)", "13 (0)", "3 (0)", "10 (0)", "2 (0)", "0 (0)",
    "Singapore",
    "58", "(11)", "24 (0)", "3 (0)", "31 (11)", "0 (0)", "0 (0)",
    "European Region",
    "Finlan", "d",
    "1 (0)", "1 (0)", "0 (0)", "0 (0)", "0 (0)", "0 (0)",
    "Region of the Americas",
    "Uni", "ted States of America",
    "15 (0)", "8 (0)", "1 (0)", "2 (0)", "4 (0)", "0 (0)",
    "Unimplemented?",
    "Cambodia§",
    "1 (0)", "1 (0)", "0 (0)", "0 (0)", "0 (0)", "0 (0)",
    "Grand total",
    "64441 (2056)", "13 (0)", "8 (0)", "43 (11)", "6 (0)", "1380 (143)",
    "Notes",
]

EPILOGUE = [
    "Case classifications are",
    "based on WHO case definitions for COVID-19.",
    "Recommendations and advice for the public",
]


@pytest.fixture
def report_lines():
    """Full report text lines, preamble and epilogue included."""
    return PREAMBLE + PROVINCE_TABLE + COUNTRY_TABLE + EPILOGUE


@pytest.fixture
def table_lines():
    """Lines of the table window only."""
    return PROVINCE_TABLE + COUNTRY_TABLE
