"""
Packaging for the WHO COVID-19 situation report scraper.

Install with:
    pip install -e .

For development:
    pip install -e ".[test]"
"""

from setuptools import setup, find_packages

setup(
    name="covid-sitrep-scraper",
    version="0.1.0",
    description="Case table extraction from WHO COVID-19 situation reports",
    packages=find_packages(include=["src", "src.*"]),
    python_requires=">=3.10",
    install_requires=[
        "beautifulsoup4",
        "pandas",
        "pdfplumber",
        "PyPDF2>=3.0",
        "python-dotenv",
        "requests",
        "urllib3",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sitrep-scraper=src.main:main",
        ],
    },
)
