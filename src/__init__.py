"""
WHO COVID-19 situation report scraper.
"""

__version__ = "0.1.0"
