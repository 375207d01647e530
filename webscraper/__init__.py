"""webscraper: polite single-page scraping with CSS selectors."""

__version__ = "0.1.0"
