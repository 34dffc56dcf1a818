"""Scrape single Kijiji ads through the mobile API."""

from .ad import Ad
from .schemas import AdRecord
from .scraper import AdNotFoundError, BanError, InvalidUrlError, KijijiApiError
from .scraper.kijiji import KijijiScraper, scrape_ad

__all__ = [
    "Ad",
    "AdNotFoundError",
    "AdRecord",
    "BanError",
    "InvalidUrlError",
    "KijijiApiError",
    "KijijiScraper",
    "scrape_ad",
]
