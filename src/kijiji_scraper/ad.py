"""Ad object wrapping a scraped AdRecord with its URL."""

from __future__ import annotations

import logging
from datetime import datetime

from .scraper import AdNotFoundError
from .scraper.kijiji import scrape_ad
from .schemas import AdRecord, AttributeValue

logger = logging.getLogger(__name__)


class Ad:
    """A Kijiji ad, possibly not yet scraped.

    Unscraped ads only know their URL. ``scrape()`` fills in the rest.
    """

    def __init__(self, url: str, info: AdRecord | None = None, scraped: bool = False) -> None:
        self.url = url
        self.info = info
        self._scraped = scraped and info is not None

    @classmethod
    async def get(cls, url: str) -> Ad:
        ad = cls(url)
        await ad.scrape()
        return ad

    async def scrape(self) -> None:
        info = await scrape_ad(self.url)
        if info is None:
            raise AdNotFoundError(self.url)
        self.info = info
        self._scraped = True

    def is_scraped(self) -> bool:
        return self._scraped

    @property
    def title(self) -> str:
        return self.info.title if self.info else ""

    @property
    def date(self) -> datetime | None:
        return self.info.date if self.info else None

    @property
    def attributes(self) -> dict[str, AttributeValue]:
        return self.info.attributes if self.info else {}

    def __str__(self) -> str:
        lines: list[str] = []
        heading = ""
        if self.date is not None:
            heading = self.date.strftime("[%m/%d/%Y @ %H:%M] ")
        if self.title:
            lines.append(heading + self.title)
        lines.append(self.url)
        for name, value in self.attributes.items():
            lines.append(f"* {name}: {value}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Ad(url={self.url!r}, scraped={self._scraped})"
