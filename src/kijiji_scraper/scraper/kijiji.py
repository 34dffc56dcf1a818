"""Kijiji ad scraping orchestrator."""

from __future__ import annotations

import logging
import re

from ..schemas import AdRecord
from . import InvalidUrlError
from .client import KijijiClient, check_response
from .parser import AdParser

logger = logging.getLogger(__name__)

_AD_ID_RE = re.compile(r"/(\d+)(?:[?#].*)?$")


def parse_ad_id(url: str) -> int:
    """Extract the numeric ad id from the end of an ad URL."""
    m = _AD_ID_RE.search(url)
    if not m:
        raise InvalidUrlError(url)
    return int(m.group(1))


class KijijiScraper:
    """Fetch one ad from the mobile API and parse it."""

    def __init__(self, client: KijijiClient | None = None) -> None:
        self.client = client or KijijiClient()
        self._parser = AdParser()

    async def scrape_ad(self, url: str) -> AdRecord | None:
        """Scrape the ad at ``url``.

        Returns None if the response holds no usable ad (deleted, or not
        XML at all). Raises InvalidUrlError before any request is made and
        BanError when Kijiji refuses access.
        """
        ad_id = parse_ad_id(url)
        resp = await self.client.fetch_ad(ad_id)
        check_response(resp.status_code)

        ad = self._parser.parse(resp.text)
        if ad is None:
            logger.info("No ad found for %s (HTTP %s)", url, resp.status_code)
        return ad


async def scrape_ad(url: str) -> AdRecord | None:
    return await KijijiScraper().scrape_ad(url)
