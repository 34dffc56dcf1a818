"""HTTP client for the Kijiji mobile API."""

from __future__ import annotations

import logging

import httpx

from ..config import settings
from . import BanError, KijijiApiError

logger = logging.getLogger(__name__)

BAN_STATUS_CODE = 403

# Mimic the Android app. Kijiji only serves XML to this client.
_HEADERS = {
    "User-Agent": settings.kijiji_user_agent,
    "Accept-Language": settings.kijiji_accept_language,
    "Accept": "application/xml",
    "Connection": "close",
    "Pragma": "no-cache",
    "Authorization": settings.kijiji_authorization,
    "Host": httpx.URL(settings.kijiji_ad_url.format(0)).host,
    "Accept-Encoding": "gzip, deflate",
}


def check_response(status_code: int) -> None:
    """Raise BanError if the status code means Kijiji blocked us.

    Must run before the body is parsed: a denial page is not ad XML.
    """
    if status_code == BAN_STATUS_CODE:
        logger.warning("Kijiji denied access (HTTP %s)", status_code)
        raise BanError(status_code)


class KijijiClient:
    """Async client for single-ad lookups against the mobile API.

    A new connection is opened for every request; nothing is pooled or
    cached between calls.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = settings.scraper_request_timeout if timeout is None else timeout

    @staticmethod
    def ad_url(ad_id: int) -> str:
        return settings.kijiji_ad_url.format(ad_id)

    @property
    def headers(self) -> dict[str, str]:
        return dict(_HEADERS)

    async def fetch_ad(self, ad_id: int) -> httpx.Response:
        url = self.ad_url(ad_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.get(url, headers=self.headers)
        except httpx.HTTPError as e:
            logger.warning("Request error for %s: %s", url, e)
            raise KijijiApiError(f"Kijiji HTTP error: {e}") from e
