"""Single-ad scrape endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from ..schemas import AdRecord
from ..scraper import BanError, InvalidUrlError, KijijiApiError
from ..scraper.kijiji import KijijiScraper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["ads"])


def _get_scraper() -> KijijiScraper:
    from ..main import app_state
    return app_state["scraper"]


@router.get("/ads", response_model=AdRecord)
async def get_ad(url: str = Query(..., min_length=1, description="Kijiji ad URL")):
    scraper = _get_scraper()
    try:
        ad = await scraper.scrape_ad(url)
    except InvalidUrlError as e:
        raise HTTPException(400, str(e))
    except BanError as e:
        raise HTTPException(503, str(e))
    except KijijiApiError as e:
        logger.warning("Kijiji scrape failed for '%s': %s", url, e)
        raise HTTPException(502, f"Kijiji request failed: {e}")
    if ad is None:
        raise HTTPException(404, "Ad not found")
    return ad
