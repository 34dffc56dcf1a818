"""FastAPI application exposing the Kijiji ad scraper."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.router import api_router
from .config import settings
from .scraper.kijiji import KijijiScraper

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Shared state accessible by API endpoints
app_state: dict = {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_state["scraper"] = KijijiScraper()
    logger.info("kijiji-scraper started (endpoint %s)", settings.kijiji_ad_url)

    yield

    app_state.clear()
    logger.info("kijiji-scraper stopped")


app = FastAPI(
    title="kijiji-scraper",
    description="Scrape single Kijiji ads through the mobile API",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(api_router)
