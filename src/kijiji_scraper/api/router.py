"""Aggregate all API routers."""

from fastapi import APIRouter

from . import ads, system

api_router = APIRouter()
api_router.include_router(ads.router)
api_router.include_router(system.router)
