"""Text and URL helpers shared by the ad parser."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from bs4 import BeautifulSoup

# Kijiji/eBay image URLs end in "$_<size>.JPG" where <size> selects the
# resolution. 57 is the largest (up to 1024x1024).
_IMAGE_SIZE_RE = re.compile(r"\$_\d+\.(?:JPG|PNG)$")
LARGE_IMAGE_SUFFIX = "$_57.JPG"


def clean_ad_description(text: str) -> str:
    """Strip HTML from an ad description, leaving plain text.

    Some descriptions carry markup, including <label> elements for hidden
    content which are dropped entirely.
    """
    if not text:
        return ""
    soup = BeautifulSoup(text, "lxml")
    for label in soup.find_all("label"):
        label.decompose()
    return soup.get_text().strip()


def get_large_image_url(url: str) -> str:
    """Return the full-resolution variant of a Kijiji image URL."""
    return _IMAGE_SIZE_RE.sub(lambda _: LARGE_IMAGE_SUFFIX, url)


def parse_iso_datetime(s: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive timestamps are taken to be UTC. Returns None if unparseable.
    """
    if not s:
        return None
    s = s.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
