"""Parser for Kijiji mobile API ad XML.

The API answers with an <ad:ad> document. Only title and creation date are
required; every other field is optional and silently skipped when missing
or malformed.
"""

from __future__ import annotations

import logging
import math

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from .. import helpers
from ..schemas import AdRecord, AttributeValue
from .attributes import decode_attribute
from .tags import find_all_tags, find_tag

logger = logging.getLogger(__name__)


def _text(parent: Tag, name: str) -> str | None:
    el = find_tag(parent, name)
    if el is None:
        return None
    return el.get_text().strip()


class AdParser:
    """Build an AdRecord from the XML of a single ad."""

    def parse(self, xml: str) -> AdRecord | None:
        # lxml recovers from bad markup; non-XML text gives an empty tree
        try:
            soup = BeautifulSoup(xml, "xml")
        except ParserRejectedMarkup as e:
            logger.warning("Failed to parse ad XML: %s", e)
            return None
        return self.extract(soup)

    def extract(self, soup: BeautifulSoup) -> AdRecord | None:
        ad = find_tag(soup, "ad:ad")
        if ad is None:
            logger.info("No <ad:ad> element in response")
            return None

        title = _text(ad, "ad:title")
        date = helpers.parse_iso_datetime(_text(ad, "ad:creation-date-time"))
        if not title or date is None:
            logger.info("Ad is missing a title or creation date")
            return None

        description = helpers.clean_ad_description(_text(ad, "ad:description") or "")
        images = self._parse_images(ad)

        attributes: dict[str, AttributeValue] = {}
        attributes.update(self._parse_custom_attributes(ad))
        attributes.update(self._parse_known_attributes(ad))

        return AdRecord(
            title=title,
            description=description,
            date=date,
            image=images[0] if images else "",
            images=images,
            attributes=attributes,
        )

    @staticmethod
    def _parse_images(ad: Tag) -> list[str]:
        images: list[str] = []
        for picture in find_all_tags(ad, "pic:picture"):
            link = find_tag(picture, "pic:link", rel="normal") or find_tag(picture, "pic:link")
            url = link.get("href") if link is not None else None
            if not url:
                continue
            images.append(helpers.get_large_image_url(url))
        return images

    @staticmethod
    def _parse_known_attributes(ad: Tag) -> dict[str, AttributeValue]:
        attrs: dict[str, AttributeValue] = {}

        price_el = find_tag(ad, "ad:price")
        amount = _text(price_el, "types:amount") if price_el is not None else None
        if amount:
            try:
                price = float(amount)
            except ValueError:
                price = None
            if price is not None and math.isfinite(price):
                attrs["price"] = price
            else:
                logger.debug("Ignoring non-numeric price: %r", amount)

        address_el = find_tag(ad, "ad:ad-address")
        location = _text(address_el, "types:full-address") if address_el is not None else None
        if location:
            attrs["location"] = location

        type_el = find_tag(ad, "ad:ad-type")
        ad_type = _text(type_el, "ad:value") if type_el is not None else None
        if ad_type:
            attrs["type"] = ad_type

        visits = _text(ad, "ad:view-ad-count")
        if visits:
            try:
                attrs["visits"] = int(visits)
            except ValueError:
                logger.debug("Ignoring non-integer view count: %r", visits)

        return attrs

    @staticmethod
    def _parse_custom_attributes(ad: Tag) -> dict[str, AttributeValue]:
        attrs: dict[str, AttributeValue] = {}
        container = find_tag(ad, "attr:attributes")
        if container is None:
            return attrs

        for node in find_all_tags(container, "attr:attribute"):
            name = node.get("name")
            if not name:
                continue
            attrs[name] = decode_attribute(node).value
        return attrs
