"""Test fixtures: synthetic ad XML and the sample API response."""

from datetime import datetime
from pathlib import Path

import pytest

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"

_NAMESPACES = (
    'xmlns:ad="http://www.ebayclassifiedsgroup.com/schema/ad/v1" '
    'xmlns:attr="http://www.ebayclassifiedsgroup.com/schema/attribute/v1" '
    'xmlns:pic="http://www.ebayclassifiedsgroup.com/schema/picture/v1" '
    'xmlns:types="http://www.ebayclassifiedsgroup.com/schema/types/v1"'
)


def _attribute_xml(name: str, value) -> str:
    markers = ""
    if isinstance(value, bool):
        markers = f' localized-label="{"Yes" if value else "No"}"'
    elif isinstance(value, datetime):
        markers = ' type="DATE"'

    if value is None:
        inner = ""
    elif isinstance(value, datetime):
        inner = f"<attr:value>{value.isoformat()}</attr:value>"
    elif isinstance(value, bool):
        inner = f"<attr:value>{int(value)}</attr:value>"
    else:
        inner = f"<attr:value>\n    {value}\n</attr:value>"
    return f'<attr:attribute name="{name}"{markers}>{inner}</attr:attribute>'


def build_ad_xml(
    title: str | None = None,
    description: str | None = None,
    date: datetime | None = None,
    images: list[str] | None = None,
    attributes: dict | None = None,
    price: str | None = None,
    location: str | None = None,
    ad_type: str | None = None,
    visits: int | None = None,
    declare_namespaces: bool = True,
) -> str:
    """Render a minimal mobile API <ad:ad> document with the given fields.

    With ``declare_namespaces=False`` the prefixes are used without any
    xmlns declarations.
    """
    parts = [f"<ad:ad {_NAMESPACES}>" if declare_namespaces else "<ad:ad>"]
    if title:
        parts.append(f"<ad:title>{title}</ad:title>")
    if description:
        parts.append(f"<ad:description>{description}</ad:description>")
    if date:
        parts.append(f"<ad:creation-date-time>{date.isoformat()}</ad:creation-date-time>")
    parts.append("<pic:pictures>")
    for url in images or []:
        parts.append(f'<pic:picture><pic:link rel="normal" href="{url}"/></pic:picture>')
    parts.append("</pic:pictures>")
    if price:
        parts.append(f"<ad:price><types:amount>{price}</types:amount></ad:price>")
    if location:
        parts.append(
            f"<ad:ad-address><types:full-address>{location}</types:full-address></ad:ad-address>"
        )
    if ad_type:
        parts.append(f"<ad:ad-type><ad:value>{ad_type}</ad:value></ad:ad-type>")
    if visits:
        parts.append(f"<ad:view-ad-count>{visits}</ad:view-ad-count>")
    parts.append("<attr:attributes>")
    for name, value in (attributes or {}).items():
        parts.append(_attribute_xml(name, value))
    parts.append("</attr:attributes>")
    parts.append("</ad:ad>")
    return "\n".join(parts)


@pytest.fixture()
def ad_xml():
    return build_ad_xml


@pytest.fixture()
def sample_xml() -> str:
    return (SAMPLES_DIR / "kijiji_ad.xml").read_text(encoding="utf-8")
