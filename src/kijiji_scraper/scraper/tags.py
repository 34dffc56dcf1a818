"""Prefix-tolerant element lookup for mobile API XML.

Real responses declare their xmlns prefixes, so bs4 keeps ``ad:title`` as
name "title" with prefix "ad". When a document uses a prefix without
declaring it, lxml drops the prefix and only "title" is left. Both forms
are matched here.
"""

from __future__ import annotations

from collections.abc import Callable

from bs4 import Tag


def _matcher(name: str) -> Callable[[Tag], bool]:
    prefix, _, local = name.rpartition(":")

    def match(tag: Tag) -> bool:
        if tag.name == name:
            return True
        return tag.name == local and tag.prefix in (prefix, None, "")

    return match


def find_tag(parent: Tag, name: str, **attrs) -> Tag | None:
    return parent.find(_matcher(name), **attrs)


def find_all_tags(parent: Tag, name: str) -> list[Tag]:
    return parent.find_all(_matcher(name))
