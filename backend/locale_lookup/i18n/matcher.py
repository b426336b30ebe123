from typing import Iterable


def parse_accept_language(header: str) -> list[str]:
    """Split an Accept-Language header into locale tags, left to right.

    Quality weights are dropped, not used for sorting: header order is
    preference order.
    """
    header = (header or '').lower()
    if header.strip() in ('', '*'):
        return []
    tags = []
    for part in header.split(','):
        # Surrounding spaces are dropped, so "da, en" offers "en".
        tag = part.split(';', 1)[0].strip()
        if tag:
            tags.append(tag)
    return tags


def match_locale(header: str, locales: Iterable[str]) -> str | None:
    known = set(locales)
    for tag in parse_accept_language(header):
        if tag in known:
            return tag
    return None
