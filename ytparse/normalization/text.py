"""Text, number, image and URL helpers shared by the renderer normalizers.

The service wraps almost every string in a rich-text object that is either
``{"simpleText": "..."}`` or ``{"runs": [{"text": "..."}, ...]}``. These
helpers flatten those objects and resolve the relative URLs the service
emits against the configured origin.
"""

import re
from typing import Any, Iterator, Optional
from urllib.parse import urljoin

from ytparse.config.settings import get_settings
from ytparse.models.schemas import Image

# "1.2M", "1,234,567", "1 234", "12"; the unit suffix must stand alone
_NUMBER_PATTERN = re.compile(
    r"(\d+(?:[.,\s]\d+)*)(?:\s?([KMB])\b)?",
    re.IGNORECASE,
)

_MULTIPLIERS = {
    "K": 1_000,
    "M": 1_000_000,
    "B": 1_000_000_000,
}


def parse_text(text: Any, default: Optional[str] = "") -> Optional[str]:
    """Flatten a rich-text object into a plain string.

    Args:
        text: ``{"simpleText": ...}`` or ``{"runs": [...]}`` object, or None.
        default: Returned when the object is absent or carries no text.

    Returns:
        The simple text, the concatenated run texts, or ``default``.
    """
    if not isinstance(text, dict):
        return default
    if isinstance(text.get("simpleText"), str):
        return text["simpleText"]
    if isinstance(text.get("runs"), list):
        return "".join(run.get("text", "") for run in text["runs"])
    return default


def parse_integer_from_text(text: Any) -> int:
    """Extract the first count from a formatted string such as "1.2M views".

    Accepts either a plain string or a rich-text object. Unit suffixes
    (K/M/B) scale the value; without a suffix every separator is treated as
    a thousands separator. Text without any digits yields 0.
    """
    raw = text if isinstance(text, str) else parse_text(text)
    match = _NUMBER_PATTERN.search(raw or "")
    if not match:
        return 0

    digits, suffix = match.groups()
    if suffix:
        number = re.sub(r"\s", "", digits).replace(",", ".")
        return round(float(number) * _MULTIPLIERS[suffix.upper()])
    return int(re.sub(r"\D", "", digits))


def absolute_url(url: str) -> str:
    """Resolve a service URL (relative, protocol-relative or absolute)."""
    return urljoin(get_settings().base_url, url)


def prep_images(candidates: Any) -> list[Image]:
    """Normalize raw thumbnail candidates, best (widest) first.

    Args:
        candidates: List of ``{"url", "width", "height"}`` dicts, or None.

    Returns:
        Images with absolute URLs sorted by width descending. Missing input
        gives an empty list.
    """
    if not isinstance(candidates, list):
        return []

    images = [
        Image(
            url=absolute_url(raw["url"]) if raw.get("url") else None,
            width=raw.get("width"),
            height=raw.get("height"),
        )
        for raw in candidates
    ]
    return sorted(images, key=lambda image: image.width or 0, reverse=True)


def first(images: list[Image]) -> Optional[Image]:
    """Best image of an already prepared list."""
    return images[0] if images else None


def iter_strings(value: Any) -> Iterator[str]:
    """Yield every string leaf of a nested dict/list structure."""
    if isinstance(value, str):
        yield value
    elif isinstance(value, dict):
        for nested in value.values():
            yield from iter_strings(nested)
    elif isinstance(value, list):
        for nested in value:
            yield from iter_strings(nested)


def endpoint_url(endpoint: dict[str, Any]) -> str:
    """Absolute URL of a navigation endpoint's web command."""
    return absolute_url(endpoint["commandMetadata"]["webCommandMetadata"]["url"])


def first_key(fragment: dict[str, Any]) -> str:
    """Renderer tag of a single-key fragment."""
    return next(iter(fragment))
