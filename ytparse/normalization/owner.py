"""Owner resolution shared by playlist, movie and show renderers.

Also holds the badge helpers the video and channel renderers use, so the
verified heuristic lives in one place.
"""

from typing import Any, Optional

from ytparse.core.exceptions import MissingBylineError
from ytparse.models.schemas import Owner
from ytparse.normalization.text import absolute_url, iter_strings

# Badge styles/icons look like BADGE_STYLE_TYPE_VERIFIED or OFFICIAL_ARTIST_BADGE
VERIFIED_MARKERS = ("OFFICIAL", "VERIFIED")
_BADGE_MARKER_FIELDS = ("style", "tooltip", "icon")


def is_verified(badges: Any) -> bool:
    """Return True if any badge is an official/verified marker.

    Scans the style, tooltip and icon of every badge renderer. Missing or
    malformed badge collections are simply not verified.
    """
    if not isinstance(badges, list):
        return False

    for badge in badges:
        if not isinstance(badge, dict):
            continue
        for renderer in badge.values():
            if not isinstance(renderer, dict):
                continue
            for field in _BADGE_MARKER_FIELDS:
                for value in iter_strings(renderer.get(field)):
                    if any(marker in value.upper() for marker in VERIFIED_MARKERS):
                        return True
    return False


def badge_values(badges: Any, field: str) -> list[str]:
    """Collect ``metadataBadgeRenderer[field]`` of every badge.

    Badges without the field are skipped. Returns an empty list when the
    collection is absent.
    """
    if not isinstance(badges, list):
        return []
    values = []
    for badge in badges:
        renderer = badge.get("metadataBadgeRenderer") if isinstance(badge, dict) else None
        if isinstance(renderer, dict) and renderer.get(field) is not None:
            values.append(renderer[field])
    return values


def navigation_url(endpoint: dict[str, Any]) -> str:
    """Channel URL of a byline run: canonical base URL, else the web command URL."""
    url = endpoint["browseEndpoint"].get("canonicalBaseUrl") or endpoint[
        "commandMetadata"
    ]["webCommandMetadata"]["url"]
    return absolute_url(url)


def byline_run(payload: dict[str, Any], tag: Optional[str] = None) -> dict[str, Any]:
    """First run of the short byline, falling back to the long byline.

    Raises:
        MissingBylineError: If the payload carries neither byline.
    """
    for key in ("shortBylineText", "longBylineText"):
        if payload.get(key):
            return payload[key]["runs"][0]
    raise MissingBylineError(tag)


def parse_owner(payload: dict[str, Any], tag: Optional[str] = None) -> Owner:
    """Resolve the owner of a renderer payload.

    Args:
        payload: Renderer payload known to carry a byline.
        tag: Renderer tag, used in the error message only.

    Returns:
        Fully populated Owner.
    """
    run = byline_run(payload, tag)
    endpoint = run["navigationEndpoint"]
    owner_badges = payload.get("ownerBadges")

    return Owner(
        name=run["text"],
        channel_id=endpoint["browseEndpoint"]["browseId"],
        url=navigation_url(endpoint),
        owner_badges=badge_values(owner_badges, "tooltip"),
        verified=is_verified(owner_badges),
    )
