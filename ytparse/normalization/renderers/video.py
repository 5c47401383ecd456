"""Video renderer normalizer.

Handles both ``videoRenderer`` (search results) and ``gridVideoRenderer``
(videos inside channel previews and grids); the two share one shape.
"""

from typing import Any, Optional

from ytparse.models.schemas import Author, Video
from ytparse.normalization.owner import badge_values, is_verified, navigation_url
from ytparse.normalization.registry import register_renderer
from ytparse.normalization.text import (
    absolute_url,
    first,
    parse_integer_from_text,
    parse_text,
    prep_images,
)

LIVE_BADGE = "LIVE NOW"
TIME_STATUS_OVERLAY = "thumbnailOverlayTimeStatusRenderer"


def _video_badges(payload: dict[str, Any]) -> list[str]:
    """Badge labels; style-only badges carry no label and are skipped."""
    return badge_values(payload.get("badges"), "label")


def _upcoming_start(payload: dict[str, Any]) -> Optional[int]:
    """Scheduled start in epoch milliseconds, None when not upcoming."""
    event = payload.get("upcomingEventData")
    if not event:
        return None
    return int(event["startTime"]) * 1000


def _length_text(payload: dict[str, Any]) -> Any:
    """Duration rich-text: lengthText, else the time-status thumbnail overlay.

    Live streams, many upcoming videos and the occasional regular video carry
    neither.
    """
    if payload.get("lengthText"):
        return payload["lengthText"]
    for overlay in payload.get("thumbnailOverlays") or []:
        if next(iter(overlay), None) == TIME_STATUS_OVERLAY:
            return overlay[TIME_STATUS_OVERLAY].get("text")
    return None


def _parse_author(payload: dict[str, Any]) -> Optional[Author]:
    # Some shows list videos without any owner
    owner_text = payload.get("ownerText")
    if not owner_text:
        return None

    run = owner_text["runs"][0]
    endpoint = run["navigationEndpoint"]
    thumbnail_renderer = payload["channelThumbnailSupportedRenderers"][
        "channelThumbnailWithLinkRenderer"
    ]
    avatars = prep_images(thumbnail_renderer["thumbnail"]["thumbnails"])
    owner_badges = payload.get("ownerBadges")

    return Author(
        name=run["text"],
        channel_id=endpoint["browseEndpoint"]["browseId"],
        url=navigation_url(endpoint),
        best_avatar=first(avatars),
        avatars=avatars,
        owner_badges=badge_values(owner_badges, "tooltip"),
        verified=is_verified(owner_badges),
    )


@register_renderer("videoRenderer", "gridVideoRenderer")
def parse_video(payload: dict[str, Any]) -> Video:
    """Normalize a video card."""
    video_id = payload["videoId"]
    thumbnails = prep_images(payload["thumbnail"]["thumbnails"])
    badges = _video_badges(payload)
    upcoming = _upcoming_start(payload)
    view_count = payload.get("viewCountText")

    return Video(
        title=parse_text(payload.get("title")),
        id=video_id,
        url=absolute_url(f"/watch?v={video_id}"),
        best_thumbnail=first(thumbnails),
        thumbnails=thumbnails,
        is_upcoming=upcoming is not None,
        upcoming=upcoming,
        is_live=LIVE_BADGE in badges,
        badges=badges,
        author=_parse_author(payload),
        description=parse_text(payload.get("descriptionSnippet")),
        views=parse_integer_from_text(view_count) if view_count else None,
        duration=parse_text(_length_text(payload)),
        uploaded_at=parse_text(payload.get("publishedTimeText")),
    )
