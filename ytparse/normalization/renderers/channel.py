"""Channel renderer normalizer."""

from typing import Any

from ytparse.models.schemas import Channel
from ytparse.normalization.owner import is_verified, navigation_url
from ytparse.normalization.registry import register_renderer
from ytparse.normalization.text import first, parse_integer_from_text, parse_text, prep_images


@register_renderer("channelRenderer")
def parse_channel(payload: dict[str, Any]) -> Channel:
    avatars = prep_images(payload["thumbnail"]["thumbnails"])
    video_count = payload.get("videoCountText")

    return Channel(
        name=parse_text(payload.get("title")),
        channel_id=payload["channelId"],
        url=navigation_url(payload["navigationEndpoint"]),
        best_avatar=first(avatars),
        avatars=avatars,
        verified=is_verified(payload.get("ownerBadges")),
        subscribers=parse_text(payload.get("subscriberCountText")),
        description_short=parse_text(payload.get("descriptionSnippet")),
        videos=parse_integer_from_text(video_count) if video_count else None,
    )
