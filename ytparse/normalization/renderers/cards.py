"""Horizontal card list renderer.

The list itself says nothing about what it holds; the tag of its first card
decides. Refinement cards feed the envelope, preview cards are channels with
a few of their videos.
"""

from typing import Any, Optional

from ytparse.core.exceptions import UnexpectedMessageError, UnknownCardRendererError
from ytparse.models.schemas import ChannelPreview, HorizontalChannelList, ResultEnvelope
from ytparse.normalization.registry import register_renderer
from ytparse.normalization.renderers.refinements import parse_horizontal_refinements
from ytparse.normalization.renderers.video import parse_video
from ytparse.normalization.text import (
    endpoint_url,
    first,
    first_key,
    iter_strings,
    parse_text,
    prep_images,
)

TAG = "horizontalCardListRenderer"


@register_renderer("debug#previewCardRenderer")
def parse_channel_preview(payload: dict[str, Any]) -> ChannelPreview:
    """Normalize one preview card: a channel header plus grid videos."""
    header = payload["header"]["richListHeaderRenderer"]
    avatars = prep_images(
        header["channelThumbnail"]["channelThumbnailWithLinkRenderer"]["thumbnail"]["thumbnails"]
    )

    return ChannelPreview(
        name=parse_text(header.get("title")),
        channel_id=header["endpoint"]["browseEndpoint"]["browseId"],
        url=endpoint_url(header["endpoint"]),
        best_avatar=first(avatars),
        avatars=avatars,
        subscribers=parse_text(header.get("subtitle")),
        videos=[parse_video(item["gridVideoRenderer"]) for item in payload["contents"]],
    )


def parse_horizontal_channel_list(payload: dict[str, Any]) -> HorizontalChannelList:
    """Normalize a card list of channel previews.

    Raises:
        UnexpectedMessageError: If the list style does not declare channels.
    """
    if not any("CHANNELS" in value for value in iter_strings(payload.get("style"))):
        raise UnexpectedMessageError(TAG, payload.get("style"))

    return HorizontalChannelList(
        title=parse_text(payload["header"]["richListHeaderRenderer"].get("title")),
        channels=[parse_channel_preview(card["previewCardRenderer"]) for card in payload["cards"]],
    )


@register_renderer(TAG, annotates=True)
def parse_horizontal_card_list(
    payload: dict[str, Any],
    envelope: Optional[ResultEnvelope] = None,
) -> Optional[HorizontalChannelList]:
    card_tag = first_key(payload["cards"][0])

    if card_tag == "searchRefinementCardRenderer":
        return parse_horizontal_refinements(payload, envelope)
    if card_tag == "previewCardRenderer":
        return parse_horizontal_channel_list(payload)
    raise UnknownCardRendererError(card_tag, TAG)
