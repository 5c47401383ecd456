"""Playlist and mix renderer normalizers.

Both expose the first video through the card's navigation endpoint, which
points at ``/watch?v=<first video>&list=<playlist>``.
"""

from typing import Any, Optional

from ytparse.models.schemas import Mix, MixVideo, Playlist, PlaylistVideo
from ytparse.normalization.owner import parse_owner
from ytparse.normalization.registry import register_renderer
from ytparse.normalization.text import absolute_url, endpoint_url, first, parse_text, prep_images


def _first_video_fields(payload: dict[str, Any], thumbnails: Any) -> dict[str, Any]:
    """Fields shared by the playlist and mix first-video previews."""
    endpoint = payload["navigationEndpoint"]
    video_id = endpoint["watchEndpoint"]["videoId"]
    child = payload["videos"][0]["childVideoRenderer"]
    images = prep_images(thumbnails)

    return {
        "id": video_id,
        "short_url": absolute_url(f"/watch?v={video_id}"),
        "url": endpoint_url(endpoint),
        "length": parse_text(child.get("lengthText")),
        "best_thumbnail": first(images),
        "thumbnails": images,
        "title": parse_text(child.get("title")),
    }


def _playlist_first_video(payload: dict[str, Any]) -> Optional[PlaylistVideo]:
    videos = payload.get("videos")
    if not isinstance(videos, list) or not videos:
        return None
    return PlaylistVideo(**_first_video_fields(payload, payload["thumbnails"][0]["thumbnails"]))


@register_renderer("playlistRenderer")
def parse_playlist(payload: dict[str, Any]) -> Playlist:
    """Normalize a playlist card.

    Some playlists (ids starting with OL) only carry a plain-string byline
    without a channel link; those get no owner.
    """
    playlist_id = payload["playlistId"]
    plain_byline = (payload.get("shortBylineText") or {}).get("simpleText")

    return Playlist(
        title=parse_text(payload.get("title")),
        playlist_id=playlist_id,
        url=absolute_url(f"/playlist?list={playlist_id}"),
        first_video=_playlist_first_video(payload),
        owner=None if plain_byline else parse_owner(payload, "playlistRenderer"),
        published_at=parse_text(payload.get("publishedTimeText")),
        length=int(payload["videoCount"]),
    )


@register_renderer("radioRenderer")
def parse_mix(payload: dict[str, Any]) -> Mix:
    """Normalize a mix. Mixes always come with their first video."""
    fields = _first_video_fields(payload, payload["thumbnail"]["thumbnails"])
    fields["text"] = fields.pop("title")

    return Mix(
        title=parse_text(payload.get("title")),
        url=endpoint_url(payload["navigationEndpoint"]),
        first_video=MixVideo(**fields),
    )
