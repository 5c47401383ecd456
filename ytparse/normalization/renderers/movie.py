"""Movie and show renderer normalizers (paid and free-with-ads content)."""

from typing import Any

from ytparse.models.schemas import GridMovie, Movie, Show, ShowOwner
from ytparse.normalization.owner import parse_owner
from ytparse.normalization.registry import register_renderer
from ytparse.normalization.text import (
    endpoint_url,
    first,
    parse_integer_from_text,
    parse_text,
    prep_images,
)

META_SEPARATOR = " · "


def _names_after_prefix(lines: list[str], prefix: str) -> list[str]:
    """Split ``"<prefix>: a, b"`` into ``["a", "b"]``; [] if no line matches."""
    line = next((line for line in lines if line.startswith(prefix)), None)
    if line is None:
        return []
    return line.split(": ", 1)[1].split(", ")


@register_renderer("gridMovieRenderer")
def parse_grid_movie(payload: dict[str, Any]) -> GridMovie:
    """Normalize a movie from a horizontal movie list."""
    thumbnails = prep_images(payload["thumbnail"]["thumbnails"])

    return GridMovie(
        title=parse_text(payload.get("title")),
        video_id=payload["videoId"],
        url=endpoint_url(payload["navigationEndpoint"]),
        best_thumbnail=first(thumbnails),
        thumbnails=thumbnails,
        duration=parse_text(payload.get("lengthText")),
    )


@register_renderer("movieRenderer")
def parse_movie(payload: dict[str, Any]) -> Movie:
    """Normalize a movie card.

    Cast and crew only exist as display lines such as
    ``"Actors: Jane Doe, John Roe"`` in the bottom metadata.
    """
    thumbnails = prep_images(payload["thumbnail"]["thumbnails"])
    bottom_lines = [parse_text(item) for item in payload.get("bottomMetadataItems") or []]

    return Movie(
        title=parse_text(payload.get("title")),
        video_id=payload["videoId"],
        url=endpoint_url(payload["navigationEndpoint"]),
        best_thumbnail=first(thumbnails),
        thumbnails=thumbnails,
        owner=parse_owner(payload, "movieRenderer"),
        description=parse_text(payload.get("descriptionSnippet")),
        meta=parse_text(payload["topMetadataItems"][0]).split(META_SEPARATOR),
        actors=_names_after_prefix(bottom_lines, "Actors"),
        directors=_names_after_prefix(bottom_lines, "Director"),
        duration=parse_text(payload.get("lengthText")),
    )


@register_renderer("showRenderer")
def parse_show(payload: dict[str, Any]) -> Show:
    """Normalize a show card.

    Shows never carry reliable owner badges, so the owner is reduced to its
    name, channel id and url.
    """
    thumbnails = prep_images(
        payload["thumbnailRenderer"]["showCustomThumbnailRenderer"]["thumbnail"]["thumbnails"]
    )
    endpoint = payload["navigationEndpoint"]
    owner = parse_owner(payload, "showRenderer")
    episode_panel = payload["thumbnailOverlays"][0]["thumbnailOverlayBottomPanelRenderer"]

    return Show(
        title=parse_text(payload.get("title")),
        best_thumbnail=first(thumbnails),
        thumbnails=thumbnails,
        url=endpoint_url(endpoint),
        video_id=endpoint["watchEndpoint"]["videoId"],
        playlist_id=endpoint["watchEndpoint"].get("playlistId"),
        episodes=parse_integer_from_text(episode_panel["text"]),
        owner=ShowOwner(name=owner.name, channel_id=owner.channel_id, url=owner.url),
    )
