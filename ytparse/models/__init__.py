"""Record models produced by the normalizers."""

from ytparse.models.schemas import (
    Author,
    Channel,
    ChannelPreview,
    Clarification,
    ClarificationSource,
    GridMovie,
    HorizontalChannelList,
    Image,
    Mix,
    MixVideo,
    Movie,
    NormalizedItem,
    Owner,
    Playlist,
    PlaylistVideo,
    Record,
    Refinement,
    ResultEnvelope,
    Shelf,
    Show,
    ShowOwner,
    Video,
)

__all__ = [
    "Author",
    "Channel",
    "ChannelPreview",
    "Clarification",
    "ClarificationSource",
    "GridMovie",
    "HorizontalChannelList",
    "Image",
    "Mix",
    "MixVideo",
    "Movie",
    "NormalizedItem",
    "Owner",
    "Playlist",
    "PlaylistVideo",
    "Record",
    "Refinement",
    "ResultEnvelope",
    "Shelf",
    "Show",
    "ShowOwner",
    "Video",
]
