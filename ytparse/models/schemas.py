"""Pydantic models for normalized search records.

Attributes are snake_case; dumping with ``by_alias=True`` (or ``to_dict()``)
yields the camelCase shape downstream consumers of the service expect.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# Base Models
# =============================================================================


class Record(BaseModel):
    """Base model for every normalized value.

    Records are frozen: they are built once by a renderer normalizer and
    never touched again.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to the camelCase shape."""
        return self.model_dump(by_alias=True)


class Image(Record):
    """One image candidate. Width and height are missing for some avatars."""

    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


# =============================================================================
# Owner Models
# =============================================================================


class ShowOwner(Record):
    """Owner reference without badge information."""

    name: str
    channel_id: str = Field(..., alias="channelID")
    url: str


class Owner(ShowOwner):
    """Owner reference resolved from a byline."""

    owner_badges: list[str] = Field(default_factory=list)
    verified: bool = False


class Author(Owner):
    """Video author, with the channel avatar shown next to the video."""

    best_avatar: Optional[Image] = None
    avatars: list[Image] = Field(default_factory=list)


# =============================================================================
# Record Variants
# =============================================================================


class Video(Record):
    """A single video card."""

    type: Literal["video"] = "video"
    title: str
    id: str
    url: str
    best_thumbnail: Optional[Image] = None
    thumbnails: list[Image] = Field(default_factory=list)
    is_upcoming: bool = False
    upcoming: Optional[int] = Field(None, description="Scheduled start in epoch milliseconds")
    is_live: bool = False
    badges: list[str] = Field(default_factory=list)
    author: Optional[Author] = None
    description: str = ""
    views: Optional[int] = None
    duration: str = ""
    uploaded_at: str = ""


class Channel(Record):
    """A channel card."""

    type: Literal["channel"] = "channel"
    name: str
    channel_id: str = Field(..., alias="channelID")
    url: str
    best_avatar: Optional[Image] = None
    avatars: list[Image] = Field(default_factory=list)
    verified: bool = False
    subscribers: str = ""
    description_short: str = ""
    videos: Optional[int] = None


class PlaylistVideo(Record):
    """Preview of the first video of a playlist."""

    id: str
    short_url: str = Field(..., alias="shortURL")
    url: str
    title: str
    length: str
    best_thumbnail: Optional[Image] = None
    thumbnails: list[Image] = Field(default_factory=list)


class MixVideo(Record):
    """Preview of the first video of a mix."""

    id: str
    short_url: str = Field(..., alias="shortURL")
    url: str
    text: str
    length: str
    best_thumbnail: Optional[Image] = None
    thumbnails: list[Image] = Field(default_factory=list)


class Playlist(Record):
    """A playlist card."""

    type: Literal["playlist"] = "playlist"
    title: str
    playlist_id: str = Field(..., alias="playlistID")
    url: str
    first_video: Optional[PlaylistVideo] = None
    owner: Optional[Owner] = None
    published_at: str = ""
    length: int = 0


class Mix(Record):
    """An auto-generated mix."""

    type: Literal["mix"] = "mix"
    title: str
    url: str
    first_video: MixVideo


class ClarificationSource(Record):
    text: str
    url: str


class Clarification(Record):
    """Information panel (fact-check style) shown above results."""

    type: Literal["clarification"] = "clarification"
    title: str
    text: str
    sources: list[ClarificationSource] = Field(default_factory=list)


class ChannelPreview(Record):
    """A channel together with a handful of its videos."""

    type: Literal["channelPreview"] = "channelPreview"
    name: str
    channel_id: str = Field(..., alias="channelID")
    url: str
    best_avatar: Optional[Image] = None
    avatars: list[Image] = Field(default_factory=list)
    subscribers: str = ""
    videos: list[Video] = Field(default_factory=list)


class HorizontalChannelList(Record):
    type: Literal["horizontalChannelList"] = "horizontalChannelList"
    title: str
    channels: list[ChannelPreview] = Field(default_factory=list)


class GridMovie(Record):
    """Movie found inside a horizontal movie list."""

    type: Literal["gridMovie"] = "gridMovie"
    title: str
    video_id: str = Field(..., alias="videoID")
    url: str
    best_thumbnail: Optional[Image] = None
    thumbnails: list[Image] = Field(default_factory=list)
    duration: str = ""


class Movie(Record):
    type: Literal["movie"] = "movie"
    title: str
    video_id: str = Field(..., alias="videoID")
    url: str
    best_thumbnail: Optional[Image] = None
    thumbnails: list[Image] = Field(default_factory=list)
    owner: Owner
    description: str = ""
    meta: list[str] = Field(default_factory=list)
    actors: list[str] = Field(default_factory=list)
    directors: list[str] = Field(default_factory=list)
    duration: str = ""


class Show(Record):
    type: Literal["show"] = "show"
    title: str
    best_thumbnail: Optional[Image] = None
    thumbnails: list[Image] = Field(default_factory=list)
    url: str
    video_id: str = Field(..., alias="videoID")
    playlist_id: Optional[str] = Field(None, alias="playlistID")
    episodes: int
    owner: ShowOwner


class Shelf(Record):
    """A titled group of nested records."""

    type: Literal["shelf"] = "shelf"
    title: str = "Show More"
    items: list["NormalizedItem"] = Field(default_factory=list)


NormalizedItem = Annotated[
    Union[
        Video,
        Channel,
        Playlist,
        Mix,
        Clarification,
        HorizontalChannelList,
        ChannelPreview,
        GridMovie,
        Movie,
        Show,
        Shelf,
    ],
    Field(discriminator="type"),
]

Shelf.model_rebuild()


# =============================================================================
# Response Envelope
# =============================================================================


class Refinement(Record):
    """A suggested alternative query."""

    q: str
    url: str
    best_thumbnail: Optional[Image] = None
    thumbnails: Optional[list[Image]] = None


class ResultEnvelope(BaseModel):
    """Caller-owned accumulator for annotations found between the results.

    Side-channel renderers (did-you-mean, showing-results-for, refinement
    cards) write here instead of producing a record. The envelope is not
    synchronized: whoever owns it must make sure only one normalization call
    writes to it at a time.

    Setting ``refinements`` to None disables refinement collection.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    refinements: Optional[list[Refinement]] = Field(default_factory=list)
    corrected_query: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
