"""
Pytest Configuration and Shared Fixtures.

Every fixture returns a fresh renderer payload shaped like the ones the
search service returns, trimmed to the fields the normalizers read:

- video_renderer, channel_renderer, playlist_renderer, radio_renderer
- grid_movie_renderer, movie_renderer, show_renderer, clarification_renderer
- refinement_card_list, preview_card_list
- isolated_settings (autouse): dumps go to tmp_path, settings cache reset
"""

import pytest

from ytparse.config import get_settings

RICK_CHANNEL_ID = "UCuAXFkgsw1L7xaCfnd5JJOw"


def browse_endpoint(browse_id: str, url: str, canonical: str | None = None) -> dict:
    endpoint = {
        "commandMetadata": {"webCommandMetadata": {"url": url, "webPageType": "WEB_PAGE_TYPE_CHANNEL"}},
        "browseEndpoint": {"browseId": browse_id},
    }
    if canonical:
        endpoint["browseEndpoint"]["canonicalBaseUrl"] = canonical
    return endpoint


def watch_endpoint(video_id: str, url: str, playlist_id: str | None = None) -> dict:
    endpoint = {
        "commandMetadata": {"webCommandMetadata": {"url": url, "webPageType": "WEB_PAGE_TYPE_WATCH"}},
        "watchEndpoint": {"videoId": video_id},
    }
    if playlist_id:
        endpoint["watchEndpoint"]["playlistId"] = playlist_id
    return endpoint


def byline(text: str, browse_id: str, canonical: str | None = None) -> dict:
    return {
        "runs": [
            {
                "text": text,
                "navigationEndpoint": browse_endpoint(
                    browse_id, f"/channel/{browse_id}", canonical
                ),
            }
        ]
    }


def thumbnails(*sizes: tuple[str, int, int]) -> dict:
    return {"thumbnails": [{"url": url, "width": w, "height": h} for url, w, h in sizes]}


VERIFIED_BADGE = {
    "metadataBadgeRenderer": {
        "icon": {"iconType": "CHECK_CIRCLE_THICK"},
        "style": "BADGE_STYLE_TYPE_VERIFIED",
        "tooltip": "Verified",
    }
}

OFFICIAL_ARTIST_BADGE = {
    "metadataBadgeRenderer": {
        "icon": {"iconType": "OFFICIAL_ARTIST_BADGE"},
        "style": "BADGE_STYLE_TYPE_VERIFIED_ARTIST",
        "tooltip": "Official Artist Channel",
    }
}


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point failure dumps at tmp_path and start from default settings."""
    monkeypatch.setenv("YTPARSE_DUMPS_DIR", str(tmp_path / "dumps"))
    monkeypatch.delenv("YTPARSE_ISOLATE_NESTED_FAILURES", raising=False)
    monkeypatch.delenv("YTPARSE_BASE_URL", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def video_renderer() -> dict:
    """Return a regular uploaded video by a verified artist."""
    return {
        "videoId": "dQw4w9WgXcQ",
        "thumbnail": thumbnails(
            ("https://i.ytimg.com/vi/dQw4w9WgXcQ/hq720.jpg?sqp=small", 360, 202),
            ("https://i.ytimg.com/vi/dQw4w9WgXcQ/hq720.jpg?sqp=large", 720, 404),
        ),
        "title": {"runs": [{"text": "Rick Astley - Never Gonna Give You Up (Official Music Video)"}]},
        "descriptionSnippet": {
            "runs": [
                {"text": "The official video for "},
                {"text": "Never Gonna Give You Up", "bold": True},
            ]
        },
        "longBylineText": byline("Rick Astley", RICK_CHANNEL_ID, "/@RickAstleyYT"),
        "publishedTimeText": {"simpleText": "14 years ago"},
        "lengthText": {"simpleText": "3:33"},
        "viewCountText": {"simpleText": "1,234,567,890 views"},
        "ownerText": byline("Rick Astley", RICK_CHANNEL_ID, "/@RickAstleyYT"),
        "ownerBadges": [OFFICIAL_ARTIST_BADGE],
        "channelThumbnailSupportedRenderers": {
            "channelThumbnailWithLinkRenderer": {
                "thumbnail": thumbnails(("//yt3.ggpht.com/rick=s68-c-k", 68, 68)),
            }
        },
        "thumbnailOverlays": [
            {"thumbnailOverlayTimeStatusRenderer": {"text": {"simpleText": "3:33"}, "style": "DEFAULT"}},
            {"thumbnailOverlayNowPlayingRenderer": {"text": {"runs": [{"text": "Now playing"}]}}},
        ],
        "badges": [{"metadataBadgeRenderer": {"style": "BADGE_STYLE_TYPE_SIMPLE", "label": "4K"}}],
    }


@pytest.fixture
def channel_renderer() -> dict:
    return {
        "channelId": RICK_CHANNEL_ID,
        "title": {"simpleText": "Rick Astley"},
        "navigationEndpoint": browse_endpoint(
            RICK_CHANNEL_ID, "/@RickAstleyYT", "/@RickAstleyYT"
        ),
        "thumbnail": thumbnails(
            ("//yt3.ggpht.com/rick=s88-c-k", 88, 88),
            ("//yt3.ggpht.com/rick=s176-c-k", 176, 176),
        ),
        "descriptionSnippet": {"runs": [{"text": "Official channel of Rick Astley"}]},
        "videoCountText": {"runs": [{"text": "1.2K"}, {"text": " videos"}]},
        "subscriberCountText": {"simpleText": "4.1M subscribers"},
        "ownerBadges": [VERIFIED_BADGE],
    }


@pytest.fixture
def playlist_renderer() -> dict:
    return {
        "playlistId": "PLFgquLnL59alCl_2TQvOiD5Vgm1hCaGSI",
        "title": {"simpleText": "Top 80s Hits"},
        "thumbnails": [
            thumbnails(("https://i.ytimg.com/vi/abc123DEF45/hqdefault.jpg", 480, 270))
        ],
        "videoCount": "42",
        "navigationEndpoint": watch_endpoint(
            "abc123DEF45",
            "/watch?v=abc123DEF45&list=PLFgquLnL59alCl_2TQvOiD5Vgm1hCaGSI",
            "PLFgquLnL59alCl_2TQvOiD5Vgm1hCaGSI",
        ),
        "shortBylineText": byline("80s Forever", "UCeighties00000000000000", "/@80sForever"),
        "videos": [
            {
                "childVideoRenderer": {
                    "title": {"simpleText": "Take On Me"},
                    "lengthText": {"simpleText": "3:48"},
                    "videoId": "abc123DEF45",
                }
            },
            {
                "childVideoRenderer": {
                    "title": {"simpleText": "Africa"},
                    "lengthText": {"simpleText": "4:55"},
                    "videoId": "xyz987ZYX65",
                }
            },
        ],
        "publishedTimeText": {"simpleText": "Updated 3 days ago"},
    }


@pytest.fixture
def radio_renderer() -> dict:
    return {
        "playlistId": "RDdQw4w9WgXcQ",
        "title": {"simpleText": "Mix - Rick Astley"},
        "thumbnail": thumbnails(
            ("https://i.ytimg.com/vi/dQw4w9WgXcQ/mqdefault.jpg", 320, 180),
            ("https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg", 480, 360),
        ),
        "navigationEndpoint": watch_endpoint(
            "dQw4w9WgXcQ",
            "/watch?v=dQw4w9WgXcQ&list=RDdQw4w9WgXcQ&start_radio=1",
            "RDdQw4w9WgXcQ",
        ),
        "videos": [
            {
                "childVideoRenderer": {
                    "title": {"simpleText": "Never Gonna Give You Up"},
                    "lengthText": {"simpleText": "3:33"},
                }
            }
        ],
        "longBylineText": {"simpleText": "YouTube"},
    }


@pytest.fixture
def grid_movie_renderer() -> dict:
    return {
        "videoId": "mOvIe000001",
        "title": {"simpleText": "The Great Adventure"},
        "thumbnail": thumbnails(("https://i.ytimg.com/vi/mOvIe000001/movieposter.jpg", 200, 300)),
        "navigationEndpoint": watch_endpoint("mOvIe000001", "/watch?v=mOvIe000001"),
        "lengthText": {"simpleText": "1:52:10"},
    }


@pytest.fixture
def movie_renderer() -> dict:
    return {
        "videoId": "mOvIe000002",
        "title": {"runs": [{"text": "Space Comedy"}]},
        "thumbnail": thumbnails(
            ("https://i.ytimg.com/vi/mOvIe000002/small.jpg", 120, 90),
            ("https://i.ytimg.com/vi/mOvIe000002/large.jpg", 246, 138),
        ),
        "navigationEndpoint": watch_endpoint("mOvIe000002", "/watch?v=mOvIe000002"),
        "longBylineText": byline("YouTube Movies", "UClgRkhTL3_hImCAmdLfDE4g", "/@YouTubeMovies"),
        "ownerBadges": [VERIFIED_BADGE],
        "descriptionSnippet": {"simpleText": "Two astronauts get lost."},
        "topMetadataItems": [{"simpleText": "Comedy · 2019 · PG-13"}],
        "bottomMetadataItems": [
            {"simpleText": "Actors: Jane Doe, John Roe"},
            {"runs": [{"text": "Director: "}, {"text": "Ann Smith"}]},
        ],
        "lengthText": {"simpleText": "1:41:00"},
    }


@pytest.fixture
def show_renderer() -> dict:
    return {
        "title": {"simpleText": "Cooking Basics"},
        "thumbnailRenderer": {
            "showCustomThumbnailRenderer": {
                "thumbnail": thumbnails(
                    ("//i.ytimg.com/vi/sHoW0000001/hqdefault.jpg", 480, 270),
                )
            }
        },
        "navigationEndpoint": watch_endpoint(
            "sHoW0000001",
            "/watch?v=sHoW0000001&list=PLshow000000000000000000000000000",
            "PLshow000000000000000000000000000",
        ),
        "thumbnailOverlays": [
            {
                "thumbnailOverlayBottomPanelRenderer": {
                    "text": {"simpleText": "12 episodes"},
                    "icon": {"iconType": "PLAYLISTS"},
                }
            }
        ],
        "shortBylineText": byline("Chef Channel", "UCchef000000000000000000", "/@ChefChannel"),
        "ownerBadges": [VERIFIED_BADGE],
    }


@pytest.fixture
def clarification_renderer() -> dict:
    return {
        "contentTitle": {"runs": [{"text": "COVID-19"}]},
        "text": {"simpleText": "Get the latest information from the WHO"},
        "source": {"simpleText": "World Health Organization"},
        "endpoint": {"urlEndpoint": {"url": "https://www.who.int/emergencies/diseases"}},
        "secondarySource": {"simpleText": "Wikipedia"},
        "secondaryEndpoint": {"urlEndpoint": {"url": "/redirect?q=https%3A%2F%2Fen.wikipedia.org"}},
    }


@pytest.fixture
def refinement_card_list() -> dict:
    def card(query: str, video_id: str) -> dict:
        slug = query.replace(" ", "+")
        return {
            "searchRefinementCardRenderer": {
                "thumbnail": thumbnails(
                    (f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg", 320, 180),
                ),
                "query": {"runs": [{"text": query}]},
                "searchEndpoint": {
                    "commandMetadata": {"webCommandMetadata": {"url": f"/results?search_query={slug}"}},
                    "searchEndpoint": {"query": query},
                },
            }
        }

    return {
        "cards": [card("rick astley live", "live0000001"), card("rick astley 2023", "new00000001")],
        "header": {"richListHeaderRenderer": {"title": {"simpleText": "People also search for"}}},
        "style": {"type": "HORIZONTAL_CARD_LIST_STYLE_TYPE_ENGAGEMENT_PANEL_REFINEMENTS"},
    }


@pytest.fixture
def preview_card_list(video_renderer) -> dict:
    return {
        "cards": [
            {
                "previewCardRenderer": {
                    "header": {
                        "richListHeaderRenderer": {
                            "title": {"simpleText": "Rick Astley"},
                            "subtitle": {"simpleText": "4.1M subscribers"},
                            "endpoint": browse_endpoint(RICK_CHANNEL_ID, "/@RickAstleyYT"),
                            "channelThumbnail": {
                                "channelThumbnailWithLinkRenderer": {
                                    "thumbnail": thumbnails(("//yt3.ggpht.com/rick=s88-c-k", 88, 88)),
                                }
                            },
                        }
                    },
                    "contents": [{"gridVideoRenderer": video_renderer}],
                }
            }
        ],
        "header": {"richListHeaderRenderer": {"title": {"simpleText": "Channels new to you"}}},
        "style": {"type": "HORIZONTAL_CARD_LIST_STYLE_TYPE_CHANNELS"},
    }


@pytest.fixture
def did_you_mean() -> dict:
    return {
        "didYouMeanRenderer": {
            "didYouMean": {"runs": [{"text": "Did you mean: "}]},
            "correctedQuery": {"runs": [{"text": "rick astley"}]},
            "correctedQueryEndpoint": {
                "commandMetadata": {"webCommandMetadata": {"url": "/results?search_query=rick+astley"}},
                "searchEndpoint": {"query": "rick astley"},
            },
        }
    }


@pytest.fixture
def showing_results_for() -> dict:
    return {
        "showingResultsForRenderer": {
            "showingResultsFor": {"runs": [{"text": "Showing results for"}]},
            "correctedQuery": {"runs": [{"text": "rick astley"}]},
            "originalQuery": {"simpleText": "rik astly"},
        }
    }
