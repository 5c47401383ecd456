"""Renderer normalizers.

Importing this package registers every renderer tag with the router.
"""

from ytparse.normalization.renderers import (  # noqa: F401
    cards,
    channel,
    clarification,
    messages,
    movie,
    playlist,
    refinements,
    shelf,
    video,
)
