"""Shelf renderer normalizer.

Shelves nest other fragments, either as a flat ``contents`` list of
``richItemRenderer`` wrappers (rich shelves) or as a ``content`` object
holding a vertical list or a horizontal movie list.

Children go through the router directly. A broken child therefore raises
out of the whole shelf, which the top-level ``parse_item`` turns into a
missing shelf. Set ``isolate_nested_failures`` to drop only the broken child
instead.
"""

from typing import Any, Optional

import structlog

from ytparse.config.settings import get_settings
from ytparse.models.schemas import NormalizedItem, Shelf
from ytparse.monitoring.failure_dumps import catch_and_log
from ytparse.normalization.registry import dispatch, register_renderer
from ytparse.normalization.text import parse_text

logger = structlog.get_logger(__name__)

DEFAULT_SHELF_TITLE = "Show More"


def _child_fragments(payload: dict[str, Any]) -> list[dict[str, Any]]:
    if isinstance(payload.get("contents"), list):
        return [item["richItemRenderer"]["content"] for item in payload["contents"]]

    content = payload["content"]
    wrapper = content.get("verticalListRenderer") or content["horizontalMovieListRenderer"]
    return wrapper["items"]


def _parse_child(fragment: dict[str, Any], isolate: bool) -> Optional[NormalizedItem]:
    # Nested side-channel renderers get no envelope
    if isolate:
        return catch_and_log(dispatch, fragment)
    return dispatch(fragment)


@register_renderer("shelfRenderer", "richShelfRenderer")
def parse_shelf(payload: dict[str, Any]) -> Shelf:
    """Normalize a shelf and every fragment it holds.

    The optional shelf thumbnail is ignored.
    """
    isolate = get_settings().isolate_nested_failures
    children = _child_fragments(payload)
    items = [
        item for item in (_parse_child(child, isolate) for child in children) if item is not None
    ]

    if len(items) < len(children):
        logger.debug("shelf_children_dropped", received=len(children), kept=len(items))

    return Shelf(
        title=parse_text(payload.get("title"), DEFAULT_SHELF_TITLE),
        items=items,
    )
