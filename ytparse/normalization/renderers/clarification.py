"""Clarification (information panel) renderer normalizer."""

from typing import Any

from ytparse.models.schemas import Clarification, ClarificationSource
from ytparse.normalization.registry import register_renderer
from ytparse.normalization.text import absolute_url, parse_text


@register_renderer("clarificationRenderer")
def parse_clarification(payload: dict[str, Any]) -> Clarification:
    sources = [
        ClarificationSource(
            text=parse_text(payload.get("source")),
            url=absolute_url(payload["endpoint"]["urlEndpoint"]["url"]),
        )
    ]
    if payload.get("secondarySource"):
        sources.append(
            ClarificationSource(
                text=parse_text(payload["secondarySource"]),
                url=absolute_url(payload["secondaryEndpoint"]["urlEndpoint"]["url"]),
            )
        )

    return Clarification(
        title=parse_text(payload.get("contentTitle")),
        text=parse_text(payload.get("text")),
        sources=sources,
    )
