"""Side-channel renderers writing into the caller's ResultEnvelope.

None of these produce a record. Without an envelope (or, for refinements,
with ``envelope.refinements`` set to None) they are no-ops.
"""

from typing import Any, Optional

import structlog

from ytparse.models.schemas import Refinement, ResultEnvelope
from ytparse.normalization.registry import register_renderer
from ytparse.normalization.text import endpoint_url, first, parse_text, prep_images

logger = structlog.get_logger(__name__)


@register_renderer("didYouMeanRenderer", annotates=True)
def parse_did_you_mean(
    payload: dict[str, Any],
    envelope: Optional[ResultEnvelope] = None,
) -> None:
    """Put the suggested query in front of the envelope's refinements."""
    if envelope is None or envelope.refinements is None:
        return None

    envelope.refinements.insert(
        0,
        Refinement(
            q=parse_text(payload.get("correctedQuery")),
            url=endpoint_url(payload["correctedQueryEndpoint"]),
            best_thumbnail=None,
            thumbnails=None,
        ),
    )
    logger.debug("refinement_added", source="didYouMeanRenderer", position=0)
    return None


@register_renderer("showingResultsForRenderer", annotates=True)
def parse_showing_results_for(
    payload: dict[str, Any],
    envelope: Optional[ResultEnvelope] = None,
) -> None:
    """Record the query the service actually searched for."""
    if envelope is None:
        return None

    envelope.corrected_query = parse_text(payload.get("correctedQuery"), None)
    logger.debug("corrected_query_set", corrected_query=envelope.corrected_query)
    return None


def parse_horizontal_refinements(
    payload: dict[str, Any],
    envelope: Optional[ResultEnvelope] = None,
) -> None:
    """Append one refinement per search-refinement card, in card order."""
    if envelope is None or envelope.refinements is None:
        return None

    for card in payload["cards"]:
        renderer = card["searchRefinementCardRenderer"]
        thumbnails = prep_images(renderer["thumbnail"]["thumbnails"])
        envelope.refinements.append(
            Refinement(
                q=parse_text(renderer.get("query")),
                url=endpoint_url(renderer["searchEndpoint"]),
                best_thumbnail=first(thumbnails),
                thumbnails=thumbnails,
            )
        )
    logger.debug("refinements_added", source="horizontalCardListRenderer", count=len(payload["cards"]))
    return None
