"""Message, advertisement and notice renderers.

None of them produce a record. ``backgroundPromoRenderer`` is the one
exception to blind skipping: only the "No results found" promo is known, any
other text raises so new promo types get noticed.
"""

from typing import Any

from ytparse.core.exceptions import UnexpectedMessageError
from ytparse.normalization.registry import ignore_renderers, register_renderer
from ytparse.normalization.text import parse_text

NO_RESULTS_TEXT = "No results found"

AD_RENDERERS = (
    "carouselAdRenderer",
    "searchPyvRenderer",
    "promotedVideoRenderer",
    "promotedSparklesTextSearchRenderer",
)

# Emergency notices ("Thinking about suicide? Call ...") and messages, whose
# "no more results" text changes with the language
NOTICE_RENDERERS = (
    "emergencyOneboxRenderer",
    "messageRenderer",
)

ignore_renderers(*AD_RENDERERS, *NOTICE_RENDERERS)


@register_renderer("backgroundPromoRenderer")
def parse_background_promo(payload: dict[str, Any]) -> None:
    """Accept the "No results found" promo.

    Raises:
        UnexpectedMessageError: For any other promo text.
    """
    text = parse_text(payload.get("title"), None)
    if text == NO_RESULTS_TEXT:
        return None
    raise UnexpectedMessageError("backgroundPromoRenderer", text)
