"""Fault-isolated entry points for normalizing renderer fragments.

``parse_item`` is what page-processing code should call: a fragment that
cannot be normalized is dumped, logged and comes back as None, so one bad
fragment never takes the rest of the page down with it.

Example:
    envelope = ResultEnvelope()
    items = parse_items(section["contents"], envelope)
    suggestions = envelope.refinements
"""

from typing import Any, Iterable, Optional

from ytparse.models.schemas import NormalizedItem, ResultEnvelope
from ytparse.monitoring.failure_dumps import catch_and_log
from ytparse.normalization import renderers  # noqa: F401  registers every renderer
from ytparse.normalization.registry import dispatch


def parse_item(
    fragment: dict[str, Any],
    envelope: Optional[ResultEnvelope] = None,
) -> Optional[NormalizedItem]:
    """Normalize one fragment without ever raising.

    Args:
        fragment: Single-key mapping ``{tag: payload}``.
        envelope: Optional caller-owned envelope. Side-channel renderers
            write into it; only one call may write to it at a time.

    Returns:
        The normalized record, or None for annotations, skipped tags and
        fragments that failed to normalize.
    """
    return catch_and_log(dispatch, fragment, envelope)


def parse_items(
    fragments: Iterable[dict[str, Any]],
    envelope: Optional[ResultEnvelope] = None,
) -> list[NormalizedItem]:
    """Normalize a page of fragments, keeping present results in order."""
    results = (parse_item(fragment, envelope) for fragment in fragments)
    return [result for result in results if result is not None]
