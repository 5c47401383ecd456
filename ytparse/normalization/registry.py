"""Renderer registry and dispatch router.

Every renderer tag the service emits maps to exactly one handler. Handlers
either return a record, write into a ResultEnvelope and return None, or
skip the fragment. Tags that are not registered fail loudly so schema drift
shows up instead of being silently misparsed.

Example:
    @register_renderer("videoRenderer", "gridVideoRenderer")
    def parse_video(payload: dict) -> Video:
        ...
"""

from typing import Any, Callable, Optional

import structlog

from ytparse.core.exceptions import MalformedFragmentError, UnknownRendererError
from ytparse.models.schemas import NormalizedItem, ResultEnvelope

logger = structlog.get_logger(__name__)

Handler = Callable[[dict[str, Any], Optional[ResultEnvelope]], Optional[NormalizedItem]]

_handlers: dict[str, Handler] = {}


def register_renderer(*tags: str, annotates: bool = False):
    """Decorator to register a renderer handler for one or more tags.

    Args:
        tags: Renderer tags handled by the decorated function.
        annotates: True for side-channel handlers taking ``(payload, envelope)``.
            Record handlers take the payload only.

    Returns:
        Decorator function that registers the handler and returns it unchanged.
    """

    def decorator(func):
        if annotates:
            handler = func
        else:

            def handler(payload, envelope):
                return func(payload)

            handler.__name__ = func.__name__
        for tag in tags:
            _handlers[tag] = handler
        return func

    return decorator


def ignore_renderers(*tags: str) -> None:
    """Register tags that are recognized but deliberately produce nothing."""

    def skip(payload, envelope):
        return None

    for tag in tags:
        _handlers[tag] = skip


def fragment_tag(fragment: Any) -> str:
    """Return the renderer tag (the single key) of a fragment."""
    if not isinstance(fragment, dict) or not fragment:
        raise MalformedFragmentError(fragment)
    return next(iter(fragment))


def dispatch(
    fragment: dict[str, Any],
    envelope: Optional[ResultEnvelope] = None,
) -> Optional[NormalizedItem]:
    """Route a fragment to its renderer handler.

    Exceptions propagate; use ``parse_item`` for the fault-isolated variant.

    Args:
        fragment: Single-key mapping ``{tag: payload}``.
        envelope: Optional caller-owned envelope for side-channel renderers.

    Returns:
        The normalized record, or None for annotations and skipped tags.

    Raises:
        UnknownRendererError: If the tag is not registered.
    """
    tag = fragment_tag(fragment)
    handler = _handlers.get(tag)
    if handler is None:
        raise UnknownRendererError(tag)

    result = handler(fragment[tag], envelope)
    if result is None:
        logger.debug("renderer_produced_nothing", tag=tag)
    return result


def list_renderers() -> list[str]:
    """List all registered renderer tags.

    Returns:
        Sorted list of tags.
    """
    return sorted(_handlers)
