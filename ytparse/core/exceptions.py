"""
Core exception hierarchy for ytparse.

Every failure raised while normalizing a single fragment derives from
RendererError, so callers that drive the router directly can tell schema
drift apart from their own bugs.

Structural mismatches (a field the service omitted or reshaped) are not
wrapped: they surface as the KeyError / IndexError / TypeError raised by the
failing lookup.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class YtParseError(Exception):
    """Base exception for all ytparse errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RendererError(YtParseError):
    """Base exception for failures tied to one renderer fragment."""

    def __init__(
        self,
        tag: Optional[str],
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.tag = tag
        prefix = f"[{tag}] " if tag else ""
        super().__init__(f"{prefix}{message}", details)


# =============================================================================
# Dispatch Errors
# =============================================================================


class MalformedFragmentError(RendererError):
    """Raised when a fragment is not a mapping with a renderer tag."""

    def __init__(self, fragment: Any):
        super().__init__(
            None,
            "fragment must be a non-empty mapping keyed by its renderer tag",
            {"received": type(fragment).__name__},
        )


class UnknownRendererError(RendererError):
    """Raised when a fragment's tag is outside the known vocabulary."""

    def __init__(self, tag: str):
        super().__init__(tag, f"type {tag} is not known")


class UnknownCardRendererError(RendererError):
    """Raised when a horizontal card list starts with an unknown card type."""

    def __init__(self, card_tag: str, parent_tag: str = "horizontalCardListRenderer"):
        self.card_tag = card_tag
        super().__init__(parent_tag, f"subType {card_tag} of type {parent_tag} not known")


class UnexpectedMessageError(RendererError):
    """Raised when a message-style fragment carries content we cannot classify."""

    def __init__(self, tag: str, text: Any):
        super().__init__(tag, "unknown message content", {"text": text})


# =============================================================================
# Caller Contract Errors
# =============================================================================


class MissingBylineError(RendererError):
    """Raised when the owner resolver is handed a payload without any byline."""

    def __init__(self, tag: Optional[str] = None):
        super().__init__(tag, "payload carries neither shortBylineText nor longBylineText")
