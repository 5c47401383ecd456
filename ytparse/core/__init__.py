"""
Core infrastructure modules for ytparse.

Provides common utilities used across the package:
- exceptions: Standardized exception hierarchy
"""

from ytparse.core.exceptions import (
    YtParseError,
    RendererError,
    MalformedFragmentError,
    UnknownRendererError,
    UnknownCardRendererError,
    UnexpectedMessageError,
    MissingBylineError,
)

__all__ = [
    "YtParseError",
    "RendererError",
    "MalformedFragmentError",
    "UnknownRendererError",
    "UnknownCardRendererError",
    "UnexpectedMessageError",
    "MissingBylineError",
]
