"""Normalization of renderer fragments into typed records.

- registry: tag table and the ``dispatch`` router (exceptions propagate)
- pipeline: ``parse_item`` / ``parse_items``, the fault-isolated entry points
- renderers: one module per renderer family
- text / owner: shared extraction helpers
"""

from ytparse.normalization.pipeline import parse_item, parse_items
from ytparse.normalization.registry import dispatch, list_renderers, register_renderer

__all__ = [
    "dispatch",
    "list_renderers",
    "parse_item",
    "parse_items",
    "register_renderer",
]
