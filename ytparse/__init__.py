"""
ytparse - normalizes YouTube search renderer fragments into typed records.

This package contains:
- normalization: renderer registry, router and per-renderer normalizers
- models: pydantic records, the NormalizedItem union and ResultEnvelope
- monitoring: failure dumps for fragments that could not be normalized
- config: pydantic settings
- core: exception hierarchy
"""

__version__ = "0.1.0"

from ytparse.models.schemas import NormalizedItem, ResultEnvelope  # noqa: E402
from ytparse.normalization import dispatch, parse_item, parse_items  # noqa: E402

__all__ = [
    "NormalizedItem",
    "ResultEnvelope",
    "dispatch",
    "parse_item",
    "parse_items",
]
