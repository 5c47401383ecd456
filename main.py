"""
ytparse - Main Entry Point

Normalizes a saved page of search renderer fragments and prints the records
as JSON. Useful for turning failure dumps into fixtures and for checking how
a captured page is parsed.

Usage:
    python main.py page.json
    python main.py page.json --indent 0
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from ytparse import ResultEnvelope, __version__, parse_items
from ytparse.config import get_settings


def configure_logging(level: str) -> None:
    """Configure structured logging to stderr."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(__name__)


def load_fragments(path: Path) -> list[dict[str, Any]]:
    """Read fragments from a JSON list or an object with an "items" list."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError(f"{path} holds neither a list nor an object with an items list")
    return data


def normalize_page(fragments: list[dict[str, Any]]) -> dict[str, Any]:
    """Normalize a page and merge the records with the envelope annotations."""
    envelope = ResultEnvelope()
    items = parse_items(fragments, envelope)
    return {
        "items": [item.to_dict() for item in items],
        **envelope.to_dict(),
    }


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the command line."""
    parser = argparse.ArgumentParser(description="Normalize search renderer fragments")
    parser.add_argument("page", type=Path, help="JSON file with renderer fragments")
    parser.add_argument("--indent", type=int, default=2, help="JSON output indentation")
    parser.add_argument("--version", action="version", version=f"ytparse {__version__}")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        fragments = load_fragments(args.page)
    except (OSError, ValueError) as e:
        logger.error("page_load_failed", page=str(args.page), error=str(e))
        return 1

    result = normalize_page(fragments)
    logger.info(
        "page_normalized",
        page=str(args.page),
        fragments=len(fragments),
        items=len(result["items"]),
    )
    print(json.dumps(result, indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
