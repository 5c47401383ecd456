"""Failure dumps for fragments the normalizers could not handle.

When a fragment fails to normalize, the arguments of the failing call are
written to ``<dumps_dir>/<token>-<epoch ms>.txt`` so the new or reshaped
renderer can be turned into a test fixture. A structured error log points at
the file and records the runtime environment.

Usage:
    from ytparse.monitoring.failure_dumps import catch_and_log

    record = catch_and_log(dispatch, fragment, envelope)  # None on failure
"""

import json
import platform
import time
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar
from uuid import uuid4

import structlog
from pydantic_core import to_jsonable_python

import ytparse
from ytparse.config.settings import get_settings

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def environment_info() -> dict[str, str]:
    """Host and version details attached to every failure log."""
    return {
        "os": platform.system().lower(),
        "arch": platform.machine(),
        "python": platform.python_version(),
        "ytparse": ytparse.__version__,
    }


def write_failure_dump(params: tuple[Any, ...], dumps_dir: Optional[Path] = None) -> Path:
    """Serialize the arguments of a failed call to a new dump file.

    Args:
        params: Positional arguments of the failed call.
        dumps_dir: Target directory (default: ``Settings.dumps_dir``).
            Created if missing.

    Returns:
        Path of the written file.
    """
    directory = Path(dumps_dir or get_settings().dumps_dir)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / f"{uuid4().hex[:10]}-{int(time.time() * 1000)}.txt"
    path.write_text(
        json.dumps(list(params), indent=2, default=to_jsonable_python),
        encoding="utf-8",
    )
    return path


def catch_and_log(func: Callable[..., T], *params: Any) -> Optional[T]:
    """Call ``func(*params)`` and turn any exception into a dump plus None.

    Args:
        func: Function to call.
        params: Positional arguments, also the content of the dump.

    Returns:
        The function result, or None if it raised.
    """
    try:
        return func(*params)
    except Exception as e:
        settings = get_settings()
        dump_file: Optional[Path] = None
        try:
            dump_file = write_failure_dump(params, settings.dumps_dir)
        except (OSError, TypeError, ValueError) as dump_error:
            logger.warning(
                "failure_dump_write_failed",
                dumps_dir=str(settings.dumps_dir),
                error=str(dump_error),
            )

        logger.error(
            "renderer_parse_failed",
            func=getattr(func, "__name__", repr(func)),
            error=str(e),
            error_type=type(e).__name__,
            dump_file=str(dump_file) if dump_file else None,
            dumps_dir=str(settings.dumps_dir),
            report_to=settings.issues_url or "the ytparse issue tracker",
            exc_info=True,
            **environment_info(),
        )
        return None
