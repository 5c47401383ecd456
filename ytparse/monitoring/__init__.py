"""
Failure diagnostics for ytparse.

Usage:
    from ytparse.monitoring import catch_and_log

    record = catch_and_log(dispatch, fragment)
"""

from ytparse.monitoring.failure_dumps import (
    catch_and_log,
    environment_info,
    write_failure_dump,
)

__all__ = [
    "catch_and_log",
    "environment_info",
    "write_failure_dump",
]
