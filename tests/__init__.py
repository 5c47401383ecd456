"""
ytparse Test Suite.

- unit/: renderer normalizers, router, helpers and failure dumps
- integration/: whole search pages through parse_items and the CLI
- conftest.py: renderer fixtures and isolated settings

Run tests with: poetry run pytest
Run with coverage: poetry run pytest --cov=ytparse
"""
