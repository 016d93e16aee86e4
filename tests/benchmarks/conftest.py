"""Benchmark collection hooks."""

from pathlib import Path

import pytest

BENCHMARK_DIR = Path(__file__).parent


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every benchmark; skip slow ones unless selected with -m."""
    slow_selected = "slow" in (config.getoption("markexpr") or "")
    skip_slow = pytest.mark.skip(reason="slow benchmark; select with -m slow")
    for item in items:
        if not item.path.is_relative_to(BENCHMARK_DIR):
            continue
        item.add_marker(pytest.mark.benchmark)
        if item.get_closest_marker("slow") and not slow_selected:
            item.add_marker(skip_slow)
