from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    bench_dir = Path(__file__).parent
    for item in items:
        if Path(item.fspath).is_relative_to(bench_dir):
            item.add_marker(pytest.mark.benchmark)
