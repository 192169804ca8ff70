from __future__ import annotations

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--verification-level",
        action="store",
        default="standard",
        choices=("fast", "standard"),
        help=(
            "Select test verification level: "
            "fast (skip slow), "
            "standard (run all)."
        ),
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if config.getoption("--verification-level") != "fast":
        return

    skip_slow = pytest.mark.skip(reason="skipped in fast verification level")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def seven_items() -> list[int]:
    return [10, 20, 30, 40, 50, 60, 70]
