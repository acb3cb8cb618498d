"""
Root conftest.py for the gobinary test suite.

Pytest plugin that checks every test declares what it protects and how fast
it is expected to run.

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.ReleaseAssetResolver")
    def test_something():
        ...

Configuration:
    TRA_ENFORCE=1 fails collection on missing or malformed markers
    TRA_ENFORCE=0 disables the check (default: warn)
    TIER_TIMEOUT_MULTIPLIER scales tier timeouts (requires pytest-timeout)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# Valid TRA namespace prefixes
VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant",
        "Domain.Policy",
        "UseCase",
        "Port",
        "Adapter",
        "Contract",
    ]
)

# Tier timeout limits in seconds, 0 means no limit
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this "
        "test protects. Must start with one of: "
        + ", ".join(sorted(VALID_TRA_PREFIXES)),
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual).",
    )


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args and isinstance(marker.args[0], int) and 0 <= marker.args[0] <= 4:
            return marker.args[0]
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    """Return one message per test with missing or malformed markers."""
    errors = []
    for item in items:
        tra_markers = list(item.iter_markers(name="tra"))
        if len(tra_markers) != 1 or not tra_markers[0].args:
            errors.append(f"{item.nodeid}: expected exactly one @tra('...') marker")
        else:
            anchor = tra_markers[0].args[0]
            if not isinstance(anchor, str) or not anchor.startswith(
                tuple(VALID_TRA_PREFIXES)
            ):
                errors.append(f"{item.nodeid}: invalid TRA anchor {anchor!r}")

        if _get_tier(item) is None:
            errors.append(f"{item.nodeid}: missing or invalid @tier() marker")
    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Apply timeout based on tier level when pytest-timeout is installed."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))
    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        timeout = TIER_TIMEOUTS.get(tier, 0)
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Enforce TRA and tier markers at collection time."""
    enforce_mode = os.environ.get("TRA_ENFORCE", "warn")
    if enforce_mode != "0":
        errors = _marker_errors(items)
        if errors and enforce_mode == "warn":
            print("\nTRA/Tier Enforcement Warnings:")
            for error in errors:
                print(f"  {error}")
        elif errors:
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA enforcement: {os.environ.get('TRA_ENFORCE', 'warn')}"
