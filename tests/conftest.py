"""Pytest configuration.

Goal: make `import fleetsim` work reliably when running tests without installing
package (editable install).

This repo uses a flat layout (fleetsim/ at repo root). Some environments run
pytest with a working directory where repo root isn't on sys.path, leading to
`ModuleNotFoundError: fleetsim`.

This conftest ensures repo root is on sys.path and provides shared fixtures.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


# 2025-01-08 — среда, 2025-01-11 — суббота
WEDNESDAY_10 = datetime(2025, 1, 8, 10, 0, 0)
SATURDAY_10 = datetime(2025, 1, 11, 10, 0, 0)


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def on_shift_clock():
    return FixedClock(WEDNESDAY_10)


@pytest.fixture
def off_shift_clock():
    return FixedClock(SATURDAY_10)
