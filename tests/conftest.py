from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure repo root is importable (for the src/ and simulations/ packages).
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture
def reference_params():
    from simulations.common import SimulationParameters

    return SimulationParameters(principal=1000.0, years=40, mean_return=0.10, std_dev=0.15, trials=10)
