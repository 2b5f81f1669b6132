"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def context():
    """Ball context that never treats an ability as patched."""
    from ball_inheritance.ability_patch import never_patchable
    from ball_inheritance.ball_context import BallContext6
    return BallContext6(ability_patch_check=never_patchable)


@pytest.fixture
def make_specimen():
    """Factory for Gen 6 specimens with a given ability number."""
    from ball_inheritance.ball_context import BredSpecimen
    from ball_inheritance.config import GEN6_FORMAT

    def _make(ability_number, format=GEN6_FORMAT):
        return BredSpecimen(ability_number=ability_number, format=format)
    return _make
