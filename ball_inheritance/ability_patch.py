"""
ability_patch – Default oracles for "can the ability have been patched?".

Once an Ability Patch exists for a data format, a hidden ability no longer
proves anything about how the egg was hatched, so the hidden-ability
exceptions are skipped.  The ball context takes any callable with the
``(format, species) -> bool`` signature; these are the stock ones.
"""

from __future__ import annotations

from typing import Callable

from ball_inheritance.config import ABILITY_PATCH_MIN_FORMAT

# (format, species) -> ability reassignment possible
AbilityPatchCheck = Callable[[int, int], bool]


def is_ability_patch_possible(format: int, species: int) -> bool:
    """True for data formats that have the Ability Patch item."""
    return format >= ABILITY_PATCH_MIN_FORMAT


def never_patchable(format: int, species: int) -> bool:
    """Oracle for callers that only handle native, unpatched data."""
    return False
