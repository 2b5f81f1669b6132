"""
ball_context – Gen 6 ball inheritance decisions.

Combines the ball classifier, the per-species permit table and the
hidden-ability exceptions into the two checks a legality reporter needs:

  - ``can_breed_with_ball(species, form, ball)`` – could an egg of this
    species hatch in this ball at all?
  - ``check_specimen(species, form, ball, pk)`` – the same question for an
    actual Pokémon, also checking its ability slot against the ball.

The Poké Ball, and any ball whose inheritance is not tracked, is always
accepted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Protocol, overload

from ball_inheritance.ability_patch import AbilityPatchCheck, is_ability_patch_possible
from ball_inheritance.ability_rules import is_ability_allowed
from ball_inheritance.balls import Ball, BallType, classify
from ball_inheritance.config import GEN6_FORMAT
from ball_inheritance.permit_table import is_category_permitted

logger = logging.getLogger(__name__)


# ── Results ─────────────────────────────────────────────────────────────────

class BallInheritanceResult(str, Enum):
    VALID = "valid"
    INVALID = "invalid"             # species can never hatch in this ball
    BAD_ABILITY = "bad_ability"     # ball fine, ability slot is not

    @property
    def message(self) -> str:
        return RESULT_MESSAGES[self]


RESULT_MESSAGES: Dict[BallInheritanceResult, str] = {
    BallInheritanceResult.VALID: "Ball can be inherited by this species.",
    BallInheritanceResult.INVALID: "Ball cannot be inherited by this species.",
    BallInheritanceResult.BAD_ABILITY: "Ball cannot be inherited with the hidden ability.",
}


# ── Specimen ────────────────────────────────────────────────────────────────

class Specimen(Protocol):
    """What the context reads from a Pokémon: its data format and ability."""
    format: int
    ability_number: int


@dataclass(frozen=True, slots=True)
class BredSpecimen:
    """Minimal concrete specimen for callers without a full Pokémon object."""
    ability_number: int
    format: int = GEN6_FORMAT


# ── Context ─────────────────────────────────────────────────────────────────

class BallContext6:
    """
    Ball inheritance permissions for the Gen 6 games (X/Y, OR/AS).

    Stateless apart from the injected Ability Patch oracle, so one instance
    can be shared freely.
    """

    def __init__(self, ability_patch_check: AbilityPatchCheck = is_ability_patch_possible):
        self._ability_patch_check = ability_patch_check

    @overload
    def can_breed_with_ball(self, species: int, form: int, ball: int) -> bool: ...

    @overload
    def can_breed_with_ball(
        self, species: int, form: int, ball: int, pk: Specimen,
    ) -> BallInheritanceResult: ...

    def can_breed_with_ball(self, species, form, ball, pk=None):
        """
        Without *pk*, return whether the ball is possible for the species.
        With *pk*, return the full ``BallInheritanceResult`` for it.
        """
        if pk is not None:
            return self.check_specimen(species, form, ball, pk)

        category = classify(ball)
        # Eagerly accept the common untracked case
        if category == BallType.NONE:
            return True
        return is_category_permitted(species, category)

    def check_specimen(
        self, species: int, form: int, ball: int, pk: Specimen,
    ) -> BallInheritanceResult:
        category = classify(ball)
        if category == BallType.NONE:
            return BallInheritanceResult.VALID

        if not is_category_permitted(species, category):
            logger.debug("Species %d cannot inherit %s (%s)", species, _ball_name(ball), category.name)
            return BallInheritanceResult.INVALID

        if self._ability_patch_check(pk.format, species):
            return BallInheritanceResult.VALID
        if not is_ability_allowed(category, species, form, pk.ability_number):
            logger.debug(
                "Species %d-%d in %s cannot have ability %d",
                species, form, _ball_name(ball), pk.ability_number,
            )
            return BallInheritanceResult.BAD_ABILITY
        return BallInheritanceResult.VALID

    def get_legal_balls(self, species: int) -> List[Ball]:
        """Every ball an egg of *species* can hatch in, in id order."""
        return [b for b in Ball if b != Ball.NONE and self.can_breed_with_ball(species, 0, b)]


def _ball_name(ball: int) -> str:
    try:
        return Ball(ball).name
    except ValueError:
        return f"ball#{ball}"


# Shared default context
INSTANCE = BallContext6()
