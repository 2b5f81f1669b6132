"""
ability_rules – Hidden-ability exceptions per ball category.

A species can be permitted a ball category and still be unable to carry
its hidden ability in that ball: the hidden ability only ever came from
sources that never used those balls (Dream World releases, Friend Safari,
gift fossils...).  Only the hidden ability is restricted; the first and
second ability slots are always fine.

Safari, Apricorn and Sport balls never held a hidden-ability mother in
Gen 6, so every species is banned for those.  The Gen 3, Gen 4 and Dream
categories have explicit species lists, some conditioned on form.
"""

from __future__ import annotations

from typing import FrozenSet

from ball_inheritance.balls import BallType
from ball_inheritance.config import HIDDEN_ABILITY_NUMBER
from ball_inheritance.species import DEERLING_SPRING, PUMPKABOO_SUPER, Species


# ── Species-only exception sets ─────────────────────────────────────────────

# Hidden ability and a Gen 3 ball are each obtainable, never together.
_BANNED_HIDDEN_GEN3: FrozenSet[int] = frozenset({
    Species.CHIKORITA,
    Species.CYNDAQUIL,
    Species.TOTODILE,
})

_BANNED_HIDDEN_GEN4: FrozenSet[int] = frozenset({
    Species.CHIKORITA,
    Species.CYNDAQUIL,
    Species.TOTODILE,
    Species.TREECKO,
    Species.TORCHIC,
    Species.MUDKIP,
    Species.TURTWIG,
    Species.CHIMCHAR,
    Species.PIPLUP,
    Species.SNIVY,
    Species.TEPIG,
    Species.OSHAWOTT,
    # fossils, gift only
    Species.ARCHEN,
    Species.TYRUNT,
    Species.AMAURA,
})

_BANNED_HIDDEN_DREAM: FrozenSet[int] = frozenset({
    Species.PLUSLE,
    Species.MINUN,
    Species.KECLEON,
    Species.DUSKULL,
})


# ── Predicates ──────────────────────────────────────────────────────────────

def is_hidden(ability_number: int) -> bool:
    return ability_number == HIDDEN_ABILITY_NUMBER


def is_banned_hidden_gen3(species: int, form: int) -> bool:
    if species == Species.DEERLING:
        return form != DEERLING_SPRING
    if species == Species.PUMPKABOO:
        return form == PUMPKABOO_SUPER
    return species in _BANNED_HIDDEN_GEN3


def is_banned_hidden_gen4(species: int, form: int) -> bool:
    if species == Species.DEERLING:
        return form != DEERLING_SPRING
    return species in _BANNED_HIDDEN_GEN4


def is_banned_hidden_dream(species: int) -> bool:
    return species in _BANNED_HIDDEN_DREAM


def is_ability_allowed(
    category: BallType, species: int, form: int, ability_number: int,
) -> bool:
    """
    Check whether *ability_number* is possible for an egg of
    *species*/*form* hatched in a ball of *category*.
    """
    if not is_hidden(ability_number):
        return True

    if category == BallType.GEN3:
        return not is_banned_hidden_gen3(species, form)
    if category == BallType.GEN4:
        return not is_banned_hidden_gen4(species, form)
    if category == BallType.DREAM:
        return not is_banned_hidden_dream(species)
    if category in (BallType.SAFARI, BallType.APRICORN, BallType.SPORT):
        return False
    return True
