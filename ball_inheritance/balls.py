"""
balls – Ball ids and their breeding-inheritance categories.

Every ball a Gen 6 egg can inherit from its mother belongs to one of a few
historical groups (the era it was introduced in, or a special source such
as the Safari Zone or Apricorn crafting).  The group decides which bit of
the species permission byte must be set for the inheritance to be legal.

Balls outside every group (Poké, Master, Cherish, anything unknown) are
never tracked and classify to ``BallType.NONE``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple


class Ball(IntEnum):
    NONE = 0
    MASTER = 1
    ULTRA = 2
    GREAT = 3
    POKE = 4
    SAFARI = 5
    NET = 6
    DIVE = 7
    NEST = 8
    REPEAT = 9
    TIMER = 10
    LUXURY = 11
    PREMIER = 12
    DUSK = 13
    HEAL = 14
    QUICK = 15
    CHERISH = 16
    FAST = 17
    LEVEL = 18
    LURE = 19
    HEAVY = 20
    LOVE = 21
    FRIEND = 22
    MOON = 23
    SPORT = 24
    DREAM = 25
    BEAST = 26


class BallType(IntEnum):
    """Inheritance category; the value is the bit index in the permit byte."""
    GEN3 = 0
    GEN4 = 1
    SAFARI = 2
    APRICORN = 3
    SPORT = 4
    DREAM = 5

    NONE = 9    # untracked, no bit


_BALL_CATEGORY: Dict[int, BallType] = {
    Ball.ULTRA: BallType.GEN3,
    Ball.GREAT: BallType.GEN3,
    Ball.SAFARI: BallType.SAFARI,

    Ball.NET: BallType.GEN3,
    Ball.DIVE: BallType.GEN3,
    Ball.NEST: BallType.GEN3,
    Ball.REPEAT: BallType.GEN3,
    Ball.TIMER: BallType.GEN3,
    Ball.LUXURY: BallType.GEN3,
    Ball.PREMIER: BallType.GEN3,

    Ball.DUSK: BallType.GEN4,
    Ball.HEAL: BallType.GEN4,
    Ball.QUICK: BallType.GEN4,

    Ball.FAST: BallType.APRICORN,
    Ball.LEVEL: BallType.APRICORN,
    Ball.LURE: BallType.APRICORN,
    Ball.HEAVY: BallType.APRICORN,
    Ball.LOVE: BallType.APRICORN,
    Ball.FRIEND: BallType.APRICORN,
    Ball.MOON: BallType.APRICORN,

    Ball.SPORT: BallType.SPORT,
    Ball.DREAM: BallType.DREAM,
}


def classify(ball: int) -> BallType:
    """Return the inheritance category of *ball* (``NONE`` if untracked)."""
    return _BALL_CATEGORY.get(ball, BallType.NONE)


def balls_in_category(category: BallType) -> Tuple[Ball, ...]:
    """All balls that classify to *category*, in id order."""
    return tuple(b for b in Ball if classify(b) == category)
