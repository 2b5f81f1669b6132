"""
Global configuration for gen6-ball-inheritance.
All constants and tunable parameters live here.
"""

import logging

# ── Data formats ─────────────────────────────────────────────────────────────
GEN6_FORMAT = 6

# The Ability Patch (hidden ability unlock) exists from the Gen 8 formats on.
ABILITY_PATCH_MIN_FORMAT = 8

# ── Abilities ────────────────────────────────────────────────────────────────
# Ability numbers are stored as single flags: 1 = first, 2 = second,
# 4 = hidden.
ABILITY_NUMBER_FIRST = 1
ABILITY_NUMBER_SECOND = 2
HIDDEN_ABILITY_NUMBER = 4

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO) -> None:
    """Set up root logging for applications embedding the rule engine."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
