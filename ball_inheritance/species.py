"""
species – National Pokédex ids referenced by the Gen 6 breeding rules.

Only the species named by an ability exception are listed; every other
species is addressed by its plain national-dex number.
"""

from __future__ import annotations

from enum import IntEnum

# Last species introduced in Generation 6 (Volcanion).
MAX_SPECIES_ID_6 = 721


class Species(IntEnum):
    NONE = 0

    # ── Johto / Hoenn / Sinnoh / Unova starters ──
    CHIKORITA = 152
    CYNDAQUIL = 155
    TOTODILE = 158
    TREECKO = 252
    TORCHIC = 255
    MUDKIP = 258
    TURTWIG = 387
    CHIMCHAR = 390
    PIPLUP = 393
    SNIVY = 495
    TEPIG = 498
    OSHAWOTT = 501

    # ── Dream World releases without a hidden-ability Dream Ball ──
    PLUSLE = 311
    MINUN = 312
    KECLEON = 352
    DUSKULL = 355

    # ── Fossils (gift only) ──
    ARCHEN = 566
    TYRUNT = 696
    AMAURA = 698

    # ── Form-conditioned ──
    DEERLING = 585      # form 0 = Spring
    PUMPKABOO = 710     # form 3 = Super Size


# Forms with their own rules
DEERLING_SPRING = 0
PUMPKABOO_SUPER = 3
