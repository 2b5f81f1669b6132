"""Unit tests for ball_inheritance.permit_table – Gen 6 permit bytes."""
import numpy as np
import pytest
from ball_inheritance.balls import BallType
from ball_inheritance.permit_table import (
    PERMIT, PERMIT_LENGTH, TRACKED_CATEGORIES,
    is_category_permitted, is_species_known, permitted_categories,
    species_permitting, category_coverage,
)
from ball_inheritance.species import MAX_SPECIES_ID_6, Species


class TestTableData:
    def test_length(self):
        assert PERMIT_LENGTH == 716
        assert len(PERMIT) == PERMIT_LENGTH
        assert PERMIT_LENGTH <= MAX_SPECIES_ID_6 + 1

    def test_immutable(self):
        assert isinstance(PERMIT, bytes)
        with pytest.raises(TypeError):
            PERMIT[1] = 0xFF

    def test_known_bytes(self):
        assert PERMIT[0] == 0x00
        assert PERMIT[1] == 0x03     # Bulbasaur
        assert PERMIT[10] == 0x3B    # Caterpie
        assert PERMIT[16] == 0x2F    # Pidgey
        assert PERMIT[132] == 0x00   # Ditto
        assert PERMIT[172] == 0x0F   # Pichu
        assert PERMIT[Species.DEERLING] == 0x83
        assert PERMIT[Species.PUMPKABOO] == 0x83
        assert PERMIT[715] == 0x03

    def test_high_bit_species(self):
        flagged = [i for i, v in enumerate(PERMIT) if v & 0x80]
        assert flagged == [
            Species.CHIKORITA, Species.CYNDAQUIL, Species.TOTODILE,
            Species.DEERLING, Species.PUMPKABOO,
        ]

    def test_zero_byte_count(self):
        assert PERMIT.count(0) == 97


class TestLookup:
    def test_none_category_always_permitted(self):
        for species in (0, 1, 132, PERMIT_LENGTH, 9999, -1):
            assert is_category_permitted(species, BallType.NONE)

    def test_out_of_range_denied(self):
        for cat in TRACKED_CATEGORIES:
            assert not is_category_permitted(PERMIT_LENGTH, cat)
            assert not is_category_permitted(MAX_SPECIES_ID_6, cat)
            assert not is_category_permitted(-1, cat)

    def test_zero_byte_denies_everything(self):
        for cat in TRACKED_CATEGORIES:
            assert not is_category_permitted(132, cat)

    def test_bit_test(self):
        # 0x03: Gen 3 and Gen 4 only
        assert is_category_permitted(1, BallType.GEN3)
        assert is_category_permitted(1, BallType.GEN4)
        assert not is_category_permitted(1, BallType.SAFARI)
        assert not is_category_permitted(1, BallType.DREAM)

    def test_high_bit_ignored(self):
        # 0x81: Gen 3 plus the unused flag
        assert permitted_categories(Species.CHIKORITA) == (BallType.GEN3,)

    def test_is_species_known(self):
        assert is_species_known(0)
        assert is_species_known(PERMIT_LENGTH - 1)
        assert not is_species_known(PERMIT_LENGTH)
        assert not is_species_known(-1)


class TestPermittedCategories:
    def test_all_six(self):
        # Paras 0x3F
        assert permitted_categories(46) == TRACKED_CATEGORIES

    def test_unknown_species(self):
        assert permitted_categories(PERMIT_LENGTH + 10) == ()

    def test_zero_byte(self):
        assert permitted_categories(132) == ()

    def test_matches_lookup(self):
        for species in range(PERMIT_LENGTH):
            cats = permitted_categories(species)
            for cat in TRACKED_CATEGORIES:
                assert (cat in cats) == is_category_permitted(species, cat)


class TestBulkQueries:
    def test_species_permitting_sport(self):
        sport = species_permitting(BallType.SPORT)
        assert isinstance(sport, np.ndarray)
        assert 10 in sport   # Caterpie
        assert 1 not in sport
        assert len(sport) == 12

    def test_species_permitting_none(self):
        assert len(species_permitting(BallType.NONE)) == PERMIT_LENGTH

    def test_coverage(self):
        assert category_coverage() == {
            BallType.GEN3: 619,
            BallType.GEN4: 616,
            BallType.SAFARI: 126,
            BallType.APRICORN: 144,
            BallType.SPORT: 12,
            BallType.DREAM: 226,
        }

    def test_every_permitted_species_allows_gen3(self):
        nonzero = set(np.flatnonzero(np.frombuffer(PERMIT, dtype=np.uint8)).tolist())
        assert nonzero == set(species_permitting(BallType.GEN3).tolist())
