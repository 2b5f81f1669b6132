"""Unit tests for ball_inheritance.ability_patch – patch oracles."""
from ball_inheritance.ability_patch import is_ability_patch_possible, never_patchable
from ball_inheritance.config import ABILITY_PATCH_MIN_FORMAT, GEN6_FORMAT


class TestAbilityPatch:
    def test_gen6_and_gen7_not_patchable(self):
        assert not is_ability_patch_possible(GEN6_FORMAT, 152)
        assert not is_ability_patch_possible(7, 152)

    def test_gen8_onward_patchable(self):
        assert is_ability_patch_possible(ABILITY_PATCH_MIN_FORMAT, 152)
        assert is_ability_patch_possible(9, 311)

    def test_never_patchable(self):
        for fmt in range(1, 10):
            assert not never_patchable(fmt, 152)
