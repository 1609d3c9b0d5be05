import pytest

from roster_jump.difficulty import difficulty, difficulty_tier


def test_opening_values():
    d = difficulty(0)
    assert d.monster_chance == pytest.approx(0.05)
    assert d.power_up_chance == pytest.approx(0.08)
    assert d.shoot_interval == 180
    assert d.monster_types == ("hole",)


def test_values_are_bounded():
    d = difficulty(100000)
    assert d.monster_chance == 0.20
    assert d.power_up_chance == 0.03
    assert d.shoot_interval == 60
    assert d.monster_types == ("hole", "fatigue", "double", "budget")


@pytest.mark.parametrize("score,count", [
    (0, 1), (49, 1), (50, 2), (99, 2), (100, 3), (199, 3), (200, 4), (5000, 4),
])
def test_monster_types_unlock_at_thresholds(score, count):
    assert len(difficulty(score).monster_types) == count


def test_curve_is_monotonic():
    previous = difficulty(0)
    for score in range(1, 2500, 7):
        current = difficulty(score)
        assert current.monster_chance >= previous.monster_chance
        assert current.monster_chance <= 0.20
        assert current.shoot_interval <= previous.shoot_interval
        assert current.shoot_interval >= 60
        assert current.power_up_chance <= previous.power_up_chance
        assert set(previous.monster_types) <= set(current.monster_types)
        previous = current


@pytest.mark.parametrize("score,name", [
    (0, "Easy"), (50, "Medium"), (100, "Hard"), (199, "Hard"), (200, "Extreme"),
])
def test_difficulty_tier(score, name):
    assert difficulty_tier(score)[0] == name
