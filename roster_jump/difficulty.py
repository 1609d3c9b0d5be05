from collections import namedtuple

Difficulty = namedtuple(
    "Difficulty", ["monster_chance", "power_up_chance", "shoot_interval", "monster_types"]
)

# Tier thresholds double as the points where a new obstacle kind unlocks
TIERS = (
    (50, "Easy", (76, 175, 80)),
    (100, "Medium", (255, 193, 7)),
    (200, "Hard", (255, 152, 0)),
)
TOP_TIER = ("Extreme", (255, 0, 0))


def difficulty(score):
    """Spawn rates and danger for the given score.

    Pure and cheap: the loop calls it every frame without caching.
    """
    if score < 50:
        monster_types = ("hole",)
    elif score < 100:
        monster_types = ("hole", "fatigue")
    elif score < 200:
        monster_types = ("hole", "fatigue", "double")
    else:
        monster_types = ("hole", "fatigue", "double", "budget")

    return Difficulty(
        monster_chance=min(0.05 + score / 1000 * 0.15, 0.20),
        power_up_chance=max(0.08 - score / 1000 * 0.05, 0.03),
        shoot_interval=max(180 - score / 500 * 120, 60),
        monster_types=monster_types,
    )


def difficulty_tier(score):
    """HUD label and colour for the score."""
    for threshold, name, color in TIERS:
        if score < threshold:
            return name, color
    return TOP_TIER
