from roster_jump.controls import ControlSignal
from roster_jump.difficulty import Difficulty, difficulty, difficulty_tier
from roster_jump.world import World, step

__all__ = ["ControlSignal", "Difficulty", "World", "difficulty", "difficulty_tier", "step"]
