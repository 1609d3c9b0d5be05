import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from roster_jump import config as cfg
from roster_jump.controls import ControlSignal
from roster_jump.cues import NullCuePlayer
from roster_jump.render import AssetLibrary, Renderer
from roster_jump.roster import DEMO_ROSTER
from roster_jump.world import World

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: ←→ to steer. Press space to shoot. Landing on a platform bounces you automatically."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Bounce up an endless nurse roster. Night shifts crumble, rule monsters shoot back, "
        "and power-ups launch you higher. Don't fall off the sheet!"
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    WIDTH, HEIGHT = cfg.WIDTH, cfg.HEIGHT
    FPS = cfg.FPS
    MAX_STEPS = 10000
    END_PENALTY = -10

    def __init__(self, render_mode="rgb_array", assets_dir=None):
        super().__init__()
        self.render_mode = render_mode

        # EXACT spaces:
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.HEIGHT, self.WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        assets = AssetLibrary(assets_dir)
        assets.load_all()
        self.renderer = Renderer(assets)

        # State variables are initialized in reset()
        self.world = None
        self.steps = 0
        self.game_over = False

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        roster = DEMO_ROSTER
        if options and "roster" in options:
            roster = options["roster"]

        self.world = World(rng=self.np_random, cues=NullCuePlayer())
        self.world.start_session(roster)
        self.steps = 0
        self.game_over = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game_over:
            return self._get_observation(), 0, True, False, self._get_info()

        score_before = self.world.score
        self.world.step(ControlSignal.from_action(action))
        self.steps += 1

        reward = float(self.world.score - score_before)
        terminated = not self.world.running
        if terminated:
            self.game_over = True
            reward += self.END_PENALTY
        truncated = not terminated and self.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info()
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.world)
        return self.renderer.to_array()

    def _get_info(self):
        info = {
            "score": self.world.score,
            "steps": self.steps,
            "height": max(0.0, cfg.HEIGHT - self.world.max_height),
            "camera_y": self.world.camera_y,
            "end_reason": self.world.end_reason,
        }
        info.update(self.world.counts())
        return info

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Call after construction to verify the environment contract.
        '''
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        obs, info = self.reset()
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc is False
        assert isinstance(info, dict)
