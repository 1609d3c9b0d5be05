import logging
from collections import deque

logger = logging.getLogger(__name__)

CUES = ("jump", "powerup", "hit", "shoot")


class LoggingCuePlayer:
    """Default cue sink: records cues in the log instead of playing audio."""

    def __init__(self):
        self.played = deque(maxlen=64)

    def play(self, name):
        if name not in CUES:
            logger.warning("Ignoring unknown cue %r", name)
            return
        self.played.append(name)
        logger.debug("Playing cue: %s", name)


class NullCuePlayer:
    """Drops every cue. Used for headless rollouts."""

    def play(self, name):
        pass
