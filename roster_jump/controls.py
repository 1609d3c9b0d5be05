from collections import namedtuple

from roster_jump import config as cfg

POINTER_DEAD_ZONE = 5  # px
POINTER_GAIN = 0.1
DRAG_GAIN = 0.02
TAP_MAX_MS = 200
TAP_MAX_DRAG = 20

# Movement indices shared with the gym action space
MOVE_NONE, MOVE_UP, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT = range(5)


class ControlSignal(namedtuple("ControlSignal", ["horizontal_intent", "fire"])):
    """Device-agnostic per-frame input.

    horizontal_intent is in [-1, 1]; 1 asks for full move speed to the right.
    """

    __slots__ = ()

    @classmethod
    def idle(cls):
        return cls(0.0, False)

    @classmethod
    def from_keys(cls, left, right, fire=False):
        if left:
            return cls(-1.0, bool(fire))
        if right:
            return cls(1.0, bool(fire))
        return cls(0.0, bool(fire))

    @classmethod
    def from_pointer(cls, pointer_x, player_center_x, fire=False):
        diff = pointer_x - player_center_x
        if abs(diff) <= POINTER_DEAD_ZONE:
            return cls(0.0, bool(fire))
        return cls(_clamp(diff * POINTER_GAIN / cfg.MOVE_SPEED), bool(fire))

    @classmethod
    def from_drag(cls, drag_dx, fire=False):
        return cls(_clamp(drag_dx * DRAG_GAIN / cfg.MOVE_SPEED), bool(fire))

    @classmethod
    def from_action(cls, action):
        movement, fire = int(action[0]), int(action[1]) == 1
        return cls.from_keys(movement == MOVE_LEFT, movement == MOVE_RIGHT, fire)


def is_tap(duration_ms, drag_distance):
    """A short touch with little travel counts as a fire request."""
    return duration_ms < TAP_MAX_MS and abs(drag_distance) < TAP_MAX_DRAG


class TouchDrag:
    """Tracks one finger: dragging steers, a quick tap fires on release."""

    def __init__(self):
        self.start_x = None
        self.x = None
        self.started_ms = 0

    @property
    def dragging(self):
        return self.start_x is not None

    def begin(self, x, now_ms):
        self.start_x = self.x = x
        self.started_ms = now_ms

    def move(self, x):
        if self.dragging:
            self.x = x

    def end(self, now_ms):
        """Stop dragging. Returns True when the touch was a tap."""
        if not self.dragging:
            return False
        tapped = is_tap(now_ms - self.started_ms, self.x - self.start_x)
        self.start_x = self.x = None
        return tapped

    def control(self, fire=False):
        if not self.dragging:
            return None
        return ControlSignal.from_drag(self.x - self.start_x, fire)


def _clamp(value):
    return max(-1.0, min(1.0, value))
