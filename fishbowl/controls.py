"""
Player input state.

InputState is owned by whatever delivers key events (a window, a test,
a replay script) and handed to the player-controlled creature by
reference. The simulation only ever reads it. Nothing here registers
event handlers.
"""

import math
from dataclasses import dataclass
from typing import Dict

from .errors import InvalidArgumentError


DIRECTIONS = ('up', 'down', 'left', 'right')
BURST = 'burst'
REST = 'rest'

# Raw key name (lowercased) -> logical input name
DEFAULT_KEY_BINDINGS: Dict[str, str] = {
    'arrowup': 'up',
    'arrowdown': 'down',
    'arrowleft': 'left',
    'arrowright': 'right',
    's': BURST,
    'a': REST,
}


@dataclass(frozen=True)
class MovementIntent:
    """
    Movement request derived from input flags.

    Attributes:
        dx: Horizontal component (unit-length together with dy, or 0)
        dy: Vertical component (+y is down)
        burst: Speed burst held
        resting: Rest mode toggled on
    """
    dx: float
    dy: float
    burst: bool
    resting: bool

    @property
    def is_moving(self) -> bool:
        return self.dx != 0 or self.dy != 0


class InputState:
    """
    Directional intent plus burst/rest modifiers.

    Directions and burst follow the key: press sets, release clears.
    Rest is a toggle flipped on press; release is ignored.
    """

    def __init__(self, key_bindings: Dict[str, str] = None):
        self.up = False
        self.down = False
        self.left = False
        self.right = False
        self.burst = False
        self.resting = False
        self.key_bindings = dict(DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings)

    def press(self, name: str):
        """
        Apply a press signal for a logical input.

        Args:
            name: One of up, down, left, right, burst, rest

        Raises:
            InvalidArgumentError: Unknown input name
        """
        if name in DIRECTIONS:
            setattr(self, name, True)
        elif name == BURST:
            self.burst = True
        elif name == REST:
            self.resting = not self.resting
        else:
            raise InvalidArgumentError(f"Unknown input: {name!r}")

    def release(self, name: str):
        """
        Apply a release signal for a logical input.

        Args:
            name: One of up, down, left, right, burst, rest

        Raises:
            InvalidArgumentError: Unknown input name
        """
        if name in DIRECTIONS:
            setattr(self, name, False)
        elif name == BURST:
            self.burst = False
        elif name == REST:
            pass
        else:
            raise InvalidArgumentError(f"Unknown input: {name!r}")

    def handle_key_down(self, key: str) -> bool:
        """Translate a raw key press; returns False for unbound keys"""
        name = self.key_bindings.get(key.lower())
        if name is None:
            return False
        self.press(name)
        return True

    def handle_key_up(self, key: str) -> bool:
        """Translate a raw key release; returns False for unbound keys"""
        name = self.key_bindings.get(key.lower())
        if name is None:
            return False
        self.release(name)
        return True

    def reset(self):
        """Clear every flag (e.g. when the host window loses focus)"""
        self.up = self.down = self.left = self.right = False
        self.burst = False
        self.resting = False

    def movement_vector(self) -> MovementIntent:
        """
        Combine direction flags into a movement request.

        Opposite keys cancel. Diagonals are normalized so they are no
        faster than straight lines.

        Returns:
            MovementIntent with unit (or zero) direction and modifier flags
        """
        dx = 0.0
        dy = 0.0

        if self.up:
            dy -= 1.0
        if self.down:
            dy += 1.0
        if self.left:
            dx -= 1.0
        if self.right:
            dx += 1.0

        magnitude = math.sqrt(dx * dx + dy * dy)
        if magnitude > 0:
            dx /= magnitude
            dy /= magnitude

        return MovementIntent(dx=dx, dy=dy, burst=self.burst, resting=self.resting)

    def to_dict(self) -> dict:
        return {
            'up': self.up,
            'down': self.down,
            'left': self.left,
            'right': self.right,
            'burst': self.burst,
            'resting': self.resting,
        }
