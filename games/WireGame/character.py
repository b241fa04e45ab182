"""Character entity with constant-velocity, axis-aligned movement.

The character never stops on its own: once a heading is set, every
tick() moves it by the full speed along that axis until the heading
changes. There is no stopped frame between headings.
"""

from typing import Optional, Protocol, Union

from models import Point2D, Rectangle
from models.wire import Direction
from iraira.logging import get_logger

log = get_logger('character')

# Screen y grows downwards
_AXIS_STEP = {
    Direction.UP: (0.0, -1.0),
    Direction.DOWN: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
}


def parse_direction(value: Union[str, Direction, None]) -> Optional[Direction]:
    """Map a direction tag to Direction, or None if it is not one."""
    if isinstance(value, Direction):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Direction(value)
    except ValueError:
        return None


class KinematicBody(Protocol):
    """Interface the state machine drives each tick."""

    @property
    def position(self) -> Point2D: ...

    @property
    def heading(self) -> Optional[Direction]: ...

    def set_heading(self, direction: Union[str, Direction]) -> None: ...

    def tick(self, speed: float) -> None: ...

    def reset(self, point: Optional[Point2D] = None) -> None: ...

    def bounds(self) -> Rectangle: ...


class Character:
    """Player-controlled square.

    The position is the top-left corner of the bounding square.
    """

    def __init__(self, start: Point2D, size: float):
        """Initialize character.

        Args:
            start: Initial (and reset) position of the top-left corner
            size: Side length of the bounding square
        """
        if size <= 0:
            raise ValueError(f'Character size must be positive, got {size}')
        self._origin = start
        self._position = start
        self._size = float(size)
        self._heading: Optional[Direction] = None

    @property
    def position(self) -> Point2D:
        return self._position

    @property
    def origin(self) -> Point2D:
        """Position that reset() without arguments returns to."""
        return self._origin

    @property
    def size(self) -> float:
        return self._size

    @property
    def heading(self) -> Optional[Direction]:
        return self._heading

    @property
    def center(self) -> Point2D:
        half = self._size / 2
        return self._position.offset(half, half)

    def set_heading(self, direction: Union[str, Direction]) -> None:
        """Change heading. Unknown values are ignored.

        Motion is never paused by a heading change; the next tick moves
        at full speed in the new direction.
        """
        parsed = parse_direction(direction)
        if parsed is None:
            log.debug("Ignoring unknown heading %r", direction)
            return
        if parsed != self._heading:
            log.debug("Heading %s -> %s", self._heading, parsed.value)
        self._heading = parsed

    def tick(self, speed: float) -> None:
        """Advance by exactly `speed` pixels along the heading axis."""
        if self._heading is None:
            return
        dx, dy = _AXIS_STEP[self._heading]
        self._position = self._position.offset(dx * speed, dy * speed)

    def reset(self, point: Optional[Point2D] = None) -> None:
        """Move to `point` (which becomes the new origin) or back to the
        origin, and clear the heading."""
        if point is not None:
            self._origin = point
        self._position = self._origin
        self._heading = None

    def bounds(self) -> Rectangle:
        """Axis-aligned bounding square at the current position."""
        return Rectangle(
            x=self._position.x,
            y=self._position.y,
            width=self._size,
            height=self._size,
        )

    def __repr__(self) -> str:
        heading = self._heading.value if self._heading else None
        return f"Character(pos={self._position}, size={self._size}, heading={heading})"
