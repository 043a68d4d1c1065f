"""Pixel positions: free positions, grid-validated positions and named spots."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union


class Direction(Enum):
    """A direction on the grid, in clockwise order starting from up."""
    UP = "up"
    UP_RIGHT = "up_right"
    RIGHT = "right"
    DOWN_RIGHT = "down_right"
    DOWN = "down"
    DOWN_LEFT = "down_left"
    LEFT = "left"
    UP_LEFT = "up_left"

    @property
    def is_main(self) -> bool:
        return self in MAIN_DIRECTIONS

    def clockwise(self) -> "Direction":
        """Next direction going clockwise (wraps around)."""
        members = list(Direction)
        return members[(members.index(self) + 1) % len(members)]


MAIN_DIRECTIONS = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


def single_cycle(initial: Direction) -> Iterator[Direction]:
    """Yield every direction exactly once, clockwise, starting at ``initial``."""
    current = initial
    while True:
        yield current
        current = current.clockwise()
        if current == initial:
            return


@dataclass(frozen=True, order=True)
class PixelPosition:
    """A (row, column) pair not tied to any grid size.

    Moving up or left saturates at 0; moving down or right is unbounded.
    """
    row: int
    column: int

    def __post_init__(self):
        if self.row < 0 or self.column < 0:
            raise ValueError(f"Position can not be negative: ({self.row}, {self.column})")

    def expand(self) -> Tuple[int, int]:
        return (self.row, self.column)

    def up(self, amount: int = 1) -> "PixelPosition":
        return PixelPosition(max(self.row - amount, 0), self.column)

    def left(self, amount: int = 1) -> "PixelPosition":
        return PixelPosition(self.row, max(self.column - amount, 0))

    def down(self, amount: int = 1) -> "PixelPosition":
        return PixelPosition(self.row + amount, self.column)

    def right(self, amount: int = 1) -> "PixelPosition":
        return PixelPosition(self.row, self.column + amount)

    def direction(self, direction: Direction, amount: int = 1) -> "PixelPosition":
        moves = {
            Direction.UP: lambda p: p.up(amount),
            Direction.RIGHT: lambda p: p.right(amount),
            Direction.DOWN: lambda p: p.down(amount),
            Direction.LEFT: lambda p: p.left(amount),
            Direction.UP_RIGHT: lambda p: p.up(amount).right(amount),
            Direction.DOWN_RIGHT: lambda p: p.down(amount).right(amount),
            Direction.DOWN_LEFT: lambda p: p.down(amount).left(amount),
            Direction.UP_LEFT: lambda p: p.up(amount).left(amount),
        }
        return moves[direction](self)

    def bound(self, height: int, width: int) -> "StrictPosition":
        """Validate this position against a grid size.

        Raises:
            PixelPositionOutOfBoundError: If row or column are out of bound
        """
        return StrictPosition(self.row, self.column, height, width)

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


class PixelPositionOutOfBoundError(IndexError):
    """Raised when a position does not fit inside a grid.

    ``row`` and ``column`` are the raw values, which may be negative.
    """

    def __init__(self, row: int, column: int, height: int, width: int):
        self.row = row
        self.column = column
        self.height = height
        self.width = width
        row_bad = not 0 <= row < height
        column_bad = not 0 <= column < width
        if row_bad and column_bad:
            self.axis = "both"
            message = (f"Both provided row and column values ({row}, {column}) are out of "
                       f"bound ({height}, {width}).")
        elif row_bad:
            self.axis = "row"
            message = f"The provided row value {row} is out of row bound ({height})."
        else:
            self.axis = "column"
            message = f"The provided column value {column} is out of column bound ({width})."
        super().__init__(message)

    def adjust(self) -> "StrictPosition":
        """Clamp the invalid position to the nearest valid row and/or column."""
        row = min(max(self.row, 0), self.height - 1)
        column = min(max(self.column, 0), self.width - 1)
        return StrictPosition(row, column, self.height, self.width)


class StrictPosition:
    """A position guaranteed to be inside a ``height`` x ``width`` grid."""

    __slots__ = ("_row", "_column", "_height", "_width")

    def __init__(self, row: int, column: int, height: int, width: int):
        if height <= 0 or width <= 0:
            raise ValueError(f"Grid size must be positive, got ({height}, {width})")
        if not (0 <= row < height and 0 <= column < width):
            raise PixelPositionOutOfBoundError(row, column, height, width)
        self._row = row
        self._column = column
        self._height = height
        self._width = width

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def expand(self) -> Tuple[int, int]:
        return (self._row, self._column)

    def unbound(self) -> PixelPosition:
        return PixelPosition(self._row, self._column)

    def _bound(self, position: PixelPosition) -> "StrictPosition":
        return position.bound(self._height, self._width)

    def checked_direction(self, direction: Direction, amount: int = 1) -> "StrictPosition":
        """Move in ``direction`` if the result stays on the grid.

        Moving up or left past the border saturates at 0 first, so only
        moves down or right can leave the grid.

        Raises:
            PixelPositionOutOfBoundError: If the move leaves the grid
        """
        return self._bound(self.unbound().direction(direction, amount))

    def checked_up(self, amount: int = 1) -> "StrictPosition":
        return self.checked_direction(Direction.UP, amount)

    def checked_down(self, amount: int = 1) -> "StrictPosition":
        return self.checked_direction(Direction.DOWN, amount)

    def checked_left(self, amount: int = 1) -> "StrictPosition":
        return self.checked_direction(Direction.LEFT, amount)

    def checked_right(self, amount: int = 1) -> "StrictPosition":
        return self.checked_direction(Direction.RIGHT, amount)

    def bounding_direction(self, direction: Direction, amount: int = 1) -> "StrictPosition":
        """Move in ``direction`` as far as possible, stopping at the border."""
        try:
            return self.checked_direction(direction, amount)
        except PixelPositionOutOfBoundError as e:
            return e.adjust()

    def bounding_up(self, amount: int = 1) -> "StrictPosition":
        return self.bounding_direction(Direction.UP, amount)

    def bounding_down(self, amount: int = 1) -> "StrictPosition":
        return self.bounding_direction(Direction.DOWN, amount)

    def bounding_left(self, amount: int = 1) -> "StrictPosition":
        return self.bounding_direction(Direction.LEFT, amount)

    def bounding_right(self, amount: int = 1) -> "StrictPosition":
        return self.bounding_direction(Direction.RIGHT, amount)

    def next(self) -> Optional["StrictPosition"]:
        """Row-major successor of this position, or None at the last cell."""
        if self._column + 1 < self._width:
            return StrictPosition(self._row, self._column + 1, self._height, self._width)
        if self._row + 1 < self._height:
            return StrictPosition(self._row + 1, 0, self._height, self._width)
        return None

    def successors(self) -> Iterator["StrictPosition"]:
        """Iterate every position after this one in row-major order."""
        current = self.next()
        while current is not None:
            yield current
            current = current.next()

    def __eq__(self, other) -> bool:
        if not isinstance(other, StrictPosition):
            return NotImplemented
        return (self._row, self._column, self._height, self._width) == \
            (other._row, other._column, other._height, other._width)

    def __hash__(self) -> int:
        return hash((self._row, self._column, self._height, self._width))

    def __iter__(self):
        # Allows ``row, column = position``
        return iter((self._row, self._column))

    def __repr__(self) -> str:
        return (f"StrictPosition(row={self._row}, column={self._column}, "
                f"height={self._height}, width={self._width})")

    def __str__(self) -> str:
        return f"({self._row}, {self._column})"


class StrictPositions(Enum):
    """Named positions of a grid, from ``(0, 0)`` top-left to ``(H - 1, W - 1)``."""
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"
    CENTER = "center"
    TOP_CENTER = "top_center"
    RIGHT_CENTER = "right_center"
    BOTTOM_CENTER = "bottom_center"
    LEFT_CENTER = "left_center"

    def resolve(self, height: int, width: int) -> StrictPosition:
        """The actual position on a ``height`` x ``width`` grid."""
        coordinates = {
            StrictPositions.TOP_LEFT: (0, 0),
            StrictPositions.TOP_RIGHT: (0, width - 1),
            StrictPositions.BOTTOM_RIGHT: (height - 1, width - 1),
            StrictPositions.BOTTOM_LEFT: (height - 1, 0),
            StrictPositions.CENTER: (height // 2, width // 2),
            StrictPositions.TOP_CENTER: (0, width // 2),
            StrictPositions.RIGHT_CENTER: (height // 2, width - 1),
            StrictPositions.BOTTOM_CENTER: (height - 1, width // 2),
            StrictPositions.LEFT_CENTER: (height // 2, 0),
        }
        row, column = coordinates[self]
        return StrictPosition(row, column, height, width)


TOP_LEFT = StrictPositions.TOP_LEFT
TOP_RIGHT = StrictPositions.TOP_RIGHT
BOTTOM_RIGHT = StrictPositions.BOTTOM_RIGHT
BOTTOM_LEFT = StrictPositions.BOTTOM_LEFT
CENTER = StrictPositions.CENTER
TOP_CENTER = StrictPositions.TOP_CENTER
RIGHT_CENTER = StrictPositions.RIGHT_CENTER
BOTTOM_CENTER = StrictPositions.BOTTOM_CENTER
LEFT_CENTER = StrictPositions.LEFT_CENTER

PositionLike = Union[StrictPosition, StrictPositions, PixelPosition, Tuple[int, int]]


def to_strict(position: PositionLike, height: int, width: int) -> StrictPosition:
    """Validate any position-like value against a grid size.

    Args:
        position: StrictPosition, StrictPositions, PixelPosition or (row, column)
        height: Grid height
        width: Grid width

    Returns:
        StrictPosition on the given grid

    Raises:
        PixelPositionOutOfBoundError: If the position is outside the grid
    """
    if isinstance(position, StrictPositions):
        return position.resolve(height, width)
    if isinstance(position, StrictPosition):
        if position.height == height and position.width == width:
            return position
        return StrictPosition(position.row, position.column, height, width)
    if isinstance(position, PixelPosition):
        return position.bound(height, width)
    if isinstance(position, tuple) and len(position) == 2:
        row, column = position
        return StrictPosition(int(row), int(column), height, width)
    raise TypeError(f"Cannot use {position!r} as a pixel position")
