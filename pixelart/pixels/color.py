"""RGB colors for pixels."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


class InvalidColorError(ValueError):
    """Raised when a value cannot be turned into a PixelColor."""


def _check_channel(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidColorError(f"Channel {name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise InvalidColorError(f"Channel {name} must be in range 0..255, got {value}")
    return value


@dataclass(frozen=True, order=True)
class PixelColor:
    """Simple RGB color of a pixel.

    The default value is white (255 for all channels), not black.
    """
    r: int = 255
    g: int = 255
    b: int = 255

    def __post_init__(self):
        _check_channel("r", self.r)
        _check_channel("g", self.g)
        _check_channel("b", self.b)

    @classmethod
    def splat(cls, value: int) -> "PixelColor":
        """Create a color using the same value for all channels."""
        return cls(value, value, value)

    @classmethod
    def from_red(cls, value: int) -> "PixelColor":
        return cls(value, 0, 0)

    @classmethod
    def from_green(cls, value: int) -> "PixelColor":
        return cls(0, value, 0)

    @classmethod
    def from_blue(cls, value: int) -> "PixelColor":
        return cls(0, 0, value)

    @classmethod
    def from_hex(cls, value: str) -> "PixelColor":
        """Create a color from a ``#rrggbb`` (or ``rrggbb``) string."""
        text = value.lstrip('#')
        if len(text) != 6:
            raise InvalidColorError(f"Expected 6 hex digits, got '{value}'")
        try:
            return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError:
            raise InvalidColorError(f"Invalid hex color '{value}'") from None

    @classmethod
    def coerce(cls, value: "ColorLike") -> "PixelColor":
        """Turn a color-like value into a PixelColor.

        Args:
            value: A PixelColor, an (r, g, b) sequence, an int used for all
                channels, or the name of a color constant

        Returns:
            PixelColor instance
        """
        if isinstance(value, PixelColor):
            return value
        if isinstance(value, str):
            named = NAMED_COLORS.get(value.lower())
            if named is not None:
                return named
            return cls.from_hex(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.splat(value)
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return cls(*(int(v) if hasattr(v, '__index__') else v for v in value))
        # numpy rows and other sequences of three ints
        if hasattr(value, '__len__') and len(value) == 3:
            return cls(*(int(v) for v in value))
        raise InvalidColorError(f"Cannot convert {value!r} to a PixelColor")

    def with_red(self, value: int) -> "PixelColor":
        return PixelColor(value, self.g, self.b)

    def with_green(self, value: int) -> "PixelColor":
        return PixelColor(self.r, value, self.b)

    def with_blue(self, value: int) -> "PixelColor":
        return PixelColor(self.r, self.g, value)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        """RGBA tuple; a pixel color is always fully opaque."""
        return (self.r, self.g, self.b, 255)

    def blend(self, other: "ColorLike", ratio: float = 0.5) -> "PixelColor":
        """Linearly interpolate between this color and another.

        Args:
            other: Target color
            ratio: 0.0 keeps this color, 1.0 returns ``other``

        Returns:
            Blended color
        """
        if not 0.0 <= ratio <= 1.0:
            raise ValueError(f"Blend ratio must be in [0, 1], got {ratio}")
        other = PixelColor.coerce(other)
        mix = lambda a, b: int(round(a + (b - a) * ratio))
        return PixelColor(mix(self.r, other.r), mix(self.g, other.g), mix(self.b, other.b))

    def __str__(self) -> str:
        name = _NAMES.get(self.rgb)
        if name is not None:
            return name
        return f"({self.r}, {self.g}, {self.b})"


ColorLike = Union[PixelColor, Tuple[int, int, int], int, str]

WHITE = PixelColor.splat(255)
BLACK = PixelColor.splat(0)
RED = PixelColor.from_red(255)
GREEN = PixelColor.from_green(255)
BLUE = PixelColor.from_blue(255)
YELLOW = PixelColor(255, 255, 0)
CYAN = PixelColor(0, 255, 255)
MAGENTA = PixelColor(255, 0, 255)

NAMED_COLORS = {
    "white": WHITE,
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "cyan": CYAN,
    "magenta": MAGENTA,
}

# Only the primaries print by name
_NAMES = {
    BLACK.rgb: "black",
    WHITE.rgb: "white",
    RED.rgb: "red",
    GREEN.rgb: "green",
    BLUE.rgb: "blue",
}


def coerce_optional(value: Optional["ColorLike"]) -> Optional[PixelColor]:
    """Like PixelColor.coerce but lets None (an empty cell) through."""
    if value is None:
        return None
    return PixelColor.coerce(value)
