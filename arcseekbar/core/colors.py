import math
from dataclasses import dataclass
from typing import Iterable, Sequence, TYPE_CHECKING

from .math import CIRCLE_ANGLE, clamp

if TYPE_CHECKING:
    from PySide6.QtGui import QColor


def _channel(value: int) -> int:
    return int(max(0, min(255, value)))


@dataclass(frozen=True)
class Color:
    """
    Pure-theory color container (RGB + alpha), using the same integer
    ranges as Qt for easy bridging:
      - r, g, b, a: 0..255
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in [0,255], got {value}")

    @staticmethod
    def from_rgb(r: int, g: int, b: int, a: int = 255) -> "Color":
        return Color(r, g, b, a)

    @staticmethod
    def from_argb(argb: int) -> "Color":
        """
        Unpack a packed 0xAARRGGBB integer.
        """
        return Color((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF)

    @staticmethod
    def from_hex(text: str) -> "Color":
        """
        Parse "#RRGGBB" or "#AARRGGBB".
        """
        digits = text.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Unsupported color string {text!r}")
        value = int(digits, 16)
        if len(digits) == 6:
            value |= 0xFF000000
        return Color.from_argb(value)

    @staticmethod
    def coerce(value) -> "Color":
        """
        Accepts a Color, a hex string, a packed ARGB int or an (r, g, b[, a]) tuple.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return Color.from_hex(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return Color.from_argb(value)
        if isinstance(value, (tuple, list)) and len(value) in (3, 4):
            return Color(*(int(c) for c in value))
        raise TypeError(f"Cannot interpret {value!r} as a color")

    def to_rgb(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def to_rgba(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def to_argb(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        if self.a == 255:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"#{self.a:02x}{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_QColor(self) -> "QColor":
        from PySide6.QtGui import QColor
        return QColor(self.r, self.g, self.b, self.a)

    @staticmethod
    def from_qcolor(qcolor: "QColor") -> "Color":
        return Color(qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha())


WHITE = Color(255, 255, 255)


class GradientColorizer:
    """
    Linear RGB interpolation over evenly spaced color stops.

    With N stops, stop i sits at i / (N - 1). A single stop yields a
    constant color. Output alpha is always 255.
    """

    def __init__(self, stops: Iterable[Color]):
        self._stops: tuple[Color, ...] = tuple(Color.coerce(c) for c in stops)
        if not self._stops:
            raise ValueError("GradientColorizer needs at least one color stop")

    @property
    def stops(self) -> tuple[Color, ...]:
        return self._stops

    def __len__(self) -> int:
        return len(self._stops)

    def color_at(self, fraction: float, /) -> Color:
        stops = self._stops
        n = len(stops)
        if n == 1 or fraction <= 0.0:
            return stops[0]
        if fraction >= 1.0:
            return stops[-1]

        width = 1.0 / (n - 1)
        for i in range(n):
            if fraction <= i * width:
                start = stops[i - 1]
                end = stops[i]
                ratio = (fraction - width * (i - 1)) / width
                return interpolate(start, end, ratio)
        # float rounding can leave (n - 1) * width a hair below 1.0
        return stops[-1]


def interpolate(start: Color, end: Color, ratio: float) -> Color:
    """
    Per-channel linear blend, rounded half up, fully opaque.
    """
    r = start.r + math.floor((end.r - start.r) * ratio + 0.5)
    g = start.g + math.floor((end.g - start.g) * ratio + 0.5)
    b = start.b + math.floor((end.b - start.b) * ratio + 0.5)
    return Color(_channel(r), _channel(g), _channel(b), 255)


def sweep_positions(open_angle: float, count: int) -> list[float]:
    """
    Positions (fractions of a full turn, clockwise from 0°) of `count` colors
    spread evenly over the visible arc.
    """
    if count <= 0:
        raise ValueError("count must be positive")
    start = (open_angle / 2.0) / CIRCLE_ANGLE
    stop = (CIRCLE_ANGLE - open_angle / 2.0) / CIRCLE_ANGLE
    if count == 1:
        return [start]
    step = (stop - start) / (count - 1)
    return [clamp(start + step * i, 0.0, 1.0) for i in range(count)]


def color_stops(colors: Sequence[Color], open_angle: float) -> list[tuple[float, Color]]:
    return list(zip(sweep_positions(open_angle, len(colors)), colors))
