import logging
import math
from dataclasses import dataclass
from typing import Literal

from .math import CIRCLE_ANGLE, Point, Rect, clamp, normalize_angle, rect_center, rotate_point

logger = logging.getLogger(__name__)

Op = tuple[Literal["M", "C"], tuple]

# Longest sweep approximated by a single cubic segment
_MAX_SEGMENT_SWEEP = 90.0


@dataclass(frozen=True)
class ArcConfig:
    """
    Shape parameters of the arc for one layout pass.

      - open_angle: gap (degrees) at the arc's bottom, in (0, 360)
      - rotate_angle: rotation (degrees) applied about the rect center at display time
      - bounding_rect: (left, top, right, bottom) in screen units
      - max_value: integer progress at the end of the arc
      - min_value: integer progress at the start of the arc

    In the unrotated frame the arc starts at open_angle / 2 and sweeps
    360 - open_angle degrees clockwise.
    """
    open_angle: float
    rotate_angle: float
    bounding_rect: Rect
    max_value: int
    min_value: int = 0

    def __post_init__(self):
        if not (0.0 < self.open_angle < CIRCLE_ANGLE):
            raise ValueError(f"open_angle must be in (0, 360), got {self.open_angle}")
        if not isinstance(self.max_value, int) or self.max_value <= 0:
            raise ValueError(f"max_value must be a positive integer, got {self.max_value!r}")
        if not 0 <= self.min_value < self.max_value:
            raise ValueError(f"min_value must be in [0, {self.max_value}), got {self.min_value!r}")
        left, top, right, bottom = self.bounding_rect
        if right - left <= 0.0 or bottom - top <= 0.0:
            raise ValueError(f"Degenerate bounding rect {self.bounding_rect}")
        object.__setattr__(self, "rotate_angle", normalize_angle(float(self.rotate_angle)))

    @property
    def center(self) -> Point:
        return rect_center(self.bounding_rect)

    @property
    def start_angle(self) -> float:
        return self.open_angle / 2.0

    @property
    def sweep_angle(self) -> float:
        return CIRCLE_ANGLE - self.open_angle


@dataclass(frozen=True)
class ArcPath:
    """
    Circular arc defined in arc space (unrotated frame).
    """
    center: Point
    radius: float
    start_angle: float
    sweep_angle: float

    def length(self) -> float:
        return self.radius * math.radians(self.sweep_angle)

    def point_at_angle(self, angle: float) -> Point:
        rad = math.radians(angle)
        return (self.center[0] + self.radius * math.cos(rad),
                self.center[1] + self.radius * math.sin(rad))

    @property
    def start_point(self) -> Point:
        return self.point_at_angle(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at_angle(self.start_angle + self.sweep_angle)

    def position_and_tangent_at(self, distance: float) -> tuple[Point, Point]:
        """
        Return (point, unit tangent) at the given distance along the arc.
        The distance is clamped to [0, length()]; the tangent points in the
        direction of travel.
        """
        total = self.length()
        d = clamp(distance, 0.0, total)
        if self.radius <= 0.0:
            return self.center, (1.0, 0.0)
        angle = self.start_angle + math.degrees(d / self.radius)
        rad = math.radians(angle)
        return self.point_at_angle(angle), (-math.sin(rad), math.cos(rad))


def build_arc_path(config: ArcConfig) -> ArcPath:
    left, top, right, bottom = config.bounding_rect
    radius = min(right - left, bottom - top) * 0.5
    path = ArcPath(config.center, radius, config.start_angle, config.sweep_angle)
    logger.debug("Built arc path: center=%s radius=%.2f start=%.1f sweep=%.1f",
                 path.center, radius, path.start_angle, path.sweep_angle)
    return path


def length(path: ArcPath) -> float:
    return path.length()


def position_and_tangent_at(path: ArcPath, distance: float) -> tuple[Point, Point]:
    return path.position_and_tangent_at(distance)


# ---- arc space <-> screen space ---------------------------------------------

def to_arc_space(point: Point, config: ArcConfig) -> Point:
    return rotate_point(point, config.center, -config.rotate_angle)


def to_screen_space(point: Point, config: ArcConfig) -> Point:
    return rotate_point(point, config.center, config.rotate_angle)


# ---- drawing ops ------------------------------------------------------------

def path_ops(path: ArcPath, /) -> list[Op]:
    """
    Convert the arc to simple drawing ops:
      - ("M", (x,y))       moveTo
      - ("C", (c1,c2,p2))  cubicTo, one per slice of at most 90°
    """
    ops: list[Op] = [("M", path.start_point)]
    if path.radius <= 0.0 or path.sweep_angle <= 0.0:
        return ops

    n = max(1, math.ceil(path.sweep_angle / _MAX_SEGMENT_SWEEP))
    step = path.sweep_angle / n
    k = 4.0 / 3.0 * math.tan(math.radians(step) / 4.0) * path.radius
    cx, cy = path.center

    a0 = path.start_angle
    for _ in range(n):
        a1 = a0 + step
        r0 = math.radians(a0)
        r1 = math.radians(a1)
        p0 = path.point_at_angle(a0)
        p3 = path.point_at_angle(a1)
        c1 = (p0[0] - k * math.sin(r0), p0[1] + k * math.cos(r0))
        c2 = (p3[0] + k * math.sin(r1), p3[1] - k * math.cos(r1))
        ops.append(("C", (c1, c2, p3)))
        a0 = a1
    return ops


def content_rect(
        width: float,
        height: float,
        /,
        padding: tuple[float, float, float, float] = (0, 0, 0, 0),
        *,
        arc_width: float = 0.0,
        border_width: float = 0.0,
        shadow_radius: float = 0.0,
) -> Rect:
    """
    Square area the arc is inscribed in for a view of the given size.

    padding is (left, top, right, bottom). The square is centered along the
    longer axis and inset so that the stroke, border and shadow stay visible.
    """
    pad_l, pad_t, pad_r, pad_b = padding
    safe_w = width - pad_l - pad_r
    safe_h = height - pad_t - pad_b
    fix = arc_width / 2.0 + border_width + shadow_radius * 2.0

    if safe_w < safe_h:
        edge = safe_w - fix
        start_x = pad_l
        start_y = (safe_h - safe_w) / 2.0 + pad_t
    else:
        edge = safe_h - fix
        start_x = (safe_w - safe_h) / 2.0 + pad_l
        start_y = pad_t

    rect = (start_x + fix, start_y + fix, start_x + edge, start_y + edge)
    if rect[2] - rect[0] <= 0.0 or rect[3] - rect[1] <= 0.0:
        raise ValueError(f"View of size {width}x{height} is too small for the arc")
    return rect
