import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .geometry import ArcPath
from .math import Point, Rect, angle_of, distance, normalize_angle, rect_contains

RegionPredicate = Callable[[Point], bool]

# Touch-down distance allowed around the thumb, in thumb radii
DRAG_RADIUS_FACTOR = 1.5


class TouchAction(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class TouchEvent:
    action: TouchAction
    x: float
    y: float

    @property
    def point(self) -> Point:
        return self.x, self.y


class TouchPhase(Enum):
    IDLE = "idle"
    DRAG_ARMED = "drag_armed"
    DRAG_REJECTED = "drag_rejected"
    DRAGGING = "dragging"


@dataclass
class TouchSession:
    """
    Per-gesture state, reset on every touch-down.
      - can_drag: decided once at touch-down
      - moved: a drag update was applied since touch-down
      - tap_candidate: the pointer has not left the touch slop yet
    """
    down_point: Point = (0.0, 0.0)
    can_drag: bool = False
    moved: bool = False
    tap_candidate: bool = False
    phase: TouchPhase = TouchPhase.IDLE

    def begin(self, point: Point, can_drag: bool) -> None:
        self.down_point = point
        self.can_drag = can_drag
        self.moved = False
        self.tap_candidate = True
        self.phase = TouchPhase.DRAG_ARMED if can_drag else TouchPhase.DRAG_REJECTED

    def track(self, point: Point, touch_slop: float) -> None:
        if self.tap_candidate and distance(point, self.down_point) > touch_slop:
            self.tap_candidate = False

    def end(self) -> None:
        self.can_drag = False
        self.tap_candidate = False
        self.phase = TouchPhase.IDLE

    @property
    def active(self) -> bool:
        return self.phase is not TouchPhase.IDLE


def can_start_drag(touch_down: Point, thumb: Point, thumb_radius: float) -> bool:
    """
    Both points in arc space. A drag may start only near the thumb.
    """
    return distance(touch_down, thumb) <= thumb_radius * DRAG_RADIUS_FACTOR


class HitTester:
    """
    Decides whether an arc-space point lies on the filled arc band.
    Membership is delegated to a region predicate, usually supplied by the host.
    """

    def __init__(self, region: RegionPredicate):
        self._region = region

    def is_inside_arc_region(self, point: Point, /) -> bool:
        return bool(self._region(point))


def arc_band_region(path: ArcPath, stroke_width: float, bounds: Rect | None = None) -> RegionPredicate:
    """
    Geometric stand-in for a rasterized stroke outline: points within
    stroke_width / 2 of the arc's center line, round caps included,
    optionally restricted to bounds.
    """
    half = stroke_width / 2.0

    def contains(point: Point) -> bool:
        if bounds is not None and not rect_contains(bounds, point):
            return False
        offset = normalize_angle(angle_of(point, path.center) - path.start_angle)
        if offset <= path.sweep_angle:
            gap = abs(math.hypot(point[0] - path.center[0], point[1] - path.center[1]) - path.radius)
        else:
            gap = min(distance(point, path.start_point), distance(point, path.end_point))
        return gap <= half

    return contains
