import logging
import math

from .geometry import ArcConfig, ArcPath, build_arc_path, to_arc_space, to_screen_space
from .math import Point, angle_of, clamp, normalize_angle

logger = logging.getLogger(__name__)

# Largest fraction change a single drag update may apply
MAX_DRAG_STEP = 0.5


class ProgressMapper:
    """
    Converts between touch points, progress fractions and positions on the arc.

    Bound to one ArcConfig; build a new mapper whenever the config changes.
    """

    def __init__(self, config: ArcConfig, path: ArcPath | None = None):
        self._config = config
        self._path = path if path is not None else build_arc_path(config)

    @property
    def config(self) -> ArcConfig:
        return self._config

    @property
    def path(self) -> ArcPath:
        return self._path

    # --- touch -> progress

    def touch_to_progress(self, raw_point: Point, /) -> float:
        """
        Fraction in [0, 1] for a screen-space touch point.

        The point is de-rotated into arc space once; the angle measured there
        is offset by half the open angle and scaled by the arc's sweep.
        Points inside the open gap clamp to the nearest end.
        """
        cfg = self._config
        arc_point = to_arc_space(raw_point, cfg)
        diff = normalize_angle(angle_of(arc_point, cfg.center)) - cfg.open_angle / 2.0
        return clamp(diff / cfg.sweep_angle, 0.0, 1.0)

    # --- progress -> position

    def progress_to_distance(self, fraction: float, /) -> float:
        return progress_to_distance(fraction, self._path)

    def thumb_position(self, fraction: float, /) -> Point:
        """
        Arc-space center of the thumb for the given fraction.
        """
        point, _ = self._path.position_and_tangent_at(self.progress_to_distance(fraction))
        return point

    def thumb_screen_position(self, fraction: float, /) -> Point:
        return to_screen_space(self.thumb_position(fraction), self._config)

    # --- integer progress

    def to_progress(self, fraction: float, /) -> int:
        return fraction_to_progress(fraction, self._config.max_value, self._config.min_value)

    def to_fraction(self, progress: int, /) -> float:
        return progress_to_fraction(progress, self._config.max_value, self._config.min_value)


def fraction_to_progress(fraction: float, max_value: int, min_value: int = 0) -> int:
    span = max_value - min_value
    # round first so that p / span * span floors back to p
    return min_value + math.floor(round(clamp(fraction, 0.0, 1.0) * span, 9))


def progress_to_fraction(progress: int, max_value: int, min_value: int = 0) -> float:
    return clamp((progress - min_value) / (max_value - min_value), 0.0, 1.0)


def progress_to_distance(fraction: float, path: ArcPath) -> float:
    return clamp(fraction, 0.0, 1.0) * path.length()


def accept_drag_update(old_fraction: float, new_fraction: float, *, allow_skip: bool = False) -> bool:
    """
    Whether a drag-derived fraction may replace the current one.

    A drag cannot jump across the open gap (from near 0 to near 1 or back).
    """
    if allow_skip:
        return True
    if abs(new_fraction - old_fraction) > MAX_DRAG_STEP:
        logger.debug("Rejected drag jump %.3f -> %.3f", old_fraction, new_fraction)
        return False
    return True


class ChangeDeduplicator:
    """
    Tracks the last integer progress reported during a drag.
    """

    def __init__(self, last: int = -1):
        self.last = last

    def should_emit(self, progress: int) -> bool:
        return progress != self.last

    def mark(self, progress: int) -> None:
        self.last = progress
