import json
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path

from .colors import Color, WHITE
from .math import CIRCLE_ANGLE, normalize_angle

DEFAULT_EDGE_LENGTH = 260
DEFAULT_ARC_WIDTH = 40.0
DEFAULT_OPEN_ANGLE = 120.0
DEFAULT_ROTATE_ANGLE = 90.0
DEFAULT_BORDER_WIDTH = 0.0
DEFAULT_THUMB_WIDTH = 2.0
DEFAULT_THUMB_RADIUS = 15.0
DEFAULT_SHADOW_RADIUS = 0.0
DEFAULT_MAX_VALUE = 100
DEFAULT_TOUCH_SLOP = 8.0

DEFAULT_ARC_COLORS: tuple[Color, ...] = (
    Color.from_hex("#26c6da"),
    Color.from_hex("#66bb6a"),
    Color.from_hex("#ffca28"),
    Color.from_hex("#ef5350"),
)


class ThumbMode(Enum):
    STROKE = "stroke"
    FILL = "fill"
    FILL_AND_STROKE = "fill_and_stroke"


@dataclass(frozen=True)
class ArcSeekBarConfig:
    """
    Everything configurable on a seek bar. Lengths are in screen units,
    angles in degrees. Colors may be given as Color, "#RRGGBB"/"#AARRGGBB"
    strings, packed ARGB ints or (r, g, b[, a]) tuples.
    """
    arc_colors: tuple[Color, ...] = DEFAULT_ARC_COLORS
    arc_width: float = DEFAULT_ARC_WIDTH
    open_angle: float = DEFAULT_OPEN_ANGLE
    rotate_angle: float = DEFAULT_ROTATE_ANGLE
    max_value: int = DEFAULT_MAX_VALUE
    min_value: int = 0
    progress: int = 0
    border_width: float = DEFAULT_BORDER_WIDTH
    border_color: Color = WHITE
    thumb_radius: float = DEFAULT_THUMB_RADIUS
    thumb_width: float = DEFAULT_THUMB_WIDTH
    thumb_color: Color = WHITE
    thumb_mode: ThumbMode = ThumbMode.STROKE
    shadow_radius: float = DEFAULT_SHADOW_RADIUS
    allow_touch_skip: bool = False
    touch_slop: float = DEFAULT_TOUCH_SLOP
    padding: tuple[float, float, float, float] = field(default=(0.0, 0.0, 0.0, 0.0))

    def __post_init__(self):
        colors = tuple(Color.coerce(c) for c in self.arc_colors)
        if not colors:
            raise ValueError("arc_colors needs at least one color")
        object.__setattr__(self, "arc_colors", colors)
        object.__setattr__(self, "border_color", Color.coerce(self.border_color))
        object.__setattr__(self, "thumb_color", Color.coerce(self.thumb_color))
        if not isinstance(self.thumb_mode, ThumbMode):
            object.__setattr__(self, "thumb_mode", ThumbMode(self.thumb_mode))

        if not (0.0 < self.open_angle < CIRCLE_ANGLE):
            raise ValueError(f"open_angle must be in (0, 360), got {self.open_angle}")
        object.__setattr__(self, "rotate_angle", normalize_angle(float(self.rotate_angle)))

        if not isinstance(self.max_value, int) or isinstance(self.max_value, bool) or self.max_value <= 0:
            raise ValueError(f"max_value must be a positive integer, got {self.max_value!r}")
        if not isinstance(self.min_value, int) or not 0 <= self.min_value < self.max_value:
            raise ValueError(f"min_value must be an integer in [0, {self.max_value}), got {self.min_value!r}")

        for name in ("arc_width", "border_width", "thumb_radius", "thumb_width", "shadow_radius", "touch_slop"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if len(self.padding) != 4:
            raise ValueError("padding must be (left, top, right, bottom)")

    def with_changes(self, **changes) -> "ArcSeekBarConfig":
        return replace(self, **changes)

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Color):
                value = value.to_hex()
            elif isinstance(value, ThumbMode):
                value = value.value
            elif f.name == "arc_colors":
                value = [c.to_hex() for c in value]
            elif isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ArcSeekBarConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        kwargs = dict(data)
        if "arc_colors" in kwargs:
            kwargs["arc_colors"] = tuple(kwargs["arc_colors"])
        if "padding" in kwargs:
            kwargs["padding"] = tuple(float(p) for p in kwargs["padding"])
        return cls(**kwargs)


def load_config(path: str | Path) -> ArcSeekBarConfig:
    with open(path, "r", encoding="utf-8") as f:
        return ArcSeekBarConfig.from_dict(json.load(f))
