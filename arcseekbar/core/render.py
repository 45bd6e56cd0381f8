from dataclasses import dataclass

from .colors import Color, color_stops
from .config import ArcSeekBarConfig, ThumbMode
from .geometry import ArcConfig, ArcPath, Op, path_ops
from .math import Point


@dataclass(frozen=True)
class RenderPlan:
    """
    Everything a host needs to draw one frame. All coordinates are in arc
    space: the host rotates its painter by rotate_angle about center first.
    """
    center: Point
    rotate_angle: float
    path: ArcPath
    arc_ops: list[Op]
    arc_width: float
    arc_stops: list[tuple[float, Color]]
    border_width: float
    border_color: Color
    shadow_radius: float
    shadow_color: Color
    thumb_center: Point
    thumb_radius: float
    thumb_width: float
    thumb_color: Color
    thumb_mode: ThumbMode

    @property
    def draws_border(self) -> bool:
        return self.border_width > 0

    @property
    def draws_shadow(self) -> bool:
        return self.shadow_radius > 0

    @property
    def thumb_filled(self) -> bool:
        return self.thumb_mode is not ThumbMode.STROKE


def build_render_plan(
        config: ArcSeekBarConfig,
        arc: ArcConfig,
        path: ArcPath,
        thumb: Point,
        current_color: Color,
) -> RenderPlan:
    return RenderPlan(
        center=arc.center,
        rotate_angle=arc.rotate_angle,
        path=path,
        arc_ops=path_ops(path),
        arc_width=config.arc_width,
        arc_stops=color_stops(config.arc_colors, config.open_angle),
        border_width=config.border_width,
        border_color=config.border_color,
        shadow_radius=config.shadow_radius,
        shadow_color=current_color,
        thumb_center=thumb,
        thumb_radius=config.thumb_radius,
        thumb_width=config.thumb_width,
        thumb_color=config.thumb_color,
        thumb_mode=config.thumb_mode,
    )
