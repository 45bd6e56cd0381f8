import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .colors import Color, GradientColorizer
from .config import ArcSeekBarConfig
from .geometry import ArcConfig, ArcPath, build_arc_path, content_rect, to_arc_space, to_screen_space
from .gestures import (
    HitTester,
    RegionPredicate,
    TouchAction,
    TouchEvent,
    TouchPhase,
    TouchSession,
    arc_band_region,
    can_start_drag,
)
from .mapper import ChangeDeduplicator, ProgressMapper, accept_drag_update, fraction_to_progress, progress_to_fraction
from .math import Point, Rect, clamp
from .render import RenderPlan, build_render_plan

logger = logging.getLogger(__name__)

STATE_KEY = "present"


@dataclass(frozen=True)
class TrackingStarted:
    pass


@dataclass(frozen=True)
class ProgressChanged:
    progress: int
    is_user: bool


@dataclass(frozen=True)
class TrackingStopped:
    pass


SeekBarEvent = Union[TrackingStarted, ProgressChanged, TrackingStopped]
Listener = Callable[[SeekBarEvent], None]
RegionBuilder = Callable[[ArcPath, float, Rect], RegionPredicate]


class ArcSeekBar:
    """
    Widget-independent arc seek bar.

    Owns the configuration and the progress fraction (the single source of
    truth); integer progress, thumb position and current color are derived
    from it. A host forwards size changes and touch events, listens to
    events, and draws from render().

    region_builder(path, stroke_width, view_bounds) supplies the predicate
    used to decide whether a tap landed on the arc band. Without one, a
    purely geometric band test is used.
    """

    def __init__(
            self,
            config: Optional[ArcSeekBarConfig] = None,
            *,
            region_builder: Optional[RegionBuilder] = None,
    ):
        self._config = config or ArcSeekBarConfig()
        self._colorizer = GradientColorizer(self._config.arc_colors)
        self._region_builder = region_builder or arc_band_region

        self._present = 0.0
        self._dedup = ChangeDeduplicator()
        self._session = TouchSession()
        self._listeners: list[Listener] = []
        self._invalidate: Optional[Callable[[], None]] = None

        # geometry, available after the first size change
        self._size: Optional[tuple[float, float]] = None
        self._arc: Optional[ArcConfig] = None
        self._mapper: Optional[ProgressMapper] = None
        self._hit_tester: Optional[HitTester] = None
        self._thumb: Optional[Point] = None

        self.set_progress(self._config.progress)

    # ---------- listeners ----------
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_invalidate_callback(self, callback: Optional[Callable[[], None]]) -> None:
        """Called whenever the seek bar needs to be redrawn."""
        self._invalidate = callback

    def _emit(self, event: SeekBarEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _request_redraw(self) -> None:
        if self._invalidate is not None:
            self._invalidate()

    # ---------- configuration ----------
    @property
    def config(self) -> ArcSeekBarConfig:
        return self._config

    def configure(self, **changes) -> None:
        """
        Replace configuration fields, e.g. configure(open_angle=90).
        Geometry is rebuilt and the progress fraction kept, unless progress
        is among the changes. Nothing changes if the new geometry is invalid.
        """
        config = self._config.with_changes(**changes)
        if self._size is not None:
            self._rebuild_geometry(config, self._size)
        self._config = config
        self._colorizer = GradientColorizer(config.arc_colors)
        if "progress" in changes:
            self.set_progress(config.progress)
        self._request_redraw()

    def set_region_builder(self, builder: RegionBuilder) -> None:
        self._region_builder = builder
        if self._size is not None:
            self._rebuild_geometry(self._config, self._size)

    # ---------- geometry ----------
    def on_size_changed(self, width: float, height: float) -> None:
        self._rebuild_geometry(self._config, (float(width), float(height)))

    def _rebuild_geometry(self, cfg: ArcSeekBarConfig, size: tuple[float, float]) -> None:
        # raises before touching any state when the size cannot hold the arc
        width, height = size
        rect = content_rect(
            width, height, cfg.padding,
            arc_width=cfg.arc_width,
            border_width=cfg.border_width,
            shadow_radius=cfg.shadow_radius,
        )
        arc = ArcConfig(cfg.open_angle, cfg.rotate_angle, rect, cfg.max_value, cfg.min_value)
        path = build_arc_path(arc)
        region = self._region_builder(path, cfg.arc_width, (0.0, 0.0, width, height))

        self._size = size
        self._arc = arc
        self._mapper = ProgressMapper(arc, path)
        self._hit_tester = HitTester(region)
        self._update_thumb()
        logger.debug("Geometry rebuilt for %.0fx%.0f, content rect %s", width, height, rect)

    def _update_thumb(self) -> None:
        if self._mapper is not None:
            self._thumb = self._mapper.thumb_position(self._present)

    def _require_geometry(self) -> ProgressMapper:
        if self._mapper is None:
            raise RuntimeError("Seek bar has no geometry yet; call on_size_changed() first")
        return self._mapper

    @property
    def arc_config(self) -> Optional[ArcConfig]:
        return self._arc

    @property
    def path(self) -> ArcPath:
        return self._require_geometry().path

    @property
    def mapper(self) -> ProgressMapper:
        return self._require_geometry()

    @property
    def thumb_position(self) -> Point:
        """Thumb center in arc space."""
        self._require_geometry()
        return self._thumb

    @property
    def thumb_screen_position(self) -> Point:
        return to_screen_space(self.thumb_position, self._arc)

    # ---------- progress ----------
    def _set_fraction(self, fraction: float) -> None:
        self._present = clamp(fraction, 0.0, 1.0)
        self._update_thumb()

    @property
    def fraction(self) -> float:
        return self._present

    @property
    def progress(self) -> int:
        return fraction_to_progress(self._present, self._config.max_value, self._config.min_value)

    def get_progress(self) -> int:
        return self.progress

    def set_progress(self, progress: int) -> None:
        cfg = self._config
        progress = int(clamp(int(progress), cfg.min_value, cfg.max_value))
        self._set_fraction(progress_to_fraction(progress, cfg.max_value, cfg.min_value))
        logger.debug("set_progress: %d (fraction %.4f)", progress, self._present)
        self._emit(ProgressChanged(progress, False))
        self._request_redraw()

    @property
    def color(self) -> Color:
        return self._colorizer.color_at(self._present)

    def get_color(self) -> Color:
        return self.color

    def color_at(self, fraction: float) -> Color:
        return self._colorizer.color_at(fraction)

    # ---------- touch ----------
    @property
    def touch_phase(self) -> TouchPhase:
        return self._session.phase

    def on_touch(self, event: TouchEvent) -> bool:
        """
        Feed one screen-space touch event. Returns True when the event was consumed.
        """
        match event.action:
            case TouchAction.DOWN:
                self._on_down(event.point)
            case TouchAction.MOVE:
                self._on_move(event.point)
            case TouchAction.UP:
                self._on_up(event.point)
            case TouchAction.CANCEL:
                self._on_cancel()
            case _:
                raise ValueError(event.action)
        self._request_redraw()
        return True

    def _on_down(self, point: Point) -> None:
        can_drag = False
        if self._mapper is not None:
            arc_point = to_arc_space(point, self._arc)
            can_drag = can_start_drag(arc_point, self._thumb, self._config.thumb_radius)
        self._session.begin(point, can_drag)
        self._emit(TrackingStarted())

    def _on_move(self, point: Point) -> None:
        session = self._session
        if not session.active:
            return
        session.track(point, self._config.touch_slop)
        if not session.can_drag or self._mapper is None:
            return

        fraction = self._mapper.touch_to_progress(point)
        if not accept_drag_update(self._present, fraction, allow_skip=self._config.allow_touch_skip):
            return
        self._set_fraction(fraction)
        session.moved = True
        session.phase = TouchPhase.DRAGGING

        progress = self.progress
        if self._dedup.should_emit(progress):
            self._emit(ProgressChanged(progress, True))
            self._dedup.mark(progress)

    def _on_up(self, point: Point) -> None:
        session = self._session
        if not session.active:
            return
        if session.moved:
            self._emit(TrackingStopped())
        if session.tap_candidate:
            self._on_tap(point)
        session.end()

    def _on_cancel(self) -> None:
        session = self._session
        if not session.active:
            return
        if session.moved:
            self._emit(TrackingStopped())
        session.end()

    def _on_tap(self, point: Point) -> bool:
        if self._mapper is None:
            return False
        if not self._hit_tester.is_inside_arc_region(to_arc_space(point, self._arc)):
            return False
        self._set_fraction(self._mapper.touch_to_progress(point))
        logger.debug("Tap at %s set fraction %.4f", point, self._present)
        self._emit(ProgressChanged(self.progress, True))
        self._emit(TrackingStopped())
        return True

    # ---------- state ----------
    def save_state(self) -> dict:
        return {STATE_KEY: float(self._present)}

    def restore_state(self, state: dict) -> None:
        self._set_fraction(float(state[STATE_KEY]))
        self._emit(ProgressChanged(self.progress, False))
        self._request_redraw()

    # ---------- drawing ----------
    def render(self) -> Optional[RenderPlan]:
        if self._mapper is None:
            return None
        return build_render_plan(self._config, self._arc, self._mapper.path, self._thumb, self.color)
