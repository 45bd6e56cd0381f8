from .math import Point, Rect, angle_of, normalize_angle, rotate_point, distance, dist2, clamp
from .colors import Color, GradientColorizer, interpolate, sweep_positions
from .geometry import ArcConfig, ArcPath, build_arc_path, content_rect, path_ops, to_arc_space, to_screen_space
from .mapper import ProgressMapper, accept_drag_update, progress_to_distance
from .gestures import HitTester, TouchAction, TouchEvent, TouchPhase, TouchSession, arc_band_region, can_start_drag
from .config import ArcSeekBarConfig, ThumbMode, load_config
from .render import RenderPlan
from .seekbar import ArcSeekBar, ProgressChanged, SeekBarEvent, TrackingStarted, TrackingStopped
