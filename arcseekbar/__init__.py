from .core import (
    ArcSeekBar,
    ArcSeekBarConfig,
    Color,
    GradientColorizer,
    ProgressChanged,
    ThumbMode,
    TouchAction,
    TouchEvent,
    TrackingStarted,
    TrackingStopped,
    load_config,
)

__all__ = [
    "ArcSeekBar",
    "ArcSeekBarConfig",
    "Color",
    "GradientColorizer",
    "ProgressChanged",
    "ThumbMode",
    "TouchAction",
    "TouchEvent",
    "TrackingStarted",
    "TrackingStopped",
    "load_config",
]
__version__ = "0.1.0"
