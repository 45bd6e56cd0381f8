from .seekbar import ArcSeekBarWidget, stroked_region

__all__ = [
    "ArcSeekBarWidget",
    "stroked_region",
]
