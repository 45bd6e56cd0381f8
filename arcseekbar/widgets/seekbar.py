from typing import Optional, override

from PySide6 import QtCore, QtGui, QtWidgets

from arcseekbar.core import (
    ArcPath,
    ArcSeekBar,
    ArcSeekBarConfig,
    ProgressChanged,
    RenderPlan,
    TouchAction,
    TouchEvent,
    TrackingStarted,
    TrackingStopped,
    path_ops,
)
from arcseekbar.core.config import DEFAULT_EDGE_LENGTH
from arcseekbar.core.gestures import RegionPredicate
from arcseekbar.core.math import Rect
from arcseekbar.widgets.utils import make_qpath, point_to_qpoint, qpoint_to_point, to_qcolor


def stroked_region(path: ArcPath, stroke_width: float, bounds: Rect) -> RegionPredicate:
    """
    Filled outline of the stroked arc (round caps) clipped to the view bounds.
    """
    stroker = QtGui.QPainterPathStroker()
    stroker.setWidth(stroke_width)
    stroker.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
    outline = stroker.createStroke(make_qpath(path_ops(path)))

    left, top, right, bottom = bounds
    clip = QtGui.QPainterPath()
    clip.addRect(QtCore.QRectF(left, top, right - left, bottom - top))
    region = outline.intersected(clip)

    def contains(point) -> bool:
        return region.contains(point_to_qpoint(point))

    return contains


class ArcSeekBarWidget(QtWidgets.QWidget):
    """
    Qt host for an ArcSeekBar: forwards resize and mouse events to the
    pure-Python model, re-emits its events as signals and paints its RenderPlan.
    """

    progressChanged = QtCore.Signal(int, bool)  # progress, is_user
    trackingStarted = QtCore.Signal()
    trackingStopped = QtCore.Signal()

    def __init__(self, config: Optional[ArcSeekBarConfig] = None, parent=None):
        super().__init__(parent)
        self._seekbar = ArcSeekBar(config, region_builder=stroked_region)
        self._seekbar.add_listener(self._forward_event)
        self._seekbar.set_invalidate_callback(self.update)
        self._pressed = False

        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)
        self._sync_geometry()

    # --- public API -------------------------
    @property
    def seekbar(self) -> ArcSeekBar:
        return self._seekbar

    def progress(self) -> int:
        return self._seekbar.progress

    @QtCore.Slot(int)
    def set_progress(self, progress: int) -> None:
        self._seekbar.set_progress(progress)

    def color(self) -> QtGui.QColor:
        return to_qcolor(self._seekbar.color)

    def configure(self, **changes) -> None:
        self._seekbar.configure(**changes)

    def save_state(self) -> dict:
        return self._seekbar.save_state()

    def restore_state(self, state: dict) -> None:
        self._seekbar.restore_state(state)

    # --- size hints -------------------------
    @override
    def sizeHint(self):
        return QtCore.QSize(DEFAULT_EDGE_LENGTH, DEFAULT_EDGE_LENGTH)

    @override
    def minimumSizeHint(self):
        return QtCore.QSize(80, 80)

    # --- internals --------------------------
    def _forward_event(self, event) -> None:
        match event:
            case ProgressChanged(progress=progress, is_user=is_user):
                self.progressChanged.emit(progress, is_user)
            case TrackingStarted():
                self.trackingStarted.emit()
            case TrackingStopped():
                self.trackingStopped.emit()

    def _sync_geometry(self) -> None:
        try:
            self._seekbar.on_size_changed(self.width(), self.height())
        except ValueError:
            # too small to hold the arc; keep the previous geometry
            return

    def _send(self, action: TouchAction, pos: QtCore.QPointF) -> None:
        x, y = qpoint_to_point(pos)
        self._seekbar.on_touch(TouchEvent(action, x, y))

    # --- Qt events --------------------------
    @override
    def resizeEvent(self, event: QtGui.QResizeEvent):
        super().resizeEvent(event)
        self._sync_geometry()

    @override
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        self._pressed = True
        self._send(TouchAction.DOWN, QtCore.QPointF(e.position()))

    @override
    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if not self._pressed:
            return
        self._send(TouchAction.MOVE, QtCore.QPointF(e.position()))

    @override
    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton or not self._pressed:
            return
        self._pressed = False
        self._send(TouchAction.UP, QtCore.QPointF(e.position()))

    @override
    def hideEvent(self, event: QtGui.QHideEvent):
        if self._pressed:
            self._pressed = False
            self._seekbar.on_touch(TouchEvent(TouchAction.CANCEL, 0.0, 0.0))
        super().hideEvent(event)

    # --- painting ---------------------------
    @override
    def paintEvent(self, _event):
        plan = self._seekbar.render()
        if plan is None:
            return
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)

        cx, cy = plan.center
        p.translate(cx, cy)
        p.rotate(plan.rotate_angle)
        p.translate(-cx, -cy)

        arc_path = make_qpath(plan.arc_ops)
        self._draw_shadow(p, plan, arc_path)
        self._draw_arc(p, plan, arc_path)
        self._draw_border(p, plan, arc_path)
        self._draw_thumb(p, plan)
        p.end()

    def _outline(self, arc_path: QtGui.QPainterPath, width: float) -> QtGui.QPainterPath:
        stroker = QtGui.QPainterPathStroker()
        stroker.setWidth(width)
        stroker.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        return stroker.createStroke(arc_path)

    def _draw_shadow(self, painter: QtGui.QPainter, plan: RenderPlan, arc_path: QtGui.QPainterPath):
        if not plan.draws_shadow:
            return
        color = to_qcolor(plan.shadow_color)
        color.setAlpha(90)
        pen = QtGui.QPen(color, plan.arc_width + plan.shadow_radius * 2.0)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        painter.strokePath(arc_path, pen)

    def _draw_arc(self, painter: QtGui.QPainter, plan: RenderPlan, arc_path: QtGui.QPainterPath):
        cx, cy = plan.center
        # QConicalGradient runs counter-clockwise, the arc clockwise
        gradient = QtGui.QConicalGradient(cx, cy, 0.0)
        for pos, color in plan.arc_stops:
            gradient.setColorAt(1.0 - pos, to_qcolor(color))
        if len(plan.arc_stops) == 1:
            gradient.setColorAt(0.0, to_qcolor(plan.arc_stops[0][1]))
            gradient.setColorAt(1.0, to_qcolor(plan.arc_stops[0][1]))

        pen = QtGui.QPen(QtGui.QBrush(gradient), plan.arc_width)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        painter.strokePath(arc_path, pen)

    def _draw_border(self, painter: QtGui.QPainter, plan: RenderPlan, arc_path: QtGui.QPainterPath):
        if not plan.draws_border:
            return
        outline = self._outline(arc_path, plan.arc_width)
        painter.strokePath(outline, QtGui.QPen(to_qcolor(plan.border_color), plan.border_width))

    def _draw_thumb(self, painter: QtGui.QPainter, plan: RenderPlan):
        color = to_qcolor(plan.thumb_color)
        pen = QtGui.QPen(color, plan.thumb_width)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(QtGui.QBrush(color) if plan.thumb_filled else QtCore.Qt.BrushStyle.NoBrush)
        painter.drawEllipse(point_to_qpoint(plan.thumb_center), plan.thumb_radius, plan.thumb_radius)
