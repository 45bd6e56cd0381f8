from PySide6 import QtCore, QtGui

from arcseekbar.core import Color, Point
from arcseekbar.core.geometry import Op


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())


def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


def to_qcolor(color: Color | None) -> QtGui.QColor | None:
    if color is None:
        return None
    return color.to_QColor()


def make_qpath(ops: list[Op]) -> QtGui.QPainterPath:
    qp = QtGui.QPainterPath()
    for op, data in ops:
        if op == "M":
            qp.moveTo(point_to_qpoint(data))
        elif op == "C":
            c1, c2, p2 = data
            qp.cubicTo(point_to_qpoint(c1), point_to_qpoint(c2), point_to_qpoint(p2))
    return qp
