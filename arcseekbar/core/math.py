import math

Point = tuple[float, float]
Rect = tuple[float, float, float, float]  # left, top, right, bottom

CIRCLE_ANGLE = 360.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def distance(a: Point, b: Point) -> float:
    return math.sqrt(dist2(a, b))


def normalize_angle(angle: float) -> float:
    """
    Fold any finite angle (degrees) into [0, 360).
    """
    return ((angle % CIRCLE_ANGLE) + CIRCLE_ANGLE) % CIRCLE_ANGLE


def angle_of(point: Point, center: Point) -> float:
    """
    Angle in degrees of the ray center -> point, in [0, 360).

    0° is the +X axis. On a y-down screen, angles grow clockwise.
    """
    ang_deg = math.degrees(math.atan2(point[1] - center[1], point[0] - center[0]))
    if ang_deg < 0.0:
        ang_deg += CIRCLE_ANGLE
    # atan2 can round a tiny negative up to exactly 360.0
    return ang_deg if ang_deg < CIRCLE_ANGLE else 0.0


def rotate_point(point: Point, center: Point, degrees: float) -> Point:
    """
    Rotate point about center by the given angle, same orientation as angle_of.
    """
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return (center[0] + dx * c - dy * s, center[1] + dx * s + dy * c)


def rect_center(rect: Rect) -> Point:
    left, top, right, bottom = rect
    return ((left + right) * 0.5, (top + bottom) * 0.5)


def rect_contains(rect: Rect, point: Point) -> bool:
    left, top, right, bottom = rect
    return (left <= point[0] <= right) and (top <= point[1] <= bottom)
