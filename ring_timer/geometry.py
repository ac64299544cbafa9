"""Ring geometry for the countdown display.

Angles follow the screen convention used by the painter: 0 degrees points
to 3 o'clock and angles grow clockwise because the y axis points down.
270 degrees is therefore the top of the ring.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

START_ANGLE = 270.0

BACKGROUND_STROKE = 8.0
INNER_STROKE = 4.0
ARC_STROKE = 4.0
DOT_RADIUS = 8.0

# colour roles, resolved to real colours by the widget
BACKGROUND = "background"
INNER = "inner"
ACCENT = "accent"


@dataclass(frozen=True)
class Circle:
    center: Tuple[float, float]
    radius: float
    role: str
    stroke_width: Optional[float] = None  # None means filled

    @property
    def filled(self) -> bool:
        return self.stroke_width is None


@dataclass(frozen=True)
class Arc:
    center: Tuple[float, float]
    radius: float
    start_angle: float
    sweep_angle: float
    stroke_width: float
    role: str = ACCENT


@dataclass(frozen=True)
class DrawPlan:
    background_ring: Circle
    inner_ring: Circle
    progress_arc: Arc
    dot: Circle
    dot_angle: float

    @property
    def arc_sweep(self) -> float:
        return self.progress_arc.sweep_angle

    def primitives(self):
        """Primitives in paint order."""
        return (self.background_ring, self.inner_ring, self.progress_arc, self.dot)


def dot_angle_for(progress: float) -> float:
    return (START_ANGLE - 360.0 * progress) % 360.0


def render(progress: float, width: float = 1.0, height: float = 1.0,
           inset: float = 0.0) -> DrawPlan:
    """Map a progress fraction to the primitives of the ring.

    The radius is half the smaller side minus ``inset``, so the ring fits
    any aspect ratio; callers pass the largest stroke or dot size as the
    inset to keep it unclipped.
    """
    progress = min(max(float(progress), 0.0), 1.0)
    cx, cy = width / 2, height / 2
    radius = max(min(cx, cy) - inset, 0.0)
    center = (cx, cy)

    dot_angle = dot_angle_for(progress)
    # truncating remainder: a full revolution sweeps -360 instead of wrapping to 0
    sweep = math.fmod(START_ANGLE - 360.0 * progress, 360.0) - START_ANGLE

    rad = math.radians(dot_angle)
    dot_center = (cx + radius * math.cos(rad), cy + radius * math.sin(rad))

    return DrawPlan(
        background_ring=Circle(center, radius, BACKGROUND, BACKGROUND_STROKE),
        inner_ring=Circle(center, radius, INNER, INNER_STROKE),
        progress_arc=Arc(center, radius, START_ANGLE, sweep, ARC_STROKE),
        dot=Circle(dot_center, DOT_RADIUS, ACCENT),
        dot_angle=dot_angle,
    )


def qt_arc_angles(arc: Arc) -> Tuple[int, int]:
    """Return (start, span) for QPainter.drawArc.

    Qt measures in sixteenths of a degree, counter-clockwise positive.
    """
    return int(round(-arc.start_angle * 16)), int(round(-arc.sweep_angle * 16))
