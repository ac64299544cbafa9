# type: ignore
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QPainter, QBrush, QColor, QPen

from . import geometry
from .config import Config

# Square ring that paints a geometry.DrawPlan
class RingWidget(QWidget):
    def __init__(self, settings: Config = None, parent=None):
        super().__init__(parent)
        self.settings = settings or Config()
        self.progress = 0.0
        self.colors = {role: QColor(value) for role, value in self.settings.role_colors().items()}
        self.setMinimumSize(160, 160)
        sp = QSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        sp.setHeightForWidth(True)
        self.setSizePolicy(sp)

    def hasHeightForWidth(self):
        return True

    def heightForWidth(self, width):
        return width

    def set_progress(self, progress: float):
        if progress != self.progress:
            self.progress = progress
            self.update()

    def draw_plan(self) -> geometry.DrawPlan:
        # keep the dot and the widest stroke inside the widget
        inset = max(geometry.DOT_RADIUS, geometry.BACKGROUND_STROKE / 2)
        return geometry.render(self.progress, self.width(), self.height(), inset=inset)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        plan = self.draw_plan()

        for shape in plan.primitives():
            color = self.colors[shape.role]
            if isinstance(shape, geometry.Arc):
                if not shape.sweep_angle:
                    continue
                pen = QPen(color, shape.stroke_width)
                pen.setCapStyle(Qt.FlatCap)
                painter.setPen(pen)
                painter.setBrush(Qt.NoBrush)
                cx, cy = shape.center
                rect = QRectF(cx - shape.radius, cy - shape.radius, shape.radius * 2, shape.radius * 2)
                start, span = geometry.qt_arc_angles(shape)
                painter.drawArc(rect, start, span)
            elif shape.filled:
                painter.setPen(Qt.NoPen)
                painter.setBrush(QBrush(color))
                painter.drawEllipse(QPointF(*shape.center), shape.radius, shape.radius)
            else:
                painter.setPen(QPen(color, shape.stroke_width))
                painter.setBrush(Qt.NoBrush)
                painter.drawEllipse(QPointF(*shape.center), shape.radius, shape.radius)
        painter.end()
