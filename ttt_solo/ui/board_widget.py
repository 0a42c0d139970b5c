from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

PLAYER_COLOR = "#8acaff"
SYSTEM_COLOR = "#ff8a8a"


class BoardWidget(QWidget):
    """
    draws the 3x3 board and reports clicks as a cell index
    """
    cell_clicked = Signal(int)  # emits 0-8 on click

    def __init__(self, board, parent=None):
        super().__init__(parent)
        self.board = board              # read-only view of the game board
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True
        self._highlight = None          # winning line to stroke through

    def set_accept_clicks(self, accept):
        self._accept_clicks = accept

    def set_highlight(self, line):
        self._highlight = line
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def _cell_center(self, index, ox, oy, cell_size):
        r, c = divmod(index, 3)
        return QPointF(ox + c * cell_size + cell_size / 2,
                       oy + r * cell_size + cell_size / 2)

    def paintEvent(self, event):
        """
        grid, X/O marks, winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        painter.fillRect(self.rect(), QColor("#333"))
        cell_size = side / 3
        # grid lines
        painter.setPen(QPen(QColor("#555"), 2))
        for i in range(1, 3):
            x = ox + i * cell_size
            painter.drawLine(int(x), int(oy), int(x), int(oy + side))
            y = oy + i * cell_size
            painter.drawLine(int(ox), int(y), int(ox + side), int(y))
        # marks
        rad = cell_size / 2 * 0.7
        for index, mark in enumerate(self.board.cells):
            if not mark.value:
                continue
            center = self._cell_center(index, ox, oy, cell_size)
            cx, cy = center.x(), center.y()
            if mark.value == 'X':
                painter.setPen(QPen(QColor(PLAYER_COLOR), 4))
                painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
            else:
                painter.setPen(QPen(QColor(SYSTEM_COLOR), 4))
                painter.drawEllipse(center, rad, rad)
        if self._highlight:
            color = PLAYER_COLOR if self.board[self._highlight[0]].value == 'X' else SYSTEM_COLOR
            painter.setPen(QPen(QColor(color), 8, Qt.SolidLine, Qt.RoundCap))
            painter.drawLine(self._cell_center(self._highlight[0], ox, oy, cell_size),
                             self._cell_center(self._highlight[-1], ox, oy, cell_size))
        painter.end()

    def index_at(self, x, y):
        """
        cell index under widget coords, or None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / 3
        col = min(int((x - ox) // cell), 2)
        row = min(int((y - oy) // cell), 2)
        return row * 3 + col

    def mouseReleaseEvent(self, event):
        if not self._accept_clicks:
            return
        index = self.index_at(event.position().x(), event.position().y())
        if index is not None:
            self.cell_clicked.emit(index)  # controller decides if it counts
