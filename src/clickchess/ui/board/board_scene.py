"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from clickchess.core.board import Board
from clickchess.core.types import ALL_SQUARES, BOARD_SIZE, Square
from clickchess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and pieces.

    The scene holds no game logic: it draws whatever it is given and reports
    clicks.

    Signals:
        square_clicked(int, int): ``(row, col)`` of a clicked square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._show_coordinates = True
        self._show_valid_moves = True
        self._show_last_move = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._valid_move_items: list[QGraphicsEllipseItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def render_state(
        self,
        board: Board,
        *,
        selected: Square | None = None,
        valid_moves: list[Square] | None = None,
        last_move: tuple[Square, Square] | None = None,
        check_square: Square | None = None,
    ) -> None:
        """Redraw pieces and highlights from an engine snapshot."""
        self._board = board
        self._sync_pieces()
        self._clear_items(self._highlight_items)
        self._clear_items(self._valid_move_items)

        if last_move is not None and self._show_last_move:
            for sq in last_move:
                self._add_highlight(sq, self._theme.last_move, 0.4)
        if check_square is not None:
            self._add_highlight(check_square, self._theme.check, 0.5)
        if selected is not None:
            self._add_highlight(selected, self._theme.selected, 0.6)
        if valid_moves and self._show_valid_moves:
            for sq in valid_moves:
                self._add_valid_marker(sq, capture=not board.is_empty(sq))

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_valid_moves(self, visible: bool) -> None:
        """Show or hide valid-move markers."""
        self._show_valid_moves = visible
        if not visible:
            self._clear_items(self._valid_move_items)

    def set_show_last_move(self, visible: bool) -> None:
        self._show_last_move = visible

    def piece_glyph(self, sq: Square) -> str | None:
        """Text currently drawn on *sq*, ``None`` if empty."""
        item = self._piece_items.get(sq)
        return item.text() if item is not None else None

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Helvetica", max(9, t // 8))

        for sq in ALL_SQUARES:
            is_light = (sq.row + sq.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Rank numbers (left edge)
            if sq.col == 0:
                self._add_coord(str(BOARD_SIZE - sq.row), text_color, font,
                                QPointF(2, sq.row * t + 1))

            # File letters (bottom edge)
            if sq.row == BOARD_SIZE - 1:
                self._add_coord(chr(ord("a") + sq.col), text_color, font,
                                QPointF(sq.col * t + t - 12, sq.row * t + t - 16))

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, label: str, color: QColor, font: QFont, pos: QPointF) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(pos)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        self._clear_items(list(self._piece_items.values()))
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq, piece in self._board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(QColor(20, 20, 20)))
            rect = item.boundingRect()
            item.setPos(
                sq.col * t + (t - rect.width()) / 2,
                sq.row * t + (t - rect.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _add_highlight(self, sq: Square, color: QColor, z: float) -> None:
        t = self.TILE
        rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        self._highlight_items.append(rect)

    def _add_valid_marker(self, sq: Square, *, capture: bool) -> None:
        t = self.TILE
        size = t * 0.6
        offset = (t - size) / 2
        dot = QGraphicsEllipseItem(sq.col * t + offset, sq.row * t + offset, size, size)
        if capture:
            dot.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            dot.setPen(QPen(self._theme.valid_capture, 3))
        else:
            dot.setBrush(QBrush(self._theme.valid_move))
            dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.8)
        self.addItem(dot)
        self._valid_move_items.append(dot)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq.row, sq.col)
            event.accept()
            return
        super().mousePressEvent(event)

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        t = self.TILE
        row = int(pos.y() // t)
        col = int(pos.x() // t)
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return Square(row, col)
        return None
