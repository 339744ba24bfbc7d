"""Tests for MainWindow wiring between the session and the widgets."""

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QMessageBox

from clickchess.core.enums import Color
from clickchess.core.types import parse_square
from clickchess.game.store import DEFAULT_SESSION_KEY, MemoryStore
from clickchess.ui import messages
from clickchess.ui.main_window import MainWindow
from clickchess.ui.settings import AppSettings


def _click(window: MainWindow, name: str) -> None:
    sq = parse_square(name)
    window.board_view.square_clicked.emit(sq.row, sq.col)


def test_initial_render() -> None:
    window = MainWindow(store=MemoryStore())
    scene = window.board_view.board_scene
    assert scene.piece_glyph(parse_square("e1")) == "♔"
    assert window.status_panel.turn_text() == "White"
    assert window.status_panel.status_text() == "Playing"
    assert window.move_panel.lines() == [messages.NO_MOVES]


def test_board_clicks_play_a_move() -> None:
    store = MemoryStore()
    window = MainWindow(store=store)
    _click(window, "e2")
    assert len(window.board_view.board_scene._valid_move_items) == 2

    _click(window, "e4")
    scene = window.board_view.board_scene
    assert scene.piece_glyph(parse_square("e4")) == "♙"
    assert scene.piece_glyph(parse_square("e2")) is None
    assert scene._valid_move_items == []
    assert window.status_panel.turn_text() == "Black"
    assert window.move_panel.lines() == ["1. Pe2-e4"]
    assert store.load(DEFAULT_SESSION_KEY)["current_turn"] == "black"


def test_capture_shows_in_status_panel() -> None:
    window = MainWindow(store=MemoryStore())
    for name in ("e2", "e4", "d7", "d5", "e4", "d5"):
        _click(window, name)
    assert window.status_panel.captured_text(Color.BLACK) == "♟"
    assert window.status_panel.captured_text(Color.WHITE) == messages.NONE_CAPTURED


def test_reset_without_confirmation() -> None:
    window = MainWindow(store=MemoryStore(), settings=AppSettings(confirm_reset=False))
    _click(window, "e2")
    _click(window, "e4")
    window.status_panel.reset_clicked.emit()
    assert window.session.engine.move_history == ()
    assert window.move_panel.lines() == [messages.NO_MOVES]
    assert window.status_message() == messages.RESET_DONE


def test_reset_declined_keeps_game(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        QMessageBox,
        "question",
        lambda *_args, **_kwargs: QMessageBox.StandardButton.No,
    )
    window = MainWindow(store=MemoryStore())
    _click(window, "e2")
    _click(window, "e4")
    window.status_panel.reset_clicked.emit()
    assert window.session.engine.move_history == ("Pe2-e4",)


def test_reset_confirmed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        QMessageBox,
        "question",
        lambda *_args, **_kwargs: QMessageBox.StandardButton.Yes,
    )
    window = MainWindow(store=MemoryStore())
    _click(window, "e2")
    _click(window, "e4")
    window.status_panel.reset_clicked.emit()
    assert window.session.engine.move_history == ()


def test_restored_game_announced() -> None:
    store = MemoryStore()
    first = MainWindow(store=store)
    _click(first, "g1")
    _click(first, "f3")
    first.close()

    second = MainWindow(store=store)
    assert second.move_panel.lines() == ["1. Ng1-f3"]
    assert second.status_message() == messages.RESTORED


def test_hidden_coordinates_setting_applied() -> None:
    window = MainWindow(settings=AppSettings(show_coordinates=False))
    items = window.board_view.board_scene._coord_items
    assert items and all(not item.isVisible() for item in items)
