"""Tests for ChessEngine — the click-driven game state machine."""

import logging

import pytest

from clickchess.core.board import Board
from clickchess.core.enums import Color, GameStatus, MoveError, PieceType
from clickchess.core.notation import board_from_diagram
from clickchess.core.rules import RuleConfig
from clickchess.core.types import Square, parse_square
from clickchess.game.engine import CapturedPieces, ChessEngine, LastMove

E2, E4 = parse_square("e2"), parse_square("e4")
D7, D5 = parse_square("d7"), parse_square("d5")


def _started(config: RuleConfig | None = None) -> ChessEngine:
    engine = ChessEngine(config)
    engine.initialize()
    return engine


def _engine_at(
    diagram: str,
    turn: Color = Color.WHITE,
    config: RuleConfig | None = None,
) -> ChessEngine:
    engine = ChessEngine(config)
    engine.restore_state(
        board=board_from_diagram(diagram),
        current_turn=turn,
        status=GameStatus.PLAYING,
    )
    return engine


def _play(engine: ChessEngine, *moves: str) -> None:
    for move in moves:
        src, dst = move.split("-")
        assert engine.move_piece(parse_square(src), parse_square(dst)), move


class TestLifecycle:
    def test_new_engine_is_waiting(self) -> None:
        engine = ChessEngine()
        assert engine.status == GameStatus.WAITING
        assert engine.board == Board.initial()
        assert engine.current_turn == Color.WHITE

    def test_initialize_starts_play(self) -> None:
        engine = _started()
        assert engine.status == GameStatus.PLAYING
        assert engine.selected is None
        assert engine.move_history == ()
        assert engine.captured == CapturedPieces()
        assert engine.last_move is None

    def test_reset_discards_progress(self) -> None:
        engine = _started()
        _play(engine, "e2-e4", "d7-d5", "e4-d5")
        engine.select_square(parse_square("d8"))
        engine.reset_game()
        assert engine.status == GameStatus.WAITING
        assert engine.board == Board.initial()
        assert engine.current_turn == Color.WHITE
        assert engine.selected is None
        assert engine.move_history == ()
        assert engine.captured == CapturedPieces()
        assert engine.last_move is None

    def test_initialize_after_reset(self) -> None:
        engine = _started()
        _play(engine, "g1-f3")
        engine.reset_game()
        engine.initialize()
        assert engine.status == GameStatus.PLAYING
        assert engine.board == Board.initial()


class TestMovePiece:
    def test_pawn_double_step(self) -> None:
        engine = _started()
        assert engine.move_piece(E2, E4)
        assert engine.board[E2] is None
        assert engine.board[E4] is not None
        assert engine.current_turn == Color.BLACK
        assert engine.move_history == ("Pe2-e4",)
        assert engine.last_move == LastMove(E2, E4)

    def test_knight_history_entry(self) -> None:
        engine = _started()
        _play(engine, "b1-a3")
        assert engine.move_history == ("Nb1-a3",)

    def test_turns_alternate(self) -> None:
        engine = _started()
        _play(engine, "e2-e4", "e7-e5", "g1-f3")
        assert engine.current_turn == Color.BLACK
        assert len(engine.move_history) == 3

    def test_moved_piece_is_flagged(self) -> None:
        engine = _started()
        _play(engine, "e2-e4")
        moved = engine.board[E4]
        assert moved is not None and moved.has_moved

    @pytest.mark.parametrize(
        ("src", "dst", "error"),
        [
            ("e4", "e5", MoveError.NO_PIECE_AT_SOURCE),
            ("e7", "e5", MoveError.WRONG_TURN),
            ("e2", "e5", MoveError.ILLEGAL_DESTINATION),
            ("a1", "a2", MoveError.ILLEGAL_DESTINATION),
        ],
    )
    def test_rejected_move_changes_nothing(self, src: str, dst: str, error: MoveError) -> None:
        engine = _started()
        before = (engine.board, engine.current_turn, engine.move_history, engine.captured)
        outcome = engine.try_move(parse_square(src), parse_square(dst))
        assert not outcome
        assert outcome.error == error
        assert not engine.move_piece(parse_square(src), parse_square(dst))
        after = (engine.board, engine.current_turn, engine.move_history, engine.captured)
        assert after == before
        assert engine.last_move is None

    def test_rejected_move_after_play_keeps_last_move(self) -> None:
        engine = _started()
        _play(engine, "e2-e4")
        before = (
            engine.board,
            engine.current_turn,
            engine.move_history,
            engine.captured,
            engine.last_move,
            engine.status,
        )
        assert not engine.move_piece(parse_square("e7"), parse_square("e4"))
        assert not engine.move_piece(E4, parse_square("e5"))
        after = (
            engine.board,
            engine.current_turn,
            engine.move_history,
            engine.captured,
            engine.last_move,
            engine.status,
        )
        assert after == before
        assert engine.last_move == LastMove(E2, E4)

    def test_outcome_reports_notation(self) -> None:
        engine = _started()
        outcome = engine.try_move(E2, E4)
        assert outcome.ok
        assert outcome.notation == "Pe2-e4"
        assert outcome.captured is None


class TestCaptures:
    def test_capture_listed_under_victim_color(self) -> None:
        engine = _started()
        _play(engine, "e2-e4", "d7-d5")
        outcome = engine.try_move(E4, D5)
        assert outcome.captured is not None
        assert engine.captured.white == ()
        assert len(engine.captured.black) == 1
        taken = engine.captured.of(Color.BLACK)[0]
        assert taken.color == Color.BLACK
        assert taken.piece_type == PieceType.PAWN
        assert engine.move_history[-1] == "Pe4-d5"

    def test_captures_accumulate_in_order(self) -> None:
        engine = _started()
        _play(
            engine,
            "e2-e4", "d7-d5", "e4-d5", "d8-d5", "b1-c3", "d5-a2", "c3-a2",
        )
        assert [p.piece_type for p in engine.captured.black] == [
            PieceType.PAWN,
            PieceType.QUEEN,
        ]
        assert [p.piece_type for p in engine.captured.white] == [
            PieceType.PAWN,
            PieceType.PAWN,
        ]
        assert all(p.color == Color.WHITE for p in engine.captured.white)
        assert engine.move_history[-2:] == ("Qd5-a2", "Nc3-a2")

    def test_king_capture_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = _engine_at("4k3/8/8/8/8/8/8/4R1K1")
        with caplog.at_level(logging.WARNING, logger="clickchess.game.engine"):
            _play(engine, "e1-e8")
        assert engine.captured.black[0].piece_type == PieceType.KING
        assert any("king captured" in rec.getMessage() for rec in caplog.records)


class TestSelectSquare:
    def test_select_own_piece(self) -> None:
        engine = _started()
        engine.select_square(E2)
        assert engine.selected == E2

    def test_opponent_piece_not_selectable(self) -> None:
        engine = _started()
        engine.select_square(D7)
        assert engine.selected is None

    def test_empty_square_not_selectable(self) -> None:
        engine = _started()
        engine.select_square(E4)
        assert engine.selected is None

    def test_second_click_moves(self) -> None:
        engine = _started()
        engine.select_square(E2)
        engine.select_square(E4)
        assert engine.selected is None
        assert engine.board[E4] is not None
        assert engine.current_turn == Color.BLACK

    def test_clicking_own_piece_reselects(self) -> None:
        engine = _started()
        engine.select_square(E2)
        engine.select_square(parse_square("g1"))
        assert engine.selected == parse_square("g1")
        assert engine.move_history == ()

    def test_invalid_target_clears_selection(self) -> None:
        engine = _started()
        engine.select_square(E2)
        engine.select_square(parse_square("e5"))
        assert engine.selected is None
        assert engine.board == Board.initial()
        assert engine.current_turn == Color.WHITE

    def test_clicking_selected_square_again_keeps_it(self) -> None:
        engine = _started()
        engine.select_square(E2)
        engine.select_square(E2)
        assert engine.selected == E2

    def test_clear_selection(self) -> None:
        engine = _started()
        engine.select_square(E2)
        engine.clear_selection()
        assert engine.selected is None


class TestValidMoves:
    def test_pawn_moves_from_start(self) -> None:
        engine = _started()
        assert set(engine.get_valid_moves(E2)) == {parse_square("e3"), E4}

    def test_opponent_piece_has_none(self) -> None:
        engine = _started()
        assert engine.get_valid_moves(D7) == []

    def test_empty_square_has_none(self) -> None:
        assert _started().get_valid_moves(E4) == []

    def test_king_safety_config_filters(self) -> None:
        diagram = "4r2k/8/8/8/8/8/4R3/4K3"
        loose = _engine_at(diagram)
        strict = _engine_at(diagram, config=RuleConfig(enforce_king_safety=True))
        e2 = parse_square("e2")
        assert parse_square("a2") in loose.get_valid_moves(e2)
        assert parse_square("a2") not in strict.get_valid_moves(e2)
        assert not strict.move_piece(e2, parse_square("a2"))


class TestStatus:
    def test_check_after_move(self) -> None:
        engine = _engine_at("4k3/8/8/8/8/8/8/R3K3")
        _play(engine, "a1-a8")
        assert engine.status == GameStatus.CHECK
        assert engine.is_in_check(Color.BLACK)
        assert not engine.is_in_check(Color.WHITE)
        assert not engine.is_game_over

    def test_check_clears_after_escape(self) -> None:
        engine = _engine_at("4k3/8/8/8/8/8/8/R3K3")
        _play(engine, "a1-a8", "e8-e7")
        assert engine.status == GameStatus.PLAYING

    def test_checkmate_ends_game(self) -> None:
        engine = _engine_at("7K/8/8/8/3N4/8/pp6/kp6")
        _play(engine, "d4-c2")
        assert engine.status == GameStatus.CHECKMATE
        assert engine.is_game_over
        assert engine.winner == Color.WHITE
        assert engine.move_history == ("Nd4-c2",)

    def test_no_moves_after_game_over(self) -> None:
        engine = _engine_at("7K/8/8/8/3N4/8/pp6/kp6")
        _play(engine, "d4-c2")
        a1 = parse_square("a1")
        assert engine.get_valid_moves(a1) == []
        outcome = engine.try_move(parse_square("b2"), parse_square("c1"))
        assert outcome.error == MoveError.GAME_OVER

    def test_wrong_turn_reported_before_game_over(self) -> None:
        engine = _engine_at("7K/8/8/8/3N4/8/pp6/kp6")
        _play(engine, "d4-c2")
        outcome = engine.try_move(parse_square("h8"), parse_square("g8"))
        assert outcome.error == MoveError.WRONG_TURN

    def test_insufficient_material_draw(self) -> None:
        engine = _engine_at("8/8/4k3/8/8/8/4K3/3r4")
        _play(engine, "e2-d1")
        assert engine.status == GameStatus.DRAW
        assert engine.is_game_over
        assert engine.winner is None

    def test_stalemate_with_king_safety(self) -> None:
        strict = RuleConfig(enforce_king_safety=True)
        engine = _engine_at("k7/8/2Q5/8/8/8/8/4K3", config=strict)
        _play(engine, "c6-c7")
        assert engine.status == GameStatus.STALEMATE
        assert engine.winner is None


class TestEvents:
    def test_move_event(self) -> None:
        engine = _started()
        seen: list[tuple[Square, Square, str]] = []
        engine.events.on_move.append(lambda f, t, n: seen.append((f, t, n)))
        _play(engine, "e2-e4")
        engine.move_piece(E2, E4)
        assert seen == [(E2, E4, "Pe2-e4")]

    def test_status_event_only_on_change(self) -> None:
        engine = _engine_at("4k3/8/8/8/8/8/8/R3K3")
        statuses: list[GameStatus] = []
        engine.events.on_status_changed.append(statuses.append)
        _play(engine, "a1-a8", "e8-e7", "e1-e2")
        assert statuses == [GameStatus.CHECK, GameStatus.PLAYING]

    def test_reset_events(self) -> None:
        engine = ChessEngine()
        resets: list[int] = []
        statuses: list[GameStatus] = []
        engine.events.on_reset.append(lambda: resets.append(1))
        engine.events.on_status_changed.append(statuses.append)
        engine.initialize()
        engine.reset_game()
        assert len(resets) == 2
        assert statuses == [GameStatus.PLAYING, GameStatus.WAITING]


class TestRestoreState:
    def test_invalid_selection_dropped(self) -> None:
        engine = ChessEngine()
        engine.restore_state(
            board=Board.initial(),
            current_turn=Color.WHITE,
            status=GameStatus.PLAYING,
            selected=D7,
        )
        assert engine.selected is None

    def test_valid_selection_kept(self) -> None:
        engine = ChessEngine()
        engine.restore_state(
            board=Board.initial(),
            current_turn=Color.WHITE,
            status=GameStatus.PLAYING,
            move_history=["Pa2-a3"],
            selected=E2,
        )
        assert engine.selected == E2
        assert engine.move_history == ("Pa2-a3",)
