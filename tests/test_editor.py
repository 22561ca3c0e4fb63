"""Tests de la máquina de estados (apply_command) y sus propiedades."""

from __future__ import annotations

import itertools

import pytest

from pixelpath.core.commands import Command, coerce_command
from pixelpath.core.editor import apply_command
from pixelpath.core.models import ClosedPath, EditorState, Point
from pixelpath.svg.exporter import path_data


def run(*commands, state: EditorState | None = None) -> EditorState:
    s = state or EditorState()
    for c in commands:
        s = apply_command(s, c).state
    return s


# ---------------------------------------------------------------------------
# Movimiento
# ---------------------------------------------------------------------------


class TestMoves:
    def test_right_and_down_step_by_100(self) -> None:
        s = run(Command.MOVE_RIGHT, Command.MOVE_DOWN, Command.MOVE_DOWN)
        assert s.cursor == Point(100, 200)

    def test_left_and_up_clamp_at_zero(self) -> None:
        s = run(Command.MOVE_LEFT, Command.MOVE_UP)
        assert s.cursor == Point(0, 0)

    def test_moves_request_refresh(self) -> None:
        for cmd in (Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.MOVE_UP, Command.MOVE_DOWN):
            assert apply_command(EditorState(), cmd).refresh is True

    @pytest.mark.parametrize("length", [1, 2, 3, 4, 5])
    def test_cursor_never_negative(self, length: int) -> None:
        moves = (Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.MOVE_UP, Command.MOVE_DOWN)
        for seq in itertools.product(moves, repeat=length):
            s = EditorState()
            for cmd in seq:
                s = apply_command(s, cmd).state
                assert s.cursor.x >= 0
                assert s.cursor.y >= 0


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


class TestAddPoint:
    def test_first_add_starts_path(self) -> None:
        s0 = EditorState()
        s1 = apply_command(s0, Command.ADD_POINT).state
        assert len(s1.paths) == len(s0.paths) + 1
        assert s1.is_drawing
        assert s1.active_path == 0
        assert s1.paths[0].points == (Point(0, 0),)

    def test_add_while_drawing_keeps_path_count(self) -> None:
        s1 = run(Command.ADD_POINT, Command.MOVE_RIGHT)
        s2 = apply_command(s1, Command.ADD_POINT).state
        assert len(s2.paths) == len(s1.paths)
        assert s2.paths[-1].points == (Point(0, 0), Point(100, 0))

    def test_add_after_commit_starts_new_path(self) -> None:
        s = run(Command.ADD_POINT, Command.MOVE_RIGHT, Command.ADD_POINT, Command.COMMIT_PATH, Command.ADD_POINT)
        assert len(s.paths) == 2
        assert s.paths[0].points == (Point(0, 0), Point(100, 0))
        assert s.paths[1].points == (Point(100, 0),)
        assert s.active_path == 1

    def test_input_state_is_not_mutated(self) -> None:
        s0 = EditorState()
        apply_command(s0, Command.ADD_POINT)
        assert s0 == EditorState()


class TestRemoveLastPoint:
    def test_noop_without_paths(self) -> None:
        r = apply_command(EditorState(), Command.REMOVE_LAST_POINT)
        assert r.state == EditorState()
        assert r.refresh is True

    def test_removes_from_last_path(self) -> None:
        s = run(Command.ADD_POINT, Command.MOVE_RIGHT, Command.ADD_POINT, Command.REMOVE_LAST_POINT)
        assert s.paths[-1].points == (Point(0, 0),)
        assert s.is_drawing

    def test_open_path_can_become_empty_and_be_committed(self) -> None:
        s = run(
            Command.ADD_POINT,
            Command.REMOVE_LAST_POINT,
            Command.REMOVE_LAST_POINT,
        )
        assert s.is_drawing
        assert s.paths == (ClosedPath(),)
        s = apply_command(s, Command.COMMIT_PATH).state
        assert not s.is_drawing
        assert s.paths == (ClosedPath(),)

    def test_works_on_committed_path_too(self) -> None:
        s = run(Command.ADD_POINT, Command.MOVE_DOWN, Command.ADD_POINT, Command.COMMIT_PATH, Command.REMOVE_LAST_POINT)
        assert s.paths[0].points == (Point(0, 0),)
        assert not s.is_drawing


class TestCommitAndCancel:
    def test_commit_without_paths_only_stops_drawing(self) -> None:
        s = run(Command.COMMIT_PATH)
        assert s == EditorState()

    def test_cancel_removes_last_path(self) -> None:
        s = run(Command.ADD_POINT, Command.COMMIT_PATH, Command.MOVE_RIGHT, Command.ADD_POINT, Command.CANCEL_PATH)
        assert len(s.paths) == 1
        assert not s.is_drawing

    def test_cancel_removes_committed_path(self) -> None:
        s = run(Command.ADD_POINT, Command.COMMIT_PATH, Command.CANCEL_PATH)
        assert s.paths == ()

    def test_cancel_on_empty_is_noop(self) -> None:
        r = apply_command(EditorState(), Command.CANCEL_PATH)
        assert r.state.paths == ()
        assert not r.state.is_drawing
        assert r.refresh is True


# ---------------------------------------------------------------------------
# Grilla
# ---------------------------------------------------------------------------


class TestGridCount:
    def test_increase_both_axes(self) -> None:
        s = run(Command.GRID_X_INCREASE, Command.GRID_X_INCREASE, Command.GRID_Y_INCREASE)
        assert s.grid_count == Point(2, 1)

    @pytest.mark.parametrize("repeat", [1, 2, 10])
    def test_decrease_never_below_zero(self, repeat: int) -> None:
        s = run(Command.GRID_X_INCREASE, *([Command.GRID_X_DECREASE, Command.GRID_Y_DECREASE] * repeat))
        assert s.grid_count == Point(0, 0)

    def test_grid_independent_of_paths(self) -> None:
        s = run(Command.ADD_POINT, Command.GRID_Y_INCREASE)
        assert len(s.paths) == 1
        assert s.is_drawing


# ---------------------------------------------------------------------------
# Export / sin efecto
# ---------------------------------------------------------------------------


class TestNonMutating:
    def test_export_carries_document_and_no_refresh(self) -> None:
        s = run(Command.ADD_POINT, Command.MOVE_RIGHT, Command.ADD_POINT, Command.GRID_X_INCREASE)
        r = apply_command(s, Command.EXPORT_PRINT)
        assert r.state is s
        assert r.refresh is False
        assert r.export_target == Command.EXPORT_PRINT
        assert 'd="M 0 0 L 100 0 z"' in r.export_text

    def test_export_file_target(self) -> None:
        r = apply_command(EditorState(), Command.EXPORT_FILE)
        assert r.export_target == Command.EXPORT_FILE

    @pytest.mark.parametrize("cmd", [Command.LIST_PATHS, Command.UNKNOWN, "bogus", ""])
    def test_no_mutation_no_refresh(self, cmd) -> None:
        s = run(Command.ADD_POINT)
        r = apply_command(s, cmd)
        assert r.state is s
        assert r.refresh is False
        assert r.export_text is None


class TestScenario:
    def test_two_triangles_with_empty_in_between(self) -> None:
        s = run(
            Command.ADD_POINT, Command.MOVE_RIGHT, Command.ADD_POINT, Command.MOVE_DOWN, Command.ADD_POINT,
            Command.COMMIT_PATH,
            Command.ADD_POINT, Command.REMOVE_LAST_POINT, Command.COMMIT_PATH,
            Command.ADD_POINT, Command.MOVE_DOWN, Command.ADD_POINT, Command.COMMIT_PATH,
        )
        assert len(s.paths) == 3
        assert path_data(s.paths) == "M 0 0 L 100 0 L 100 100 z M 100 100 L 100 200 z"


class TestCoerceCommand:
    def test_values_and_aliases(self) -> None:
        assert coerce_command("left") == Command.MOVE_LEFT
        assert coerce_command(" ADD_POINT ") == Command.ADD_POINT
        assert coerce_command("space") == Command.ADD_POINT
        assert coerce_command("esc") == Command.CANCEL_PATH
        assert coerce_command("x-") == Command.GRID_X_DECREASE

    def test_unknown(self) -> None:
        assert coerce_command("nope") == Command.UNKNOWN
        assert coerce_command(None) == Command.UNKNOWN
