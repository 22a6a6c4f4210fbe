"""Tests for the DashCursor state machine."""

import pytest

from dashline.engine.cursor import DashAction, DashCursor, DashKind
from dashline.engine.errors import CursorConsistencyError
from dashline.engine.pattern import DashPattern


def _walk(cursor: DashCursor, distance: float) -> list[DashAction]:
    """Chain advance() calls until ``distance`` is fully consumed."""
    actions = []
    request = distance
    while True:
        action = cursor.advance(request)
        actions.append(action)
        if action.remaining_distance <= 0.0:
            return actions
        request = action.remaining_distance


def _assert_action(action: DashAction, length: float, remaining: float, kind: DashKind) -> None:
    assert action.length == pytest.approx(length, abs=1e-9)
    assert action.remaining_distance == pytest.approx(remaining, abs=1e-3)
    assert action.kind is kind


@pytest.mark.parametrize("factor", [1.0, 0.01])
@pytest.mark.parametrize("phase", [-2, -1, 1, 2])
def test_construction_normalises_multi_cycle_offsets(factor, phase):
    pattern = DashPattern(0.05 - phase * factor * 16.0, [factor * 10.0, factor * 1.0, factor * 2.0, factor * 3.0])
    cursor = DashCursor(pattern)
    assert cursor.cumulative_array == pytest.approx([factor * 10.0, factor * 11.0, factor * 13.0, factor * 16.0])
    assert cursor.current_offset == pytest.approx(0.05, abs=1e-9)
    assert cursor.current_index == 0


@pytest.mark.parametrize("array", [[1.0], [1.0, 2.0], [0.5, 0.25, 4.0, 1e-3, 7.0]])
def test_cumulative_array_is_strictly_increasing(array):
    cursor = DashCursor(DashPattern(0.0, array))
    cum = cursor.cumulative_array
    assert all(b > a for a, b in zip(cum, cum[1:]))
    assert cum[-1] == pytest.approx(sum(array))
    assert cursor.cycle_length == cum[-1]


@pytest.mark.parametrize("offset", [-7.5, -3.0, -0.25, 0.0, 1.0, 2.5, 3.0, 9.2, 1000.4])
def test_normalised_offset_lies_in_its_segment(offset):
    cursor = DashCursor(DashPattern(offset, [1.0, 2.0]))
    cum = [0.0] + cursor.cumulative_array
    off = cursor.current_offset
    idx = cursor.current_index
    assert 0.0 <= off < cursor.cycle_length
    assert cum[idx] <= off < cum[idx + 1]


def test_offset_on_boundary_starts_next_segment():
    cursor = DashCursor(DashPattern(1.0, [1.0, 2.0]))
    assert cursor.current_index == 1
    assert cursor.current_offset == 1.0
    _assert_action(cursor.advance(0.5), 0.5, 0.0, DashKind.GAP)


def test_offset_equal_to_cycle_wraps_to_start():
    cursor = DashCursor(DashPattern(3.0, [1.0, 2.0]))
    assert cursor.current_index == 0
    assert cursor.current_offset == 0.0


def test_rounding_to_cycle_length_is_a_consistency_error():
    # -1e-20 mod 16.0 rounds to exactly 16.0
    with pytest.raises(CursorConsistencyError):
        DashCursor(DashPattern(-1e-20, [10.0, 6.0]))


def test_no_segment_cross():
    cursor = DashCursor(DashPattern(0.0, [1.0, 2.0]))
    _assert_action(cursor.advance(0.5), 0.5, 0.0, DashKind.DASH)


def test_segment_cross():
    cursor = DashCursor(DashPattern(0.0, [1.0, 2.0]))
    action = cursor.advance(1.5)
    _assert_action(action, 1.0, 0.5, DashKind.DASH)
    _assert_action(cursor.advance(action.remaining_distance), 0.5, 0.0, DashKind.GAP)


def test_exact_boundary_moves_to_next_segment():
    cursor = DashCursor(DashPattern(0.0, [1.0, 2.0]))
    _assert_action(cursor.advance(1.0), 1.0, 0.0, DashKind.DASH)
    assert cursor.current_index == 1
    assert cursor.current_offset == 1.0


def test_reset_restores_initial_state():
    cursor = DashCursor(DashPattern(2.5, [1.0, 2.0, 3.0, 4.0]))
    start = (cursor.current_index, cursor.current_offset)
    for d in (0.3, 4.0, 11.7, 0.01):
        _walk(cursor, d)
    cursor.reset()
    assert (cursor.current_index, cursor.current_offset) == start
    cursor.reset()
    assert (cursor.current_index, cursor.current_offset) == start
    assert (cursor.initial_index, cursor.initial_offset) == start


def test_chained_advances_conserve_distance():
    cursor = DashCursor(DashPattern(0.7, [0.4, 1.3, 2.2]))
    actions = _walk(cursor, 17.3)
    assert sum(a.length for a in actions) == pytest.approx(17.3)
    assert all(a.length >= 0.0 for a in actions)


def test_full_cycle_returns_to_start_for_even_pattern():
    cursor = DashCursor(DashPattern(2.5, [1.0, 2.0, 3.0, 4.0]))
    assert cursor.current_index == 1
    _walk(cursor, 10.0)
    assert cursor.current_index == 1
    assert cursor.current_offset == pytest.approx(2.5)


def test_even_pattern_kinds_alternate():
    cursor = DashCursor(DashPattern(0.0, [1.0, 2.0, 3.0, 4.0]))
    kinds = [a.kind for a in _walk(cursor, 20.0)]
    assert kinds == [DashKind.DASH, DashKind.GAP] * 4


def test_odd_pattern_wrap_keeps_original_parity():
    """The wrapped final segment of an odd pattern is reported as a gap by default."""
    cursor = DashCursor(DashPattern(0.0, [1.0, 2.0, 3.0]))
    actions = _walk(cursor, 12.0)
    assert [a.length for a in actions] == [1.0, 2.0, 3.0, 1.0, 2.0, 3.0]
    assert [a.kind for a in actions] == [
        DashKind.DASH, DashKind.GAP, DashKind.GAP,
        DashKind.DASH, DashKind.GAP, DashKind.GAP,
    ]


def test_first_advances_on_odd_pattern():
    cursor = DashCursor(DashPattern(0.0, [1.0, 2.0, 3.0]))
    kinds = [cursor.advance(d).kind for d in (1.0, 2.0, 3.0)]
    assert kinds == [DashKind.DASH, DashKind.GAP, DashKind.GAP]


def test_consumed_index_parity_reports_consumed_segment():
    cursor = DashCursor(DashPattern(0.0, [1.0, 2.0, 3.0]), consumed_index_parity=True)
    kinds = [a.kind for a in _walk(cursor, 12.0)]
    # Index 2 is even, so the 3-unit segment is a dash on every cycle
    assert kinds == [
        DashKind.DASH, DashKind.GAP, DashKind.DASH,
        DashKind.DASH, DashKind.GAP, DashKind.DASH,
    ]


def test_parity_modes_agree_for_even_patterns():
    pattern = DashPattern(0.5, [1.0, 2.0, 3.0, 4.0])
    default = [a.kind for a in _walk(DashCursor(pattern), 23.0)]
    consumed = [a.kind for a in _walk(DashCursor(pattern, consumed_index_parity=True), 23.0)]
    assert default == consumed


def test_single_element_pattern():
    kinds = [a.kind for a in _walk(DashCursor(DashPattern(0.0, [1.0])), 3.0)]
    assert kinds == [DashKind.GAP] * 3
    consumed = [a.kind for a in _walk(DashCursor(DashPattern(0.0, [1.0]), consumed_index_parity=True), 3.0)]
    assert consumed == [DashKind.DASH] * 3


def test_dash_kind_for_index():
    assert DashKind.for_index(0) is DashKind.DASH
    assert DashKind.for_index(7) is DashKind.GAP
    assert DashKind.DASH == "dash"
