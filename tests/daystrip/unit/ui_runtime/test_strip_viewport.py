from __future__ import annotations

import numpy as np
import pytest

from daystrip.ui_runtime.strip_viewport import (
    VisibleWindow,
    cell_left_edges,
    centering_offset,
    clamp_offset,
    visible_window,
)


def _uniform(count: int, width: float = 60.0) -> np.ndarray:
    return np.full(count, width, dtype=np.float64)


def test_cell_left_edges_accumulate_previous_widths() -> None:
    edges = cell_left_edges(np.array([60.0, 70.0, 80.0]))
    assert edges.tolist() == [0.0, 60.0, 130.0]
    assert cell_left_edges(np.array([42.0])).tolist() == [0.0]


def test_clamp_offset_limits() -> None:
    assert clamp_offset(-10.0, total_width=660.0, viewport_width=300.0) == 0.0
    assert clamp_offset(999.0, total_width=660.0, viewport_width=300.0) == 360.0
    assert clamp_offset(120.0, total_width=660.0, viewport_width=300.0) == 120.0
    assert clamp_offset(50.0, total_width=200.0, viewport_width=300.0) == 0.0


def test_centering_offset_centers_middle_cell() -> None:
    widths = _uniform(11)
    assert centering_offset(widths, 5, 300.0) == 180.0
    assert centering_offset(widths, 0, 300.0) == 0.0
    assert centering_offset(widths, 10, 300.0) == 360.0


def test_centering_offset_is_zero_when_content_fits() -> None:
    widths = _uniform(4, 50.0)
    assert all(centering_offset(widths, index, 200.0) == 0.0 for index in range(4))


def test_centering_offset_with_variable_widths() -> None:
    widths = np.array([40.0, 100.0, 60.0, 80.0, 120.0])
    # Cell 2 spans [140, 200]; center 170 minus half of a 100px viewport.
    assert centering_offset(widths, 2, 100.0) == pytest.approx(120.0)


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (0.0, VisibleWindow(0, 5)),
        (90.0, VisibleWindow(1, 7)),
        (300.0, VisibleWindow(4, 10)),
        (-50.0, VisibleWindow(0, 5)),
        (1000.0, VisibleWindow(9, 10)),
    ],
)
def test_visible_window_uniform_cells(offset: float, expected: VisibleWindow) -> None:
    assert visible_window(_uniform(10), offset, 300.0) == expected


def test_visible_window_runs_to_last_cell_when_content_ends_in_viewport() -> None:
    window = visible_window(_uniform(3), 0.0, 300.0)
    assert window == VisibleWindow(0, 3)
    assert len(window) == 3


def test_visible_window_zero_viewport_at_origin_is_empty() -> None:
    assert len(visible_window(_uniform(5), 0.0, 0.0)) == 0
