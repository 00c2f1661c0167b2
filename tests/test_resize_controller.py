"""
Tests for edge-resize and divider-drag gestures.

Author: Michael Economou
Date: 2026-10-03

Container width is 1000px: panel floor 12%, main floor 36.8%,
regular default allocation (29, 42, 29).
"""

import json
import math

import pytest

from trisplit.domain.allocation import Allocation, ResizeDirection


def assert_allocation(actual, left, main, right):
    assert actual.left == pytest.approx(left)
    assert actual.main == pytest.approx(main)
    assert actual.right == pytest.approx(right)


class TestEdgeResize:
    def test_left_edge_takes_space_from_left_panel(self, make_controller):
        controller = make_controller()

        assert controller.on_resize(500, "left") is True

        assert_allocation(controller.allocation, 21, 50, 29)

    def test_right_edge_takes_space_from_right_panel(self, make_controller):
        controller = make_controller()

        assert controller.on_resize(500, ResizeDirection.RIGHT) is True

        assert_allocation(controller.allocation, 29, 50, 21)

    def test_shrinking_main_gives_space_back(self, make_controller):
        controller = make_controller()

        controller.on_resize(400, "left")

        assert_allocation(controller.allocation, 31, 40, 29)

    def test_main_never_drops_below_its_floor(self, make_controller):
        controller = make_controller()

        controller.on_resize(100, "right")

        assert_allocation(controller.allocation, 29, 36.8, 34.2)

    @pytest.mark.parametrize("direction", ["left", "right"])
    def test_step_below_outer_floor_is_rejected(self, make_controller, direction):
        controller = make_controller()
        before = controller.allocation

        assert controller.on_resize(800, direction) is False

        assert controller.allocation == before

    @pytest.mark.parametrize("direction", ["up", "", None])
    def test_unknown_direction_is_ignored(self, make_controller, direction):
        controller = make_controller()
        before = controller.allocation

        assert controller.on_resize(500, direction) is False

        assert controller.allocation == before

    def test_left_resize_without_left_panel(self, make_controller):
        controller = make_controller(variant="inputless", has_input_panel=False)
        assert_allocation(controller.allocation, 0, 48, 52)

        # Left panel is already empty; growing main from the left is rejected
        assert controller.on_resize(500, "left") is False
        assert controller.on_resize(500, "right") is True

        assert_allocation(controller.allocation, 0, 50, 50)

    def test_resize_after_width_becomes_known(self, make_controller, width):
        width.set(0)
        controller = make_controller()
        initial_main = controller.allocation.main

        width.set(1000)
        controller.on_resize(500, "left")

        assert controller.allocation.main != initial_main
        assert controller.allocation.main == pytest.approx(50)

    def test_resize_after_loading_corrupted_data(self, make_controller, store):
        store.set(
            "TRISPLIT_PANEL_WIDTH_REGULAR",
            '{"left": Infinity, "main": Infinity, "right": Infinity}',
        )
        controller = make_controller()
        initial_main = controller.allocation.main

        controller.on_resize(550, "right")

        assert controller.allocation.main != initial_main
        assert controller.allocation.total == pytest.approx(100)
        assert store.get("TRISPLIT_PANEL_WIDTH_REGULAR") is None


class TestDividerDrag:
    def test_centers_main_panel_under_pointer(self, make_controller):
        controller = make_controller()

        assert controller.on_drag((300, 0)) is True

        assert_allocation(controller.allocation, 12, 42, 46)

    def test_drag_keeps_main_width(self, make_controller):
        controller = make_controller()
        initial = controller.allocation

        controller.on_drag([400, 0])

        assert controller.allocation.main == initial.main
        assert controller.allocation.left != initial.left
        assert_allocation(controller.allocation, 19, 42, 39)
        assert controller.allocation.total == pytest.approx(100)

    def test_only_x_is_used(self, make_controller):
        controller = make_controller()

        controller.on_drag((400, 9999))

        assert_allocation(controller.allocation, 19, 42, 39)

    def test_drag_past_right_edge_is_rejected(self, make_controller):
        controller = make_controller()
        before = controller.allocation

        assert controller.on_drag((1000, 0)) is False

        assert controller.allocation == before

    def test_drag_does_not_persist(self, make_controller, store):
        controller = make_controller()

        controller.on_drag((300, 0))

        assert len(store) == 0


class TestResizeEnd:
    def test_persists_current_allocation(self, make_controller, store):
        controller = make_controller()
        controller.on_resize(500, "left")

        controller.on_resize_end()

        stored = json.loads(store.get("TRISPLIT_PANEL_WIDTH_REGULAR"))
        assert stored == pytest.approx({"left": 21, "main": 50, "right": 29})

    def test_persisted_allocation_is_restored(self, make_controller):
        first = make_controller()
        first.on_resize(500, "right")
        first.on_resize_end()
        expected = first.allocation
        first.close()

        second = make_controller()

        assert second.allocation == expected

    def test_persists_under_active_variant(self, make_controller, store):
        controller = make_controller(variant="wide")

        controller.on_resize_end()

        assert store.get("TRISPLIT_PANEL_WIDTH_WIDE") is not None
        assert store.get("TRISPLIT_PANEL_WIDTH_REGULAR") is None


def test_sanitized_state_after_resize(make_controller):
    controller = make_controller()

    controller.state.commit(Allocation(float("nan"), float("inf"), -5))
    controller.on_resize(400, "left")

    assert all(math.isfinite(value) for value in controller.allocation.as_tuple())
    assert controller.allocation.total == pytest.approx(100)
