"""Geometric tests for the assembled joint.

VALIDATION STRATEGY:
====================
1. Board volumes: compare against the analytic area of the removed teeth
2. Mirror: mirroring the pin-cutter array back through mid-thickness must give
   the unmirrored array (symmetric difference has no volume)
3. Mirror direction: sample cubes check the pin cutters flare toward z=T
4. Complementarity: with the tails board standing in the sockets, the boards
   share no material and together fill the joint region exactly
"""
import pytest
from build123d import Align, Box

from build123_dovetail import (
    BoardLayout,
    Build123dKernel,
    DovetailJoint,
    InvalidJointGeometry,
    JointParameters,
    build_pins_board,
    build_tails_board,
    pin_cutter_array,
    place_pins,
    place_tails,
    solve_dimensions,
    tail_cutter_array,
)


def create_assembled_joint(**overrides):
    params = JointParameters(board_layout=BoardLayout.ASSEMBLED, **overrides)
    pins, tails = DovetailJoint(params).apply()
    return params, pins.global_shape, tails.global_shape


@pytest.fixture
def dims(example_params):
    return solve_dimensions(example_params)


class TestDovetailJoint:
    def test_derives_dimensions_up_front(self, example_params):
        joint = DovetailJoint(example_params)
        assert joint.dims == solve_dimensions(example_params)

    def test_invalid_geometry_fails_before_building(self):
        with pytest.raises(InvalidJointGeometry):
            DovetailJoint(JointParameters(narrow_pin_width=20.0))

    def test_fractional_tooth_count_fails_before_building(self):
        with pytest.raises(InvalidJointGeometry, match="whole number"):
            DovetailJoint(JointParameters(tooth_count=2.5))

    def test_apply_returns_both_boards(self, example_params):
        pins, tails = DovetailJoint(example_params).apply()
        assert pins.name == "pins"
        assert tails.name == "tails"
        assert pins.color is not None
        assert tails.color is not None

    def test_boards_use_stock_dimensions(self, example_params):
        pins, tails = DovetailJoint(example_params).apply()
        for board in (pins, tails):
            assert board.width == example_params.stock_width
            assert board.length == example_params.stock_length
            assert board.thickness == example_params.stock_thickness

    def test_injected_kernel_is_used(self, example_params):
        kernel = Build123dKernel()
        pins, tails = DovetailJoint(example_params, kernel).apply()
        assert pins.kernel is kernel
        assert tails.kernel is kernel


class TestBoardVolumes:
    def test_pins_board_loses_the_tail_sockets(self, example_params, dims):
        board = build_pins_board(example_params)
        t = dims.stock_thickness
        socket = (dims.tail_width_narrow + dims.tail_width_wide) / 2 * t * t
        expected = board.volume - dims.tooth_count * socket
        assert board.shape.volume == pytest.approx(expected, rel=1e-6)

    def test_tails_board_keeps_the_tails(self, example_params, dims):
        # The joint region keeps exactly the tails, the rest goes to the pin cutters
        board = build_tails_board(example_params)
        t, w = dims.stock_thickness, dims.stock_width
        tails = dims.tooth_count * (dims.tail_width_narrow + dims.tail_width_wide) / 2 * t * t
        expected = board.volume - (w * t * t - tails)
        assert board.shape.volume == pytest.approx(expected, rel=1e-6)

    def test_each_board_is_one_solid(self, example_params):
        assert len(build_pins_board(example_params).shape.solids()) == 1
        assert len(build_tails_board(example_params).shape.solids()) == 1


class TestCutterArrays:
    def test_tail_array_has_a_cutter_per_tail(self, dims):
        cutters = tail_cutter_array(dims, place_tails(dims))
        assert len(cutters.solids()) == dims.tooth_count

    def test_pin_array_has_a_cutter_per_pin(self, dims):
        cutters = pin_cutter_array(dims, place_pins(dims))
        assert len(cutters.solids()) == dims.tooth_count + 1

    def test_mirror_round_trip(self, dims):
        kernel = Build123dKernel()
        placements = place_pins(dims)
        plain = pin_cutter_array(dims, placements, mirrored=False)
        mirrored = pin_cutter_array(dims, placements, mirrored=True)
        restored = kernel.mirror(mirrored, dims.stock_thickness / 2)

        assert (plain - restored).volume == pytest.approx(0, abs=1e-3)
        assert (restored - plain).volume == pytest.approx(0, abs=1e-3)
        assert restored.volume == pytest.approx(plain.volume)

    def test_mirror_actually_flips(self, dims):
        placements = place_pins(dims)
        plain = pin_cutter_array(dims, placements, mirrored=False)
        mirrored = pin_cutter_array(dims, placements, mirrored=True)
        assert (plain - mirrored).volume > 1.0

    def test_mirrored_pins_flare_toward_far_face(self, dims, material_at):
        mirrored = pin_cutter_array(dims, place_pins(dims), mirrored=True)
        t = dims.stock_thickness
        # Just right of the first pin's narrow end (which spans [0, narrow])
        x = dims.pin_width_narrow + dims.overlap_width / 2
        assert material_at(mirrored, x, t / 2, t - 0.5)
        assert not material_at(mirrored, x, t / 2, 0.5)

    def test_unmirrored_pins_flare_toward_near_face(self, dims, material_at):
        plain = pin_cutter_array(dims, place_pins(dims), mirrored=False)
        t = dims.stock_thickness
        x = dims.pin_width_narrow + dims.overlap_width / 2
        assert material_at(plain, x, t / 2, 0.5)
        assert not material_at(plain, x, t / 2, t - 0.5)


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"tooth_count": 3, "narrow_pin_width": 6.0, "cut_angle": 80.0},
        {"tooth_count": 1},
    ],
    ids=["default", "three-tails", "single-tail"],
)
class TestComplementarity:
    def test_no_interference(self, overrides):
        _, pins, tails = create_assembled_joint(**overrides)
        assert (pins & tails).volume == pytest.approx(0, abs=1e-3)

    def test_no_gap(self, overrides):
        params, pins, tails = create_assembled_joint(**overrides)
        t, w = params.stock_thickness, params.stock_width
        region = Box(w, t, t, align=(Align.MIN, Align.MIN, Align.MIN))
        filled = (pins & region).volume + (tails & region).volume
        assert filled == pytest.approx(w * t * t, rel=1e-6)

    def test_boards_meet_at_right_angles(self, overrides):
        params, pins, tails = create_assembled_joint(**overrides)
        bbox = tails.bounding_box()
        assert bbox.min.Y == pytest.approx(0, abs=1e-4)
        assert bbox.max.Y == pytest.approx(params.stock_thickness, abs=1e-4)
        assert bbox.max.Z == pytest.approx(params.stock_length, abs=1e-4)


class TestApartLayout:
    def test_boards_do_not_touch(self, example_params):
        pins, tails = DovetailJoint(example_params).apply()
        pins_box = pins.global_shape.bounding_box()
        tails_box = tails.global_shape.bounding_box()
        assert tails_box.min.X - pins_box.max.X == pytest.approx(3 * 25.4, abs=1e-3)

    def test_layout_does_not_change_cuts(self, example_params):
        apart = build_tails_board(example_params)
        assembled = build_tails_board(example_params.replace(board_layout=BoardLayout.ASSEMBLED))
        assert apart.shape.volume == pytest.approx(assembled.shape.volume)
        assert apart.location != assembled.location
