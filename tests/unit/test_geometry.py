"""Unit tests for layout geometry helpers."""

from dataclasses import dataclass

import pytest

from kitchens.domain.geometry import (
    calculate_bounding_box,
    position_along_line,
    room_center,
    rotation_for_direction,
)
from kitchens.domain.value_objects import Dimensions, Direction, Position, Rotation


@dataclass(frozen=True)
class _Box:
    position: Position
    dimensions: Dimensions


class TestRotationForDirection:
    """Tests for the two recognised line directions and the fallback."""

    def test_positive_x_faces_forward(self) -> None:
        assert rotation_for_direction(Direction(x=1, z=0)) == Rotation(0, 0, 0)

    def test_negative_z_turns_ninety_degrees(self) -> None:
        assert rotation_for_direction(Direction(x=0, z=-1)) == Rotation(0, 90, 0)

    @pytest.mark.parametrize("x,z", [(-1, 0), (0, 1), (0.5, 0.5)])
    def test_other_directions_fall_back_to_no_rotation(self, x: float, z: float) -> None:
        # Known limitation: only two directions get a dedicated rotation
        assert rotation_for_direction(Direction(x=x, z=z)) == Rotation(0, 0, 0)


class TestPositionAlongLine:
    """Tests for projecting line distances onto an axis."""

    def test_positive_x(self) -> None:
        assert position_along_line(Direction(x=1, z=0), 150.0) == Position(150.0, 0.0, 0.0)

    def test_negative_x(self) -> None:
        assert position_along_line(Direction(x=-1, z=0), 150.0) == Position(-150.0, 0.0, 0.0)

    def test_negative_z(self) -> None:
        assert position_along_line(Direction(x=0, z=-1), 50.0) == Position(0.0, 0.0, -50.0)


class TestCalculateBoundingBox:
    """Tests for calculate_bounding_box."""

    def test_empty_input_gives_zero_box(self) -> None:
        box = calculate_bounding_box([])
        origin = Position(0.0, 0.0, 0.0)
        assert box.min == origin
        assert box.max == origin

    def test_extends_half_dimensions_on_every_axis(self) -> None:
        modules = [
            _Box(Position(30.0, 45.0, 0.0), Dimensions(60.0, 90.0, 60.0)),
            _Box(Position(100.0, 140.0, 0.0), Dimensions(80.0, 70.0, 35.0)),
        ]
        box = calculate_bounding_box(modules)

        assert box.min == Position(0.0, 0.0, -30.0)
        assert box.max == Position(140.0, 175.0, 30.0)

    def test_accepts_generators(self) -> None:
        modules = (_Box(Position(0.0, 0.0, 0.0), Dimensions(2.0, 2.0, 2.0)) for _ in range(3))
        box = calculate_bounding_box(modules)
        assert box.width == 2.0


class TestRoomCenter:
    """Tests for room_center."""

    def test_uses_room_sides(self) -> None:
        assert room_center(360.0, 240.0, 220.0) == Position(180.0, 110.0, -120.0)

    def test_missing_sides_use_defaults(self) -> None:
        assert room_center(None, None, 220.0) == Position(150.0, 110.0, -100.0)
