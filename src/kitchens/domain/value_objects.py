"""Core geometry and layout value objects for the kitchen domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MismatchPolicy(str, Enum):
    """Strategy for a layout line whose modules overflow its length."""

    WARN = "warn"
    ERROR = "error"
    AUTO_FIX = "auto_fix"


class Anchor(str, Enum):
    """Vertical anchoring of a module."""

    FLOOR = "floor"
    COUNTERTOP = "countertop"
    FLOOR_AND_CEILING = "floor-and-ceiling"


class HandlePlacementType(str, Enum):
    """How handles are distributed over a module front."""

    CENTERED = "centered"
    PER_DRAWER = "per-drawer"


class HandleOrientation(str, Enum):
    """Orientation of a handle bar."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class HandleSourceType(str, Enum):
    """Where the handle geometry comes from."""

    STATIC_MODEL = "static_model"
    PROCEDURAL = "procedural"


class MaterialSlot(str, Enum):
    """Material slots resolved for every module.

    The value is the slot name used in overrides and defaults, and
    ``library_key`` names the matching dictionary of the material library.
    """

    FACADE = "facade"
    COUNTERTOP = "countertop"
    HANDLE = "handle"

    @property
    def library_key(self) -> str:
        return {
            MaterialSlot.FACADE: "facades",
            MaterialSlot.COUNTERTOP: "countertops",
            MaterialSlot.HANDLE: "handles",
        }[self]


class Axis(str, Enum):
    """Planar placement axis of a layout line."""

    X = "x"
    Z = "z"


@dataclass(frozen=True)
class FixedWidth:
    """An explicit module width."""

    value: float

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Module width must be positive")

    @property
    def is_auto(self) -> bool:
        return False


@dataclass(frozen=True)
class AutoWidth:
    """A width left to the layout engine: an even share of the free space."""

    @property
    def is_auto(self) -> bool:
        return True


AUTO = AutoWidth()

ModuleWidth = FixedWidth | AutoWidth


@dataclass(frozen=True)
class Position:
    """Absolute position in layout space.

    Unlike cabinet-internal coordinates, negative values are valid here:
    lines running along -Z place modules at negative z.
    """

    x: float
    y: float
    z: float

    def translated(self, dx: float, dy: float, dz: float) -> "Position":
        """Return a copy moved by the given deltas."""
        return Position(x=self.x + dx, y=self.y + dy, z=self.z + dz)


@dataclass(frozen=True)
class Rotation:
    """Euler rotation in degrees."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Dimensions:
    """Immutable module dimensions."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")


@dataclass(frozen=True)
class Direction:
    """Direction of a layout line in the XZ plane."""

    x: float
    z: float

    @property
    def axis(self) -> Axis:
        """Placement axis: X when the line runs along x, Z otherwise."""
        return Axis.X if abs(self.x) == 1 else Axis.Z

    @property
    def sign(self) -> int:
        """Sign of travel along the placement axis."""
        component = self.x if self.axis is Axis.X else self.z
        return -1 if component < 0 else 1


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box enclosing a set of modules."""

    min: Position
    max: Position

    @property
    def center(self) -> Position:
        return Position(
            x=(self.min.x + self.max.x) / 2,
            y=(self.min.y + self.max.y) / 2,
            z=(self.min.z + self.max.z) / 2,
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def depth(self) -> float:
        return self.max.z - self.min.z
