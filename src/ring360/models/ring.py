from __future__ import annotations
import math
from typing import ClassVar, Tuple, Union
from pydantic import BaseModel, ConfigDict, computed_field

BASE = 360.0
HALF_TURN = 180.0
NEG_HALF_TURN = -180.0

Number = Union[int, float]


def reverse_mod(value: float, base: float = BASE) -> float:
    """
    Modulo that always lands in [0, base).
    Truncating remainder first, then shifted up by one base when negative.
    Non-finite input yields NaN.
    """
    if not math.isfinite(value):
        return math.nan
    mod = math.fmod(value, base)
    if mod < 0:
        mod += base
    # fmod(-360, 360) is -0.0
    if mod == 0:
        return 0.0
    # -1e-20 + 360.0 rounds up to 360.0; stay below base so the turn is still counted
    if mod >= base:
        return math.nextafter(base, 0.0)
    return mod


def _ieee_div(num: float, divisor: float) -> float:
    if divisor != 0:
        return num / divisor
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, divisor)


class Ring360(BaseModel):
    """
    Angular position on a 360° circle backed by an unrestricted float.

    ``raw`` keeps the total angular travel; ``degrees`` and ``rotations`` are
    derived from it so that ``raw == degrees + rotations * 360``.
    Only ints and floats are accepted (no string parsing) and extra keywords
    are rejected. NaN/inf are not rejected: they propagate NaN through
    ``degrees`` and make ``rotations`` raise ValueError. Use
    ``ring360.convert.require_finite`` first if you need strict input checks.
    """
    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    BASE: ClassVar[float] = BASE
    HALF_TURN: ClassVar[float] = HALF_TURN
    NEG_HALF_TURN: ClassVar[float] = NEG_HALF_TURN

    raw: float = 0.0

    def __init__(self, raw: Number = 0.0, **data):
        super().__init__(raw=raw, **data)

    @classmethod
    def from_gis(cls, lon: Number) -> "Ring360":
        """
        Build from a ±180° value (e.g. longitude).
        Rotations are counted from the normalized degrees, not the input,
        so -60 gives 300° with 0 rotations (plain construction gives -1).
        """
        return cls(reverse_mod(lon))

    # -----------------------------
    # Derived values
    # -----------------------------

    @computed_field
    @property
    def degrees(self) -> float:
        return reverse_mod(self.raw)

    @computed_field
    @property
    def rotations(self) -> int:
        return int(round((self.raw - self.degrees) / BASE))

    @computed_field
    @property
    def progress(self) -> float:
        return self.raw / BASE

    def value(self) -> float:
        return self.raw

    def as_tuple(self) -> Tuple[float, int]:
        """(degrees, rotations)"""
        return self.degrees, self.rotations

    def to_gis(self) -> float:
        """Degrees remapped to (-180, 180]; 180 stays positive."""
        deg = self.degrees
        return deg - BASE if deg > HALF_TURN else deg

    def to_radians(self) -> float:
        return self.degrees * math.pi / HALF_TURN

    # -----------------------------
    # Arithmetic
    # -----------------------------

    def add(self, other: "Ring360") -> "Ring360":
        return Ring360(self.raw + other.raw)

    def subtract(self, other: "Ring360") -> "Ring360":
        return Ring360(self.raw - other.raw)

    def multiply(self, multiple: Number) -> "Ring360":
        return Ring360(self.raw * multiple)

    def divide(self, divisor: Number) -> "Ring360":
        """Scalar division; a zero divisor gives inf/NaN rather than raising."""
        return Ring360(_ieee_div(self.raw, divisor))

    def __add__(self, other):
        if not isinstance(other, Ring360):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Ring360):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return self.divide(other)

    # -----------------------------
    # Circular distance
    # -----------------------------

    def angle(self, other: "Ring360 | Number") -> float:
        """
        Shortest signed displacement from self to other, in (-180, 180].
        Positive means clockwise (increasing degrees). Exactly opposite
        positions give +180.
        """
        delta = self.angle_abs(other)
        return delta - BASE if delta > HALF_TURN else delta

    def angle_abs(self, other: "Ring360 | Number") -> float:
        """
        Clockwise-only reading from self to other, in [0, 360).
        Not symmetric: a.angle_abs(b) + b.angle_abs(a) == 360 unless they coincide.
        """
        return reverse_mod(_as_ring(other).degrees - self.degrees)

    # -----------------------------
    # Trigonometry
    # -----------------------------

    def sin(self) -> float:
        return math.sin(self.to_radians())

    def cos(self) -> float:
        return math.cos(self.to_radians())

    def tan(self) -> float:
        return math.tan(self.to_radians())

    @staticmethod
    def asin(ratio: Number) -> float:
        """Degrees in [-90, 90]. Follows `math`: a ratio outside [-1, 1] raises ValueError."""
        return math.asin(ratio) * HALF_TURN / math.pi

    @staticmethod
    def acos(ratio: Number) -> float:
        """Degrees in [0, 180]. Raises ValueError outside [-1, 1], unlike divide's inf/NaN."""
        return math.acos(ratio) * HALF_TURN / math.pi

    @staticmethod
    def atan(ratio: Number) -> float:
        return math.atan(ratio) * HALF_TURN / math.pi

    def __float__(self) -> float:
        return self.degrees

    def __str__(self) -> str:
        return str(self.degrees)

    def __repr__(self) -> str:
        return f"Ring360({self.raw!r})"


def _as_ring(v: "Ring360 | Number") -> Ring360:
    return v if isinstance(v, Ring360) else Ring360(v)
