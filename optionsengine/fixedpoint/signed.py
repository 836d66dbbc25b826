"""Signed fixed-point value model."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class SignedFixedPoint(BaseModel):
    """A fixed-point magnitude with an explicit sign flag.

    Zero is always non-negative: constructing ``negative=True`` with a zero
    magnitude yields ``negative=False``.
    """

    magnitude: int = Field(default=0, ge=0, description="Absolute value scaled by 1e18")
    negative: bool = Field(default=False, description="True when the value is below zero")

    model_config = {"frozen": True}

    @field_validator("negative")
    @classmethod
    def normalize_zero(cls, negative: bool, info: ValidationInfo) -> bool:
        if info.data.get("magnitude") == 0:
            return False
        return negative

    @classmethod
    def from_int(cls, value: int) -> "SignedFixedPoint":
        """Build from a plain signed integer already scaled by 1e18."""
        return cls(magnitude=abs(value), negative=value < 0)

    @property
    def value(self) -> int:
        """Signed integer view of this value."""
        return -self.magnitude if self.negative else self.magnitude

    def __neg__(self) -> "SignedFixedPoint":
        return SignedFixedPoint(magnitude=self.magnitude, negative=not self.negative)

    def __add__(self, other: "SignedFixedPoint") -> "SignedFixedPoint":
        if not isinstance(other, SignedFixedPoint):
            return NotImplemented
        if self.negative == other.negative:
            return SignedFixedPoint(
                magnitude=self.magnitude + other.magnitude, negative=self.negative
            )
        # Signs differ: the larger magnitude wins the sign.
        if self.magnitude >= other.magnitude:
            return SignedFixedPoint(
                magnitude=self.magnitude - other.magnitude, negative=self.negative
            )
        return SignedFixedPoint(
            magnitude=other.magnitude - self.magnitude, negative=other.negative
        )

    def __sub__(self, other: "SignedFixedPoint") -> "SignedFixedPoint":
        if not isinstance(other, SignedFixedPoint):
            return NotImplemented
        return self + (-other)

    def __lt__(self, other: "SignedFixedPoint") -> bool:
        if not isinstance(other, SignedFixedPoint):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "SignedFixedPoint") -> bool:
        if not isinstance(other, SignedFixedPoint):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: "SignedFixedPoint") -> bool:
        if not isinstance(other, SignedFixedPoint):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: "SignedFixedPoint") -> bool:
        if not isinstance(other, SignedFixedPoint):
            return NotImplemented
        return self.value >= other.value


ZERO = SignedFixedPoint()
