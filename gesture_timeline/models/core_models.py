"""Core value models shared across the timeline and the entity components."""

import colorsys

from pydantic import BaseModel, Field


class Position(BaseModel):
    """A point or offset in 2D space.

    Used both as an entity's location and as the per-tick offset recorded
    by the Translate tool.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """

    x: float = Field(0.0, description="Horizontal component")
    y: float = Field(0.0, description="Vertical component")

    def __add__(self, other: "Position") -> "Position":
        return Position(x=self.x + other.x, y=self.y + other.y)


class Color(BaseModel):
    """Display color as normalized RGBA floats.

    Attributes:
        r: Red channel (0.0-1.0).
        g: Green channel (0.0-1.0).
        b: Blue channel (0.0-1.0).
        a: Alpha channel (0.0-1.0, default opaque).
    """

    r: float = Field(1.0, ge=0.0, le=1.0, description="Red channel")
    g: float = Field(1.0, ge=0.0, le=1.0, description="Green channel")
    b: float = Field(1.0, ge=0.0, le=1.0, description="Blue channel")
    a: float = Field(1.0, ge=0.0, le=1.0, description="Alpha channel")

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> "Color":
        """Build a color from hue, saturation and value.

        Args:
            h: Hue in [0, 1].
            s: Saturation in [0, 1].
            v: Value in [0, 1].
            a: Alpha in [0, 1].

        Returns:
            The equivalent RGBA color.
        """
        r, g, b = colorsys.hsv_to_rgb(h, s, v)
        return cls(r=r, g=g, b=b, a=a)
