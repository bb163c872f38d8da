from __future__ import annotations
from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass(frozen=True)
class ChannelRange:
    """Open interval (low, high) on one channel, intensities in [0, 1]."""
    low: float = 0.0
    high: float = 1.0

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"Empty channel range: ({self.low}, {self.high})")


# The full [0, 1] range must stay admissible under a strict inequality.
_ANY = ChannelRange(-1.0, 2.0)


@dataclass(frozen=True)
class ColorClass:
    """One pixel class as three independent per-channel ranges."""
    r: ChannelRange = _ANY
    g: ChannelRange = _ANY
    b: ChannelRange = _ANY


def _default_marker() -> ColorClass:
    # green: g > 0.9, r < 0.1, b < 0.1
    return ColorClass(r=ChannelRange(-1.0, 0.1), g=ChannelRange(0.9, 2.0), b=ChannelRange(-1.0, 0.1))


def _default_boundary() -> ColorClass:
    # red: r > 0.95, g < 0.05, b < 0.05
    return ColorClass(r=ChannelRange(0.95, 2.0), g=ChannelRange(-1.0, 0.05), b=ChannelRange(-1.0, 0.05))


def _default_interior() -> ColorClass:
    # grey: 0.80 < r, g, b < 0.95
    grey = ChannelRange(0.80, 0.95)
    return ColorClass(r=grey, g=grey, b=grey)


@dataclass(frozen=True)
class ClassThresholds:
    """
    Value-object holding the channel rules for the three pixel classes:
    region marker (green), boundary (red) and interior (grey).
    """
    region_marker: ColorClass = field(default_factory=_default_marker)
    boundary: ColorClass = field(default_factory=_default_boundary)
    interior: ColorClass = field(default_factory=_default_interior)

    @classmethod
    def from_scalars(
        cls,
        marker_g_min: float = 0.9,
        marker_rb_max: float = 0.1,
        boundary_r_min: float = 0.95,
        boundary_gb_max: float = 0.05,
        interior_min: float = 0.80,
        interior_max: float = 0.95,
    ) -> "ClassThresholds":
        """Build thresholds from the six scalar bounds of the default rules."""
        lo, hi = -1.0, 2.0
        grey = ChannelRange(interior_min, interior_max)
        return cls(
            region_marker=ColorClass(
                r=ChannelRange(lo, marker_rb_max),
                g=ChannelRange(marker_g_min, hi),
                b=ChannelRange(lo, marker_rb_max),
            ),
            boundary=ColorClass(
                r=ChannelRange(boundary_r_min, hi),
                g=ChannelRange(lo, boundary_gb_max),
                b=ChannelRange(lo, boundary_gb_max),
            ),
            interior=ColorClass(r=grey, g=grey, b=grey),
        )

    @classmethod
    def from_env(cls, **overrides: float | None) -> "ClassThresholds":
        """
        Read the six scalar bounds from the environment; keyword overrides
        that are not None win over the environment.
        """
        values = {
            "marker_g_min": float(os.getenv("MARKER_G_MIN", "0.9")),
            "marker_rb_max": float(os.getenv("MARKER_RB_MAX", "0.1")),
            "boundary_r_min": float(os.getenv("BOUNDARY_R_MIN", "0.95")),
            "boundary_gb_max": float(os.getenv("BOUNDARY_GB_MAX", "0.05")),
            "interior_min": float(os.getenv("INTERIOR_MIN", "0.80")),
            "interior_max": float(os.getenv("INTERIOR_MAX", "0.95")),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_scalars(**values)
