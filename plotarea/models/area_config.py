from __future__ import annotations
from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from .thresholds import ClassThresholds

# Load environment variables
load_dotenv()


@dataclass(frozen=True)
class AreaConfig:
    """
    Per-invocation pipeline settings.

    slack : padding (pixels) added around the region-marker bounding box.
    jump  : row stride for the scanline pass (1 = every row).
    check_simple : run the O(n^2) self-intersection check on the boundary polygon.
    """
    slack: int = 5
    jump: int = 1
    thresholds: ClassThresholds = field(default_factory=ClassThresholds)
    check_simple: bool = False

    def __post_init__(self):
        if self.slack < 0:
            raise ValueError(f"slack must be >= 0, got {self.slack}")
        if self.jump < 1:
            raise ValueError(f"jump must be >= 1, got {self.jump}")

    @classmethod
    def from_env(
        cls,
        slack: int | None = None,
        jump: int | None = None,
        thresholds: ClassThresholds | None = None,
        check_simple: bool | None = None,
    ) -> "AreaConfig":
        if check_simple is None:
            check_simple = os.getenv("AREA_CHECK_SIMPLE", "false").lower() in ("1", "true", "yes")
        return cls(
            slack=slack if slack is not None else int(os.getenv("AREA_SLACK", "5")),
            jump=jump if jump is not None else int(os.getenv("AREA_JUMP", "1")),
            thresholds=thresholds or ClassThresholds.from_env(),
            check_simple=check_simple,
        )
