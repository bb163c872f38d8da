from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """
    Inclusive bounding rectangle in storage coordinates (col, row), 0-based.
    """
    xmin: int
    xmax: int
    ymin: int
    ymax: int

    @property
    def width(self) -> int:
        return self.xmax - self.xmin + 1

    @property
    def height(self) -> int:
        return self.ymax - self.ymin + 1

    def contains(self, x: int, y: int) -> bool:
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax
