from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class BoundingBox:
    """
    Rectangle en pixels, origine en haut à gauche de l'image source.
    """
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"INVALID_BOX_SIZE: {self.width}x{self.height}")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"INVALID_BOX_ORIGIN: ({self.x},{self.y})")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def clip(self, width: int, height: int) -> Optional["BoundingBox"]:
        """Intersection avec l'image (width x height). None si vide."""
        right = min(self.right, width)
        bottom = min(self.bottom, height)
        if right <= self.x or bottom <= self.y:
            return None
        return BoundingBox(x=self.x, y=self.y, width=right - self.x, height=bottom - self.y)

    def as_crop_box(self) -> Tuple[int, int, int, int]:
        # (left, upper, right, lower) au sens Pillow
        return (self.x, self.y, self.right, self.bottom)


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2
