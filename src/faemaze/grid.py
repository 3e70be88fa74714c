from dataclasses import dataclass
from typing import Iterator, List, Tuple

Coord = Tuple[int, int]

@dataclass
class Grid:
    width: int
    height: int
    buf: List[str]

    @classmethod
    def filled(cls, width: int, height: int, tile: str) -> "Grid":
        return cls(width=width, height=height, buf=[tile] * (width * height))

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> str:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: str) -> None:
        self.buf[self.idx(x, y)] = v

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def border(self) -> Iterator[Coord]:
        """
        Yield every border coordinate exactly once, row-major
        (top row, side columns, bottom row).
        """
        for y in range(self.height):
            if y == 0 or y == self.height - 1:
                for x in range(self.width):
                    yield (x, y)
            else:
                yield (0, y)
                yield (self.width - 1, y)

    def rows(self) -> List[str]:
        w = self.width
        return ["".join(self.buf[y * w:(y + 1) * w]) for y in range(self.height)]

    def as_matrix(self) -> List[List[str]]:
        out = []
        for y in range(self.height):
            row = [self.get(x, y) for x in range(self.width)]
            out.append(row)
        return out

    def coords_of(self, tile: str) -> List[Coord]:
        w = self.width
        return [(i % w, i // w) for i, v in enumerate(self.buf) if v == tile]
